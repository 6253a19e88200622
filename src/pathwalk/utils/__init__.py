"""Utility modules for pathwalk."""

from .encodings import as_buffer_text, as_text, coerce_paths, fold_case, restore

__all__ = ["as_buffer_text", "as_text", "coerce_paths", "fold_case", "restore"]
