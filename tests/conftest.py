import pytest

from pathwalk import PathStyle


@pytest.fixture(params=[PathStyle.WINDOWS, PathStyle.UNIX], ids=["windows", "unix"])
def style(request):
    """Run a test once per supported path style."""
    return request.param


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any pathwalk settings."""
    monkeypatch.delenv("PATHWALK_STYLE", raising=False)
    monkeypatch.delenv("PATHWALK_DEBUG", raising=False)
    return monkeypatch
