import pytest

from plistrw import store


@pytest.fixture(autouse=True)
def documents(monkeypatch, tmp_path):
    """Point the documents directory at a temporary directory and the bundle at `testbundle`."""
    docs = tmp_path / "Documents"
    docs.mkdir()
    monkeypatch.setattr(store, "_documents_dir", docs)
    monkeypatch.setattr(store, "BUNDLE_PACKAGE", "testbundle")
    return docs
