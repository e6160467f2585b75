import plistrw

from plistrw import configuration, osinfo


def test_load_configuration() -> None:
    conf = configuration.load()
    assert conf["PLIST"]["extension"] == "plist"
    assert conf["PLIST"]["format"] in ("xml", "binary")
    assert conf["BUNDLE"]["package"] == "plistrw.resources"


def test_module_constants() -> None:
    assert plistrw.NAME == "plistrw"
    assert plistrw.PLIST_EXTENSION == "plist"
    assert plistrw.DOCUMENTS_DIR == plistrw.CONF["DOCUMENTS"]["path"]
    assert plistrw.VERSION_STRING.startswith("plistrw ")


def test_python_compatible() -> None:
    assert osinfo.python_compatible()
    assert not osinfo.python_compatible("99.0")


def test_python_ver() -> None:
    assert osinfo.python_ver().startswith("Python ")
