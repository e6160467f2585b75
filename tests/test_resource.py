import plistlib

from plistrw import resource


def test_read_yaml_resource() -> None:
    conf = resource.read("configuration.yaml")
    assert conf["MODULE"]["name"] == "plistrw"


def test_path_finds_bundled_file() -> None:
    found = resource.path("settings.plist", "testbundle")
    assert found is not None
    assert plistlib.loads(found.read_bytes())["theme"] == "dark"


def test_path_missing_resource_or_package() -> None:
    assert resource.path("nope.plist", "testbundle") is None
    assert resource.path("settings.plist", "no_such_bundle") is None


def test_read_bytes() -> None:
    assert resource.read_bytes("app.plist", "testbundle").startswith(b"<?xml")
    assert resource.read_bytes("nope.plist", "testbundle") is None
