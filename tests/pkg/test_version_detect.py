import methodacl as mmod


def test_version_detect_ok(monkeypatch):
    class DummyExc(Exception):
        pass

    monkeypatch.setattr(mmod, "PackageNotFoundError", DummyExc, raising=False)
    calls = {}

    def fake_version(name):
        calls["name"] = name
        return "9.9.9"

    monkeypatch.setattr(mmod, "version", fake_version, raising=False)
    assert mmod._detect_version() == "9.9.9"
    assert calls["name"] == "methodacl"


def test_version_detect_fallback(monkeypatch):
    monkeypatch.setattr(mmod, "version", None, raising=False)
    assert mmod._detect_version() == "0.1.0"


def test_version_detect_not_installed(monkeypatch):
    class DummyExc(Exception):
        pass

    def raising(name):
        raise DummyExc("nope")

    monkeypatch.setattr(mmod, "PackageNotFoundError", DummyExc, raising=False)
    monkeypatch.setattr(mmod, "version", raising, raising=False)
    assert mmod._detect_version() == "0.1.0"
