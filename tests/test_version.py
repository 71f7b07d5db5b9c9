from decypharr import version
from decypharr.version import Info, get_info


def test_info_str_joins_with_dash():
    assert str(Info("1.2.3", "stable")) == "1.2.3-stable"


def test_get_info_reflects_module_values(monkeypatch):
    monkeypatch.setattr(version, "VERSION", "2.0.0")
    monkeypatch.setattr(version, "CHANNEL", "beta")
    assert get_info() == Info("2.0.0", "beta")


def test_get_info_default_is_empty():
    info = get_info()
    assert (info.version, info.channel) == (version.VERSION, version.CHANNEL)