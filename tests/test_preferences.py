import json
from dataclasses import replace

from decypharr.preferences import AppPreferences, default_app_preferences


def test_defaults_fixed_by_source():
    prefs = default_app_preferences()
    assert prefs.listen_port == 31193
    assert prefs.dyndns_domain == "changeme.dyndns.org"
    assert prefs.mail_notification_sender == "qBittorrentNotification@example.com"
    assert prefs.mail_notification_smtp == "smtp.changeme.com"
    assert prefs.proxy_ip == "0.0.0.0"
    assert prefs.web_ui_ban_duration == 3600
    assert prefs.alt_dl_limit == 10240
    assert prefs.disk_cache == -1


def test_to_dict_uses_banned_ips_json_key():
    data = default_app_preferences().to_dict()
    assert "banned_IPs" in data
    assert "banned_ips" not in data
    assert data["banned_IPs"] == ""


def test_to_dict_key_order_follows_declaration():
    keys = list(default_app_preferences().to_dict())
    assert keys[0] == "add_trackers"
    assert keys[-1] == "web_ui_use_custom_http_headers_enabled"
    assert keys.index("save_path") < keys.index("scan_dirs") < keys.index("temp_path")


def test_scan_dirs_serialises_as_empty_object():
    data = default_app_preferences().to_dict()
    assert data["scan_dirs"] == {}
    assert '"scan_dirs": {}' in json.dumps(data)


def test_to_dict_reflects_changes():
    prefs = replace(
        default_app_preferences(),
        web_ui_username="admin",
        save_path="/downloads",
        temp_path="/downloads/temp",
    )
    data = prefs.to_dict()
    assert data["web_ui_username"] == "admin"
    assert data["save_path"] == "/downloads"
    assert data["temp_path"] == "/downloads/temp"


def test_instances_do_not_share_scan_dirs():
    first = default_app_preferences()
    second = default_app_preferences()
    first.scan_dirs["x"] = 1
    assert second.scan_dirs == {}
    assert second.to_dict()["scan_dirs"] == {}


def test_to_dict_copies_scan_dirs():
    prefs = AppPreferences()
    data = prefs.to_dict()
    data["scan_dirs"]["y"] = 2
    assert prefs.scan_dirs == {}


def test_json_round_trip_keeps_values():
    data = default_app_preferences().to_dict()
    restored = json.loads(json.dumps(data))
    assert restored == data


def test_all_values_are_plain_json_types():
    data = default_app_preferences().to_dict()
    assert all(isinstance(v, (bool, int, str, dict)) for v in data.values())
    assert data["dht"] is True
    assert data["use_https"] is False
    assert data["web_ui_address"] == "*"
    assert data["web_ui_domain_list"] == "*"


def test_defaults_equal_between_calls():
    assert default_app_preferences() == AppPreferences()
    assert default_app_preferences().to_dict() == AppPreferences().to_dict()