import base64

import pytest

from decypharr.qbit_auth import (
    ArrCredentials,
    decode_auth_header,
    resolve_arr,
    split_hashes,
    validate_service_url,
)


def _basic(host, token_value):
    encoded = base64.b64encode(f"{host}:{token_value}".encode()).decode()
    return "Basic " + encoded


@pytest.mark.parametrize(
    "url",
    [
        "http://localhost:8989",
        "https://sonarr.example.com",
        "localhost:8989",
        "192.168.1.10:7878",
    ],
)
def test_validate_service_url_accepts(url):
    assert validate_service_url(url) is None


@pytest.mark.parametrize(
    "url, message",
    [
        ("", "URL cannot be empty"),
        ("ftp://files.example.com", "URL scheme must be http or https"),
        ("localhost:", "port is required in host:port format"),
        ("justahost", "invalid URL format: justahost"),
        ("http://", "invalid URL format: http://"),
    ],
)
def test_validate_service_url_rejects(url, message):
    with pytest.raises(ValueError) as info:
        validate_service_url(url)
    assert str(info.value) == message


def test_validate_service_url_rejects_bad_port():
    with pytest.raises(ValueError, match="invalid host:port format"):
        validate_service_url("localhost:notaport")


def test_decode_auth_header_splits_on_last_colon():
    host, token_value = decode_auth_header(_basic("http://localhost:8989", "token"))
    assert host == "http://localhost:8989"
    assert token_value == "token"


@pytest.mark.parametrize("header", ["", "Basic", "a b c"])
def test_decode_auth_header_wrong_word_count(header):
    assert decode_auth_header(header) == ("", "")


def test_decode_auth_header_invalid_base64():
    with pytest.raises(ValueError):
        decode_auth_header("Basic !!!notbase64")


def test_decode_auth_header_without_colon():
    encoded = base64.b64encode(b"nocolon").decode()
    with pytest.raises(ValueError):
        decode_auth_header("Basic " + encoded)


def test_split_hashes_string():
    assert split_hashes(" abc | def|ghi ") == ["abc", "def", "ghi"]


def test_split_hashes_list_and_empty():
    assert split_hashes([" a ", "b"]) == ["a", "b"]
    assert split_hashes("") == []
    assert split_hashes(None) == []


def test_resolve_arr_creates_and_stores_new_arr():
    arrs = {}
    arr = resolve_arr(arrs, "sonarr", _basic("http://localhost:8989", "token"))
    assert arr == ArrCredentials(
        name="sonarr", host="http://localhost:8989", token="token", source="auto"
    )
    assert arrs["sonarr"] is arr


def test_resolve_arr_invalid_host_not_added():
    arrs = {}
    assert resolve_arr(arrs, "radarr", "") is None
    assert arrs == {}


def test_resolve_arr_updates_existing_arr():
    existing = ArrCredentials(name="radarr", host="http://old:7878", token="secret")
    arrs = {"radarr": existing}
    arr = resolve_arr(arrs, "radarr", _basic("http://new:7878", "token"))
    assert arr is existing
    assert existing.host == "http://new:7878"
    assert existing.token == "token"
    assert existing.source == "auto"


def test_resolve_arr_keeps_existing_when_header_undecodable():
    existing = ArrCredentials(name="lidarr", host="localhost:8686", token="token")
    arrs = {"lidarr": existing}
    arr = resolve_arr(arrs, "lidarr", "Basic !!!")
    assert arr is existing
    assert arr.host == "localhost:8686"
    assert arr.token == "token"