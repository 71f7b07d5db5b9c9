# decypharr

Building blocks for a download client that speaks the qBittorrent Web API
to Sonarr/Radarr-style "arr" applications and hands torrents to a debrid
service. The package holds the data shapes of that API, helpers for
identifying the arr behind a request, random access to remote files over
HTTP range requests, and checks for broken symlinked media.

## Modules

- `decypharr.models`: `Torrent` and `TorrentFile` dataclasses in
  qBittorrent's JSON shape. `to_dict()` leaves out empty fields the API
  omits, `from_dict()` builds them back, `Torrent.is_ready()` is true once
  nothing is left to fetch and `torrent_path` is set, and
  `Torrent.discord_context()` formats a short notification text.
- `decypharr.preferences`: `AppPreferences`, the application preferences
  payload with the values the client reports; `default_app_preferences()`
  returns a fresh copy and `to_dict()` gives the JSON object (the
  `banned_ips` attribute is written as `banned_IPs`).
- `decypharr.qbit_types`: `BuildInfo` (with `build_info()` returning the
  reported library versions), `TorrentCategory` (`savePath` in JSON) and
  `TorrentProperties`, whose `to_dict()` leaves out zero values.
- `decypharr.qbit_auth`: `ArrCredentials`, plus
  - `validate_service_url(url)` raises `ValueError` unless the value is an
    `http`/`https` URL or a `host:port` pair;
  - `decode_auth_header(header)` splits a `Basic`-style value whose base64
    payload is `host:token` at the last colon;
  - `split_hashes(value)` trims hashes from a `|`-separated string or a list;
  - `resolve_arr(arrs, category, authorization)` finds or creates the arr
    for a category, fills in host and token from the header, and stores and
    returns it only when its host is a valid service URL.
- `decypharr.rar_http`: `HttpFile`, a remote file read in byte ranges.
  Its size comes from a HEAD request; `read_at(size, offset)` returns the
  bytes (an empty result means end of file) and copes with servers that
  answer 200 with the full body or 416. `NetworkError` failures are retried
  with exponential backoff and jitter, `max_retries` times.
- `decypharr.repair_files`: `ContentFile`, `file_is_symlinked`,
  `get_symlink_target`, `file_is_readable`, `collect_files` (groups
  symlinked files by the directory of their target) and `find_broken_files`
  (symlinked files whose first bytes cannot be read).
- `decypharr.version`: `get_info()` returns an `Info` whose string form is
  `version-channel`.

## Install

```
pip install .
```

## Examples

```python
from decypharr.models import Torrent
from decypharr.preferences import default_app_preferences

torrent = Torrent(hash="abc123", name="Show.S01", category="sonarr", progress=1.0)
print(torrent.to_dict())
print(torrent.is_ready())  # False until torrent_path is set

prefs = default_app_preferences()
prefs.save_path = "/downloads"
print(prefs.to_dict()["save_path"])
```

Reading part of a remote file:

```python
from decypharr.rar_http import HttpFile

remote = HttpFile("https://files.example.com/archive.rar")
print(remote.file_size)
head = remote.read_at(7, 0)
```

Finding broken symlinks:

```python
from decypharr.repair_files import ContentFile, find_broken_files

files = [ContentFile(path="/media/tv/Show/episode1.mkv")]
for broken in find_broken_files(files):
    print(broken.path, "->", broken.target_path)
```

## What the package does not do

It does not run an HTTP server or route Web API requests, and it keeps no
torrent store, import queue or persisted state of its own. It does not
talk to debrid services or arr applications, and it does not parse RAR
archive headers: `HttpFile` gives byte-range access to a remote file,
and reading its contents is left to the caller.

## Tests

```
pip install ".[test]"
pytest
```