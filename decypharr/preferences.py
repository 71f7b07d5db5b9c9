"""Application preferences reported through the qBittorrent-compatible API."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


@dataclass
class AppPreferences:
    """qBittorrent application preferences with the values this client reports.

    Attribute names match the JSON keys, except ``banned_ips``, which is
    written as ``banned_IPs``.
    """

    add_trackers: str = ""
    add_trackers_enabled: bool = False
    alt_dl_limit: int = 10240
    alt_up_limit: int = 10240
    alternative_webui_enabled: bool = False
    alternative_webui_path: str = ""
    announce_ip: str = ""
    announce_to_all_tiers: bool = True
    announce_to_all_trackers: bool = False
    anonymous_mode: bool = False
    async_io_threads: int = 4
    auto_delete_mode: int = 0
    auto_tmm_enabled: bool = False
    autorun_enabled: bool = False
    autorun_program: str = ""
    banned_ips: str = field(default="", metadata={"json": "banned_IPs"})
    bittorrent_protocol: int = 0
    bypass_auth_subnet_whitelist: str = ""
    bypass_auth_subnet_whitelist_enabled: bool = False
    bypass_local_auth: bool = False
    category_changed_tmm_enabled: bool = False
    checking_memory_use: int = 32
    create_subfolder_enabled: bool = True
    current_interface_address: str = ""
    current_network_interface: str = ""
    dht: bool = True
    disk_cache: int = -1
    disk_cache_ttl: int = 60
    dl_limit: int = 0
    dont_count_slow_torrents: bool = False
    dyndns_domain: str = "changeme.dyndns.org"
    dyndns_enabled: bool = False
    dyndns_password: str = ""
    dyndns_service: int = 0
    dyndns_username: str = ""
    embedded_tracker_port: int = 9000
    enable_coalesce_read_write: bool = True
    enable_embedded_tracker: bool = False
    enable_multi_connections_from_same_ip: bool = False
    enable_os_cache: bool = True
    enable_piece_extent_affinity: bool = False
    enable_super_seeding: bool = False
    enable_upload_suggestions: bool = False
    encryption: int = 0
    export_dir: str = ""
    export_dir_fin: str = ""
    file_pool_size: int = 40
    incomplete_files_ext: bool = False
    ip_filter_enabled: bool = False
    ip_filter_path: str = ""
    ip_filter_trackers: bool = False
    limit_lan_peers: bool = True
    limit_tcp_overhead: bool = False
    limit_utp_rate: bool = True
    listen_port: int = 31193
    locale: str = "en"
    lsd: bool = True
    mail_notification_auth_enabled: bool = False
    mail_notification_email: str = ""
    mail_notification_enabled: bool = False
    mail_notification_password: str = ""
    mail_notification_sender: str = "qBittorrentNotification@example.com"
    mail_notification_smtp: str = "smtp.changeme.com"
    mail_notification_ssl_enabled: bool = False
    mail_notification_username: str = ""
    max_active_downloads: int = 3
    max_active_torrents: int = 5
    max_active_uploads: int = 3
    max_connec: int = 500
    max_connec_per_torrent: int = 100
    max_ratio: int = -1
    max_ratio_act: int = 0
    max_ratio_enabled: bool = False
    max_seeding_time: int = -1
    max_seeding_time_enabled: bool = False
    max_uploads: int = -1
    max_uploads_per_torrent: int = -1
    outgoing_ports_max: int = 0
    outgoing_ports_min: int = 0
    pex: bool = True
    preallocate_all: bool = False
    proxy_auth_enabled: bool = False
    proxy_ip: str = "0.0.0.0"
    proxy_password: str = ""
    proxy_peer_connections: bool = False
    proxy_port: int = 8080
    proxy_torrents_only: bool = False
    proxy_type: int = 0
    proxy_username: str = ""
    queueing_enabled: bool = False
    random_port: bool = False
    recheck_completed_torrents: bool = False
    resolve_peer_countries: bool = True
    rss_auto_downloading_enabled: bool = False
    rss_max_articles_per_feed: int = 50
    rss_processing_enabled: bool = False
    rss_refresh_interval: int = 30
    save_path: str = ""
    save_path_changed_tmm_enabled: bool = False
    save_resume_data_interval: int = 60
    scan_dirs: dict[str, Any] = field(default_factory=dict)
    schedule_from_hour: int = 8
    schedule_from_min: int = 0
    schedule_to_hour: int = 20
    schedule_to_min: int = 0
    scheduler_days: int = 0
    scheduler_enabled: bool = False
    send_buffer_low_watermark: int = 10
    send_buffer_watermark: int = 500
    send_buffer_watermark_factor: int = 50
    slow_torrent_dl_rate_threshold: int = 2
    slow_torrent_inactive_timer: int = 60
    slow_torrent_ul_rate_threshold: int = 2
    socket_backlog_size: int = 30
    start_paused_enabled: bool = False
    stop_tracker_timeout: int = 1
    temp_path: str = ""
    temp_path_enabled: bool = False
    torrent_changed_tmm_enabled: bool = True
    up_limit: int = 0
    upload_choking_algorithm: int = 1
    upload_slots_behavior: int = 0
    upnp: bool = True
    upnp_lease_duration: int = 0
    use_https: bool = False
    utp_tcp_mixed_mode: int = 0
    web_ui_address: str = "*"
    web_ui_ban_duration: int = 3600
    web_ui_clickjacking_protection_enabled: bool = True
    web_ui_csrf_protection_enabled: bool = True
    web_ui_domain_list: str = "*"
    web_ui_host_header_validation_enabled: bool = True
    web_ui_https_cert_path: str = ""
    web_ui_https_key_path: str = ""
    web_ui_max_auth_fail_count: int = 5
    web_ui_port: int = 8080
    web_ui_secure_cookie_enabled: bool = True
    web_ui_session_timeout: int = 3600
    web_ui_upnp: bool = False
    web_ui_username: str = ""
    web_ui_password: str = ""
    ssl_key: str = ""
    ssl_cert: str = ""
    rss_download_repack_proper_episodes: str = ""
    rss_smart_episode_filters: str = ""
    web_ui_use_custom_http_headers: bool = False
    web_ui_use_custom_http_headers_enabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the preferences as the JSON object the API sends."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, dict):
                value = dict(value)
            result[f.metadata.get("json", f.name)] = value
        return result


def default_app_preferences() -> AppPreferences:
    """Return a fresh set of preferences holding the default values."""
    return AppPreferences()