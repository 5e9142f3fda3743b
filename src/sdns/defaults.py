"""Default config file contents.

The shipped defaults are a typed :class:`sdns.config.Config`, serialized
option by option through ``tomli_w`` and interleaved with the comments an
operator sees in a freshly generated ``sdns.toml``.
"""

from __future__ import annotations

import tomli_w

import sdns.config

DEFAULTS = sdns.config.Config(
    sources=(
        "http://mirror1.malwaredomains.com/files/justdomains",
        "https://raw.githubusercontent.com/StevenBlack/hosts/master/hosts",
        "http://sysctl.org/cameleon/hosts",
        "https://zeustracker.abuse.ch/blocklist.php?download=domainblocklist",
        "https://s3.amazonaws.com/lists.disconnect.me/simple_tracking.txt",
        "https://s3.amazonaws.com/lists.disconnect.me/simple_ad.txt",
        "http://hosts-file.net/ad_servers.txt",
        "https://raw.githubusercontent.com/quidsup/notrack/master/trackers.txt",
    ),
    source_dirs=("sources",),
    log_level="info",
    bind="0.0.0.0:53",
    root_servers=(
        "198.41.0.4:53",
        "192.228.79.201:53",
        "192.33.4.12:53",
        "199.7.91.13:53",
        "192.203.230.10:53",
        "192.5.5.241:53",
        "192.112.36.4:53",
        "128.63.2.53:53",
        "192.36.148.17:53",
        "192.58.128.30:53",
        "193.0.14.129:53",
        "199.7.83.42:53",
        "202.12.27.33:53",
    ),
    root_keys=(
        ".\t\t\t172800\tIN\tDNSKEY\t257 3 8 AwEAAagAIKlVZrpC6Ia7gEzahOR+9W29euxhJhVVLOyQbSEW0O8gcCjFFVQUTf6v58fLjwBd0YI0EzrAcQqBGCzh/RStIoO8g0NfnfL2MTJRkxoXbfDaUeVPQuYEhg37NZWAJQ9VnMVDxP/VHL496M/QZxkjf5/Efucp2gaDX6RS6CXpoY68LsvPVjR0ZSwzz1apAzvN9dlzEheX7ICJBBtuA6G3LQpzW5hOA2hzCTMjJPJ8LbqF6dsV6DoBQzgul0sGIcGOYl7OyQdXfZ57relSQageu+ipAdTTJ25AsRTAoub8ONGcLmqrAmRLKBP1dfwhYB4N7knNnulqQxA+Uk1ihz0=",
        ".\t\t\t172800\tIN\tDNSKEY\t256 3 8 AwEAAdp440E6Mz7c+Vl4sPd0lTv2Qnc85dTW64j0RDD7sS/zwxWDJ3QRES2VKDO0OXLMqVJSs2YCCSDKuZXpDPuf++YfAu0j7lzYYdWTGwyNZhEaXtMQJIKYB96pW6cRkiG2Dn8S2vvo/PxW9PKQsyLbtd8PcwWglHgReBVp7kEv/Dd+3b3YMukt4jnWgDUddAySg558Zld+c9eGWkgWoOiuhg4rQRkFstMX1pRyOSHcZuH38o1WcsT4y3eT0U/SR6TOSLIB/8Ftirux/h297oS7tCcwSPt0wwry5OFNTlfMo8v7WGurogfk8hPipf7TTKHIi20LWen5RCsvYsQBkYGpF78=",
    ),
    api="127.0.0.1:8080",
    null_route="0.0.0.0",
    null_route_v6="0:0:0:0:0:0:0:0",
    interval=200,
    timeout=5,
    connect_timeout=2,
    expire=600,
    max_count=0,
    max_depth=30,
    rate_limit=0,
    blocklist=(),
    whitelist=(
        "getsentry.com",
        "www.getsentry.com",
    ),
)

# (attribute, comment) in the order they appear in the generated file.
_LAYOUT: tuple[tuple[str, str], ...] = (
    ("version", "version this config was generated from"),
    ("sources", "list of sources to pull blocklists from, stores them in ./sources"),
    (
        "source_dirs",
        "list of locations to recursively read blocklists from "
        "(warning, every file found is assumed to be a hosts-file or domain list)",
    ),
    (
        "log_level",
        "what kind of information should be logged, "
        "Log verbosity level [crit,error,warn,info,debug]",
    ),
    ("log", "file to write log messages to, empty for stderr"),
    ("bind", "address to bind to for the DNS server"),
    ("outbound_ip", "outbound ip address"),
    ("root_servers", "root servers"),
    ("root_keys", "root keys"),
    ("api", "address to bind to for the API server"),
    ("null_route", "ipv4 address to forward blocked queries to"),
    ("null_route_v6", "ipv6 address to forward blocked queries to"),
    ("interval", "concurrency interval for lookups in miliseconds"),
    ("timeout", "query timeout for dns lookups in seconds"),
    ("connect_timeout", "connect timeout for dns lookups in seconds"),
    ("expire", "cache entry lifespan in seconds"),
    ("max_count", "cache capacity, 0 for infinite"),
    ("max_depth", "maximum recursion depth for nameservers"),
    ("rate_limit", "query based ratelimit per second, 0 for disable"),
    ("blocklist", "manual blocklist entries"),
    ("whitelist", "manual whitelist entries"),
)

# Documented but left unset in a generated file.
_COMMENTED_OUT = frozenset({"log", "outbound_ip"})


def _render_option(name: str, value: object) -> str:
    if isinstance(value, tuple):
        value = list(value)
    line = tomli_w.dumps({sdns.config.toml_key(name): value})
    if name in _COMMENTED_OUT:
        line = "".join("#" + part for part in line.splitlines(keepends=True))
    return line


def render(version: str | None = None) -> str:
    """Return the default config file text stamped with *version*.

    Defaults to the schema version this build expects.
    """
    if version is None:
        version = sdns.config.CONFIG_VERSION

    chunks = []
    for name, comment in _LAYOUT:
        value = version if name == "version" else getattr(DEFAULTS, name)
        chunks.append(f"# {comment}\n" + _render_option(name, value))
    return "\n".join(chunks)
