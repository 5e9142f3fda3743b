"""Configuration bootstrap for the sdns server.

``load()`` makes sure a config file exists at the given path (writing the
documented defaults when it does not), decodes it into a :class:`Config`
and warns when the file was generated for an older schema version.

The returned value is built once at startup and handed to every consumer;
it is frozen and never rewritten afterwards.
"""

from __future__ import annotations

import dataclasses
import logging
import pathlib
import tomllib
import typing

logger = logging.getLogger("sdns.config")

# Build version of sdns, incremented every release.
BUILD_VERSION = "2.0.4"

# Schema version of the config file, incremented every time the option set
# changes so that old files produce a warning.
CONFIG_VERSION = "2.0.4"

_UINT32_MAX = 2**32 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ConfigError(Exception):
    """Raised when the config file cannot be generated or decoded."""


@dataclasses.dataclass(frozen=True)
class Config:
    version: str = ""
    sources: tuple[str, ...] = ()
    source_dirs: tuple[str, ...] = ()
    root_servers: tuple[str, ...] = ()
    root_keys: tuple[str, ...] = ()
    log: str = ""
    log_level: str = ""
    bind: str = ""
    api: str = ""
    null_route: str = ""
    null_route_v6: str = ""
    outbound_ip: str = ""
    interval: int = 0  # milliseconds
    timeout: int = 0  # seconds
    connect_timeout: int = 0  # seconds
    expire: int = 0  # seconds, unsigned 32-bit
    max_count: int = 0  # 0 = unbounded
    max_depth: int = 0
    rate_limit: int = 0  # 0 = disabled
    blocklist: tuple[str, ...] = ()
    whitelist: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Key mapping
# ---------------------------------------------------------------------------

def toml_key(name: str) -> str:
    """Return the TOML key for a :class:`Config` attribute name."""
    return name.replace("_", "")


def _field_types() -> dict[str, type]:
    hints = typing.get_type_hints(Config)
    return {toml_key(f.name): hints[f.name] for f in dataclasses.fields(Config)}


def _coerce(key: str, value: typing.Any, target: type) -> typing.Any:
    """Check *value* against the field type, converting arrays to tuples."""
    if target is str:
        if not isinstance(value, str):
            raise ConfigError(
                f"could not load config: {key}: expected string, got {type(value).__name__}"
            )
        return value
    if target is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(
                f"could not load config: {key}: expected integer, got {type(value).__name__}"
            )
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ConfigError(
                f"could not load config: {key}: {value} out of range for 64-bit integer"
            )
        return value
    # tuple[str, ...]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(
            f"could not load config: {key}: expected array of strings"
        )
    return tuple(value)


def from_dict(data: dict[str, typing.Any]) -> Config:
    """Build a :class:`Config` from a decoded TOML table.

    Keys match case-insensitively, unknown keys are ignored and missing
    keys keep their zero value.
    """
    types = _field_types()
    names = {toml_key(f.name): f.name for f in dataclasses.fields(Config)}
    kwargs: dict[str, typing.Any] = {}
    for raw_key, value in data.items():
        key = raw_key.lower()
        if key not in names:
            continue
        kwargs[names[key]] = _coerce(raw_key, value, types[key])

    expire = kwargs.get("expire", 0)
    if not 0 <= expire <= _UINT32_MAX:
        raise ConfigError(
            f"could not load config: expire: {expire} out of range for unsigned 32-bit integer"
        )
    return Config(**kwargs)


def to_dict(cfg: Config) -> dict[str, typing.Any]:
    """Inverse of :func:`from_dict`, keyed by TOML key."""
    out: dict[str, typing.Any] = {}
    for f in dataclasses.fields(cfg):
        value = getattr(cfg, f.name)
        out[toml_key(f.name)] = list(value) if isinstance(value, tuple) else value
    return out


# ---------------------------------------------------------------------------
# Generate / decode / load
# ---------------------------------------------------------------------------

def generate(path: pathlib.Path | str, version: str = CONFIG_VERSION) -> pathlib.Path:
    """Write the default config for *version* to *path*.

    A write that fails partway may leave a truncated file behind; the
    following decode reports it as a parse error.
    """
    import sdns.defaults

    path = pathlib.Path(path)
    text = sdns.defaults.render(version)
    try:
        output = path.open("w", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"could not generate config: {exc}") from exc

    with output:
        try:
            output.write(text)
        except OSError as exc:
            raise ConfigError(f"could not copy default config: {exc}") from exc

    abs_path = path.absolute()
    logger.info("Default config file generated", extra={"data": {"config": str(abs_path)}})
    return abs_path


def decode(path: pathlib.Path | str) -> Config:
    """Parse the TOML file at *path* into a :class:`Config`."""
    path = pathlib.Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"could not load config: {exc}") from exc
    return from_dict(data)


def is_out_of_date(cfg: Config, expected: str = CONFIG_VERSION) -> bool:
    return cfg.version != expected


def load(path: pathlib.Path | str, expected: str = CONFIG_VERSION) -> Config:
    """Load the config at *path*, generating the default file if missing.

    Raises :class:`ConfigError` when the file cannot be generated or
    decoded. A version mismatch is only logged.
    """
    path = pathlib.Path(path)
    try:
        path.stat()
    except FileNotFoundError:
        generate(path, expected)
    except OSError:
        # Let decode() surface whatever is wrong with the path.
        pass

    cfg = decode(path)

    if is_out_of_date(cfg, expected):
        logger.warning(
            "Config file %s is out of date!",
            path.name,
            extra={"data": {"version": cfg.version or "none", "expected": expected}},
        )

    return cfg
