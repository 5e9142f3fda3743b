"""sdns CLI.

Usage:
    sdns version               Print the build version
    sdns load [-c PATH]        Load the config (generating it if missing)
                               and apply its logging settings
    sdns config <cmd>          Generate and inspect the config file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import sdns.config
import sdns.logs

logger = logging.getLogger("sdns")


def _bootstrap_logging() -> None:
    """Log at info to stderr until the config says otherwise."""
    sdns.logs.configure(sdns.config.Config())


def _cmd_version() -> int:
    print(sdns.config.BUILD_VERSION)
    return 0


def _cmd_load(args: list[str]) -> int:
    """Run the startup config sequence the server performs."""
    parser = argparse.ArgumentParser(prog="sdns load")
    parser.add_argument("-c", "--config", type=Path, default=Path("sdns.toml"))
    ns = parser.parse_args(args)

    _bootstrap_logging()
    try:
        cfg = sdns.config.load(ns.config)
        sdns.logs.configure(cfg)
    except sdns.config.ConfigError as exc:
        logger.critical("Config error", extra={"data": {"error": exc}})
        return 1

    logger.info(
        "Config loaded",
        extra={"data": {"version": sdns.config.BUILD_VERSION, "bind": cfg.bind, "api": cfg.api}},
    )
    return 0


def _cmd_config(args: list[str]) -> int:
    """Generate and inspect the config file."""
    import sdns.config_cli

    _bootstrap_logging()
    return sdns.config_cli.main(args)


def main() -> None:
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    cmd = args[0]
    rest = args[1:]

    if cmd == "version":
        sys.exit(_cmd_version())
    elif cmd == "load":
        sys.exit(_cmd_load(rest))
    elif cmd == "config":
        sys.exit(_cmd_config(rest))
    else:
        print(__doc__)
        sys.exit(1)


if __name__ == "__main__":
    main()
