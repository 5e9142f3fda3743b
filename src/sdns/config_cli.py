"""CLI for the sdns config file.

Usage:
    sdns config generate [--config PATH] [--force]  Write the default config
    sdns config defaults                            Print the default config
    sdns config show [--config PATH]                Load and dump the config
    sdns config check [--config PATH]               Verify the schema version
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import sdns.config
import sdns.defaults

DEFAULT_PATH = Path("sdns.toml")


def cmd_generate(path: Path, *, force: bool = False) -> int:
    """Write the default config to *path*."""
    if path.exists() and not force:
        print(f"{path} already exists (use --force to overwrite)", file=sys.stderr)
        return 1
    try:
        abs_path = sdns.config.generate(path)
    except sdns.config.ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(f"Wrote {abs_path}")
    return 0


def cmd_defaults() -> int:
    """Print the default config for this build."""
    sys.stdout.write(sdns.defaults.render())
    return 0


def cmd_show(path: Path) -> int:
    """Load *path* (generating it if missing) and print every option."""
    try:
        cfg = sdns.config.load(path)
    except sdns.config.ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    for key, value in sdns.config.to_dict(cfg).items():
        print(f"{key} = {value!r}")
    return 0


def cmd_check(path: Path) -> int:
    """Decode *path* without generating it and compare its version.

    Returns 0 when current, 2 when out of date, 1 on any error.
    """
    if not path.exists():
        print(f"{path} does not exist", file=sys.stderr)
        return 1
    try:
        cfg = sdns.config.decode(path)
    except sdns.config.ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    if sdns.config.is_out_of_date(cfg):
        print(
            f"{path} is out of date: version {cfg.version or 'none'}, "
            f"expected {sdns.config.CONFIG_VERSION}",
            file=sys.stderr,
        )
        return 2
    print(f"{path} is up to date ({cfg.version})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``sdns config``."""
    parser = argparse.ArgumentParser(
        prog="sdns config",
        description="Generate and inspect the sdns config file.",
    )
    sub = parser.add_subparsers(dest="subcmd")

    p_generate = sub.add_parser("generate", help="Write the default config")
    p_generate.add_argument("-c", "--config", type=Path, default=DEFAULT_PATH)
    p_generate.add_argument("--force", action="store_true")

    sub.add_parser("defaults", help="Print the default config")

    p_show = sub.add_parser("show", help="Load and dump the config")
    p_show.add_argument("-c", "--config", type=Path, default=DEFAULT_PATH)

    p_check = sub.add_parser("check", help="Verify the schema version")
    p_check.add_argument("-c", "--config", type=Path, default=DEFAULT_PATH)

    args = parser.parse_args(argv)

    if args.subcmd is None:
        parser.print_help()
        return 1

    if args.subcmd == "generate":
        return cmd_generate(args.config, force=args.force)
    elif args.subcmd == "defaults":
        return cmd_defaults()
    elif args.subcmd == "show":
        return cmd_show(args.config)
    elif args.subcmd == "check":
        return cmd_check(args.config)
    else:
        parser.print_help()
        return 1
