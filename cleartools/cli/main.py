"""
ClearTools command-line interface.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

Commands:
- types:     list registered connection string types
- parse:     parse a connection string and print its fields as JSON
- normalize: parse a connection string and print its canonical form

The raw string comes from the positional argument, an environment variable
(--env), a JSON/YAML file key (--config/--key) or stdin.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from ..core.base import ConnectionStringBase
from ..core.config import KeyComparison, ParsingOptions
from ..providers import EnvironmentSecretProvider, FileSecretProvider, load_connection_string
from ..store.factory import ConnectionStringFactory
from ..types.errors import ClearToolsError, ConfigurationError


logger = logging.getLogger(__name__)

MASK = "********"
_SECRET_MARKERS = ("password", "secret", "signature")
_SECRET_SUFFIXES = ("_key",)


def _is_secret_field(name: str) -> bool:
    lowered = name.lower()
    return any(m in lowered for m in _SECRET_MARKERS) or lowered.endswith(_SECRET_SUFFIXES)


def _masked(record: ConnectionStringBase, show_secrets: bool) -> Dict[str, Any]:
    data = record.to_dict()
    if show_secrets:
        return data
    return {
        name: (MASK if value not in (None, "") and _is_secret_field(name) else value)
        for name, value in data.items()
    }


def _build_options(args: argparse.Namespace) -> ParsingOptions:
    return ParsingOptions(
        delimiter=args.delimiter,
        enable_escaping=not args.no_escaping,
        key_comparison=(
            KeyComparison.CASE_SENSITIVE if args.case_sensitive
            else KeyComparison.CASE_INSENSITIVE
        ),
    )


def _load(args: argparse.Namespace) -> ConnectionStringBase:
    options = _build_options(args)

    if args.env:
        return load_connection_string(args.type, EnvironmentSecretProvider(), args.env, options)

    if args.config:
        if not args.key:
            raise ConfigurationError("--config requires --key", config_key="key")
        return load_connection_string(args.type, FileSecretProvider(args.config), args.key, options)

    raw = args.raw
    if raw is None or raw == "-":
        raw = sys.stdin.read().strip()
    return ConnectionStringFactory.create(args.type, raw, options)


def _add_source_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("type", help="Registered connection string type (see 'types')")
    p.add_argument("raw", nargs="?", default=None,
                   help="Raw connection string, or '-' for stdin")
    p.add_argument("--env", metavar="NAME", help="Read the connection string from this environment key")
    p.add_argument("--config", metavar="FILE", help="Read the connection string from a JSON/YAML file")
    p.add_argument("--key", help="Key inside --config, e.g. ConnectionStrings:MyDatabase")
    p.add_argument("--delimiter", default=";", help="Pair delimiter (default ';')")
    p.add_argument("--no-escaping", action="store_true", help="Disable backslash escaping of the delimiter")
    p.add_argument("--case-sensitive", action="store_true", help="Match keys case-sensitively")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cleartools", description="Parse and format connection strings.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command")

    sub.add_parser("types", help="List registered connection string types")

    parse_cmd = sub.add_parser("parse", help="Print parsed fields as JSON")
    _add_source_arguments(parse_cmd)
    parse_cmd.add_argument("--show-secrets", action="store_true", help="Do not mask passwords and keys")

    normalize_cmd = sub.add_parser("normalize", help="Print the canonical connection string")
    _add_source_arguments(normalize_cmd)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        p.print_help()
        return 2

    if args.command == "types":
        for name in ConnectionStringFactory.get_available_types():
            sys.stdout.write(name + "\n")
        return 0

    try:
        record = _load(args)
        if args.command == "parse":
            output = json.dumps(_masked(record, args.show_secrets), indent=2)
        else:
            output = record.to_string()
    except ClearToolsError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    except (OSError, ValueError) as ex:
        logger.debug("Failed to read connection string source", exc_info=True)
        sys.stderr.write(f"error: {ex}\n")
        return 2

    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
