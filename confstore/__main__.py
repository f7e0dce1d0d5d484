"""
Module: confstore.__main__

Inspect and edit a config store file from the shell.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from confstore.logging_config import setup_logging
from confstore.paths import ConfigurationError, resolve_config_path
from confstore.store import ConfigStore


def _open_store(args: argparse.Namespace) -> ConfigStore:
    return ConfigStore(
        cwd=args.cwd,
        project_name=args.project_name,
        config_name=args.config_name,
        search_from=Path.cwd(),
    )


def _reject_constant(token: str):
    raise ValueError(f"non-standard JSON token {token}")


def _parse_value(raw: str):
    # Try JSON first for richer types, fall back to the literal string.
    # NaN and Infinity stay strings since they cannot be stored as JSON.
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return raw


def handle_path(args: argparse.Namespace) -> None:
    print(
        resolve_config_path(
            cwd=args.cwd,
            project_name=args.project_name,
            config_name=args.config_name,
            search_from=Path.cwd(),
        )
    )


def handle_get(args: argparse.Namespace) -> None:
    store = _open_store(args)
    if args.key:
        if not store.has(args.key):
            raise SystemExit(f"Key {args.key!r} not found in {store.path}")
        value = store.get(args.key)
    else:
        value = store.load_store()
    print(json.dumps(value, indent=2, ensure_ascii=False))


def handle_set(args: argparse.Namespace) -> None:
    store = _open_store(args)
    value = _parse_value(args.value)
    store.set(args.key, value)
    print(f"Set {args.key} to {json.dumps(value, ensure_ascii=False)}")


def handle_delete(args: argparse.Namespace) -> None:
    _open_store(args).delete(args.key)
    print(f"Deleted {args.key}")


def handle_list(args: argparse.Namespace) -> None:
    def walk(node, prefix=""):
        for key, value in node.items():
            escaped = key.replace(".", "\\.")
            full = f"{prefix}.{escaped}" if prefix else escaped
            if isinstance(value, dict) and value:
                walk(value, full)
            else:
                print(full)

    walk(dict(_open_store(args)))


def handle_clear(args: argparse.Namespace) -> None:
    store = _open_store(args)
    store.clear()
    print(f"Cleared {store.path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="confstore", description="Config store utilities")
    location = parser.add_mutually_exclusive_group()
    location.add_argument("--cwd", help="Directory holding the config file")
    location.add_argument("--project-name", help="Use the platform config directory for this name")
    parser.add_argument("--config-name", default="config", help="File name without .json")
    subparsers = parser.add_subparsers(dest="command")

    path_parser = subparsers.add_parser("path", help="Print the resolved config file path")
    path_parser.set_defaults(func=handle_path)

    get_parser = subparsers.add_parser("get", help="Print a value or the whole store")
    get_parser.add_argument("key", nargs="?", default=None, help="Dot-path key")
    get_parser.set_defaults(func=handle_get)

    set_parser = subparsers.add_parser("set", help="Set a value")
    set_parser.add_argument("key", help="Dot-path key")
    set_parser.add_argument("value", help="New value (JSON or string)")
    set_parser.set_defaults(func=handle_set)

    delete_parser = subparsers.add_parser("delete", help="Delete a value")
    delete_parser.add_argument("key", help="Dot-path key")
    delete_parser.set_defaults(func=handle_delete)

    list_parser = subparsers.add_parser("list", help="List all leaf keys")
    list_parser.set_defaults(func=handle_list)

    clear_parser = subparsers.add_parser("clear", help="Remove every key")
    clear_parser.set_defaults(func=handle_clear)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
