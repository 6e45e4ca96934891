#!/usr/bin/env python3
"""CLI for request_fu. Usage: rfu <command> <target> [k=v ...]"""

import logging
import sys
from typing import Optional

from request_fu import http
from request_fu.errors import InvalidTarget, TransportError
from request_fu.response import Response


def _parse_flags(args: list[str], flags: dict[str, type]) -> tuple[dict, list[str]]:
    """Parse --flag=value args. list-typed flags may repeat. Returns (parsed_flags, remaining_args)."""
    parsed: dict = {}
    remaining = []
    for arg in args:
        if arg.startswith("--") and "=" in arg:
            key, val = arg.split("=", 1)
            key = key[2:]  # strip --
            if flags.get(key) is list:
                parsed.setdefault(key, []).append(val)
            elif key in flags:
                parsed[key] = flags[key](val)
            else:
                remaining.append(arg)
        elif arg.startswith("--"):
            key = arg[2:]
            if key in flags and flags[key] is bool:
                parsed[key] = True
            else:
                remaining.append(arg)
        else:
            remaining.append(arg)
    return parsed, remaining


def _parse_target(raw: str, user: Optional[str] = None):
    """URL strings pass through; host[:port][/path] becomes a descriptor."""
    if "://" in raw and not user:
        return raw
    if "://" in raw:
        protocol, raw = raw.split("://", 1)
    else:
        protocol = "http"

    path = None
    if "/" in raw:
        raw, rest = raw.split("/", 1)
        path = "/" + rest
    if "@" in raw:
        # --user replaces any credentials embedded in the URL
        raw = raw.rsplit("@", 1)[1]
    host, _, port = raw.partition(":")
    if port and not port.isdigit():
        raise InvalidTarget(f"Invalid port in target: {port}", target=raw)

    target = {"host": host, "protocol": protocol}
    if port:
        target["port"] = int(port)
    if path:
        target["path"] = path
    if user:
        username, _, password = user.partition(":")
        target["username"] = username
        target["password"] = password
    return target


def _parse_params(args: list[str]) -> dict:
    """k=v pairs; repeated keys collect into a list."""
    params: dict = {}
    for arg in args:
        if "=" not in arg:
            raise ValueError(f"Expected key=value, got: {arg}")
        key, val = arg.split("=", 1)
        if key in params:
            existing = params[key]
            params[key] = (existing if isinstance(existing, list) else [existing]) + [val]
        else:
            params[key] = val
    return params


def _parse_headers(raw: list[str]) -> dict[str, str]:
    headers = {}
    for item in raw:
        if ":" not in item:
            raise ValueError(f"Expected Name:Value header, got: {item}")
        name, val = item.split(":", 1)
        headers[name.strip()] = val.strip()
    return headers


def _print_response(resp: Response) -> None:
    print(f"{resp.status} {resp.kind.name}")
    if resp.body:
        print(resp.body)


HELP = """Usage: rfu <command> <target> [k=v ...] [flags]

Commands:
  get <target> [k=v...]     GET, params appended as query string
  delete <target> [k=v...]  DELETE, params appended as query string
  post <target> [k=v...]    POST, params sent as body fields
  put <target> [k=v...]     PUT, params sent as body fields

Target:
  http://host/path          Full URL, used as-is
  host[:port][/path]        Built as http://host:port/path

Flags:
  --timeout=N               Seconds before giving up (default 10)
  --header=Name:Value       Extra request header (repeatable)
  --user=name:password      Basic auth
  --verbose                 Log requests to stderr

Exit codes: 0 = 2xx/3xx, 1 = 4xx/5xx/other, 2 = bad usage, 3 = network error
"""

COMMANDS = {"get": http.get, "post": http.post, "put": http.put, "delete": http.delete}
FLAGS = {"timeout": float, "header": list, "user": str, "verbose": bool}


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] in ("-h", "--help", "help"):
        print(HELP.strip())
        return 0

    cmd = args[0]
    if cmd not in COMMANDS:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        print(HELP.strip(), file=sys.stderr)
        return 2

    try:
        flags, rest = _parse_flags(args[1:], FLAGS)
    except ValueError as e:
        print(f"Invalid flag: {e}", file=sys.stderr)
        return 2
    if not rest:
        print(f"Usage: rfu {cmd} <target> [k=v ...]", file=sys.stderr)
        return 2

    if flags.get("verbose"):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        target = _parse_target(rest[0], flags.get("user"))
        params = _parse_params(rest[1:])
        headers = _parse_headers(flags.get("header", []))
        resp = COMMANDS[cmd](target, params or None, headers=headers, timeout=flags.get("timeout"))
    except (InvalidTarget, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except TransportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 3

    _print_response(resp)
    return 0 if resp.is_success or resp.is_redirect else 1


if __name__ == "__main__":
    sys.exit(main())
