"""querykit CLI — inspect and build query strings from the shell.

Entry point registered as ``querykit`` in ``pyproject.toml``::

    [project.scripts]
    querykit = "querykit.cli:main"

Examples::

    querykit content "http://example.com/?a=1#top"         # a=1
    querykit parse "http://example.com/?a=1&b=true"        # {"a": "1", "b": true}
    querykit get page --url "http://example.com/?Page=2"   # "2"
    querykit build a=1 b= -o separate_empty_values=false   # ?a=1&b
"""

import argparse
import json
import sys
from typing import Any, cast

from querykit._internal.types import UNDEFINED
from querykit.api import build_query, get_query_content, get_query_param, list_query_params
from querykit.errors import ConfigurationError
from querykit.parser import ParsedQuery


def _parse_option(text: str) -> tuple[str, Any]:
    key, sep, raw = text.partition("=")
    if not sep:
        msg = f"expected KEY=VALUE, got {text!r}"
        raise argparse.ArgumentTypeError(msg)
    value: Any = raw
    if raw.lower() == "true":
        value = True
    elif raw.lower() == "false":
        value = False
    return key, value


def _parse_param(text: str) -> tuple[str, str]:
    name, _, value = text.partition("=")
    return name, value


def _add_options_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--option",
        dest="options",
        action="append",
        type=_parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Override an option for this call (repeatable)",
    )


def _emit(value: Any) -> None:
    sys.stdout.write(json.dumps(value, ensure_ascii=False) + "\n")


def _run(args: argparse.Namespace) -> int:
    overrides = dict(args.options)

    if args.command == "content":
        sys.stdout.write(get_query_content(args.url, overrides) + "\n")
        return 0

    if args.command == "parse":
        if args.extended:
            result = cast(ParsedQuery, list_query_params(args.url, overrides, extended=True))
            _emit(result.as_dict())
            return 0
        if args.pairs:
            overrides["list_params_as_pairs"] = True
        _emit(list_query_params(args.url, overrides))
        return 0

    if args.command == "get":
        names = args.names[0] if len(args.names) == 1 else args.names
        value = get_query_param(names, args.url, overrides)
        if value is UNDEFINED:
            return 1
        _emit(value)
        return 0

    # build
    sys.stdout.write(build_query(args.params, overrides) + "\n")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``querykit`` command."""
    parser = argparse.ArgumentParser(
        prog="querykit",
        description="querykit — URL query string parsing, building and lookup.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- querykit content -------------------------------------------------
    content_parser = subparsers.add_parser("content", help="Print the query part of a URL")
    content_parser.add_argument("url", help="URL or query string")
    _add_options_arg(content_parser)

    # -- querykit parse ---------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Print every parameter as JSON")
    parse_parser.add_argument("url", help="URL or query string")
    shape = parse_parser.add_mutually_exclusive_group()
    shape.add_argument("--pairs", action="store_true", help="Print [name, value] pairs")
    shape.add_argument("--extended", action="store_true", help="Print every parsed view")
    _add_options_arg(parse_parser)

    # -- querykit get -----------------------------------------------------
    get_parser = subparsers.add_parser(
        "get",
        help="Print one parameter value as JSON (first present of several names)",
    )
    get_parser.add_argument("names", nargs="+", help="Parameter name(s), in order of preference")
    get_parser.add_argument("--url", required=True, help="URL or query string")
    _add_options_arg(get_parser)

    # -- querykit build ---------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a query string")
    build_parser.add_argument(
        "params",
        nargs="*",
        type=_parse_param,
        metavar="NAME=VALUE",
        help="Parameters, in order",
    )
    _add_options_arg(build_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        code = _run(args)
    except ConfigurationError as exc:
        sys.stderr.write(f"querykit: {exc}\n")
        sys.exit(2)
    if code:
        sys.exit(code)
