"""
mgmtshell CLI: shell-side entrypoint.

Commands:
- start-vsd: Launch VSD locally over .gfs archive files
- decode-response: Parse CommandResponse JSON and print its outcome
- serve: Run the HTTP management service

Exit Codes:
===========
- 0: Command status OK
- 1: Command status ERROR
- 4: Input file not found
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .config import ShellSettings
from .commands import start_vsd
from .response import (
    CommandResponse,
    create_command_response_json,
    prepare_command_response_from_json,
)
from .results import ResultStatus


def _exit_for_status(status: int) -> NoReturn:
    sys.exit(0 if status == ResultStatus.OK.value else 1)


def _print_response(response: CommandResponse) -> None:
    print(f"Sender: {response.sender}")
    print(f"Type: {response.content_type}")
    print(f"Status: {response.status}")
    print(json.dumps(response.content, indent=2))
    if response.debug_info:
        print(response.debug_info, file=sys.stderr)


def cmd_start_vsd(args: argparse.Namespace) -> NoReturn:
    settings = ShellSettings.from_env()
    if args.json:
        # Progress goes to stderr so stdout carries only the envelope
        result = start_vsd(args.file, settings, output=lambda line: print(line, file=sys.stderr))
        print(create_command_response_json(settings.member_name, result))
    else:
        result = start_vsd(args.file, settings)
        stream = sys.stderr if result.is_error else sys.stdout
        for line in result.message_lines():
            print(line, file=stream)

    _exit_for_status(result.status_code)


def cmd_decode_response(args: argparse.Namespace) -> NoReturn:
    if args.source == "-":
        text = sys.stdin.read()
    else:
        source = Path(args.source)
        if not source.exists():
            print(f"ERROR: Response file not found: {source}", file=sys.stderr)
            sys.exit(4)
        text = source.read_text(encoding="utf-8")

    response = prepare_command_response_from_json(text)
    _print_response(response)
    _exit_for_status(response.status)


def cmd_serve(args: argparse.Namespace) -> NoReturn:
    from .main import run_server

    run_server(host=args.host, port=args.port)
    sys.exit(0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mgmtshell",
        description="Management shell commands and response envelopes",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to execute")

    parser_vsd = subparsers.add_parser(
        "start-vsd",
        help="Launch VSD over statistics archive files",
    )
    parser_vsd.add_argument(
        "--file",
        action="append",
        default=None,
        help="A .gfs file or a directory to search for .gfs files (repeatable)",
    )
    parser_vsd.add_argument(
        "--json",
        action="store_true",
        help="Print the CommandResponse envelope instead of message lines",
    )
    parser_vsd.set_defaults(func=cmd_start_vsd)

    parser_decode = subparsers.add_parser(
        "decode-response",
        help="Decode CommandResponse JSON from a file or stdin",
    )
    parser_decode.add_argument("source", help="Path to response JSON, or - for stdin")
    parser_decode.set_defaults(func=cmd_decode_response)

    parser_serve = subparsers.add_parser("serve", help="Run the HTTP management service")
    parser_serve.add_argument("--host", default="127.0.0.1")
    parser_serve.add_argument("--port", type=int, default=8090)
    parser_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> NoReturn:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
