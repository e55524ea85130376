# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""The ``commitkit`` command.

Subcommands read one commit message from a file, or from stdin when the
file is ``-`` or omitted:

- ``commitkit parse [FILE]``: print the parsed message as JSON.
- ``commitkit format [FILE] [--summary]``: print the canonical text, or
  only the header line.
- ``commitkit check [FILE]``: parse and apply the repository policy.
  Lines starting with ``#`` are ignored, so it works as a git
  ``commit-msg`` hook::

      # .git/hooks/commit-msg
      exec commitkit check "$1"

Exit codes:
    0  Success.
    1  The message does not parse or breaks the policy.
    2  Usage, I/O or configuration error.

Results go to stdout; diagnostics and logs go to stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from commitkit.config import load_config
from commitkit.conventional import Message, parse_message
from commitkit.errors import CommitKitError, ConfigError
from commitkit.logging import configure_logging, get_logger
from commitkit.policy import check_message

__all__ = ['main']

logger = get_logger(__name__)

console = Console(stderr=True)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _read_source(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    return Path(source).read_text(encoding='utf-8')


def _strip_comments(text: str) -> str:
    """Drop git comment lines (``# ...``) from an editor-produced message."""
    return '\n'.join(line for line in text.split('\n') if not line.startswith('#'))


def _parse_or_report(text: str) -> Message | None:
    try:
        message = parse_message(text)
    except CommitKitError as exc:
        console.print(f'[red]error:[/red] {escape(str(exc))}')
        logger.debug('parse_failed', error=str(exc), error_type=type(exc).__name__)
        return None
    logger.debug('message_parsed', summary=message.summary(), trailers=len(message.trailers))
    return message


def _cmd_parse(args: argparse.Namespace, text: str) -> int:
    message = _parse_or_report(text)
    if message is None:
        return EXIT_INVALID
    payload = {**message.to_dict(), 'bump': message.bump.value}
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return EXIT_OK


def _cmd_format(args: argparse.Namespace, text: str) -> int:
    message = _parse_or_report(text)
    if message is None:
        return EXIT_INVALID
    print(message.summary() if args.summary else message.format())
    return EXIT_OK


def _cmd_check(args: argparse.Namespace, text: str) -> int:
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        console.print(f'[red]config error:[/red] {escape(str(exc))}')
        return EXIT_USAGE

    message = _parse_or_report(_strip_comments(text))
    if message is None:
        return EXIT_INVALID

    violations = check_message(message, config)
    for violation in violations:
        console.print(f'[red]✗[/red] [bold]{violation.rule}[/bold]: {escape(violation.message)}')
        if violation.hint:
            console.print(f'  [dim]{escape(violation.hint)}[/dim]')
    if violations:
        logger.info('check_failed', summary=message.summary(), violations=len(violations))
        return EXIT_INVALID

    console.print(f'[green]✓[/green] {escape(message.summary())}', highlight=False)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``commitkit`` command."""
    parser = argparse.ArgumentParser(
        prog='commitkit',
        description='Parse, format and check Conventional Commit messages.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit logs as JSON lines.')
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Config file, or directory to search (default: current directory).',
    )

    sub = parser.add_subparsers(dest='command', required=True)

    p_parse = sub.add_parser('parse', help='Print the parsed message as JSON.')
    p_parse.set_defaults(handler=_cmd_parse)

    p_format = sub.add_parser('format', help='Print the canonical message text.')
    p_format.add_argument('--summary', action='store_true', help='Print only the header line.')
    p_format.set_defaults(handler=_cmd_format)

    p_check = sub.add_parser('check', help='Validate a message against the repository policy.')
    p_check.set_defaults(handler=_cmd_check)

    for p in (p_parse, p_format, p_check):
        p.add_argument('file', nargs='?', default='-', help='Message file, or "-" for stdin (default).')

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``commitkit`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        text = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f'[red]error:[/red] cannot read {escape(args.file)}: {escape(str(exc))}')
        return EXIT_USAGE

    return args.handler(args, text)


if __name__ == '__main__':
    sys.exit(main())
