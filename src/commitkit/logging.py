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

"""Structured logging for commitkit.

Configures `structlog <https://www.structlog.org/>`_ with two renderers:

- **Console** (default): human-readable, colored when stderr is a TTY.
- **JSON** (``--json-log`` or ``COMMITKIT_JSON_LOG=1``): one object per line.

Output always goes to stderr; stdout is reserved for command results
(``commitkit parse msg.txt | jq .type``).

Library code never calls :func:`configure_logging`; it only asks for a
logger. Until an application configures logging, structlog's defaults
apply.

Usage::

    from commitkit.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger(__name__)
    log.debug('trailer_dropped', line='not a trailer')
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]


def _json_from_env() -> bool:
    return os.environ.get('COMMITKIT_JSON_LOG', '0') not in ('', '0', 'false')


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Configure structlog for commitkit.

    Safe to call more than once; the last call wins.

    Args:
        verbose: Enable debug-level output.
        quiet: Only emit warnings and errors.
        json_log: Render JSON instead of console output. Also enabled
            by the ``COMMITKIT_JSON_LOG`` environment variable.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_log or _json_from_env():
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'commitkit') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        name: Logger name, usually the calling module's ``__name__``.
    """
    return structlog.get_logger(name)
