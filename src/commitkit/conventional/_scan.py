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

r"""Line-level segmentation of a commit message.

Splits everything after the header into a body region and a trailer
region::

    feat(api): add pagination          <- header (line 0)
                                       <- skipped by find_content_start
    Adds cursor-based pagination to    <- body
    the list endpoints.                <- body
                                       <- separator (in neither region)
    Refs: #42                          <- trailers
    Reviewed-by: Alice                 <- trailers

The boundary between the two regions is found by walking backwards from
the last non-blank line. While every line seen so far is trailer-like the
walk is in :attr:`ScanState.SCANNING_TRAILERS`; the first blank line in
that state is the separator. A line that is not trailer-like moves the
walk to :attr:`ScanState.RUN_BROKEN`, which means there is no trailer
block at all. Reaching the first content line while still scanning means
the whole content region is trailers.

A ``Key: value`` line in the middle of a body paragraph is therefore never
taken for a trailer: reaching it backwards means first crossing a blank
line (which ends the walk) or a prose line (which breaks the run).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from commitkit.conventional._fields import TRAILER_KEY_RE, Body, Trailer
from commitkit.errors import FieldValidationError
from commitkit.logging import get_logger

__all__ = [
    'BREAKING_CHANGE_KEY',
    'BREAKING_CHANGE_PREFIX',
    'BoundaryReason',
    'ScanState',
    'TrailerBoundary',
    'extract_body',
    'extract_trailers',
    'find_content_start',
    'find_trailer_boundary',
    'is_trailer_like',
    'normalize_lines',
    'resolve_breaking',
]

logger = get_logger(__name__)

# Footer spelling with a space; not a valid trailer key.
BREAKING_CHANGE_PREFIX = 'BREAKING CHANGE:'
# Footer spelling that is a valid trailer key.
BREAKING_CHANGE_KEY = 'BREAKING-CHANGE'


class ScanState(Enum):
    """States of the backward trailer-boundary walk."""

    SCANNING_TRAILERS = 'scanning_trailers'
    RUN_BROKEN = 'run_broken'


class BoundaryReason(Enum):
    """Why the backward walk stopped where it did."""

    SEPARATOR = 'separator'
    """A blank line separates the body from a trailer block."""

    ALL_TRAILERS = 'all_trailers'
    """Every content line is trailer-like; there is no body."""

    NO_TRAILERS = 'no_trailers'
    """A non-trailer line was found before any separator."""


@dataclass(frozen=True)
class TrailerBoundary:
    """Result of :func:`find_trailer_boundary`.

    Attributes:
        start: Index of the first line of the trailer block, or ``None``
            when the message has no trailers.
        reason: Which termination condition produced ``start``.
    """

    start: int | None
    reason: BoundaryReason


def normalize_lines(raw: str) -> list[str]:
    """Convert CRLF and lone CR to LF, trim the message and split it into lines.

    Never fails; an empty string yields ``['']``.
    """
    text = raw.replace('\r\n', '\n').replace('\r', '\n')
    return text.strip().split('\n')


def find_content_start(lines: list[str]) -> int | None:
    """Return the index of the first non-blank line after the header.

    Returns ``None`` if there is no such line.
    """
    for i in range(1, len(lines)):
        if lines[i].strip():
            return i
    return None


def is_trailer_like(line: str) -> bool:
    """Return ``True`` if *line* looks like a footer.

    A footer is either ``Key: value`` with a valid trailer key, or a line
    starting with the ``BREAKING CHANGE`` spelling that has a space.
    """
    stripped = line.strip()
    if not stripped:
        return False
    if stripped.startswith((BREAKING_CHANGE_PREFIX, 'BREAKING CHANGE ')):
        return True
    key, sep, _ = stripped.partition(':')
    if not sep:
        return False
    return TRAILER_KEY_RE.match(key.strip()) is not None


def find_trailer_boundary(lines: list[str], content_start: int) -> TrailerBoundary:
    """Locate the start of the trailer block in ``lines[content_start:]``.

    Args:
        lines: All message lines, header included.
        content_start: Index of the first non-blank line after the header,
            as returned by :func:`find_content_start`.

    Returns:
        A :class:`TrailerBoundary`. Lines ``[content_start, start)`` hold the
        body (plus the separator) and ``[start, len(lines))`` the trailers.
    """
    last = len(lines) - 1
    while last >= content_start and not lines[last].strip():
        last -= 1
    if last < content_start:
        return TrailerBoundary(None, BoundaryReason.NO_TRAILERS)

    state = ScanState.SCANNING_TRAILERS
    for i in range(last, content_start - 1, -1):
        if not lines[i].strip():
            return TrailerBoundary(i + 1, BoundaryReason.SEPARATOR)
        if not is_trailer_like(lines[i]):
            state = ScanState.RUN_BROKEN
            break

    if state is ScanState.RUN_BROKEN:
        return TrailerBoundary(None, BoundaryReason.NO_TRAILERS)
    return TrailerBoundary(content_start, BoundaryReason.ALL_TRAILERS)


def extract_body(lines: list[str], content_start: int, trailer_start: int | None) -> Body:
    """Join the body lines and hand them to :meth:`Body.parse`.

    Blank lines directly above the trailer block are excluded; blank
    lines inside the body are kept.

    Raises:
        FieldValidationError: If the body violates the :class:`Body` rules.
    """
    if trailer_start is None:
        end = len(lines)
    elif trailer_start > content_start:
        end = trailer_start
        while end > content_start and not lines[end - 1].strip():
            end -= 1
    else:
        return Body()

    text = '\n'.join(lines[content_start:end])
    if not text.strip():
        return Body()
    return Body.parse(text)


def extract_trailers(lines: list[str], trailer_start: int | None) -> tuple[tuple[Trailer, ...], bool]:
    """Parse the trailer block.

    Lines that are not valid trailers are dropped. A ``BREAKING CHANGE:``
    footer only sets the breaking flag and is not stored as a trailer.

    Returns:
        ``(trailers, footer_breaking)``; trailers keep their original
        order and duplicates.
    """
    if trailer_start is None:
        return (), False

    trailers: list[Trailer] = []
    footer_breaking = False
    for line in lines[trailer_start:]:
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(BREAKING_CHANGE_PREFIX):
            footer_breaking = True
            continue
        try:
            trailer = Trailer.parse(stripped)
        except FieldValidationError as exc:
            logger.debug('trailer_dropped', line=stripped, reason=exc.reason)
            continue
        trailers.append(trailer)
        if trailer.key == BREAKING_CHANGE_KEY:
            footer_breaking = True
    return tuple(trailers), footer_breaking


def resolve_breaking(header_marker: bool, footer_breaking: bool) -> bool:
    """Merge the header ``!`` marker with the footer signals."""
    return header_marker or footer_breaking
