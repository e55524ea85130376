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

r"""Conventional Commit messages: parsing and canonical formatting.

**Header** (required, first line)::

    type(scope)!: subject

- ``type`` is lowercase letters only and must be a known
  :class:`~commitkit.conventional.CommitType`.
- ``(scope)`` is optional; anything except ``)`` inside the parentheses.
- ``!`` is optional and must sit directly before the colon.

**Body** (optional): free-form text after the header.

**Trailers** (optional): a trailing block of ``Key: value`` lines,
separated from the body by a blank line.

A message is breaking when any of these holds:

- the header carries ``!``;
- a footer line starts with ``BREAKING CHANGE:``;
- a trailer has the key ``BREAKING-CHANGE``.

The ``BREAKING CHANGE:`` spelling has a space, so it is not a valid
trailer key. It only sets :attr:`Message.breaking` and is not kept in
:attr:`Message.trailers`; after formatting, the breaking signal lives in
the header ``!``.

:func:`parse_message` and :meth:`Message.format` compose: for a message
``m`` produced by the parser, ``parse_message(m.format()) == m``. The other
direction is not byte-exact; whitespace and blank lines are normalised.

One exception follows from not storing ``BREAKING CHANGE:``. When that
footer was the whole trailer block and the body's last paragraph is made
of ``Key: value`` lines, formatting drops the footer and that paragraph
becomes the trailer block on the next parse::

    feat: x                     feat!: x

    Some prose.          ->     Some prose.

    Refs: #1                    Refs: #1      <- now a trailer

    BREAKING CHANGE: gone

The second parse is then a fixed point.

Example::

    msg = parse_message('fix(auth)!: drop v1 tokens\n\nRefs: #12')
    assert msg.type is CommitType.FIX
    assert msg.scope == Scope('auth')
    assert msg.breaking is True
    assert msg.trailers == (Trailer('Refs', '#12'),)
    assert msg.summary() == 'fix(auth)!: drop v1 tokens'
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from commitkit.conventional._bump import BumpType, bump_for
from commitkit.conventional._fields import Body, CommitType, Scope, Subject, Trailer
from commitkit.conventional._scan import (
    BREAKING_CHANGE_KEY,
    extract_body,
    extract_trailers,
    find_content_start,
    find_trailer_boundary,
    normalize_lines,
    resolve_breaking,
)
from commitkit.errors import (
    EmptyMessageError,
    FieldValidationError,
    HeaderFormatError,
    InvalidFieldError,
)

__all__ = [
    'HEADER_RE',
    'Header',
    'Message',
    'parse_header',
    'parse_message',
]

HEADER_RE: re.Pattern[str] = re.compile(
    r'^(?P<type>[a-z]+)'  # type, lowercase only
    r'(?:\((?P<scope>[^)]+)\))?'  # optional scope in parens
    r'(?P<breaking>!)?'  # optional breaking marker
    r':\s*'  # colon + optional whitespace
    r'(?P<subject>.+)$',  # subject
)


@dataclass(frozen=True)
class Header:
    """Decomposed header line."""

    type: CommitType
    scope: Scope
    breaking: bool
    subject: Subject


def parse_header(line: str) -> Header:
    """Parse the first line of a commit message.

    Raises:
        HeaderFormatError: The line does not match :data:`HEADER_RE`.
        InvalidFieldError: The type, scope or subject is rejected by its
            value type.
    """
    header = line.strip()
    match = HEADER_RE.match(header)
    if match is None:
        raise HeaderFormatError(header)

    try:
        commit_type = CommitType.parse(match.group('type'))
    except FieldValidationError as exc:
        raise InvalidFieldError('type', exc) from exc

    scope = Scope()
    if match.group('scope'):
        try:
            scope = Scope.parse(match.group('scope'))
        except FieldValidationError as exc:
            raise InvalidFieldError('scope', exc) from exc

    try:
        subject = Subject.parse(match.group('subject'))
    except FieldValidationError as exc:
        raise InvalidFieldError('subject', exc) from exc

    return Header(
        type=commit_type,
        scope=scope,
        breaking=match.group('breaking') == '!',
        subject=subject,
    )


@dataclass(frozen=True)
class Message:
    """An immutable Conventional Commit message.

    Build one with :func:`parse_message`, or directly from values you have
    already validated (call :meth:`validate` if unsure).

    Attributes:
        type: The commit type.
        subject: The summary after the header colon.
        scope: Optional scope; ``Scope()`` when absent.
        breaking: Whether the commit is backwards-incompatible.
        body: Optional body; ``Body()`` when absent.
        trailers: Footer trailers in their original order. Duplicate keys
            are kept.
    """

    type: CommitType
    subject: Subject
    scope: Scope = Scope()
    breaking: bool = False
    body: Body = Body()
    trailers: tuple[Trailer, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.trailers, tuple):
            object.__setattr__(self, 'trailers', tuple(self.trailers))

    def header(self) -> str:
        """Return the canonical header line."""
        parts = [self.type.format()]
        if not self.scope.is_zero():
            parts.append(f'({self.scope.format()})')
        if self.breaking:
            parts.append('!')
        parts.append(f': {self.subject.format()}')
        return ''.join(parts)

    def format(self) -> str:
        """Render the full canonical message text.

        The header, then a blank line and the body if present, then a
        blank line and one trailer per line if there are any.
        """
        lines = [self.header()]
        if not self.body.is_zero():
            lines.extend(['', self.body.format()])
        if self.trailers:
            lines.append('')
            lines.extend(trailer.format() for trailer in self.trailers)
        return '\n'.join(lines)

    def summary(self) -> str:
        """Return only the header line.

        Body and trailers are left out because they can carry free-form
        text or attribution data that does not belong in terse output
        such as log lines.
        """
        return self.header()

    @property
    def bump(self) -> BumpType:
        """The semver bump this commit calls for."""
        return bump_for(self)

    def is_zero(self) -> bool:
        """``True`` for the empty message (no subject)."""
        return self.subject.is_zero()

    def validate(self) -> None:
        """Check every field of a directly constructed message.

        A ``BREAKING-CHANGE`` trailer on a message with ``breaking=False``
        is rejected, since the parser never produces that combination.

        Raises:
            InvalidFieldError: Tagged with the failing field, chained to
                the underlying :class:`FieldValidationError`.
        """
        if not isinstance(self.type, CommitType):
            exc = FieldValidationError('Message', 'type is required', self.type)
            raise InvalidFieldError('type', exc) from exc
        if self.subject.is_zero():
            exc = FieldValidationError('Message', 'subject is required', self.subject)
            raise InvalidFieldError('subject', exc) from exc

        checks: list[tuple[str, Any]] = [
            ('subject', self.subject),
            ('scope', self.scope),
            ('body', self.body),
        ]
        checks.extend((f'trailers[{i}]', trailer) for i, trailer in enumerate(self.trailers))
        for stage, value in checks:
            try:
                value.validate()
            except FieldValidationError as exc:
                raise InvalidFieldError(stage, exc) from exc

        if not self.breaking and any(t.key == BREAKING_CHANGE_KEY for t in self.trailers):
            exc = FieldValidationError(
                'Message', f'a {BREAKING_CHANGE_KEY} trailer requires breaking=True', self.breaking
            )
            raise InvalidFieldError('breaking', exc) from exc

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict; absent fields are omitted.

        Raises:
            InvalidFieldError: If the message does not :meth:`validate`.
        """
        self.validate()
        data: dict[str, Any] = {'type': self.type.format()}
        if not self.scope.is_zero():
            data['scope'] = self.scope.format()
        data['subject'] = self.subject.format()
        if self.breaking:
            data['breaking'] = True
        if not self.body.is_zero():
            data['body'] = self.body.format()
        if self.trailers:
            data['trailers'] = [{'key': t.key, 'value': t.value} for t in self.trailers]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        """Build a message from :meth:`to_dict` output and validate it.

        A ``BREAKING-CHANGE`` trailer sets ``breaking`` even when the
        ``breaking`` key is absent or false.
        """
        commit_type = _decode('type', data.get('type'), CommitType.parse, required=True)
        subject = _decode('subject', data.get('subject'), Subject.parse, required=True)
        scope = _decode('scope', data.get('scope', ''), Scope.parse)
        body = _decode('body', data.get('body', ''), Body.parse)

        breaking = data.get('breaking', False)
        if not isinstance(breaking, bool):
            exc = FieldValidationError('Message', 'breaking must be a boolean', breaking)
            raise InvalidFieldError('breaking', exc) from exc

        raw_trailers = data.get('trailers', [])
        if not isinstance(raw_trailers, list):
            exc = FieldValidationError('Message', 'trailers must be a list', raw_trailers)
            raise InvalidFieldError('trailers', exc) from exc
        trailers: list[Trailer] = []
        for i, item in enumerate(raw_trailers):
            if not isinstance(item, Mapping) or not isinstance(item.get('key'), str):
                exc = FieldValidationError('Trailer', 'expected a table with a string "key"', item)
                raise InvalidFieldError(f'trailers[{i}]', exc) from exc
            value = item.get('value', '')
            if not isinstance(value, str):
                exc = FieldValidationError('Trailer', '"value" must be a string', value)
                raise InvalidFieldError(f'trailers[{i}]', exc) from exc
            trailers.append(Trailer(key=item['key'], value=value))
        breaking = breaking or any(t.key == BREAKING_CHANGE_KEY for t in trailers)

        message = cls(
            type=commit_type,
            subject=subject,
            scope=scope,
            breaking=breaking,
            body=body,
            trailers=tuple(trailers),
        )
        message.validate()
        return message

    def __str__(self) -> str:
        return self.format()


def _decode(stage: str, raw: object, parse: Callable[[str], Any], *, required: bool = False) -> Any:
    if raw is None and required:
        exc = FieldValidationError('Message', f'{stage} is required')
        raise InvalidFieldError(stage, exc) from exc
    if not isinstance(raw, str):
        exc = FieldValidationError('Message', f'{stage} must be a string', raw)
        raise InvalidFieldError(stage, exc) from exc
    try:
        return parse(raw)
    except FieldValidationError as exc:
        raise InvalidFieldError(stage, exc) from exc


def parse_message(raw: str) -> Message:
    """Parse a raw commit message.

    Args:
        raw: The full message. CRLF and CR line endings are accepted.

    Returns:
        The parsed :class:`Message`.

    Raises:
        EmptyMessageError: *raw* is empty or only whitespace.
        HeaderFormatError: The first line is not a Conventional Commit header.
        InvalidFieldError: A field failed validation; ``stage`` names it.
    """
    if not raw.strip():
        raise EmptyMessageError()

    lines = normalize_lines(raw)
    header = parse_header(lines[0])
    message = Message(
        type=header.type,
        subject=header.subject,
        scope=header.scope,
        breaking=header.breaking,
    )
    if len(lines) == 1:
        return message

    content_start = find_content_start(lines)
    if content_start is None:
        return message

    boundary = find_trailer_boundary(lines, content_start)
    try:
        body = extract_body(lines, content_start, boundary.start)
    except FieldValidationError as exc:
        raise InvalidFieldError('body', exc) from exc
    trailers, footer_breaking = extract_trailers(lines, boundary.start)

    return Message(
        type=header.type,
        subject=header.subject,
        scope=header.scope,
        breaking=resolve_breaking(header.breaking, footer_breaking),
        body=body,
        trailers=trailers,
    )
