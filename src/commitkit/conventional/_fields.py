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

r"""Field value types of a Conventional Commit message.

Each part of a message (type, scope, subject, body, trailer) is a small
immutable value with the same contract, :class:`FieldValue`:

- ``parse(text)`` (classmethod) normalises raw text and validates it.
- ``validate()`` raises :class:`~commitkit.errors.FieldValidationError`.
- ``format()`` renders the canonical text.
- ``is_zero()`` reports the "absent" value.

There is no shared base class; the protocol is the only thing the types
have in common.

.. list-table::
   :header-rows: 1

   * - Type
     - Rule
   * - :class:`CommitType`
     - one of a fixed set (``feat``, ``fix``, ...), case-insensitive
   * - :class:`Scope`
     - optional, lowercase ``[a-z0-9._/-]``, 1–32 chars
   * - :class:`Subject`
     - single line, 1–72 chars
   * - :class:`Body`
     - LF only, no surrounding blank lines, ≤ 8 KiB and ≤ 100 lines
   * - :class:`Trailer`
     - ``Key: value``, key ``^[A-Za-z][A-Za-z0-9-]*$``

Pure implementation: depends only on ``re`` and :mod:`commitkit.errors`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from commitkit.errors import FieldValidationError

__all__ = [
    'BODY_MAX_BYTES',
    'BODY_MAX_LINES',
    'SCOPE_MAX_LEN',
    'SCOPE_RE',
    'SUBJECT_MAX_LEN',
    'TRAILER_KEY_MAX_LEN',
    'TRAILER_KEY_RE',
    'TRAILER_VALUE_MAX_LEN',
    'Body',
    'CommitType',
    'FieldValue',
    'Scope',
    'Subject',
    'Trailer',
]

SCOPE_RE: re.Pattern[str] = re.compile(r'^[a-z0-9]([a-z0-9._/-]*[a-z0-9])?$')
SCOPE_MAX_LEN = 32

SUBJECT_MAX_LEN = 72

BODY_MAX_BYTES = 8 * 1024
BODY_MAX_LINES = 100

# Git trailer keys: a letter, then letters, digits or hyphens.
TRAILER_KEY_RE: re.Pattern[str] = re.compile(r'^[A-Za-z][A-Za-z0-9-]*$')
TRAILER_KEY_MAX_LEN = 64
TRAILER_VALUE_MAX_LEN = 256


@runtime_checkable
class FieldValue(Protocol):
    """Contract shared by every message field value."""

    def validate(self) -> None:
        """Raise :class:`FieldValidationError` if the value is malformed."""
        ...

    def format(self) -> str:
        """Return the canonical text of the value."""
        ...

    def is_zero(self) -> bool:
        """Return ``True`` for the empty/absent value."""
        ...


class CommitType(Enum):
    """The fixed set of commit types."""

    FEAT = 'feat'
    FIX = 'fix'
    DOCS = 'docs'
    STYLE = 'style'
    REFACTOR = 'refactor'
    PERF = 'perf'
    TEST = 'test'
    BUILD = 'build'
    CI = 'ci'
    CHORE = 'chore'
    REVERT = 'revert'

    @classmethod
    def parse(cls, text: str) -> CommitType:
        """Parse a commit type, ignoring case and surrounding whitespace.

        >>> CommitType.parse('Feat')
        <CommitType.FEAT: 'feat'>
        """
        if text == '':
            raise FieldValidationError('Type', 'type cannot be empty', text)
        normalized = text.strip().lower()
        if not normalized:
            raise FieldValidationError('Type', f'type cannot contain only whitespace: {text!r}', text)
        try:
            return cls(normalized)
        except ValueError:
            raise FieldValidationError('Type', f'unknown type {text!r}', text) from None

    def validate(self) -> None:
        """Enum members are always valid."""

    def format(self) -> str:
        """Return the lowercase type name."""
        return self.value

    def is_zero(self) -> bool:
        """A commit type is never absent."""
        return False

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Scope:
    """Optional noun naming the area of the codebase a commit touches.

    The empty scope is valid and means "no scope".
    """

    value: str = ''

    @classmethod
    def parse(cls, text: str) -> Scope:
        """Lowercase, strip and validate a scope."""
        scope = cls(text.strip().lower())
        scope.validate()
        return scope

    def validate(self) -> None:
        """Check length, whitespace and character set."""
        if self.is_zero():
            return
        if len(self.value) > SCOPE_MAX_LEN:
            raise FieldValidationError(
                'Scope', f'{self.value!r} is too long (maximum length: {SCOPE_MAX_LEN})', self.value
            )
        if any(ch in self.value for ch in ' \t\n\r'):
            raise FieldValidationError('Scope', f'{self.value!r} contains whitespace', self.value)
        if not SCOPE_RE.match(self.value):
            raise FieldValidationError(
                'Scope',
                f'{self.value!r} must be lowercase alphanumeric with optional dots, '
                'underscores, slashes or hyphens',
                self.value,
            )

    def format(self) -> str:
        """Return the scope text (without parentheses)."""
        return self.value

    def is_zero(self) -> bool:
        """``True`` when no scope is set."""
        return not self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Subject:
    """Short single-line summary following the header's colon."""

    value: str = ''

    @classmethod
    def parse(cls, text: str) -> Subject:
        """Strip and validate a subject."""
        subject = cls(text.strip())
        subject.validate()
        return subject

    def validate(self) -> None:
        """Check the subject is one non-blank line of at most 72 characters."""
        if self.is_zero():
            return
        if '\n' in self.value or '\r' in self.value:
            raise FieldValidationError('Subject', f'{self.value!r} contains newline characters', self.value)
        if len(self.value) > SUBJECT_MAX_LEN:
            raise FieldValidationError(
                'Subject',
                f'too long: {len(self.value)} characters (maximum: {SUBJECT_MAX_LEN})',
                self.value,
            )
        if not self.value.strip():
            raise FieldValidationError('Subject', f'{self.value!r} contains only whitespace', self.value)

    def format(self) -> str:
        """Return the subject text."""
        return self.value

    def is_zero(self) -> bool:
        """``True`` for the empty subject."""
        return not self.value

    def __str__(self) -> str:
        return self.value


def _trim_blank_lines(text: str) -> str:
    lines = text.split('\n')
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    end = len(lines)
    while end > start and not lines[end - 1].strip():
        end -= 1
    return '\n'.join(lines[start:end])


@dataclass(frozen=True)
class Body:
    """Free-form explanatory text between the header and the trailers.

    Internal blank lines (paragraph breaks) are kept; leading and
    trailing blank lines are not part of the body.
    """

    value: str = ''

    @classmethod
    def parse(cls, text: str) -> Body:
        """Normalise line endings, trim blank edge lines and validate."""
        normalized = text.replace('\r\n', '\n').replace('\r', '')
        body = cls(_trim_blank_lines(normalized))
        body.validate()
        return body

    def validate(self) -> None:
        """Check for raw CRs and the size limits."""
        if self.is_zero():
            return
        if '\r' in self.value:
            raise FieldValidationError('Body', 'contains raw CR characters (line endings must be LF)')
        size = len(self.value.encode('utf-8'))
        if size > BODY_MAX_BYTES:
            raise FieldValidationError('Body', f'too large: {size} bytes (maximum: {BODY_MAX_BYTES} bytes)')
        line_count = self.value.count('\n') + 1
        if line_count > BODY_MAX_LINES:
            raise FieldValidationError(
                'Body', f'too many lines: {line_count} lines (maximum: {BODY_MAX_LINES} lines)'
            )

    def format(self) -> str:
        """Return the body text verbatim."""
        return self.value

    def is_zero(self) -> bool:
        """``True`` when there is no body."""
        return not self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Trailer:
    """A ``Key: value`` footer line.

    Attributes:
        key: Trailer token, e.g. ``"Reviewed-by"``.
        value: Trailer value; may be empty.
    """

    key: str
    value: str = ''

    @classmethod
    def parse(cls, line: str) -> Trailer:
        """Split ``Key: value`` on the first colon and validate both halves.

        >>> Trailer.parse('Fixes: #123')
        Trailer(key='Fixes', value='#123')
        """
        normalized = line.strip()
        if not normalized:
            raise FieldValidationError('Trailer', 'trailer cannot be empty', line)
        key, sep, value = normalized.partition(':')
        if not sep:
            raise FieldValidationError('Trailer', f'missing colon separator: {line!r}', line)
        trailer = cls(key=key.strip(), value=value.strip())
        trailer.validate()
        return trailer

    def validate(self) -> None:
        """Check the key grammar and the value length."""
        if self.is_zero():
            return
        if not self.key:
            raise FieldValidationError('Trailer', 'key cannot be empty', self.key)
        if len(self.key) > TRAILER_KEY_MAX_LEN:
            raise FieldValidationError(
                'Trailer', f'key {self.key!r} is too long (maximum length: {TRAILER_KEY_MAX_LEN})', self.key
            )
        if not TRAILER_KEY_RE.match(self.key):
            raise FieldValidationError(
                'Trailer',
                f'key {self.key!r} must start with a letter and contain only letters, digits and hyphens',
                self.key,
            )
        if '\n' in self.value or '\r' in self.value:
            raise FieldValidationError('Trailer', f'value {self.value!r} contains newline characters', self.value)
        if len(self.value) > TRAILER_VALUE_MAX_LEN:
            raise FieldValidationError(
                'Trailer',
                f'value is too long: {len(self.value)} characters (maximum: {TRAILER_VALUE_MAX_LEN})',
                self.value,
            )

    def format(self) -> str:
        """Render as ``key: value``, or ``key:`` when the value is empty."""
        if self.is_zero():
            return ''
        if not self.value:
            return f'{self.key}:'
        return f'{self.key}: {self.value}'

    def is_zero(self) -> bool:
        """``True`` when both key and value are empty."""
        return not self.key and not self.value

    def __str__(self) -> str:
        return self.format()
