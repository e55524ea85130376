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

"""Exception hierarchy for commitkit.

Every error raised by commitkit derives from :class:`CommitKitError`,
which is itself a :class:`ValueError` so callers that only care about
"bad input" can catch the builtin.

::

    CommitKitError
    ├── EmptyMessageError      raw message is empty or whitespace
    ├── HeaderFormatError      first line is not ``type(scope)!: subject``
    ├── FieldValidationError   a single field value is malformed
    ├── InvalidFieldError      wraps a field error with the parse stage
    └── ConfigError            invalid ``[tool.commitkit]`` settings

Malformed trailer lines are deliberately **not** represented here: the
parser drops them instead of failing.
"""

from __future__ import annotations

__all__ = [
    'CommitKitError',
    'ConfigError',
    'EmptyMessageError',
    'FieldValidationError',
    'HeaderFormatError',
    'InvalidFieldError',
]


class CommitKitError(ValueError):
    """Base class for all commitkit errors."""


class EmptyMessageError(CommitKitError):
    """Raised when a commit message is empty or contains only whitespace."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__('message cannot be empty')


class HeaderFormatError(CommitKitError):
    """Raised when the header line does not match the Conventional Commits grammar.

    Attributes:
        header: The offending header line (already trimmed).
    """

    def __init__(self, header: str) -> None:
        """Initialize with the header that failed to match."""
        self.header = header
        super().__init__(f'invalid Conventional Commit header format: {header!r}')


class FieldValidationError(CommitKitError):
    """Raised by a field value type when its content is invalid.

    Attributes:
        field: Name of the value type (``"Scope"``, ``"Trailer"``, ...).
        reason: Human-readable description of the problem.
        value: The rejected value.
    """

    def __init__(self, field: str, reason: str, value: object = None) -> None:
        """Initialize with the field name, reason and offending value."""
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f'invalid {field}: {reason}')


class InvalidFieldError(CommitKitError):
    """Tags a field failure with the stage of message parsing that hit it.

    Always raised ``from`` the underlying :class:`FieldValidationError`,
    so ``__cause__`` carries the original error.

    Attributes:
        stage: Which part of the message failed (``"type"``, ``"scope"``,
            ``"subject"``, ``"body"``, ``"breaking"`` or ``"trailers[<i>]"``).
    """

    def __init__(self, stage: str, cause: Exception) -> None:
        """Initialize with the stage name and the wrapped error."""
        self.stage = stage
        super().__init__(f'invalid {stage}: {cause}')


class ConfigError(CommitKitError):
    """Raised when commitkit configuration is malformed."""
