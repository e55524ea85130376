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

"""Semver bump implied by a single commit message.

Major is only reachable through a breaking change (header ``!`` or a
breaking footer); the commit type decides between minor, patch and none.
Combining the bumps of several commits is left to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from commitkit.conventional._fields import CommitType
from commitkit.errors import FieldValidationError

if TYPE_CHECKING:
    from commitkit.conventional._message import Message

__all__ = [
    'MINOR_TYPES',
    'PATCH_TYPES',
    'BumpType',
    'bump_for',
]

MINOR_TYPES: frozenset[CommitType] = frozenset({CommitType.FEAT})
PATCH_TYPES: frozenset[CommitType] = frozenset({CommitType.FIX, CommitType.PERF})


class BumpType(Enum):
    """Semver bump types, highest first."""

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'

    @classmethod
    def parse(cls, text: str) -> BumpType:
        """Parse ``major``/``Major``/``MAJOR`` and friends.

        Mixed spellings such as ``mAjOr`` are rejected.
        """
        if text in (text.lower(), text.title(), text.upper()):
            for member in cls:
                if member.value == text.lower():
                    return member
        raise FieldValidationError('Bump', f'unknown bump {text!r}', text)

    def __str__(self) -> str:
        return self.value


def bump_for(message: Message) -> BumpType:
    """Return the bump a single commit calls for.

    >>> from commitkit.conventional import parse_message
    >>> bump_for(parse_message('fix(auth): handle expired tokens'))
    <BumpType.PATCH: 'patch'>
    """
    if message.breaking:
        return BumpType.MAJOR
    if message.type in MINOR_TYPES:
        return BumpType.MINOR
    if message.type in PATCH_TYPES:
        return BumpType.PATCH
    return BumpType.NONE
