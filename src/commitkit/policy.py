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

"""Repository policy checks on parsed messages.

A message that parses is well-formed; a repository may still restrict
which messages it accepts. :func:`check_message` reports every rule of a
:class:`~commitkit.config.CommitKitConfig` that a message breaks.
"""

from __future__ import annotations

from dataclasses import dataclass

from commitkit.config import CommitKitConfig
from commitkit.conventional import Message

__all__ = [
    'Violation',
    'check_message',
]


@dataclass(frozen=True)
class Violation:
    """A broken policy rule.

    Attributes:
        rule: Config key of the rule (e.g. ``"require_scope"``).
        message: Human-readable explanation.
        hint: Suggested fix.
    """

    rule: str
    message: str
    hint: str = ''


def check_message(message: Message, config: CommitKitConfig) -> list[Violation]:
    """Return the policy violations of *message*, in config-key order."""
    violations: list[Violation] = []
    if message.type not in config.allowed_types:
        allowed = ', '.join(sorted(t.value for t in config.allowed_types))
        violations.append(
            Violation(
                rule='allowed_types',
                message=f'type {message.type.value!r} is not allowed in this repository',
                hint=f'Use one of: {allowed}.',
            )
        )
    if config.require_scope and message.scope.is_zero():
        violations.append(
            Violation(
                rule='require_scope',
                message='a scope is required',
                hint=f'Write the header as {message.type.value}(<scope>): {message.subject}',
            )
        )
    if config.forbid_breaking and message.breaking:
        violations.append(
            Violation(
                rule='forbid_breaking',
                message='breaking changes are not accepted here',
                hint='Drop the "!" marker and any BREAKING CHANGE footer, or target another branch.',
            )
        )
    return violations
