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

r"""Conventional Commit message model.

Parses free-form commit text into a :class:`Message` and renders it back
to canonical text.

Usage::

    from commitkit.conventional import BumpType, CommitType, parse_message

    msg = parse_message('feat(api): add pagination\n\nRefs: #42')
    assert msg.type is CommitType.FEAT
    assert str(msg.scope) == 'api'
    assert msg.trailers[0].key == 'Refs'
    assert msg.bump == BumpType.MINOR

    # Canonical text round-trips through the parser.
    assert parse_message(msg.format()) == msg

    # Header only, safe for logs.
    assert msg.summary() == 'feat(api): add pagination'
"""

from commitkit.conventional._bump import MINOR_TYPES, PATCH_TYPES, BumpType, bump_for
from commitkit.conventional._fields import (
    BODY_MAX_BYTES,
    BODY_MAX_LINES,
    SCOPE_MAX_LEN,
    SUBJECT_MAX_LEN,
    TRAILER_KEY_MAX_LEN,
    TRAILER_KEY_RE,
    TRAILER_VALUE_MAX_LEN,
    Body,
    CommitType,
    FieldValue,
    Scope,
    Subject,
    Trailer,
)
from commitkit.conventional._message import HEADER_RE, Header, Message, parse_header, parse_message
from commitkit.conventional._scan import BREAKING_CHANGE_KEY, BREAKING_CHANGE_PREFIX

__all__ = [
    'BODY_MAX_BYTES',
    'BODY_MAX_LINES',
    'BREAKING_CHANGE_KEY',
    'BREAKING_CHANGE_PREFIX',
    'HEADER_RE',
    'MINOR_TYPES',
    'PATCH_TYPES',
    'SCOPE_MAX_LEN',
    'SUBJECT_MAX_LEN',
    'TRAILER_KEY_MAX_LEN',
    'TRAILER_KEY_RE',
    'TRAILER_VALUE_MAX_LEN',
    'Body',
    'BumpType',
    'CommitType',
    'FieldValue',
    'Header',
    'Message',
    'Scope',
    'Subject',
    'Trailer',
    'bump_for',
    'parse_header',
    'parse_message',
]
