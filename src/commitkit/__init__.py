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

"""commitkit: Conventional Commit message parsing and formatting.

Release tooling uses commitkit to turn commit text into structured data
(type, scope, subject, breaking flag, body, trailers) and to derive the
semver bump a commit calls for.
"""

from commitkit.conventional import BumpType, CommitType, Message, Trailer, parse_message
from commitkit.errors import (
    CommitKitError,
    EmptyMessageError,
    HeaderFormatError,
    InvalidFieldError,
)

__version__ = '0.1.0'

__all__ = [
    'BumpType',
    'CommitKitError',
    'CommitType',
    'EmptyMessageError',
    'HeaderFormatError',
    'InvalidFieldError',
    'Message',
    'Trailer',
    '__version__',
    'parse_message',
]
