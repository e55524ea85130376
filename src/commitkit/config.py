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

"""Configuration for commitkit.

Settings are read from the first of these files found in the project
directory:

1. ``commitkit.toml`` (top-level keys)
2. ``.commitkit.toml`` (top-level keys)
3. ``pyproject.toml`` (the ``[tool.commitkit]`` table)

Example ``pyproject.toml``::

    [tool.commitkit]
    allowed_types = ["feat", "fix", "docs", "chore"]
    require_scope = true
    forbid_breaking = false

A missing file or table yields :class:`CommitKitConfig` defaults.
Unknown keys and wrongly typed values raise
:class:`~commitkit.errors.ConfigError`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from commitkit.conventional import CommitType
from commitkit.errors import ConfigError, FieldValidationError
from commitkit.logging import get_logger

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

__all__ = [
    'CONFIG_FILENAMES',
    'CommitKitConfig',
    'find_config_file',
    'load_config',
]

logger = get_logger(__name__)

CONFIG_FILENAMES: tuple[str, ...] = ('commitkit.toml', '.commitkit.toml', 'pyproject.toml')

_VALID_KEYS: frozenset[str] = frozenset({'allowed_types', 'require_scope', 'forbid_breaking'})


@dataclass(frozen=True)
class CommitKitConfig:
    """Repository policy applied by ``commitkit check``.

    Attributes:
        allowed_types: Commit types accepted in this repository.
        require_scope: Reject messages without a ``(scope)``.
        forbid_breaking: Reject breaking changes (e.g. on a maintenance
            branch).
    """

    allowed_types: frozenset[CommitType] = field(default_factory=lambda: frozenset(CommitType))
    require_scope: bool = False
    forbid_breaking: bool = False


def _parse_config(raw: dict[str, Any]) -> CommitKitConfig:
    """Validate a raw TOML table and build a :class:`CommitKitConfig`."""
    unknown = sorted(set(raw) - _VALID_KEYS)
    if unknown:
        raise ConfigError(f'Unknown key(s) in commitkit config: {", ".join(unknown)}')

    kwargs: dict[str, Any] = {}
    for key in ('require_scope', 'forbid_breaking'):
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ConfigError(f'{key} must be a boolean, got {type(raw[key]).__name__}')
            kwargs[key] = raw[key]

    if 'allowed_types' in raw:
        value = raw['allowed_types']
        if not isinstance(value, list):
            raise ConfigError(f'allowed_types must be a list, got {type(value).__name__}')
        if not value:
            raise ConfigError('allowed_types must not be empty')
        types: set[CommitType] = set()
        for i, item in enumerate(value):
            if not isinstance(item, str):
                raise ConfigError(f'allowed_types[{i}] must be a string, got {type(item).__name__}')
            try:
                types.add(CommitType.parse(item))
            except FieldValidationError as exc:
                raise ConfigError(f'allowed_types[{i}]: {exc.reason}') from exc
        kwargs['allowed_types'] = frozenset(types)

    return CommitKitConfig(**kwargs)


def find_config_file(directory: Path) -> Path | None:
    """Return the first config file in *directory*, or ``None``.

    ``pyproject.toml`` only counts when it has a ``[tool.commitkit]`` table.
    """
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if not candidate.is_file():
            continue
        if name != 'pyproject.toml':
            return candidate
        if 'commitkit' in _tool_table(_read_toml(candidate), candidate):
            return candidate
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding='utf-8'))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f'{path}: invalid TOML: {exc}') from exc


def _tool_table(data: dict[str, Any], path: Path) -> dict[str, Any]:
    tool = data.get('tool', {})
    if not isinstance(tool, dict):
        raise ConfigError(f'{path}: [tool] must be a table, got {type(tool).__name__}')
    return tool


def load_config(path: Path | None = None) -> CommitKitConfig:
    """Load commitkit configuration.

    Args:
        path: A config file, or a directory to search with
            :func:`find_config_file`. Defaults to the current directory.

    Returns:
        The parsed configuration, or defaults if nothing is configured.

    Raises:
        ConfigError: The file is not valid TOML or holds invalid settings.
    """
    target = path if path is not None else Path.cwd()
    config_file = find_config_file(target) if target.is_dir() else target
    if config_file is None:
        logger.debug('config_not_found', directory=str(target))
        return CommitKitConfig()
    if not config_file.is_file():
        raise ConfigError(f'Config file not found: {config_file}')

    data = _read_toml(config_file)
    if config_file.name == 'pyproject.toml':
        data = _tool_table(data, config_file).get('commitkit', {})
    if not isinstance(data, dict):
        raise ConfigError(f'{config_file}: [tool.commitkit] must be a table')

    logger.debug('config_loaded', path=str(config_file))
    return _parse_config(data)
