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

"""Tests for the commitkit command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from commitkit.cli import EXIT_INVALID, EXIT_OK, EXIT_USAGE, _strip_comments, build_parser, main


def _write(tmp_path: Path, text: str, name: str = 'COMMIT_EDITMSG') -> str:
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return str(path)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from the repository checkout."""
    monkeypatch.chdir(tmp_path)


class TestParseCommand:
    """Tests for ``commitkit parse``."""

    def test_prints_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The parsed message and its bump are printed as JSON."""
        path = _write(tmp_path, 'fix(auth)!: change flow\n\nRefs: #1\n')
        assert main(['parse', path]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data == {
            'type': 'fix',
            'scope': 'auth',
            'subject': 'change flow',
            'breaking': True,
            'trailers': [{'key': 'Refs', 'value': '#1'}],
            'bump': 'major',
        }

    def test_invalid_message(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Unparseable input exits 1 with an error on stderr."""
        path = _write(tmp_path, 'not a conventional commit\n')
        assert main(['parse', path]) == EXIT_INVALID
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'error:' in captured.err

    def test_empty_message(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Empty input is reported."""
        path = _write(tmp_path, '\n\n')
        assert main(['parse', path]) == EXIT_INVALID
        assert 'message cannot be empty' in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An unreadable file is a usage error."""
        assert main(['parse', str(tmp_path / 'nope.txt')]) == EXIT_USAGE
        assert 'cannot read' in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A file that is not UTF-8 is a usage error, not a crash."""
        path = tmp_path / 'latin1.txt'
        path.write_bytes(b'feat: caf\xe9\n')
        assert main(['parse', str(path)]) == EXIT_USAGE
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'cannot read' in captured.err

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a file the message is read from stdin."""
        monkeypatch.setattr('sys.stdin', io.StringIO('docs: explain setup'))
        assert main(['parse']) == EXIT_OK
        assert json.loads(capsys.readouterr().out)['bump'] == 'none'


class TestFormatCommand:
    """Tests for ``commitkit format``."""

    def test_canonical_text(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The message is printed in canonical form."""
        path = _write(tmp_path, 'feat(API):   add x\r\n\r\n\r\nBody.\r\n\r\nBREAKING CHANGE: y\r\n')
        assert main(['format', path]) == EXIT_OK
        assert capsys.readouterr().out == 'feat(api)!: add x\n\nBody.\n'

    def test_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--summary prints only the header line."""
        path = _write(tmp_path, 'fix: x\n\nLong body.\n\nSigned-off-by: A <a@example.com>\n')
        assert main(['format', '--summary', path]) == EXIT_OK
        assert capsys.readouterr().out == 'fix: x\n'

    def test_stdin_dash(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """``-`` reads from stdin."""
        monkeypatch.setattr('sys.stdin', io.StringIO('chore: tidy\n'))
        assert main(['format', '-']) == EXIT_OK
        assert capsys.readouterr().out == 'chore: tidy\n'

    def test_invalid(self, tmp_path: Path) -> None:
        """Invalid input exits 1."""
        assert main(['format', _write(tmp_path, 'feature: x')]) == EXIT_INVALID


class TestCheckCommand:
    """Tests for ``commitkit check``."""

    def test_ok(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A valid message passes with the default config."""
        path = _write(tmp_path, 'feat: add x\n')
        assert main(['check', path]) == EXIT_OK
        assert 'feat: add x' in capsys.readouterr().err

    def test_git_comments_ignored(self, tmp_path: Path) -> None:
        """Lines starting with # are stripped before parsing."""
        text = (
            '# leading comment\n'
            'fix(db): handle timeouts\n'
            '\n'
            '# Please enter the commit message for your changes.\n'
            '# Lines starting with # will be ignored.\n'
        )
        assert main(['check', _write(tmp_path, text)]) == EXIT_OK

    def test_policy_violation(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Policy violations exit 1 and name the rule."""
        (tmp_path / 'commitkit.toml').write_text('require_scope = true\n')
        path = _write(tmp_path, 'fix: x\n')
        assert main(['check', path]) == EXIT_INVALID
        assert 'require_scope' in capsys.readouterr().err

    def test_explicit_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--config points at a specific file."""
        config = tmp_path / 'strict.toml'
        config.write_text('allowed_types = ["fix"]\nforbid_breaking = true\n')
        path = _write(tmp_path, 'feat!: x\n')
        assert main(['--config', str(config), 'check', path]) == EXIT_INVALID
        err = capsys.readouterr().err
        assert 'allowed_types' in err
        assert 'forbid_breaking' in err

    def test_bad_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A broken config is a usage error."""
        (tmp_path / 'commitkit.toml').write_text('colour = "red"\n')
        assert main(['check', _write(tmp_path, 'feat: x\n')]) == EXIT_USAGE
        assert 'config error' in capsys.readouterr().err

    def test_unparseable(self, tmp_path: Path) -> None:
        """Malformed messages fail the check."""
        assert main(['check', _write(tmp_path, 'WIP\n')]) == EXIT_INVALID


class TestParser:
    """Tests for the argument parser."""

    def test_subcommand_required(self) -> None:
        """Running without a subcommand is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_global_flags(self) -> None:
        """Global flags parse before the subcommand."""
        args = build_parser().parse_args(['-v', '--json-log', 'format', '--summary', 'msg.txt'])
        assert args.verbose is True
        assert args.json_log is True
        assert args.summary is True
        assert args.file == 'msg.txt'

    def test_file_defaults_to_stdin(self) -> None:
        """The file argument defaults to ``-``."""
        assert build_parser().parse_args(['check']).file == '-'


class TestStripComments:
    """Tests for _strip_comments()."""

    def test_only_leading_hash(self) -> None:
        """Only lines that start with # are dropped."""
        assert _strip_comments('fix: x\n\nRefs: #1\n# comment') == 'fix: x\n\nRefs: #1'

    def test_other_line_separators_untouched(self) -> None:
        """Form feeds and Unicode separators are not treated as line breaks."""
        text = 'fix: x\n\npage\x0cbreak same line\n# comment'
        assert _strip_comments(text) == 'fix: x\n\npage\x0cbreak same line'
