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

"""Tests for body/trailer segmentation of commit message lines."""

from __future__ import annotations

import pytest
from commitkit.conventional import Body, Trailer
from commitkit.conventional._scan import (
    BoundaryReason,
    extract_body,
    extract_trailers,
    find_content_start,
    find_trailer_boundary,
    is_trailer_like,
    normalize_lines,
    resolve_breaking,
)
from commitkit.errors import FieldValidationError


def _lines(text: str) -> list[str]:
    return normalize_lines(text)


class TestNormalizeLines:
    """Tests for normalize_lines()."""

    def test_crlf(self) -> None:
        """CRLF line endings become LF."""
        assert normalize_lines('a\r\nb\r\nc') == ['a', 'b', 'c']

    def test_lone_cr(self) -> None:
        """A lone CR also ends a line."""
        assert normalize_lines('a\rb') == ['a', 'b']

    def test_trims_message(self) -> None:
        """Leading and trailing whitespace of the whole message is removed."""
        assert normalize_lines('\n\n  feat: x  \n\n') == ['feat: x']

    def test_empty(self) -> None:
        """Empty input yields a single empty line."""
        assert normalize_lines('') == ['']

    def test_inner_blank_lines_kept(self) -> None:
        """Blank lines inside the message survive."""
        assert normalize_lines('a\n\n\nb') == ['a', '', '', 'b']


class TestFindContentStart:
    """Tests for find_content_start()."""

    def test_header_only(self) -> None:
        """No lines after the header means no content."""
        assert find_content_start(['feat: x']) is None

    def test_only_blank_lines(self) -> None:
        """Blank lines after the header are not content."""
        assert find_content_start(['feat: x', '', '   ', '\t']) is None

    def test_skips_blank_lines(self) -> None:
        """The first non-blank line after the header is returned."""
        assert find_content_start(['feat: x', '', '', 'body']) == 3

    def test_no_separator(self) -> None:
        """Content directly under the header starts at index 1."""
        assert find_content_start(['feat: x', 'body']) == 1


class TestIsTrailerLike:
    """Tests for is_trailer_like()."""

    @pytest.mark.parametrize(
        'line',
        [
            'Fixes: #123',
            'Reviewed-by: Alice',
            'BREAKING-CHANGE: removed',
            'BREAKING CHANGE: removed',
            'BREAKING CHANGE without colon',
            '  Signed-off-by: Bob  ',
            'Acked-by:',
        ],
    )
    def test_trailer_like(self, line: str) -> None:
        """Footer-shaped lines are recognised."""
        assert is_trailer_like(line)

    @pytest.mark.parametrize(
        'line',
        [
            '',
            '   ',
            'Just a sentence.',
            'two words: value',
            '1st: value',
            'snake_case: value',
            'Fixes #123',
        ],
    )
    def test_not_trailer_like(self, line: str) -> None:
        """Prose and malformed keys are not footers."""
        assert not is_trailer_like(line)


class TestFindTrailerBoundary:
    """Tests for the backward trailer-boundary walk."""

    def test_blank_separator(self) -> None:
        """A blank line above a trailer block is the separator."""
        lines = _lines('feat: x\n\nBody text.\n\nFixes: #1\nRefs: #2')
        boundary = find_trailer_boundary(lines, 2)
        assert boundary.reason is BoundaryReason.SEPARATOR
        assert boundary.start == 4

    def test_all_trailers(self) -> None:
        """Trailers with no body reach the region start."""
        lines = _lines('fix: x\n\nFixes: #123\nReviewed-by: Alice')
        boundary = find_trailer_boundary(lines, 2)
        assert boundary.reason is BoundaryReason.ALL_TRAILERS
        assert boundary.start == 2

    def test_all_trailers_without_blank_after_header(self) -> None:
        """Trailers directly under the header are still all trailers."""
        lines = _lines('fix: x\nFixes: #123')
        boundary = find_trailer_boundary(lines, 1)
        assert boundary.reason is BoundaryReason.ALL_TRAILERS
        assert boundary.start == 1

    def test_body_only(self) -> None:
        """A prose last line means there are no trailers."""
        lines = _lines('feat: x\n\nFirst paragraph.\n\nSecond paragraph.')
        boundary = find_trailer_boundary(lines, 2)
        assert boundary.reason is BoundaryReason.NO_TRAILERS
        assert boundary.start is None

    def test_trailer_like_line_inside_body_paragraph(self) -> None:
        """A Key: value line under prose in the same paragraph is body."""
        lines = _lines('feat: x\n\nSee the notes below\nNote: this is prose')
        boundary = find_trailer_boundary(lines, 2)
        assert boundary.reason is BoundaryReason.NO_TRAILERS
        assert boundary.start is None

    def test_trailer_like_line_mid_body_not_boundary(self) -> None:
        """A Key: value line in an earlier paragraph does not start trailers."""
        lines = _lines('feat: x\n\nIntro.\nNote: inline\n\nClosing words.')
        boundary = find_trailer_boundary(lines, 2)
        assert boundary.start is None

    def test_body_with_paragraphs_and_trailers(self) -> None:
        """Only the final blank line before the trailer block separates."""
        lines = _lines('feat: x\n\nPara one.\n\nPara two.\n\nRefs: #9')
        boundary = find_trailer_boundary(lines, 2)
        assert boundary.start == 6
        assert lines[boundary.start] == 'Refs: #9'

    def test_trailing_blank_lines_ignored(self) -> None:
        """Blank lines after the last content line are skipped."""
        lines = ['feat: x', '', 'Body.', '', 'Refs: #1', '', '']
        boundary = find_trailer_boundary(lines, 2)
        assert boundary.reason is BoundaryReason.SEPARATOR
        assert boundary.start == 4

    def test_empty_region(self) -> None:
        """A region with nothing but blank lines has no trailers."""
        boundary = find_trailer_boundary(['feat: x', '', ''], 1)
        assert boundary.start is None


class TestExtractBody:
    """Tests for extract_body()."""

    def test_no_trailers(self) -> None:
        """Without trailers the body runs to the end."""
        lines = _lines('feat: x\n\nLine one.\n\nLine two.')
        assert extract_body(lines, 2, None) == Body('Line one.\n\nLine two.')

    def test_stops_before_separator(self) -> None:
        """Blank lines above the trailer block are excluded."""
        lines = ['feat: x', '', 'Body.', '', '', 'Refs: #1']
        assert extract_body(lines, 2, 5) == Body('Body.')

    def test_all_trailers_means_no_body(self) -> None:
        """When trailers start at the content start, the body is empty."""
        lines = _lines('fix: x\n\nFixes: #1')
        assert extract_body(lines, 2, 2).is_zero()

    def test_invalid_body_raises(self) -> None:
        """Body validation errors propagate."""
        lines = ['feat: x', ''] + ['line'] * 101
        with pytest.raises(FieldValidationError, match='too many lines'):
            extract_body(lines, 2, None)


class TestExtractTrailers:
    """Tests for extract_trailers()."""

    def test_none(self) -> None:
        """No trailer block yields nothing."""
        assert extract_trailers(['feat: x'], None) == ((), False)

    def test_order_and_duplicates_kept(self) -> None:
        """Trailers keep their order and duplicates."""
        lines = ['fix: x', '', 'Co-authored-by: A', 'Refs: #1', 'Co-authored-by: A']
        trailers, breaking = extract_trailers(lines, 2)
        assert trailers == (
            Trailer('Co-authored-by', 'A'),
            Trailer('Refs', '#1'),
            Trailer('Co-authored-by', 'A'),
        )
        assert breaking is False

    def test_malformed_lines_dropped(self) -> None:
        """Lines that are not valid trailers are silently skipped."""
        lines = ['fix: x', '', 'Refs: #1', 'BREAKING CHANGE without colon', 'Bad key: v', 'Acked-by: B']
        trailers, breaking = extract_trailers(lines, 2)
        assert trailers == (Trailer('Refs', '#1'), Trailer('Acked-by', 'B'))
        assert breaking is False

    def test_space_form_breaking_not_stored(self) -> None:
        """BREAKING CHANGE: sets the flag without adding a trailer."""
        lines = ['feat: x', '', 'BREAKING CHANGE: removes old endpoint']
        trailers, breaking = extract_trailers(lines, 2)
        assert trailers == ()
        assert breaking is True

    def test_hyphen_form_breaking_stored(self) -> None:
        """BREAKING-CHANGE is a regular trailer that also sets the flag."""
        lines = ['feat: x', '', 'BREAKING-CHANGE: removes old endpoint']
        trailers, breaking = extract_trailers(lines, 2)
        assert trailers == (Trailer('BREAKING-CHANGE', 'removes old endpoint'),)
        assert breaking is True

    def test_blank_lines_skipped(self) -> None:
        """Blank lines inside the trailer block are ignored."""
        lines = ['fix: x', '', 'Refs: #1', '', 'Refs: #2']
        trailers, _ = extract_trailers(lines, 2)
        assert [t.value for t in trailers] == ['#1', '#2']


class TestResolveBreaking:
    """Tests for resolve_breaking()."""

    @pytest.mark.parametrize(
        ('header', 'footer', 'expected'),
        [(False, False, False), (True, False, True), (False, True, True), (True, True, True)],
    )
    def test_logical_or(self, header: bool, footer: bool, expected: bool) -> None:
        """Either signal makes the message breaking."""
        assert resolve_breaking(header, footer) is expected
