# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for glob expansion and input resolution."""

from pathlib import Path

import pytest

from stylecheck.discovery.globbing import expand_globs, split_patterns
from stylecheck.discovery.ignore import IgnoreMatcher
from stylecheck.discovery.resolver import build_file_patterns, resolve_code_filename, resolve_inputs
from stylecheck.errors import ConfigurationError
from stylecheck.models import DisabledRange, FileInput, InlineInput
from stylecheck.options import LintOptions


def test_split_patterns_separates_negations() -> None:
    assert split_patterns(["*.css", "!b.css", "", "!"]) == (["*.css"], ["b.css"])


def test_expand_globs_orders_per_pattern_and_dedupes(css_project: Path) -> None:
    paths = expand_globs(["styles/*.css", "*.css", "**/*.css"], cwd=css_project)

    assert paths[:3] == ["styles/main.css", "a.css", "b.css"]
    assert paths.count("a.css") == 1
    assert "notes.txt" not in paths


def test_expand_globs_applies_negations_anywhere(css_project: Path) -> None:
    assert expand_globs(["!b.css", "*.css"], cwd=css_project) == ["a.css"]


def test_expand_globs_accepts_absolute_patterns(css_project: Path) -> None:
    assert expand_globs([str(css_project / "styles" / "*.css")], cwd=css_project) == ["styles/main.css"]


def test_default_ignores_are_appended_not_prepended() -> None:
    patterns = build_file_patterns(["**/*.css", "!a.css"], disable_default_ignores=False)

    assert patterns == ["**/*.css", "!a.css", "!**/node_modules/**", "!**/bower_components/**"]
    assert build_file_patterns(["x.css"], disable_default_ignores=True) == ["x.css"]


def test_resolve_inputs_excludes_dependency_directories(css_project: Path) -> None:
    inputs = resolve_inputs(LintOptions(files="**/*.css"), IgnoreMatcher())

    assert isinstance(inputs, list)
    assert [item.display_path for item in inputs] == ["a.css", "b.css", "styles/main.css"]
    assert all(isinstance(item, FileInput) for item in inputs)
    assert inputs[0].absolute_path == css_project / "a.css"


def test_resolve_inputs_can_disable_default_ignores(css_project: Path) -> None:
    options = LintOptions(files=["**/*.css"], disable_default_ignores=True)

    inputs = resolve_inputs(options, IgnoreMatcher())

    assert "node_modules/lib/vendor.css" in [item.display_path for item in inputs]


def test_resolve_inputs_honours_custom_default_ignores(css_project: Path) -> None:
    inputs = resolve_inputs(LintOptions(files="**/*.css"), IgnoreMatcher(), default_ignores=("styles/**",))

    assert [item.display_path for item in inputs] == ["a.css", "b.css", "node_modules/lib/vendor.css"]


def test_resolve_inputs_applies_ignore_matcher(css_project: Path) -> None:
    inputs = resolve_inputs(LintOptions(files=["a.css", "b.css"]), IgnoreMatcher(["b.css"]))

    assert [item.display_path for item in inputs] == ["a.css"]


def test_resolve_inputs_returns_empty_list_when_nothing_matches(css_project: Path) -> None:
    assert resolve_inputs(LintOptions(files="*.scss"), IgnoreMatcher()) == []


def test_inline_mode_resolves_relative_code_filename(tmp_path: Path) -> None:
    options = LintOptions(code="a {}", code_filename=Path("inline.css"), cwd=tmp_path)

    resolved = resolve_inputs(options, IgnoreMatcher())

    assert resolved == InlineInput(code="a {}", code_filename=tmp_path / "inline.css")


def test_inline_mode_without_filename(tmp_path: Path) -> None:
    resolved = resolve_inputs(LintOptions(code="", cwd=tmp_path), IgnoreMatcher())

    assert isinstance(resolved, InlineInput)
    assert resolved.code_filename is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"files": ""},
        {"files": "*.css", "code": "a {}"},
        {"files": ["*.css"], "code": ""},
    ],
)
def test_single_mode_is_enforced(kwargs: dict[str, object], tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="though not both"):
        resolve_inputs(LintOptions(cwd=tmp_path, **kwargs), IgnoreMatcher())


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({"code": ""}, "code"),
        ({"code": "a {}"}, "code"),
        ({"files": "*.css"}, "files"),
        ({"files": []}, "files"),
    ],
)
def test_mode_selects_single_input_kind(overrides: dict[str, object], expected: str) -> None:
    assert LintOptions(**overrides).mode() == expected


@pytest.mark.parametrize("overrides", [{}, {"files": ""}, {"code": "a {}", "files": "*.css"}])
def test_mode_rejects_both_or_neither(overrides: dict[str, object]) -> None:
    with pytest.raises(ConfigurationError, match="though not both"):
        LintOptions(**overrides).mode()


def test_code_filename_is_made_absolute(tmp_path: Path) -> None:
    assert resolve_code_filename(Path("x.css"), tmp_path) == tmp_path / "x.css"
    assert resolve_code_filename(tmp_path / "y.css", Path("/elsewhere")) == tmp_path / "y.css"
    assert resolve_code_filename(None, tmp_path) is None


def test_disabled_range_covers_open_and_closed_spans() -> None:
    closed = DisabledRange(start=2, end=4)
    open_ended = DisabledRange(start=3)

    assert [closed.covers(line) for line in (1, 2, 4, 5)] == [False, True, True, False]
    assert open_ended.covers(10_000)
    assert not open_ended.covers(None)


def _touch(root: Path, *relative: str) -> None:
    for name in relative:
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("a {}\n", encoding="utf-8")


def test_negations_are_anchored_at_the_working_directory(tmp_path: Path) -> None:
    _touch(tmp_path, "a.css", "sub/a.css", "sub/c.css")

    assert expand_globs(["**/*.css", "!a.css"], cwd=tmp_path) == ["sub/a.css", "sub/c.css"]
    assert expand_globs(["**/*.css", "!*.css"], cwd=tmp_path) == ["sub/a.css", "sub/c.css"]
    assert expand_globs(["**/*.css", "!**/a.css"], cwd=tmp_path) == ["sub/c.css"]


def test_brace_alternatives_are_expanded(tmp_path: Path) -> None:
    _touch(tmp_path, "a.css", "b.scss", "c.txt", "src/deep/d.scss")

    assert expand_globs(["*.{css,scss}"], cwd=tmp_path) == ["a.css", "b.scss"]
    assert expand_globs(["src/**/*.{css,scss}"], cwd=tmp_path) == ["src/deep/d.scss"]
    assert expand_globs(["**/*.{css,scss}", "!*.scss"], cwd=tmp_path) == ["a.css", "src/deep/d.scss"]


def test_bower_components_are_excluded_by_default(tmp_path: Path) -> None:
    _touch(tmp_path, "a.css", "bower_components/pkg/x.css", "nested/bower_components/pkg/y.css")

    inputs = resolve_inputs(LintOptions(files="**/*.css", cwd=tmp_path), IgnoreMatcher())

    assert [item.display_path for item in inputs] == ["a.css"]


@pytest.mark.parametrize("pattern", ["node_modules/**/*.css", "bower_components/**/*.css"])
def test_explicit_dependency_globs_are_still_excluded(tmp_path: Path, pattern: str) -> None:
    _touch(tmp_path, "node_modules/lib/vendor.css", "bower_components/pkg/x.css")

    assert resolve_inputs(LintOptions(files=pattern, cwd=tmp_path), IgnoreMatcher()) == []
