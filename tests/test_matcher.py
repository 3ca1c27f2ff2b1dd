"""Tests for the glob name matcher."""

from __future__ import annotations

import pytest

from load_plugins.matcher import DEFAULT_PATTERNS, build_patterns, compile_glob, match_names


class TestBuildPatterns:
    def test_none_means_defaults(self):
        assert build_patterns(None) == list(DEFAULT_PATTERNS)

    def test_string_replaces_defaults(self):
        assert build_patterns("jack-*") == ["jack-*"]

    def test_extend_defaults(self):
        assert build_patterns(["jack-*"], override_pattern=False) == [*DEFAULT_PATTERNS, "jack-*"]


class TestCompileGlob:
    @pytest.mark.parametrize(
        "pattern, name",
        [
            ("gulp-*", "gulp-foo"),
            ("gulp.*", "gulp.baz"),
            ("@*/gulp{-,.}*", "@myco/gulp-test-plugin"),
            ("@*/gulp{-,.}*", "@myco/gulp.thing"),
            ("gulp-?ar", "gulp-bar"),
            ("gulp-[bc]ar", "gulp-car"),
            ("**", "@scope/anything"),
            ("{gulp,grunt}-{a,b{1,2}}", "grunt-b2"),
        ],
    )
    def test_matches(self, pattern, name):
        assert compile_glob(pattern).match(name)

    @pytest.mark.parametrize(
        "pattern, name",
        [
            ("gulp-*", "@foo/gulp-bar"),
            ("gulp-*", "gulpfoo"),
            ("gulp.*", "gulpxbaz"),
            ("*", "@foo/bar"),
            ("gulp-[!bc]ar", "gulp-bar"),
            ("@*/gulp{-,.}*", "gulp-foo"),
            ("gulp-*", "xgulp-foo"),
        ],
    )
    def test_rejects(self, pattern, name):
        assert not compile_glob(pattern).match(name)

    def test_brace_without_comma_is_literal(self):
        assert compile_glob("a{b}").match("a{b}")
        assert not compile_glob("a{b}").match("ab")


class TestMatchNames:
    def test_default_patterns(self):
        names = ["gulp-foo", "gulp.baz", "@myco/gulp-test", "@myco/other", "react", "gulp"]
        assert match_names(names, DEFAULT_PATTERNS) == ["gulp-foo", "gulp.baz", "@myco/gulp-test"]

    def test_negation_excludes(self):
        assert match_names(["bar", "gulp-bar", "gulp"], ["*", "!gulp"]) == ["bar", "gulp-bar"]

    def test_only_negations_keep_the_rest(self):
        assert match_names(["a", "b"], ["!a"]) == ["b"]

    def test_keeps_input_order_and_dedupes(self):
        assert match_names(["gulp-b", "gulp-a", "gulp-b"], ["gulp-a", "gulp-*"]) == ["gulp-b", "gulp-a"]

    def test_no_match_is_empty(self):
        assert match_names(["react"], DEFAULT_PATTERNS) == []

    def test_empty_pattern_set_matches_nothing(self):
        assert match_names(["react", "lodash"], []) == []
