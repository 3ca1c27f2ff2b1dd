"""Tests for CollisionDetector."""

from __future__ import annotations

import pytest

from load_plugins.collisions import CollisionDetector
from load_plugins.exceptions import KeyCollisionError
from load_plugins.transformer import NameTransformer


def _check_all(names, **kwargs):
    transformer = NameTransformer(**kwargs)
    detector = CollisionDetector()
    for name in names:
        detector.check(transformer.transform(name))


class TestCollisionDetector:
    def test_distinct_keys_pass(self):
        _check_all(["gulp-foo", "gulp-bar", "@myco/gulp-foo"])

    def test_same_scope_collision(self):
        with pytest.raises(KeyCollisionError) as exc_info:
            _check_all(["bar", "gulp-bar"])
        err = exc_info.value
        assert (err.key, err.name, err.existing) == ("bar", "gulp-bar", "bar")
        assert not err.cross_scope
        assert "repeated dependencies in your package.json" in str(err)

    def test_cross_scope_collision_when_flattened(self):
        with pytest.raises(KeyCollisionError, match="in another scope") as exc_info:
            _check_all(["@foo/gulp-bar", "gulp-bar"], maintain_scope=False)
        assert exc_info.value.cross_scope

    def test_nested_and_top_level_keys_are_distinct(self):
        _check_all(["@foo/gulp-bar", "gulp-bar"])

    def test_collision_inside_scope(self):
        with pytest.raises(KeyCollisionError, match='"foo.bar"'):
            _check_all(["@foo/gulp-bar", "@foo/gulp.bar"])

    def test_key_shadowing_scope_namespace(self):
        with pytest.raises(KeyCollisionError, match='"myco"'):
            _check_all(["@myco/gulp-test", "gulp-myco"])
        with pytest.raises(KeyCollisionError, match='"myco.test"'):
            _check_all(["gulp-myco", "@myco/gulp-test"])

    def test_rename_collision(self):
        with pytest.raises(KeyCollisionError):
            _check_all(["gulp-foo", "gulp-bar"], rename={"gulp-bar": "foo"})
