"""Shared pytest fixtures for load-plugins tests."""

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest
import structlog

FIXTURES = Path(__file__).parent / "fixtures"


def _wrap(value):
    return lambda: value


def make_stub_modules():
    """Fresh fake plugin modules, keyed by package name."""
    return {
        "gulp-foo": _wrap({"name": "foo"}),
        "gulp-bar": _wrap({"name": "bar"}),
        "bar": _wrap({"name": "bar"}),
        "gulp-foo-bar": _wrap({"name": "foo-bar"}),
        "jack-foo": _wrap({"name": "jack-foo"}),
        "gulp-insert": SimpleNamespace(
            append=_wrap({"name": "insert.append"}),
            wrap=_wrap({"name": "insert.wrap"}),
        ),
        "gulp.baz": _wrap({"name": "baz"}),
        "@myco/gulp-test-plugin": _wrap({"name": "test"}),
    }


@pytest.fixture
def stub_modules():
    return make_stub_modules()


@pytest.fixture
def require_stub(stub_modules):
    """Loader that only knows the stub modules."""

    def require(name):
        try:
            return stub_modules[name]
        except KeyError:
            raise ModuleNotFoundError(f"No module named {name!r}", name=name) from None

    return require


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture(autouse=True)
def _reset_logging():
    logger = logging.getLogger("load_plugins")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    structlog.reset_defaults()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
