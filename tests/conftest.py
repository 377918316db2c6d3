# clireport:header:start
#
#   project      : CliReport
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Pytest configuration for the CliReport test suite.

This file sets up global fixtures, typed wrappers around pytest decorators, and
the logging configuration for test runs.

Notes:
    Tests compare *plain* renderings (`PlainStyler`) for exact layout. Styling is
    tested through `ChalkStyler` with an injected palette so that results do not
    depend on the color support yachalk detects for the test terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from clireport import Code, Properties, Severity, TokenInfo
from clireport.config import logging
from clireport.rendering.fragment import StyleRole

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables from leaking into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in ("CLIREPORT_LOG_LEVEL", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE level for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def tag_palette() -> dict[StyleRole, Callable[..., str]]:
    """Return a palette that wraps text in ``<role>...</role>`` tags.

    Returns:
        dict[StyleRole, Callable[..., str]]: One tagging colorizer per role.
    """

    def _tagger(role: StyleRole) -> Callable[..., str]:
        def _tag(*args: object, sep: str = " ") -> str:
            return f"<{role.value}>{sep.join(str(a) for a in args)}</{role.value}>"

        return _tag

    return {role: _tagger(role) for role in StyleRole}


@pytest.fixture
def sample_code() -> Code:
    """Return an error code used across report tests."""
    return Code.error("an-error-code", "an error message")


@pytest.fixture
def sample_properties() -> Properties:
    """Return the three-row properties table used across report tests."""
    return (
        Properties()
        .with_property("one", "two")
        .with_property("three", "four")
        .with_property("five", "six")
    )


@pytest.fixture
def sample_token() -> TokenInfo:
    """Return a warning token call-out on line 12."""
    return TokenInfo(
        file_name="the/file/name.ext",
        line=12,
        position=4,
        line_text="the line text",
        token_len=4,
        severity=Severity.WARNING,
        message="the 'line' token",
    )
