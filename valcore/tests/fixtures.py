"""Collection of fixtures for facilitation test implementations"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Generator

    from valcore.config import ConfigManager

import pytest

from valcore.config import get_manager
from valcore.consts import PYTHON_LANGUAGE
from valcore.expressions import (
    EngineRegistry,
    PythonScriptEngine,
)


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def cfgman() -> Generator[ConfigManager]:
    """Yield the global configuration manager with pristine overrides

    Any override set by the test is removed again on exit.
    """
    manager = get_manager()
    ovr = manager.sources['overrides']
    before = set(ovr.keys())
    yield manager
    for k in set(ovr.keys()) - before:
        del ovr[k]


@pytest.fixture(autouse=True, scope='function')  # noqa: PT003
def verify_pristine_overrides():
    """No test must leave configuration overrides behind.

    If overrides are needed, they must be set via
    ``ConfigManager.overrides()``, or the ``cfgman`` fixture.
    """
    ovr = get_manager().sources['overrides']
    before = {k: ovr[k].pristine_value for k in ovr.keys()}
    yield
    after = {k: ovr[k].pristine_value for k in ovr.keys()}
    if before != after:  # pragma: no cover
        msg = f'configuration overrides modified by test: {before!r} -> {after!r}'
        raise AssertionError(msg)


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def engine_registry() -> EngineRegistry:
    """Yield a test-specific engine registry

    The registry has the restricted Python engine registered, like the
    global one, and can be modified without affecting other tests.
    """
    return EngineRegistry({PYTHON_LANGUAGE: PythonScriptEngine()})
