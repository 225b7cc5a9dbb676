"""Fixture setup"""

__all__ = [
    'cfgman',
    'engine_registry',
    'verify_pristine_overrides',
]


from valcore.tests.fixtures import (
    # function-scope config manager
    cfgman,
    # function-scope engine registry, isolated from the global one
    engine_registry,
    # verify no test leaves configuration overrides behind
    verify_pristine_overrides,
)
