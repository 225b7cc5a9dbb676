"""Configuration management

This module provides the standard facilities for configuration management,
query, and update. It is built on `datasalad.settings
<https://datasalad.readthedocs.io/latest/generated/datasalad.settings.html>`__.

The key piece is the :class:`ConfigManager` that supports querying for
configuration settings across multiple sources. It also offers a context
manager to temporarily override particular configuration items.

No instance of :class:`~valcore.config.ConfigManager` is created on import.
Instead, if and when a common instance it needed, it must be obtained by
calling :func:`get_manager`. Subsequent calls will return the same instance.

The same pattern is applied to obtain a common instance of
:class:`ImplementationDefaults` via :func:`get_defaults`. This instance
holds the defaults of all settings supported by ``valcore``:

``valcore.expression.language``
  Language identifier used by expression constraints that do not declare
  one. Defaults to the embedded interpreter.
``valcore.expression.embedded-interpreter``
  Whether the embedded expression interpreter may be used. Defaults to
  ``True``.
``valcore.modulus.ignore-non-digits``
  Whether modulus constraints skip non-digit characters, unless declared
  otherwise. Defaults to ``True``.


.. currentmodule:: valcore.config
.. autosummary::
   :toctree: generated

   ConfigItem
   ConfigManager
   ImplementationDefaults
   UnsetValue
   anything2bool
   get_defaults
   get_manager
"""

__all__ = [
    'ConfigItem',
    'ConfigManager',
    'ImplementationDefaults',
    'UnsetValue',
    'anything2bool',
    'get_defaults',
    'get_manager',
]

from datasalad.settings import UnsetValue

from .defaults import (
    ImplementationDefaults,
    anything2bool,
    get_defaults,
)
from .item import ConfigItem
from .manager import (
    ConfigManager,
    get_manager,
)
