from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from valcore.config import ConfigManager

from valcore.config import get_manager


@dataclass(frozen=True)
class Capabilities:
    """Optional runtime capabilities available to the expression evaluator

    An instance is determined once, typically from configuration via
    :meth:`from_config`, and injected into an evaluator.
    """

    embedded_interpreter: bool = True
    """Whether the embedded expression interpreter may be used"""

    @classmethod
    def from_config(cls, manager: ConfigManager | None = None) -> Capabilities:
        """Determine capabilities from the ``valcore.*`` configuration"""
        cfg = manager or get_manager()
        return cls(
            embedded_interpreter=cfg.get(
                'valcore.expression.embedded-interpreter',
                True,
            ).value,
        )
