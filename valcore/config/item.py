from __future__ import annotations

from datasalad.settings import Setting


class ConfigItem(Setting):
    """Configuration setting of ``valcore``

    This is a plain :class:`~datasalad.settings.Setting`. It exists to give
    all sources of a :class:`~valcore.config.ConfigManager` a common item
    type that implementation code can rely on.
    """

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.pristine_value!r})'
