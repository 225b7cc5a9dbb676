from __future__ import annotations

from contextlib import contextmanager
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import (
        Generator,
        Hashable,
    )

    from datasalad.settings import Source

from datasalad.settings import (
    InMemory,
    Setting,
    Settings,
    UnsetValue,
)

from valcore.config.defaults import (
    ImplementationDefaults,
    get_defaults,
)
from valcore.config.item import ConfigItem


class ConfigManager(Settings):
    """Multi-source (scope) configuration manager

    By default (``source=None``), a manager utilizes a fixed (order) collection
    of sources (from highest to lowest precedence):

    - ``overrides``: in-memory settings set by the running process
    - ``defaults``: :class:`ImplementationDefaults`

    If a different source collection is desired, it can be given as
    ``sources``.  The ``default`` source will be added to the given sources.
    """

    def __init__(
        self,
        defaults: ImplementationDefaults,
        sources: dict[str, Source] | None = None,
    ):
        if sources is None:
            sources = {
                'overrides': InMemory(),
            }
        sources['defaults'] = defaults
        super().__init__(sources)
        # set .item_type for all sources, such that any plain default
        # comes back wrapped in the same item type
        for s in self.sources.values():
            s.item_type = ConfigItem

    def __str__(self) -> str:
        return (
            f'{self.__class__.__name__}('
            # aim for a compact display, leave our sources with no content
            f'{"<<".join(str(s) for s in self.sources.values() if len(s))}'
            ')'
        )

    def __repr__(self) -> str:
        # just like __str__, but does not trim sources without content
        return (
            f'{self.__class__.__name__}('
            f'{"<<".join(str(s) for s in self.sources.values())}'
            ')'
        )

    @contextmanager
    def overrides(
        self,
        overrides: dict[Hashable, Any],
    ) -> Generator[ConfigManager]:
        """Context manager to temporarily set configuration overrides

        Values that are not given as :class:`~datasalad.settings.Setting`
        instances are wrapped into a :class:`ConfigItem`. Previous values
        of the ``overrides`` source are restored on exit.
        """
        src = self.sources['overrides']
        restore: dict[Hashable, Setting | None] = {}
        for k, v in overrides.items():
            restore[k] = src[k] if k in src else None
            src[k] = v if isinstance(v, Setting) else ConfigItem(v)
        try:
            yield self
        finally:
            for k, prev in restore.items():
                if prev is None:
                    del src[k]
                else:
                    src[k] = prev

    def get(self, key: Hashable, default: Any = None) -> Setting:
        """Return a particular setting identified by its key, or a default

        The composition of the returned setting follows the same rules
        as the access via ``__getitem__``. However, if the effective
        ``pristine_value`` retrieved from any existing configuration is
        ``UnsetValue``, it is update with the given default.

        When the ``default`` value is not given as an instance of
        :class:`~datasalad.settings.Setting`, it will be
        automatically wrapped into the one given by :attr:`Settings.item_type`.
        """
        try:
            val = self[key]
        except KeyError:
            return self._get_default_setting(default)

        if val.pristine_value is UnsetValue:
            val.update(self._get_default_setting(default))
        return val


__the_manager: ConfigManager | None = None


def get_manager() -> ConfigManager:
    """Return a process-unique, global `ConfigManager` instance

    This function can be used obtain a :class:`ConfigManager`
    instance for query and manipulation of settings.
    """
    global __the_manager  # noqa: PLW0603
    if __the_manager is None:
        __the_manager = ConfigManager(get_defaults())
    return __the_manager
