import pytest

from valcore.config import (
    ConfigItem,
    ConfigManager,
    UnsetValue,
    get_defaults,
    get_manager,
)


def test_manager_setup():
    """Test the actual global configuration manager"""
    manager = get_manager()
    assert get_manager() is manager
    # the order of sources is the precedence rule
    assert list(manager.sources.keys()) == ['overrides', 'defaults']
    assert manager.sources['defaults'] is get_defaults()
    target_key = 'valcore.expression.language'
    absurd_must_be_absent_key = 'nobody.would.use.such.a.key'
    assert target_key in manager
    assert absurd_must_be_absent_key not in manager
    with pytest.raises(KeyError):
        manager[absurd_must_be_absent_key]
    assert manager.get(absurd_must_be_absent_key).value is None
    assert manager.get(absurd_must_be_absent_key, 5).value == 5  # noqa: PLR2004

    with pytest.raises(TypeError):
        del manager.sources['defaults']
    with pytest.raises(TypeError):
        manager.sources['new'] = manager.sources['defaults']


def test_manager_str():
    manager = ConfigManager(get_defaults())
    # no overrides, only defaults are reported
    assert str(manager) == 'ConfigManager(ImplementationDefaults)'
    assert 'ImplementationDefaults' in repr(manager)


def test_manager_overrides(cfgman):
    key = 'valcore.modulus.ignore-non-digits'
    test_key = 'test_manager_overrides.test_key'
    assert cfgman[key].value is True
    with cfgman.overrides({key: False, test_key: ConfigItem('some')}):
        assert cfgman[key].value is False
        assert cfgman[test_key].value == 'some'
        # nested overrides restore the outer ones
        with cfgman.overrides({key: ConfigItem(True)}):
            assert cfgman[key].value is True
        assert cfgman[key].value is False
    # after context manager exit we find things restored
    assert cfgman[key].value is True
    assert test_key not in cfgman


def test_manager_get_unsetvalue(cfgman):
    test_key = 'test_manager_get_unsetvalue.test_key'
    with cfgman.overrides({test_key: ConfigItem(UnsetValue)}):
        assert cfgman.get(test_key, default=5) == ConfigItem(5)
