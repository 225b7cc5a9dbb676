from valcore.expressions import Capabilities


def test_capabilities_default():
    assert Capabilities().embedded_interpreter is True


def test_capabilities_from_config(cfgman):
    assert Capabilities.from_config(cfgman).embedded_interpreter is True
    with cfgman.overrides({'valcore.expression.embedded-interpreter': False}):
        assert Capabilities.from_config(cfgman).embedded_interpreter is False
        # the global manager is used by default
        assert Capabilities.from_config().embedded_interpreter is False
