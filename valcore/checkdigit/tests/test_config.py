import pytest

from valcore.checkdigit.config import (
    CheckDigitConfig,
    Modulo,
)
from valcore.exceptions import (
    CheckDigitConfigError,
    ConstraintDeclarationError,
)


def test_defaults():
    cfg = CheckDigitConfig(Modulo.MOD10, 2)
    assert cfg.start_index == 0
    assert cfg.ignore_non_digits is True
    assert not cfg.has_explicit_check_digit
    assert cfg.weight == 2  # noqa: PLR2004
    assert CheckDigitConfig(Modulo.MOD11, -3).weight == 3  # noqa: PLR2004


def test_immutable():
    cfg = CheckDigitConfig(Modulo.MOD10, 2)
    with pytest.raises(AttributeError):
        cfg.multiplier = 3


def test_algorithm_from_label():
    assert CheckDigitConfig('MOD11', 2).algorithm is Modulo.MOD11
    with pytest.raises(CheckDigitConfigError, match='unsupported'):
        CheckDigitConfig('MOD9', 2)


def test_check_digit_inside_window():
    start, end = 2, 7
    for cd in range(start, end):
        with pytest.raises(CheckDigitConfigError, match='inside'):
            CheckDigitConfig(
                Modulo.MOD10,
                2,
                start_index=start,
                end_index=end,
                check_digit_index=cd,
            )
    # right outside the window on either side is fine
    for cd in (start - 1, end):
        cfg = CheckDigitConfig(
            Modulo.MOD10,
            2,
            start_index=start,
            end_index=end,
            check_digit_index=cd,
        )
        assert cfg.has_explicit_check_digit


def test_invalid_bounds():
    with pytest.raises(CheckDigitConfigError, match='less than'):
        CheckDigitConfig(Modulo.MOD10, 2, start_index=5, end_index=4)
    with pytest.raises(CheckDigitConfigError, match='negative'):
        CheckDigitConfig(Modulo.MOD10, 2, start_index=-1)
    with pytest.raises(CheckDigitConfigError, match='zero'):
        CheckDigitConfig(Modulo.MOD10, 0)


def test_error_classification():
    with pytest.raises(ConstraintDeclarationError):
        CheckDigitConfig(Modulo.MOD10, 0)
    # also a ValueError, like any other invalid argument
    with pytest.raises(ValueError):  # noqa: PT011
        CheckDigitConfig(Modulo.MOD10, 0)
