"""Weighted modulus check digit algorithm"""

from __future__ import annotations

import logging
from itertools import cycle
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

from valcore.checkdigit.config import (
    CheckDigitConfig,
    Modulo,
)
from valcore.exceptions import (
    InvalidCheckDigit,
    NonDigitCharacter,
)

lgr = logging.getLogger('valcore.checkdigit')

# str.isdigit() would also accept superscripts and other non-ASCII digits
_DIGITS = frozenset('0123456789')


def evaluate_check_digit(config: CheckDigitConfig, value: str | None) -> bool:
    """Test whether ``value`` carries a correct check digit

    An empty or absent ``value`` is always valid, only present values
    are checked.

    Returns ``False`` when the check digit does not match the one computed
    from the checked window. Inputs that the algorithm cannot process at all
    raise a :class:`~valcore.exceptions.CheckDigitError`:

    - :class:`~valcore.exceptions.InvalidCheckDigit` when the checked window
      is empty, the check digit position is not in ``value``, the character
      there is not a digit, or (MOD11) the computed check value is 10.
    - :class:`~valcore.exceptions.NonDigitCharacter` when the window contains
      a non-digit and ``config.ignore_non_digits`` is false.
    """
    if not value:
        return True
    cd_index = _get_check_digit_index(config, value)
    cd_char = value[cd_index]
    if cd_char not in _DIGITS:
        raise InvalidCheckDigit(cd_index, f'{cd_char!r} is not a digit')
    expected = compute_check_digit(config, value)
    if expected != int(cd_char):
        lgr.debug(
            'Check digit mismatch at position %i: expected %i, found %s',
            cd_index,
            expected,
            cd_char,
        )
        return False
    return True


def compute_check_digit(config: CheckDigitConfig, value: str) -> int:
    """Compute the check digit for the checked window of ``value``

    The character at the check digit position is ignored, only its
    position matters. Raises the same errors as :func:`evaluate_check_digit`,
    except for the check digit not being a digit.
    """
    cd_index = _get_check_digit_index(config, value)
    if config.algorithm is Modulo.MOD10:
        weights = cycle((config.weight, 1))
    else:
        # MOD11 weights ascend up to 10 and then start over
        weights = cycle(range(config.weight, max(config.weight, 10) + 1))

    total = 0
    for pos in _iter_weighted_positions(config, value, cd_index):
        char = value[pos]
        if char not in _DIGITS:
            if config.ignore_non_digits:
                continue
            raise NonDigitCharacter(pos, char)
        product = int(char) * next(weights)
        if config.algorithm is Modulo.MOD10 and product > 9:  # noqa: PLR2004
            product -= 9
        total += product

    if config.algorithm is Modulo.MOD10:
        return (10 - total % 10) % 10

    check = 11 - total % 11
    if check == 10:  # noqa: PLR2004
        raise InvalidCheckDigit(
            cd_index,
            'MOD11 check value is 10, which has no digit representation',
        )
    return 0 if check == 11 else check  # noqa: PLR2004


def _get_check_digit_index(config: CheckDigitConfig, value: str) -> int:
    if config.has_explicit_check_digit:
        cd_index = config.check_digit_index
        if min(config.end_index, len(value)) <= config.start_index:
            raise InvalidCheckDigit(
                config.start_index,
                'the checked window of the value is empty',
            )
    else:
        # last character of the window
        cd_index = min(config.end_index, len(value)) - 1
        if cd_index < config.start_index:
            raise InvalidCheckDigit(
                config.start_index,
                'the checked window of the value is empty',
            )
    if cd_index >= len(value):
        raise InvalidCheckDigit(
            cd_index,
            f'value has only {len(value)} characters',
        )
    return cd_index


def _iter_weighted_positions(
    config: CheckDigitConfig,
    value: str,
    cd_index: int,
) -> Iterator[int]:
    """Yield window positions in the order in which weights are assigned"""
    start = config.start_index
    end = min(config.end_index, len(value))
    if not config.has_explicit_check_digit:
        # the check digit closes the window, walk away from it
        positions = list(range(end - 2, start - 1, -1))
    elif cd_index < start:
        positions = list(range(start, end))
    else:
        positions = list(range(end - 1, start - 1, -1))
    if config.multiplier < 0:
        positions.reverse()
    yield from positions
