from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from valcore.consts import (
    CHECK_DIGIT_INDEX_UNSET,
    END_INDEX_UNBOUNDED,
)
from valcore.exceptions import CheckDigitConfigError


class Modulo(Enum):
    """Enumeration of supported modulus check algorithms"""

    MOD10 = 'MOD10'
    """Modulo 10 check, with a multiplier of 2 also known as the Luhn
    algorithm"""
    MOD11 = 'MOD11'
    """Modulo 11 check with ascending weights"""


@dataclass(frozen=True)
class CheckDigitConfig:
    """Immutable parameterization of the check digit algorithm

    A configuration is validated on construction. An invalid configuration
    raises :class:`~valcore.exceptions.CheckDigitConfigError`, hence any
    existing instance is known to be usable for evaluation.
    """

    algorithm: Modulo
    multiplier: int
    """Weight of the digit next to the check digit. The sign selects
    where the weighting starts: a positive multiplier starts next to
    the check digit, a negative one at the far end of the window."""
    start_index: int = 0
    """Inclusive start of the checked window"""
    end_index: int = END_INDEX_UNBOUNDED
    """Exclusive end of the checked window, clamped to the input length"""
    check_digit_index: int = CHECK_DIGIT_INDEX_UNSET
    """Position of the check digit, if it is not the last character of the
    window. Must lie outside the window."""
    ignore_non_digits: bool = True
    """Whether to skip non-digits in the window rather than fail on them"""

    def __post_init__(self):
        if not isinstance(self.algorithm, Modulo):
            try:
                object.__setattr__(self, 'algorithm', Modulo(self.algorithm))
            except ValueError as e:
                msg = f'unsupported modulus algorithm {self.algorithm!r}'
                raise CheckDigitConfigError(msg) from e
        if not self.multiplier:
            msg = 'multiplier must not be zero'
            raise CheckDigitConfigError(msg)
        if self.start_index < 0:
            msg = f'start index must not be negative, got {self.start_index}'
            raise CheckDigitConfigError(msg)
        if self.end_index < self.start_index:
            msg = (
                f'end index {self.end_index} is less than '
                f'start index {self.start_index}'
            )
            raise CheckDigitConfigError(msg)
        if self.has_explicit_check_digit and (
            self.start_index <= self.check_digit_index < self.end_index
        ):
            msg = (
                f'check digit index {self.check_digit_index} lies inside '
                f'the checked window [{self.start_index}, {self.end_index})'
            )
            raise CheckDigitConfigError(msg)

    @property
    def has_explicit_check_digit(self) -> bool:
        return self.check_digit_index >= 0

    @property
    def weight(self) -> int:
        """Magnitude of the multiplier"""
        return abs(self.multiplier)
