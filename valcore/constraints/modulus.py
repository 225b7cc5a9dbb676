"""Constraints for check digit validation"""

from __future__ import annotations

from typing import Any

from valcore.checkdigit import (
    CheckDigitConfig,
    Modulo,
    evaluate_check_digit,
)
from valcore.config import get_manager
from valcore.consts import (
    CHECK_DIGIT_INDEX_UNSET,
    END_INDEX_UNBOUNDED,
)
from valcore.constraints.basic import EnsureNotNone
from valcore.constraints.constraint import Constraint
from valcore.constraints.wrapper import WithDescription


class EnsureModulus(Constraint):
    """Ensure a string carries a valid check digit

    The check is performed by
    :func:`~valcore.checkdigit.evaluate_check_digit`, with a
    :class:`~valcore.checkdigit.CheckDigitConfig` that is built (and thereby
    validated) on construction. An invalid declaration raises
    :class:`~valcore.exceptions.CheckDigitConfigError` right away.

    ``None`` is valid. Integers are checked in their decimal representation.

    Only a check digit mismatch is a violation of the constraint. A value
    the algorithm cannot process (e.g., it is too short to hold a check
    digit, or contains a non-digit in strict mode) raises the engine's
    :class:`~valcore.exceptions.CheckDigitError` unchanged, also through
    :class:`AnyOf`.
    """

    def __init__(
        self,
        algorithm: Modulo | str,
        multiplier: int,
        *,
        start_index: int = 0,
        end_index: int = END_INDEX_UNBOUNDED,
        check_digit_index: int = CHECK_DIGIT_INDEX_UNSET,
        ignore_non_digits: bool | None = None,
    ):
        """
        ``ignore_non_digits`` is taken from the
        ``valcore.modulus.ignore-non-digits`` configuration when not given.
        All other parameters are those of
        :class:`~valcore.checkdigit.CheckDigitConfig`.
        """
        super().__init__()
        if ignore_non_digits is None:
            ignore_non_digits = (
                get_manager()
                .get(
                    'valcore.modulus.ignore-non-digits',
                    True,
                )
                .value
            )
        self._config = CheckDigitConfig(
            algorithm=algorithm,  # type: ignore[arg-type]
            multiplier=multiplier,
            start_index=start_index,
            end_index=end_index,
            check_digit_index=check_digit_index,
            ignore_non_digits=bool(ignore_non_digits),
        )

    @property
    def config(self) -> CheckDigitConfig:
        return self._config

    def __repr__(self) -> str:
        cfg = self._config
        return (
            f'{self.__class__.__name__}('
            f'{cfg.algorithm.value!r}, {cfg.multiplier!r}, '
            f'start_index={cfg.start_index!r}, '
            f'end_index={cfg.end_index!r}, '
            f'check_digit_index={cfg.check_digit_index!r}, '
            f'ignore_non_digits={cfg.ignore_non_digits!r})'
        )

    @property
    def input_synopsis(self):
        return f'number with {self._config.algorithm.value} check digit'

    @property
    def input_description(self):
        cfg = self._config
        return (
            f'string of digits with a {cfg.algorithm.value} check digit '
            f'(multiplier {cfg.multiplier})'
            + (', non-digits are ignored' if cfg.ignore_non_digits else '')
        )

    def __call__(self, value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            checked = str(value)
        elif isinstance(value, str):
            checked = value
        else:
            self.raise_for(
                value,
                'is not a string or integer, but {type}',
                type=type(value).__name__,
            )
        if not evaluate_check_digit(self._config, checked):
            self.raise_for(
                value,
                'does not have a valid {algorithm} check digit',
                algorithm=self._config.algorithm.value,
            )
        return value


class EnsureNotNoneModulus(WithDescription):
    """Like :class:`EnsureModulus`, but a value is required to be present"""

    def __init__(
        self,
        algorithm: Modulo | str,
        multiplier: int,
        **kwargs: Any,
    ):
        modulus = EnsureModulus(algorithm, multiplier, **kwargs)
        super().__init__(
            EnsureNotNone() & modulus,
            input_synopsis=modulus.input_synopsis,
            input_description=modulus.input_description,
        )


class EnsureCreditCardNumber(WithDescription):
    """Ensure a value is a credit card number with a valid Luhn check digit

    This is :class:`EnsureModulus` with ``MOD10`` and a multiplier of 2.
    Only the check digit is verified, not whether a card with this number
    exists. ``None`` is valid, combine with :class:`EnsureNotNone` to
    require a value.
    """

    def __init__(self, *, ignore_non_digits: bool | None = None):
        super().__init__(
            EnsureModulus(
                Modulo.MOD10,
                2,
                ignore_non_digits=ignore_non_digits,
            ),
            input_synopsis='credit card number',
        )
