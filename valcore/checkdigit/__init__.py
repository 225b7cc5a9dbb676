"""Check digit validation with weighted modulus algorithms

A :class:`CheckDigitConfig` is created once per use case and validated on
construction. It is immutable, and can be shared freely across threads.
:func:`evaluate_check_digit` applies it to an input string.

Two algorithm families are supported (:class:`Modulo`):

``MOD10``
  Digits are weighted alternately with the multiplier magnitude and ``1``,
  any product greater than 9 is reduced by 9, and the check digit
  complements the sum to the next multiple of 10. With a multiplier of
  ``2`` this is the Luhn algorithm used for credit card numbers.
``MOD11``
  Weights start at the multiplier magnitude and increase by one per digit
  up to 10, before starting over. The check digit is ``11 - (sum mod 11)``,
  with 11 meaning ``0``. A computed value of 10 cannot be represented
  and is reported as an error.

Example::

  >>> luhn = CheckDigitConfig(Modulo.MOD10, 2)
  >>> evaluate_check_digit(luhn, '4417123456789113')
  True

.. currentmodule:: valcore.checkdigit
.. autosummary::
   :toctree: generated

   CheckDigitConfig
   Modulo
   compute_check_digit
   evaluate_check_digit
"""

__all__ = [
    'CheckDigitConfig',
    'Modulo',
    'compute_check_digit',
    'evaluate_check_digit',
]

from .config import (
    CheckDigitConfig,
    Modulo,
)
from .engine import (
    compute_check_digit,
    evaluate_check_digit,
)
