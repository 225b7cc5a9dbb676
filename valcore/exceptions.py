"""Error taxonomy of the evaluation engines

There are two families of errors, and neither of them means "the validated
value is invalid" (that is :class:`~valcore.constraints.ConstraintError`):

- :class:`ConstraintDeclarationError` is raised once, when a constraint is
  set up with a configuration that can never work (bad check digit window,
  unknown expression language, unparsable expression).
- :class:`EvaluationError` is raised per call, when an engine cannot
  compute an answer for a particular input.

All classes keep their structured information in ``.args`` and expose it via
read-only properties.
"""

from __future__ import annotations


class ConstraintDeclarationError(Exception):
    """Base class for errors in the declaration of a constraint"""


class CheckDigitConfigError(ConstraintDeclarationError, ValueError):
    """Invalid check digit algorithm configuration"""


class PreparationError(ConstraintDeclarationError):
    """An expression could not be prepared for evaluation"""


class EngineNotFound(PreparationError):
    """No expression engine is registered for a language identifier"""

    def __init__(self, language: str):
        super().__init__(language)

    @property
    def language(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f'no expression engine found for language {self.language!r}'


class EmbeddedRuntimeUnavailable(PreparationError):
    """The embedded expression interpreter is disabled in this deployment"""

    def __str__(self) -> str:
        return 'the embedded expression interpreter is not available'


class InvalidExpression(PreparationError):
    """An expression could not be parsed or compiled"""

    def __init__(self, expression: str, reason: str):
        super().__init__(expression, reason)

    @property
    def expression(self) -> str:
        return self.args[0]

    @property
    def reason(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f'invalid expression ${{{self.expression}}}: {self.reason}'


class EvaluationError(Exception):
    """Base class for errors that prevent the evaluation of a single value"""


class ArityMismatch(EvaluationError):
    """Number of values does not match the number of declared binding names"""

    def __init__(self, expected: int, actual: int):
        super().__init__(expected, actual)

    @property
    def expected(self) -> int:
        return self.args[0]

    @property
    def actual(self) -> int:
        return self.args[1]

    def __str__(self) -> str:
        return (
            f'the number of values ({self.actual}) does not match '
            f'the number of declared aliases ({self.expected})'
        )


class NullResult(EvaluationError):
    """Expression evaluated to ``None``"""

    def __init__(self, expression: str):
        super().__init__(expression)

    @property
    def expression(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f'execution of expression ${{{self.expression}}} returned null'


class TypeMismatch(EvaluationError):
    """Expression evaluated to something other than a boolean"""

    def __init__(self, expression: str, actual_type: str):
        super().__init__(expression, actual_type)

    @property
    def expression(self) -> str:
        return self.args[0]

    @property
    def actual_type(self) -> str:
        """Name of the type of the returned value"""
        return self.args[1]

    def __str__(self) -> str:
        return (
            f'execution of expression ${{{self.expression}}} returned '
            f'unsupported type [{self.actual_type}]'
        )


class BackendFailure(EvaluationError):
    """The expression backend reported an error during execution

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, language: str, expression: str):
        super().__init__(language, expression)

    @property
    def language(self) -> str:
        return self.args[0]

    @property
    def expression(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        msg = (
            f'error occurred during execution of {self.language} '
            f'expression ${{{self.expression}}}'
        )
        if self.__cause__ is not None:
            msg = f'{msg}: {self.__cause__}'
        return msg


class ReadOnlyAssignment(EvaluationError):
    """An expression attempted to assign to a name or property"""

    def __init__(self, target: str):
        super().__init__(target)

    @property
    def target(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f'cannot assign to {self.target!r}, bound values are read-only'


class CheckDigitError(EvaluationError):
    """Base class for inputs the check digit algorithm cannot process"""


class NonDigitCharacter(CheckDigitError):
    """A non-digit character was found while non-digits are not ignored"""

    def __init__(self, position: int, character: str):
        super().__init__(position, character)

    @property
    def position(self) -> int:
        return self.args[0]

    @property
    def character(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f'non-digit character {self.character!r} at position {self.position}'


class InvalidCheckDigit(CheckDigitError):
    """The check digit is missing, not a digit, or cannot be represented"""

    def __init__(self, position: int, reason: str):
        super().__init__(position, reason)

    @property
    def position(self) -> int:
        return self.args[0]

    @property
    def reason(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f'invalid check digit at position {self.position}: {self.reason}'
