"""Errors raised while parsing or evaluating an expression."""


class InterpreterError(ValueError):
    """Base class for every structural error of the interpreter."""


class UnmatchedOpeningParenthesisError(InterpreterError):
    """A closing parenthesis has no matching opening parenthesis."""

    def __init__(self) -> None:
        super().__init__("opening parenthesis not found")


class UnmatchedClosingParenthesisError(InterpreterError):
    """An opening parenthesis is never closed."""

    def __init__(self) -> None:
        super().__init__("closing parenthesis not found")


class InsufficientOperandsError(InterpreterError):
    """An operator needs more operands than the evaluation stack holds."""

    def __init__(self, operator: str, required: int, available: int) -> None:
        self.operator = operator
        self.required = required
        self.available = available
        super().__init__(
            f"insufficient operands for {operator!r}: "
            f"{required} required, {available} available"
        )


class UnsupportedOperatorError(InterpreterError):
    """An operator is outside of the table of the current stage."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"unsupported operator: {operator!r}")
