from __future__ import annotations
from typing import Any


class SlangError(Exception):
    """ Base class for all slang errors"""
    pass

class SlangInvalidSymbol(SlangError):
    """ Raised when a non-symbol is used where a symbol is required"""
    pass

class SlangUnboundSymbol(SlangError):
    """ Raised when a symbol is used before it is bound"""
    pass

class SlangArityError(SlangError):
    """ Raised when the number of argument forms passed to an operator is incorrect"""

    def __init__(self, expected: int, actual: int, message: str | None = None):
        super().__init__(
            message
            or f"invalid number of arguments; expected {expected} got {actual}"
        )
        self.expected = expected
        self.actual = actual

class SlangTypeError(SlangError):
    """ Raised when a value does not satisfy a required capability (Seq, Invokable, ...)"""

class SlangNoMatchError(SlangError):
    """ Raised when case exhausts its clauses without a default"""

    def __init__(self, subject: Any, rendered: str):
        super().__init__(f"no matching clause for '{rendered}'")
        self.subject = subject

class SlangConversionError(SlangError):
    """ Raised when to-type or implements? cannot operate on the given type"""

class SlangThrownError(SlangError):
    """ Raised by (throw ...) from user code"""
