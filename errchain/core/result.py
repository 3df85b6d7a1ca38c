"""Result type for returning errors as values.

Fallible functions return ``Ok(value)`` or ``Err(error)`` instead of raising,
so a ChainedError can travel up a call stack and be extended at each level:

    def open_context() -> Result[None, ChainedError]:
        return Err(ChainedError(ContextInitError()))

    match open_context():
        case Ok(value):
            ...
        case Err(error):
            head = error.extend_with(ChainedError(InvalidArgument("32")))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn, TypeGuard

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raises ValueError since there is no error.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"called unwrap_err on Ok: {self.value!r}")

    def expect_err(self, message: str) -> NoReturn:
        """Raises ValueError carrying ``message``.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"{message}: {self.value!r}")

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err[F](self, f: Callable[[object], F]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value, usually a ChainedError.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        An exception is re-raised as-is so its chain survives; any other
        error value is wrapped in a ValueError.

        Raises:
            BaseException: The contained error, if it is an exception.
            ValueError: Otherwise.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"called unwrap on Err: {self.error!r}")

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, message: str) -> NoReturn:
        """Like unwrap, but a non-exception error is reported with ``message``."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"{message}: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def expect_err(self, message: str) -> E:
        return self.error

    def map[U](self, f: Callable[[object], U]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Transform the contained error, e.g. to extend a chain.

        Args:
            f: Function applied to the error.

        Returns:
            Err holding the transformed error.
        """
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that checks if a Result is Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that checks if a Result is Err.

    Example:
        result = open_context()
        if is_err(result):
            # Type checker knows result is Err here
            print(result.error)
    """
    return isinstance(result, Err)
