"""
Defines the :py:class:`Result` dataclass, representing success or failure, output by the scanner.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Type, TypeVar

from pytypeclass import Monad, MonadPlus

from clparser.errors import ArgumentError

A_co = TypeVar("A_co", covariant=True)
A = TypeVar("A")
B = TypeVar("B")


@dataclass
class Result(MonadPlus[A_co]):
    """
    Either a successful value or the :py:class:`ArgumentError <clparser.errors.ArgumentError>`
    that stopped the computation.

    >>> from clparser.errors import ArgumentError
    >>> Result.return_(1) >= (lambda x: Result.return_(x + 1))
    Result(get=2)
    >>> Result.zero(ArgumentError("boom")) >= (lambda x: Result.return_(x + 1))
    Result(get=ArgumentError(usage='boom'))
    """

    get: "A_co | ArgumentError"

    def __or__(self, other: "Result[B]") -> "Result[A_co | B]":  # type: ignore[override]
        """
        Keeps the first success. If both fail, keeps the first error.

        >>> from clparser.errors import ArgumentError
        >>> Result.zero(ArgumentError("first")) | Result.return_("second")
        Result(get='second')
        >>> Result.zero(ArgumentError("first")) | Result.zero(ArgumentError("second"))
        Result(get=ArgumentError(usage='first'))
        """
        if isinstance(self.get, ArgumentError) and not isinstance(
            other.get, ArgumentError
        ):
            return other
        return self

    def __add__(self, other: "Result[B]") -> "Result[A_co | B]":  # type: ignore[override]
        return self | other

    def __ge__(self, f: Callable[[A_co], Monad[B]]) -> "Result[B]":  # type: ignore[override]
        return self.bind(f)

    def bind(self, f: Callable[[A_co], Monad[B]]) -> "Result[B]":  # type: ignore[override]
        """
        Applies ``f`` to a successful value. Short circuits at errors.
        """
        x = self.get
        if isinstance(x, ArgumentError):
            return Result(x)
        y = f(x)
        assert isinstance(y, Result), y
        return y

    @property
    def ok(self) -> bool:
        return not isinstance(self.get, ArgumentError)

    def unwrap(self) -> A_co:
        """
        Returns the successful value or raises the error.

        >>> from clparser.errors import ArgumentError
        >>> Result.return_("value").unwrap()
        'value'
        >>> Result.zero(ArgumentError("boom")).unwrap()
        Traceback (most recent call last):
        ...
        clparser.errors.ArgumentError: boom
        """
        x = self.get
        if isinstance(x, ArgumentError):
            raise x
        return x

    @classmethod
    def return_(cls: "Type[Result[A]]", a: A) -> "Result[A]":  # type: ignore[override]
        return Result(a)

    @classmethod
    def zero(
        cls: "Type[Result[A]]", error: Optional[ArgumentError] = None
    ) -> "Result[A]":
        return Result(ArgumentError("zero") if error is None else error)
