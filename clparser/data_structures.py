"""
Defines :py:class:`Sequence <clparser.data_structures.Sequence>`,
a strongly-typed immutable list that implements
`MonadPlus <https://github.com/ethanabrooks/pytypeclass/blob/fe6813e69c1def160c77dea1752f4235820793df/pytypeclass/monoid.py#L24>`_,
and :py:class:`KeyValue <clparser.data_structures.KeyValue>`.
"""
from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import (
    Callable,
    Dict,
    Generator,
    Generic,
    Iterator,
    Type,
    TypeVar,
    overload,
)

from pytypeclass import Monad, MonadPlus

A_co = TypeVar("A_co", covariant=True)
A = TypeVar("A")


@dataclass
class KeyValue(Generic[A_co]):
    """
    Simple dataclass for storing key-value pairs.
    """

    key: str
    value: A_co


@dataclass
class Sequence(MonadPlus[A_co], typing.Sequence[A_co]):
    """
    This class combines the functionality of `MonadPlus <https://github.com/ethanabrooks/pytypeclass/blob/fe6813e69c1def160c77dea1752f4235820793df/pytypeclass/monoid.py#L24>`_
    and :external:py:class:`typing.Sequence`

    >>> from clparser.data_structures import Sequence
    >>> s = Sequence(["prog", "--verbose"])
    >>> len(s)
    2
    >>> s[-1]
    '--verbose'
    >>> s[1:]
    Sequence(get=['--verbose'])
    >>> s + Sequence(["extra"])  # sequences emulate list behavior when added
    Sequence(get=['prog', '--verbose', 'extra'])
    >>> Sequence([1, 2]) >= (lambda i: Sequence([i, -i]))
    Sequence(get=[1, -1, 2, -2])
    """

    get: typing.Sequence[A_co]

    @overload
    def __getitem__(self, i: int) -> "A_co":
        ...

    @overload
    def __getitem__(self, i: slice) -> "Sequence[A_co]":
        ...

    def __getitem__(self, i: "int | slice") -> "A_co | Sequence[A_co]":
        if isinstance(i, int):
            return self.get[i]
        return Sequence(self.get[i])

    def __iter__(self) -> Generator[A_co, None, None]:
        yield from self.get

    def __len__(self) -> int:
        return len(self.get)

    def __or__(self, other: "Sequence[A]") -> "Sequence[A_co | A]":  # type: ignore[override]
        return Sequence([*self, *other])

    def __add__(self, other: "Sequence[A]") -> "Sequence[A_co | A]":
        return self | other

    def append(self, a: A) -> "Sequence[A_co | A]":
        """
        Returns a new sequence with ``a`` at the end. ``self`` is left unchanged.

        >>> s = Sequence([1])
        >>> s.append(2)
        Sequence(get=[1, 2])
        >>> s
        Sequence(get=[1])
        """
        return self + Sequence.return_(a)

    def bind(self, f: Callable[[A_co], Monad[A]]) -> "Sequence[A]":
        def g() -> Iterator[A]:
            for a in self:
                y = f(a)
                assert isinstance(y, Sequence), y
                yield from y

        return Sequence(list(g()))

    def keys(self: "Sequence[KeyValue[A]]") -> "Sequence[str]":
        return Sequence([kv.key for kv in self])

    @staticmethod
    def return_(a: A) -> "Sequence[A]":  # type: ignore[override]
        """
        >>> Sequence.return_("--verbose")
        Sequence(get=['--verbose'])
        """
        return Sequence([a])

    def to_dict(self: "Sequence[KeyValue[A]]") -> "Dict[str, A]":
        """
        >>> Sequence([KeyValue("hello", "world"), KeyValue("are", None)]).to_dict()
        {'hello': 'world', 'are': None}
        """
        return {kv.key: kv.value for kv in self}

    @classmethod
    def zero(cls: Type["Sequence[A_co]"]) -> "Sequence[A_co]":
        return Sequence([])
