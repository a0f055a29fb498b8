"""
Defines the single-pass scanner that turns an input sequence into a :py:class:`Scan`.

The scanner walks the input once, left to right, with one token of lookahead.
Each step is a function from one :py:class:`Scan` to the next, wrapped in a
:py:class:`Result <clparser.result.Result>` so that the first error ends the pass.
"""
from dataclasses import dataclass, field, replace
from functools import partial
from typing import FrozenSet, Mapping, Optional

from clparser.arity import Arity
from clparser.data_structures import KeyValue, Sequence
from clparser.errors import (
    DuplicateFlag,
    MissingParameter,
    UnexpectedFlag,
    UnexpectedParameter,
    UnknownFlag,
)
from clparser.result import Result
from clparser.tokens import Token


@dataclass(frozen=True)
class Scan:
    """
    State of a scan. Values and leftovers are stored as indices into the input.

    Parameters
    ----------

    position : int
        Index of the next token to read.

    flags : Sequence[KeyValue[Optional[int]]]
        Flags in the order they were read, each bound to the index of its parameter
        or to ``None``. Holds at most one entry per defined flag.

    seen : FrozenSet[str]
        Names in ``flags``.

    leftovers : Sequence[int]
        Indices of leftover tokens, always a range running to the end of the input.
    """

    position: int = 1
    flags: "Sequence[KeyValue[Optional[int]]]" = field(default_factory=Sequence.zero)
    seen: FrozenSet[str] = frozenset()
    leftovers: "Sequence[int]" = field(default_factory=Sequence.zero)


def _peek(args: Sequence[str], index: int) -> Optional[Token]:
    if index < len(args):
        return Token(index, args[index])
    return None


def _read_flag(
    scan: Scan, token: Token, args: Sequence[str], specs: Mapping[str, Arity]
) -> Result[Scan]:
    name = token.name
    if name not in specs:
        return Result.zero(
            error=UnknownFlag(usage=f"Unrecognized flag: {token.text}", name=name)
        )
    if name in scan.seen:
        return Result.zero(
            error=DuplicateFlag(
                usage=f"Flag '{token.text}' was given more than once.", name=name
            )
        )

    following = _peek(args, token.index + 1)
    has_parameter = following is not None and not following.is_flag
    arity = specs[name]

    if arity is Arity.NEVER and has_parameter:
        assert following is not None
        return Result.zero(
            error=UnexpectedParameter(
                usage=f"Flag '{token.text}' does not take a parameter. Got '{following.text}'",
                name=name,
                parameter=following.text,
            )
        )
    if arity is Arity.REQUIRED and not has_parameter:
        return Result.zero(
            error=MissingParameter(
                usage=f"Flag '{token.text}' requires a parameter.", name=name
            )
        )

    if has_parameter:
        assert following is not None
        value: Optional[int] = following.index
        position = following.index + 1
    else:
        value = None
        position = token.index + 1
    return Result.return_(
        replace(
            scan,
            position=position,
            flags=scan.flags.append(KeyValue(name, value)),
            seen=scan.seen | {name},
        )
    )


def _read_leftovers(scan: Scan, args: Sequence[str]) -> Result[Scan]:
    """
    Reads every remaining token as a leftover, failing at the first flag.
    """
    end = len(args)
    for index in range(scan.position, end):
        token = Token(index, args[index])
        if token.is_flag:
            return Result.zero(
                error=UnexpectedFlag(
                    usage=f"Flags must come before other arguments. Got '{token.text}'",
                    name=token.name,
                )
            )
    return Result.return_(
        replace(scan, position=end, leftovers=Sequence(range(scan.position, end)))
    )


def step(scan: Scan, args: Sequence[str], specs: Mapping[str, Arity]) -> Result[Scan]:
    """
    Reads the flag at ``scan.position`` (and possibly its parameter), or, if the
    token there is a value, the rest of the input as leftovers.
    """
    token = Token(scan.position, args[scan.position])
    if token.is_flag:
        return _read_flag(scan, token, args, specs)
    return _read_leftovers(scan, args)


def scan(args: Sequence[str], specs: Mapping[str, Arity]) -> Result[Scan]:
    """
    Scans ``args``, skipping the program name at index 0.

    >>> from clparser.data_structures import Sequence
    >>> specs = {"verbose": Arity.NEVER, "output": Arity.REQUIRED}
    >>> result = scan(Sequence(["prog", "--verbose", "--output", "out.txt", "in.txt"]), specs)
    >>> result.get.flags.to_dict()
    {'verbose': None, 'output': 3}
    >>> result.get.leftovers
    Sequence(get=range(4, 5))

    The first error ends the scan:

    >>> scan(Sequence(["prog", "--output"]), specs).get
    MissingParameter(usage="Flag '--output' requires a parameter.", name='output')
    >>> scan(Sequence(["prog", "in.txt", "--verbose"]), specs).get
    UnexpectedFlag(usage="Flags must come before other arguments. Got '--verbose'", name='verbose')
    """
    result: Result[Scan] = Result.return_(Scan())
    f = partial(step, args=args, specs=specs)
    while result.ok and result.get.position < len(args):  # type: ignore[union-attr]
        result = result >= f
    return result
