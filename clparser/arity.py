"""
Defines :py:class:`Arity`, :py:class:`FlagSpec` and :py:func:`parse_spec`, which reads
the self-describing flag tokens accepted by :py:meth:`CLParser.define <clparser.parser.CLParser.define>`.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from clparser.errors import InvalidSpec
from clparser.result import Result

_WORD = r"[^\s\[\]\-][^\s\[\]]*"
SPEC_PATTERN = re.compile(
    rf"(?P<dashes>-+)(?P<name>{_WORD})"
    rf"(?:\s+(?:\[(?P<optional>{_WORD})\]|(?P<required>{_WORD})))?"
)


class Arity(Enum):
    """
    How many parameters a flag accepts.
    """

    NEVER = "never"
    OPTIONAL = "optional"
    REQUIRED = "required"


@dataclass(frozen=True)
class FlagSpec:
    name: str
    arity: Arity


def strip_dashes(token: str) -> str:
    """
    >>> strip_dashes("--dry-run")
    'dry-run'
    >>> strip_dashes("value")
    'value'
    """
    return token.lstrip("-")


def read_spec(token: str, arity: Optional[Arity] = None) -> Result[FlagSpec]:
    """
    Reads ``token`` into a :py:class:`FlagSpec`. Without ``arity``, the arity comes
    from the token itself:

    >>> read_spec("--verbose").get
    FlagSpec(name='verbose', arity=<Arity.NEVER: 'never'>)
    >>> read_spec("--output FILE").get
    FlagSpec(name='output', arity=<Arity.REQUIRED: 'required'>)
    >>> read_spec("-level [N]").get
    FlagSpec(name='level', arity=<Arity.OPTIONAL: 'optional'>)

    With ``arity``, the token must be a bare flag:

    >>> read_spec("--level", Arity.OPTIONAL).get
    FlagSpec(name='level', arity=<Arity.OPTIONAL: 'optional'>)
    >>> read_spec("--level [N]", Arity.OPTIONAL).get
    InvalidSpec(usage="Invalid flag definition: '--level [N]'. Expected '--name'.", spec='--level [N]')

    So is an arity that is not an :py:class:`Arity`:

    >>> read_spec("--level", "optional").get.usage
    "Invalid arity for '--level': 'optional'. Expected one of Arity.NEVER, Arity.OPTIONAL, Arity.REQUIRED."

    Tokens without leading dashes are rejected:

    >>> read_spec("verbose").get
    InvalidSpec(usage="Invalid flag definition: 'verbose'. Expected '--name', '--name VALUE' or '--name [VALUE]'.", spec='verbose')
    """
    if arity is not None and not isinstance(arity, Arity):
        return Result.zero(
            error=InvalidSpec(
                usage=f"Invalid arity for '{token}': {arity!r}. Expected one of "
                + ", ".join(str(a) for a in Arity)
                + ".",
                spec=token,
            )
        )
    match = SPEC_PATTERN.fullmatch(token)
    if arity is None:
        expected = "'--name', '--name VALUE' or '--name [VALUE]'"
    else:
        expected = "'--name'"
    bare = match is not None and match["optional"] is None and match["required"] is None
    if match is None or (arity is not None and not bare):
        return Result.zero(
            error=InvalidSpec(
                usage=f"Invalid flag definition: '{token}'. Expected {expected}.",
                spec=token,
            )
        )
    if arity is None:
        if match["optional"] is not None:
            arity = Arity.OPTIONAL
        elif match["required"] is not None:
            arity = Arity.REQUIRED
        else:
            arity = Arity.NEVER
    return Result.return_(FlagSpec(name=match["name"], arity=arity))


def parse_spec(token: str, arity: Optional[Arity] = None) -> FlagSpec:
    """
    Like :py:func:`read_spec` but raises :py:class:`InvalidSpec <clparser.errors.InvalidSpec>`
    on failure.

    >>> parse_spec("--world VALUE")
    FlagSpec(name='world', arity=<Arity.REQUIRED: 'required'>)
    >>> parse_spec("--")
    Traceback (most recent call last):
    ...
    clparser.errors.InvalidSpec: Invalid flag definition: '--'. Expected '--name', '--name VALUE' or '--name [VALUE]'.
    """
    return read_spec(token, arity).unwrap()
