"""
Defines the :py:class:`CLParser <clparser.parser.CLParser>` class.
"""
import os
import sys
from typing import Dict, Iterable, List, Optional

from clparser.arity import Arity, parse_spec, strip_dashes
from clparser.data_structures import Sequence
from clparser.errors import ArgumentError
from clparser.scanner import Scan, scan

FALSE_STRINGS = ("", "0", "false", "no", "off")


def env_flag(name: str, default: bool) -> bool:
    """
    Reads a boolean switch from the environment.

    >>> os.environ["CLPARSER_EXAMPLE"] = "0"
    >>> env_flag("CLPARSER_EXAMPLE", True)
    False
    >>> os.environ["CLPARSER_EXAMPLE"] = "yes"
    >>> env_flag("CLPARSER_EXAMPLE", False)
    True
    >>> del os.environ["CLPARSER_EXAMPLE"]
    >>> env_flag("CLPARSER_EXAMPLE", True)
    True
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in FALSE_STRINGS


TESTING = env_flag("CLPARSER_TESTING", False)
PRINTING = env_flag("CLPARSER_PRINTING", True)


class CLParser:
    """
    Main class powering the argument parser. Flags are declared with
    :py:meth:`define`, the input is scanned with :py:meth:`parse` and the
    results are read with :py:meth:`get` and :py:attr:`leftovers`.

    >>> p = (
    ...     CLParser(["prog", "--verbose", "--output", "out.txt", "in.txt"])
    ...     .define("--output FILE")
    ...     .define("--verbose")
    ...     .define("--level [N]")
    ...     .parse()
    ... )
    >>> p.get("output")
    'out.txt'
    >>> p.get("verbose") is None
    True
    >>> "verbose" in p, "level" in p
    (True, False)
    >>> p.leftovers
    ['in.txt']

    Parameters
    ----------

    args : Optional[Iterable[str]]
        The input, including the program name at index 0. Defaults to ``sys.argv``.
    """

    def __init__(self, args: Optional[Iterable[str]] = None):
        self.args: Sequence[str] = Sequence(list(sys.argv if args is None else args))
        self.specs: Dict[str, Arity] = {}
        self._scan: Optional[Scan] = None

    def define(self, token: str, arity: Optional[Arity] = None) -> "CLParser":
        """
        Declares a flag. Without ``arity``, the arity is read from ``token``:
        ``--name`` takes no parameter, ``--name VALUE`` requires one and
        ``--name [VALUE]`` accepts an optional one.

        >>> p = CLParser(["prog", "--count", "3"]).define("--count", Arity.REQUIRED).parse()
        >>> p.get("count")
        '3'

        Defining a flag twice keeps the last definition:

        >>> p = CLParser(["prog", "--count"]).define("--count N").define("--count [N]").parse()
        >>> p.get("count") is None
        True

        Parameters
        ----------

        token : str
            The flag, with at least one leading dash.

        arity : Optional[Arity]
            An explicit arity. When given, ``token`` must be a bare flag.

        Raises
        ------

        InvalidSpec
            If ``token`` is not a well-formed flag definition.
        """
        if self._scan is not None:
            raise RuntimeError("Flags must be defined before parse() is called.")
        spec = parse_spec(token, arity)
        self.specs[spec.name] = spec.arity
        return self

    def parse(self) -> "CLParser":
        """
        Scans the input against the defined flags.

        >>> CLParser(["prog", "--verbose", "x"]).define("--verbose").parse()
        Traceback (most recent call last):
        ...
        clparser.errors.UnexpectedParameter: Flag '--verbose' does not take a parameter. Got 'x'

        Raises
        ------

        ArgumentError
            The first error found in the input. No results are kept.
        """
        self._scan = None
        self._scan = scan(self.args, self.specs).unwrap()
        return self

    def parse_args(self) -> Optional[Dict[str, Optional[str]]]:
        """
        Like :py:meth:`parse`, but reports errors and exits instead of raising.
        Returns the flags that were given, mapped to their values.

        >>> CLParser(["prog", "--level", "2"]).define("--level [N]").parse_args()
        {'level': '2'}
        >>> CLParser(["prog", "--level", "2"]).define("--quiet").parse_args()
        Unrecognized flag: --level
        """
        try:
            self.parse()
        except ArgumentError as error:
            self.handle_error(error)
            return None
        return self.to_dict()

    def handle_error(self, error: ArgumentError) -> None:
        self._print(error.usage)
        if TESTING:
            return
        else:
            sys.exit(2)

    @staticmethod
    def _print(*args, **kwargs):
        if PRINTING:
            print(*args, **kwargs)

    def _parsed(self) -> Scan:
        if self._scan is None:
            raise RuntimeError("parse() must succeed before results can be read.")
        return self._scan

    def get(self, name: str) -> Optional[str]:
        """
        Returns the parameter given for ``name``, or ``None`` if the flag was
        absent or given without a parameter.

        >>> p = CLParser(["prog", "--level", "2"]).define("--level [N]").parse()
        >>> p.get("level"), p.get("--level")
        ('2', '2')
        >>> p.get("verbose")
        Traceback (most recent call last):
        ...
        KeyError: "Flag 'verbose' was never defined."
        """
        name = strip_dashes(name)
        if name not in self.specs:
            raise KeyError(f"Flag '{name}' was never defined.")
        index = self.to_indices().get(name)
        return None if index is None else self.args[index]

    def __contains__(self, name: str) -> bool:
        return strip_dashes(name) in self._parsed().seen

    @property
    def leftovers(self) -> List[str]:
        return [self.args[i] for i in self._parsed().leftovers]

    def to_indices(self) -> Dict[str, Optional[int]]:
        return self._parsed().flags.to_dict()

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        >>> p = CLParser(["prog", "--are", "--you", "well"]).define("--are").define("--you [X]")
        >>> p.parse().to_dict()
        {'are': None, 'you': 'well'}
        """
        return {
            k: None if v is None else self.args[v] for k, v in self.to_indices().items()
        }
