"""
A single-pass command-line flag parser.

>>> from clparser import CLParser
>>> p = (
...     CLParser("cmdname --are --hello 1hello --world wuldparam extra1".split())
...     .define("--hello [value]")
...     .define("--world value")
...     .define("--are")
...     .parse()
... )
>>> p.get("hello"), p.get("world"), p.get("are")
('1hello', 'wuldparam', None)
>>> p.leftovers
['extra1']
"""
from clparser.arity import Arity, FlagSpec, parse_spec
from clparser.errors import (
    ArgumentError,
    DuplicateFlag,
    FlagError,
    InvalidSpec,
    MissingParameter,
    UnexpectedFlag,
    UnexpectedParameter,
    UnknownFlag,
)
from clparser.parser import CLParser
from clparser.result import Result
from clparser.scanner import Scan, scan

__all__ = [
    "CLParser",
    "Arity",
    "FlagSpec",
    "parse_spec",
    "scan",
    "Scan",
    "Result",
    "ArgumentError",
    "FlagError",
    "InvalidSpec",
    "UnknownFlag",
    "DuplicateFlag",
    "MissingParameter",
    "UnexpectedParameter",
    "UnexpectedFlag",
]
