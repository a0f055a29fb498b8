"""
Defines errors which can be raised while defining flags or parsing arguments.
"""
from dataclasses import dataclass


@dataclass
class ArgumentError(Exception):
    usage: str

    def __str__(self) -> str:
        return self.usage


@dataclass
class InvalidSpec(ArgumentError):
    spec: str


@dataclass
class FlagError(ArgumentError):
    name: str


@dataclass
class UnknownFlag(FlagError):
    pass


@dataclass
class DuplicateFlag(FlagError):
    pass


@dataclass
class MissingParameter(FlagError):
    pass


@dataclass
class UnexpectedParameter(FlagError):
    parameter: str


@dataclass
class UnexpectedFlag(FlagError):
    pass
