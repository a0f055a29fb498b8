"""
Classifies raw input strings as flags or values.
"""
from dataclasses import dataclass

from clparser.arity import strip_dashes


@dataclass(frozen=True)
class Token:
    """
    A raw input string and its position in the input.

    Parameters
    ----------

    index : int
        Position of the token in the parser's input.

    text : str
        The token as it appeared in the input.
    """

    index: int
    text: str

    @property
    def is_flag(self) -> bool:
        """
        A token is a flag if and only if it has at least one leading dash.

        >>> Token(1, "--verbose").is_flag
        True
        >>> Token(1, "-").is_flag
        True
        >>> Token(1, "dry-run").is_flag
        False
        """
        return self.text.startswith("-")

    @property
    def name(self) -> str:
        """
        >>> Token(1, "--verbose").name
        'verbose'
        >>> Token(1, "value").name
        'value'
        """
        return strip_dashes(self.text)
