# -*- encoding: utf-8 -*-
# @File   : matcher.py
# @Time   : 2024/10/12 22:13:41
# @Author : Kariko Lin

"""Single line recognition of INI text.

Only two shapes are meaningful:

    ```ini
    [Section]  ; comment
    Key = Value  ; comment
    ```

Anything else (blank lines, full line comments, garbage) is not an error,
the matcher simply doesn't recognize it.
"""

from enum import Enum
from re import compile as regex
from re import escape
from typing import NamedTuple

__all__ = ['LineKind', 'IniLine', 'IniLineMatcher']


class LineKind(str, Enum):
    SECTION = 'section'
    PAIR = 'pair'


class IniLine(NamedTuple):
    kind: LineKind
    section: str | None = None
    key: str | None = None
    value: str | None = None
    comment: str | None = None


class IniLineMatcher:
    """Recognize section declarations and key-value pairs.

    The comment separator is fixed once the matcher is built.
    Section names, keys and values are captured as they are,
    i.e. case and inner spaces are kept.
    """

    def __init__(self, comment_sep: str = ';') -> None:
        if len(comment_sep) != 1:
            raise ValueError(
                f'comment separator should be ONE char, got {comment_sep!r}')
        self._sep = comment_sep
        sep = escape(comment_sep)
        self.__section = regex(
            r'\s*\[([^\]]+)\]\s*(?:' + sep + r'(.*))?.*')
        # the key never starts with a blank.
        # a key with comment separator is a commented out pair.
        self.__pair = regex(
            r'\s*([^=\s' + sep + r'][^=' + sep + r']*?)\s*=\s*'
            r'([^' + sep + r']+)(?:' + sep + r'(.*))?')

    @property
    def comment_sep(self) -> str:
        return self._sep

    def match_section(self, line: str) -> str | None:
        """`[Section]` => `'Section'`, otherwise `None`."""
        if (m := self.__section.match(line)) is None:
            return None
        return m.group(1)

    def match_pair(self, line: str) -> tuple[str, str] | None:
        """`Key=Value` => `('Key', 'Value')`, otherwise `None`."""
        if (m := self.__pair.match(line)) is None:
            return None
        return m.group(1), m.group(2)

    def classify(self, line: str) -> IniLine | None:
        # section first, and the first match wins.
        if (m := self.__section.match(line)) is not None:
            return IniLine(LineKind.SECTION,
                           section=m.group(1), comment=m.group(2))
        if (m := self.__pair.match(line)) is not None:
            return IniLine(LineKind.PAIR,
                           key=m.group(1), value=m.group(2),
                           comment=m.group(3))
        return None

    def __repr__(self) -> str:
        return f'{type(self).__name__}(comment_sep={self._sep!r})'
