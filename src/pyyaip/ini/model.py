# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically a flat INI structure: section -> key -> value, all `str`.

Section names and keys are matched case-insensitively, while the casing
of the *first* insertion is kept for output. Iteration is always in
case-insensitive alphabetical order, NOT insertion order.
"""

import logging
import os
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, TypeVar

from ..convert import from_string, to_string
from .matcher import IniLineMatcher

__all__ = ['IniSection', 'IniDocument', 'DEFAULT_SECTION']

T = TypeVar('T')

# pairs that come before any section declaration.
DEFAULT_SECTION = ''

_logger = logging.getLogger(__name__)


def _fold(name: str) -> str:
    return name.lower()


class IniSection(MutableMapping[str, str]):
    """Key-value pairs of an INI section.

    All pairs are `str: str` (even when the value is empty).
    Other values are converted with `to_string()` when assigned.
    """

    def __init__(
        self, name: str = DEFAULT_SECTION,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = name
        self.__data: dict[str, str] = {}
        # folded key -> key as first written
        self.__keyproxy: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[_fold(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        folded = _fold(key)
        text = to_string(value)
        self.__keyproxy.setdefault(folded, key)
        self.__data[folded] = text

    def __delitem__(self, key: str) -> None:
        folded = _fold(key)
        del self.__data[folded]
        del self.__keyproxy[folded]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter([self.__keyproxy[i] for i in sorted(self.__data)])

    def clear(self) -> None:
        self.__data.clear()
        self.__keyproxy.clear()

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))


class IniDocument(MutableMapping[str, IniSection]):
    """INI document representation. Supports the following (comments won't
    survive a save):

        ```ini
        key = val  ; pairs before any section go to section ''.

        [section]
        key233 = val666
        ```

    Data access:

        ```python
        doc = IniDocument()
        doc.set_value('Video', 'Width', 1920)
        doc.get_value('video', 'WIDTH', 800)  # -> 1920, as int
        doc.get_value('Video', 'Height', '600')  # -> '600', the default
        ```

    Note: NOT thread-safe. Lock it yourself if it is shared between threads.
    """

    def __init__(
        self, comment_sep: str = ';', encoding: str | None = None
    ) -> None:
        self._matcher = IniLineMatcher(comment_sep)
        self._codec = encoding
        self.__raw: dict[str, IniSection] = {}

    @property
    def comment_sep(self) -> str:
        return self._matcher.comment_sep

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[_fold(key)]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str]
    ) -> None:
        folded = _fold(key)
        name = self.__raw[folded].name if folded in self.__raw else key
        # shouldn't keep ptr to external dict in section setting.
        self.__raw[folded] = IniSection(name, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[_fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter([self.__raw[i].name for i in sorted(self.__raw)])

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        """If `key` not in self, then add it (empty, or from `default`)."""
        folded = _fold(key)
        if folded not in self.__raw:
            self.__raw[folded] = IniSection(key, default)
        return self.__raw[folded]

    def clear(self) -> None:
        for i in self.__raw.values():
            i.clear()
        self.__raw.clear()

    def prune(self) -> None:
        """Drop every section without any pair."""
        empties = [k for k, v in self.__raw.items() if not v]
        for i in empties:
            del self.__raw[i]

    # --- data access ---
    def list_sections(self) -> list[str]:
        return list(self)

    def list_keys(self, section: str) -> list[str]:
        if section not in self:
            return []
        return list(self[section])

    def section_is_empty(self, section: str) -> bool:
        return section not in self or len(self[section]) == 0

    def section_delete(self, section: str) -> None:
        if section in self:
            del self[section]

    def key_delete(self, section: str, key: str) -> None:
        """Remove a pair, and the section as well once it gets empty."""
        if section not in self:
            return
        data = self[section]
        if key in data:
            del data[key]
        if not data:
            del self[section]

    def get_value(self, section: str, key: str, default: Any = '') -> Any:
        """Get the value, or `default` when missing OR empty.

        If `default` is not a `str`, the value is converted to
        `type(default)`, see `get_typed()`.
        """
        if default is not None and not isinstance(default, str):
            return self.get_typed(section, key, default)
        if section not in self:
            return default
        return self[section].get(key) or default

    def get_typed(
        self, section: str, key: str,
        default: T | None = None, target: type[T] | None = None
    ) -> T | None:
        """Typed `get_value()`.

        Raises:
            ConversionError: the stored text doesn't fit `target`.
        """
        if target is None:
            if default is None:
                raise TypeError('either `default` or `target` is required')
            target = type(default)
        if default is None:
            raw = self.get_value(section, key, '')
            return from_string(raw, target) if raw else None
        return from_string(
            self.get_value(section, key, to_string(default)), target)

    def set_value(self, section: str, key: str, value: Any) -> bool:
        """Create or overwrite a pair. Non-`str` values are converted.

        Raises:
            ConversionError: `value` has no text form.
        """
        self.setdefault(section)[key] = to_string(value)
        return True

    def value_clear(self, section: str, key: str) -> bool:
        """Empty a value. It reads as missing afterwards."""
        return self.set_value(section, key, '')

    # --- text & file I/O ---
    def load_lines(self, lines: Iterable[str]) -> bool:
        # parser imports this module, so import it lazily.
        from .parser import IniParser
        IniParser.readstream(lines, self, self._matcher)
        return True

    def save_lines(self) -> list[str]:
        from .parser import IniParser
        return list(IniParser.writestream(self))

    def load(self, filename: str | os.PathLike[str]) -> bool:
        """Replace the whole document with what `filename` contains.

        Returns:
            `False` if the file is unreadable. The document is empty then.
        """
        from .parser import IniParser
        self.clear()
        try:
            IniParser(filename, self._codec, self.comment_sep).read(self)
        except OSError as e:
            _logger.warning(f"Unable to load INI: {e}")
            return False
        return True

    def save(self, filename: str | os.PathLike[str]) -> bool:
        from .parser import IniParser
        try:
            IniParser(filename, self._codec, self.comment_sep).write(self)
        except OSError as e:
            _logger.warning(f"Unable to save INI: {e}")
            return False
        return True

    @staticmethod
    def file_exists(filename: str | os.PathLike[str]) -> bool:
        from .parser import IniParser
        return IniParser(filename).exists()

    @staticmethod
    def file_delete(filename: str | os.PathLike[str]) -> bool:
        from .parser import IniParser
        return IniParser(filename).delete()

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: dict(data) for name, data in self.items()}

    def __repr__(self) -> str:
        return f'<{type(self).__name__} sections={self.list_sections()!r}>'
