# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Read & write INI files.

Note: comments are dropped on reading, thus never written back.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from io import StringIO
from warnings import warn

import chardet

from .matcher import IniLineMatcher, LineKind
from .model import DEFAULT_SECTION, IniDocument
from ..abstract import FileHandler

__all__ = ['IniParser']

_logger = logging.getLogger(__name__)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | os.PathLike[str],
        encoding: str | None = None,
        comment_sep: str = ';'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._matcher = IniLineMatcher(comment_sep)

    @staticmethod
    def readstream(
        buf: Iterable[str],
        ins: IniDocument | None = None,
        matcher: IniLineMatcher | None = None
    ) -> IniDocument:
        """Parse lines (or a decoded text stream) into `ins`.

        `ins` gets cleared first. Lines recognized neither as a section
        nor as a pair are skipped, and sections left without any pair
        are dropped at last, section `''` included.

        If no special need, just call `self.read()`.
        """
        if ins is None:
            ins = IniDocument(
                comment_sep=';' if matcher is None else matcher.comment_sep)
        if matcher is None:
            matcher = IniLineMatcher(ins.comment_sep)
        ins.clear()
        this_sect = ins.setdefault(DEFAULT_SECTION)
        for num, i in enumerate(buf):
            line = i.rstrip('\r\n')
            if (parsed := matcher.classify(line)) is None:
                if line.strip():
                    _logger.debug(f"line {num + 1} skipped: {line!r}")
                continue
            if parsed.kind is LineKind.SECTION:
                this_sect = ins.setdefault(parsed.section)
                continue
            if parsed.key in this_sect:
                warn(f'duplicated "{parsed.key}" in {this_sect} '
                     f'(line {num + 1}), the old value is overwritten.')
            this_sect[parsed.key] = parsed.value
        ins.prune()
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec['encoding'] is None
                or (codec['confidence'] or 0) < 0.8):
            _logger.warning(
                f"{filename}: unsure about the encoding "
                f"({codec['encoding']}, {codec['confidence']}), "
                "trying utf-8.")
            codec = {'encoding': 'utf-8', 'confidence': 1.0}
        _logger.debug(f"{filename}: decoding as {codec['encoding']}")

        # fallbacks. latin-1 maps every byte, so nothing gets replaced.
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            _logger.warning(
                f"{filename}: not a valid {codec['encoding']} text, "
                "decoding as latin-1.")
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self, ins: IniDocument | None = None) -> IniDocument:
        """Read the file this `IniParser` is pointing to.

        Raises:
            OSError: the file is missing or unreadable.
        """
        if ins is None:
            ins = IniDocument(self._matcher.comment_sep, self._codec)
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp, ins, self._matcher)
        except UnicodeDecodeError:
            return self.readstream(
                self._decode_file(self._fn), ins, self._matcher)

    @staticmethod
    def writestream(
        instance: IniDocument, *,
        blank_lines: int = 0,
        delimiter: str = '='
    ) -> Iterator[str]:
        """Yield the text lines of `instance`, without line breaks."""
        for section, data in instance.items():
            # no declaration for pairs in section ''.
            if section != DEFAULT_SECTION:
                yield f'[{section}]'
            for k, v in data.items():
                yield f'{k}{delimiter}{v}'
            yield from [''] * blank_lines

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 0,
        delimiter: str = '='
    ) -> None:
        """Save to the file, overwriting it.

        Raises:
            OSError: unable to open or write the file.
        """
        with open(self._fn, 'w', encoding=self._codec) as fp:
            for i in self.writestream(
                    instance, blank_lines=blank_lines, delimiter=delimiter):
                fp.write(i)
                fp.write('\n')

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"
