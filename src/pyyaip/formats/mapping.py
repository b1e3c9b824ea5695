# -*- encoding: utf-8 -*-
# @File   : mapping.py
# @Time   : 2024/10/13 15:02:37
# @Author : Kariko Lin

"""Plain mapping interchange, i.e. `{section: {key: value}}`.

    ```json
    {
      "": {"Loose": "pair"},
      "Video": {"Height": "1080", "Width": "1920"}
    }
    ```

Scalars at the top level are taken as pairs of section `''`.
"""

import json
import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from ..abstract import FileHandler
from ..convert import to_string
from ..ini.model import DEFAULT_SECTION, IniDocument

__all__ = ['IniMappingParser', 'IniJsonParser', 'IniYamlParser']

_logger = logging.getLogger(__name__)


# should keep this base class for better type hinting.
class IniMappingParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | os.PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def from_mapping(
        src: Mapping[str, Any], ins: IniDocument | None = None
    ) -> IniDocument:
        if ins is None:
            ins = IniDocument()
        ins.clear()
        for k, v in src.items():
            if isinstance(v, Mapping):
                sect = ins.setdefault(str(k))
                for key, val in v.items():
                    sect[str(key)] = '' if val is None else to_string(val)
            elif isinstance(v, (list, tuple)):
                _logger.warning(
                    f'"{k}": sequences are not INI values, skipped.')
            else:
                ins.setdefault(DEFAULT_SECTION)[str(k)] = (
                    '' if v is None else to_string(v))
        ins.prune()
        return ins

    @staticmethod
    def to_mapping(instance: IniDocument) -> dict[str, dict[str, str]]:
        return instance.to_dict()


class IniJsonParser(IniMappingParser):
    def read(self, ins: IniDocument | None = None) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = json.load(fp)
        if not isinstance(src, Mapping):
            raise ValueError(f'{self._fn}: JSON root should be an object.')
        return self.from_mapping(src, ins)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(self.to_mapping(instance), fp,
                      ensure_ascii=False, indent=indent)


class IniYamlParser(IniMappingParser):
    def read(self, ins: IniDocument | None = None) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.load(fp.read(), yaml.SafeLoader)
        if src is None:
            src = {}
        if not isinstance(src, Mapping):
            raise ValueError(f'{self._fn}: YAML root should be a mapping.')
        return self.from_mapping(src, ins)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(self.to_mapping(instance), fp,
                           allow_unicode=True, sort_keys=False, indent=indent)
