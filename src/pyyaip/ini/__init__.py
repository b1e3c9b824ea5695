# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .matcher import IniLine, IniLineMatcher, LineKind
from .model import DEFAULT_SECTION, IniDocument, IniSection
from .parser import IniParser

__all__ = [
    'IniLine', 'IniLineMatcher', 'LineKind',
    'DEFAULT_SECTION', 'IniDocument', 'IniSection',
    'IniParser'
]
