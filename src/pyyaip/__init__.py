# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:20:17
# @Author : Kariko Lin

import logging

from .convert import ConversionError, register_converter
from .ini import (
    DEFAULT_SECTION, IniDocument, IniLineMatcher, IniParser, IniSection
)
from .formats import IniJsonParser, IniYamlParser

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'IniLineMatcher',
    'DEFAULT_SECTION', 'ConversionError', 'register_converter',
    'IniJsonParser', 'IniYamlParser'
]

version = '0.2.0'

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
