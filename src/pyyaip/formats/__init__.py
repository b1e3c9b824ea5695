# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 15:01:12
# @Author : Kariko Lin
from .mapping import IniMappingParser, IniJsonParser, IniYamlParser

__all__ = ['IniMappingParser', 'IniJsonParser', 'IniYamlParser']
