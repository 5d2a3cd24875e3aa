# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/03/02 21:35:12
# @Author : Kariko Lin

import logging

from .consts import DEFAULT_SECTION_NAME
from .errors import ConfigurationError, MalformedLineError
from .ini import (
    IniDocument, IniSection,
    IniParser, IniYamlParser,
    parse, readstream, dumps, load_first,
    merge, merge_documents
)

__all__ = [
    'IniDocument', 'IniSection', 'DEFAULT_SECTION_NAME',
    'IniParser', 'IniYamlParser', 'parse', 'readstream', 'dumps',
    'load_first', 'merge', 'merge_documents',
    'ConfigurationError', 'MalformedLineError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
