# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/03/02 21:40:17
# @Author : Kariko Lin

from enum import Enum

# empty string means the first, unnamed section.
DEFAULT_SECTION_NAME = ''
DEFAULT_CHARSET_NAME = 'utf-8'

# below this, `chardet` guesses are not trusted.
CHARSET_CONFIDENCE = 0.8

ESCAPE_TOKEN = '\\'
KEY_VALUE_SEPARATORS = (':', '=')


class CommentMark(str, Enum):
    POUND = '#'
    SEMICOLON = ';'


class SectionMark(str, Enum):
    PREFIX = '['
    SUFFIX = ']'


COMMENT_PREFIXES = tuple(i.value for i in CommentMark)
