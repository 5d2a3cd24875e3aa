# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2026/03/02 22:14:51
# @Author : Kariko Lin

"""Line level pieces of the INI grammar.

    ```ini
    # comments start with `#` or `;`, and only at line start
    key0 = value
    [section]
    key1 = value
    key2: value
    key3   value
    key4 = some long \\
           value
    key\\=5 = value
    ```

`key0` is in the default section. `key4` is continued to `some long value`,
and `key\\=5` escapes the `=` so the key is `key=5`.

Lines are *classified* one by one first, so comments and blank lines never
take part in continuation. Content lines of a section are then joined by
`join_continued()` and cut by `split_key_value()`.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator

from ..consts import (
    COMMENT_PREFIXES,
    DEFAULT_SECTION_NAME,
    ESCAPE_TOKEN,
    KEY_VALUE_SEPARATORS,
    SectionMark
)
from ..errors import MalformedLineError


class LineKind(Enum):
    BLANK = 0
    COMMENT = 1
    HEADER = 2
    CONTENT = 3


def clean_name(name: str | None) -> str:
    """Trim a section name. Empty (or `None`) means the default section."""
    name = name.strip() if name else ''
    if not name:
        logging.debug(
            'Specified name was None or empty. '
            'Defaulting to the default section '
            f'(name = "{DEFAULT_SECTION_NAME}")')
        return DEFAULT_SECTION_NAME
    return name


def classify(line: str) -> LineKind:
    s = line.strip()
    if not s:
        return LineKind.BLANK
    if s.startswith(COMMENT_PREFIXES):
        return LineKind.COMMENT
    if s.startswith(SectionMark.PREFIX) and s.endswith(SectionMark.SUFFIX):
        return LineKind.HEADER
    return LineKind.CONTENT


def section_name(line: str) -> str | None:
    """Name declared by a `[header]` line, `None` if it is not one."""
    s = line.strip()
    if classify(s) is not LineKind.HEADER:
        return None
    return clean_name(s[1:-1])


def is_continued(line: str) -> bool:
    """An odd run of trailing escape tokens continues the line."""
    if not line.strip():
        return False
    backslashes = len(line) - len(line.rstrip(ESCAPE_TOKEN))
    return backslashes % 2 != 0


def join_continued(lines: Iterable[str]) -> Iterator[str]:
    """Join physical lines into logical lines.

    Every physical line is trimmed first. A continued line loses its last
    escape token and the next line is glued on directly, without any
    separator. An even trailing run is left as is for `split_key_value()`.

    Running out of lines while still continuing is fine:
    what was buffered becomes the last logical line.
    """
    buffer: list[str] = []
    for raw in lines:
        line = raw.strip()
        if is_continued(line):
            buffer.append(line[:-1])
            continue
        buffer.append(line)
        yield ''.join(buffer)
        buffer = []
    if buffer:
        yield ''.join(buffer)


def is_separator(c: str) -> bool:
    return c.isspace() or c in KEY_VALUE_SEPARATORS


def split_key_value(line: str) -> tuple[str, str]:
    """Cut one logical line into `(key, value)`.

    The escape token is never kept. It makes the character right after it
    lose its meaning as a separator, so `a\\ b = c` gives `('a b', 'c')`.
    Separators right after the key are swallowed.

    Raises:
        MalformedLineError: if the key or the value ends up empty.
    """
    line = line.strip()
    key: list[str] = []
    value: list[str] = []
    building_key = True
    prev = ''

    for c in line:
        # judged on the character before, not on `c` itself.
        escaped = prev == ESCAPE_TOKEN
        prev = c
        if c == ESCAPE_TOKEN:
            continue
        if building_key:
            if is_separator(c) and not escaped:
                building_key = False
            else:
                key.append(c)
        elif not value and is_separator(c) and not escaped:
            continue
        else:
            value.append(c)

    k, v = ''.join(key).strip(), ''.join(value).strip()
    if not k or not v:
        raise MalformedLineError(line)
    logging.debug(f'Discovered key/value pair: {k} = {v}')
    return k, v
