# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/03/03 00:21:09
# @Author : Kariko Lin

"""Note: the parser itself never opens anything.

`parse()` consumes text, bytes or an already opened stream (and leaves
closing that stream to whoever opened it). Files are the business of
`IniParser`, which opens *and closes* them on its own.

Bytes are expected to be UTF-8 unless told otherwise.
"""

import codecs
import logging
from io import StringIO, TextIOBase
from re import compile as regex
from warnings import warn

import chardet

from ..abstract import FileHandler
from ..consts import (
    CHARSET_CONFIDENCE,
    COMMENT_PREFIXES,
    DEFAULT_CHARSET_NAME,
    DEFAULT_SECTION_NAME,
    ESCAPE_TOKEN,
    KEY_VALUE_SEPARATORS,
    SectionMark
)
from ..errors import ConfigurationError
from .lexer import (
    LineKind,
    classify,
    is_separator,
    join_continued,
    section_name,
    split_key_value
)
from .model import IniDocument, IniSection


def decode(raw: bytes, encoding: str = DEFAULT_CHARSET_NAME) -> str:
    try:
        # a leading BOM would otherwise stick to the first line.
        if codecs.lookup(encoding).name == 'utf-8':
            encoding = 'utf-8-sig'
        return raw.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f'Unable to decode INI content as {encoding}: {e}') from e


# a bare `\r`, NEL and the unicode line/paragraph separators end a line too.
_LINE_BREAK = regex(r'\r\n|[\n\r\x85\u2028\u2029]')


def _flush(ins: IniDocument, name: str, content: list[str]) -> None:
    if not ''.join(content).strip():
        return
    pairs = [split_key_value(i) for i in join_continued(content)]
    ins.add_section(name).update(pairs)


def readstream(buf: TextIOBase, ins: IniDocument | None = None) -> IniDocument:
    """读取解码好的字符串流。

    Content lines are buffered per section and only split once the section
    is closed (by the next header, or by the end of `buf`), so that
    continuation can join them. A header seen twice extends its section.

    `ins` is only merged into once all of `buf` has been parsed,
    so a malformed line leaves it exactly as it was.

    Raises:
        MalformedLineError: on the first content line without key or value.
        ConfigurationError: if `buf` cannot be read or decoded.
    """
    ret = IniDocument()
    this_sect = DEFAULT_SECTION_NAME
    content: list[str] = []
    try:
        while chunk := buf.readline():
            for i in _LINE_BREAK.split(chunk):
                kind = classify(i)
                if kind is LineKind.HEADER:
                    # found a new section, convert the buffered one.
                    _flush(ret, this_sect, content)
                    content = []
                    this_sect = section_name(i)
                    logging.debug(f'Parsing [{this_sect}]')
                elif kind is LineKind.CONTENT:
                    content.append(i)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f'Unable to read INI stream: {e}') from e
    _flush(ret, this_sect, content)

    if ins is None:
        return ret
    ins.merge(ret)
    return ins


def _as_stream(source) -> TextIOBase:
    if isinstance(source, str):
        return StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return StringIO(decode(bytes(source)))
    if isinstance(source, TextIOBase):
        return source
    if not hasattr(source, 'read'):
        raise TypeError(
            'Expected str, bytes or a readable stream, '
            f'got {type(source).__name__}.')
    try:
        data = source.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f'Unable to read INI stream: {e}') from e
    if isinstance(data, (bytes, bytearray)):
        return StringIO(decode(bytes(data)))
    return StringIO(data)


def parse_into(source, ins: IniDocument) -> IniDocument:
    return readstream(_as_stream(source), ins)


def parse(source) -> IniDocument:
    """Parse INI text into a new `IniDocument`.

    `source` may be a `str`, UTF-8 `bytes`, a text stream or a binary stream.
    """
    return parse_into(source, IniDocument())


def _escape_key(key: str) -> str:
    ret = ''.join(ESCAPE_TOKEN + c if is_separator(c) else c for c in key)
    if ret.startswith(COMMENT_PREFIXES + (SectionMark.PREFIX.value,)):
        ret = ESCAPE_TOKEN + ret
    return ret


def _escape_value(value: str) -> str:
    if value[:1] in KEY_VALUE_SEPARATORS:
        return ESCAPE_TOKEN + value
    return value


def _is_lossless(text: str) -> bool:
    return (
        bool(text) and text == text.strip()
        and ESCAPE_TOKEN not in text
        and not _LINE_BREAK.search(text))


def _output_section(section: IniSection, delimiter: str) -> str:
    if section.name != DEFAULT_SECTION_NAME and not _is_lossless(section.name):
        warn(f'Section name "{section.name}" will not read back the same.')
    lines = [] if section.name == DEFAULT_SECTION_NAME else [
        f'{SectionMark.PREFIX.value}{section.name}{SectionMark.SUFFIX.value}'
    ]
    for k, v in section.items():
        if not (_is_lossless(k) and _is_lossless(v)):
            warn(f'{section} "{k}" = "{v}" will not read back the same.')
        lines.append(f'{_escape_key(k)}{delimiter}{_escape_value(v)}')
    return '\n'.join(lines) + '\n'


def dumps(
    instance: IniDocument, *,
    delimiter: str = ' = ',
    blank_lines: int = 1
) -> str:
    """Output `instance` as INI text.

    The default section goes first, without header; empty sections are
    skipped. Escapes are added so that `parse(dumps(doc)) == doc` holds as
    long as no key or value contains the escape token, a line break,
    or surrounding whitespace (a `UserWarning` is given for those).
    """
    if not delimiter or not all(is_separator(c) for c in delimiter):
        raise ValueError(f'Invalid key/value delimiter: {delimiter!r}')
    default = instance.get_section(DEFAULT_SECTION_NAME)
    ordered = [default] if default is not None else []
    ordered += [i for i in instance.sections() if i is not default]
    return ('\n' * blank_lines).join(
        _output_section(i, delimiter) for i in ordered if i)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, rootfile: str,
        encoding: str | None = DEFAULT_CHARSET_NAME, *,
        required: bool = False
    ) -> None:
        super().__init__(rootfile)
        self._codec = encoding
        self._required = required

    @staticmethod
    def _decode_file(filename: str, encoding: str | None = None) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        if encoding is None:
            codec = chardet.detect(raw)
            if codec['encoding'] is None or \
                    codec['confidence'] < CHARSET_CONFIDENCE:
                codec = {'encoding': DEFAULT_CHARSET_NAME}
            encoding = codec['encoding']
        return StringIO(decode(raw, encoding))

    def read(self) -> IniDocument | None:
        """读取`IniParser`实例指定的文件。

        `encoding=None` lets `chardet` guess the charset.

        Returns `None` if the file cannot be opened and is not required.
        A required file that is missing, or holds no key at all,
        raises `ConfigurationError`.
        """
        try:
            buf = self._decode_file(self._fn, self._codec)
        except OSError as e:
            if self._required:
                raise ConfigurationError(
                    f'Unable to load resource path "{self._fn}"') from e
            logging.debug(f'Unable to load optional path "{self._fn}": {e}')
            return None

        ins = readstream(buf)
        if self._required and ins.is_empty():
            raise ConfigurationError(
                f'Required configuration location "{self._fn}" '
                'does not exist or did not contain any INI configuration.')
        return ins

    def write(
        self, instance: IniDocument, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        """保存到*一个* INI 文件。注释不会保留。"""
        text = dumps(instance, delimiter=delimiter, blank_lines=blank_lines)
        with open(self._fn, 'w',
                  encoding=self._codec or DEFAULT_CHARSET_NAME) as fp:
            fp.write(text)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f'({self._codec})'


def load_first(
    *paths: str, encoding: str | None = DEFAULT_CHARSET_NAME
) -> IniDocument | None:
    """Read `paths` in order; the first non-empty document wins.

    Locations that cannot be opened are skipped. `None` if none is usable.
    """
    for i in paths:
        ins = IniParser(i, encoding).read()
        if ins is None:
            continue
        if not ins.is_empty():
            logging.debug(
                f'Discovered non-empty INI configuration at "{i}". '
                'Using for configuration.')
            return ins
        logging.warning(f'"{i}" found, but it did not contain any data.')
    return None
