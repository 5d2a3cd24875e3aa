# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/03/02 22:48:30
# @Author : Kariko Lin

"""
Basically INI Structure: section -> key -> value, all `str`.

Nothing here interprets values. As for reading/writing files, see `ini.parser`.
"""

from collections.abc import KeysView, Mapping, MutableMapping
from typing import Iterator

from ..consts import DEFAULT_SECTION_NAME
from .lexer import clean_name


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    维护一个 INI 小节的所有键值对，按插入顺序排列（顺序仅用于展示）。
    同名键会直接覆盖旧值。

    判等只看键值对本身，所以也可以直接与普通`dict`比较。
    """

    def __init__(
        self, name: str | None, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = clean_name(name)
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        if self._name == DEFAULT_SECTION_NAME:
            return '<default>'
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (self, len(self._data))

    def clear(self) -> None:
        self._data.clear()

    def entries(self) -> list[tuple[str, str]]:
        """All `(key, value)` pairs, in insertion order."""
        return list(self._data.items())

    def copy(self) -> 'IniSection':
        return IniSection(self._name, self._data)


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        key = val   ; 位于任何小节之前，归入默认小节（名为空串）。

        [users]
        root = secret, admin
        guest: guest, guest
        ```

    所有小节名都会先去掉首尾空白，空名即默认小节。
    小节只属于一个文档：赋值、复制、合并都会复制键值对，不共享引用。
    """

    def __init__(
        self,
        defaults: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        """Init an empty document, or a deep copy of `defaults`."""
        self.__sections: dict[str, IniSection] = {}
        if defaults is not None:
            for name, pairs in defaults.items():
                self[name] = pairs

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[clean_name(key)]

    def __setitem__(self, key: str, value: Mapping[str, str]) -> None:
        name = clean_name(key)
        # never keep a ptr to the external mapping.
        self.__sections[name] = IniSection(name, value)

    def __delitem__(self, key: str) -> None:
        del self.__sections[clean_name(key)]

    def __contains__(self, key: object) -> bool:
        if key is not None and not isinstance(key, str):
            return False
        return clean_name(key) in self.__sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __len__(self) -> int:
        return len(self.__sections)

    def __str__(self) -> str:
        if not self.__sections:
            return '<empty INI>'
        return 'sections=' + ','.join(
            str(i) for i in self.__sections.values())

    def __repr__(self) -> str:
        return f'<IniDocument {self}>'

    def clear(self) -> None:
        self.__sections.clear()

    def add_section(self, name: str | None) -> IniSection:
        """Get the section named `name`, creating an empty one if needed."""
        name = clean_name(name)
        section = self.__sections.get(name)
        if section is None:
            section = self.__sections[name] = IniSection(name)
        return section

    def get_section(self, name: str | None) -> IniSection | None:
        return self.__sections.get(clean_name(name))

    def remove_section(self, name: str | None) -> IniSection | None:
        """Detach and return the section, or `None` if there is none."""
        return self.__sections.pop(clean_name(name), None)

    def set_property(
        self, section: str | None, key: str, value: str
    ) -> None:
        self.add_section(section)[key] = value

    def get_property(
        self, section: str | None, key: str, default: str | None = None
    ) -> str | None:
        found = self.get_section(section)
        return default if found is None else found.get(key, default)

    def sections(self) -> list[IniSection]:
        return list(self.__sections.values())

    def section_names(self) -> KeysView[str]:
        return self.__sections.keys()

    def is_empty(self) -> bool:
        """`True` if there is no section, or all sections have no keys."""
        return all(not i for i in self.__sections.values())

    def copy(self) -> 'IniDocument':
        return IniDocument(self)

    def merge(
        self, other: Mapping[str, Mapping[str, str]] | None
    ) -> None:
        """Merge `other` into self, key by key.

        Unlike `update()` (which replaces same named sections as a whole),
        each section of `other` is merged into the existing one:

            ```ini
            ; self          ; other          ; result
            [section1]      [section1]       [section1]
            key1 = value1   foo = bar        key1 = value1
                                             foo = bar
            [section2]      [section2]       [section2]
            key2 = value2   key2 = new       key2 = new
            ```

        Nothing of self is ever removed.
        """
        if other is None:
            return
        for name, pairs in other.items():
            self.add_section(name).update(pairs)

    def load(self, source) -> 'IniDocument':
        """Parse `source` (text, bytes or a stream) into this document."""
        from .parser import parse_into
        return parse_into(source, self)
