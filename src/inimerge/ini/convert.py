# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/03/04 19:33:08
# @Author : Kariko Lin

"""INI <-> plain `dict` <-> YAML.

    ```yaml
    '':             # the default section
      key: value
    users:
      root: secret, admin
    ```

There are no typed values in INI, so scalars read from YAML
are stored as their text and nothing deeper than two levels is accepted.
"""

from collections.abc import Mapping

import yaml

from ..abstract import FileHandler
from ..consts import DEFAULT_CHARSET_NAME
from ..errors import ConfigurationError
from .model import IniDocument


def to_dict(instance: IniDocument) -> dict[str, dict[str, str]]:
    return {name: dict(section) for name, section in instance.items()}


def _as_text(section: str, key: str, value: object) -> str:
    # bool is an int, check it first.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigurationError(
        f'[{section}] "{key}" must be a plain value, '
        f'got {type(value).__name__}.')


def from_dict(data: Mapping) -> IniDocument:
    """Build a document from `{section: {key: value}}`.

    A section mapped to `None` becomes an empty section.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f'Expected a mapping of sections, got {type(data).__name__}.')
    ret = IniDocument()
    for name, pairs in data.items():
        section = ret.add_section(None if name is None else str(name))
        if pairs is None:
            continue
        if not isinstance(pairs, Mapping):
            raise ConfigurationError(
                f'Section "{name}" must be a mapping of key/value pairs, '
                f'got {type(pairs).__name__}.')
        for k, v in pairs.items():
            section[str(k)] = _as_text(section.name, k, v)
    return ret


def dump_yaml(instance: IniDocument) -> str:
    return yaml.safe_dump(
        to_dict(instance),
        allow_unicode=True, sort_keys=False, default_flow_style=False)


def load_yaml(text: str) -> IniDocument:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Invalid YAML: {e}') from e
    if data is None:
        return IniDocument()
    return from_dict(data)


class IniYamlParser(FileHandler[IniDocument]):
    """Keeps an `IniDocument` as a YAML file."""

    def __init__(
        self, filename: str, encoding: str = DEFAULT_CHARSET_NAME
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return load_yaml(fp.read())
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f'Unable to read "{self._fn}": {e}') from e

    def write(self, instance: IniDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(dump_yaml(instance))
