# -*- encoding: utf-8 -*-
# @File   : merge.py
# @Time   : 2026/03/03 01:02:45
# @Author : Kariko Lin

"""Layering "defaults" and "user" documents.

    ```python
    framework = parse('[main]\\nrealm = a.Realm\\n')
    user = parse('[main]\\nrealm = my.Realm\\ncache = on\\n')
    merge_documents(framework, user)
    # [main] realm = my.Realm, cache = on
    ```

Merging is per key, the later document wins.
Use unique names in defaults if a user must not override them by accident.
"""

from collections.abc import Mapping

from .model import IniDocument


def merge(
    into: IniDocument,
    source: Mapping[str, Mapping[str, str]] | None
) -> IniDocument:
    """Merge `source` into `into` in place, see `IniDocument.merge()`."""
    into.merge(source)
    return into


def merge_documents(
    defaults: IniDocument | None,
    overrides: IniDocument | None
) -> IniDocument | None:
    """A new document: a copy of `defaults`, overridden by `overrides`.

    Neither argument gets modified. If one of them is `None`,
    the other one is returned as is.
    """
    if defaults is None:
        return overrides
    if overrides is None:
        return defaults
    return merge(IniDocument(defaults), overrides)
