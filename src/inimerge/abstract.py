# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/03/02 21:37:44
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Reads or writes one `T` at a filesystem path.

    Whoever holds the handler owns the file; streams are opened and
    closed inside `read()` / `write()`, never kept.
    """

    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T | None:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
