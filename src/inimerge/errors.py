# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/03/02 21:52:03
# @Author : Kariko Lin


class ConfigurationError(Exception):
    """Raised when INI content (or where it comes from) is unusable."""
    pass


class MalformedLineError(ConfigurationError):
    """A content line that cannot be split into a key and a value."""

    def __init__(self, line: str, msg: str | None = None) -> None:
        super().__init__(
            msg or 'Line must contain both a key and a value. '
            f'Only one string token was found: {line!r}')
        self.line = line
