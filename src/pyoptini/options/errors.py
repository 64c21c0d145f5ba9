# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/11 01:40:12
# @Author : Kariko Lin

__all__ = [
    'OptionsError', 'ParseError', 'ConfigNotFound', 'UndecodableConfig',
    'MalformedSection', 'MissingSectionName', 'EmptyKeyOrValue'
]


class OptionsError(Exception):
    """Root of everything `pyoptini` raises while reading options.

    `source` and `line` are kept for callers that want more than
    the message, which already embeds both.
    """
    def __init__(
        self, message: str, *,
        source: str | None = None,
        line: str | None = None
    ) -> None:
        super().__init__(message)
        self.source = source
        self.line = line


class ConfigNotFound(OptionsError):
    def __init__(self, source: str) -> None:
        super().__init__(
            f"Options file '{source}' not found", source=source)


class UndecodableConfig(OptionsError):
    def __init__(self, source: str) -> None:
        super().__init__(
            f"Options file '{source}': unknown text encoding",
            source=source)


class ParseError(OptionsError):
    """Bad formatting, found while reading."""


class MalformedSection(ParseError):
    def __init__(self, source: str, line: str) -> None:
        super().__init__(
            f"'{source}': Missing ']'\n\tLine: {line}",
            source=source, line=line)


class MissingSectionName(ParseError):
    def __init__(self, source: str, line: str) -> None:
        super().__init__(
            f"'{source}': Missing section name\n\tLine: {line}",
            source=source, line=line)


class EmptyKeyOrValue(ParseError):
    def __init__(self, line: str, source: str | None = None) -> None:
        super().__init__(
            f"Empty key or value\n\tLine: {line}",
            source=source, line=line)
