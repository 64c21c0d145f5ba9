# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/11 00:57:10
# @Author : Kariko Lin

"""
Options tree: named sections of string pairs, each pair knowing
which file it came from.

The tree is *flat below the root* as far as the INI reader is concerned,
i.e. `[mesh.x]` is one child named `mesh.x`, not `x` inside `mesh`.
"""

import logging
from collections.abc import MutableMapping
from typing import Iterator, TypedDict

logger = logging.getLogger(__name__)


class OptionEntry(TypedDict):
    value: str
    source: str


class Options(MutableMapping[str, str]):
    """一个配置小节。

    Behaves as a `str: str` dict of its own values, while child sections
    are reached by `get_section()`. Every value keeps the source it was
    set from; plain `self[key] = value` records an empty source.
    """

    def __init__(self, name: str = '', parent: 'Options | None' = None):
        self._name = name
        self._parent = parent
        self.__entries: dict[str, OptionEntry] = {}
        self.__sections: dict[str, Options] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> 'Options | None':
        return self._parent

    def get_section(self, name: str) -> 'Options':
        """Fetch child section `name`, creating it on first use."""
        if name not in self.__sections:
            self.__sections[name] = Options(name, self)
        return self.__sections[name]

    def has_section(self, name: str) -> bool:
        return name in self.__sections

    def sections(self) -> Iterator[str]:
        return iter(self.__sections)

    def set(self, key: str, value: str, source: str = '') -> None:
        """Set `key`, overwriting any previous value (last write wins)."""
        old = self.__entries.get(key)
        if old is not None and old['source'] != source:
            logger.debug(
                '%s %s: "%s" (%s) overridden by "%s" (%s)',
                self, key, old['value'], old['source'] or '<unknown>',
                value, source or '<unknown>')
        self.__entries[key] = OptionEntry(value=value, source=source)

    def entry(self, key: str) -> OptionEntry:
        return self.__entries[key]

    def source_of(self, key: str) -> str:
        return self.__entries[key]['source']

    def __getitem__(self, key: str) -> str:
        return self.__entries[key]['value']

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__entries

    def __len__(self) -> int:
        return len(self.__entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__entries)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d, .sections = %d }' % (
            self._name, len(self.__entries), len(self.__sections))

    def to_dict(self) -> dict[str, str]:
        """该小节自身的键值对（不含子小节）。"""
        return {k: v['value'] for k, v in self.__entries.items()}
