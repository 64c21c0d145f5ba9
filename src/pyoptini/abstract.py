# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/11 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class OptionReader(Generic[T], metaclass=ABCMeta):
    """Fills an existing options tree from some named source.

    The reader itself keeps no tree, so one instance can feed
    any number of targets.
    """
    @abstractmethod
    def read(self, target: T, source: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError
