# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

import os
from abc import ABCMeta, abstractmethod
from os.path import exists
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._fn = os.fspath(filename)

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def exists(self) -> bool:
        return exists(self._fn)

    def delete(self) -> bool:
        """Remove the handled file. `False` if it is missing or locked."""
        try:
            os.remove(self._fn)
        except OSError:
            return False
        return True

    def __str__(self) -> str:
        return self._fn
