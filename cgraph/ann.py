"""Approximate-nearest-neighbour domain nodes and parameters."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from cgraph.objects import CObject
from cgraph.status import CStatus, no_support


class DomainObject(CObject):
    """Common base of domain-specific objects."""


class AnnFuncType(IntEnum):
    """Operation an ANN node performs."""

    PREPARE_ERROR = 0
    TRAIN = 1
    SEARCH = 2
    INSERT = 3
    UPDATE = 4
    REMOVE = 5
    LOAD_MODEL = 6
    SAVE_MODEL = 7
    EDITION = 8
    MAX_SIZE = 9


class DAnnObject(DomainObject):
    """Base of ANN objects; running one directly is not supported."""

    def run(self) -> CStatus:
        return no_support()


class DAnnNode(DAnnObject):
    """ANN node that dispatches run() to the operation chosen by prepare_param()."""

    def _handlers(self) -> dict[AnnFuncType, Callable[[], CStatus]]:
        return {
            AnnFuncType.TRAIN: self.train,
            AnnFuncType.SEARCH: self.search,
            AnnFuncType.INSERT: self.insert,
            AnnFuncType.UPDATE: self.update,
            AnnFuncType.REMOVE: self.remove,
            AnnFuncType.LOAD_MODEL: self.load_model,
            AnnFuncType.SAVE_MODEL: self.save_model,
            AnnFuncType.EDITION: self.edition,
        }

    @abstractmethod
    def prepare_param(self) -> AnnFuncType:
        """Prepare parameters and return the operation to perform."""

    def train(self) -> CStatus:
        return no_support()

    def search(self) -> CStatus:
        return no_support()

    def insert(self) -> CStatus:
        return no_support()

    def update(self) -> CStatus:
        return no_support()

    def remove(self) -> CStatus:
        return no_support()

    def load_model(self) -> CStatus:
        return no_support()

    def save_model(self) -> CStatus:
        return no_support()

    def edition(self) -> CStatus:
        return no_support()

    def refresh_param(self) -> CStatus:
        """Write updated parameters back; runs after a successful operation."""
        return CStatus()

    def run(self) -> CStatus:
        func_type = self.prepare_param()
        if not AnnFuncType.PREPARE_ERROR < func_type < AnnFuncType.MAX_SIZE:
            return CStatus("error ann function type")
        status = self._handlers()[AnnFuncType(func_type)]()
        if not status.is_ok():
            return status
        return self.refresh_param()


@dataclass
class DAnnParam(DAnnObject):
    """Parameters shared by ANN nodes."""

    dim: int = 0
    cur_vec_size: int = 0
    max_vec_size: int = 0
    normalize: bool = False
    ann_model_path: str = ""
    train_file_path: str = ""