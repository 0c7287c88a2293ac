"""Base object with an init/run/destroy lifecycle and descriptive info."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from cgraph.status import CStatus


class CFunctionType(Enum):
    """Lifecycle stage of an object."""

    INIT = 1
    RUN = 2
    DESTROY = 3


class CObject(ABC):
    """Root of all runnable objects; subclasses must implement run()."""

    def init(self) -> CStatus:
        return CStatus()

    @abstractmethod
    def run(self) -> CStatus:
        """Do the object's work."""

    def destroy(self) -> CStatus:
        return CStatus()


class DescInfo:
    """Name, session id and description of an element."""

    def __init__(self) -> None:
        self.name = ""
        self.session = ""
        self.description = ""

    def set_name(self, name: str) -> DescInfo:
        self.name = name
        return self

    def set_description(self, description: str) -> DescInfo:
        self.description = description
        return self