"""Folder capabilities and the sample folder implementations."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable


class FolderSize(StrEnum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"


@runtime_checkable
class Folder(Protocol):
    """Anything with a name and a size classification."""

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> str: ...


@runtime_checkable
class MultiFolder(Folder, Protocol):
    """A folder that also holds an ordered sequence of child folders.

    Children may be composites themselves, to any depth. The child graph
    must be acyclic.
    """

    @property
    def folders(self) -> Sequence[Folder]: ...


@dataclass(frozen=True, eq=False)
class FolderSample:
    name: str
    size: str

    def __str__(self) -> str:
        return f"Folder: {self.name} ({self.size})"


@dataclass(frozen=True, eq=False)
class MultiFolderSample:
    """Sample composite folder.

    Keeps a reference to the children sequence it was given; the same
    children may be shared with other structures.
    """

    name: str
    size: str
    folders: Sequence[Folder] = ()

    def __str__(self) -> str:
        children = ", ".join(str(folder) for folder in self.folders)
        return f"MultiFolder: {self.name} ({self.size}) -> [{children}]"
