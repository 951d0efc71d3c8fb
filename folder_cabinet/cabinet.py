"""Query root over a nested folder structure."""

import logging
from collections.abc import Iterator, Sequence
from typing import Protocol

from folder_cabinet.flatten import iter_folders
from folder_cabinet.folder import Folder

logger = logging.getLogger(__name__)


class Cabinet(Protocol):
    def find_folder_by_name(self, name: str) -> Folder | None: ...

    def find_folders_by_size(self, size: str) -> list[Folder]: ...

    def count(self) -> int: ...


class FileCabinet:
    """
    Cabinet over an ordered sequence of top-level folders.

    The top-level sequence may mix plain folders and composites. Every query
    runs over the whole nested structure in pre-order, composites included
    alongside their descendants. The sequence is referenced, not copied, and
    never modified.

    Cyclic structures are not supported and raise RecursionError on query.
    """

    def __init__(self, folders: Sequence[Folder]):
        self.folders = folders
        logger.debug(f"Cabinet created with {len(folders)} top-level folders")

    def all_folders(self) -> Iterator[Folder]:
        return iter_folders(self.folders)

    def find_folder_by_name(self, name: str) -> Folder | None:
        """Return the first folder in pre-order named `name`, or None."""
        found = next(
            (folder for folder in self.all_folders() if folder.name == name), None
        )
        logger.debug(f"Search for folder '{name}': found={found is not None}")
        return found

    def find_folders_by_size(self, size: str) -> list[Folder]:
        """Return every folder of the given size, in pre-order."""
        matches = [folder for folder in self.all_folders() if folder.size == size]
        logger.debug(f"Found {len(matches)} folders of size '{size}'")
        return matches

    def count(self) -> int:
        """Count all folders, each composite once plus its descendants."""
        total = sum(1 for _ in self.all_folders())
        logger.debug(f"Cabinet holds {total} folders")
        return total

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Folder]:
        return self.all_folders()

    def __str__(self) -> str:
        return f"File Cabinet: {len(self.folders)} top-level folders"

    def __repr__(self) -> str:
        return self.__str__()
