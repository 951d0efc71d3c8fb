from collections.abc import Iterable, Iterator

from folder_cabinet.folder import Folder, MultiFolder


def is_multi_folder(folder: Folder) -> bool:
    return isinstance(folder, MultiFolder)


def iter_folders(folders: Iterable[Folder]) -> Iterator[Folder]:
    """
    Walk a folder structure in pre-order.

    Each folder is yielded before its children, and the children of a
    composite are yielded before its next sibling. There is no visited set:
    a cyclic structure recurses until RecursionError.

    Args:
        folders: top-level folders, plain and composite mixed

    Yields:
        every folder reachable from the top level, composites included
    """
    for folder in folders:
        yield folder
        if is_multi_folder(folder):
            yield from iter_folders(folder.folders)
