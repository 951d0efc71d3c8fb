from folder_cabinet.cabinet import Cabinet, FileCabinet
from folder_cabinet.flatten import is_multi_folder, iter_folders
from folder_cabinet.folder import (
    Folder,
    FolderSample,
    FolderSize,
    MultiFolder,
    MultiFolderSample,
)

__all__ = [
    "Cabinet",
    "FileCabinet",
    "Folder",
    "FolderSample",
    "FolderSize",
    "MultiFolder",
    "MultiFolderSample",
    "is_multi_folder",
    "iter_folders",
]
