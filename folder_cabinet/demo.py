from folder_cabinet.folder import Folder, FolderSample, FolderSize, MultiFolderSample


def build_sample_folders() -> list[Folder]:
    """Three plain folders and one composite holding a single plain folder."""
    return [
        FolderSample("abc", FolderSize.SMALL),
        FolderSample("bca", FolderSize.MEDIUM),
        FolderSample("cab", FolderSize.LARGE),
        MultiFolderSample(
            "abc", FolderSize.LARGE, [FolderSample("bca", FolderSize.MEDIUM)]
        ),
    ]


def nest_folders(folders: list[Folder], depth: int) -> list[Folder]:
    """Wrap `folders` in `depth` single-child composites."""
    if depth < 0:
        raise ValueError(f"Nesting depth must not be negative: {depth}")

    nested = folders
    for level in range(depth, 0, -1):
        nested = [MultiFolderSample(f"level-{level}", FolderSize.SMALL, nested)]
    return nested
