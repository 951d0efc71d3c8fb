"""Demonstration entry point for folder-cabinet."""

import logging

import typer

from folder_cabinet.cabinet import FileCabinet
from folder_cabinet.demo import build_sample_folders, nest_folders
from folder_cabinet.logging_config import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Query a sample nested folder structure.")


@app.callback()
def main() -> None:
    setup_logging()


@app.command()
def demo(
    name: str = typer.Option("abc", help="Folder name to search for"),
    size: str = typer.Option("LARGE", help="Size class to list"),
    depth: int = typer.Option(
        0, min=0, help="Wrap the sample structure in this many composites"
    ),
):
    """Build the sample cabinet and run all three queries on it."""
    cabinet = FileCabinet(nest_folders(build_sample_folders(), depth))

    try:
        found = cabinet.find_folder_by_name(name)
        matches = cabinet.find_folders_by_size(size)
        total = cabinet.count()

        typer.echo(f"Searched folder: {found}")
        typer.echo(
            f"{size.capitalize()} folders: [{', '.join(str(f) for f in matches)}]"
        )
        typer.echo(f"Folders count: {total}")
    except RecursionError as e:
        logger.error(f"Folder structure too deep to traverse: {e}")
        typer.echo(f"Error: folder structure too deep or cyclic ({e})", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
