"""Command line interface for filestash."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from filestash.adapter import FileLoaderAdapter
from filestash.config import AppConfig
from filestash.store import FileStore, TimestampLoggingStore


console = Console()
app = typer.Typer(help="filestash - save, read and search text files")

END_MARKER = "END"
MENU = """
Choose an option:
1. Save to file
2. Read from file
3. Working directory
4. Search file
5. Exit"""

BaseDirOption = typer.Option(
    None,
    "--base-dir",
    envvar="FILESTASH_BASE_DIR",
    help="Directory holding all managed files",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose logging")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_config(base_dir: Path | None) -> AppConfig:
    return AppConfig(base_dir=base_dir) if base_dir is not None else AppConfig()


def _build_adapter(config: AppConfig, base_dir: Path) -> FileLoaderAdapter:
    store = TimestampLoggingStore(FileStore(base_dir, encoding=config.encoding))
    return FileLoaderAdapter(store, time_format=config.time_format)


def _echo(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _save(
    adapter: FileLoaderAdapter, base_dir: Path, filename: str, directory: str, content: str
) -> None:
    _echo("\n" + adapter.process_file(filename, directory, content))

    file_path = base_dir / directory / filename
    if file_path.is_file():
        console.print(f"File created at: [bold]{file_path.resolve()}[/bold]")
    else:
        console.print("[yellow]Warning: the file was not created at the expected location![/yellow]")


@app.command()
def save(
    filename: str = typer.Argument(..., help="Name of the file to write"),
    directory: str = typer.Option(..., "--dir", "-d", help="Directory relative to the base directory"),
    content: Optional[str] = typer.Option(None, help="File content; read from stdin when omitted"),
    base_dir: Path = BaseDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Save text to a file, creating its directory if needed."""
    _setup_logging(verbose)
    config = _load_config(base_dir)
    resolved = config.resolve_base_dir(Path.cwd())
    if content is None:
        content = typer.get_text_stream("stdin").read()
    _save(_build_adapter(config, resolved), resolved, filename, directory, content)


@app.command()
def read(
    filename: str = typer.Argument(..., help="Name of the file to read"),
    directory: str = typer.Option(..., "--dir", "-d", help="Directory relative to the base directory"),
    base_dir: Path = BaseDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the content of a file."""
    _setup_logging(verbose)
    config = _load_config(base_dir)
    adapter = _build_adapter(config, config.resolve_base_dir(Path.cwd()))
    _echo(adapter.load_file(filename, directory))


@app.command()
def search(
    name: str = typer.Argument(..., help="Full or partial file name"),
    directory: str = typer.Option("", "--dir", "-d", help="Directory to search; empty searches everything"),
    base_dir: Path = BaseDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Search files whose name contains NAME."""
    _setup_logging(verbose)
    config = _load_config(base_dir)
    adapter = _build_adapter(config, config.resolve_base_dir(Path.cwd()))
    _echo("Search results:\n" + adapter.search_file(name, directory))


@app.command()
def pwd() -> None:
    """Show the current working directory."""
    console.print(f"Current working directory: {Path.cwd()}")


@app.command()
def shell(
    base_dir: Path = BaseDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Run the interactive menu."""
    _setup_logging(verbose)
    config = _load_config(base_dir)
    resolved = config.resolve_base_dir(Path.cwd())
    adapter = _build_adapter(config, resolved)

    try:
        while True:
            _echo(MENU)
            raw = console.input("Select a menu item: ")
            try:
                choice = int(raw)
            except ValueError:
                console.print("[red]Invalid input. Please enter a number.[/red]")
                continue

            if choice == 1:
                directory = console.input(f"Directory (relative to {resolved}): ")
                filename = console.input("File name: ")
                _echo(f'File content (finish with "{END_MARKER}" on a new line):')
                lines = []
                while (line := console.input()) != END_MARKER:
                    lines.append(line + "\n")
                _save(adapter, resolved, filename, directory, "".join(lines))
            elif choice == 2:
                directory = console.input(f"Directory (relative to {resolved}): ")
                filename = console.input("File name: ")
                _echo("\n" + adapter.load_file(filename, directory))
            elif choice == 3:
                console.print(f"Current working directory: {Path.cwd()}")
            elif choice == 4:
                filename = console.input("File name to search (partial names allowed): ")
                directory = console.input("Directory to search (leave empty to search everything): ")
                _echo("\nSearch results:\n" + adapter.search_file(filename, directory))
            elif choice == 5:
                console.print("Exiting...")
                return
            else:
                console.print("[red]Invalid choice. Please try again.[/red]")
    except EOFError:
        console.print("Exiting...")
