"""Console rendering of discovered post references."""
from typing import Optional

from rich.console import Console
from rich.table import Table


def shorten(text: str, max_len: int = 80) -> str:
    """Cut `text` to `max_len` characters, marking the cut with an ellipsis."""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "..."


def references_table(references, title: Optional[str] = None, max_str_len: int = 80) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title")
    table.add_column("Date", no_wrap=True)
    table.add_column("URL", overflow="fold")
    for i, ref in enumerate(references, start=1):
        table.add_row(str(i), shorten(ref.title, max_str_len), ref.date, ref.url)
    return table


def print_references(references, title: Optional[str] = None,
                     console: Optional[Console] = None, width: int = 120) -> None:
    """Print references as a numbered table, or a notice when there are none."""
    console = console or Console(width=width)
    if not references:
        console.print("No posts found.")
        return
    console.print(references_table(references, title=title))
