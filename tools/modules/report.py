from typing import Mapping, Optional

from rich.console import Console
from rich.table import Table

from config_editor.session import ConfigSession


#
# Display & Visualization
#

def print_summary(session: ConfigSession, console: Console) -> None:
    """Print the state of the open document"""
    summary = Table(title="Config Summary")
    summary.add_column("Field", style="cyan")
    summary.add_column("Value", style="green")

    summary.add_row("File", session.path or "-")
    summary.add_row("Format", session.format.value)
    summary.add_row("Structural Editing", "yes" if session.structural else "no")
    summary.add_row("Dirty", "yes" if session.dirty else "no")
    if session.parse_error:
        summary.add_row("Parse Error", session.parse_error)

    console.print(summary)

def print_comments(comments: Mapping[str, str], console: Console) -> None:
    """Print captured comments by path"""
    if not comments:
        return
    table = Table(title="Comments")
    table.add_column("Path", style="cyan")
    table.add_column("Comment", style="dim")
    for path, comment in comments.items():
        table.add_row(path, comment)
    console.print(table)

def print_document(session: ConfigSession, console: Console, query: Optional[str] = None) -> None:
    """Print the structural view, or the raw text when no tree is available"""
    if session.structural:
        console.print(session.render(query or ""))
    else:
        console.print(session.current_text, markup=False, highlight=False)
