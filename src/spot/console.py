"""Console helpers for human-facing CLI messages.

Command results are printed plainly to stdout; these go to stderr so they
never mix with piped output.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

_err = Console(stderr=True, highlight=False)


def error(msg: str) -> None:
    _err.print(f"[bold red]error:[/] {escape(msg)}", markup=True)


def dim(msg: str) -> None:
    _err.print(f"[dim]{escape(msg)}[/]", markup=True)
