#!/usr/bin/env python3
"""
Workflow Hints - Terminal Display

Renders injection results and suggestions. Uses `rich` panels and tables
on a terminal; plain text when NO_COLOR is set or stdout is not a TTY.
"""

import os
import sys
from typing import List, Optional, Sequence

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .injector import InjectionResult
from .mentions import Mention


class HintDisplay:
    """Terminal output for the wf_hints CLI."""

    def __init__(self, console: Optional[Console] = None) -> None:
        if console is not None:
            self._use_rich = True
            self._console = console
        else:
            self._use_rich = not os.environ.get("NO_COLOR") and sys.stdout.isatty()
            self._console = Console() if self._use_rich else None

    def text(self, text: str) -> None:
        """Print message text as-is (no markup)."""
        if self._use_rich:
            self._console.print(text, markup=False, highlight=False)
        else:
            print(text)

    def mentions(self, mentions: Sequence[Mention]) -> None:
        if not mentions:
            self.text("No workflow mentions found.")
            return

        if self._use_rich:
            table = Table(title="Workflow Mentions", box=ROUNDED)
            table.add_column("Name", style="bold")
            table.add_column("Forced", justify="center")
            for mention in mentions:
                table.add_row(Text(mention.name), "yes" if mention.force else "")
            self._console.print(table)
        else:
            for mention in mentions:
                suffix = " (forced)" if mention.force else ""
                print(f"//{mention.name}{suffix}")

    def suggestions(self, name: str, suggestions: List[str]) -> None:
        """Show 'did you mean' options for an unresolved name."""
        if not suggestions:
            message = f"No workflow matches '{name}'."
        else:
            options = "\n".join(f"  - {s}" for s in suggestions)
            message = f"No workflow named '{name}'. Did you mean:\n{options}"

        if self._use_rich:
            self._console.print(Panel(Text(message), title="Unknown workflow", box=ROUNDED, style="yellow"))
        else:
            print(message)

    def injection_result(self, result: InjectionResult) -> None:
        """Show the processed message followed by a summary of matches."""
        self.text(result.text)

        for name, suggestions in result.unresolved.items():
            self.suggestions(name, suggestions)

        if not (result.hinted or result.skipped):
            return

        if self._use_rich:
            table = Table(title="Hints", box=ROUNDED)
            table.add_column("Workflow", style="bold")
            table.add_column("Status")
            for name in result.hinted:
                table.add_row(Text(name), "[green]hinted[/green]")
            for name in result.skipped:
                table.add_row(Text(name), "[dim]already hinted[/dim]")
            self._console.print(table)
        else:
            for name in result.hinted:
                print(f"hinted: {name}")
            for name in result.skipped:
                print(f"skipped (already hinted): {name}")
