# src/kymacleanup/cli/formatter.py
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from kymacleanup.core.models import ManifestIdentity

# Soft wrap keeps every report line intact so it can be grepped or diffed
console = Console(highlight=False, soft_wrap=True, emoji=False)

class DeltaFormatter:
    """
    DeltaFormatter: the single voice of the tool.
    Everything the operator reads (summary, warnings, errors) is printed here.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def print_summary(self, orphans: List[ManifestIdentity]):
        """
        Lists the resources that the upgraded version no longer ships.
        Prints the no-op line when there is nothing to delete.
        """
        if not orphans:
            self.print_ok()
            return

        self.console.print("[bold yellow]Resources to be deleted after upgrade:[/bold yellow]")
        for identity in orphans:
            self.console.print(escape(str(identity)))

    def print_ok(self):
        self.console.print("[green]Manifests delta is ok[/green]")

    def print_warning(self, message: str):
        self.console.print(f"[yellow]WARN - {escape(message)}[/yellow]")

    def print_error(self, error: Exception):
        self.console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")

    def print_script_created(self, path: str):
        self.console.print(f"Deletion script created: '{escape(path)}'")
