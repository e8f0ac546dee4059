"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from license_file_generator.models.license import LicenseReport


class TerminalFormatter:
    """Display license groups as a Rich table.

    Groups without license information are highlighted.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_report(self, report: LicenseReport) -> None:
        """Display license groups as a Rich table.

        Args:
            report: The grouped licenses to display.
        """
        if not report.groups:
            self._console.print("[yellow]No dependencies found[/yellow]")
            return

        table = Table(title="License Groups")
        table.add_column("License", style="green")
        table.add_column("Count", justify="right", style="magenta")
        table.add_column("Dependencies", style="cyan")

        for group in report.groups:
            license_display = escape(group.summary)
            if group.is_unknown:
                license_display = f"[yellow]{license_display}[/yellow]"
            table.add_row(
                license_display,
                str(len(group.dependencies)),
                escape(", ".join(group.dependencies)),
            )

        self._console.print(table)
        self._console.print(
            f"\n[bold]Total dependencies:[/bold] {report.total_dependencies}"
        )
        self._console.print(f"[bold]Distinct licenses:[/bold] {len(report.groups)}")

        unknown = report.unknown_dependencies
        if unknown:
            self._console.print(
                f"[yellow bold]Without license information:[/yellow bold] "
                f"{escape(', '.join(unknown))}"
            )
