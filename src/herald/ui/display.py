"""
Display management for the Herald CLI with Rich components.
"""

from typing import Any, Dict, Optional

from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..services.release_service import RefreshResult
from ..utils.date_utils import format_release_date


class DisplayManager:
    """Renders release details and status lines."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )

    def _details_table(self, record: Dict[str, Any], preserved=()) -> Table:
        table = Table(show_header=False, box=box.SIMPLE, padding=(0, 1))
        table.add_column("Field", style="bold magenta", no_wrap=True)
        table.add_column("Value", style="white")

        date_text = format_release_date(record.get("releaseDate", ""), record.get("releaseDatePrecision"))
        precision = record.get("releaseDatePrecision")
        if precision:
            date_text = f"{date_text} ({precision})"

        table.add_row("Title", Text(record.get("title", "")))
        table.add_row("Type", Text(record.get("type", "")))
        table.add_row("Release Date", Text(date_text))
        table.add_row("Spotify URL", Text(record.get("spotifyUrl", "")))
        table.add_row("Cover Art", Text(record.get("coverArt", "")) if record.get("coverArt") else Text("none", style="dim"))

        labels = {
            "moodLine": "Mood Line",
            "appleMusicUrl": "Apple Music URL",
            "albumLink": "Album Link",
        }
        for key, label in labels.items():
            value = record.get(key)
            if value:
                text = Text(f"\"{value}\"")
                if key in preserved:
                    text.append(" (preserved)", style="dim")
                table.add_row(label, text)

        return table

    def display_refresh_result(self, result: RefreshResult):
        """Display the release a refresh selected."""
        record = result.record.to_dict()
        subtitle = f"Selected from {result.release_count} release{'s' if result.release_count != 1 else ''}"

        self.console.print()
        self.console.print(self.create_header_panel("🎵 LATEST RELEASE", subtitle))
        self.console.print(self._details_table(record, result.preserved_fields))

        if result.written:
            self.console.print(f"[green]✓[/green] Saved to [dim]{result.output_file}[/dim]")
        else:
            self.console.print("[yellow]⚠[/yellow] Dry run: output file not modified")

    def display_featured_release(self, record: Dict[str, Any], dismissed: bool = False):
        """Display the release currently published to the site."""
        self.console.print()
        self.console.print(self.create_header_panel("🎵 FEATURED RELEASE", record.get("updatedAt")))
        self.console.print(self._details_table(record))
        if dismissed:
            self.console.print("[yellow]⚠[/yellow] Banner is dismissed (resets 24 hours after dismissal)")
