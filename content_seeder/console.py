"""Console banners for seed and probe runs (rich)."""

from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from content_seeder.errors import StepFailure

RULE_WIDTH = 60


class SeedConsole:
    """Emoji-annotated step banners written to stdout."""

    def __init__(self, console: Optional[Console] = None, show_data: bool = True):
        self.console = console or Console()
        self.show_data = show_data

    def header(self, title: str, subtitle: str) -> None:
        self.console.print(
            Panel(
                escape(subtitle),
                title=f"[bold cyan]{escape(title)}[/bold cyan]",
                border_style="cyan",
            )
        )

    def _banner(self, message: str, data: Any = None) -> None:
        self.console.print()
        self.console.print("=" * RULE_WIDTH, style="dim")
        self.console.print(f"📍 {message}")
        if data is not None and self.show_data:
            self.console.print_json(data=data, default=str)

    def step_ok(self, description: str, data: Any = None) -> None:
        self._banner(f"✅ [green]{escape(description)}[/green]", data)

    def step_failed(self, failure: StepFailure) -> None:
        self._banner(f"❌ [bold red]{escape(failure.step)} FAILED[/bold red]", {"error": failure.to_dict()})

    def aborted(self, failure: StepFailure, label: str = "Population script failed") -> None:
        self.console.print(f"\n❌ [bold red]{escape(label)}:[/bold red] {escape(failure.message)}")

    def summary(self, title: str, lines: Dict[str, Any], footer: Optional[str] = None) -> None:
        body = "\n".join(f"[bold]{escape(k)}:[/bold] {escape(str(v))}" for k, v in lines.items())
        if footer:
            body += f"\n\n{escape(footer)}"
        self.console.print(
            Panel(
                body,
                title=f"[bold green]{escape(title)}[/bold green]",
                border_style="green",
            )
        )

    def note(self, message: str) -> None:
        self.console.print(escape(message))

    def json(self, data: Any) -> None:
        self.console.print_json(data=data, default=str)
