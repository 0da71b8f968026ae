"""Plain console logger for hosts without a dashboard."""

from rich.console import Console
from rich.markup import escape


class ConsoleLogger:
    """Print one line per relay or error."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def log_relay(
        self,
        method: str,
        url: str,
        status: int,
        *,
        duration_ms: float,
        headers: dict[str, str] | None = None,
    ) -> None:
        style = "green" if status < 400 else "yellow"
        self.console.print(
            f"[bold]RELAY[/bold] {method} {escape(url)} [{style}]{status}[/{style}] "
            f"[dim]{duration_ms:.0f}ms[/dim]"
        )

    def log_error(self, route: str, status: int, message: str) -> None:
        self.console.print(f"[red][ERROR][/red] {escape(route)} {status}: {escape(message[:200])}")
