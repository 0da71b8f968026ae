"""Real-time CLI dashboard for relay monitoring."""

from datetime import datetime
from threading import Lock

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from ui.log_utils import write_cli_log, write_relay_log

console = Console()


class RelayInfo:
    """Info about a single relayed request."""

    def __init__(
        self,
        method: str,
        url: str,
        status: int,
        duration_ms: float,
        timestamp: datetime,
    ):
        self.method = method
        self.url = url[:60] + "..." if len(url) > 60 else url
        self.status = status
        self.duration_ms = duration_ms
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing recent relays and errors."""

    def __init__(self, config: Config):
        self.config = config
        self._lock = Lock()
        self._relays: list[RelayInfo] = []
        self._max_relays = 10
        self._request_count = {"ok": 0, "failed": 0}
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    def log_relay(
        self,
        method: str,
        url: str,
        status: int,
        *,
        duration_ms: float,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Log a completed outbound call."""
        with self._lock:
            self._request_count["ok"] += 1
            info = RelayInfo(method, url, status, duration_ms, datetime.now())
            self._relays.insert(0, info)
            self._relays = self._relays[: self._max_relays]
            self._refresh()

            write_relay_log(method, url, status, duration_ms, headers)
            write_cli_log("RELAY", f"{method} {url}", status=status)

    def log_error(self, route: str, status: int, message: str) -> None:
        """Log an error."""
        with self._lock:
            self._request_count["failed"] += 1
            truncated = message[:50] + "..." if len(message) > 50 else message
            self._errors.insert(0, f"{route} {status}: {truncated}")
            self._errors = self._errors[:3]
            self._refresh()
            write_cli_log("ERROR", message[:200], route=route, status=status)

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        """Build the dashboard layout."""
        layout = Layout()

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="relays"),
            Layout(name="footer", size=5),
        )

        layout["header"].update(self._build_header())
        layout["relays"].update(self._build_relays_panel())
        layout["footer"].update(self._build_footer())

        return layout

    def _build_header(self) -> Panel:
        """Build header with stats."""
        stats = Text()
        stats.append("CORS Relay", style="bold cyan")
        stats.append("  |  ")
        stats.append(f"Relayed: {self._request_count['ok']}", style="green")
        stats.append("  |  ")
        stats.append(f"Failed: {self._request_count['failed']}", style="red")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.proxy.port}", style="dim")

        return Panel(stats, style="cyan")

    def _build_relays_panel(self) -> Panel:
        """Build recent relays panel."""
        if self._relays:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column("Method", width=7)
            table.add_column("Status", width=6)
            table.add_column("ms", justify="right", width=7)
            table.add_column("URL", ratio=1)

            for relay in self._relays:
                style = "green" if relay.status < 400 else "yellow"
                table.add_row(
                    relay.timestamp.strftime("%H:%M:%S"),
                    relay.method,
                    Text(str(relay.status), style=style),
                    f"{relay.duration_ms:.0f}",
                    Text(relay.url),
                )

            content = table
        else:
            content = Text("Waiting for requests...", style="dim")

        return Panel(content, title="[green]Recent Relays[/green]", border_style="green")

    def _build_footer(self) -> Panel:
        """Build footer with errors and help."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        else:
            content = Text(
                f'POST {{"url": ...}} to http://{self.config.proxy.host}:{self.config.proxy.port}/',
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")
