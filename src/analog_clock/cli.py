"""Command-line interface for Analog Clock."""

import json
from datetime import datetime, time
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from analog_clock.config import get_settings
from analog_clock.logging import configure_logging

app = typer.Typer(
    name="analog-clock",
    help="Analog Clock - live SVG analog clock face",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Analog Clock CLI."""
    settings = get_settings()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)


def _parse_at(at: Optional[str]) -> datetime:
    """Current time, or today at HH:MM[:SS] when given."""
    if not at:
        return datetime.now()
    try:
        parsed = time.fromisoformat(at)
    except ValueError:
        rprint(f"[red]Invalid time: {at}. Use HH:MM or HH:MM:SS[/red]")
        raise typer.Exit(1)
    return datetime.combine(datetime.now().date(), parsed)


@app.command("render")
def render(
    at: Optional[str] = typer.Option(None, "--at", help="Render this time (HH:MM[:SS]) instead of now"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write SVG to this file"),
) -> None:
    """Render a single clock frame as SVG."""
    from analog_clock.clock.renderer import SvgRenderer
    from analog_clock.clock.scene import compose_frame

    settings = get_settings()
    when = _parse_at(at)
    svg = SvgRenderer(width=settings.display_width).render(compose_frame(when))

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(svg, encoding="utf-8")
        rprint(f"[green]Clock for {when.strftime('%H:%M:%S')} written to[/green] {output}")
    else:
        # Plain stdout: rich markup would mangle the SVG
        typer.echo(svg, nl=False)


@app.command("angles")
def angles(
    at: Optional[str] = typer.Option(None, "--at", help="Use this time (HH:MM[:SS]) instead of now"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the hand angles for a time."""
    from analog_clock.clock.angles import hand_angles

    when = _parse_at(at)
    result = hand_angles(when)

    if json_output:
        typer.echo(json.dumps({"time": when.strftime("%H:%M:%S"), **result._asdict()}, indent=2))
        return

    table = Table(title=f"Hand angles at {when.strftime('%H:%M:%S')}", show_header=True)
    table.add_column("Hand", style="cyan")
    table.add_column("Degrees", style="green", justify="right")
    for name, value in result._asdict().items():
        table.add_row(name, f"{value:.2f}")
    console.print(table)


@app.command("run")
def run() -> None:
    """Run the clock daemon, refreshing the SVG output file."""
    from analog_clock.clock.service import ClockService

    settings = get_settings()
    rprint(f"[cyan]Writing clock to[/cyan] {settings.svg_output_path} [dim](Ctrl+C to stop)[/dim]")
    ClockService(settings).run_daemon()


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Port"),
) -> None:
    """Serve the live clock as a web page."""
    import uvicorn

    from analog_clock.web.app import create_app

    settings = get_settings()
    host = host or settings.web_host
    port = port or settings.web_port

    rprint(f"[cyan]Serving clock on[/cyan] http://{host}:{port}")
    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()

    if json_output:
        typer.echo(json.dumps(settings.model_dump(mode="json"), indent=2))
        return

    table = Table(title="Analog Clock Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for field_name in type(settings).model_fields:
        table.add_row(field_name, str(getattr(settings, field_name)))

    console.print(table)


if __name__ == "__main__":
    app()
