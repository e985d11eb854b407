"""VisionAid CLI - color detection on still images."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from visionaid import __version__
from visionaid.analyzer import ColorAnalyzer
from visionaid.colors import ColorError, OutOfBoundsError
from visionaid.common.logging import setup_logging
from visionaid.config import Config, load_config
from visionaid.describer import create_describer
from visionaid.frame import Frame
from visionaid.speech import announce_point, unable_to_detect

app = typer.Typer(
    name="visionaid",
    help="VisionAid color detection CLI",
    no_args_is_help=True,
)
console = Console()

_state: dict = {"config_path": None}


def get_config() -> Config:
    """Get configuration."""
    return load_config(_state["config_path"])


def load_frame(image: Path) -> Frame:
    try:
        return Frame.from_file(image)
    except OSError as e:
        console.print(f"[red]Error:[/] cannot read {image}: {e}")
        sys.exit(1)


@app.callback()
def main_callback(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML config file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """VisionAid color detection."""
    _state["config_path"] = config_path
    cfg = get_config()
    setup_logging(
        "DEBUG" if verbose else cfg.device.log_level,
        json_output=cfg.device.json_logs,
    )


@app.command()
def colors(
    image: Path = typer.Argument(..., help="Image file to analyze"),
    describe: bool = typer.Option(
        False, "--describe", help="Also ask the remote describer"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON"),
):
    """Show the dominant colors of an image."""
    cfg = get_config()
    frame = load_frame(image)
    describer = create_describer(cfg) if describe else None
    analyzer = ColorAnalyzer(cfg, describer=describer)

    try:
        result = asyncio.run(analyzer.analyze(frame))
    except ColorError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
        return

    table = Table(title="Dominant Colors")
    table.add_column("Name", style="cyan")
    table.add_column("Swatch")
    table.add_column("Hex")
    table.add_column("RGB")
    table.add_column("HSL")
    table.add_column("Share", justify="right")

    for color in result.colors:
        table.add_row(
            color.name,
            f"[on {color.hex}]    [/]",
            color.hex,
            color.rgb,
            color.hsl,
            f"{color.percentage}%",
        )

    console.print(table)
    console.print(Panel(result.summary, title="Speech"))

    if describe:
        if result.analysis:
            console.print(Panel(result.analysis, title="Remote Analysis"))
        else:
            console.print("[yellow]Remote analysis unavailable, showing local colors only.[/]")


@app.command()
def pick(
    image: Path = typer.Argument(..., help="Image file to sample"),
    x: int = typer.Argument(..., help="Pixel column"),
    y: int = typer.Argument(..., help="Pixel row"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON"),
):
    """Show the exact color at a pixel."""
    cfg = get_config()
    frame = load_frame(image)
    analyzer = ColorAnalyzer(cfg)

    try:
        color = analyzer.pick(frame, x, y)
    except OutOfBoundsError as e:
        console.print(f"[red]{unable_to_detect()}[/] {e}")
        sys.exit(1)
    except ColorError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if json_output:
        print(json.dumps(color.to_dict(), indent=2))
        return

    console.print(
        Panel(
            f"[bold]{color.name}[/]\n"
            f"  Hex: {color.hex}\n"
            f"  RGB: {color.rgb}\n"
            f"  HSL: {color.hsl}",
            title="Selected Color",
        )
    )
    console.print(announce_point(color))


@app.command()
def config(json_output: bool = typer.Option(False, "--json", help="Print JSON")):
    """Show configuration."""
    cfg = get_config()

    if json_output:
        print(json.dumps(cfg.model_dump(), indent=2, default=str))
    else:
        console.print("[bold]Configuration[/]")
        console.print(f"  Device: {cfg.device.name}")
        console.print(f"  Mode: {cfg.device.mode}")
        console.print(f"  Mock Mode: {cfg.mock_mode}")
        console.print("\n[bold]Colors[/]")
        console.print(f"  Sample stride: {cfg.colors.sample_stride}")
        console.print(f"  Quantization step: {cfg.colors.quantization_step}")
        console.print(f"  Max colors: {cfg.colors.max_colors}")
        console.print("\n[bold]Describer[/]")
        console.print(f"  Enabled: {cfg.describer.enabled}")
        console.print(f"  Endpoint: {cfg.describer.endpoint}")


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]VisionAid[/] v{__version__}")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
