"""
Command-Line Interface

CLI using rich for colored output and formatted results,
or plain JSON in the {"issues", "summary"} shape for scripts.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .analysis import compute_stats, load_pixels
from .analyzer import UIAnalyzer
from .config import load_config
from .providers import get_provider


console = Console()

MODE_DESCRIPTIONS = {
    "visual": "Explainable UX insights based on visual properties.",
    "ai": "Generative AI feedback using a local LLM.",
}


@click.command()
@click.argument('image', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--mode',
    default=None,
    type=click.Choice(['visual', 'ai'], case_sensitive=False),
    help='Analysis mode. Defaults to ANALYSIS_MODE from .env'
)
@click.option(
    '--platform',
    default=None,
    help='Platform label for suggestions (e.g. React, Vue). Defaults to PLATFORM from .env'
)
@click.option(
    '--output',
    default='rich',
    type=click.Choice(['rich', 'json'], case_sensitive=False),
    help='Output format: rich (colored terminal) or json'
)
@click.option(
    '--show-stats',
    is_flag=True,
    help='Include the computed brightness and variance'
)
@click.option(
    '--env-file',
    default=None,
    type=click.Path(exists=True),
    help='Path to .env file (defaults to ./.env)'
)
@click.option('--debug', is_flag=True, help='Verbose logging and tracebacks')
@click.version_option(version=__version__)
def main(
    image: str,
    mode: Optional[str],
    platform: Optional[str],
    output: str,
    show_stats: bool,
    env_file: Optional[str],
    debug: bool
):
    """
    Smart Assist - UX feedback from a UI screenshot.

    Examples:

      # Visual heuristics (default)
      smart-assist screenshot.png

      # Local LLM review tailored to Vue
      smart-assist screenshot.png --mode ai --platform Vue

      # JSON output with statistics
      smart-assist screenshot.png --output json --show-stats
    """
    try:
        config = load_config(Path(env_file) if env_file else None)
        _setup_logging("DEBUG" if debug else config.log_level)

        mode_name = (mode or config.mode).lower()
        provider = get_provider(mode_name, config)

        if not provider.is_available():
            console.print(f"[red]❌ Provider '{provider.name}' is not available[/red]")
            sys.exit(1)

        analyzer = UIAnalyzer(provider, config)
        stats = compute_stats(load_pixels(Path(image)))
        result = analyzer.analyze_stats(stats, platform)

        if output == 'json':
            payload = result.to_payload()
            if show_stats:
                payload["visual_stats"] = stats.model_dump()
            click.echo(json.dumps(payload, indent=2))
        else:
            _output_rich(result, stats if show_stats else None, mode_name)

    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        if debug:
            console.print_exception()
        sys.exit(1)


def _setup_logging(level: str):
    """Route log records through rich on stderr"""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True
    )


def _output_rich(result, stats, mode_name: str):
    """Output result in rich formatted terminal output"""

    console.print()
    console.print(Panel.fit(
        f"[bold]Smart Assist[/bold]\n"
        f"{MODE_DESCRIPTIONS[mode_name]}",
        border_style="cyan"
    ))

    if stats is not None:
        stats_table = Table(show_header=True, header_style="bold magenta")
        stats_table.add_column("Signal", style="cyan")
        stats_table.add_column("Value", justify="right")
        stats_table.add_row("Average brightness", f"{stats.brightness:.2f}")
        stats_table.add_row("Brightness variance", f"{stats.variance:.2f}")
        console.print(stats_table)

    if result.summary:
        console.print("\n[bold]Summary[/bold]")
        console.print(escape(result.summary))

    if not result.findings:
        console.print("\n[yellow]No findings returned.[/yellow]")
        console.print()
        return

    console.print(f"\n[bold]🔍 Findings ({len(result.findings)})[/bold]")
    colors = {"High": "red", "Medium": "yellow", "Low": "green"}
    markers = {"High": "🔴", "Medium": "🟡", "Low": "🟢"}
    for finding in result.findings:
        color = colors[finding.severity]
        console.print(
            f"\n  {markers[finding.severity]} [bold]{escape(finding.title)}[/bold] "
            f"[{color}]({finding.severity})[/{color}]"
        )
        console.print(f"     {escape(finding.description)}")
        console.print(f"     💡 [bold]Suggestion:[/bold] {escape(finding.suggestion)}")

    console.print()


if __name__ == "__main__":
    main()
