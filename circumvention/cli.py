import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from circumvention import __version__
from circumvention.config import MonitorConfig
from circumvention.core import create_matchers
from circumvention.exceptions import CircumventionError
from circumvention.monitor import RecordedPageSource, run_monitor
from circumvention.report import ResultSet, render_markdown, synthesize_rules
from circumvention.utils import setup_logging

console = Console()
app = typer.Typer(rich_markup_mode="rich")


def print_banner():
    console.print(f"\n[bold cyan]Circumvention Monitor[/bold cyan] v{__version__}\n")


def _load_config(path: str, system: Optional[str] = None) -> MonitorConfig:
    try:
        monitor_config = MonitorConfig.from_yaml(path)
    except OSError as e:
        console.print(f"[red]Cannot read configuration: {e}[/red]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration {path}:[/red]\n{e}")
        raise typer.Exit(1)

    if system is None:
        return monitor_config

    selected = monitor_config.get_system(system)
    if selected is None:
        console.print(f"[red]Unknown system: {system}[/red]")
        raise typer.Exit(1)
    return MonitorConfig(systems=[selected])


def _print_summary(results: ResultSet) -> None:
    table = Table(title="Results")
    table.add_column("System")
    table.add_column("Positive", justify="right", style="green")
    table.add_column("Negative", justify="right", style="yellow")

    for name in results.system_names:
        counts = results.counts_for(name)
        table.add_row(name, str(counts.positive), str(counts.negative))

    console.print(table)

    total = results.total_counts()
    console.print(f"Total: {total.positive} positive, {total.negative} negative")


def _write_lines(path: str, lines: list) -> None:
    Path(path).write_text("".join(f"{line}\n" for line in lines))


@app.command()
def run(
    config: str = typer.Argument(..., help="Monitor configuration (YAML or JSON)"),
    captures: str = typer.Option(..., "-c", "--captures", help="Recorded page visits (YAML or JSON)"),
    report: str = typer.Option(None, "-r", "--report", help="Output Markdown report file"),
    rules: str = typer.Option(None, "--rules", help="Output blocking rules file"),
    parallel: int = typer.Option(1, "-p", "--parallel", help="Pages visited concurrently per system"),
    system: str = typer.Option(None, "-s", "--system", help="Only run this configured system"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
):
    """Run every configured system against recorded page visits."""
    setup_logging(verbose=verbose)

    if not verbose:
        print_banner()

    monitor_config = _load_config(config, system)

    try:
        source = RecordedPageSource.from_file(captures)
    except OSError as e:
        console.print(f"[red]Cannot read captures: {e}[/red]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid captures {captures}:[/red]\n{e}")
        raise typer.Exit(1)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Evaluating systems...", total=None)
            results = asyncio.run(run_monitor(monitor_config, source, parallel=parallel))
            progress.update(task, completed=True)

        _print_summary(results)

        if report:
            Path(report).write_text(render_markdown(results))
            console.print(f"[green]Report saved to: {report}[/green]")

        if rules:
            _write_lines(rules, synthesize_rules(results))
            console.print(f"[green]Rules saved to: {rules}[/green]")
    except CircumventionError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Cannot write output: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def validate(
    config: str = typer.Argument(..., help="Monitor configuration (YAML or JSON)"),
    system: str = typer.Option(None, "-s", "--system", help="Only validate this configured system"),
):
    """Compile every criteria of every configured system."""
    monitor_config = _load_config(config, system)

    criteria_count = 0
    for system_config in monitor_config.systems:
        try:
            criteria_count += len(create_matchers(system_config))
        except CircumventionError as e:
            console.print(f"[red]{system_config.name}: {e}[/red]")
            raise typer.Exit(1)

    console.print(
        f"[green]{len(monitor_config.systems)} systems, {criteria_count} criteria OK[/green]"
    )


if __name__ == "__main__":
    app()
