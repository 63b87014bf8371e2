"""Command-line interface for SidebarUnlock."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from sidebarunlock.config import Config
from sidebarunlock.document import detect_layout, get_video_id
from sidebarunlock.errors import MalformedDocument, UnlockError
from sidebarunlock.inspector import is_sidebar_empty
from sidebarunlock.models import Layout
from sidebarunlock.unlocker import create_default_unlocker


console = Console()
# Progress messages for commands whose stdout is a JSON document
status = Console(stderr=True)

LAYOUT_CHOICES = click.Choice([layout.value for layout in Layout])


def load_document(path: str) -> dict[str, Any]:
    """Read a saved next response from disk."""
    try:
        data = json.loads(Path(path).read_text())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        console.print(f"[red]Not valid JSON: {path} ({e})[/red]")
        sys.exit(1)

    if not isinstance(data, dict):
        console.print(f"[red]Expected a JSON object in {path}[/red]")
        sys.exit(1)
    return data


def get_config(layout: str | None, document: dict[str, Any] | None = None) -> Config:
    """Load config, letting --layout or the document itself pick the layout."""
    config = Config.load()
    if layout:
        config.layout = Layout(layout)
    elif document is not None:
        detected = detect_layout(document)
        if detected:
            config.layout = detected
    return config


@click.group()
@click.version_option(package_name="sidebarunlock")
@click.option("-v", "--verbose", is_flag=True, help="Log unlock progress")
def main(verbose: bool) -> None:
    """SidebarUnlock - recover sidebars of age-restricted videos."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command("unlock")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--layout", type=LAYOUT_CHOICES, help="Response layout (detected if omitted)")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write result here instead of stdout")
def unlock(path: str, layout: str | None, output: str | None) -> None:
    """Unlock a saved next response."""
    document = load_document(path)
    config = get_config(layout, document)
    unlocker = create_default_unlocker(config)

    if not unlocker.inspector.is_sidebar_empty(document):
        status.print("[yellow]Sidebar is not empty, nothing to unlock.[/yellow]", highlight=False)
    else:
        status.print(f"[dim]Unlocking {path} ({config.layout.value})...[/dim]", highlight=False)
        try:
            unlocker.unlock(document)
        except UnlockError as e:
            status.print(f"[red]{e}[/red]")
            sys.exit(1)
        status.print("[green]Sidebar unlocked.[/green]")

    text = json.dumps(document, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text)
        status.print(f"[dim]Wrote {output}[/dim]")
    else:
        click.echo(text)


@main.command("inspect")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--layout", type=LAYOUT_CHOICES, help="Response layout (detected if omitted)")
def inspect_document(path: str, layout: str | None) -> None:
    """Show the video id, layout and sidebar state of a next response."""
    document = load_document(path)
    detected = detect_layout(document)
    effective = Layout(layout) if layout else detected

    try:
        video_id = get_video_id(document)
    except MalformedDocument:
        video_id = None

    console.print(f"[bold]Video ID:[/bold] {video_id or '[red]missing[/red]'}")
    console.print(f"[bold]Layout:[/bold] {detected.value if detected else 'unknown'}")
    if effective:
        empty = is_sidebar_empty(document, effective)
        state = "[red]empty[/red]" if empty else "[green]present[/green]"
        console.print(f"[bold]Sidebar:[/bold] {state}")


@main.command("strategies")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def list_strategies(path: str) -> None:
    """List the strategies that would be tried, in order."""
    document = load_document(path)
    unlocker = create_default_unlocker(get_config(None, document))
    resolver = unlocker.resolver

    try:
        strategies = resolver.builder.build(document, resolver.session)
    except MalformedDocument as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    table = Table(title="Unlock Strategies")
    table.add_column("#", style="dim")
    table.add_column("Name", no_wrap=True)
    table.add_column("Adapter", no_wrap=True)
    table.add_column("Payload", overflow="fold")

    for index, strategy in enumerate(strategies, start=1):
        payload = ", ".join(f"{k}={v}" for k, v in strategy.payload.items() if v is not None)
        table.add_row(str(index), strategy.name, strategy.adapter.name, payload)

    console.print(table)


# =============================================================================
# Config commands
# =============================================================================


CONFIG_KEYS = {
    "layout": lambda v: Layout(v),
    "client_name": str,
    "client_version": str,
    "hl": str,
    "session_token": str,
    "is_embed": lambda v: v.lower() in ("1", "true", "yes"),
    "is_confirmed": lambda v: v.lower() in ("1", "true", "yes"),
    "proxy_host": str,
    "timeout": float,
}


@main.group()
def config() -> None:
    """Manage configuration."""
    pass


@config.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    data = Config.load().to_dict()

    table = Table(title="Configuration")
    table.add_column("Key", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        if key == "session_token" and value:
            value = value[:4] + "..."
        table.add_row(key, "" if value is None else str(value))

    console.print(table)


@config.command("set")
@click.argument("key", type=click.Choice(sorted(CONFIG_KEYS)))
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Set a configuration value."""
    cfg = Config.load()
    try:
        setattr(cfg, key, CONFIG_KEYS[key](value))
    except ValueError as e:
        console.print(f"[red]Invalid value for {key}: {e}[/red]")
        sys.exit(1)
    cfg.save()
    console.print(f"[green]Set {key}.[/green]")


if __name__ == "__main__":
    main()
