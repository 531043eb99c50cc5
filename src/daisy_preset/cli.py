"""
daisy-preset command line.

Commands:
- build: Build a preset from a style directory and write the stylesheet
- themes: Show the resolved theme order and where each theme is emitted
- rules: List the component rules a style directory produces
- classify: Show which utility name a selector is filed under
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import PresetOptions, load_options
from .css.selectors import classify
from .errors import DaisyPresetError
from .preset import Preset, build_preset
from .sources import DirectoryStyleSource
from .themes.builtin import builtin_palettes
from .themes.composer import (
    DARK_MEDIA_QUERY,
    auto_dark_theme,
    collect_palettes,
    resolve_theme_order,
    theme_selector,
)

app = typer.Typer(
    help="Build utility-engine presets from component style objects.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"daisy-preset {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """daisy-preset CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _options(config: Path | None) -> PresetOptions:
    if config is None:
        return PresetOptions()
    try:
        return load_options(config)
    except DaisyPresetError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


def _build(styles: Path, options: PresetOptions) -> Preset:
    try:
        return asyncio.run(build_preset(DirectoryStyleSource(styles), options))
    except DaisyPresetError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


@app.command("build")
def build_command(
    styles: Path = typer.Option(
        ..., "--styles", "-s", help="Directory holding base/, components/ and utilities/"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML or TOML options file"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the stylesheet here instead of stdout"
    ),
    classes: list[str] | None = typer.Option(
        None, "--class", help="Only include rules for this class (repeatable)"
    ),
) -> None:
    """Build a preset and render it to a stylesheet.

    Examples:
        daisy-preset build -s styles                    # Everything to stdout
        daisy-preset build -s styles -o daisy.css       # Write to a file
        daisy-preset build -s styles --class btn        # Only the btn rules
    """
    preset = _build(styles, _options(config))
    try:
        css = preset.render(classes or None)
    except DaisyPresetError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    for issue in preset.issues:
        typer.echo(f"Warning: {issue}", err=True)

    if output is None:
        typer.echo(css, nl=False)
    else:
        output.write_text(css, encoding="utf-8")
        typer.echo(f"Wrote {len(css)} bytes to {output}", err=True)


@app.command("themes")
def themes_command(
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML or TOML options file"),
) -> None:
    """Show the resolved theme order and the selectors each theme is emitted under."""
    options = _options(config)
    builtin = builtin_palettes()
    available = collect_palettes(options.themes, builtin)
    order = resolve_theme_order(options.themes, available, list(builtin))
    dark = auto_dark_theme(order, options.dark_theme)

    table = Table(title="Themes")
    table.add_column("#", justify="right")
    table.add_column("Theme", style="cyan")
    table.add_column("Emitted as")

    for index, name in enumerate(order):
        targets = []
        if index == 0:
            targets.append(options.theme_root)
        if index > 0 or len(order) > 1:
            targets.append(theme_selector(name))
        if name == dark:
            targets.append(DARK_MEDIA_QUERY)
        table.add_row(str(index), name, ", ".join(targets))

    console.print(table)


@app.command("rules")
def rules_command(
    styles: Path = typer.Option(
        ..., "--styles", "-s", help="Directory holding base/, components/ and utilities/"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML or TOML options file"),
) -> None:
    """List the component rules a style directory produces."""
    options = _options(config).model_copy(update={"base": False, "utils": False})
    preset = _build(styles, options)

    table = Table(title=f"Rules ({len(preset.rules)})")
    table.add_column("Class", style="cyan")
    table.add_column("Layer")
    table.add_column("Bytes", justify="right")
    try:
        for rule in preset.rules:
            table.add_row(rule.name, rule.layer, str(len(rule.get_css())))
    except DaisyPresetError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    console.print(table)


@app.command("classify")
def classify_command(
    selectors: list[str] = typer.Argument(..., help="Selectors to classify"),
) -> None:
    """Show the utility name each selector is filed under."""
    failed = False
    for selector in selectors:
        try:
            typer.echo(f"{selector}\t{classify(selector)}")
        except DaisyPresetError as e:
            typer.echo(f"Error: {e.message}", err=True)
            failed = True
    if failed:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
