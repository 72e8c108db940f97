"""Modules commands for browsing the LED module catalog."""

from pathlib import Path
from typing import Annotated

import typer

from ledwall.application import ModuleCatalog, ModuleNotFoundError
from ledwall.application.config import ConfigError, config_to_catalog, load_config
from ledwall.cli.commands.validate import display_load_error

modules_app = typer.Typer(
    name="modules",
    help="Browse the LED module catalog.",
)


def load_catalog(config_file: Path | None) -> ModuleCatalog:
    """Catalog for a project file, or the built-in catalog."""
    if config_file is None:
        return ModuleCatalog()
    try:
        return config_to_catalog(load_config(config_file))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


@modules_app.command(name="list")
def list_modules(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Include custom modules from a project file"),
    ] = None,
) -> None:
    """List catalog modules.

    Example:
        ledwall modules list
    """
    catalog = load_catalog(config_file)

    typer.echo(
        f"{'ID':>3}  {'Module':<30} {'Size mm':>11} {'kg':>6} {'W':>6} "
        f"{'Pixels':>9} {'Pitch':>6}"
    )
    typer.echo("-" * 80)
    for module in catalog.list_modules():
        size = f"{module.width_mm:g}x{module.height_mm:g}"
        pixels = f"{module.pixels_h}x{module.pixels_v}"
        pitch = f"{module.pixel_pitch_mm:.2f}" if module.pixel_pitch_mm else "-"
        typer.echo(
            f"{module.id:>3}  {module.name:<30} {size:>11} {module.weight_kg:>6g} "
            f"{module.power_w:>6g} {pixels:>9} {pitch:>6}"
        )


@modules_app.command(name="show")
def show_module(
    module_id: Annotated[int, typer.Argument(help="Catalog id of the module")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Include custom modules from a project file"),
    ] = None,
) -> None:
    """Show the technical data of one module."""
    catalog = load_catalog(config_file)
    try:
        module = catalog.get(module_id)
    except ModuleNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{module.name} (id {module.id})")
    typer.echo(f"  Size:    {module.width_mm:g} x {module.height_mm:g} mm")
    typer.echo(f"  Weight:  {module.weight_kg:g} kg")
    typer.echo(f"  Power:   {module.power_w:g} W")
    typer.echo(f"  Pixels:  {module.pixels_h} x {module.pixels_v}")
    if module.pixel_pitch_mm:
        typer.echo(f"  Pitch:   {module.pixel_pitch_mm:.2f} mm")
