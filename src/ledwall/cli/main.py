"""Typer CLI for LED video wall layout and rigging calculations."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from ledwall.application import CalculateLayoutCommand, LayoutOutput, ModuleCatalog
from ledwall.application.config import (
    ConfigError,
    config_to_catalog,
    config_to_project,
    load_config,
)
from ledwall.cli.commands import modules_app, templates_app, validate_command
from ledwall.cli.commands.validate import display_load_error
from ledwall.domain import InstallationType, ProjectConfig
from ledwall.infrastructure import (
    JsonExporter,
    LogisticsFormatter,
    PowerReportFormatter,
    RiggingReportFormatter,
    RouteDiagramFormatter,
    SummaryFormatter,
)
from ledwall.infrastructure.exporters import ExporterRegistry, ExportManager
from ledwall.infrastructure.llm import (
    AdvisoryError,
    ModuleLookupError,
    ModuleSpecLookup,
    SafetyAdvisor,
    build_safety_summary,
)

OUTPUT_FORMATS = ("summary", "rigging", "power", "logistics", "routes", "json", "all")


app = typer.Typer(
    name="ledwall",
    help="Plan LED video walls: tile layout, rigging loads, power and cabling.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")
app.add_typer(modules_app, name="modules")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Plan LED video walls: tile layout, rigging loads, power and cabling."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Shared options
# =============================================================================

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON project file"),
]
WidthOption = Annotated[
    float | None,
    typer.Option("--width", "-w", help="Screen width in metres"),
]
HeightOption = Annotated[
    float | None,
    typer.Option("--height", "-h", help="Screen height in metres"),
]
ModuleOption = Annotated[
    int | None,
    typer.Option("--module", "-m", help="Catalog id of the LED module"),
]
InstallationOption = Annotated[
    InstallationType | None,
    typer.Option("--installation", "-i", help="Installation mode: flown or stacked"),
]
MotorsOption = Annotated[
    int | None,
    typer.Option("--motors", help="Number of chain motors"),
]


def _build_project(
    config_file: Path | None,
    width: float | None,
    height: float | None,
    module_id: int | None,
    installation: InstallationType | None,
    motors: int | None,
) -> tuple[ProjectConfig, ModuleCatalog]:
    """Build the project snapshot from a file and/or CLI options.

    CLI options override the values from the project file.
    """
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
        project = config_to_project(config)
        catalog = config_to_catalog(config)
    else:
        project = ProjectConfig()
        catalog = ModuleCatalog()

    changes: dict = {}
    if width is not None:
        changes["target_width_m"] = width
    if height is not None:
        changes["target_height_m"] = height
    if installation is not None:
        changes["installation"] = installation
    if motors is not None:
        changes["motor_count"] = motors

    try:
        if changes:
            project = project.with_changes(**changes)
        if module_id is not None and module_id != project.module_id:
            project = project.with_module(module_id)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    return project, catalog


def _calculate(project: ProjectConfig, catalog: ModuleCatalog) -> LayoutOutput:
    output = CalculateLayoutCommand(catalog=catalog).execute(project)
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return output


def _render(output: LayoutOutput, output_format: str) -> str:
    result = output.result
    project = output.project
    plan = output.plan
    if output_format == "json":
        return JsonExporter().export(output)

    sections: list[str] = []
    if output_format in ("summary", "all"):
        sections.append(SummaryFormatter().format(result, output.module, project))
    if output_format in ("rigging", "all"):
        sections.append(RiggingReportFormatter().format(result, project))
    if output_format in ("power", "all"):
        sections.append(PowerReportFormatter().format(result, project))
    if output_format in ("logistics", "all"):
        sections.append(LogisticsFormatter().format(result.hardware))
    if output_format in ("routes", "all"):
        diagram = RouteDiagramFormatter()
        sections.append(diagram.format(plan.data_route, result.cols, result.rows))
        sections.append(diagram.format(plan.power_route, result.cols, result.rows))
    return "\n\n".join(sections)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def calculate(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    module_id: ModuleOption = None,
    installation: InstallationOption = None,
    motors: MotorsOption = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format: summary, rigging, power, logistics, routes, json, all",
        ),
    ] = "all",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
) -> None:
    """Calculate the tile layout, rigging, power and logistics of a screen.

    Examples:
        ledwall calculate --width 6 --height 3.5 --module 5
        ledwall calculate --config main-stage.json --format rigging
    """
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    project, catalog = _build_project(
        config_file, width, height, module_id, installation, motors
    )
    output = _calculate(project, catalog)
    text = _render(output, output_format)

    if output_file is not None:
        output_file.write_text(text)
        typer.echo(f"Written to {output_file}")
    else:
        typer.echo(text)


@app.command()
def export(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    module_id: ModuleOption = None,
    installation: InstallationOption = None,
    motors: MotorsOption = None,
    formats: Annotated[
        str,
        typer.Option("--formats", help="Comma-separated export formats: json,bom,report (or 'all')"),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = Path("."),
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "ledwall",
) -> None:
    """Export a calculation to one or more file formats.

    Example:
        ledwall export --config main-stage.json --formats json,bom --output-dir out
    """
    available = ExporterRegistry.available_formats()
    if formats.lower() == "all":
        selected = available
    else:
        selected = [f.strip().lower() for f in formats.split(",") if f.strip()]

    invalid = [f for f in selected if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not selected:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    project, catalog = _build_project(
        config_file, width, height, module_id, installation, motors
    )
    output = _calculate(project, catalog)

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(selected, output, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def advise(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    module_id: ModuleOption = None,
    installation: InstallationOption = None,
    motors: MotorsOption = None,
    ollama_url: Annotated[
        str,
        typer.Option("--ollama-url", help="Ollama server URL"),
    ] = "http://localhost:11434",
    model: Annotated[
        str,
        typer.Option("--model", help="Ollama model name"),
    ] = "llama3.2",
    language: Annotated[
        str,
        typer.Option("--language", help="Language of the answer"),
    ] = "English",
) -> None:
    """Ask a local LLM for a rigging safety analysis of a screen.

    Example:
        ledwall advise --config main-stage.json --model llama3.2
    """
    project, catalog = _build_project(
        config_file, width, height, module_id, installation, motors
    )
    output = _calculate(project, catalog)
    summary = build_safety_summary(output.result, project)

    typer.echo("Installation summary:")
    typer.echo(summary)
    typer.echo()

    advisor = SafetyAdvisor(ollama_url=ollama_url, model=model, language=language)
    try:
        analysis = advisor.analyze_sync(summary)
    except AdvisoryError as e:
        typer.echo(f"Safety analysis unavailable: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Safety analysis:")
    typer.echo(analysis)


@app.command()
def lookup(
    brand: Annotated[str, typer.Argument(help="Module brand, e.g. Absen")],
    model_name: Annotated[str, typer.Argument(help="Module model, e.g. PL2.5 Pro")],
    ollama_url: Annotated[
        str,
        typer.Option("--ollama-url", help="Ollama server URL"),
    ] = "http://localhost:11434",
    model: Annotated[
        str,
        typer.Option("--model", help="Ollama model name"),
    ] = "llama3.2",
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the specs as JSON"),
    ] = False,
) -> None:
    """Look up LED module specs with a local LLM.

    Example:
        ledwall lookup Absen "PL2.5 Pro"
    """
    service = ModuleSpecLookup(ollama_url=ollama_url, model=model)
    try:
        specs = service.lookup_sync(brand, model_name)
    except ModuleLookupError as e:
        typer.echo(f"Lookup failed: {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(specs.model_dump(), indent=2))
        return

    typer.echo(f"{brand} {model_name}")
    typer.echo(f"  Size:    {specs.width_mm:g} x {specs.height_mm:g} mm")
    typer.echo(f"  Weight:  {specs.weight_kg:g} kg")
    typer.echo(f"  Power:   {specs.max_power_w:g} W")
    typer.echo(f"  Pixels:  {specs.pixels_h} x {specs.pixels_v}")


if __name__ == "__main__":
    app()
