"""
shallot CLI.

Thin command-line wrapper over the token engine: print the CSS block or
variable map for a theme, inspect palette contrast, export DTCG tokens and
list breakpoints. Theme settings come from themespec.yaml in the project
directory, with command-line options taking precedence.
"""

from __future__ import annotations

import json
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shallot._version import get_version
from shallot.core.design_tokens import DesignTokens
from shallot.core.dtcg_export import export_dtcg_file
from shallot.core.errors import ShallotError
from shallot.core.ir.themespec import ThemeSpecYAML
from shallot.core.palette import ColorMode, ColorScheme
from shallot.core.presets import iter_presets
from shallot.core.responsive import Breakpoint
from shallot.core.themespec_loader import load_themespec, parse_themespec_data

console = Console()

app = typer.Typer(
    help="shallot – design tokens from a single seed color",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"shallot {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """shallot CLI main callback for global options."""
    pass


# =============================================================================
# Shared options
# =============================================================================

ProjectOption = typer.Option(
    Path("."), "--project", "-p", help="Directory containing themespec.yaml"
)
SeedOption = typer.Option(None, "--seed", "-s", help="Seed color as hex (overrides themespec)")
SchemeOption = typer.Option(None, "--scheme", help="Color scheme (overrides themespec)")
ModeOption = typer.Option(None, "--mode", "-m", help="Light or dark surfaces (overrides themespec)")
PresetOption = typer.Option(None, "--preset", help="Named theme preset (overrides themespec)")


def _resolve_themespec(
    project: Path,
    seed: str | None,
    scheme: ColorScheme | None,
    mode: ColorMode | None,
    preset: str | None = None,
) -> ThemeSpecYAML:
    spec = load_themespec(project)
    if seed is None and scheme is None and mode is None and preset is None:
        return spec

    data = spec.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    if preset is not None:
        # A preset chosen on the command line replaces the file's palette inputs
        for key in ("seed", "scheme", "mode"):
            data.pop(key, None)
        data["preset"] = preset
    if seed is not None:
        data["seed"] = {"hex": seed}
    if scheme is not None:
        data["scheme"] = scheme.value
    if mode is not None:
        data["mode"] = mode.value
    return parse_themespec_data(data)


def _load_tokens(
    project: Path,
    seed: str | None,
    scheme: ColorScheme | None,
    mode: ColorMode | None,
    preset: str | None = None,
) -> DesignTokens:
    try:
        spec = _resolve_themespec(project, seed, scheme, mode, preset)
        return DesignTokens.from_themespec(spec)
    except ShallotError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1) from e


# =============================================================================
# Commands
# =============================================================================


@app.command("css")
def css_command(
    project: Path = ProjectOption,
    seed: str | None = SeedOption,
    scheme: ColorScheme | None = SchemeOption,
    mode: ColorMode | None = ModeOption,
    preset: str | None = PresetOption,
    selector: str = typer.Option(":root", "--selector", help="Selector scoping the variables"),
) -> None:
    """Print the theme as a CSS custom property block."""
    tokens = _load_tokens(project, seed, scheme, mode, preset)
    typer.echo(tokens.to_css_string(selector))


@app.command("variables")
def variables_command(
    project: Path = ProjectOption,
    seed: str | None = SeedOption,
    scheme: ColorScheme | None = SchemeOption,
    mode: ColorMode | None = ModeOption,
    preset: str | None = PresetOption,
) -> None:
    """Print the theme variable map as JSON."""
    tokens = _load_tokens(project, seed, scheme, mode, preset)
    typer.echo(json.dumps(tokens.to_css_variables(), indent=2))


@app.command("contrast")
def contrast_command(
    project: Path = ProjectOption,
    seed: str | None = SeedOption,
    scheme: ColorScheme | None = SchemeOption,
    mode: ColorMode | None = ModeOption,
    preset: str | None = PresetOption,
    against: str = typer.Option("surface", "--against", help="Palette role used as background"),
) -> None:
    """Show WCAG contrast of each palette role against a surface role."""
    tokens = _load_tokens(project, seed, scheme, mode, preset)
    if against not in tokens.palette.roles():
        console.print(f"[red]Unknown palette role: {escape(against)}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Contrast against {against}")
    table.add_column("Role", style="cyan")
    table.add_column("Color")
    table.add_column("Ratio", justify="right")
    table.add_column("AA")
    table.add_column("AAA")

    roles = tokens.palette.roles()
    for check in tokens.palette.contrast_report(against):
        table.add_row(
            check.role,
            roles[check.role].to_hex(),
            f"{check.ratio:.2f}",
            "[green]pass[/green]" if check.passes_aa else "[red]fail[/red]",
            "[green]pass[/green]" if check.passes_aaa else "[red]fail[/red]",
        )
    console.print(table)


@app.command("dtcg")
def dtcg_command(
    output: Path = typer.Argument(Path("tokens.json"), help="Where to write tokens.json"),
    project: Path = ProjectOption,
    seed: str | None = SeedOption,
    scheme: ColorScheme | None = SchemeOption,
    mode: ColorMode | None = ModeOption,
    preset: str | None = PresetOption,
) -> None:
    """Export the theme as W3C DTCG tokens.json."""
    tokens = _load_tokens(project, seed, scheme, mode, preset)
    path = export_dtcg_file(tokens, output)
    typer.echo(f"✓ Wrote {path}")


@app.command("breakpoints")
def breakpoints_command() -> None:
    """List breakpoint tiers and their media queries."""
    table = Table(title="Breakpoints")
    table.add_column("Tier", style="cyan")
    table.add_column("Min width", justify="right")
    table.add_column("Media query")
    for bp in Breakpoint:
        table.add_row(bp.label, f"{bp.min_width()}px", bp.media_query() or "(base)")
    console.print(table)


@app.command("presets")
def presets_command() -> None:
    """List named theme presets."""
    table = Table(title="Theme presets")
    table.add_column("Name", style="cyan")
    table.add_column("Seed")
    table.add_column("Scheme")
    table.add_column("Mode")
    table.add_column("Description")
    for preset in iter_presets():
        table.add_row(
            preset.name,
            preset.seed.to_hex(),
            preset.scheme.value,
            preset.mode.value,
            preset.description,
        )
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
