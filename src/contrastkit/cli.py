"""Command-line interface for contrastkit."""

import json
import logging
import sys

import click

from . import __version__
from .analysis import ContrastReport, analyze_contrast
from .color_utils import format_color_output, parse_color_with_alpha

_COMPLIANCE_LABELS = {
    "normal_aa": "Normal text AA (4.5:1)",
    "normal_aaa": "Normal text AAA (7:1)",
    "large_aa": "Large text AA (3:1)",
    "large_aaa": "Large text AAA (4.5:1)",
    "graphics_aa": "Graphics AA (3:1)",
}


def _echo_grid(report: ContrastReport, color_format: str, number: int) -> None:
    """Print a human-readable contrast report."""
    click.echo(f"Foreground: {report.effective_foreground}", nl=False)
    if report.fg_alpha < 1.0:
        click.echo(f"  ({report.foreground} at {report.fg_alpha:.0%})", nl=False)
    click.echo()
    click.echo(f"Background: {report.effective_background}", nl=False)
    if report.bg_alpha < 1.0:
        click.echo(f"  ({report.background} at {report.bg_alpha:.0%})", nl=False)
    click.echo()
    click.echo(f"Contrast ratio: {report.ratio:.2f}:1")
    click.echo()

    for field, passed in report.compliance.to_dict().items():
        click.echo(f"  {'PASS' if passed else 'FAIL'}  {_COMPLIANCE_LABELS[field]}")
    click.echo()

    size = "large" if report.large_text else "normal"
    click.echo(f"{size.capitalize()} text: {'passes' if report.passes else 'fails'} WCAG AA")

    outcome = report.outcome
    if outcome.status == "compliant":
        click.echo("Already meets WCAG AAA; no suggestions needed.")
        return
    if outcome.status == "unreachable":
        click.echo("No in-gamut color reaches the required contrast.")
        return

    suggestions = outcome.suggestions[:number]
    colors = format_color_output((s.hex for s in suggestions), color_format)
    click.echo()
    click.echo(f"Found {len(outcome.suggestions)} suggestions (closest first):")
    click.echo()
    for suggestion, color in zip(suggestions, colors):
        click.echo(
            f"  {suggestion.target:10}  {suggestion.level:3}  {suggestion.direction:7}  "
            f"{color:22}  {suggestion.ratio:5.2f}:1  ΔE {suggestion.distance:6.2f}"
        )


@click.command()
@click.version_option(version=__version__, prog_name="contrastkit")
@click.option(
    "-f",
    "--foreground-color",
    required=True,
    help=(
        "Foreground color: #RGB[A], #RRGGBB[AA], rgb()/rgba(), or hsl()/hsla()"
    ),
)
@click.option(
    "-b",
    "--background-color",
    required=True,
    help=(
        "Background color: #RGB[A], #RRGGBB[AA], rgb()/rgba(), or hsl()/hsla()"
    ),
)
@click.option(
    "--font-size",
    type=click.FloatRange(min=0.0, min_open=True),
    default=16.0,
    help="Text size in pixels, used for large-text classification (default: 16)",
)
@click.option("--bold", is_flag=True, help="Treat the text as bold")
@click.option(
    "--format",
    type=click.Choice(["hex", "rgb", "hsl"], case_sensitive=False),
    default="hex",
    help="Output format for suggested colors (default: hex)",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["grid", "json"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)
@click.option(
    "-n",
    "--number",
    type=click.IntRange(1, 64),
    default=10,
    help="Maximum number of suggestions to print in grid output (default: 10)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    foreground_color: str,
    background_color: str,
    font_size: float,
    bold: bool,
    format: str,
    output_format: str,
    number: int,
    verbose: bool,
) -> None:
    """Check the WCAG contrast of a foreground/background pair.

    contrastkit composites translucent colors, reports the contrast ratio and
    every WCAG criterion, and when the pair fails it suggests the closest
    foreground or background colors that would pass.

    Examples:

        contrastkit -f "#777777" -b "#888888"

        contrastkit -f "rgba(0, 0, 0, 0.5)" -b "#ffffff" -F json

        contrastkit -f "hsl(210, 40%, 60%)" -b "#f8fafc" --font-size 24

        contrastkit -f "#999" -b "#fff" --format rgb -n 4
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    for value in (foreground_color, background_color):
        if parse_color_with_alpha(value) is None:
            click.echo(
                f"Error: Invalid color format: '{value}'. "
                "Supported formats: #RGB, #RRGGBB, #RRGGBBAA, rgb(), rgba(), hsl(), hsla()",
                err=True,
            )
            sys.exit(1)

    report = analyze_contrast(foreground_color, background_color, font_size, bold)

    if output_format.lower() == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _echo_grid(report, format.lower(), number)


if __name__ == "__main__":
    main()
