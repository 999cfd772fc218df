#!/usr/bin/env python3
"""
Portfolio Rendering CLI

Customizes templates from the template library with a portfolio data bundle
(YAML) and renders or publishes the result.

Commands:
    sample  - Write the built-in sample template into the library
    list    - List templates in the library
    render  - Render a template with portfolio data
    publish - Render and publish under the portfolio's subdomain
    events  - Show recent publish events

Examples:\n

    render_portfolio.py sample                                   # Save sample as "sample"

    render_portfolio.py render sample data/ada.yaml              # Full page to stdout

    render_portfolio.py render sample data/ada.yaml -o page.html # Full page to file

    render_portfolio.py render sample data/ada.yaml --parts      # Customized html/css/js

    render_portfolio.py publish sample data/ada.yaml             # Publish to PUBLISH_PATH
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from portify.contexts.customization import (
    TemplateRegistry,
    customize_template,
    generate_complete_page,
    get_sample_template,
    load_portfolio_data,
)
from portify.contexts.customization.exceptions import (
    InvalidPortfolioDataError,
    TemplateNotFoundError,
    TemplateRenderError,
)
from portify.contexts.publishing import publish_portfolio
from portify.utils.event_logging import get_recent_events
from portify.utils.timestamp import format_timestamp

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("TEMPLATES_PATH", "data/templates"))

app = typer.Typer(
    help="Customize portfolio templates with user data and publish the result",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(message: str) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load_inputs(registry: TemplateRegistry, template_name: str, data_file: Path):
    try:
        source = registry.get_template(template_name)
        data = load_portfolio_data(data_file)
    except (TemplateNotFoundError, FileNotFoundError, InvalidPortfolioDataError) as e:
        _fail(str(e))
    return source, data


@app.command("sample")
def sample_command(
    name: Annotated[
        str,
        typer.Argument(help="Template name to save the sample under"),
    ] = "sample",
    templates_path: Annotated[
        Path,
        typer.Option("--templates", "-t", help="Template library directory"),
    ] = TEMPLATES_PATH,
):
    """Write the built-in sample template into the template library."""
    registry = TemplateRegistry(templates_path)
    template_dir = registry.save_template(
        name,
        get_sample_template(),
        metadata={
            "name": "Sample Portfolio",
            "category": "minimal",
            "description": "Built-in example using every marker",
        },
    )
    typer.secho(f"✓ Sample template saved to: {template_dir}", fg=typer.colors.GREEN)


@app.command("list")
def list_command(
    templates_path: Annotated[
        Path,
        typer.Option("--templates", "-t", help="Template library directory"),
    ] = TEMPLATES_PATH,
):
    """List all templates in the library with their category."""
    registry = TemplateRegistry(templates_path)
    names = registry.list_templates()

    if not names:
        typer.secho(f"No templates found in {templates_path}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nTemplates ({len(names)}):", fg=typer.colors.BLUE, bold=True)
    for name in names:
        metadata = registry.get_metadata(name)
        typer.echo(f"  • {name} [{metadata['category']}] {metadata['description']}")


@app.command("render")
def render_command(
    template_name: Annotated[str, typer.Argument(help="Template name in the library")],
    data_file: Annotated[
        Path,
        typer.Argument(help="Portfolio data YAML", exists=True, dir_okay=False),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    parts: Annotated[
        bool,
        typer.Option("--parts", help="Emit customized html/css/js instead of a full page"),
    ] = False,
    templates_path: Annotated[
        Path,
        typer.Option("--templates", "-t", help="Template library directory"),
    ] = TEMPLATES_PATH,
):
    """
    Render a template with portfolio data.

    Examples:\n

        $ render_portfolio.py render sample data/ada.yaml

        $ render_portfolio.py render sample data/ada.yaml --parts -o parts.txt
    """
    registry = TemplateRegistry(templates_path)
    source, data = _load_inputs(registry, template_name, data_file)

    if parts:
        customized = customize_template(source.html, source.css, source.js, data)
        text = "\n".join(
            [
                "<!-- html -->",
                customized.html,
                "/* css */",
                customized.css,
                "// js",
                customized.js,
            ]
        )
    else:
        try:
            text = generate_complete_page(source.html, source.css, source.js, data)
        except TemplateRenderError as e:
            _fail(str(e))

    if output is None:
        typer.echo(text)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        typer.secho(f"✓ Written to: {output}", fg=typer.colors.GREEN, err=True)


@app.command("publish")
def publish_command(
    template_name: Annotated[str, typer.Argument(help="Template name in the library")],
    data_file: Annotated[
        Path,
        typer.Argument(help="Portfolio data YAML", exists=True, dir_okay=False),
    ],
    publish_root: Annotated[
        Optional[Path],
        typer.Option("--publish-root", "-p", help="Root directory of published sites"),
    ] = None,
    templates_path: Annotated[
        Path,
        typer.Option("--templates", "-t", help="Template library directory"),
    ] = TEMPLATES_PATH,
):
    """Render a template and publish it under the portfolio's subdomain."""
    registry = TemplateRegistry(templates_path)
    source, data = _load_inputs(registry, template_name, data_file)

    result = publish_portfolio(source, data, publish_root=publish_root, template_name=template_name)

    if not result.success:
        _fail(result.error)

    typer.secho(f"\n✓ Published {result.subdomain}: {result.output_path}", fg=typer.colors.GREEN)


@app.command("events")
def events_command(
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Number of events to show", min=1),
    ] = 10,
    subdomain: Annotated[
        Optional[str],
        typer.Option("--subdomain", "-s", help="Only show events for this subdomain"),
    ] = None,
):
    """Show the most recent publish events (oldest first)."""
    events = get_recent_events(count, subdomain=subdomain)

    if not events:
        typer.secho("No events recorded", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit()

    for event in events:
        event_type = str(event.get("event_type") or "unknown")
        failed = event_type.endswith("_failed")
        typer.secho(
            f"{format_timestamp(event.get('timestamp', ''))}  {event_type:<18} {event.get('subdomain') or '-'}",
            fg=typer.colors.RED if failed else typer.colors.GREEN,
        )
        if failed and event.get("error"):
            typer.echo(f"    {event['error']}")


if __name__ == "__main__":
    app()
