"""CLI interface for RSS Transcoder using Typer."""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from . import __version__
from .main import TranscoderApp


app = typer.Typer(
    name="rss-transcoder",
    help="Convert RSS 2.0 feeds between XML and JSON",
    add_completion=False,
)


@app.command()
def convert(
    source: Annotated[str, typer.Argument(help="Feed file path or URL ending in .xml")],
    to: Annotated[str, typer.Option("--to", "-t", help="Output format: xml|json")] = "xml",
    json_style: Annotated[Optional[str], typer.Option("--json-style", help="JSON layout: legacy|nested")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to file instead of stdout")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show detailed output")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Convert a feed to XML or JSON."""
    try:
        app_instance = TranscoderApp(config_file)
        app_instance.set_verbose(verbose)
        data = app_instance.convert(source, output_format=to, json_style=json_style)
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)

    if output:
        output.write_bytes(data)
        typer.echo(f"✓ Wrote {len(data)} bytes to {output}")
    else:
        typer.echo(data.decode('utf-8'))


@app.command()
def inspect(
    source: Annotated[str, typer.Argument(help="Feed file path or URL ending in .xml")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Show a summary of a feed's channel."""
    try:
        app_instance = TranscoderApp(config_file)
        info_data = app_instance.get_info(app_instance.load(source))
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Title: {info_data['title']}")
    typer.echo(f"Link: {info_data['link']}")
    typer.echo(f"Language: {info_data['language'] or 'N/A'}")
    typer.echo(f"Categories: {info_data['categories']}")
    typer.echo(f"Items: {info_data['items']}")


@app.command()
def config(
    example: Annotated[bool, typer.Option("--example", help="Generate example config")] = False,
    show: Annotated[bool, typer.Option("--show", help="Show effective config")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Manage RSS Transcoder configuration."""
    if example:
        from .config import create_example_config
        typer.echo(create_example_config())
    elif show:
        try:
            from .config import load_config
            import yaml
            config_obj = load_config(config_file)
            typer.echo(yaml.dump(config_obj.model_dump(mode="json"), default_flow_style=False, indent=2))
        except Exception as e:
            typer.echo(f"✗ Error loading config: {e}", err=True)
            raise typer.Exit(1)
    else:
        typer.echo("Use --show to view config or --example to generate example")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"RSS Transcoder v{__version__}")


if __name__ == "__main__":
    app()
