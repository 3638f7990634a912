"""plugdoc CLI interface.

Commands:
- render: Render one variant of a manual
- build: Render every configured variant to the output directory
- validate: Check that a manual is well-formed for every variant
- variants: List the build variants and their plugin metadata
- init: Initialize plugdoc configuration

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from plugdoc import __version__
from plugdoc.config import PlugdocConfig, create_default_config, load_config
from plugdoc.errors import MalformedTemplate, UnknownMode
from plugdoc.models.nodes import Document
from plugdoc.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="plugdoc",
    help="Variant-aware plugin manual generator",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: PlugdocConfig = PlugdocConfig()
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"plugdoc {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with timestamps"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress info messages (warnings and errors only)"),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option("--ci", help="Enable CI mode with JSON output"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """plugdoc - Variant-aware plugin manual generator.

    Render the mono and stereo manual pages of a plugin from one template.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


def _load_manual(name: str) -> Document:
    from plugdoc.content import get_manual

    try:
        return get_manual(name)
    except ValueError as e:
        _logger.error(str(e))
        raise typer.Exit(1)


# =============================================================================
# render command
# =============================================================================


@app.command()
def render(
    mode: Annotated[
        str,
        typer.Option("--mode", "-m", help="Build variant: mono or stereo"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: print to stdout)"),
    ] = None,
    fragment: Annotated[
        bool,
        typer.Option("--fragment", help="Emit the bare manual body without page chrome"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Preview output without writing files"),
    ] = False,
) -> None:
    """Render one variant of the manual.

    Exit codes:
        0: Page rendered
        1: Unknown mode, malformed template or write failure
    """
    from plugdoc.models import Mode
    from plugdoc.templates import PageRenderer

    try:
        resolved = Mode.parse(mode)
    except UnknownMode as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    if fragment:
        _config.output.wrap_page = False

    document = _load_manual(_config.manual)
    renderer = PageRenderer(config=_config)
    _logger.info(f"Rendering {document.name} manual ({resolved} variant)")

    try:
        if dry_run:
            typer.echo(renderer.preview(document, resolved, max_lines=40))
            _logger.info("Dry run complete - no files written")
        elif output is None:
            typer.echo(renderer.render(document, resolved), nl=False)
        else:
            written = renderer.render_to_file(document, resolved, output)
            typer.echo(f"📄 Manual written to: {written}")
    except MalformedTemplate as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except (OSError, ValueError) as e:
        _logger.error(f"Rendering failed: {e}")
        raise typer.Exit(1)


# =============================================================================
# build command
# =============================================================================


@app.command()
def build(
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Output directory (overrides config)"),
    ] = None,
) -> None:
    """Render every configured variant to the output directory.

    Every variant is rendered before any file is written, so a malformed
    template leaves the output directory untouched.
    """
    from plugdoc.models import plugin_for_mode
    from plugdoc.templates import PageRenderer

    if output_dir is not None:
        _config.output.directory = str(output_dir)

    document = _load_manual(_config.manual)
    renderer = PageRenderer(config=_config)

    try:
        pages = {mode: renderer.render(document, mode) for mode in _config.modes}
    except (MalformedTemplate, ValueError) as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    for mode, content in pages.items():
        path = _config.output.path_for(plugin_for_mode(mode).page_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            _logger.error(f"Failed to write {path}: {e}")
            raise typer.Exit(1)
        _logger.structured(
            logging.INFO, f"Wrote {path}", mode=str(mode), path=str(path), size=len(content)
        )
        typer.echo(f"📄 {mode}: {path}")


# =============================================================================
# validate command
# =============================================================================


@app.command()
def validate() -> None:
    """Validate the manual template for every variant.

    Checks the content model of every container and the balance of the
    rendered markup.
    """
    from plugdoc.composer import VariantComposer
    from plugdoc.composer.markup import check_balanced

    document = _load_manual(_config.manual)
    composer = VariantComposer()

    try:
        rendered = composer.render_all(document)
        for markup in rendered.values():
            check_balanced(markup)
    except MalformedTemplate as e:
        _logger.error(str(e))
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    for mode, markup in rendered.items():
        typer.echo(f"  ✅ {mode} ({len(markup)} characters)")
    typer.echo(f"✅ Template is valid: {document.name}")


# =============================================================================
# variants command
# =============================================================================


@app.command()
def variants(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """List build variants and their plugin metadata."""
    from plugdoc.models import Mode, plugin_for_mode

    plugins = [plugin_for_mode(mode) for mode in Mode]

    if json_output:
        typer.echo(json.dumps([p.to_dict() for p in plugins], indent=2))
        return

    for plugin in plugins:
        typer.echo(f"{plugin.mode} ({plugin.mode.value}): {plugin.name} [{plugin.acronym}]")
        for format_name, identifier in plugin.identifiers:
            typer.echo(f"     └─ {format_name}: {identifier}")


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite existing config"),
    ] = False,
) -> None:
    """Initialize plugdoc configuration in ./.plugdoc/config.yaml."""
    config_dir = Path(".plugdoc")
    config_dir.mkdir(exist_ok=True)
    config_file = config_dir / "config.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_file.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")
    typer.echo(f"✅ plugdoc configuration initialized: {config_file}")


if __name__ == "__main__":
    app()
