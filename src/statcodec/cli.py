"""statcodec CLI interface.

Commands:
- convert: Merge serialized statistics and print them in one format
- formats: List known formats and whether they are usable
- check: Validate codec library availability
- init: Write a default configuration file

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log lines
- --version: Show version and exit

This module is the only place that decides exit codes.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from statcodec import __version__
from statcodec.capabilities import CapabilitySet, detect_capabilities
from statcodec.codecs import CodecError, ConfigurationError, UnknownFormatError, get_registry
from statcodec.config import SORT_KEYS, StatcodecConfig, create_default_config, load_config
from statcodec.diagnostics import parse_failure_message
from statcodec.dispatcher import FormatDispatcher
from statcodec.inputs import InputParseError, collect_inputs
from statcodec.summary import render_summary
from statcodec.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="statcodec",
    help="Convert code statistics between CBOR, JSON, YAML and TOML",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: StatcodecConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"statcodec {__version__}")
        raise typer.Exit()


def _get_config() -> StatcodecConfig:
    return _config or StatcodecConfig()


def _build_capabilities() -> CapabilitySet:
    config = _get_config()
    return detect_capabilities(get_registry(), configured=config.formats.enabled)


def _build_dispatcher() -> FormatDispatcher:
    config = _get_config()
    config_path = str(config.config_path) if config.config_path else None
    return FormatDispatcher(_build_capabilities(), config_path=config_path)


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
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON log lines",
        ),
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
    """statcodec - code statistics format converter.

    Reads statistics serialized as hex-encoded CBOR, JSON, YAML or TOML,
    merges them, and writes them back in any enabled format.
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
    except (ValueError, OSError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


# =============================================================================
# convert command
# =============================================================================


@app.command()
def convert(
    sources: Annotated[
        list[str],
        typer.Argument(
            help="Input files, 'stdin', or inline serialized statistics",
        ),
    ],
    output: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Output format (overrides config); omit for a summary table",
        ),
    ] = None,
    sort: Annotated[
        str | None,
        typer.Option(
            "--sort",
            "-s",
            help="Summary table order: name, lines, code, comments, blanks, files",
        ),
    ] = None,
) -> None:
    """Merge every input and print the result.

    Each input is decoded by the first enabled format that accepts it, tried
    in the order cbor, json, yaml, toml.

    Exit codes:
        0: Converted successfully
        1: Unparseable input, unknown or disabled format, or encode failure
    """
    config = _get_config()
    dispatcher = _build_dispatcher()

    # Resolve the output format before reading any input
    format_name = output or config.output.format
    target = None
    if format_name is not None:
        try:
            target = dispatcher.from_name(format_name)
        except UnknownFormatError as e:
            _logger.error(str(e))
            typer.echo(f"Known formats: {', '.join(dispatcher.all_formats())}", err=True)
            raise typer.Exit(1)
        except ConfigurationError as e:
            typer.echo(e.message, err=True)
            raise typer.Exit(1)

    try:
        languages = collect_inputs(sources, dispatcher)
    except InputParseError as e:
        _logger.error(str(e))
        typer.echo(parse_failure_message(e.source, dispatcher.capabilities), err=True)
        raise typer.Exit(1)
    except OSError as e:
        _logger.error(f"Failed to read input: {e}")
        raise typer.Exit(1)

    _logger.debug(f"Merged {len(languages)} languages from {len(sources)} inputs")

    if target is None:
        sort_key = sort or config.output.sort
        if sort_key not in SORT_KEYS:
            _logger.error(f"Invalid sort key: {sort_key}. Valid: {', '.join(SORT_KEYS)}")
            raise typer.Exit(1)
        typer.echo(render_summary(languages, sort=sort_key))
        return

    try:
        typer.echo(dispatcher.print(target, languages))
    except CodecError as e:
        _logger.error(f"Failed to encode output: {e}")
        raise typer.Exit(1)


# =============================================================================
# formats command
# =============================================================================


@app.command()
def formats(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """List every known format and whether it is usable here."""
    capabilities = _build_capabilities()

    if json_output:
        typer.echo(
            json.dumps(
                {
                    "all": capabilities.all(),
                    "supported": capabilities.supported(),
                    "not_supported": capabilities.not_supported(),
                    "reasons": {
                        name: capabilities.disabled_reason(name)
                        for name in capabilities.not_supported()
                    },
                },
                indent=2,
            )
        )
        return

    for name in capabilities.all():
        if capabilities.is_enabled(name):
            typer.echo(f"  ✅ {name}")
        else:
            reason = (capabilities.disabled_reason(name) or "").replace("_", " ")
            typer.echo(f"  ❌ {name} [{reason}]")


# =============================================================================
# check command
# =============================================================================


@app.command()
def check(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """Validate codec library availability.

    Formats set to true in the configuration are required; the rest are
    optional. Formats set to false are not checked.

    Exit codes:
        0: All formats available
        1: A format enabled in the configuration is not installed
        2: Only optional formats missing (warnings)
    """
    from statcodec.utils.preflight import PreflightChecker

    switches = _get_config().formats.enabled
    result = PreflightChecker().check_all(
        get_registry(),
        required=[name for name, on in switches.items() if on],
        skip=[name for name, on in switches.items() if not on],
    )

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo("\n🔍 Preflight Check Results\n")

        for check_result in result.checks:
            status = "✅" if check_result.available else "❌"
            version_str = f" ({check_result.version})" if check_result.version else ""
            required_str = " [required]" if check_result.required else " [optional]"

            typer.echo(f"  {status} {check_result.name}{version_str}{required_str}")
            if check_result.available and check_result.path:
                typer.echo(f"     └─ {check_result.path}")
            elif not check_result.available:
                typer.echo(f"     └─ {check_result.message}")

        typer.echo()

    if result.errors:
        if not json_output:
            typer.echo("❌ Preflight check FAILED")
            for error in result.errors:
                typer.echo(f"   • {error}")
        raise typer.Exit(1)
    elif result.warnings:
        if not json_output:
            typer.echo("⚠️  Preflight check passed with WARNINGS")
            for warning in result.warnings:
                typer.echo(f"   • {warning}")
        raise typer.Exit(2)

    if not json_output:
        typer.echo("✅ All preflight checks passed")


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing config",
        ),
    ] = False,
) -> None:
    """Write a default statcodec.yaml in the current directory."""
    config_file = Path("statcodec.yaml")

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_file.write_text(create_default_config())
    _logger.info(f"Created config: {config_file}")
    typer.echo(f"✅ statcodec configuration initialized: {config_file}")


if __name__ == "__main__":
    app()
