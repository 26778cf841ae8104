"""CLI commands for user configuration management."""

import typer

from commitrefs import config as refs_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage commitrefs configuration in ~/.commitrefs/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    config_file = refs_config.get_config_file_path()
    try:
        config = refs_config.load_config()
    except refs_config.ConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if config_file.exists():
        typer.echo(f"Current commitrefs configuration ({config_file}):")
    else:
        typer.echo("No configuration file found. Using defaults.")
    typer.echo()
    typer.echo(f"  Extractors: {', '.join(kind.value for kind in config.extractors)}")
    typer.echo(f"  Issue pattern: {config.issue_pattern}")
    typer.echo(f"  Story URL template: {config.story_url_template}")
    if config.clipboard_command:
        typer.echo(f"  Clipboard command: {' '.join(config.clipboard_command)}")
    else:
        typer.echo("  Clipboard command: auto-detect")
    typer.echo(f"  Clipboard timeout: {config.clipboard_timeout}s")
    typer.echo(f"  Quiet: {config.quiet}")


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing configuration file",
    ),
) -> None:
    """Write a configuration file with the default settings."""
    config_file = refs_config.get_config_file_path()
    if config_file.exists() and not force:
        typer.echo(f"Configuration already exists at {config_file}.", err=True)
        typer.echo("Use --force to overwrite it.", err=True)
        raise typer.Exit(1)

    try:
        path = refs_config.save_config(refs_config.RefsConfig())
    except refs_config.ConfigError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Configuration saved to {path}")
