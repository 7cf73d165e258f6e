"""
Setup and help commands for the Followed Rooms CLI.

Contains the custom Click group class for coloured help output and typo
suggestions, plus credential configuration commands.
"""

import os
from dataclasses import dataclass

import click
from core.config import (
    CSRF_TOKEN_ENV,
    SESSION_ID_ENV,
    USER_CONFIG_FILE,
    load_config,
    save_config,
)
from core.errors import ConfigurationError
from models.utils import find_similar_strings, mask_secret


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    commands: list[tuple[str, str]]


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"Error: No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg)
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get visible command names similar to cmd_name."""
        if not cmd_name:
            return []

        visible = [
            name for name in self.list_commands(ctx)
            if not self.get_command(ctx, name).hidden
        ]
        return find_similar_strings(cmd_name, visible, limit=max_suggestions)

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=500)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(max(len(cmd[0]) for cmd in commands), 12)

            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


COMMAND_SECTIONS = [
    CommandSection(
        name="SETUP",
        commands=[
            ("configure", "Save session credentials to the config file"),
            ("setup", "Show where credentials are loaded from"),
        ]
    ),
    CommandSection(
        name="BROWSING",
        commands=[
            ("list [-p N] [-s SIZE|all]", "Show one page of online rooms"),
            ("search <query>", "Find rooms whose name contains a query"),
            ("pages [-s SIZE] [-m N]", "Walk through every page in order"),
            ("room <name>", "Check whether a room is online"),
        ]
    ),
    CommandSection(
        name="SUMMARY",
        commands=[
            ("stats", "Online/offline counts and percentage"),
            ("dump", "Raw API snapshot as JSON"),
        ]
    ),
]


@click.command(name='help')
def help_command():
    """Display help and common commands."""
    click.echo()
    click.secho("Followed Rooms - Quick Reference", fg='cyan', bold=True)
    click.echo()

    for section in COMMAND_SECTIONS:
        click.secho(section.name, fg='yellow', bold=True)
        for cmd, desc in section.commands:
            click.echo("  ", nl=False)
            click.secho(cmd, fg='green', nl=False)
            click.echo(" " * (30 - len(cmd)) + "  " + desc)
        click.echo()

    click.secho("For detailed help on any command:", fg='cyan')
    click.echo(f"  python followed_rooms.py {click.style('<command> -h', fg='white', bold=True)}")
    click.echo()


@click.command(name='configure')
@click.option('--session-id', prompt='Session ID (sessionid cookie)', hide_input=True,
              help='Value of the sessionid cookie')
@click.option('--csrf-token', prompt='CSRF token (csrftoken cookie)', hide_input=True,
              help='Value of the csrftoken cookie')
@click.option('--page-size', type=click.IntRange(min=1), help='Default page size')
@click.option('--cache-ttl', type=click.IntRange(min=0), help='Cache time-to-live in milliseconds')
def configure_command(session_id: str, csrf_token: str, page_size: int | None, cache_ttl: int | None):
    """Save credentials and defaults to the local config file.

    Copy the sessionid and csrftoken cookie values from your browser while
    logged in. Existing additional cookies in the file are kept.
    """
    try:
        config = load_config()
    except ConfigurationError as e:
        click.secho(f"⚠ {e}; starting from an empty config", fg='yellow')
        config = {}

    config['session_id'] = session_id.strip()
    config['csrf_token'] = csrf_token.strip()
    if page_size is not None:
        config['default_page_size'] = page_size
    if cache_ttl is not None:
        config['cache_ttl_ms'] = cache_ttl

    if not config['session_id'] or not config['csrf_token']:
        click.secho("✗ Both session ID and CSRF token are required", fg='red', err=True)
        return

    save_config(config)
    click.secho(f"✓ Configuration saved to {USER_CONFIG_FILE}", fg='green')


@click.command(name='setup')
def setup_command():
    """Show current credential configuration.

    Configuration sources (priority order):
    1. Environment (CB_SESSION_ID, CB_CSRF_TOKEN)
    2. Local config file (~/.followed_rooms/config.json)
    """
    click.echo()
    click.secho("=== Followed Rooms Configuration ===", fg='cyan', bold=True)
    click.echo()

    click.echo(click.style("1. Environment", fg='cyan', bold=True))
    for var in (SESSION_ID_ENV, CSRF_TOKEN_ENV):
        value = os.getenv(var)
        status = click.style(mask_secret(value), fg='green') if value else click.style('not set', fg='yellow')
        click.echo(f"   {var}:  {status}")
    click.echo()

    click.echo(click.style("2. Local Configuration", fg='cyan', bold=True))
    try:
        config = load_config()
    except ConfigurationError as e:
        click.secho(f"   ✗ {e}", fg='red')
        config = {}

    if config:
        click.echo(f"   Path:        {USER_CONFIG_FILE}")
        click.echo(f"   Session ID:  {mask_secret(config.get('session_id')) or '(missing)'}")
        click.echo(f"   CSRF token:  {mask_secret(config.get('csrf_token')) or '(missing)'}")
        click.echo(f"   Page size:   {config.get('default_page_size', 25)}")
        click.echo(f"   Cache TTL:   {config.get('cache_ttl_ms', 30000)} ms")
        extra = config.get('additional_cookies') or {}
        if extra:
            click.echo(f"   Cookies:     {', '.join(sorted(extra))}")
    else:
        click.echo(f"   Status:      {click.style('✗ Not configured', fg='yellow')}")
        click.echo(f"   Path:        {USER_CONFIG_FILE} (does not exist)")
    click.echo()

    has_session = os.getenv(SESSION_ID_ENV) or config.get('session_id')
    has_csrf = os.getenv(CSRF_TOKEN_ENV) or config.get('csrf_token')
    if has_session and has_csrf:
        click.secho("✓ Credentials available", fg='green', bold=True)
    else:
        click.secho("⚠ No complete credentials configured", fg='yellow', bold=True)
        click.echo("Run this command to set them up:")
        click.echo(click.style("  python followed_rooms.py configure", fg='green', bold=True))
    click.echo()
