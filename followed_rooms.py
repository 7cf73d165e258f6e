#!/usr/bin/env python3
"""
Followed Rooms CLI
Browse, search and summarise your followed rooms that are currently online.
"""

import click

from commands.setup import ColouredGroup, help_command, setup_command, configure_command
from commands.rooms import (
    list_command,
    search_command,
    pages_command,
    room_command,
    stats_command,
    dump_command
)


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 999
    }
)
@click.version_option(version='0.1.0', prog_name='Followed Rooms')
def cli():
    """Followed Rooms CLI - List, search and page through followed rooms that are online.

Authentication: Environment (CB_SESSION_ID, CB_CSRF_TOKEN) → Local config (~/.followed_rooms/config.json)
Run 'configure' for first-time setup or 'setup' to check configuration.

Use 'help' for a quick reference of all commands."""
    pass


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(setup_command)
cli.add_command(configure_command)

# Register room commands
cli.add_command(list_command)
cli.add_command(search_command)
cli.add_command(pages_command)
cli.add_command(room_command)
cli.add_command(stats_command)
cli.add_command(dump_command)


if __name__ == '__main__':
    cli()
