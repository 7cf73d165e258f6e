"""Room listing commands.

Includes paginated listing, search, page iteration, single-room lookup,
statistics and a raw JSON dump of the current snapshot.
"""

import json
import sys

import click

from core.errors import FollowedRoomsError
from models.room import UNBOUNDED, PageView, find_by_name
from models.utils import find_similar_strings, get_client


class PageSizeType(click.ParamType):
    """Click parameter accepting a positive integer or 'all'."""

    name = 'size'

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            size = value
        elif str(value).lower() == UNBOUNDED:
            return UNBOUNDED
        else:
            try:
                size = int(value)
            except ValueError:
                self.fail(f"{value!r} is not a number or '{UNBOUNDED}'", param, ctx)
        if size < 1:
            self.fail(f"page size must be at least 1, got {size}", param, ctx)
        return size


PAGE_SIZE = PageSizeType()


def fail(error: FollowedRoomsError):
    """Report a client error on stderr and exit with status 1."""
    click.secho(f"✗ {error}", fg='red', err=True)
    sys.exit(1)


def echo_json(data):
    click.echo(json.dumps(data, indent=2))


def echo_page(view: PageView):
    """Print a page of rooms with a pagination footer."""
    if view.query is not None:
        click.echo(f"Search: {click.style(repr(view.query), fg='cyan')}  "
                   f"({view.total_items} match{'es' if view.total_items != 1 else ''})")
    click.echo(f"Online: {click.style(str(view.online), fg='green')} of {view.total} followed")
    click.echo()

    if not view.items:
        click.secho("No rooms found", fg='yellow')
        click.echo()
        return

    width = max(len(entry.name) for entry in view.items)
    for entry in view.items:
        click.echo(f"  {click.style(entry.name.ljust(width), fg='green')}  {entry.thumbnail_url}")
    click.echo()

    footer = f"Page {view.page} of {view.total_pages}"
    if view.start_index is not None:
        footer += f"  (showing {view.start_index}-{view.end_index} of {view.total_items})"
    if view.has_next:
        footer += click.style("  more →", dim=True)
    click.echo(footer)


@click.command(name='list')
@click.option('--page', '-p', default=1, type=int, help='Page number (1-indexed)')
@click.option('--page-size', '-s', type=PAGE_SIZE, help="Rooms per page, or 'all'")
@click.option('--json', 'as_json', is_flag=True, help='Print the page as JSON')
def list_command(page: int, page_size, as_json: bool):
    """List online followed rooms, one page at a time.

    \b
    Examples:
      python followed_rooms.py list
      python followed_rooms.py list -p 2 -s 10
      python followed_rooms.py list -s all --json
    """
    client = get_client()
    if not client:
        return

    try:
        view = client.get_page(page, page_size)
    except FollowedRoomsError as e:
        fail(e)

    if as_json:
        echo_json(view.to_dict())
    else:
        echo_page(view)


@click.command(name='search')
@click.argument('query')
@click.option('--page', '-p', default=1, type=int, help='Page number (1-indexed)')
@click.option('--page-size', '-s', type=PAGE_SIZE, help="Rooms per page, or 'all'")
@click.option('--json', 'as_json', is_flag=True, help='Print the results as JSON')
def search_command(query: str, page: int, page_size, as_json: bool):
    """Search online rooms whose name contains QUERY (case-insensitive).

    \b
    Examples:
      python followed_rooms.py search bella
      python followed_rooms.py search a -s 5 -p 2
    """
    client = get_client()
    if not client:
        return

    try:
        view = client.search(query, page, page_size)
    except FollowedRoomsError as e:
        fail(e)

    if as_json:
        echo_json(view.to_dict())
    else:
        echo_page(view)


@click.command(name='pages')
@click.option('--page-size', '-s', type=PAGE_SIZE, help="Rooms per page, or 'all'")
@click.option('--max-pages', '-m', type=click.IntRange(min=1), help='Stop after this many pages')
def pages_command(page_size, max_pages: int | None):
    """Walk through every page of online rooms in order."""
    client = get_client()
    if not client:
        return

    processed = 0
    try:
        for view in client.iterate_pages(page_size):
            click.secho(f"=== Page {view.page}/{view.total_pages} ===", fg='cyan', bold=True)
            for entry in view.items:
                click.echo(f"  {entry.name}")
            processed += len(view.items)
            if max_pages and view.page >= max_pages:
                click.secho(f"(Stopping after {max_pages} page{'s' if max_pages > 1 else ''})", dim=True)
                break
    except FollowedRoomsError as e:
        fail(e)

    click.echo()
    click.echo(f"Total processed: {processed} rooms")


@click.command(name='room')
@click.argument('name')
def room_command(name: str):
    """Look up a single online room by exact name (case-insensitive)."""
    client = get_client()
    if not client:
        return

    try:
        snapshot = client.refresh()
        entry = find_by_name(snapshot.entries, name)
    except FollowedRoomsError as e:
        fail(e)

    if entry:
        click.secho(f"✓ {entry.name} is online", fg='green')
        click.echo(f"  Thumbnail: {entry.thumbnail_url or '(none)'}")
        return

    click.secho(f"Room '{name}' is not online", fg='yellow')
    names = [e.name for e in snapshot.entries]
    suggestions = find_similar_strings(name, names, limit=3)
    if suggestions:
        click.echo()
        click.secho("Did you mean one of these?", fg='yellow')
        for suggestion in suggestions:
            click.secho(f"  • {suggestion}", fg='green')


@click.command(name='stats')
@click.option('--json', 'as_json', is_flag=True, help='Print statistics as JSON')
def stats_command(as_json: bool):
    """Show how many followed rooms are online."""
    client = get_client()
    if not client:
        return

    try:
        stats = client.get_stats()
    except FollowedRoomsError as e:
        fail(e)

    if as_json:
        echo_json(stats.to_dict())
        return

    click.echo()
    click.secho("=== Followed Rooms ===", fg='cyan', bold=True)
    click.echo()
    click.echo(f"Online:    {click.style(str(stats.online), fg='green')}")
    click.echo(f"Offline:   {click.style(str(stats.offline), fg='red')}")
    click.echo(f"Total:     {stats.total}")
    click.echo(f"Online %:  {stats.online_percentage}%")
    click.echo(f"Listed:    {stats.entry_count}")
    click.echo()


@click.command(name='dump')
def dump_command():
    """Print the raw snapshot (online, total, online_rooms) as JSON."""
    client = get_client()
    if not client:
        return

    try:
        snapshot = client.refresh(use_cache=False)
    except FollowedRoomsError as e:
        fail(e)

    echo_json(snapshot.to_dict())
