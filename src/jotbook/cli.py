"""jotbook CLI - Personal journal."""

import json
import logging
import sys

import click

from .adapters.flat_file import RecordFormatError, StorageError
from .config import load_config
from .core.entries import Entry, ValidationError
from .core.query import ALL_TAGS
from .core.store import OutOfRange
from .workflows import Journal, open_journal

USER_ERRORS = (ValidationError, OutOfRange, StorageError, RecordFormatError)


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _entry_dict(position: int | None, entry: Entry) -> dict:
    data = {
        "title": entry.title,
        "content": entry.content,
        "tags": sorted(entry.tags),
    }
    if position is not None:
        data = {"position": position, **data}
    return data


def _show_entries(rows: list[tuple[int | None, Entry]], as_json: bool, empty_msg: str) -> None:
    """Shared entry list display logic."""
    if as_json:
        click.echo(json.dumps([_entry_dict(p, e) for p, e in rows], indent=2))
        return

    if not rows:
        click.echo(empty_msg)
        return

    for position, entry in rows:
        tags = f"  [{entry.tags_line}]" if entry.tags else ""
        prefix = f"{position:3}. " if position is not None else "  - "
        click.echo(f"{prefix}{entry.title}{tags}")


def _positions(journal: Journal, entries: list[Entry]) -> list[tuple[int | None, Entry]]:
    """Pair filtered entries with their current positions."""
    # Match by identity so equal entries keep their own positions.
    positions = {id(e): i for i, e in enumerate(journal.list_entries())}
    return [(positions.get(id(e)), e) for e in entries]


@click.group()
@click.version_option(package_name="jotbook")
@click.option("--file", "-f", "journal_file", default=None, type=click.Path(dir_okay=False),
              help="Journal file to use instead of the configured one")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, journal_file: str | None, debug: bool):
    """jotbook - Personal journal CLI."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if journal_file:
        config.journal_file = journal_file
    ctx.obj = config


def _journal(ctx) -> Journal:
    try:
        return open_journal(ctx.obj)
    except USER_ERRORS as e:
        _fail(e)


@main.command()
@click.argument("title")
@click.argument("content")
@click.option("--tags", "-t", default="", help="Comma-separated tags")
@click.pass_context
def add(ctx, title: str, content: str, tags: str):
    """Add a new entry."""
    journal = _journal(ctx)
    try:
        position = journal.create_entry(title, content, tags)
    except USER_ERRORS as e:
        _fail(e)
    click.echo(f"✓ Added entry {position}: {title.strip()}")


@main.command("list")
@click.option("--tag", default=ALL_TAGS, help="Only show entries with this exact tag")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_cmd(ctx, tag: str, as_json: bool):
    """List entries, optionally filtered by tag."""
    journal = _journal(ctx)
    entries = journal.filter_by_tag(tag)
    empty_msg = "No entries yet." if tag == ALL_TAGS else f"No entries tagged {tag!r}."
    _show_entries(_positions(journal, entries), as_json, empty_msg)


@main.command()
@click.argument("position", type=int)
@click.pass_context
def show(ctx, position: int):
    """Show a single entry."""
    journal = _journal(ctx)
    try:
        entry = journal.get_entry(position)
    except OutOfRange as e:
        _fail(e)

    click.echo(f"Title: {entry.title}")
    click.echo(f"Content: {entry.content}")
    click.echo(f"Tags: {entry.tags_line}")


@main.command()
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def search(ctx, query: str, as_json: bool):
    """Search titles and tags (case-insensitive)."""
    journal = _journal(ctx)
    entries = journal.search(query) if query.strip() else []
    _show_entries(
        _positions(journal, entries), as_json,
        "No entries found matching the search query.",
    )


@main.command()
@click.pass_context
def tags(ctx):
    """List the tag filter choices."""
    journal = _journal(ctx)
    for choice in journal.tag_choices():
        click.echo(choice)


@main.command()
@click.argument("position", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete(ctx, position: int, yes: bool):
    """Delete the entry at POSITION."""
    journal = _journal(ctx)
    try:
        entry = journal.get_entry(position)
        if not yes and not click.confirm(f"Delete {entry.title!r}?"):
            return
        journal.delete(position)
    except USER_ERRORS as e:
        _fail(e)
    click.echo("✓ Entry deleted")


@main.command()
@click.argument("position", type=int)
@click.pass_context
def edit(ctx, position: int):
    """Edit the entry at POSITION; it is re-added at the end."""
    journal = _journal(ctx)
    try:
        draft = journal.begin_edit(position)
    except OutOfRange as e:
        _fail(e)

    title = click.prompt("Title", default=draft.title)
    content = click.prompt("Content", default=draft.content)
    tags_raw = click.prompt("Tags", default=draft.tags_raw, show_default=True)

    try:
        new_position = journal.create_entry(title, content, tags_raw)
    except USER_ERRORS as e:
        _fail(e)
    click.echo(f"✓ Entry saved at position {new_position}")


@main.command()
@click.argument("position", type=int)
@click.option("--title", default=None, help="New title")
@click.option("--content", default=None, help="New content")
@click.option("--tags", "-t", default=None, help="New comma-separated tags")
@click.pass_context
def update(ctx, position: int, title: str | None, content: str | None, tags: str | None):
    """Change the entry at POSITION in place."""
    journal = _journal(ctx)
    try:
        current = journal.get_entry(position)
        journal.update_entry(
            position,
            title if title is not None else current.title,
            content if content is not None else current.content,
            tags if tags is not None else current.tags_line,
        )
    except USER_ERRORS as e:
        _fail(e)
    click.echo(f"✓ Entry {position} updated")


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def export(ctx, path: str):
    """Export all entries to a readable text file."""
    journal = _journal(ctx)
    target = ctx.obj.export_path(path)
    try:
        count = journal.export(target)
    except StorageError as e:
        _fail(e)
    click.echo(f"✓ Exported {count} entries to {target}")


if __name__ == "__main__":
    main()
