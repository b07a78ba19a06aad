"""orgenda CLI - agenda view for org outline files."""

import json
import logging
import sys
from pathlib import Path

import click

from .agenda_view import AGENDA_URI, AgendaView, build_agenda_view
from .config import Config, load_config
from .errors import WorkspaceNotFound


def _resolve_config(workspace: str | None, keywords: str | None) -> Config:
    """Apply command-line overrides on top of orgenda.conf."""
    config = load_config()
    if workspace:
        config.workspace_dir = workspace
    if keywords:
        config.todo_keywords = [k.strip() for k in keywords.split(",") if k.strip()]
    return config


def _build_view(config: Config) -> AgendaView:
    try:
        return build_agenda_view(config)
    except WorkspaceNotFound as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


workspace_option = click.option(
    "--dir", "-d", "workspace", default=None, help="Workspace directory (defaults to config or cwd)"
)
keywords_option = click.option(
    "--keywords", "-k", default=None, help="Comma-separated actionable keywords, e.g. TODO,DONE"
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """orgenda - agenda view for org outline files."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@workspace_option
@keywords_option
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Write the agenda to a file instead of stdout")
def agenda(workspace: str | None, keywords: str | None, output: str | None):
    """Show the agenda across all outline files."""
    config = _resolve_config(workspace, keywords)
    view = _build_view(config)
    content = view.provide_content(AGENDA_URI)

    if output:
        Path(output).write_text(content, encoding="utf-8")
        click.echo(f"✓ Agenda written to {output}")
    else:
        click.echo(content, nl=False)


@main.command()
@workspace_option
@keywords_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def items(workspace: str | None, keywords: str | None, as_json: bool):
    """List actionable headings with their dates."""
    config = _resolve_config(workspace, keywords)
    view = _build_view(config)
    collected = view.collect_items()

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "source": i.source_id,
                        "line": i.line_number,
                        "text": i.text,
                        "plain": i.plain_date.isoformat() if i.plain_date else None,
                        "scheduled": i.scheduled_date.isoformat() if i.scheduled_date else None,
                        "deadline": i.deadline_date.isoformat() if i.deadline_date else None,
                    }
                    for i in collected
                ],
                indent=2,
            )
        )
        return

    if not collected:
        click.echo("No actionable headings found.")
        return

    for item in collected:
        dates = ", ".join(f"{role.value.lower()} {d.isoformat()}" for role, d in item.dates)
        suffix = f" ({dates})" if dates else ""
        click.echo(f"{item.location_label}  {item.text.strip()}{suffix}")


@main.command()
@workspace_option
@keywords_option
@click.option("--interval", "-i", type=float, default=None, help="Polling interval in seconds")
def watch(workspace: str | None, keywords: str | None, interval: float | None):
    """Re-render the agenda whenever an outline file changes."""
    config = _resolve_config(workspace, keywords)
    view = _build_view(config)
    interval = interval or config.watch_interval
    if interval <= 0:
        click.echo("Error: --interval must be positive", err=True)
        sys.exit(1)

    from .watch import run_watch

    def show(content: str) -> None:
        click.clear()
        click.echo(content, nl=False)

    click.echo("Press Ctrl+C to stop")
    run_watch(view, view.source, interval, show)


if __name__ == "__main__":
    main()
