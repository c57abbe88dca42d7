"""Taskbot CLI - Personal Task Tracker."""

import json
import logging
import sys
from pathlib import Path

import click

from . import ui
from .adapters.file_store import FileTaskStore
from .config import load_config
from .core.tasks import format_task, to_record
from .dispatcher import Session, get_response, greet, open_session, respond, save_session
from .ports.task_store import StorageError


def _open_session(ctx: click.Context) -> Session:
    config = ctx.obj["config"]
    store = FileTaskStore(ctx.obj["data_file"])
    return open_session(store, bot_name=config.bot_name)


def _save(session: Session) -> None:
    try:
        save_session(session)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _warn_if_not_loaded(session: Session) -> None:
    if session.loading_error:
        click.echo(f"Warning: {ui.show_loading_error()} ({session.loading_error})", err=True)


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Task file to use instead of the configured one",
)
@click.pass_context
def main(ctx, debug: bool, data_file: Path | None):
    """Taskbot - Personal Task Tracker."""
    config = load_config()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level,
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["data_file"] = data_file or config.data_path

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Chat interactively (type 'bye' to save and quit)."""
    session = _open_session(ctx)
    click.echo(greet(session))

    try:
        while not session.finished:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
            if not line.strip():
                continue
            click.echo(get_response(session, line))
    except click.Abort:
        # Ctrl-C / EOF: keep what we have
        click.echo()
        _save(session)
        click.echo(ui.goodbye())


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def run(ctx, words: tuple[str, ...]):
    """Run a single command and save, e.g. `taskbot run todo read book`."""
    session = _open_session(ctx)
    _warn_if_not_loaded(session)

    click.echo(respond(session, " ".join(words)))
    # bye already saved
    if not session.finished:
        _save(session)


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_tasks(ctx, as_json: bool):
    """List saved tasks."""
    session = _open_session(ctx)
    _warn_if_not_loaded(session)
    tasks = session.task_list.tasks

    if as_json:
        click.echo(json.dumps([to_record(t) for t in tasks], indent=2))
        return

    if not tasks:
        click.echo("No tasks.")
        return

    for i, task in enumerate(tasks, start=1):
        click.echo(f"{i:>3}. {format_task(task)}")


@main.command()
@click.argument("keyword")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def find(ctx, keyword: str, as_json: bool):
    """Find saved tasks whose description contains KEYWORD."""
    session = _open_session(ctx)
    _warn_if_not_loaded(session)
    matches = session.task_list.find(keyword)

    if as_json:
        click.echo(json.dumps([to_record(t) for t in matches], indent=2))
    else:
        click.echo(ui.show_find_result(matches))


if __name__ == "__main__":
    main()
