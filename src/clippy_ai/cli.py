"""CLI entry point for clippy-ai."""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

import click

from .config import Config, load_config
from .exceptions import ConfigError, NothingToCommit, SyncError, WebError
from .fetcher import fetch_title
from .llm import get_llm_provider
from .logging_setup import setup_logging
from .models import InitialFile, SummaryRequest
from .settings import load_settings, remember_workspace
from .summarizer import summarize_request
from .sync import backup as run_backup
from .sync import refresh as run_refresh

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """State shared by all subcommands of one invocation."""

    config: Config
    initial_file: InitialFile


def _resolve_workspace(app: AppContext, explicit: Optional[str]) -> str:
    """Pick the workspace: argument, then startup file, then last opened file."""
    path = explicit or app.initial_file.take()
    if path:
        # Stored paths must not depend on the cwd of a later run
        path = os.path.abspath(path)
        try:
            remember_workspace(path, app.config.settings_path)
        except OSError as e:
            logger.warning("Could not update settings: %s", e)
        return path

    last = load_settings(app.config.settings_path).last_opened_file
    if last:
        return last
    raise click.UsageError(
        "No workspace file given and none remembered. Pass WORKSPACE or --workspace."
    )


def _require_api_key(config: Config) -> None:
    try:
        config.require_api_key()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)


@click.group()
@click.option(
    "--workspace", "-w",
    type=click.Path(dir_okay=False),
    default=None,
    help="Workspace (bookmarks) file to open; remembered for later runs",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: ~/.config/clippy.ai/settings.json or CLIPPY_SETTINGS_PATH)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.pass_context
def main(ctx, workspace, settings_path, verbose):
    """Back up bookmarks with git and summarize bookmarked pages.

    Example: clippy -w ~/bookmarks/bookmarks.json backup
    """
    setup_logging(verbose)
    try:
        config = load_config(settings_path=settings_path, verbose=verbose)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    ctx.obj = AppContext(config=config, initial_file=InitialFile(workspace))


@main.command()
@click.argument("workspace", required=False, type=click.Path(dir_okay=False))
@click.pass_obj
def backup(app: AppContext, workspace):
    """Commit the workspace file and push it."""
    path = _resolve_workspace(app, workspace)
    if app.config.verbose:
        click.echo(f"Workspace: {path}")

    try:
        message = run_backup(path)
    except NothingToCommit as e:
        click.echo(str(e))
        return
    except SyncError as e:
        click.echo(f"Backup failed: {e}", err=True)
        sys.exit(1)

    click.echo(message)


@main.command()
@click.argument("workspace", required=False, type=click.Path(dir_okay=False))
@click.pass_obj
def refresh(app: AppContext, workspace):
    """Fast-forward pull the workspace repository."""
    path = _resolve_workspace(app, workspace)
    if app.config.verbose:
        click.echo(f"Workspace: {path}")

    try:
        output = run_refresh(path)
    except SyncError as e:
        click.echo(f"Refresh failed: {e}", err=True)
        sys.exit(1)

    click.echo(output or "Refreshed.")


@main.command()
@click.argument("url")
@click.pass_obj
def title(app: AppContext, url):
    """Print the title of the page at URL."""
    try:
        click.echo(fetch_title(url, timeout=app.config.title_timeout))
    except WebError as e:
        click.echo(f"Could not fetch title: {e}", err=True)
        sys.exit(1)


@main.command()
@click.pass_obj
def models(app: AppContext):
    """List Gemini models that can generate content."""
    _require_api_key(app.config)
    try:
        with get_llm_provider(app.config) as llm:
            names = llm.list_models()
    except WebError as e:
        click.echo(f"Could not list models: {e}", err=True)
        sys.exit(1)

    for name in names:
        click.echo(name)


@main.command()
@click.argument("url")
@click.option(
    "--model",
    type=str,
    default=None,
    help="Gemini model to use (default: GEMINI_MODEL or models/gemini-2.0-flash)",
)
@click.option(
    "--prompt",
    "prompt_template",
    type=str,
    default=None,
    help="Prompt template; {content} is replaced with the page text",
)
@click.pass_obj
def summarize(app: AppContext, url, model, prompt_template):
    """Summarize the page at URL with Gemini."""
    _require_api_key(app.config)
    with get_llm_provider(app.config, model=model) as llm:
        request = SummaryRequest(
            url=url,
            api_key=app.config.gemini_api_key,
            model=llm.model,
            prompt_template=prompt_template or app.config.prompt_template,
        )
        if app.config.verbose:
            click.echo(f"Model: {llm.model}")

        try:
            summary = summarize_request(
                request, llm=llm, timeout=app.config.summary_timeout
            )
        except WebError as e:
            click.echo(f"Summarization failed: {e}", err=True)
            sys.exit(1)

    click.echo(summary)
