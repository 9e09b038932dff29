"""
Command line entry point.

    dependabot-approve approve -u me -o owner -r repo -k ~/.gh-token
    dependabot-approve clear-junk -u me -o owner -r repo -a $TOKEN -t "LGTM"

This is the only place that turns errors into exit codes.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import click

from dependabot_approve.client import AsyncDependabotClient
from dependabot_approve.credentials import load_token
from dependabot_approve.exceptions import DependabotApproveError
from dependabot_approve.logging import configure_logging
from dependabot_approve.workflows import ApproveOptions, run_approve, run_clear_junk

T = TypeVar("T")

_repo_options = [
    click.option("-u", "--user", "username", required=True,
                 help="The username tied to the api key used to run this program."),
    click.option("-o", "--owner", required=True,
                 help="The owner of the repo to check for PRs."),
    click.option("-r", "--repo", required=True, help="The repo to check."),
    click.option("-a", "--api-key", default=None, help="Your api key from github."),
    click.option("-k", "--key-path", default=None,
                 help="Path to a file containing your api key from github."),
]


def repo_options(func: Callable[..., Any]) -> Callable[..., Any]:
    for option in reversed(_repo_options):
        func = option(func)
    return func


def _make_client(ctx: click.Context, token: str, username: str) -> AsyncDependabotClient:
    obj = ctx.obj
    return AsyncDependabotClient(
        token=token,
        user_agent=username,
        base_url=obj["base_url"],
        timeout=obj["timeout"],
        retry_config=obj.get("retry_config"),
        transport=obj.get("transport"),
    )


def _run(ctx: click.Context, make_main: Callable[[], Awaitable[T]]) -> T:
    """Run a workflow, mapping dependabot-approve errors to their exit codes."""
    try:
        return asyncio.run(make_main())
    except DependabotApproveError as e:
        click.echo(e.message, err=True)
        ctx.exit(e.exit_code)


@click.group()
@click.option("--base-url", envvar="GITHUB_BASE_URL", default=AsyncDependabotClient.DEFAULT_BASE_URL,
              show_default=True, help="GitHub API base URL.")
@click.option("--timeout", type=float, default=AsyncDependabotClient.DEFAULT_TIMEOUT,
              show_default=True, help="Per-request timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, envvar="DEPENDABOT_APPROVE_VERBOSE",
              help="Log every request attempt.")
@click.pass_context
def cli(ctx: click.Context, base_url: str, timeout: float, verbose: bool) -> None:
    """A utility for automating the approval of your dependabot pull requests."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("base_url", base_url)
    ctx.obj.setdefault("timeout", timeout)
    if verbose:
        configure_logging(level=logging.DEBUG)


def print_options(
    username: str,
    owner: str,
    repo: str,
    status_username: str | None,
    filters: tuple[str, ...],
    api_key: str | None,
    key_path: str | None,
    dry_run: bool,
    force: bool,
) -> None:
    click.echo("Running approvals")
    click.echo("----------")
    click.echo(f"Username: {username}")
    click.echo(f"Repo: {owner}/{repo}")
    if status_username:
        click.echo(f"Status posted by: {status_username}")
    if filters:
        click.echo(f"Acceptable statuses {','.join(filters)}")
    if key_path:
        click.echo(f"Using key path: {key_path}")
    if api_key is not None:
        click.echo("Using an api key")
    if dry_run:
        click.echo("Dry run")
    if force:
        click.echo("Forced!")


@cli.command()
@repo_options
@click.option("-s", "--status-username", default=None, help="The username of the status provider.")
@click.option("-f", "--filter", "filters", multiple=True,
              help="PR statuses that will be considered. May be repeated.")
@click.option("--force", is_flag=True, help="Don't confirm PR approvals, just approve them all.")
@click.option("--dry-run", is_flag=True,
              help="Print the actions that would have been taken, don't approve anything.")
@click.option("-q", "--quiet", is_flag=True, help="Don't print the args table or results.")
@click.pass_context
def approve(
    ctx: click.Context,
    username: str,
    owner: str,
    repo: str,
    api_key: str | None,
    key_path: str | None,
    status_username: str | None,
    filters: tuple[str, ...],
    force: bool,
    dry_run: bool,
    quiet: bool,
) -> None:
    """Approve open dependabot PRs."""
    if not quiet:
        print_options(username, owner, repo, status_username, filters,
                      api_key, key_path, dry_run, force)

    options = ApproveOptions(
        owner=owner,
        repo=repo,
        status_creator=status_username,
        status_filter=filters or None,
        force=force,
        dry_run=dry_run,
        quiet=quiet,
    )

    async def main() -> None:
        token = load_token(api_key, key_path)
        async with _make_client(ctx, token, username) as client:
            await run_approve(client, options)

    _run(ctx, main)


@cli.command("clear-junk")
@repo_options
@click.option("--dry-run", is_flag=True,
              help="Print the dismissals that would have been made, don't dismiss anything.")
@click.option("-l", "--login", default=None, help="The user login to use to detect junk reviews.")
@click.option("-t", "--text", default=None, help="The text content to use to detect junk reviews.")
@click.pass_context
def clear_junk(
    ctx: click.Context,
    username: str,
    owner: str,
    repo: str,
    api_key: str | None,
    key_path: str | None,
    dry_run: bool,
    login: str | None,
    text: str | None,
) -> None:
    """Dismiss junk reviews left on your own PRs."""

    async def main() -> None:
        token = load_token(api_key, key_path)
        async with _make_client(ctx, token, username) as client:
            await run_clear_junk(client, owner, repo, username, login, text, dry_run)

    _run(ctx, main)


def main() -> None:
    cli(prog_name="dependabot-approve")


if __name__ == "__main__":
    main()
