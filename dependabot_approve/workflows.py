"""
The two runs the tool performs: approving dependabot PRs and dismissing
junk reviews from the operator's own PRs.

Failures while discovering PRs, statuses or reviews propagate and end the
run before anything is submitted. Failures while submitting are reported
per item and the run carries on with the next one.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

import click

from dependabot_approve.client import AsyncDependabotClient
from dependabot_approve.exceptions import ApiStatusError, TransportError
from dependabot_approve.logging import get_logger
from dependabot_approve.selection import prompt_selection, resolve_selection
from dependabot_approve.types.pulls import PullRequest, Review
from dependabot_approve.types.statuses import Candidate

logger = get_logger("workflows")


@dataclass
class ApproveOptions:
    """What to approve and how."""

    owner: str
    repo: str
    status_creator: str | None = None
    status_filter: Sequence[str] | None = None
    force: bool = False
    dry_run: bool = False
    quiet: bool = False


@dataclass
class ApprovalSummary:
    candidates: int = 0
    approved: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)


@dataclass
class CleanupSummary:
    scanned: int = 0
    dismissed: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)


def _report_failure(message: str, error: ApiStatusError | TransportError) -> None:
    click.echo(message, err=True)
    if isinstance(error, ApiStatusError):
        click.echo(error.status, err=True)
    else:
        click.echo(str(error.last_error), err=True)


async def collect_candidates(
    client: AsyncDependabotClient,
    owner: str,
    repo: str,
    status_creator: str | None = None,
    status_filter: Iterable[str] | None = None,
) -> list[Candidate]:
    """
    Find dependabot PRs and pair each with its latest status.

    PRs without a qualifying status are dropped. With ``status_filter`` only
    candidates whose status is listed are kept.
    """
    candidates: list[Candidate] = []
    for pull_request in await client.pulls.list_from_bots(owner, repo):
        status = await client.statuses.latest_status(pull_request, status_creator)
        if status is None:
            logger.debug("no status for #%d, dropping", pull_request.number)
            continue
        candidates.append(Candidate(pull_request=pull_request, status=status))

    if status_filter is not None:
        accepted = set(status_filter)
        candidates = [c for c in candidates if c.status in accepted]
    return candidates


def present_candidates(candidates: Sequence[Candidate]) -> None:
    click.echo("Dependabot PRs found\n----------")
    for position, candidate in enumerate(candidates, start=1):
        click.echo(f"{position} {candidate.pull_request.title}: {candidate.status}")


async def submit_approval(
    client: AsyncDependabotClient,
    pull_request: PullRequest,
    dry_run: bool = False,
    quiet: bool = False,
) -> bool:
    """
    Approve one pull request.

    A dry run sends nothing. A rejected or unreachable submission is
    reported on stderr and does not raise.

    Returns:
        True if the PR was approved (or would have been, on a dry run)
    """
    if dry_run:
        if not quiet:
            click.echo(f"Dry run approval for {pull_request.title}")
        return True

    try:
        await client.reviews.approve(pull_request)
    except (ApiStatusError, TransportError) as e:
        logger.debug("approval of #%d failed: %s", pull_request.number, e)
        _report_failure(f"Failed to approve {pull_request.title}", e)
        return False

    if not quiet:
        click.echo(f"Successfully approved {pull_request.title}")
    return True


async def _approve_one(
    client: AsyncDependabotClient,
    candidate: Candidate,
    options: ApproveOptions,
    summary: ApprovalSummary,
) -> None:
    pull_request = candidate.pull_request
    if await submit_approval(client, pull_request, options.dry_run, options.quiet):
        summary.approved.append(pull_request.number)
    else:
        summary.failed.append(pull_request.number)


async def run_approve(
    client: AsyncDependabotClient,
    options: ApproveOptions,
    read_line: Callable[[], str] | None = None,
) -> ApprovalSummary:
    """
    Discover, present and approve dependabot PRs.

    Args:
        client: Authenticated client
        options: Repository, filters and submission flags
        read_line: Source of operator input (default: stdin); unused with ``force``

    Raises:
        ApiStatusError, TransportError, InvalidResponseError: If discovery failed
        SelectionAbortedError: If the operator never gave a usable answer
    """
    candidates = await collect_candidates(
        client,
        options.owner,
        options.repo,
        options.status_creator,
        options.status_filter,
    )
    summary = ApprovalSummary(candidates=len(candidates))
    if not candidates:
        click.echo("No dependabot PRs found")
        return summary

    present_candidates(candidates)

    if options.force:
        for candidate in candidates:
            await _approve_one(client, candidate, options, summary)
        return summary

    selection = prompt_selection(read_line)
    for position, candidate in resolve_selection(selection, candidates):
        if candidate is None:
            summary.skipped.append(position)
            if not options.quiet:
                click.echo(f"Invalid option selected, skipping: {position}")
            continue
        await _approve_one(client, candidate, options, summary)
    return summary


async def dismiss_review(
    client: AsyncDependabotClient,
    pull_request: PullRequest,
    review: Review,
    dry_run: bool = False,
) -> bool:
    """
    Dismiss one review, reporting rather than raising on failure.

    Returns:
        True if the review was dismissed (or would have been, on a dry run)
    """
    if dry_run:
        click.echo(f"Dry run dismissal of review {review.review_id} on {pull_request.title}")
        return True

    try:
        await client.reviews.dismiss(pull_request, review)
    except (ApiStatusError, TransportError) as e:
        logger.debug("dismissal of review %d failed: %s", review.review_id, e)
        _report_failure(
            f"Failed to dismiss review {review.review_id} on {pull_request.title}", e
        )
        return False

    click.echo(f"Dismissed review {review.review_id} on {pull_request.title}")
    return True


async def run_clear_junk(
    client: AsyncDependabotClient,
    owner: str,
    repo: str,
    username: str,
    login: str | None = None,
    text: str | None = None,
    dry_run: bool = False,
) -> CleanupSummary:
    """
    Dismiss junk reviews on every open PR ``username`` authored.

    Args:
        owner: Repository owner login
        repo: Repository name
        username: The operator's login; only their PRs are scanned
        login: Only dismiss reviews written by this login
        text: Only dismiss reviews whose body contains this text
        dry_run: Report the dismissals without sending them

    Raises:
        ApiStatusError, TransportError, InvalidResponseError: If listing PRs or reviews failed
    """
    summary = CleanupSummary()
    for pull_request in await client.pulls.list_own(owner, repo, username):
        summary.scanned += 1
        for review in await client.reviews.find_junk(pull_request, login, text):
            if await dismiss_review(client, pull_request, review, dry_run):
                summary.dismissed.append(review.review_id)
            else:
                summary.failed.append(review.review_id)

    if not summary.dismissed and not summary.failed:
        click.echo("No junk reviews found")
    return summary
