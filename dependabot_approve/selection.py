"""
Interactive confirmation of which candidates to approve.

The operator answers with ``all`` or a comma separated list of the 1-based
positions printed next to each candidate. Unparseable answers are retried
a bounded number of times before the run is aborted.
"""

import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

import click

from dependabot_approve.exceptions import SelectionAbortedError

T = TypeVar("T")

MAX_ATTEMPTS = 5
PROMPT = (
    "Please enter which PRs you'd like to approve as a comma\n"
    "separated list or 'all' for all entries"
)
RETRY_MESSAGE = "Unable to parse input, please try again"

_INDEX_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Selection:
    """Either every candidate, or explicit 1-based positions in entry order."""

    select_all: bool = False
    indices: tuple[int, ...] = ()


def parse_selection(text: str) -> Selection | None:
    """
    Parse one line of operator input.

    Returns:
        The selection, or None when the line is not ``all`` and not a list of
        non-negative integers. Positions are not range checked here.
    """
    if text.strip() == "all":
        return Selection(select_all=True)

    indices: list[int] = []
    for token in text.split(","):
        token = token.strip()
        if not _INDEX_RE.fullmatch(token):
            return None
        index = int(token)
        if index not in indices:
            indices.append(index)
    return Selection(indices=tuple(indices))


def _read_stdin_line() -> str:
    return sys.stdin.readline()


def prompt_selection(
    read_line: Callable[[], str] | None = None,
    echo: Callable[[str], None] = click.echo,
    max_attempts: int = MAX_ATTEMPTS,
) -> Selection:
    """
    Ask the operator which candidates to approve.

    Args:
        read_line: Returns the next line of input (default: stdin)
        echo: Writes a line of output to the operator
        max_attempts: Total number of answers accepted before giving up

    Raises:
        SelectionAbortedError: After ``max_attempts`` unparseable answers
    """
    if read_line is None:
        read_line = _read_stdin_line

    echo(PROMPT)
    for attempt in range(1, max_attempts + 1):
        selection = parse_selection(read_line())
        if selection is not None:
            return selection
        if attempt < max_attempts:
            echo(RETRY_MESSAGE)
    raise SelectionAbortedError(max_attempts)


def resolve_selection(
    selection: Selection, candidates: Sequence[T]
) -> list[tuple[int, T | None]]:
    """
    Map a selection onto the presented candidates.

    Returns:
        ``(position, candidate)`` pairs in selection order. The candidate is
        None for a position with nothing behind it, including 0.
    """
    if selection.select_all:
        return [(position, candidate) for position, candidate in enumerate(candidates, start=1)]

    resolved: list[tuple[int, T | None]] = []
    for position in selection.indices:
        if 1 <= position <= len(candidates):
            resolved.append((position, candidates[position - 1]))
        else:
            resolved.append((position, None))
    return resolved
