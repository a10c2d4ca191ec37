#!/usr/bin/env python3
"""
Pretty git log viewer

Shows the commits a branch has on top of its base branch, one compact line
per commit with a colored conventional-commit badge, followed by a tree of
the files each commit touched. The diff mode shows the same file tree for
everything that differs between two revisions.
"""

import logging
import time

from utils.colors import Colors, paint
from utils.commits.formatter import CONVENTIONAL_COMMIT_RE, format_commit
from utils.commits.git_utils import (
    get_ahead_commits, get_changed_files, get_diff_files, resolve_branch, resolve_commit
)
from utils.file_tree import format_file_tree

log = logging.getLogger(__name__)

DEFAULT_BASE = 'main'
DEFAULT_HEAD = 'HEAD'
DEFAULT_MAX_COMMITS = 15


def caught_up_message(base):
    return paint(f"All caught up with {base}", Colors.GREEN)


def ahead_header(total, base, max_commits):
    """Header line with the number of commits ahead and how many are hidden."""
    header = f"{paint(total, Colors.CYAN)} commits ahead of {base}"
    hidden = max(total - max_commits, 0)
    if hidden:
        header += paint(f" (showing first {max_commits}, {hidden} more hidden)", Colors.DARK_GRAY)
    return header + "\n"


def run_git_log(repo, base=DEFAULT_BASE, max_commits=DEFAULT_MAX_COMMITS, theme='dark', now=None):
    """Build the report of commits on HEAD that are not on `base`."""
    base_commit = resolve_branch(repo, base)
    head_commit = resolve_commit(repo, DEFAULT_HEAD)

    if base_commit.hexsha == head_commit.hexsha:
        return caught_up_message(base)

    ahead = get_ahead_commits(repo, base_commit, head_commit)
    if not ahead:
        return caught_up_message(base)

    log.debug("%d commits ahead of %s", len(ahead), base)
    if now is None:
        now = time.time()

    blocks = [ahead_header(len(ahead), base, max_commits)]
    for commit in ahead[:max_commits]:
        changed_files = get_changed_files(commit)
        blocks.append(format_commit(commit, changed_files, theme, CONVENTIONAL_COMMIT_RE, now))
        blocks.append("")
    return "\n".join(blocks)


def run_diff_stats(repo, base=DEFAULT_BASE, head=DEFAULT_HEAD, theme='dark'):
    """Build the report of files that differ between `base` and `head`."""
    changed_files = get_diff_files(repo, base, head)
    if not changed_files:
        return paint("No changes found", Colors.GREEN)

    header = (
        f"{paint(len(changed_files), Colors.CYAN)} files changed in "
        f"{paint(base, Colors.YELLOW)}...{paint(head, Colors.YELLOW)}\n"
    )
    return "\n".join([header, format_file_tree(changed_files, theme), ""])
