#!/usr/bin/env python3
"""
Main entry point for the pretty git log viewer.
"""

import sys
import argparse
import logging

from git.exc import GitCommandError

from git_log_pretty import DEFAULT_BASE, DEFAULT_HEAD, DEFAULT_MAX_COMMITS, run_diff_stats, run_git_log
from utils.colors import strip_ansi
from utils.commits.git_utils import open_repository
from utils.errors import GitLogPrettyError
from utils.theme import DARK, LIGHT, detect_theme

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='git-log-pretty',
        description='A pretty git log viewer with tree views'
    )
    parser.add_argument('--repo', default='.', help='Path inside the Git repository (default: current directory)')
    parser.add_argument('--base', default=DEFAULT_BASE, help='Base branch that commits are compared against')
    parser.add_argument('--max-commits', '-n', type=int, default=DEFAULT_MAX_COMMITS, help='Maximum number of commits to show')
    parser.add_argument('--theme', choices=['auto', DARK, LIGHT], default='auto', help='Color theme (auto detects the terminal background)')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Print debug information to stderr')

    subparsers = parser.add_subparsers(dest='command')
    diff = subparsers.add_parser('diff', help='Show changed files between two branches as a tree (like git diff --stat but prettier)')
    diff.add_argument('diff_base', nargs='?', default=DEFAULT_BASE, metavar='base', help='Base branch to compare against')
    diff.add_argument('diff_head', nargs='?', default=DEFAULT_HEAD, metavar='head', help='Head branch to compare (defaults to HEAD)')
    return parser


def main(argv=None):
    """Parse CLI arguments and print the requested view."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    theme = detect_theme() if args.theme == 'auto' else args.theme
    log.debug("Using %s theme", theme)

    try:
        repo = open_repository(args.repo)
        if args.command == 'diff':
            output = run_diff_stats(repo, args.diff_base, args.diff_head, theme)
        else:
            output = run_git_log(repo, args.base, args.max_commits, theme)
    except (GitLogPrettyError, GitCommandError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(strip_ansi(output) if args.no_color else output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
