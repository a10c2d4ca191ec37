import re

from utils.colors import Colors, bg, color_for_label, paint
from utils.file_tree import format_file_tree
from utils.time_utils import format_commit_time

# type(scope): description
CONVENTIONAL_COMMIT_RE = re.compile(r'^([A-Za-z]+)(?:\(([^)]+)\))?:(.*)$')

NO_MESSAGE = "<no message>"


def commit_summary(commit):
    """First line of the commit message, trimmed."""
    message = commit.message or ""
    if not message.strip():
        return NO_MESSAGE
    return message.splitlines()[0].strip()


def format_commit_summary(summary, pattern=CONVENTIONAL_COMMIT_RE, is_dark_background=True):
    """
    Highlight the type of a conventional commit summary.

    The type gets a bold badge whose background is derived from the type
    name, the scope (if any) follows in dark gray, then the description.
    Summaries that do not follow the convention come back unchanged.
    """
    match = pattern.match(summary)
    if not match:
        return summary

    commit_type, scope, description = match.groups()
    badge_color = color_for_label(commit_type, is_dark_background)
    badge = f"{bg(badge_color)}{Colors.BOLD}{commit_type}{Colors.RESET}"

    if scope:
        return f"{badge} {paint(scope, Colors.DARK_GRAY)}{description}"
    return f"{badge}{description}"


def format_commit(commit, changed_files, theme='dark', pattern=CONVENTIONAL_COMMIT_RE, now=None):
    """Render one commit: the summary line followed by its file tree."""
    short_id = commit.hexsha[:7]
    summary = format_commit_summary(commit_summary(commit), pattern, theme != 'light')
    when = format_commit_time(commit, now)

    lines = [f"  {paint(short_id, Colors.YELLOW)} {summary} • {paint(when, Colors.DARK_GRAY)}"]
    file_tree = format_file_tree(changed_files, theme)
    if file_tree:
        lines.append(file_tree)
    return "\n".join(lines)
