import time

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR


def format_relative_time(timestamp, now):
    """Describe how long before `now` the `timestamp` was, both in seconds."""
    delta = int(now - timestamp)

    if delta >= DAY:
        return f"{delta // DAY} days ago"
    if delta >= HOUR:
        return f"{delta // HOUR} hours ago"
    if delta >= MINUTE:
        return f"{delta // MINUTE} minutes ago"
    return "just now"


def format_commit_time(commit, now=None):
    """Relative committer time of a GitPython commit."""
    if now is None:
        now = time.time()
    return format_relative_time(commit.committed_date, now)
