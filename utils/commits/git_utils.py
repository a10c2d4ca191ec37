import logging

from git import Repo
from git.exc import BadName, BadObject, InvalidGitRepositoryError, NoSuchPathError

from utils.errors import ReferenceNotFoundError, RepositoryNotFoundError

log = logging.getLogger(__name__)


def open_repository(path='.'):
    """Open the repository containing `path`, searching parent directories."""
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryNotFoundError(path) from e
    log.debug("Using repository at %s", repo.working_tree_dir or repo.git_dir)
    return repo


def resolve_commit(repo, ref):
    """Resolve a branch name or revision to a commit."""
    try:
        return repo.commit(ref)
    except (BadName, BadObject, ValueError) as e:
        raise ReferenceNotFoundError(ref) from e


def resolve_branch(repo, branch):
    """Resolve a local branch (refs/heads/<branch>) to its tip commit."""
    try:
        head = repo.heads[branch]
    except IndexError as e:
        raise ReferenceNotFoundError(branch) from e
    return head.commit


def collect_commits(repo, start):
    """Return the hexshas of every commit reachable from `start`."""
    commits = {commit.hexsha for commit in repo.iter_commits(start)}
    log.debug("Collected %d commits reachable from %s", len(commits), start)
    return commits


def get_ahead_commits(repo, base_commit, head_commit):
    """
    Commits reachable from head but not from base, newest first.

    Returns a list of GitPython commit objects.
    """
    base_commits = collect_commits(repo, base_commit.hexsha)
    head_commits = collect_commits(repo, head_commit.hexsha)
    ahead = [repo.commit(sha) for sha in head_commits - base_commits]
    ahead.sort(key=lambda commit: commit.committed_date, reverse=True)
    return ahead


def _diff_paths(diff_index):
    return [diff.b_path or diff.a_path for diff in diff_index]


def get_changed_files(commit):
    """Paths changed by a commit relative to its first parent.

    A root commit is compared against the empty tree, so every file in it
    counts as changed.
    """
    if not commit.parents:
        return [item.path for item in commit.tree.traverse() if item.type == 'blob']
    return _diff_paths(commit.parents[0].diff(commit))


def get_diff_files(repo, base, head):
    """Paths that differ between the trees of two revisions."""
    base_commit = resolve_commit(repo, base)
    head_commit = resolve_commit(repo, head)
    files = _diff_paths(base_commit.diff(head_commit))
    log.debug("%d files differ between %s and %s", len(files), base, head)
    return files
