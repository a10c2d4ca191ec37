class GitLogPrettyError(Exception):
    """Base class for errors reported to the user."""


class RepositoryNotFoundError(GitLogPrettyError):
    def __init__(self, path):
        super().__init__(f"Failed to discover git repository from {path}")
        self.path = path


class ReferenceNotFoundError(GitLogPrettyError):
    def __init__(self, ref):
        super().__init__(f"Failed to find reference '{ref}'")
        self.ref = ref


class ThemeDetectionError(GitLogPrettyError):
    """The terminal background could not be determined."""
