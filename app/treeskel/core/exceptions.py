"""Exception hierarchy for treeskel.

Agents raise OSError from the underlying ``os`` calls or one of the
domain errors below; the walker wraps either kind in WalkError.
"""


class TreeskelError(Exception):
    """Base class for treeskel domain errors."""


class NotZeroSizeError(TreeskelError):
    """Raised by undo when a file it would delete has content.

    Attributes:
        path: Relative path of the offending file.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"{path}: not zero size")
        self.path = path


class WalkError(TreeskelError):
    """Raised when processing of a root is aborted.

    Attributes:
        root: Root path text exactly as supplied by the user.
        cause: The error that stopped the walk.
    """

    def __init__(self, root: str, cause: BaseException) -> None:
        super().__init__(f"{root}: {cause}")
        self.root = root
        self.cause = cause
