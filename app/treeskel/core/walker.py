"""Tree walker.

Traverses source trees depth-first, computes each entry's path relative
to its root and hands the entry to an agent. The walker knows nothing
about run modes; all filesystem mutation happens in the agent.
"""

import logging
import os
import stat
from collections.abc import Callable, Iterable, Iterator

from treeskel.agents.base import Agent
from treeskel.core.exceptions import TreeskelError, WalkError
from treeskel.models.entry import EntryType, VisitedEntry

logger = logging.getLogger(__name__)

Echo = Callable[[VisitedEntry], None]


def relative_path(root: str, path: str) -> str:
    """Compute the path of an entry relative to its root.

    The root text is stripped as a prefix, then exactly one leading
    separator. The root's own visit yields an empty string.

    Args:
        root: Root path text as supplied by the user.
        path: Entry path as produced by the walk.

    Returns:
        Relative path, or "" for the root itself.
    """
    if path.startswith(root):
        path = path[len(root) :]
    if not path:
        return ""
    if path[0] == os.sep:
        path = path[1:]
    return path


def iter_tree(root: str) -> Iterator[tuple[str, EntryType]]:
    """Yield every entry under root in depth-first pre-order.

    The root comes first. Children are visited in lexical name order and
    a subdirectory's subtree is exhausted before its next sibling.
    Symbolic links are not followed.

    Args:
        root: Directory (or file) to traverse.

    Yields:
        (path, entry type) pairs.

    Raises:
        OSError: If the root cannot be stat-ed or a directory cannot be listed.
    """
    root_stat = os.lstat(root)
    if not stat.S_ISDIR(root_stat.st_mode):
        yield root, EntryType.FILE
        return

    yield root, EntryType.DIRECTORY
    yield from _iter_children(root)


def _iter_children(directory: str) -> Iterator[tuple[str, EntryType]]:
    with os.scandir(directory) as it:
        children = sorted(it, key=lambda e: e.name)

    for child in children:
        if child.is_dir(follow_symlinks=False):
            yield child.path, EntryType.DIRECTORY
            yield from _iter_children(child.path)
        else:
            yield child.path, EntryType.FILE


class TreeWalker:
    """Drives an agent over one root at a time.

    Args:
        agent: Agent invoked once per non-root entry.
        echo: Called with each entry before the agent acts on it.
    """

    def __init__(self, agent: Agent, echo: Echo | None = None) -> None:
        self._agent = agent
        self._echo = echo

    def entries(self, root: str) -> Iterator[VisitedEntry]:
        """Yield the entries under root, skipping the root itself.

        Args:
            root: Root path text as supplied by the user.

        Yields:
            VisitedEntry for every descendant of root.
        """
        for path, entry_type in iter_tree(root):
            rel = relative_path(root, path)
            if not rel:
                continue
            yield VisitedEntry(path=path, entry_type=entry_type, relative_path=rel)

    def walk(self, root: str) -> int:
        """Process a single root.

        Stops at the first error, whether raised by the traversal or by
        the agent.

        Args:
            root: Root path text as supplied by the user.

        Returns:
            Number of entries handled.

        Raises:
            WalkError: If the walk was aborted.
        """
        logger.debug("Walking %s with %s agent", root, self._agent.mode.value)
        handled = 0
        try:
            for entry in self.entries(root):
                if self._echo is not None:
                    self._echo(entry)
                if entry.is_dir:
                    self._agent.handle_directory(entry.relative_path)
                else:
                    self._agent.handle_file(entry.relative_path)
                handled += 1
        except (OSError, TreeskelError) as e:
            raise WalkError(root, e) from e
        return handled


def walk_roots(roots: Iterable[str], agent: Agent, echo: Echo | None = None) -> int:
    """Process roots in order, then finalize the agent.

    The first failing root aborts the run; roots after it are not
    visited. The agent is finalized exactly once either way.

    Args:
        roots: Root paths as supplied by the user.
        agent: Agent for the selected run mode.
        echo: Transcript callback, see TreeWalker.

    Returns:
        Total number of entries handled.

    Raises:
        WalkError: If any root was aborted.
    """
    walker = TreeWalker(agent, echo)
    total = 0
    with agent:
        for root in roots:
            total += walker.walk(root)
    logger.debug("Handled %d entries", total)
    return total
