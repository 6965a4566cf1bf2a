"""
Directory planning.

Works out which remote directories must exist before a set of files can be
uploaded. The plan keeps first-discovery order; creation order is decided
by the orchestrator through DirectoryPlan.by_depth().
"""
from typing import Dict, Iterable, Iterator, List

from ..path import combine


class DirectoryPlan:
    """
    Ordered, deduplicated set of absolute remote directory paths.

    Example:
        >>> plan = compute_plan(["docs/a/x.txt", "docs/b.txt"])
        >>> list(plan)
        ['/docs', '/docs/a']
    """

    def __init__(self, directories: Iterable[str] = ()):
        self._directories: Dict[str, None] = dict.fromkeys(directories)

    def add(self, directory: str) -> None:
        self._directories.setdefault(directory, None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._directories)

    def __len__(self) -> int:
        return len(self._directories)

    def __contains__(self, directory: object) -> bool:
        return directory in self._directories

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectoryPlan):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"DirectoryPlan({list(self)!r})"

    def as_set(self) -> set:
        return set(self._directories)

    def by_depth(self) -> List[str]:
        """Directories sorted so that every parent comes before its children."""
        return sorted(self._directories, key=lambda path: path.count('/'))


def compute_plan(relative_paths: Iterable[str]) -> DirectoryPlan:
    """
    Compute the directories needed for a set of file paths.

    Every proper prefix directory of every path is included once; the file
    name itself is not.

    Args:
        relative_paths: File paths such as "folder/sub/file.txt"

    Returns:
        Plan of absolute directory paths
    """
    plan = DirectoryPlan()

    for path in relative_paths:
        segments = [segment for segment in path.split('/') if segment]
        directories = segments[:-1]
        for depth in range(1, len(directories) + 1):
            plan.add(combine(*directories[:depth]))

    return plan
