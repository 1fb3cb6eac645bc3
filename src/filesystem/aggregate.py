"""Post-order directory size aggregation and threshold reductions.

One depth-first pass computes every directory size, children before
parent, caching each result on its node exactly once. The same pass sums
the directories at or under the small-directory limit and records every
finalized size, so the deletion threshold (which depends on the root size)
can be applied as soon as the pass finishes without walking the tree again.
"""

import logging
from dataclasses import dataclass

from src.config.puzzle import FilesystemConfig
from src.errors import StructuralError
from src.filesystem.types import ROOT, FileSystemTree

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DirectoryReport:
    """Reductions over the finalized directory sizes."""

    root_size: int
    directory_count: int
    small_dir_total: int  # sum of sizes <= small_dir_limit
    free_target: int  # T2: minimum size a deleted directory must have
    delete_candidate: str  # path of the smallest directory >= free_target
    delete_candidate_size: int


def _post_order_sizes(
    tree: FileSystemTree, small_dir_limit: int
) -> tuple[list[tuple[int, int]], int]:
    """Compute and cache all directory sizes in a single post-order pass.

    Returns:
        (finalized, small_total): every (handle, size) in completion order,
        and the sum of sizes <= small_dir_limit.
    """
    finalized: list[tuple[int, int]] = []
    small_total = 0

    # (handle, expanded) frames; a directory is summed on its second visit
    pending: list[tuple[int, bool]] = [(ROOT, False)]
    while pending:
        handle, expanded = pending.pop()
        node = tree.node(handle)
        if not expanded:
            pending.append((handle, True))
            pending.extend(
                (child, False)
                for child in node.children.values()
                if tree.node(child).is_directory
            )
            continue

        if node.size is None:
            total = 0
            for child in node.children.values():
                child_size = tree.node(child).size
                if child_size is None:
                    raise StructuralError(
                        f"{tree.path(child)!r} not sized before its parent"
                    )
                total += child_size
            node.size = total
        finalized.append((handle, node.size))
        if node.size <= small_dir_limit:
            small_total += node.size

    return finalized, small_total


def directory_sizes(tree: FileSystemTree) -> dict[str, int]:
    """Map every reachable directory path to its total size."""
    finalized, _ = _post_order_sizes(tree, small_dir_limit=-1)
    return {tree.path(handle): size for handle, size in finalized}


def summarize_directories(
    tree: FileSystemTree, config: FilesystemConfig
) -> DirectoryReport:
    """Aggregate sizes and apply both directory thresholds.

    Args:
        tree: Tree produced by replay_session().
        config: Small-directory limit, disk capacity, and required free space.

    Returns:
        DirectoryReport with the small-directory sum and the smallest
        directory whose deletion frees enough space.
    """
    finalized, small_total = _post_order_sizes(tree, config.small_dir_limit)
    root_size = tree.size(ROOT)

    unused = config.disk_capacity - root_size
    free_target = config.required_free - unused

    # The root always qualifies since required_free <= disk_capacity.
    candidate, candidate_size = min(
        ((h, s) for h, s in finalized if s >= free_target),
        key=lambda pair: pair[1],
    )

    report = DirectoryReport(
        root_size=root_size,
        directory_count=len(finalized),
        small_dir_total=small_total,
        free_target=free_target,
        delete_candidate=tree.path(candidate),
        delete_candidate_size=candidate_size,
    )
    log.info(
        "Directories: %d, root size %d, small total %d, "
        "free target %d -> delete %s (%d)",
        report.directory_count,
        report.root_size,
        report.small_dir_total,
        report.free_target,
        report.delete_candidate,
        report.delete_candidate_size,
    )
    return report
