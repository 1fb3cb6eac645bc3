"""Filesystem tree reconstruction from shell sessions and size aggregation."""

from src.filesystem.aggregate import (
    DirectoryReport,
    directory_sizes,
    summarize_directories,
)
from src.filesystem.replay import ReplayState, replay_session
from src.filesystem.types import ROOT, FileSystemNode, FileSystemTree, NodeKind

__all__ = [
    "ROOT",
    "NodeKind",
    "FileSystemNode",
    "FileSystemTree",
    "ReplayState",
    "replay_session",
    "DirectoryReport",
    "directory_sizes",
    "summarize_directories",
]
