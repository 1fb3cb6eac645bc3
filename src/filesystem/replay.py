"""Replay a `$ cd` / `$ ls` shell session into a FileSystemTree.

The session is consumed strictly in order against an explicit cursor (the
handle of the current directory). `ls` output lines are attached to the
cursor until the next command line.
"""

import logging
from dataclasses import dataclass, field

from src.errors import ParseError
from src.filesystem.types import ROOT, FileSystemTree, NodeKind
from src.parsing import parse_int, split_lines

log = logging.getLogger(__name__)

COMMAND_PREFIX = "$ "


@dataclass
class ReplayState:
    """Mutable state of one replay: the tree under construction and the cursor."""

    tree: FileSystemTree = field(default_factory=FileSystemTree)
    cursor: int = ROOT
    listing: bool = False  # True while consuming `ls` output


def change_directory(state: ReplayState, arg: str) -> None:
    """Apply `cd <arg>` to the cursor.

    Raises:
        StructuralError: On `cd ..` at the root or `cd` into a file.
        UnknownReferenceError: On `cd <name>` with no such listed child.
    """
    if arg == "/":
        state.cursor = ROOT
    elif arg == "..":
        state.cursor = state.tree.parent(state.cursor)
    else:
        state.cursor = state.tree.child(state.cursor, arg)


def attach_entry(state: ReplayState, line: str, line_no: int) -> int:
    """Attach one `dir <name>` or `<size> <name>` line under the cursor."""
    stat, sep, name = line.partition(" ")
    if not sep or not name:
        raise ParseError(
            f"line {line_no}: expected 'dir <name>' or '<size> <name>', "
            f"got {line!r}"
        )
    if stat == "dir":
        return state.tree.add_child(state.cursor, name, NodeKind.DIRECTORY)
    size = parse_int(stat, line_no, "file size")
    if size < 0:
        raise ParseError(f"line {line_no}: file size must be >= 0, got {size}")
    return state.tree.add_child(state.cursor, name, NodeKind.FILE, size)


def run_command(state: ReplayState, line: str, line_no: int) -> None:
    """Dispatch one `$ ...` command line."""
    # The argument is the rest of the line, spaces included
    parts = line[len(COMMAND_PREFIX):].rstrip().split(" ", 1)
    match parts:
        case ["cd", arg]:
            state.listing = False
            change_directory(state, arg)
        case ["ls"]:
            state.listing = True
        case _:
            raise ParseError(f"line {line_no}: unrecognized command {line!r}")


def replay_session(text: str) -> FileSystemTree:
    """Build the filesystem tree described by a terminal session.

    Args:
        text: Session transcript, one command or listing entry per line.

    Returns:
        The populated FileSystemTree. Directory sizes are not yet computed.

    Raises:
        ParseError: On an unknown command, a malformed listing line, or a
            listing line that does not follow `ls`.
    """
    state = ReplayState()
    for line_no, line in enumerate(split_lines(text), start=1):
        if not line:
            continue
        if line.startswith(COMMAND_PREFIX) or line == "$":
            run_command(state, line, line_no)
        elif state.listing:
            attach_entry(state, line, line_no)
        else:
            raise ParseError(
                f"line {line_no}: listing entry {line!r} outside of `ls` output"
            )

    log.info(
        "Replayed session: %d nodes, %d directories",
        len(state.tree),
        len(state.tree.directories()),
    )
    return state.tree
