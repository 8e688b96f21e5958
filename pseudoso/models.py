"""Core data structures of the simulated operating system."""

from __future__ import annotations

from dataclasses import dataclass, field

TOTAL_BLOCKS = 1024
REAL_TIME_BLOCKS = 64
USER_BLOCKS = 960

MAX_FILES = 100
DISK_SIZE = 1000
FREE_BLOCK = "0"

NO_OWNER = -1


@dataclass
class Process:
    """A process as described by one line of the processes file."""

    pid: int = 0
    start_time: int = 0
    priority: int = 0
    cpu_time: int = 0
    memory_blocks: int = 0
    printer: int = 0
    scanner: int = 0
    modem: int = 0
    disk_code: int = 0
    memory_offset: int = 0
    arrival_time: int = 0
    running: bool = False


@dataclass
class FileEntry:
    """A file stored contiguously on the disk."""

    name: str
    owner_pid: int = NO_OWNER
    start_block: int = 0
    size: int = 0


@dataclass
class Operation:
    """A file-system operation requested by a process.

    ``code`` is 0 to create a file and 1 to delete it; ``blocks`` is only
    meaningful for creation.
    """

    pid: int
    code: int
    file_name: str
    blocks: int = 0


@dataclass
class MemoryBlock:
    """One block of main memory and the process that owns it."""

    occupied: bool = False
    pid: int = NO_OWNER


@dataclass
class Resource:
    """An I/O device that a single process may hold at a time."""

    occupied: bool = False
    pid: int = NO_OWNER

    def release(self) -> None:
        """Mark the device as free and without owner."""
        self.occupied = False
        self.pid = NO_OWNER


@dataclass
class Memory:
    """Main memory: a fixed array of blocks, all free at start."""

    blocks: list[MemoryBlock] = field(
        default_factory=lambda: [MemoryBlock() for _ in range(TOTAL_BLOCKS)]
    )


@dataclass
class Directory:
    """The list of files present on the disk."""

    files: list[FileEntry] = field(default_factory=list)

    def add(self, entry: FileEntry) -> None:
        """Append a file; raise OverflowError when the directory is full."""
        if len(self.files) >= MAX_FILES:
            raise OverflowError(f"directory already holds {MAX_FILES} files")
        self.files.append(entry)

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class Disk:
    """The disk bitmap: each block is free or holds the name of its file."""

    total_blocks: int = DISK_SIZE
    blocks: list[str] = field(default_factory=lambda: [FREE_BLOCK] * DISK_SIZE)
    directory: Directory = field(default_factory=Directory)

    def place_file(self, entry: FileEntry) -> None:
        """Record a file in the directory and mark its blocks as used."""
        limit = min(self.total_blocks, len(self.blocks))
        if entry.start_block < 0 or entry.size < 0:
            raise ValueError("file position and size must not be negative")
        if entry.start_block + entry.size > limit:
            raise ValueError(
                f"file {entry.name!r} does not fit in a disk of {limit} blocks"
            )
        self.directory.add(entry)
        end = entry.start_block + entry.size
        self.blocks[entry.start_block:end] = [entry.name] * entry.size

    def free_blocks(self) -> int:
        """Number of free blocks within the disk's declared size."""
        return sum(1 for block in self.blocks[: self.total_blocks] if block == FREE_BLOCK)