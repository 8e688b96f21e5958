"""Reading of the input files and dispatch of processes."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from .models import Disk, FileEntry, Memory, Operation, Process
from .queue import ProcessQueue

_NUMBER = re.compile(r"[0-9]+")
_PIECE = re.compile(r"([0-9]+)|([A-Za-z])")
_PROCESS_FIELDS = 8
_BOOL_TEXT = {True: "true", False: "false"}


@dataclass
class FilesSpec:
    """Contents of the files description: disk size, files and operations."""

    total_blocks: int
    segments: int
    files: list[FileEntry] = field(default_factory=list)
    operations: list[Operation] = field(default_factory=list)


def _pieces(line: str) -> list[int | str]:
    """Split a line into numbers and single-letter names."""
    return [
        int(match.group(1)) if match.group(1) is not None else match.group(2)
        for match in _PIECE.finditer(line)
    ]


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError(f"missing {what}") from None


def _single_number(line: str, what: str) -> int:
    text = line.strip()
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"unsupported {what}: {line!r}")
    return int(text)


def _parse_file_entry(line: str) -> FileEntry:
    pieces = _pieces(line)
    if not pieces or not isinstance(pieces[0], str):
        raise ValueError(f"unsupported file name: {line!r}")
    if len(pieces) != 3 or not all(isinstance(p, int) for p in pieces[1:]):
        raise ValueError(f"unsupported file segment: {line!r}")
    name, start, size = pieces
    return FileEntry(name=name, start_block=start, size=size)


def _parse_operation(line: str) -> Operation:
    pieces = _pieces(line)
    shape = [isinstance(p, int) for p in pieces]
    if shape not in ([True, True, False], [True, True, False, True]):
        raise ValueError(f"unsupported operation: {line!r}")
    pid, code, name, *rest = pieces
    return Operation(pid=pid, code=code, file_name=name, blocks=rest[0] if rest else 0)


def parse_files(lines: Iterable[str], disk: Disk) -> FilesSpec:
    """Parse the files description and lay its files out on ``disk``.

    The first line gives the number of disk blocks, the second the number
    of file segments; then come that many ``name, start, size`` lines and
    finally the ``pid, code, name[, blocks]`` operations.
    """
    rows = (line for line in lines if line.strip())
    total = _single_number(_next_line(rows, "number of blocks"), "number of blocks")
    disk.total_blocks = total
    segments = _single_number(_next_line(rows, "number of segments"), "number of segments")

    files = []
    for _ in range(segments):
        entry = _parse_file_entry(_next_line(rows, "file segment"))
        disk.place_file(entry)
        files.append(entry)

    operations = [_parse_operation(line) for line in rows]
    return FilesSpec(total_blocks=total, segments=segments, files=files, operations=operations)


def parse_process_line(line: str, pid: int) -> Process:
    """Build a process from one line of the processes description."""
    values = [int(digits) for digits in _NUMBER.findall(line)]
    if len(values) < _PROCESS_FIELDS:
        raise ValueError(
            f"process line needs {_PROCESS_FIELDS} numbers, got {len(values)}: {line!r}"
        )
    start, priority, cpu, blocks, printer, scanner, modem, disk_code = values[:_PROCESS_FIELDS]
    return Process(
        pid=pid,
        start_time=start,
        priority=priority,
        cpu_time=cpu,
        memory_blocks=blocks,
        printer=printer,
        scanner=scanner,
        modem=modem,
        disk_code=disk_code,
    )


def parse_processes(lines: Iterable[str]) -> Iterator[Process]:
    """Yield one process per non-blank line, numbering pids from 0."""
    rows = (line for line in lines if line.strip())
    for pid, line in enumerate(rows):
        yield parse_process_line(line, pid)


def format_process(process: Process) -> str:
    """The dispatcher's report line for a process."""
    printers = _BOOL_TEXT[process.printer >= 0]
    scanners = _BOOL_TEXT[process.scanner == 1]
    modems = _BOOL_TEXT[process.modem == 1]
    drives = _BOOL_TEXT[process.disk_code >= 0]
    return (
        f"dispatcher => PID: {process.pid}, offset: {process.memory_offset}, "
        f"blocks: {process.memory_blocks}, priority: {process.priority}, "
        f"time: {process.cpu_time}, printers: {printers}, "
        f"scanners: {scanners}, modems: {modems}, "
        f"drives: {drives}"
    )


def dispatch(
    memory: Memory,
    disk: Disk,
    global_queue: ProcessQueue,
    files_path: str = "files.txt",
    processes_path: str = "processes.txt",
    out: TextIO | None = None,
) -> FilesSpec:
    """Load the disk from ``files_path`` and dispatch the processes.

    Every process read from ``processes_path`` joins ``global_queue`` and
    is reported on ``out``. ``memory`` is the main memory the processes are
    meant to live in; their offsets are left as read.
    """
    out = sys.stdout if out is None else out
    with open(files_path, encoding="utf-8") as handle:
        spec = parse_files(handle, disk)

    with open(processes_path, encoding="utf-8") as handle:
        for process in parse_processes(handle):
            global_queue.enqueue(process)
            print(format_process(process), file=out)
    return spec