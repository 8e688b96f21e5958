import io

import pytest

from pseudoso.dispatcher import (
    FilesSpec,
    dispatch,
    format_process,
    parse_files,
    parse_process_line,
    parse_processes,
)
from pseudoso.models import Disk, FileEntry, Memory, Operation, Process
from pseudoso.queue import ProcessQueue

FILES_LINES = [
    "10\n",
    "3\n",
    "X, 0, 2\n",
    "Y, 3, 1\n",
    "Z, 5, 3\n",
    "0, 0, A, 5\n",
    "0, 1, X\n",
]

PROCESS_LINES = [
    "2, 0, 3, 64, 0, 0, 0, 0\n",
    "8, 0, 2, 64, 0, 0, 0, 0\n",
    "\n",
    "3, 1, 4, 128, 1, 1, 1, 1\n",
]


def test_format_process_matches_report_layout():
    process = Process(pid=0, memory_blocks=64, cpu_time=3)
    assert format_process(process) == (
        "dispatcher => PID: 0, offset: 0, blocks: 64, priority: 0, time: 3, "
        "printers: true, scanners: false, modems: false, drives: true"
    )


def test_format_process_device_flags():
    process = Process(pid=4, scanner=1, modem=1)
    line = format_process(process)
    assert "scanners: true" in line
    assert "modems: true" in line
    assert line.startswith("dispatcher => PID: 4,")


def test_parse_process_line_fields():
    process = parse_process_line("2, 0, 3, 64, 0, 0, 0, 1", 5)
    assert process == Process(
        pid=5,
        start_time=2,
        priority=0,
        cpu_time=3,
        memory_blocks=64,
        printer=0,
        scanner=0,
        modem=0,
        disk_code=1,
    )


def test_parse_process_line_too_few_numbers():
    with pytest.raises(ValueError):
        parse_process_line("2, 0, 3", 0)


def test_parse_processes_numbers_pids_and_skips_blank_lines():
    processes = list(parse_processes(PROCESS_LINES))
    assert [p.pid for p in processes] == [0, 1, 2]
    assert processes[2].memory_blocks == 128
    assert processes[1].start_time == 8


def test_parse_files_lays_out_disk():
    disk = Disk()
    spec = parse_files(FILES_LINES, disk)
    assert disk.total_blocks == 10
    assert spec.segments == 3
    assert disk.blocks[:10] == ["X", "X", "0", "Y", "0", "Z", "Z", "Z", "0", "0"]
    assert len(disk.directory) == 3
    assert disk.free_blocks() == spec.total_blocks - sum(f.size for f in spec.files)


def test_parse_files_entries_and_operations():
    spec = parse_files(FILES_LINES, Disk())
    assert spec.files[0] == FileEntry(name="X", start_block=0, size=2)
    assert spec.operations == [
        Operation(pid=0, code=0, file_name="A", blocks=5),
        Operation(pid=0, code=1, file_name="X", blocks=0),
    ]


def test_parse_files_missing_segment():
    with pytest.raises(ValueError):
        parse_files(["10\n", "2\n", "X, 0, 2\n"], Disk())


def test_parse_files_rejects_non_numeric_block_count():
    with pytest.raises(ValueError):
        parse_files(["ten\n", "0\n"], Disk())


def test_parse_files_rejects_numeric_file_name():
    with pytest.raises(ValueError):
        parse_files(["10\n", "1\n", "1, 0, 2\n"], Disk())


def test_parse_files_rejects_file_past_disk_end():
    with pytest.raises(ValueError):
        parse_files(["4\n", "1\n", "X, 2, 5\n"], Disk())


def test_parse_files_rejects_malformed_operation():
    with pytest.raises(ValueError):
        parse_files(["10\n", "0\n", "A, 0, 1\n"], Disk())


def _write_inputs(tmp_path):
    files_path = tmp_path / "files.txt"
    processes_path = tmp_path / "processes.txt"
    files_path.write_text("".join(FILES_LINES), encoding="utf-8")
    processes_path.write_text("".join(PROCESS_LINES), encoding="utf-8")
    return files_path, processes_path


def test_dispatch_reports_and_queues_processes(tmp_path):
    files_path, processes_path = _write_inputs(tmp_path)
    disk = Disk()
    queue = ProcessQueue()
    out = io.StringIO()
    spec = dispatch(Memory(), disk, queue, str(files_path), str(processes_path), out)

    assert isinstance(spec, FilesSpec) and spec.total_blocks == 10
    lines = out.getvalue().splitlines()
    assert len(lines) == len(queue) == 3
    first = queue.dequeue()
    assert first.pid == 0
    assert lines[0] == format_process(first)


def test_dispatch_missing_files_description(tmp_path):
    with pytest.raises(FileNotFoundError):
        dispatch(
            Memory(),
            Disk(),
            ProcessQueue(),
            str(tmp_path / "absent.txt"),
            str(tmp_path / "absent2.txt"),
            io.StringIO(),
        )