# pseudoso

A small pseudo operating system for learning how an OS keeps track of its
processes, its memory and its disk. It sets up the system structures, reads a
description of the disk and of the processes to run, lays the files out on the
disk, puts every process on the global queue and prints what it knows about
each one.

## What it models

- **Processes** (`pseudoso.models.Process`) with start time, priority,
  processor time, memory blocks and the I/O resources they ask for: printer,
  scanner, modem and disk drive.
- **Process queues** (`pseudoso.queue.ProcessQueue`): bounded FIFO queues with
  `enqueue`, `dequeue`, `is_empty` and `is_full`. A queue of capacity `n`
  (1000 by default) holds at most `n - 1` processes. Enqueueing into a full
  queue raises `QueueFullError`; dequeueing from an empty one raises
  `IndexError`.
- **Main memory** (`Memory`) of 1024 `MemoryBlock`s, each recording whether it
  is in use and by which process; all are free at start.
- **Disk** (`Disk`): a bitmap of 1000 blocks where a free block is `'0'` and a
  used one holds the one-letter name of its file, plus a `Directory` of the
  files (`FileEntry`) stored on it. `Disk.place_file` records a file and marks
  its blocks, raising `ValueError` if it does not fit within the disk's
  declared size; the directory holds at most 100 files and raises
  `OverflowError` beyond that. `Disk.free_blocks` counts the free blocks.
- **I/O resources** (`Resource`): the system has two printers, one scanner, one
  modem and two disk drives; `Resource.release` frees one.
- **File operations** (`Operation`): create (code 0) or delete (code 1) a file
  on behalf of a process.

## Input files

Blank lines are ignored in both files.

`files.txt` describes the disk:

```
10
3
A, 0, 2
X, 3, 1
Z, 5, 3
0, 0, A, 5
0, 1, X
```

1. the number of blocks on the disk;
2. the number of files already stored on it;
3. one line per stored file: its one-letter name, its first block and its
   length in blocks;
4. then one line per operation: process id, operation code, file name and,
   optionally, the number of blocks.

A line that does not have this shape raises `ValueError`.

`processes.txt` holds one process per line, at least eight numbers
(only digits are read; any further numbers are ignored):

```
2, 0, 3, 64, 0, 0, 0, 0
8, 1, 2, 64, 0, 0, 0, 0
```

start time, priority, processor time, memory blocks, printer code, scanner
request, modem request and disk code. Processes get ids 0, 1, 2, … in the
order they appear.

## Running

Install the package and run, in a directory holding `files.txt` and
`processes.txt`:

```
pseudoso
```

or point it at other files:

```
pseudoso --files my_files.txt --processes my_processes.txt
```

It prints two start-up lines and then, for every process, a line such as:

```
dispatcher => PID: 0, offset: 0, blocks: 64, priority: 0, time: 3, printers: true, scanners: false, modems: false, drives: true
```

If a file cannot be read or its contents are not valid, the error is printed
to standard error as `Erro: ...` and the command exits with status 1.

## Using it from Python

```python
import sys

from pseudoso.system import OperatingSystem

system = OperatingSystem()
spec = system.run("files.txt", "processes.txt", sys.stdout)
print(spec.files, spec.operations)
print(len(system.global_queue), system.disk.free_blocks())
```

`run` returns a `FilesSpec` with the disk size, the number of file segments,
the files laid out on the disk and the operations read.

The pieces are also usable on their own: `pseudoso.dispatcher` offers
`parse_files`, `parse_process_line`, `parse_processes`, `format_process` and
`dispatch`.

## What it does not do

The system stops after dispatch. It does not allocate main memory to
processes (every offset stays 0), does not schedule or run processes from the
real-time and user queues, does not assign the I/O resources, and does not
carry out the file operations it reads: they are only returned in the
`FilesSpec`.

## Running the tests

```
pip install -e ".[test]"
pytest
```