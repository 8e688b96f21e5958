"""The simulated operating system and its command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .dispatcher import FilesSpec, dispatch
from .models import Disk, Memory, Resource
from .queue import ProcessQueue, QueueFullError


class OperatingSystem:
    """Queues, memory, disk and I/O devices of the system, freshly initialised."""

    def __init__(self) -> None:
        self.global_queue = ProcessQueue()
        self.real_time_queue = ProcessQueue()
        self.user_queues = [ProcessQueue() for _ in range(3)]
        self.memory = Memory()
        self.disk = Disk()
        self.printers = [Resource(), Resource()]
        self.scanner = Resource()
        self.modem = Resource()
        self.drives = [Resource(), Resource()]

    def run(
        self,
        files_path: str = "files.txt",
        processes_path: str = "processes.txt",
        out: TextIO | None = None,
    ) -> FilesSpec:
        """Announce start-up and dispatch the processes from the input files."""
        out = sys.stdout if out is None else out
        print("Inicializando o SO.", file=out)
        print("Inicialização concluída. Iniciando dispatch.", file=out)
        return dispatch(
            self.memory, self.disk, self.global_queue, files_path, processes_path, out
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pseudoso", description="Run the simulated OS.")
    parser.add_argument("--files", default="files.txt", help="files description")
    parser.add_argument("--processes", default="processes.txt", help="processes description")
    args = parser.parse_args(argv)

    system = OperatingSystem()
    try:
        system.run(args.files, args.processes)
    except (OSError, ValueError, OverflowError, QueueFullError) as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())