"""Watch mode: re-verify exercises whenever their files change."""

from __future__ import annotations

import os
import queue
import subprocess
import sys
import threading
from enum import Enum, auto
from pathlib import Path
from typing import IO, Iterable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustdrill.exercise import Exercise
from rustdrill.verify import VerificationFailed, verify

WATCH_ROOT = "./exercises"
_POLL_SECONDS = 1.0

WELCOME_MESSAGE = (
    "Welcome to watch mode! You can type 'help' to get an overview of the "
    "commands you can use here."
)

HELP_TEXT = "\n".join(
    [
        "Commands available to you in watch mode:",
        "  hint   - prints the current exercise's hint",
        "  clear  - clears the screen",
        "  quit   - quits watch mode",
        "  !<cmd> - executes a command, like `!rustc --explain E0381`",
        "  help   - displays this help message",
        "",
        "Watch mode automatically re-evaluates the current exercise",
        "when you edit a file's contents.",
    ]
)


class WatchStatus(Enum):
    """How watch mode ended."""

    FINISHED = auto()
    UNFINISHED = auto()


class WatchShell:
    """Reads commands typed while watch mode is running."""

    def __init__(self, hint: str | None = None, stdin: IO[str] | None = None) -> None:
        self._lock = threading.Lock()
        self._hint = hint
        self._stdin = stdin
        self.quit_requested = threading.Event()

    @property
    def hint(self) -> str | None:
        with self._lock:
            return self._hint

    @hint.setter
    def hint(self, value: str | None) -> None:
        with self._lock:
            self._hint = value

    def handle(self, line: str) -> None:
        """Carry out one command line."""
        command = line.strip()
        if command == "hint":
            hint = self.hint
            if hint is not None:
                print(hint)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            self.quit_requested.set()
            print("Bye!")
        elif command == "help":
            print(HELP_TEXT)
        elif command.startswith("!"):
            cmd = command[1:]
            parts = cmd.split()
            if not parts:
                print("no command provided")
                return
            try:
                subprocess.run(parts, check=False)
            except OSError as exc:
                print(f"failed to execute command `{cmd}`: {exc}")
        else:
            print(f"unknown command: {command}")

    def start(self) -> threading.Thread:
        """Greet the user and read commands on a background thread."""
        print(WELCOME_MESSAGE)
        thread = threading.Thread(target=self._read_commands, daemon=True)
        thread.start()
        return thread

    def _read_commands(self) -> None:
        stream = self._stdin if self._stdin is not None else sys.stdin
        while True:
            try:
                line = stream.readline()
            except (OSError, ValueError) as exc:
                print(f"error reading command: {exc}")
                return
            if not line:
                return
            self.handle(line)


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(os.fsdecode(event.src_path))


def _ends_with(full: Path, suffix: Path) -> bool:
    parts = Path(suffix).parts
    if not parts:
        return True
    if Path(suffix).is_absolute():
        return full.parts == parts
    return len(parts) <= len(full.parts) and full.parts[-len(parts):] == parts


def pending_after_change(
    exercises: Iterable[Exercise], changed_path: str | os.PathLike
) -> list[Exercise]:
    """The changed exercise first, then every other exercise still pending."""
    exercises = list(exercises)
    filepath = Path(changed_path).resolve()
    changed = next((e for e in exercises if _ends_with(filepath, e.path)), None)
    others = [
        e
        for e in exercises
        if not _ends_with(filepath, e.path) and not e.looks_done()
    ]
    return ([changed] if changed is not None else []) + others


def _clear_screen() -> None:
    print("\x1bc")


def _drain(changes: queue.Queue) -> list[str]:
    try:
        first = changes.get(timeout=_POLL_SECONDS)
    except queue.Empty:
        return []
    paths = [first]
    while True:
        try:
            paths.append(changes.get_nowait())
        except queue.Empty:
            break
    return list(dict.fromkeys(paths))


def watch(
    exercises: Iterable[Exercise],
    verbose: bool = False,
    success_hints: bool = False,
) -> WatchStatus:
    """Verify exercises, then re-verify on every change until done or quit."""
    exercises = list(exercises)
    root = Path(WATCH_ROOT)
    if not root.is_dir():
        raise FileNotFoundError(f"no such directory: {root}")

    changes: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), str(root), recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose, success_hints)
            return WatchStatus.FINISHED
        except VerificationFailed as exc:
            shell = WatchShell(exc.exercise.hint)
        shell.start()

        while True:
            for changed in _drain(changes):
                path = Path(changed)
                if path.suffix != ".rs" or not path.exists():
                    continue
                pending = pending_after_change(exercises, path)
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(pending, (num_done, len(exercises)), verbose, success_hints)
                    return WatchStatus.FINISHED
                except VerificationFailed as exc:
                    shell.hint = exc.exercise.hint
            if shell.quit_requested.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()