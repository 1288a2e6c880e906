"""Exercise descriptions, compilation and completion state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

from rustdrill.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class ExerciseState:
    """Completion state; an empty ``pending`` context means done."""

    pending: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.pending


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or compiled binary."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _execute(args: Iterable[str]) -> subprocess.CompletedProcess:
    return subprocess.run(list(args), capture_output=True, check=False)


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary, raising ExerciseFailed if it exits non-zero."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            clean()
            self._closed = True

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    @classmethod
    def from_dict(cls, data: dict) -> Exercise:
        return cls(
            name=data["name"],
            path=Path(data["path"]),
            mode=Mode(data["mode"]),
            hint=data["hint"],
        )

    def _rustc_command(self, test: bool) -> list[str]:
        args = ["rustc"]
        if test:
            args.append("--test")
        args += [str(self.path), "-o", temp_file()]
        args += [*RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS, *RUSTC_NO_DEBUG_ARGS]
        return args

    def _compile_clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        message = (
            "Failed to write Clippy Cargo.toml file."
            if no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(message) from exc
        # Build a binary as well so clippy exercises can be run; a failure
        # here is reported again by clippy below.
        _execute(self._rustc_command(test=False))
        # A clean is needed for clippy to report every lint.
        _execute(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising ExerciseFailed on errors."""
        if self.mode is Mode.CLIPPY:
            result = self._compile_clippy()
        else:
            result = _execute(self._rustc_command(test=self.mode is Mode.TEST))
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(result))

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> ExerciseState:
        """Read the source and locate the pending marker, if any."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return ExerciseState()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        context = tuple(
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if low <= i <= high
        )
        return ExerciseState(context)

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state().done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Load the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [Exercise.from_dict(entry) for entry in data["exercises"]]