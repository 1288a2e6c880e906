"""Running or resetting a single exercise."""

from __future__ import annotations

import subprocess

from rustdrill.exercise import Exercise, ExerciseFailed, Mode
from rustdrill.ui import success, warn
from rustdrill.verify import VerificationFailed, test


class RunFailed(Exception):
    """Running or resetting an exercise did not succeed."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile the exercise and run it, or run its tests."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as exc:
            raise RunFailed(exercise) from exc
    else:
        compile_and_run(exercise)


def reset(exercise: Exercise) -> None:
    """Reset the exercise file by stashing its changes with git."""
    try:
        subprocess.Popen(["git", "stash", "--", str(exercise.path)])
    except OSError as exc:
        raise RunFailed(exercise) from exc


def compile_and_run(exercise: Exercise) -> None:
    """Compile a binary exercise and run it, showing its output."""
    try:
        compiled = exercise.compile()
    except ExerciseFailed as exc:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(exc.output.stderr)
        raise RunFailed(exercise) from exc

    with compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as exc:
            print(exc.output.stdout)
            print(exc.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise RunFailed(exercise) from exc

    print(output.stdout)
    success(f"Successfully ran {exercise}")