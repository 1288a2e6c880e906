"""Checking exercises in the recommended order and reporting progress."""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import Iterable

from rustdrill.exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from rustdrill.ui import no_emoji, separator, style, success, warn

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, failed its run or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


class RunMode(Enum):
    """Whether a passing exercise is followed by the completion prompt."""

    INTERACTIVE = auto()
    NON_INTERACTIVE = auto()


def _show_progress(position: int, total: int, percentage: float) -> None:
    filled = _BAR_WIDTH * position // total if total else _BAR_WIDTH
    if filled >= _BAR_WIDTH:
        bar = "#" * _BAR_WIDTH
    else:
        bar = "#" * filled + ">" + "-" * (_BAR_WIDTH - filled - 1)
    print(
        f"Progress: [{bar}] {position}/{total} ({percentage:.1f} %)",
        file=sys.stderr,
    )


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn, raising VerificationFailed at the first failure."""
    num_done, total = progress
    step = 100.0 / total if total else 0.0
    percentage = num_done * step
    position = num_done
    _show_progress(position, total, percentage)

    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = compile_and_test(
                exercise, RunMode.INTERACTIVE, verbose, success_hints
            )
        elif exercise.mode is Mode.COMPILE:
            passed = compile_and_run_interactively(exercise, success_hints)
        else:
            passed = compile_only(exercise, success_hints)
        if not passed:
            raise VerificationFailed(exercise)
        percentage += step
        position += 1
        _show_progress(position, total, percentage)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's test harness without prompting."""
    compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose, False)


def _compile(exercise: Exercise) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as exc:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        raise VerificationFailed(exercise) from exc


def compile_only(exercise: Exercise, success_hints: bool = False) -> bool:
    """Compile without running; return whether the exercise looks done."""
    with _compile(exercise):
        pass
    return prompt_for_completion(exercise, None, success_hints)


def compile_and_run_interactively(
    exercise: Exercise, success_hints: bool = False
) -> bool:
    """Compile and run the exercise, then prompt if it is still pending."""
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as exc:
            warn(f"Ran {exercise} with errors")
            print(exc.output.stdout)
            print(exc.output.stderr)
            raise VerificationFailed(exercise) from exc
        return prompt_for_completion(exercise, output.stdout, success_hints)


def compile_and_test(
    exercise: Exercise,
    run_mode: RunMode,
    verbose: bool = False,
    success_hints: bool = False,
) -> bool:
    """Compile the exercise as a test harness and run it."""
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as exc:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(exc.output.stdout)
            raise VerificationFailed(exercise) from exc
        if verbose:
            print(output.stdout)
        if run_mode is RunMode.INTERACTIVE:
            return prompt_for_completion(exercise, None, success_hints)
        return True


def prompt_for_completion(
    exercise: Exercise,
    prompt_output: str | None = None,
    success_hints: bool = False,
) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done():
        return True

    verb = {Mode.COMPILE: "ran", Mode.TEST: "tested", Mode.CLIPPY: "compiled"}
    success(f"Successfully {verb[exercise.mode]} {exercise}!")

    emoji_free = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if emoji_free
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    messages = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }
    success_message = messages[exercise.mode]

    print()
    if emoji_free:
        print(f"~*~ {success_message} ~*~")
    else:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(separator())
        print(prompt_output)
        print(separator())
        print()
    if success_hints:
        print("Hints:")
        print(separator())
        print(exercise.hint)
        print(separator())
        print()

    print("You can keep working on this exercise,")
    marker = style("`I AM NOT DONE`", "bold")
    print(f"or jump into the next one by removing the {marker} comment:")
    print()
    for context_line in state.pending:
        text = (
            style(context_line.line, "bold")
            if context_line.important
            else context_line.line
        )
        number = style(f"{context_line.number:>2}", "blue", "bold")
        print(f"{number} {style('|', 'blue')}  {text}")

    return False