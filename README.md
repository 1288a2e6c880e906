# rustdrill

A command-line companion for working through a set of small Rust exercises.
It reads the exercise list from an `info.toml` file in the current directory,
compiles and runs each exercise with `rustc` (or lints it with `cargo clippy`),
and tells you which ones still need work.

An exercise counts as pending while its source still holds an
`// I AM NOT DONE` comment. Remove the comment once the exercise compiles and
passes to move on to the next one.

## Installation

```
pip install .
```

`rustc` must be on your `PATH`; clippy exercises also need `cargo`.

## The exercise list

`info.toml` holds an `[[exercises]]` table per exercise, each with a `name`,
a `path` to the `.rs` file, a `mode` and a `hint`:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment."
```

The mode decides how the exercise is checked:

- `compile`: build a binary with `rustc` and run it
- `test`: build a test harness with `rustc --test` and run it
- `clippy`: write `exercises/22_clippy/Cargo.toml` and run `cargo clippy`
  with warnings denied

## Usage

Run every command from the directory that holds `info.toml`.

```
rustdrill                  # welcome text and a short introduction
rustdrill --version
rustdrill verify           # check all exercises in the recommended order
rustdrill watch            # re-verify whenever a file under ./exercises changes
rustdrill watch --success-hints
rustdrill run NAME         # compile and run (or test) one exercise
rustdrill run next         # the first exercise that is not done yet
rustdrill reset NAME       # stash your changes to one exercise with git
rustdrill hint NAME        # print the hint for one exercise
rustdrill list             # name, path and status of every exercise
rustdrill list --unsolved --filter iter,conv
rustdrill list --solved --names
rustdrill lsp              # write rust-project.json for rust-analyzer
```

`--nocapture` before the command shows the output of test exercises.
`list` also takes `--paths` to print only paths; `--filter` takes
comma-separated patterns matched against names and paths.

`lsp` takes the standard library sources from `RUST_SRC_PATH` if it is set,
and otherwise asks `rustc --print sysroot`.

Inside watch mode, type:

- `hint`: the hint for the current exercise
- `clear`: clear the screen
- `quit`: leave watch mode
- `!<cmd>`: run a command, e.g. `!rustc --explain E0381`
- `help`: list these commands

Set `NO_EMOJI` in the environment for plain-text status markers.

The command exits with status 1 when an exercise fails, when no exercise
matches the given name, or when `info.toml` or `rustc` cannot be found.

## Library use

The runner's pieces can be used directly:

- `rustdrill.exercise`: `load_exercises`, `Exercise` (`compile`, `state`,
  `looks_done`), `CompiledExercise` (a context manager that removes the built
  binary), `ExerciseFailed`
- `rustdrill.verify`: `verify`, raising `VerificationFailed` at the first
  exercise that fails or is still pending
- `rustdrill.run`: `run` and `reset`, raising `RunFailed`
- `rustdrill.project`: `RustAnalyzerProject` for `rust-project.json`
- `rustdrill.watch`: `watch` and the interactive `WatchShell`
- `rustdrill.cli`: `main`, `find_exercise`, `list_exercises`

## Drills

The `rustdrill.drills` package holds worked solutions to many of the
exercises, written as ordinary Python: `basics`, `structs`, `collections`,
`errors`, `iterators` and `traits`. For example:

```python
from rustdrill.drills.basics import calculate_price_of_apples
from rustdrill.drills.iterators import capitalize_words_string

calculate_price_of_apples(41)                       # 41
capitalize_words_string(["hello", " ", "world"])    # "Hello World"
```

There are no drills for the type-conversion exercises.

## Tests

```
pip install ".[test]"
pytest
```