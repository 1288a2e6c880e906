import io
import json
import os
from pathlib import Path

import pytest

from rustdrill.cli import (
    build_parser,
    find_exercise,
    list_exercises,
    main,
    rustc_exists,
)
from rustdrill.exercise import Exercise, Mode

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"


def make_bin(directory, name, code=0):
    script = directory / name
    script.write_text(f"#!/bin/sh\nexit {code}\n", encoding="utf-8")
    script.chmod(0o755)


@pytest.fixture
def toolchain(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    make_bin(bin_dir, "rustc")
    make_bin(bin_dir, "git")
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir


def make_workspace(root, entries):
    root.mkdir(parents=True, exist_ok=True)
    blocks = []
    for name, (filename, mode, hint, source) in entries.items():
        (root / filename).write_text(source, encoding="utf-8")
        blocks.append(
            f'[[exercises]]\nname = "{name}"\npath = "{filename}"\n'
            f'mode = "{mode}"\nhint = """{hint}"""\n'
        )
    (root / "info.toml").write_text("\n".join(blocks), encoding="utf-8")
    return root


@pytest.fixture
def state_dir(tmp_path, monkeypatch, toolchain):
    root = make_workspace(
        tmp_path / "state",
        {
            "pending_exercise": ("pending_exercise.rs", "compile", "", PENDING),
            "pending_test_exercise": ("pending_test_exercise.rs", "test", "", PENDING_TEST),
            "finished_exercise": ("finished_exercise.rs", "compile", "", FINISHED),
        },
    )
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def success_dir(tmp_path, monkeypatch, toolchain):
    root = make_workspace(
        tmp_path / "success",
        {
            "compSuccess": ("compSuccess.rs", "compile", "", "fn main() {\n}\n"),
            "testSuccess": (
                "testSuccess.rs",
                "test",
                "",
                '#[test]\nfn passing() {\n    println!("THIS TEST TOO SHALL PASS");\n'
                "    assert!(true);\n}\n",
            ),
        },
    )
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def failure_dir(tmp_path, monkeypatch, toolchain):
    root = make_workspace(
        tmp_path / "failure",
        {
            "testFailure": (
                "testFailure.rs",
                "test",
                "Hello!",
                "#[test]\nfn passing() {\n    asset!(true);\n}\n",
            ),
        },
    )
    monkeypatch.chdir(root)
    return root


def test_runs_without_arguments(success_dir, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "welcome to..." in out
    assert "Got all that? Great!" in out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch, toolchain, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Try `cd rustdrill/`!" in capsys.readouterr().out


def test_fails_without_rustc(success_dir, monkeypatch, tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    assert main(["list"]) == 1
    assert "We cannot find `rustc`." in capsys.readouterr().out


def test_run_single_test_no_filename(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["run"])
    assert exc.value.code == 2
    assert "required arguments were not provided" in capsys.readouterr().err


def test_reset_no_exercise(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["reset"])
    assert exc.value.code == 2
    assert "required arguments were not provided" in capsys.readouterr().err


def test_run_single_test_no_exercise(failure_dir, capsys):
    assert main(["run", "compNoExercise.rs"]) == 1
    assert "No exercise found for 'compNoExercise.rs'!" in capsys.readouterr().out


def test_reset_single_exercise(failure_dir):
    assert main(["reset", "testFailure"]) == 0


def test_get_hint_for_single_test(failure_dir, capsys):
    assert main(["hint", "testFailure"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


def test_run_rustdrill_list(success_dir, capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "compSuccess" in out
    assert "Progress: You completed 2 / 2 exercises (100.0 %)." in out


def test_run_rustdrill_list_no_pending(success_dir, capsys):
    assert main(["list"]) == 0
    assert "Pending" not in capsys.readouterr().out


def test_run_rustdrill_list_both_done_and_pending(state_dir, capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Done" in out
    assert "Pending" in out


def test_run_rustdrill_list_without_pending(state_dir, capsys):
    assert main(["list", "--solved"]) == 0
    out = capsys.readouterr().out
    assert "Pending" not in out
    assert "finished_exercise" in out


def test_run_rustdrill_list_without_done(state_dir, capsys):
    assert main(["list", "--unsolved"]) == 0
    out = capsys.readouterr().out
    assert "Done" not in out
    assert "pending_exercise" in out


def test_lsp_writes_project(tmp_path, monkeypatch, toolchain, capsys):
    root = make_workspace(tmp_path / "lsp", {"one": ("one.rs", "compile", "", FINISHED)})
    (root / "exercises").mkdir()
    (root / "exercises" / "one.rs").write_text(FINISHED, encoding="utf-8")
    monkeypatch.chdir(root)
    monkeypatch.setenv("RUST_SRC_PATH", "/opt/src")
    assert main(["lsp"]) == 0
    assert "Successfully generated rust-project.json" in capsys.readouterr().out
    data = json.loads((root / "rust-project.json").read_text(encoding="utf-8"))
    assert data["sysroot_src"] == "/opt/src"
    assert len(data["crates"]) == 1


def test_lsp_without_exercises(state_dir, monkeypatch, capsys):
    monkeypatch.setenv("RUST_SRC_PATH", "/opt/src")
    assert main(["lsp"]) == 0
    assert "Failed find any exercises" in capsys.readouterr().out
    assert not Path("rust-project.json").exists()


def test_rustc_exists_with_working_rustc(toolchain):
    assert rustc_exists() is True


def test_rustc_exists_with_failing_rustc(tmp_path, monkeypatch):
    bin_dir = tmp_path / "badbin"
    bin_dir.mkdir()
    make_bin(bin_dir, "rustc", code=1)
    monkeypatch.setenv("PATH", str(bin_dir))
    assert rustc_exists() is False


def test_rustc_exists_without_rustc(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert rustc_exists() is False


def test_build_parser_list_options():
    args = build_parser().parse_args(["list", "-p", "-f", "abc", "-u"])
    assert (args.command, args.paths, args.names, args.filter, args.unsolved, args.solved) == (
        "list",
        True,
        False,
        "abc",
        True,
        False,
    )


def test_build_parser_nocapture_and_watch():
    args = build_parser().parse_args(["--nocapture", "watch", "--success-hints"])
    assert args.nocapture is True
    assert args.success_hints is True
    assert args.command == "watch"


@pytest.fixture
def exercises(tmp_path):
    sources = {"first": FINISHED, "second": PENDING, "third": PENDING}
    result = []
    for name, source in sources.items():
        path = tmp_path / f"{name}.rs"
        path.write_text(source, encoding="utf-8")
        result.append(Exercise(name, path, Mode.COMPILE, f"hint for {name}"))
    return result


def test_find_exercise_by_name(exercises):
    assert find_exercise("third", exercises) is exercises[2]


def test_find_exercise_next_is_first_pending(exercises):
    assert find_exercise("next", exercises) is exercises[1]


def test_find_exercise_unknown(exercises):
    with pytest.raises(LookupError, match="No exercise found for 'missing'!"):
        find_exercise("missing", exercises)


def test_find_exercise_next_when_all_done(exercises):
    with pytest.raises(LookupError, match="Congratulations"):
        find_exercise("next", exercises[:1])


def test_list_exercises_paths_only(exercises):
    out = io.StringIO()
    done = list_exercises(exercises, paths=True, out=out)
    lines = out.getvalue().splitlines()
    assert done == 1
    assert lines[:-1] == [str(e.path) for e in exercises]
    assert lines[-1].startswith("Progress: You completed 1 / 3 exercises")


def test_list_exercises_names_with_filter(exercises):
    out = io.StringIO()
    list_exercises(exercises, names=True, filter_text="THIRD,fir", out=out)
    assert out.getvalue().splitlines()[:-1] == ["first", "third"]


def test_list_exercises_empty_filter_shows_nothing(exercises):
    out = io.StringIO()
    list_exercises(exercises, names=True, filter_text="", out=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Progress:")


def test_list_exercises_table_header(exercises):
    out = io.StringIO()
    list_exercises(exercises, solved=True, out=out)
    lines = out.getvalue().splitlines()
    assert lines[0].split("\t")[0].strip() == "Name"
    assert [line.split("\t")[0].strip() for line in lines[1:-1]] == ["first"]
    assert lines[1].split("\t")[2].strip() == "Done"