import os
import subprocess
from pathlib import Path

import pytest

from drillkit.exercise import (
    ContextLine,
    Done,
    Exercise,
    Mode,
    Pending,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def make(tmp_path, text, name="example", mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="")


def capture_run(monkeypatch, returncode=0):
    calls = []

    def fake(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, returncode, b"", b"")

    monkeypatch.setattr(subprocess, "run", fake)
    return calls


def test_temp_file_uses_process_id():
    assert temp_file() == f"./temp_{os.getpid()}"


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = Exercise("example", Path("example.rs"), Mode.TEST, "")
    exercise.clean()
    assert not Path(temp_file()).exists()


def test_clean_without_file_is_quiet(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Exercise("example", Path("example.rs"), Mode.TEST, "").clean()
    assert not Path(temp_file()).exists()


def test_pending_state(tmp_path):
    exercise = make(tmp_path, PENDING, "pending_exercise")
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == Pending(expected)


def test_finished_exercise(tmp_path):
    exercise = make(tmp_path, FINISHED, "finished_exercise")
    assert exercise.state() == Done()


def test_marker_on_first_line_clamps_context(tmp_path):
    exercise = make(tmp_path, "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = exercise.state()
    assert isinstance(state, Pending)
    assert [c.number for c in state.context] == [1, 2, 3]
    assert [c.important for c in state.context] == [True, False, False]


def test_marker_allows_extra_whitespace_and_doc_comment(tmp_path):
    exercise = make(tmp_path, "fn main() {}\n    ///  I  AM   NOT\tDONE\n")
    state = exercise.state()
    assert state.context[-1] == ContextLine("    ///  I  AM   NOT\tDONE", 2, True)


def test_marker_after_code_is_not_pending(tmp_path):
    exercise = make(tmp_path, "let x = 1; // I AM NOT DONE\n")
    assert exercise.state() == Done()


def test_str_is_path(tmp_path):
    exercise = make(tmp_path, FINISHED)
    assert str(exercise) == str(tmp_path / "example.rs")


def test_compile_arguments_for_compile_mode(tmp_path, monkeypatch):
    calls = capture_run(monkeypatch)
    exercise = make(tmp_path, FINISHED)
    result = exercise.compile()
    assert result.returncode == 0
    assert calls == [
        ["rustc", str(exercise.path), "-o", temp_file(), "--color", "always"]
    ]


def test_compile_arguments_for_test_mode(tmp_path, monkeypatch):
    calls = capture_run(monkeypatch)
    exercise = make(tmp_path, FINISHED, mode=Mode.TEST)
    exercise.compile()
    assert calls == [
        ["rustc", "--test", str(exercise.path), "-o", temp_file(), "--color", "always"]
    ]


def test_run_executes_temp_binary(tmp_path, monkeypatch):
    calls = capture_run(monkeypatch, returncode=3)
    result = make(tmp_path, FINISHED).run()
    assert result.returncode == 3
    assert calls == [[temp_file()]]


def test_compile_without_compiler_raises(tmp_path, monkeypatch):
    def missing(args, **kwargs):
        raise FileNotFoundError("rustc")

    monkeypatch.setattr(subprocess, "run", missing)
    with pytest.raises(RuntimeError):
        make(tmp_path, FINISHED).compile()


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "testFailure"\npath = "testFailure.rs"\n'
        'mode = "test"\nhint = "Hello!"\n\n'
        '[[exercises]]\nname = "compSuccess"\npath = "compSuccess.rs"\n'
        'mode = "compile"\nhint = ""\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["testFailure", "compSuccess"]
    assert [e.mode for e in exercises] == [Mode.TEST, Mode.COMPILE]
    assert exercises[0].path == Path("testFailure.rs")
    assert exercises[0].hint == "Hello!"


def test_load_exercises_rejects_unknown_mode(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "bench"\nhint = ""\n'
    )
    with pytest.raises(ValueError):
        load_exercises(info)


def test_load_exercises_rejects_missing_field(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "test"\n')
    with pytest.raises(ValueError):
        load_exercises(info)