# drillkit

drillkit walks you through a list of small programming exercises. Each
exercise is a `.rs` source file that must either compile, or compile and pass
its tests. The runner checks them in the listed order, stops at the first one
that still needs work, and shows you where to pick up.

## Installing

```
pip install drillkit
```

Exercises are compiled with `rustc`, which must be on your `PATH`. Every
command first checks that `rustc --version` runs, and exits with status 1 if
it does not.

## Setting up an exercise directory

Run drillkit from a directory that holds an `info.toml` listing the exercises
in order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."

[[exercises]]
name = "tests1"
path = "exercises/tests/tests1.rs"
mode = "test"
hint = "Make the assertion true."
```

Every entry needs `name`, `path`, `mode` and `hint`. `mode` is `compile` for
exercises that only need to build, and `test` for exercises that are built
with `rustc --test` and whose tests must pass. The compiled binary is written
to `./temp_<pid>` in the current directory and removed afterwards.

Run outside such a directory, drillkit says so and exits with status 1.

## Commands

```
drillkit
```

With no subcommand, prints a welcome banner and then the contents of
`default_out.txt`, which must exist in the exercise directory.

```
drillkit verify        # alias: drillkit v
```

Checks every exercise in order and stops at the first that fails to compile,
fails its tests, or still carries an `I AM NOT DONE` marker. Exits with
status 1 if it stopped, 0 if every exercise is finished.

```
drillkit watch         # alias: drillkit w
```

Clears the screen and verifies once, then watches `./exercises` recursively.
When `.rs` files are created or modified (changes are gathered until two
seconds pass without another), it clears the screen and verifies again,
starting from the exercise whose path the changed file's path ends with.
Type `hint` and press Enter to see the hint for the exercise that is
currently failing; any other input is answered with `unknown command`.
Stop it with Ctrl-C.

```
drillkit run NAME      # alias: drillkit r NAME
```

Compiles and runs a `compile` exercise, printing its output, or compiles and
runs the tests of a `test` exercise. Exits with status 1 on a compile error,
a failing run or test, or an unknown name. `run` ignores the
`I AM NOT DONE` marker.

```
drillkit hint NAME     # alias: drillkit h NAME
```

Prints the hint for one exercise, or exits with status 1 if no exercise has
that name.

A missing or unknown subcommand argument is a usage error and exits with
status 1.

## The `I AM NOT DONE` marker

An exercise is pending while it has a line such as

```
// I AM NOT DONE
```

(one or two slashes, any amount of whitespace between the words). Even once
an exercise builds and passes, `verify` and `watch` treat it as pending while
the marker is present, and print the marker line with up to two lines on
either side so you can find it. Delete the line to move on.

## Using it from Python

```python
from drillkit.exercise import Done, Pending, load_exercises
from drillkit.verify import VerificationFailed, verify

exercises = load_exercises("info.toml")
for exercise in exercises:
    state = exercise.state()
    if isinstance(state, Pending):
        for line in state.context:
            print(line.number, line.line, line.important)

try:
    verify(exercises)
except VerificationFailed as failure:
    print("stopped at", failure.exercise)
```

- `drillkit.exercise` holds `Exercise` (with `compile`, `run`, `clean` and
  `state`), `Mode`, the states `Done` and `Pending`, `ContextLine`,
  `load_exercises` and `temp_file`.
- `drillkit.verify` holds `verify`, `test`, `prompt_for_completion` and
  `VerificationFailed`.
- `drillkit.run` holds `run` and `compile_and_run`.
- `drillkit.cli` holds `main`, `watch` and `rustc_exists`.

The `drillkit.exercises` package holds worked solutions for the exercise
topics as plain Python: `variables`, `functions`, `strings`, `collections`,
`errors` and `iterators`. They are not used by the runner.

## What drillkit does not do

drillkit does not ship any exercise files, `info.toml` or `default_out.txt`;
you supply the exercise directory. It does not install or manage `rustc`,
and it does not keep a record of your progress: where you stand is worked out
afresh on every run from the exercise files themselves.