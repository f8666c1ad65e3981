# utilkit

A handful of small, dependency-free helpers: a path type with filesystem
operations, a string join, and a scope-exit callback guard.

## Installation

```
pip install utilkit
```

## Paths and the filesystem

`utilkit.filesystem.Path` holds a path string that uses the platform's own
separator: both `/` and `\` are turned into it when the path is built.
Iterating over a `Path` yields its components; two paths are equal when
their strings are equal.

```python
from utilkit.filesystem import Path, create_directories, remove_all, remove_extension

p = Path("foo") / "bar" / "baz.yml"
print(p.string())          # foo/bar/baz.yml on POSIX
print(p.extension())       # .yml
print(p.parent_path())     # foo/bar
print(p.filename())        # baz.yml
print(remove_extension(Path("foo.txt.compress"), 2))  # foo

create_directories(Path("out") / "nested")
remove_all(Path("out"))
```

Joining an absolute path replaces the left-hand side: on POSIX,
`Path("foo") / "/bar"` is `/bar`. On Windows a path such as `C:\bar` also
counts as absolute.

`Path` methods: `string()`, `empty()`, `is_absolute()`, `exists()`,
`is_directory()`, `is_regular_file()`, `file_size()`, `parent_path()`,
`filename()` and `extension()`.

Module functions:

- `exists(p)`, `is_directory(p)` and `is_regular_file(p)` check the filesystem.
- `file_size(p)` returns the size of a file in bytes, and raises `OSError`
  (`IsADirectoryError` for a directory) when there is no file to measure.
- `create_directories(p)` creates every missing directory along `p` and
  returns whether `p` is now a directory.
- `remove(p)` removes a file or an empty directory and returns whether it succeeded.
- `remove_all(p)` removes a file, or a directory and everything in it, and
  returns whether it succeeded.
- `remove_extension(file_path, n_times=1)` strips up to `n_times` trailing extensions.
- `temp_directory_path()` returns `$TMPDIR`, or `/tmp` when that is unset or
  empty; on Windows it returns the system temporary directory.
- `create_temp_directory(base_name, parent_path=None)` creates a new directory
  named `base_name` followed by six random letters and digits, inside
  `parent_path` (the temporary directory by default, created first if
  missing), and returns its path. It raises `OSError` on failure.
- `current_path()` returns the working directory.

## Joining values

```python
from utilkit.join import join

join([1, 2, 3], ", ")   # "1, 2, 3"
join(["a", "b"])        # "ab"
```

Each value is turned into a string with `str()`. A `delim` of `None` joins
with nothing in between.

## Running code on scope exit

```python
from utilkit.scope_exit import make_scope_exit

with make_scope_exit(lambda: print("cleanup")) as guard:
    ...
    # guard.cancel() would stop the callback from running
```

`make_scope_exit(callback)` returns a `ScopeExit` context manager. The
callback runs once when the `with` block ends, even when the block raises
(the exception is not suppressed), unless `cancel()` has been called.

## What it does not do

This is a library only: it has no command-line tool. It does not follow or
resolve symbolic links in paths, does not normalise `.` or `..` components,
and has no support for loading shared libraries or querying the running
process.

## Tests

```
pip install -e ".[test]"
pytest
```