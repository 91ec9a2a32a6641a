# parsentry

parsentry finds the source files in a repository that are worth a security
review. It walks a directory tree, keeps files whose extension belongs to a
supported language, and leaves out paths matched by the repository's
`.gitignore` and files whose names look like tests.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Usage

Everything lives in the `parsentry.repo` module.

```python
from pathlib import Path
from parsentry.repo import RepoOps

repo = RepoOps(Path("path/to/project"))

# Supported files, filtered by .gitignore patterns and test-file exclusions
for path in repo.get_relevant_files():
    print(path)

# Every supported file under a path (or a single supported file), unfiltered
files = repo.get_files_to_analyze(Path("path/to/project/src"))
```

### `RepoOps`

`RepoOps(repo_path)` reads the repository's `.gitignore` when it is created.
An unreadable or undecodable `.gitignore` is treated as empty.

- `get_relevant_files()` walks the repository root recursively (entries in
  each directory in sorted order) and returns every file with a supported
  extension that `should_exclude_path` does not reject. If walking fails with
  an `OSError`, a message is written to standard error and the files found so
  far are returned.
- `get_files_to_analyze(analyze_path=None)` returns every file with a
  supported extension under `analyze_path`, without applying any exclusions.
  When `analyze_path` is a file, it is returned alone if its extension is
  supported, otherwise an empty list. With `None`, the repository root is
  used. A path that does not exist raises `FileNotFoundError`.
- `should_exclude_path(path)` is true when the path, taken relative to the
  repository root, matches one of the `.gitignore` patterns, or when the
  lower-cased file name contains `test_` or `conftest`. Paths outside the
  repository root are never excluded.
- `RepoOps.matches_gitignore_pattern(path, pattern)` (a static method)
  applies one pattern to a relative path. Leading `/` is stripped from both.
  - `*.log` matches any path ending in `.log`
  - `build/*` matches any path starting with `build/`
  - `node_modules` (no slash) matches the path itself or any of its segments
  - `src/main.rs` (with a slash) matches that path or anything beneath it

```python
RepoOps.matches_gitignore_pattern("app/node_modules/package.json", "node_modules")  # True
RepoOps.matches_gitignore_pattern("app/modules/package.json", "node_modules")       # False
```

Negation (`!pattern`), character classes and `**` are not supported.

### Other names in `parsentry.repo`

- `read_gitignore(repo_path)` returns the stripped, non-empty lines of
  `repo_path/.gitignore` that do not start with `#`, or an empty list when the
  file does not exist.
- `LanguageExclusions` is a frozen dataclass holding `file_patterns`, the
  file-name substrings that exclude a file.
- `SUPPORTED_EXTENSIONS` is the set of recognised extensions:
  `py`, `js`, `jsx`, `ts`, `tsx`, `rs`, `go`, `java`, `rb`, `c`, `h`, `cpp`,
  `cxx`, `cc`, `hpp`, `hxx`, `tf`, `hcl`, `yml`, `yaml`, `sh`, `bash`, `php`,
  `php3`, `php4`, `php5`, `phtml`. Extensions are compared case-insensitively.
- `DEFAULT_EXCLUDED_NAME_PARTS` is `("test_", "conftest")`.

## What this package does not do

parsentry only selects files. It does not parse source code, look up
definitions or references, match security patterns against file contents,
run any analysis or produce reports, and it does not clone repositories.
There is no command-line tool; use it as a library.

## Running the tests

```
pip install .[test]
pytest
```