"""Repository traversal: finding the source files worth analysing."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    {
        "py",
        "js",
        "jsx",
        "ts",
        "tsx",
        "rs",
        "go",
        "java",
        "rb",
        "c",
        "h",
        "cpp",
        "cxx",
        "cc",
        "hpp",
        "hxx",
        "tf",
        "hcl",
        "yml",
        "yaml",
        "sh",
        "bash",
        "php",
        "php3",
        "php4",
        "php5",
        "phtml",
    }
)

DEFAULT_EXCLUDED_NAME_PARTS: tuple[str, ...] = ("test_", "conftest")


@dataclass(frozen=True)
class LanguageExclusions:
    """Substrings that, when found in a lower-cased file name, exclude the file."""

    file_patterns: tuple[str, ...] = field(default_factory=tuple)


def read_gitignore(repo_path: str | os.PathLike[str]) -> list[str]:
    """Return the non-empty, non-comment lines of the repository's .gitignore."""
    gitignore_path = Path(repo_path) / ".gitignore"
    if not gitignore_path.exists():
        return []
    with gitignore_path.open(encoding="utf-8") as handle:
        stripped = (line.strip() for line in handle)
        return [line for line in stripped if line and not line.startswith("#")]


def _extension(path: Path) -> str | None:
    """Lower-cased extension without the dot, or None when the name has none."""
    suffix = path.suffix
    if not suffix:
        return None
    return suffix[1:].lower()


def _walk_files(directory: Path) -> Iterator[Path]:
    """Yield every non-directory entry below ``directory``, recursively."""
    if not directory.is_dir():
        return
    with os.scandir(directory) as entries:
        children = sorted(Path(entry.path) for entry in entries)
    for child in children:
        if child.is_dir():
            yield from _walk_files(child)
        else:
            yield child


class RepoOps:
    """Operations on a checked-out repository: file discovery and filtering."""

    def __init__(self, repo_path: str | os.PathLike[str]) -> None:
        self.repo_path = Path(repo_path)
        try:
            self.gitignore_patterns = read_gitignore(self.repo_path)
        except (OSError, UnicodeDecodeError):
            self.gitignore_patterns = []
        self.language_exclusions = LanguageExclusions(DEFAULT_EXCLUDED_NAME_PARTS)
        self.supported_extensions = SUPPORTED_EXTENSIONS

    def _is_supported(self, path: Path) -> bool:
        ext = _extension(path)
        return ext is not None and ext in self.supported_extensions

    def should_exclude_path(self, path: str | os.PathLike[str]) -> bool:
        """True when the path is ignored by .gitignore or by a file-name exclusion."""
        path = Path(path)
        try:
            relative = path.relative_to(self.repo_path)
        except ValueError:
            return False
        relative_str = relative.as_posix()

        if any(
            self.matches_gitignore_pattern(relative_str, pattern)
            for pattern in self.gitignore_patterns
        ):
            return True

        file_name = path.name.lower()
        if file_name and any(
            part in file_name for part in self.language_exclusions.file_patterns
        ):
            return True
        return False

    @staticmethod
    def matches_gitignore_pattern(path: str, pattern: str) -> bool:
        """Decide whether ``path`` matches a simplified .gitignore-style pattern."""
        pattern = pattern.lstrip("/")
        path = path.lstrip("/")

        if pattern.startswith("*"):
            return path.endswith(pattern[1:])
        if pattern.endswith("*"):
            return path.startswith(pattern[:-1])
        if "/" not in pattern:
            return path == pattern or pattern in path.split("/")
        return path == pattern or path.startswith(pattern + "/")

    def _collect(self, directory: Path, keep: Callable[[Path], bool]) -> list[Path]:
        return [path for path in _walk_files(directory) if keep(path)]

    def get_relevant_files(self) -> list[Path]:
        """Supported source files in the repository that are not excluded."""
        files: list[Path] = []
        try:
            for path in _walk_files(self.repo_path):
                if self._is_supported(path) and not self.should_exclude_path(path):
                    files.append(path)
        except OSError as exc:
            print(f"error while walking directory: {exc}", file=sys.stderr)
        return files

    def get_files_to_analyze(
        self, analyze_path: str | os.PathLike[str] | None = None
    ) -> list[Path]:
        """Supported files under ``analyze_path`` (default: the repository root).

        A single file is returned on its own when its extension is supported.
        Raises FileNotFoundError when the path does not exist.
        """
        target = Path(analyze_path) if analyze_path is not None else self.repo_path

        if target.is_file():
            return [target] if self._is_supported(target) else []
        if target.is_dir():
            return self._collect(target, self._is_supported)
        raise FileNotFoundError(f"analysis path does not exist: {target}")