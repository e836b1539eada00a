"""Error taxonomy shared by every build stage.

Each error carries a ``kind`` naming its category and enough context (path,
line, message) for the user to locate the offending source file. Stages that
attempt several items collect individual failures into a
:class:`BuildErrorGroup` so one run reports every problem.
"""

from __future__ import annotations

import errno
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class BuildError(Exception):
    """Base class for failures raised while building a site."""

    kind: typ.ClassVar[str] = "build_error"

    def describe(self) -> str:
        """Return a one-line, user-facing description of the failure."""
        return str(self)


class FileError(BuildError):
    """Raised when the filesystem cannot be read or written."""

    kind = "file_error"

    def __init__(self, reason: str, path: Path | str, line: int = 0) -> None:
        self.reason = reason
        self.path = str(path)
        self.line = line
        super().__init__(f"{self.path}: {reason}")

    @classmethod
    def from_os_error(cls, exc: OSError, path: Path | str) -> FileError:
        """Build a FileError from ``exc``, preferring its symbolic errno name."""
        code = errno.errorcode.get(exc.errno) if exc.errno is not None else None
        reason = code.lower() if code else (exc.strerror or str(exc))
        return cls(reason, path)

    def describe(self) -> str:
        return f"{self.path}:{self.line}: {self.reason}"


class InvalidTemplateError(BuildError):
    """Raised when a template cannot be parsed or its helpers resolved."""

    kind = "invalid_template"

    def __init__(self, message: str, path: Path | str, line: int) -> None:
        self.message = message
        self.path = str(path)
        self.line = line
        super().__init__(f"{self.path}:{line}: {message}")

    def describe(self) -> str:
        return f"{self.path}:{self.line}: {self.message}"


class SystemBuildError(BuildError):
    """Raised when an environment precondition of the build is unmet."""

    kind = "system_error"


class BuildErrorGroup(BuildError):
    """Several failures collected from one multi-item stage."""

    kind = "child_tasks"

    def __init__(self, stage: str, errors: cabc.Sequence[BuildError]) -> None:
        self.stage = stage
        self.errors = list(errors)
        super().__init__(f"{stage}: {len(self.errors)} errors")

    def describe(self) -> str:
        lines = [f"{self.stage} failed with {len(self.errors)} errors:"]
        lines.extend(f"  - {error.describe()}" for error in self.errors)
        return "\n".join(lines)


def raise_collected(stage: str, errors: cabc.Sequence[BuildError]) -> None:
    """Raise the collected ``errors`` for ``stage``, if there are any.

    A single error is raised as-is; several are wrapped in a
    :class:`BuildErrorGroup`.
    """
    if not errors:
        return
    if len(errors) == 1:
        raise errors[0]
    raise BuildErrorGroup(stage, errors)


__all__ = [
    "BuildError",
    "BuildErrorGroup",
    "FileError",
    "InvalidTemplateError",
    "SystemBuildError",
    "raise_collected",
]
