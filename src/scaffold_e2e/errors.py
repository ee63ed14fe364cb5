"""Exception types raised by the e2e helpers."""

from __future__ import annotations

from pathlib import Path


class MarkerNotFoundError(ValueError):
    """A required literal marker is absent from the content being edited."""

    def __init__(self, target: str, path: Path | str | None = None) -> None:
        self.target = target
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            msg = f"can't find {target!r} in {self.path}"
        else:
            msg = f"can't find {target!r}"
        super().__init__(msg)


class EntropyError(RuntimeError):
    """The random source failed while generating a suffix."""


class RecipeError(ValueError):
    """An edit recipe document is malformed."""
