"""Text splicing for scaffolded source files.

Each file operation reads the whole file, edits the text in memory
relative to a literal marker and writes the whole file back. Only the
first occurrence of a marker is acted upon, except by
``ensure_exist_and_replace`` which rewrites every occurrence.

Missing markers:
- ``insert_code`` and ``replace_in_file`` raise MarkerNotFoundError.
- ``uncomment_code`` leaves the file untouched, so scenario setup can be
  re-run against an already edited project.

Files are decoded as UTF-8 with ``surrogateescape``: bytes that aren't
valid UTF-8 pass through an edit unchanged.

Nothing here locks the file; two splices racing on one path can lose
an edit.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from scaffold_e2e.errors import MarkerNotFoundError
from scaffold_e2e.paths import file_mode

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def read_content(path: Path | str) -> str:
    """Read a file's full text without newline translation."""
    with open(path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
        return f.read()


def write_content(path: Path | str, content: str) -> None:
    """Overwrite ``path`` with ``content``.

    The text goes to a sibling temp file which is renamed over the
    target, so a failed write never leaves a truncated file behind.
    Symlinks are followed: the file they point at is the one replaced.
    """
    target = Path(path).resolve()
    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            f.write(content)
        os.chmod(tmp_name, file_mode())
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def insert_after(content: str, target: str, code: str) -> str:
    """Return ``content`` with ``code`` spliced in after the first ``target``.

    Raises:
        MarkerNotFoundError: If ``target`` does not occur in ``content``.
    """
    idx = content.find(target)
    if idx < 0:
        raise MarkerNotFoundError(target)
    end = idx + len(target)
    return content[:end] + code + content[end:]


def uncomment_block(content: str, target: str, prefix: str) -> str | None:
    """Return ``content`` with ``prefix`` stripped from each line of ``target``.

    Returns None when ``target`` is absent.
    """
    idx = content.find(target)
    if idx < 0:
        return None
    block = "".join(_trim_prefix(line, prefix) + "\n" for line in target.split("\n"))
    return content[:idx] + block + content[idx + len(target):]


def _trim_prefix(line: str, prefix: str) -> str:
    if prefix and line.startswith(prefix):
        return line[len(prefix):]
    return line


def insert_code(path: Path | str, target: str, code: str) -> None:
    """Insert ``code`` right after the first occurrence of ``target``.

    Raises:
        MarkerNotFoundError: If ``target`` does not occur in the file.
        OSError: If the file can't be read or written.
    """
    content = read_content(path)
    try:
        updated = insert_after(content, target, code)
    except MarkerNotFoundError:
        raise MarkerNotFoundError(target, path) from None

    write_content(path, updated)
    logger.debug("inserted %d chars after %r in %s", len(code), target, path)


def uncomment_code(path: Path | str, target: str, prefix: str) -> bool:
    """Strip the comment ``prefix`` from each line of ``target`` in place.

    ``target`` may span several lines. Every uncommented line is written
    back with exactly one trailing newline.

    Returns:
        True if the block was found and rewritten, False if ``target``
        is absent (the file is left untouched).
    """
    updated = uncomment_block(read_content(path), target, prefix)
    if updated is None:
        logger.info("nothing to uncomment in %s: %r not found", path, target)
        return False

    write_content(path, updated)
    logger.debug("uncommented %d lines in %s", target.count("\n") + 1, path)
    return True


def ensure_exist_and_replace(content: str, match: str, replacement: str) -> str:
    """Replace every occurrence of ``match`` after checking it exists.

    Works on text only; the caller persists the result. Chaining several
    calls on one buffer and writing once keeps a half-applied edit set
    off disk.

    Raises:
        MarkerNotFoundError: Naming ``match`` if it isn't in ``content``.
    """
    if match not in content:
        raise MarkerNotFoundError(match)
    return content.replace(match, replacement)


def replace_in_file(path: Path | str, match: str, replacement: str) -> int:
    """Guarded replace of every ``match`` in a file.

    Returns:
        Number of occurrences replaced.
    """
    content = read_content(path)
    try:
        updated = ensure_exist_and_replace(content, match, replacement)
    except MarkerNotFoundError:
        raise MarkerNotFoundError(match, path) from None

    count = content.count(match)
    write_content(path, updated)
    logger.debug("replaced %d occurrence(s) of %r in %s", count, match, path)
    return count
