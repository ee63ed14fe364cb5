"""Naming and command-output helpers for e2e scenarios."""

from __future__ import annotations

import random
import secrets
import string

from scaffold_e2e.errors import EntropyError

SUFFIX_ALPHABET = string.ascii_lowercase
SUFFIX_LENGTH = 4


def random_suffix(rng: random.Random | None = None) -> str:
    """Return a 4-letter lowercase suffix for unique resource names.

    Args:
        rng: Source of randomness. Defaults to the OS CSPRNG; pass a
            seeded ``random.Random`` for reproducible names.

    Returns:
        Four characters drawn independently from ``a``-``z``.

    Raises:
        EntropyError: If the random source fails.
    """
    source = rng if rng is not None else secrets.SystemRandom()
    try:
        return "".join(source.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"random source failed: {e}") from e


def get_non_empty_lines(output: str) -> list[str]:
    """Split command output on newlines, dropping empty elements."""
    return [line for line in output.split("\n") if line != ""]
