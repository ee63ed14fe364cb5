"""Environment-driven settings for e2e runs.

Values are resolved at call time so tests can override them with
monkeypatch. Conventional defaults apply when a variable is unset.

Environment variables:
    SCAFFOLD_E2E_BIN: scaffolding binary under test (default: kubebuilder)
    SCAFFOLD_E2E_FILE_MODE: octal mode for rewritten files (default: 0644)
"""

from __future__ import annotations

import os

_DEFAULT_BIN_NAME = "kubebuilder"
_DEFAULT_FILE_MODE = 0o644


def binary_name() -> str:
    """Return the name of the scaffolding binary used by the tests."""
    return os.environ.get("SCAFFOLD_E2E_BIN") or _DEFAULT_BIN_NAME


def file_mode() -> int:
    """Return the permission bits applied to files rewritten by a splice."""
    raw = os.environ.get("SCAFFOLD_E2E_FILE_MODE")
    if not raw:
        return _DEFAULT_FILE_MODE
    try:
        mode = int(raw, 8)
    except ValueError:
        raise ValueError(f"SCAFFOLD_E2E_FILE_MODE is not an octal mode: {raw!r}") from None
    if not 0 <= mode <= 0o777:
        raise ValueError(f"SCAFFOLD_E2E_FILE_MODE out of range: {raw!r}")
    return mode
