"""Fill in the TODOs of a scaffolded webhook file.

The scaffolded ``<kind>_webhook.go`` leaves defaulting and validation
bodies as ``// TODO(user)`` comments. ``implement_webhooks`` swaps them
for a minimal implementation driven by ``.spec.count`` so the e2e suite
can observe the webhooks rejecting and defaulting objects.
"""

from __future__ import annotations

import logging
from pathlib import Path

from scaffold_e2e.splice import ensure_exist_and_replace, read_content, write_content

logger = logging.getLogger(__name__)

_VALIDATE_COUNT = """if r.Spec.Count < 0 {
		return errors.New(".spec.count must >= 0")
	}"""

WEBHOOK_EDITS: list[tuple[str, str]] = [
    ("import (", 'import (\n\t"errors"'),
    (
        "// TODO(user): fill in your defaulting logic.",
        """if r.Spec.Count == 0 {
		r.Spec.Count = 5
	}""",
    ),
    ("// TODO(user): fill in your validation logic upon object creation.", _VALIDATE_COUNT),
    ("// TODO(user): fill in your validation logic upon object update.", _VALIDATE_COUNT),
]


def implement_webhooks(path: Path | str) -> None:
    """Apply WEBHOOK_EDITS to the file at ``path``.

    All edits are applied in memory first; the file is only rewritten
    when every marker was found.

    Raises:
        MarkerNotFoundError: If any marker is missing. The file is unchanged.
    """
    content = read_content(path)
    for match, replacement in WEBHOOK_EDITS:
        content = ensure_exist_and_replace(content, match, replacement)
    write_content(path, content)
    logger.debug("implemented webhooks in %s", path)
