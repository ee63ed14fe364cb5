"""End-to-end test support for scaffolding frameworks.

Scenario code uses these helpers to name test resources, read command
output, and edit freshly scaffolded source files the way a user would:

    insert_code(path, "import (", '\n\t"errors"')
    uncomment_code(path, "//+kubebuilder:webhook", "//")
    content = ensure_exist_and_replace(content, "// TODO(user)", "...")

Edits are addressed by literal marker text, never by pattern.
"""

__version__ = "0.1.0"
