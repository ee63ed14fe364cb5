"""Tests for filling in scaffolded webhook TODOs."""

import pytest

from scaffold_e2e.errors import MarkerNotFoundError
from scaffold_e2e.webhooks import WEBHOOK_EDITS, implement_webhooks


class TestImplementWebhooks:
    def test_fills_all_todos(self, project):
        path = project / "api" / "v1" / "captain_webhook.go"
        implement_webhooks(path)
        content = path.read_text()

        assert "TODO(user)" not in content
        assert 'import (\n\t"errors"\n\t"k8s.io/apimachinery/pkg/runtime"' in content
        assert "r.Spec.Count = 5" in content
        assert content.count('errors.New(".spec.count must >= 0")') == 2

    def test_missing_marker_leaves_file_unchanged(self, write_file):
        original = 'package v1\n\nimport (\n)\n\n// TODO(user): fill in your defaulting logic.\n'
        path = write_file(original, "partial_webhook.go")

        with pytest.raises(MarkerNotFoundError) as exc:
            implement_webhooks(path)
        assert "object creation" in str(exc.value)
        assert path.read_text() == original

    def test_second_run_fails(self, project):
        path = project / "api" / "v1" / "captain_webhook.go"
        implement_webhooks(path)
        with pytest.raises(MarkerNotFoundError):
            implement_webhooks(path)

    def test_edit_order_starts_with_import(self):
        assert WEBHOOK_EDITS[0][0] == "import ("
        assert len(WEBHOOK_EDITS) == 4
