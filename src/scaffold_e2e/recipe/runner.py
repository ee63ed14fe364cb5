"""Apply edit recipes to a scaffolded project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from scaffold_e2e.errors import MarkerNotFoundError, RecipeError
from scaffold_e2e.recipe.loader import EditStep, Recipe, check_step_file
from scaffold_e2e.splice import (
    ensure_exist_and_replace,
    insert_after,
    insert_code,
    read_content,
    replace_in_file,
    uncomment_block,
    uncomment_code,
)

logger = logging.getLogger(__name__)


@dataclass
class RecipeResult:
    """Outcome of applying a recipe."""

    recipe: str
    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    errors: list[dict] = field(default_factory=list)
    dry_run: bool = False

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Recipe {self.recipe}: {len(self.applied)} applied, {len(self.skipped)} skipped"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  step {e['step']} {e['file']}: {e['error']}")
        if self.dry_run:
            lines.append("[DRY RUN] No files were modified.")
        return "\n".join(lines)


def apply_recipe(
    recipe: Recipe,
    root: Path | str,
    dry_run: bool = False,
    stop_on_error: bool = True,
) -> RecipeResult:
    """Run every step of ``recipe`` against files under ``root``.

    Args:
        recipe: Loaded recipe.
        root: Project directory the step paths are relative to.
        dry_run: Replay the steps on in-memory copies of the files and
            write nothing. A step sees the edits of the steps before it,
            so a marker inserted by step 1 can be targeted by step 2.
        stop_on_error: Raise on the first failing step. When False,
            failures are recorded and the remaining steps still run.

    Returns:
        RecipeResult listing applied, skipped and failed steps.

    Raises:
        RecipeError: If a step file is absolute or contains ``..`` and
            ``stop_on_error`` is set.
    """
    base = Path(root)
    result = RecipeResult(recipe=recipe.name, dry_run=dry_run)
    buffers: dict[Path, str] = {}

    for i, step in enumerate(recipe.steps, 1):
        try:
            file_path = _step_path(base, step)
            if dry_run:
                changed = _simulate_step(step, file_path, buffers)
            else:
                changed = _run_step(step, file_path)
        except (ValueError, OSError) as e:
            if stop_on_error:
                raise
            result.errors.append({"step": i, "file": step.file, "error": str(e)})
            continue

        if changed:
            result.applied.append(step.describe())
        else:
            result.skipped.append(step.describe())

    logger.info(
        "recipe %s: %d applied, %d skipped, %d errors",
        recipe.name, len(result.applied), len(result.skipped), len(result.errors),
    )
    return result


def _step_path(base: Path, step: EditStep) -> Path:
    problem = check_step_file(step.file)
    if problem:
        raise RecipeError(problem)
    return base / step.file


def _run_step(step: EditStep, file_path: Path) -> bool:
    if step.op == "insert":
        insert_code(file_path, step.target, step.code)
        return True
    if step.op == "uncomment":
        return uncomment_code(file_path, step.target, step.prefix)
    replace_in_file(file_path, step.target, step.code)
    return True


def _simulate_step(step: EditStep, file_path: Path, buffers: dict[Path, str]) -> bool:
    if file_path not in buffers:
        buffers[file_path] = read_content(file_path)
    content = buffers[file_path]

    try:
        if step.op == "insert":
            updated = insert_after(content, step.target, step.code)
        elif step.op == "uncomment":
            updated = uncomment_block(content, step.target, step.prefix)
            if updated is None:
                return False
        else:
            updated = ensure_exist_and_replace(content, step.target, step.code)
    except MarkerNotFoundError:
        raise MarkerNotFoundError(step.target, file_path) from None

    buffers[file_path] = updated
    return True
