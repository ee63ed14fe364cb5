"""Load and validate edit recipe YAML files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath, PureWindowsPath

import yaml

from scaffold_e2e.errors import RecipeError

VALID_OPS = {"insert", "uncomment", "replace"}
DEFAULT_PREFIX = "//"


@dataclass
class EditStep:
    """One splice against one file of the project."""

    op: str
    file: str
    target: str
    code: str = ""
    prefix: str = DEFAULT_PREFIX

    def describe(self) -> str:
        first_line = self.target.split("\n", 1)[0]
        return f"{self.op} {self.file}: {first_line!r}"


@dataclass
class Recipe:
    """Ordered list of edit steps."""

    name: str
    steps: list[EditStep] = field(default_factory=list)

    def files(self) -> list[str]:
        """Files touched by the recipe, in first-use order."""
        seen: list[str] = []
        for step in self.steps:
            if step.file not in seen:
                seen.append(step.file)
        return seen

    def summary(self) -> str:
        lines = [f"Recipe {self.name}: {len(self.steps)} steps, {len(self.files())} files"]
        for i, step in enumerate(self.steps, 1):
            lines.append(f"  {i}. {step.describe()}")
        return "\n".join(lines)


def load_recipe(path: Path | str) -> Recipe:
    """Read and parse a recipe YAML file.

    Args:
        path: Path to the recipe.

    Returns:
        Parsed Recipe. ``name`` defaults to the file stem.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        RecipeError: If the document isn't a valid recipe.
    """
    recipe_path = Path(path)
    with open(recipe_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise RecipeError(f"recipe at {recipe_path} is not a YAML mapping")

    return parse_recipe(data, default_name=recipe_path.stem)


def parse_recipe(data: dict, default_name: str = "recipe") -> Recipe:
    """Build a Recipe from an already-parsed mapping."""
    raw_steps = data.get("steps")
    if not isinstance(raw_steps, list):
        raise RecipeError("recipe 'steps' must be a list")

    steps = [_parse_step(i, raw) for i, raw in enumerate(raw_steps, 1)]
    return Recipe(name=str(data.get("name") or default_name), steps=steps)


def _parse_step(index: int, raw) -> EditStep:
    if not isinstance(raw, dict):
        raise RecipeError(f"step {index}: expected a mapping, got {type(raw).__name__}")

    op = raw.get("op")
    if op not in VALID_OPS:
        raise RecipeError(
            f"step {index}: invalid op {op!r} (valid: {', '.join(sorted(VALID_OPS))})"
        )

    missing = [k for k in ("file", "target") if not raw.get(k)]
    if missing:
        raise RecipeError(f"step {index}: missing {', '.join(missing)}")

    for key in ("file", "target", "code", "prefix"):
        if key in raw and raw[key] is not None and not isinstance(raw[key], str):
            raise RecipeError(f"step {index}: '{key}' must be a string")

    problem = check_step_file(raw["file"])
    if problem:
        raise RecipeError(f"step {index}: {problem}")

    return EditStep(
        op=op,
        file=raw["file"],
        target=raw["target"],
        code=raw.get("code") or "",
        prefix=raw.get("prefix", DEFAULT_PREFIX) or "",
    )


def check_step_file(file: str) -> str | None:
    """Return why ``file`` can't name a file under the project root, or None.

    Step files must be relative and must not climb out with ``..``.
    """
    if PurePosixPath(file).is_absolute() or PureWindowsPath(file).is_absolute():
        return f"file {file!r} must be relative to the project root"
    if ".." in PurePosixPath(file.replace("\\", "/")).parts:
        return f"file {file!r} must not contain '..'"
    return None
