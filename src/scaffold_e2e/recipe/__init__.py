"""Edit recipes: declarative splice sequences stored as YAML.

A recipe names the files of a scaffolded project and the edits a user
would make to them:

    name: memcached-operator
    steps:
      - op: insert
        file: api/v1/memcached_types.go
        target: "type MemcachedSpec struct {"
        code: "\\n\\tSize int32 `json:\\"size\\"`"
      - op: uncomment
        file: config/default/kustomization.yaml
        target: "#- ../webhook"
        prefix: "#"

Steps run in order against a project root.
"""

from scaffold_e2e.recipe.loader import EditStep, Recipe, load_recipe, parse_recipe
from scaffold_e2e.recipe.runner import RecipeResult, apply_recipe

__all__ = [
    "EditStep",
    "Recipe",
    "load_recipe",
    "parse_recipe",
    "RecipeResult",
    "apply_recipe",
]
