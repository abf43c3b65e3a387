"""An inventory of materials and a book of recipes that turn some into others."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Material:
    """A named material held in the inventory."""

    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Recipe:
    """A numbered formula turning a list of materials into a list of products."""

    id: int
    materials: tuple
    products: tuple

    def __str__(self):
        return f"({self.id}) {' '.join(self.materials)} => {' '.join(self.products)}"


@dataclass
class ProductionResult:
    """The outcome of an attempt to produce a recipe.

    ``recipe`` is None when no recipe has the requested id; otherwise
    ``missing_materials`` lists what the inventory lacked, if anything.
    """

    recipe: Recipe | None = None
    missing_materials: list = field(default_factory=list)


class ProgramData:
    """The inventory of materials and the registered recipes.

    Creating and destroying a material is announced on ``out``.
    """

    def __init__(self, out=None):
        self.out = out
        self._materials = []
        self._recipes = []

    def _say(self, text):
        print(text, file=self.out if self.out is not None else sys.stdout)

    def _destroy(self, material):
        self._say(f"{material.name} was destroyed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def add_material(self, name):
        """Put a new material into the inventory and return it."""
        material = Material(name)
        self._materials.append(material)
        self._say(f"{material.name} was created")
        return material

    def materials(self):
        """The materials currently in the inventory, oldest first."""
        return list(self._materials)

    def register_recipe(self, materials, products):
        """Record a new recipe; ids are given in order starting from 1."""
        recipe = Recipe(len(self._recipes) + 1, tuple(materials), tuple(products))
        self._recipes.append(recipe)
        self._say(f"Recipe {recipe.id} has been registered")
        return recipe

    def doable_recipes(self):
        """Recipes whose every material name can be found in the inventory."""
        names = {material.name for material in self._materials}
        return [
            recipe
            for recipe in self._recipes
            if all(name in names for name in recipe.materials)
        ]

    def produce(self, recipe_id):
        """Try to make the recipe with the given id.

        Each material the recipe needs is taken from the inventory as it is
        found, even when others turn out to be missing. Products are added
        only when nothing was missing.
        """
        recipe = next((r for r in self._recipes if r.id == recipe_id), None)
        if recipe is None:
            self._say(f"Recipe {recipe_id} not found!")
            return ProductionResult(None, [])

        missing = []
        for name in recipe.materials:
            found = next((m for m in self._materials if m.name == name), None)
            if found is None:
                missing.append(name)
                continue
            self._materials.remove(found)
            self._destroy(found)

        if missing:
            return ProductionResult(recipe, missing)

        for product in recipe.products:
            self.add_material(product)
        return ProductionResult(recipe, [])

    def close(self):
        """Destroy every material left in the inventory."""
        remaining, self._materials = self._materials, []
        for material in remaining:
            self._destroy(material)