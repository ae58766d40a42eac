"""Catalog of base recipes, flavors and safety limits."""

import logging
from dataclasses import dataclass
from typing import Protocol

from syrup_calculator.domain.recipes import BaseRecipe, FlavorRecipe
from syrup_calculator.domain.safety import SafetyLimits
from syrup_calculator.services.cache import Cache, get_or_load

_logger = logging.getLogger(__name__)


class RecipeNotFoundError(LookupError):
    """Raised when a recipe id is not in the catalog."""

    def __init__(self, kind: str, recipe_id: str) -> None:
        super().__init__(f"Unknown {kind} recipe: {recipe_id}")
        self.kind = kind
        self.recipe_id = recipe_id


class IncompatibleRecipeError(ValueError):
    """Raised when a flavor does not list the base as compatible."""

    def __init__(self, base_id: str, flavor_id: str) -> None:
        super().__init__(f"Flavor {flavor_id} is not compatible with base {base_id}")
        self.base_id = base_id
        self.flavor_id = flavor_id


class RecipeRepository(Protocol):
    """Storage interface for catalog records."""

    def list_bases(self) -> list[BaseRecipe]:
        """Return every base recipe."""

    def list_flavors(self) -> list[FlavorRecipe]:
        """Return every flavor recipe."""

    def load_limits(self) -> SafetyLimits:
        """Return the safety limits configuration."""


@dataclass
class RecipeCatalogService:
    """Read-only catalog lookups with caching."""

    repository: RecipeRepository
    cache: Cache
    ttl_seconds: int = 3600
    debug: bool = False

    def list_bases(self) -> list[BaseRecipe]:
        return get_or_load(
            self.cache, "catalog:bases", self.repository.list_bases, self.ttl_seconds
        )

    def list_flavors(self, base_id: str | None = None) -> list[FlavorRecipe]:
        """Return flavors, only those compatible with ``base_id`` when given."""
        flavors = get_or_load(
            self.cache,
            "catalog:flavors",
            self.repository.list_flavors,
            self.ttl_seconds,
        )
        if base_id is None:
            return flavors
        return [flavor for flavor in flavors if flavor.is_compatible_with(base_id)]

    def get_base(self, base_id: str) -> BaseRecipe:
        for base in self.list_bases():
            if base.id == base_id:
                return base
        raise RecipeNotFoundError("base", base_id)

    def get_flavor(self, flavor_id: str) -> FlavorRecipe:
        for flavor in self.list_flavors():
            if flavor.id == flavor_id:
                return flavor
        raise RecipeNotFoundError("flavor", flavor_id)

    def get_limits(self) -> SafetyLimits:
        return get_or_load(
            self.cache, "catalog:limits", self.repository.load_limits, self.ttl_seconds
        )

    def ensure_compatible(self, base: BaseRecipe, flavor: FlavorRecipe) -> None:
        """Raise if the flavor may not be layered onto the base."""
        if not flavor.is_compatible_with(base.id):
            if self.debug:
                _logger.info("Rejected pairing base=%s flavor=%s", base.id, flavor.id)
            raise IncompatibleRecipeError(base.id, flavor.id)

    def refresh(self) -> None:
        """Forget cached records so the next lookup reloads them."""
        self.cache.clear()
