"""Domain models for syrup recipes and scaled results."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RecipeIngredient:
    """Ingredient amount in grams for one reference syrup batch."""

    ingredient_id: str
    amount: float


@dataclass(frozen=True)
class RecipeYield:
    """Volumes in ml a formulation was authored for."""

    syrup: float
    drink: float


@dataclass(frozen=True)
class BaseRecipe:
    """Master syrup formulation defining dilution and core ingredients."""

    id: str
    name: str
    type: str
    yield_: RecipeYield
    ingredients: tuple[RecipeIngredient, ...]
    instructions: tuple[Mapping[str, object], ...] = ()
    safety_checks: tuple[Mapping[str, object], ...] = ()
    name_nl: str | None = None


@dataclass(frozen=True)
class FlavorRecipe:
    """Additive ingredient profile layered onto a compatible base."""

    id: str
    name: str
    profile: str
    ingredients: tuple[RecipeIngredient, ...]
    compatible_bases: frozenset[str]
    color: Mapping[str, object] = field(default_factory=dict)
    aging: Mapping[str, object] = field(default_factory=dict)
    name_nl: str | None = None
    profile_nl: str | None = None
    category: str | None = None
    caffeine_category: str | None = None

    def is_compatible_with(self, base_id: str) -> bool:
        """Return True when the flavor may be combined with the base."""
        return base_id in self.compatible_bases


@dataclass(frozen=True)
class CalculationTarget:
    """User intent for one calculation."""

    volume: float
    target_caffeine: float
    serving_size: float


@dataclass(frozen=True)
class ScaledIngredient:
    """Scaled ingredient amount in grams."""

    id: str
    amount: float
    source: str


@dataclass(frozen=True)
class ScaledRecipe:
    """Result of scaling a base and flavor to a target volume."""

    volume: float
    syrup_volume: float
    water_volume: float
    ingredients: tuple[ScaledIngredient, ...]
    total_caffeine_mg: float
    caffeine_per_serving_mg: float

    def ingredient_ids(self) -> list[str]:
        """Return ingredient ids in emitted order."""
        return [ingredient.id for ingredient in self.ingredients]
