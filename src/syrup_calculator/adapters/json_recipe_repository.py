"""Recipe repository backed by JSON files on disk."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from syrup_calculator.domain.recipes import (
    BaseRecipe,
    FlavorRecipe,
    RecipeIngredient,
    RecipeYield,
)
from syrup_calculator.domain.safety import CaffeineLimits, SafetyLimits
from syrup_calculator.services.catalog import RecipeRepository


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class IngredientRecord(_Record):
    """Ingredient entry in a recipe file."""

    ingredient_id: str = Field(alias="ingredientId")
    amount: float

    def to_domain(self) -> RecipeIngredient:
        return RecipeIngredient(ingredient_id=self.ingredient_id, amount=self.amount)


class YieldRecord(_Record):
    """Yield block of a base recipe file."""

    syrup: float
    drink: float


class BaseRecipeRecord(_Record):
    """Base recipe file payload."""

    id: str
    name: str
    name_nl: str | None = Field(default=None, alias="nameNl")
    type: str
    yield_: YieldRecord = Field(alias="yield")
    ingredients: list[IngredientRecord]
    instructions: list[dict[str, Any]] = Field(default_factory=list)
    safety_checks: list[dict[str, Any]] = Field(
        default_factory=list, alias="safetyChecks"
    )

    def to_domain(self) -> BaseRecipe:
        return BaseRecipe(
            id=self.id,
            name=self.name,
            name_nl=self.name_nl,
            type=self.type,
            yield_=RecipeYield(syrup=self.yield_.syrup, drink=self.yield_.drink),
            ingredients=tuple(item.to_domain() for item in self.ingredients),
            instructions=tuple(self.instructions),
            safety_checks=tuple(self.safety_checks),
        )


class FlavorRecipeRecord(_Record):
    """Flavor recipe file payload."""

    id: str
    name: str
    name_nl: str | None = Field(default=None, alias="nameNl")
    profile: str
    profile_nl: str | None = Field(default=None, alias="profileNl")
    category: str | None = None
    caffeine_category: str | None = Field(default=None, alias="caffeineCategory")
    ingredients: list[IngredientRecord]
    compatible_bases: list[str] = Field(alias="compatibleBases")
    color: dict[str, Any] = Field(default_factory=dict)
    aging: dict[str, Any] = Field(default_factory=dict)

    def to_domain(self) -> FlavorRecipe:
        return FlavorRecipe(
            id=self.id,
            name=self.name,
            name_nl=self.name_nl,
            profile=self.profile,
            profile_nl=self.profile_nl,
            category=self.category,
            caffeine_category=self.caffeine_category,
            ingredients=tuple(item.to_domain() for item in self.ingredients),
            compatible_bases=frozenset(self.compatible_bases),
            color=self.color,
            aging=self.aging,
        )


class CaffeineLimitsRecord(_Record):
    """Caffeine block of the limits file."""

    max_per_serving_mg: float = Field(alias="maxPerServingMg")
    warning_threshold_mg: float = Field(alias="warningThresholdMg")


class SafetyLimitsRecord(_Record):
    """Safety limits file payload."""

    caffeine: CaffeineLimitsRecord
    banned_ingredients: list[str] = Field(
        default_factory=list, alias="bannedIngredients"
    )
    age_restriction: int | None = Field(default=None, alias="ageRestriction")

    def to_domain(self) -> SafetyLimits:
        return SafetyLimits(
            caffeine=CaffeineLimits(
                max_per_serving_mg=self.caffeine.max_per_serving_mg,
                warning_threshold_mg=self.caffeine.warning_threshold_mg,
            ),
            banned_ingredients=frozenset(self.banned_ingredients),
            age_restriction=self.age_restriction,
        )


@dataclass
class JsonRecipeRepository(RecipeRepository):
    """Reads ``bases/``, ``flavors/`` and ``safety/limits.json`` under a root."""

    data_dir: Path

    def list_bases(self) -> list[BaseRecipe]:
        """Return every base recipe in file name order."""
        return [
            BaseRecipeRecord.model_validate_json(path.read_bytes()).to_domain()
            for path in self._files("bases")
        ]

    def list_flavors(self) -> list[FlavorRecipe]:
        """Return every flavor recipe in file name order."""
        return [
            FlavorRecipeRecord.model_validate_json(path.read_bytes()).to_domain()
            for path in self._files("flavors")
        ]

    def load_limits(self) -> SafetyLimits:
        """Return the parsed limits file."""
        path = self.data_dir / "safety" / "limits.json"
        return SafetyLimitsRecord.model_validate_json(path.read_bytes()).to_domain()

    def _files(self, folder: str) -> list[Path]:
        directory = self.data_dir / folder
        if not directory.is_dir():
            return []
        return sorted(directory.glob("*.json"))
