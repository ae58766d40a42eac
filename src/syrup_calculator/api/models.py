"""Pydantic models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from syrup_calculator.domain.recipes import BaseRecipe, FlavorRecipe
from syrup_calculator.services.recipes import RecipeCalculation


class CalculateRequest(BaseModel):
    """Calculate request payload."""

    base_id: str
    flavor_id: str
    volume: float
    target_caffeine: float = Field(description="Caffeine in mg for the whole volume")
    serving_size: float = 250


class YieldOut(BaseModel):
    syrup: float
    drink: float


class BaseOut(BaseModel):
    """Base recipe summary."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: str
    yield_: YieldOut = Field(alias="yield")

    @classmethod
    def from_domain(cls, base: BaseRecipe) -> "BaseOut":
        return cls(
            id=base.id,
            name=base.name,
            type=base.type,
            yield_=YieldOut(syrup=base.yield_.syrup, drink=base.yield_.drink),
        )


class FlavorOut(BaseModel):
    """Flavor recipe summary."""

    id: str
    name: str
    profile: str
    compatible_bases: list[str]

    @classmethod
    def from_domain(cls, flavor: FlavorRecipe) -> "FlavorOut":
        return cls(
            id=flavor.id,
            name=flavor.name,
            profile=flavor.profile,
            compatible_bases=sorted(flavor.compatible_bases),
        )


class IngredientOut(BaseModel):
    id: str
    amount: float
    unit: str = "g"
    source: str


class SafetyOut(BaseModel):
    """Safety verdict payload."""

    passed: bool
    errors: list[str]
    warnings: list[str]
    banned_ingredients: list[str]


class CalculateResponse(BaseModel):
    """Scaled recipe with its safety verdict."""

    base_id: str
    flavor_id: str
    volume: float
    syrup_volume: float
    water_volume: float
    total_caffeine_mg: float
    caffeine_per_serving_mg: float
    ingredients: list[IngredientOut]
    safety: SafetyOut

    @classmethod
    def from_domain(cls, calculation: RecipeCalculation) -> "CalculateResponse":
        recipe = calculation.recipe
        return cls(
            base_id=calculation.base.id,
            flavor_id=calculation.flavor.id,
            volume=recipe.volume,
            syrup_volume=recipe.syrup_volume,
            water_volume=recipe.water_volume,
            total_caffeine_mg=recipe.total_caffeine_mg,
            caffeine_per_serving_mg=recipe.caffeine_per_serving_mg,
            ingredients=[
                IngredientOut(id=item.id, amount=item.amount, source=item.source)
                for item in recipe.ingredients
            ],
            safety=SafetyOut(
                passed=calculation.safety.passed,
                errors=list(calculation.safety.errors),
                warnings=list(calculation.safety.warnings),
                banned_ingredients=list(calculation.safety.banned_ingredients),
            ),
        )
