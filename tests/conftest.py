"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from syrup_calculator.config import Settings
from syrup_calculator.containers import AppContainer, build_container
from syrup_calculator.domain.recipes import (
    BaseRecipe,
    CalculationTarget,
    FlavorRecipe,
    RecipeIngredient,
    RecipeYield,
)
from syrup_calculator.domain.safety import CaffeineLimits, SafetyLimits
from syrup_calculator.services.catalog import RecipeRepository


def make_base(
    ingredients: list[tuple[str, float]] | None = None,
    syrup: float = 1000,
    drink: float = 5000,
    base_id: str = "test-base",
) -> BaseRecipe:
    return BaseRecipe(
        id=base_id,
        name="Test Base",
        type="classic",
        yield_=RecipeYield(syrup=syrup, drink=drink),
        ingredients=tuple(
            RecipeIngredient(ingredient_id=ingredient_id, amount=amount)
            for ingredient_id, amount in (
                ingredients
                if ingredients is not None
                else [("caffeine", 1.6), ("sugar", 500)]
            )
        ),
    )


def make_flavor(
    ingredients: list[tuple[str, float]] | None = None,
    compatible_bases: tuple[str, ...] = ("test-base",),
    flavor_id: str = "test-flavor",
) -> FlavorRecipe:
    return FlavorRecipe(
        id=flavor_id,
        name="Test Flavor",
        profile="Test Profile",
        ingredients=tuple(
            RecipeIngredient(ingredient_id=ingredient_id, amount=amount)
            for ingredient_id, amount in (
                ingredients if ingredients is not None else [("flavor-1", 10)]
            )
        ),
        compatible_bases=frozenset(compatible_bases),
        color={"type": "natural", "description": "Clear"},
        aging={"recommended": 0, "optional": False},
    )


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository that counts loads."""

    bases: list[BaseRecipe] = field(default_factory=list)
    flavors: list[FlavorRecipe] = field(default_factory=list)
    limits: SafetyLimits = field(
        default_factory=lambda: SafetyLimits(
            caffeine=CaffeineLimits(max_per_serving_mg=200, warning_threshold_mg=150),
            banned_ingredients=frozenset({"ephedrine"}),
            age_restriction=16,
        )
    )
    loads: int = 0

    def list_bases(self) -> list[BaseRecipe]:
        self.loads += 1
        return list(self.bases)

    def list_flavors(self) -> list[FlavorRecipe]:
        self.loads += 1
        return list(self.flavors)

    def load_limits(self) -> SafetyLimits:
        self.loads += 1
        return self.limits


@pytest.fixture
def base() -> BaseRecipe:
    return make_base()


@pytest.fixture
def flavor() -> FlavorRecipe:
    return make_flavor()


@pytest.fixture
def target() -> CalculationTarget:
    return CalculationTarget(volume=250, target_caffeine=80, serving_size=250)


@pytest.fixture
def limits() -> SafetyLimits:
    return SafetyLimits(
        caffeine=CaffeineLimits(max_per_serving_mg=200, warning_threshold_mg=150),
        banned_ingredients=frozenset({"ephedrine", "dmaa"}),
        age_restriction=16,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def recipe_repository(
    base: BaseRecipe, flavor: FlavorRecipe
) -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository(
        bases=[base, make_base(ingredients=[("sugar", 600)], base_id="plain")],
        flavors=[
            flavor,
            make_flavor(
                ingredients=[("ephedrine", 1)],
                compatible_bases=("test-base",),
                flavor_id="banned-flavor",
            ),
        ],
    )


@pytest.fixture
def container(
    settings: Settings, recipe_repository: InMemoryRecipeRepository
) -> AppContainer:
    return build_container(settings, repository=recipe_repository)
