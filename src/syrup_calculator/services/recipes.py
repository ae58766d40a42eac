"""Calculate-and-validate flow for one recipe request."""

import logging
from dataclasses import dataclass

from syrup_calculator.domain.recipes import (
    BaseRecipe,
    CalculationTarget,
    FlavorRecipe,
    ScaledRecipe,
)
from syrup_calculator.domain.safety import SafetyReport
from syrup_calculator.services.calculator import RecipeCalculator
from syrup_calculator.services.catalog import RecipeCatalogService
from syrup_calculator.services.safety import SafetyValidator

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipeCalculation:
    """Scaled recipe together with its safety verdict."""

    base: BaseRecipe
    flavor: FlavorRecipe
    recipe: ScaledRecipe
    safety: SafetyReport


@dataclass
class RecipeService:
    """Resolves recipes, scales them and checks the result."""

    catalog: RecipeCatalogService
    calculator: RecipeCalculator
    validator: SafetyValidator

    def calculate(
        self, base_id: str, flavor_id: str, target: CalculationTarget
    ) -> RecipeCalculation:
        """Scale a base+flavor pair and validate the per-serving dose."""
        base = self.catalog.get_base(base_id)
        flavor = self.catalog.get_flavor(flavor_id)
        self.catalog.ensure_compatible(base, flavor)

        recipe = self.calculator.calculate(base, flavor, target)
        safety = self.validator.validate(
            recipe.caffeine_per_serving_mg,
            recipe.ingredient_ids(),
            self.catalog.get_limits(),
        )
        if not safety.passed:
            _logger.warning(
                "Recipe %s+%s failed safety checks: %s",
                base_id,
                flavor_id,
                "; ".join(safety.errors),
            )
        return RecipeCalculation(
            base=base, flavor=flavor, recipe=recipe, safety=safety
        )
