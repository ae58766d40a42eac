"""Recipe scaling with an independently targeted caffeine dose."""

import logging
from dataclasses import dataclass
from enum import StrEnum

from syrup_calculator.domain.recipes import (
    BaseRecipe,
    CalculationTarget,
    FlavorRecipe,
    RecipeIngredient,
    ScaledIngredient,
    ScaledRecipe,
)

CAFFEINE_MARKER = "caffeine"
SYNTHESIZED_CAFFEINE_ID = "caffeine-anhydrous"
_MG_PER_GRAM = 1000

_logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a calculation input is structurally invalid."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class MissingCaffeinePolicy(StrEnum):
    """What to do when a positive caffeine target has no caffeine ingredient."""

    REJECT = "reject"
    SYNTHESIZE = "synthesize"
    IGNORE = "ignore"


def is_caffeine(ingredient_id: str) -> bool:
    """Return True when an ingredient id denotes caffeine."""
    return CAFFEINE_MARKER in ingredient_id.lower()


@dataclass(frozen=True)
class RecipeCalculator:
    """Scales a base and flavor to a target volume and caffeine dose."""

    missing_caffeine_policy: MissingCaffeinePolicy = MissingCaffeinePolicy.REJECT
    debug: bool = False

    def calculate(
        self, base: BaseRecipe, flavor: FlavorRecipe, target: CalculationTarget
    ) -> ScaledRecipe:
        """Return a scaled recipe for the target volume and caffeine dose.

        The syrup:water split follows the base yield, every non-caffeine
        amount is multiplied by one scale factor, and the caffeine amount is
        set directly from ``target.target_caffeine`` (mg for the whole volume).
        """
        _validate(base, target)

        syrup_volume = target.volume * base.yield_.syrup / base.yield_.drink
        water_volume = target.volume - syrup_volume
        scale_factor = syrup_volume / base.yield_.syrup
        caffeine_g = target.target_caffeine / _MG_PER_GRAM

        ingredients: list[ScaledIngredient] = []
        caffeine_placed = False
        merged = [("base", item) for item in base.ingredients] + [
            ("flavor", item) for item in flavor.ingredients
        ]
        for source, item in merged:
            if not is_caffeine(item.ingredient_id):
                ingredients.append(_scaled(item, item.amount * scale_factor, source))
                continue
            # Only the first caffeine entry carries the dose.
            amount = 0.0 if caffeine_placed else caffeine_g
            ingredients.append(_scaled(item, amount, source))
            caffeine_placed = True

        if not caffeine_placed and target.target_caffeine > 0:
            caffeine_placed = self._handle_missing_caffeine(
                ingredients, caffeine_g, base, flavor
            )

        total_caffeine_mg = target.target_caffeine if caffeine_placed else 0.0
        result = ScaledRecipe(
            volume=target.volume,
            syrup_volume=syrup_volume,
            water_volume=water_volume,
            ingredients=tuple(ingredients),
            total_caffeine_mg=total_caffeine_mg,
            caffeine_per_serving_mg=(
                total_caffeine_mg / target.volume * target.serving_size
            ),
        )
        if self.debug:
            _logger.info(
                "Scaled %s+%s: volume=%s syrup=%s factor=%s caffeine_mg=%s",
                base.id,
                flavor.id,
                target.volume,
                syrup_volume,
                scale_factor,
                total_caffeine_mg,
            )
        return result

    def _handle_missing_caffeine(
        self,
        ingredients: list[ScaledIngredient],
        caffeine_g: float,
        base: BaseRecipe,
        flavor: FlavorRecipe,
    ) -> bool:
        """Apply the missing caffeine policy, returning True if a dose was placed."""
        if self.missing_caffeine_policy is MissingCaffeinePolicy.REJECT:
            raise InvalidInputError(
                "target_caffeine",
                f"{base.id}+{flavor.id} has no caffeine ingredient to dose",
            )
        if self.missing_caffeine_policy is MissingCaffeinePolicy.SYNTHESIZE:
            ingredients.append(
                ScaledIngredient(
                    id=SYNTHESIZED_CAFFEINE_ID, amount=caffeine_g, source="target"
                )
            )
            return True
        _logger.warning(
            "Caffeine target ignored: %s+%s has no caffeine ingredient",
            base.id,
            flavor.id,
        )
        return False


def _scaled(item: RecipeIngredient, amount: float, source: str) -> ScaledIngredient:
    return ScaledIngredient(id=item.ingredient_id, amount=amount, source=source)


def _validate(base: BaseRecipe, target: CalculationTarget) -> None:
    """Fail fast on inputs that would make the split meaningless."""
    if not target.volume > 0:
        raise InvalidInputError("volume", "must be greater than 0")
    if not base.yield_.syrup > 0:
        raise InvalidInputError("yield.syrup", "must be greater than 0")
    if not base.yield_.drink > base.yield_.syrup:
        raise InvalidInputError("yield.drink", "must be greater than yield.syrup")
    if not target.target_caffeine >= 0:
        raise InvalidInputError("target_caffeine", "must not be negative")
    if not target.serving_size > 0:
        raise InvalidInputError("serving_size", "must be greater than 0")
