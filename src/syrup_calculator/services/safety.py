"""Safety checks for caffeine dose and banned ingredients."""

from collections.abc import Iterable
from dataclasses import dataclass

from syrup_calculator.domain.safety import SafetyLimits, SafetyReport

HIGH_CAFFEINE_WARNING = "High caffeine content - monitor consumption"
BANNED_INGREDIENTS_ERROR = "Contains banned ingredients"

_AGE_PENALTY = 30
_CAFFEINE_PENALTY = 40
_INGREDIENT_PENALTY = 50


@dataclass(frozen=True)
class SafetyValidator:
    """Stateless rule evaluator over a caffeine dose and ingredient ids."""

    def validate(
        self, caffeine_mg: float, ingredient_ids: Iterable[str], limits: SafetyLimits
    ) -> SafetyReport:
        """Collect every applicable finding; ``errors`` empty means pass."""
        errors: list[str] = []
        warnings: list[str] = []

        if caffeine_mg > limits.caffeine.max_per_serving_mg:
            errors.append(
                "Caffeine exceeds safe serving limit "
                f"({limits.caffeine.max_per_serving_mg:g}mg)"
            )
        elif caffeine_mg > limits.caffeine.warning_threshold_mg:
            warnings.append(HIGH_CAFFEINE_WARNING)

        banned = _banned_ids(ingredient_ids, limits)
        if banned:
            errors.append(BANNED_INGREDIENTS_ERROR)

        return SafetyReport(
            errors=tuple(errors),
            warnings=tuple(warnings),
            banned_ingredients=banned,
        )

    def validate_age(self, age: int, limits: SafetyLimits) -> bool:
        """Return True when the age meets the configured restriction."""
        if limits.age_restriction is None:
            return True
        return age >= limits.age_restriction

    def compliance_score(
        self,
        age: int,
        caffeine_mg: float,
        ingredient_ids: Iterable[str],
        limits: SafetyLimits,
    ) -> int:
        """Score 0-100 with fixed penalties per failed check."""
        score = 100
        if not self.validate_age(age, limits):
            score -= _AGE_PENALTY
        if caffeine_mg > limits.caffeine.max_per_serving_mg:
            score -= _CAFFEINE_PENALTY
        if _banned_ids(ingredient_ids, limits):
            score -= _INGREDIENT_PENALTY
        return max(0, score)


def _banned_ids(ingredient_ids: Iterable[str], limits: SafetyLimits) -> tuple[str, ...]:
    """Return banned ids in first-seen order without duplicates."""
    found = dict.fromkeys(
        ingredient_id
        for ingredient_id in ingredient_ids
        if ingredient_id in limits.banned_ingredients
    )
    return tuple(found)
