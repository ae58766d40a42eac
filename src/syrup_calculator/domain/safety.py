"""Safety limit and finding models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CaffeineLimits:
    """Caffeine thresholds per serving."""

    max_per_serving_mg: float
    warning_threshold_mg: float


@dataclass(frozen=True)
class SafetyLimits:
    """Regulatory limits a recipe is checked against."""

    caffeine: CaffeineLimits
    banned_ingredients: frozenset[str]
    age_restriction: int | None = None


@dataclass(frozen=True)
class SafetyReport:
    """Blocking errors and advisory warnings for one check."""

    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    banned_ingredients: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.errors
