"""Dependency container wiring."""

from dataclasses import dataclass

from syrup_calculator.adapters.json_recipe_repository import JsonRecipeRepository
from syrup_calculator.config import Settings
from syrup_calculator.services.cache import InMemoryCache
from syrup_calculator.services.calculator import RecipeCalculator
from syrup_calculator.services.catalog import RecipeCatalogService, RecipeRepository
from syrup_calculator.services.recipes import RecipeService
from syrup_calculator.services.safety import SafetyValidator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: RecipeCatalogService
    recipe_service: RecipeService


def build_container(
    settings: Settings | None = None, repository: RecipeRepository | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_service = RecipeCatalogService(
        repository=repository or JsonRecipeRepository(resolved_settings.data_dir),
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.catalog_ttl_seconds,
        debug=resolved_settings.debug,
    )
    recipe_service = RecipeService(
        catalog=catalog_service,
        calculator=RecipeCalculator(
            missing_caffeine_policy=resolved_settings.missing_caffeine_policy,
            debug=resolved_settings.debug,
        ),
        validator=SafetyValidator(),
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        recipe_service=recipe_service,
    )
