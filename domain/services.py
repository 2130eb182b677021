"""Compare a batch of recipes by the ratios between their ingredients.

Each stage fans out over the batch and waits for every task before the next
stage starts. Failures stay in their slot of the output and never abort
sibling work.
"""

import asyncio
import logging
from typing import Sequence

from domain.llm_service import LLMService
from domain.models import (
    ComparisonResult,
    EnrichedRecipe,
    Failure,
    ParsedRecipe,
    RatioResult,
    RatioSpec,
    RecipeResult,
)


logger = logging.getLogger(__name__)


async def enrich_recipe(recipe: ParsedRecipe, *, llm: LLMService) -> RecipeResult:
    if isinstance(recipe, Failure):
        return recipe
    ingredients = await asyncio.gather(
        *(llm.parse_ingredient(line) for line in recipe.ingredients)
    )
    return EnrichedRecipe(
        name=recipe.name,
        ingredients=list(ingredients),
        instructions=recipe.instructions,
    )


async def analyze_recipe(
    recipe: RecipeResult,
    ratios: Sequence[RatioSpec],
    *,
    llm: LLMService,
) -> RecipeResult:
    if isinstance(recipe, Failure):
        return recipe
    results = await asyncio.gather(
        *(llm.analyze_ratio(recipe.ingredients, ratio) for ratio in ratios)
    )
    analyzed: dict[str, RatioResult] = {
        ratio.name: result
        for ratio, result in zip(ratios, results)
        if result is not None
    }
    return recipe.with_ratios(analyzed)


async def compare_recipes(
    recipe_texts: Sequence[str],
    *,
    llm: LLMService,
) -> ComparisonResult:
    logger.info("Extracting %d recipes", len(recipe_texts))
    parsed = await asyncio.gather(*(llm.parse_recipe(t) for t in recipe_texts))

    enriched = await asyncio.gather(*(enrich_recipe(r, llm=llm) for r in parsed))
    succeeded = [r for r in enriched if isinstance(r, EnrichedRecipe)]
    logger.info("Parsed %d of %d recipes", len(succeeded), len(enriched))

    ratios = await llm.suggest_ratios(succeeded)
    logger.info("Analyzing ratios: %s", ", ".join(r.name for r in ratios) or "none")

    recipes = await asyncio.gather(
        *(analyze_recipe(r, ratios, llm=llm) for r in enriched)
    )
    return ComparisonResult(recipes=list(recipes), ratios_to_analyze=ratios)
