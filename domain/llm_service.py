import logging
from typing import Sequence

from domain import units
from domain.aopenai import OpenAICompletion, StructuredCompletion
from domain.models import (
    EnrichedRecipe,
    Failure,
    Ingredient,
    IngredientEnvelope,
    ParsedIngredient,
    ParsedRecipe,
    RatioGroupsEnvelope,
    RatioResult,
    RatioSpec,
    RatioSuggestionsEnvelope,
    RecipeEnvelope,
)
from domain.prompts import (
    ANALYZE_RATIO_PROMPT,
    PARSE_INGREDIENT_PROMPT,
    PARSE_RECIPE_PROMPT,
    SUGGEST_RATIOS_PROMPT,
)
from domain.ratios import ratio_result


logger = logging.getLogger(__name__)


FAILED_TO_PARSE = "Failed to parse"


def format_recipes(recipes: Sequence[EnrichedRecipe]) -> str:
    blocks: list[str] = []
    for recipe in recipes:
        lines = [f"## {recipe.name}"]
        lines.extend(
            f"- {i.original_text}"
            for i in recipe.ingredients
            if isinstance(i, Ingredient)
        )
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_ingredients(ingredients: Sequence[ParsedIngredient]) -> str:
    return "\n".join(
        f"{n}. {i.original_text if isinstance(i, Ingredient) else '(unparsed)'}"
        for n, i in enumerate(ingredients, start=1)
    )


def unique_ratios(ratios: Sequence[RatioSpec]) -> list[RatioSpec]:
    seen: set[str] = set()
    unique: list[RatioSpec] = []
    for ratio in ratios:
        if ratio.name in seen:
            logger.info("Dropping duplicate ratio %r", ratio.name)
            continue
        seen.add(ratio.name)
        unique.append(ratio)
    return unique


class LLMService:
    def __init__(self, oracle: StructuredCompletion | None = None) -> None:
        self.oracle = OpenAICompletion() if oracle is None else oracle

    async def parse_recipe(self, recipe_text: str) -> ParsedRecipe:
        out = await self.oracle.complete(
            instructions=PARSE_RECIPE_PROMPT,
            input=recipe_text,
            schema=RecipeEnvelope,
        )
        if out is None:
            return Failure(error=FAILED_TO_PARSE)
        if out.error:
            return Failure(error=out.error)
        if out.data is None:
            return Failure(error=FAILED_TO_PARSE)
        return out.data

    async def parse_ingredient(self, ingredient: str) -> ParsedIngredient:
        out = await self.oracle.complete(
            instructions=PARSE_INGREDIENT_PROMPT,
            input=ingredient,
            schema=IngredientEnvelope,
        )
        if out is None:
            return Failure(error=FAILED_TO_PARSE)
        if out.error:
            return Failure(error=out.error)
        if out.data is None:
            return Failure(error=FAILED_TO_PARSE)

        data = out.data
        mass = (
            None
            if data.mass_expression is None
            else units.evaluate(data.mass_expression)
        )
        return Ingredient(
            **data.model_dump(),
            original_text=ingredient,
            mass_in_grams=mass,
        )

    async def suggest_ratios(
        self,
        recipes: Sequence[EnrichedRecipe],
    ) -> list[RatioSpec]:
        """Ratios worth comparing across `recipes`. Empty when none are found."""
        if not recipes:
            return []

        out = await self.oracle.complete(
            instructions=SUGGEST_RATIOS_PROMPT,
            input=format_recipes(recipes),
            schema=RatioSuggestionsEnvelope,
        )
        if out is None or out.data is None:
            if out is not None and out.error:
                logger.info("No ratios suggested: %s", out.error)
            return []
        return unique_ratios(out.data.ratios)

    async def analyze_ratio(
        self,
        ingredients: Sequence[ParsedIngredient],
        ratio: RatioSpec,
    ) -> RatioResult | None:
        msg = (
            f"Ratio: {ratio.name}\n"
            f"Description: {ratio.description}\n\n"
            f"Ingredients:\n{format_ingredients(ingredients)}"
        )
        out = await self.oracle.complete(
            instructions=ANALYZE_RATIO_PROMPT,
            input=msg,
            schema=RatioGroupsEnvelope,
        )
        if out is None or out.data is None:
            if out is not None and out.error:
                logger.info("Could not analyze ratio %r: %s", ratio.name, out.error)
            return None
        return ratio_result(out.data, ingredients)
