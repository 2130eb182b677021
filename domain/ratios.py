import logging
import math
from typing import Iterable, Sequence

from domain.models import Ingredient, ParsedIngredient, RatioGroups, RatioResult


logger = logging.getLogger(__name__)


def resolve_indices(
    indices: Iterable[int],
    ingredients: Sequence[ParsedIngredient],
) -> list[Ingredient]:
    """Ingredients at the 1-based `indices`.

    Indices out of range, or pointing at an ingredient which failed to parse,
    are dropped.
    """
    resolved: list[Ingredient] = []
    for index in indices:
        if not 1 <= index <= len(ingredients):
            logger.warning(
                "Dropping ingredient index %d, recipe has %d ingredients",
                index,
                len(ingredients),
            )
            continue
        ingredient = ingredients[index - 1]
        if not isinstance(ingredient, Ingredient):
            logger.warning("Dropping ingredient index %d, it failed to parse", index)
            continue
        resolved.append(ingredient)
    return resolved


def total_grams(ingredients: Iterable[Ingredient]) -> float:
    return sum(i.mass_in_grams or 0.0 for i in ingredients)


def ratio_value(
    numerator: Sequence[Ingredient],
    denominator: Sequence[Ingredient],
) -> float | None:
    if not (numerator and denominator):
        return None
    bottom = total_grams(denominator)
    if bottom == 0:
        # Nothing to divide by when no denominator ingredient has a known mass.
        return None
    value = total_grams(numerator) / bottom
    if not math.isfinite(value):
        logger.warning("Ratio out of range: %s", value)
        return None
    return value


def ratio_result(
    groups: RatioGroups,
    ingredients: Sequence[ParsedIngredient],
) -> RatioResult:
    numerator = resolve_indices(groups.numerator, ingredients)
    denominator = resolve_indices(groups.denominator, ingredients)
    return RatioResult(
        ratio_value=ratio_value(numerator, denominator),
        numerator_ingredients=numerator,
        denominator_ingredients=denominator,
    )
