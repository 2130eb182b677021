import asyncio
from typing import Callable

from pydantic import BaseModel

from domain.models import (
    IngredientData,
    IngredientEnvelope,
    RatioGroups,
    RatioGroupsEnvelope,
    RatioSpec,
    RatioSuggestions,
    RatioSuggestionsEnvelope,
    RecipeData,
    RecipeEnvelope,
)


type Responder = Callable[[str], BaseModel | None]


class FakeOracle:
    """Answers each schema with a scripted responder, keyed by schema type."""

    def __init__(
        self, responders: dict[type[BaseModel], Responder] | None = None
    ) -> None:
        self.responders = {} if responders is None else responders
        self.calls: list[tuple[type[BaseModel], str]] = []
        self.delays: dict[str, float] = {}

    async def complete[T: BaseModel](
        self,
        *,
        instructions: str,
        input: str,
        schema: type[T],
    ) -> T | None:
        self.calls.append((schema, input))
        await asyncio.sleep(self.delays.get(input, 0))
        respond = self.responders.get(schema)
        if respond is None:
            return None
        return respond(input)  # pyright: ignore[reportReturnType]

    def inputs(self, schema: type[BaseModel]) -> list[str]:
        return [i for s, i in self.calls if s is schema]


COOKIES = """Simple Cookies
2 cups flour
1 cup sugar
1 cup butter, softened
2 large eggs
1/2 teaspoon salt

Cream butter and sugar
Beat in eggs
Mix in flour and salt
Bake 10 minutes"""


NOT_A_RECIPE = "not a recipe at all"


COOKIE_RECIPE = RecipeData(
    name="Simple Cookies",
    ingredients=[
        "2 cups flour",
        "1 cup sugar",
        "1 cup butter, softened",
        "2 large eggs",
        "1/2 teaspoon salt",
    ],
    instructions=[
        "Cream butter and sugar",
        "Beat in eggs",
        "Mix in flour and salt",
        "Bake 10 minutes",
    ],
)


COOKIE_INGREDIENTS = {
    "2 cups flour": IngredientData(
        quantity="2",
        unit="cups",
        product="flour",
        mass_expression="2 cup * 120 g/cup",
    ),
    "1 cup sugar": IngredientData(
        quantity="1",
        unit="cup",
        product="sugar",
        mass_expression="1 cup * 200 g/cup",
    ),
    "1 cup butter, softened": IngredientData(
        quantity="1",
        unit="cup",
        product="butter",
        preparation="softened",
        mass_expression="1 cup * 227 g/cup",
    ),
    "2 large eggs": IngredientData(
        quantity="2",
        unit="large",
        product="eggs",
        mass_expression="2 * 50 g",
    ),
    "1/2 teaspoon salt": IngredientData(
        quantity="1/2",
        unit="teaspoon",
        product="salt",
        mass_expression="not an expression",
    ),
}


FLOUR_SUGAR = RatioSpec(name="flour:sugar", description="Flour to sugar by mass")
FAT_FLOUR = RatioSpec(name="fat:flour", description="Butter and eggs to flour")


def parse_recipe(text: str) -> RecipeEnvelope:
    if text == COOKIES:
        return RecipeEnvelope(data=COOKIE_RECIPE)
    return RecipeEnvelope(error="This is not a recipe.")


def parse_ingredient(line: str) -> IngredientEnvelope:
    if line in COOKIE_INGREDIENTS:
        return IngredientEnvelope(data=COOKIE_INGREDIENTS[line])
    return IngredientEnvelope(error=f"Not an ingredient: {line}")


def suggest_ratios(listing: str) -> RatioSuggestionsEnvelope:
    return RatioSuggestionsEnvelope(
        data=RatioSuggestions(ratios=[FLOUR_SUGAR, FAT_FLOUR])
    )


def analyze_ratio(msg: str) -> RatioGroupsEnvelope:
    if msg.startswith(f"Ratio: {FLOUR_SUGAR.name}\n"):
        return RatioGroupsEnvelope(data=RatioGroups(numerator=[1], denominator=[2]))
    return RatioGroupsEnvelope(data=RatioGroups(numerator=[3, 4], denominator=[1]))
