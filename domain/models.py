from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Failure(_Model):
    error: str

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


# Schemas requested from the model.


class RecipeData(_Model):
    name: str
    ingredients: list[str]
    instructions: list[str]


class IngredientData(_Model):
    quantity: str | None = None
    unit: str | None = None
    product: str | None = None
    preparation: str | None = None
    notes: str | None = None
    mass_expression: str | None = Field(
        default=None,
        description=(
            "An expression which evaluates to the mass of the ingredient, "
            "e.g. '2.25 cup * 120 g/cup'. Do not evaluate it."
        ),
    )


class RatioSpec(_Model):
    name: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}


class RatioSuggestions(_Model):
    ratios: list[RatioSpec]


class RatioGroups(_Model):
    numerator: list[int]
    denominator: list[int]


# Envelopes: the model either fills `data` or explains itself in `error`.


class RecipeEnvelope(_Model):
    data: RecipeData | None = None
    error: str | None = None


class IngredientEnvelope(_Model):
    data: IngredientData | None = None
    error: str | None = None


class RatioSuggestionsEnvelope(_Model):
    data: RatioSuggestions | None = None
    error: str | None = None


class RatioGroupsEnvelope(_Model):
    data: RatioGroups | None = None
    error: str | None = None


# Pipeline results.


class Ingredient(IngredientData):
    original_text: str
    mass_in_grams: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


type ParsedIngredient = Ingredient | Failure
type ParsedRecipe = RecipeData | Failure


class RatioResult(_Model):
    ratio_value: float | None
    numerator_ingredients: list[Ingredient]
    denominator_ingredients: list[Ingredient]

    def to_dict(self) -> dict[str, Any]:
        return {
            "ratioValue": self.ratio_value,
            "numeratorIngredients": [i.to_dict() for i in self.numerator_ingredients],
            "denominatorIngredients": [
                i.to_dict() for i in self.denominator_ingredients
            ],
        }


class EnrichedRecipe(_Model):
    name: str
    ingredients: list[ParsedIngredient]
    instructions: list[str]
    ratios: dict[str, RatioResult] = Field(default_factory=dict)

    def with_ratios(self, ratios: dict[str, RatioResult]) -> "EnrichedRecipe":
        return self.model_copy(update={"ratios": ratios})

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": list(self.instructions),
            "ratios": {name: r.to_dict() for name, r in self.ratios.items()},
        }


type RecipeResult = EnrichedRecipe | Failure


class ComparisonResult(_Model):
    recipes: list[RecipeResult]
    ratios_to_analyze: list[RatioSpec]

    def to_dict(self) -> dict[str, Any]:
        return {
            "recipes": [r.to_dict() for r in self.recipes],
            "ratiosToAnalyze": [r.to_dict() for r in self.ratios_to_analyze],
        }
