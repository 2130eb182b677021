import pytest

from domain.llm_service import LLMService
from domain.models import (
    IngredientEnvelope,
    RatioGroupsEnvelope,
    RatioSuggestionsEnvelope,
    RecipeEnvelope,
)
from tests.fakes import (
    FakeOracle,
    analyze_ratio,
    parse_ingredient,
    parse_recipe,
    suggest_ratios,
)


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle(
        {
            RecipeEnvelope: parse_recipe,
            IngredientEnvelope: parse_ingredient,
            RatioSuggestionsEnvelope: suggest_ratios,
            RatioGroupsEnvelope: analyze_ratio,
        }
    )


@pytest.fixture
def llm(oracle: FakeOracle) -> LLMService:
    return LLMService(oracle)
