import contextlib
import logging

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from app import config
from app.samples import SAMPLE_RECIPES
from domain.aopenai import OpenAICompletion, openai_client_factory
from domain.llm_service import LLMService
from domain.services import compare_recipes


CONFIG = config.Config()


logging.basicConfig(
    level=CONFIG.log_level,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


class CompareRecipesRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipe_texts: list[str]


def llm_service(app: Starlette) -> LLMService:
    """The app's `LLMService`, built on first use."""
    llm: LLMService | None = getattr(app.state, "llm", None)
    if llm is None:
        oracle = OpenAICompletion(
            openai_client_factory(CONFIG.openai_timeout),
            model=CONFIG.openai_model,
        )
        llm = app.state.llm = LLMService(oracle)
    return llm


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    yield
    llm: LLMService | None = getattr(app.state, "llm", None)
    if llm is not None and isinstance(llm.oracle, OpenAICompletion):
        await llm.oracle.close()


async def compare(request: Request) -> JSONResponse:
    try:
        body = CompareRecipesRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.info("Rejected comparison request: %d errors", e.error_count())
        return JSONResponse(
            {
                "detail": e.errors(
                    include_url=False, include_context=False, include_input=False
                )
            },
            status_code=422,
        )

    result = await compare_recipes(body.recipe_texts, llm=llm_service(request.app))
    return JSONResponse(result.to_dict())


async def sample_recipes(request: Request) -> JSONResponse:
    return JSONResponse(SAMPLE_RECIPES)


async def homepage(request: Request) -> HTMLResponse:
    return HTMLResponse(TEMPLATES.get_template("index.html").render())


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/api/compare-recipes", compare, methods=["POST"]),
        Route("/api/sample-recipes", sample_recipes, methods=["GET"]),
        Route("/{path:path}", homepage, methods=["GET"]),
    ],
    lifespan=lifespan,
)
