import logging
import os
from typing import Protocol

import httpx
import openai
from pydantic import BaseModel, ValidationError


logger = logging.getLogger(__name__)


TIMEOUT = 60 * 2
DEFAULT_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-2024-08-06")


class StructuredCompletion(Protocol):
    """Prompt plus schema in, validated data out.

    Returns None when nothing parseable came back.
    """

    async def complete[T: BaseModel](
        self,
        *,
        instructions: str,
        input: str,
        schema: type[T],
    ) -> T | None:
        ...


def openai_client_factory(timeout: float = TIMEOUT) -> openai.AsyncClient:
    return openai.AsyncClient(http_client=httpx.AsyncClient(timeout=timeout))


class OpenAICompletion:
    def __init__(
        self,
        openai_client: openai.AsyncClient | None = None,
        *,
        model: str | None = None,
    ) -> None:
        self.openai_client = (
            openai_client_factory() if openai_client is None else openai_client
        )
        self.model = DEFAULT_MODEL if model is None else model

    async def complete[T: BaseModel](
        self,
        *,
        instructions: str,
        input: str,
        schema: type[T],
    ) -> T | None:
        try:
            completion = await self.openai_client.chat.completions.parse(
                model=self.model,
                messages=[
                    {"role": "developer", "content": instructions},
                    {"role": "user", "content": input},
                ],
                response_format=schema,
            )
        except (openai.OpenAIError, ValidationError) as e:
            logger.warning("Completion for %s failed: %r", schema.__name__, e)
            return None

        message = completion.choices[0].message
        if message.refusal:
            logger.warning(
                "Completion for %s refused: %s", schema.__name__, message.refusal
            )
        return message.parsed

    async def close(self) -> None:
        await self.openai_client.close()
