"""Turns a stock snapshot into a recipe, or into a typed error."""

import logging

from kitchen.config import Config
from kitchen.domain.errors import EmptyStockError, GenerationFailure
from kitchen.domain.llm_service import LLMService
from kitchen.domain.markup import restrict_markup, strip_code_fences
from kitchen.domain.models import ErrorKind, GenerationRequest, GenerationResult, Recipe
from kitchen.domain.prompts import GenerateRecipePrompt


logger = logging.getLogger(__name__)


class RecipeService:
    def __init__(self, config: Config, llm: LLMService | None = None) -> None:
        self.config = config
        self.llm = LLMService(config) if llm is None else llm

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        try:
            html = await self._generate(request)
        except GenerationFailure as e:
            log = logger.error if e.kind is ErrorKind.missing_credential else logger.warning
            log("Recipe generation failed (%s): %s", e.kind.value, e.message)
            return e.to_result()
        logger.info("Generated recipe from %d ingredients", len(request))
        return Recipe(html=html)

    async def _generate(self, request: GenerationRequest) -> str:
        if not request.ingredients:
            raise EmptyStockError()
        self.llm.ensure_configured()

        prompt = GenerateRecipePrompt(request.ingredients)
        text = await self.llm.complete(str(prompt))

        html = strip_code_fences(text)
        if self.config.strict_markup:
            html = restrict_markup(html)
        return html

    async def close(self) -> None:
        await self.llm.close()
