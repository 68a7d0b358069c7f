import logging

import httpx
import openai
from openai.types.chat import ChatCompletionUserMessageParam

from kitchen.config import Config
from kitchen.domain.errors import MissingCredentialError, ProviderError


logger = logging.getLogger(__name__)


class LLMService:
    """Single shot chat completions against the configured provider."""

    def __init__(
        self,
        config: Config,
        openai_client: openai.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._openai_client = openai_client

    def ensure_configured(self) -> None:
        if not self.config.has_credential:
            raise MissingCredentialError()

    @property
    def openai_client(self) -> openai.AsyncClient:
        self.ensure_configured()
        if self._openai_client is None:
            self._openai_client = openai.AsyncClient(
                api_key=self.config.openai_api_key,
                base_url=self.config.openai_base_url,
                timeout=self.config.request_timeout,
                max_retries=0,
            )
        return self._openai_client

    async def complete(self, prompt: str) -> str:
        client = self.openai_client
        message: ChatCompletionUserMessageParam = {"role": "user", "content": prompt}

        try:
            resp = await client.chat.completions.create(
                model=self.config.core_model,
                messages=[message],
                max_tokens=self.config.max_tokens,
            )
        except openai.APIStatusError as e:
            raise ProviderError(e.message) from e
        except (openai.OpenAIError, httpx.HTTPError) as e:
            raise ProviderError(str(e) or "Failed to generate recipe") from e

        if not resp.choices:
            raise ProviderError("Provider returned no choices.")
        content = resp.choices[0].message.content
        if not content or not content.strip():
            raise ProviderError("Provider returned an empty recipe.")
        return content

    async def close(self) -> None:
        if self._openai_client is not None:
            await self._openai_client.close()
