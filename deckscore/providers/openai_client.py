import asyncio
import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from ..errors import ConfigurationError, ProviderError
from .base import AIProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(AIProvider):
    name = 'openai'

    def __init__(
        self,
        api_key: Optional[str],
        model: str = 'gpt-4o-mini',
        temperature: float = 0.3,
        max_tokens: int = 8192,
        timeout: float = 90.0,
    ):
        if not api_key:
            raise ConfigurationError('OPENAI_API_KEY environment variable is required')

        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    async def analyze(self, system_prompt: str, user_content: str) -> str:
        kwargs = {
            'model': self.model,
            'messages': [{'role': 'system', 'content': system_prompt}, {'role': 'user', 'content': user_content}],
            'temperature': self.temperature,
            'max_tokens': self.max_tokens,
        }
        if 'gpt-4' in self.model:
            kwargs['response_format'] = {'type': 'json_object'}

        try:
            response = await asyncio.to_thread(self.client.chat.completions.create, **kwargs)
        except OpenAIError as e:
            logger.error(f'OpenAI API error: {str(e)}')
            raise ProviderError(f'AI service error: {str(e)}') from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise ProviderError('OpenAI response text is empty')
        return content
