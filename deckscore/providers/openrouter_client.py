import logging
from typing import Optional

import httpx

from ..errors import ConfigurationError, ProviderError
from .base import AIProvider

logger = logging.getLogger(__name__)


class OpenRouterProvider(AIProvider):
    name = 'openrouter'

    def __init__(
        self,
        api_key: Optional[str],
        model: str = 'anthropic/claude-3.5-haiku',
        temperature: float = 0.3,
        max_tokens: int = 8192,
        timeout: float = 90.0,
    ):
        if not api_key:
            raise ConfigurationError('OPENROUTER_API_KEY environment variable is required')

        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.base_url = 'https://openrouter.ai/api/v1'
        self.headers = {
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json',
            'X-Title': 'deckscore',
        }

    async def analyze(self, system_prompt: str, user_content: str) -> str:
        payload = {
            'model': self.model,
            'messages': [{'role': 'system', 'content': system_prompt}, {'role': 'user', 'content': user_content}],
            'temperature': self.temperature,
            'max_tokens': self.max_tokens,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(f'{self.base_url}/chat/completions', headers=self.headers, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error(f'OpenRouter API HTTP error: {str(e)}')
            raise ProviderError(f'AI service error: {str(e)}') from e
        except ValueError as e:
            logger.error(f'OpenRouter returned a non-JSON body: {str(e)}')
            raise ProviderError('AI service error: response body is not JSON') from e

        try:
            content = data['choices'][0]['message']['content']
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError('OpenRouter response has no message content') from e

        if not content or not content.strip():
            raise ProviderError('OpenRouter response text is empty')
        return content
