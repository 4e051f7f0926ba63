"""
Gemini backend via the Google AI SDK
"""

import logging
from typing import Optional

import google.generativeai as genai

from ..errors import ConfigurationError, ProviderError
from .base import AIProvider

logger = logging.getLogger(__name__)


class GeminiProvider(AIProvider):
    name = 'gemini'

    def __init__(
        self,
        api_key: Optional[str],
        model: str = 'gemini-2.5-flash',
        temperature: float = 0.3,
        max_tokens: int = 8192,
        timeout: float = 90.0,
    ):
        if not api_key:
            raise ConfigurationError('Google AI API key is required. Set GEMINI_API_KEY environment variable.')

        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        genai.configure(api_key=api_key)

    async def analyze(self, system_prompt: str, user_content: str) -> str:
        model = genai.GenerativeModel(
            self.model,
            system_instruction=system_prompt,
            generation_config={'temperature': self.temperature, 'max_output_tokens': self.max_tokens},
        )

        try:
            response = await model.generate_content_async(user_content, request_options={'timeout': self.timeout})
            # .text raises ValueError when the candidate was blocked or has no parts
            text = response.text
        except Exception as e:
            logger.error(f'Gemini API error: {str(e)}')
            raise ProviderError(f'AI service error: {str(e)}') from e

        if not text or not text.strip():
            raise ProviderError('Gemini response text is empty')
        return text
