from .base import AIProvider
from .gemini_client import GeminiProvider
from .openai_client import OpenAIProvider
from .openrouter_client import OpenRouterProvider
from .registry import PROVIDERS, get_provider

__all__ = ['AIProvider', 'GeminiProvider', 'OpenAIProvider', 'OpenRouterProvider', 'PROVIDERS', 'get_provider']
