import logging
from typing import Callable, Dict

from ..config import AnalyzerSettings
from ..errors import ConfigurationError
from .base import AIProvider
from .gemini_client import GeminiProvider
from .openai_client import OpenAIProvider
from .openrouter_client import OpenRouterProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[AnalyzerSettings], AIProvider]


def _gemini(settings: AnalyzerSettings) -> AIProvider:
    return GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.model_name,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.request_timeout,
    )


def _openrouter(settings: AnalyzerSettings) -> AIProvider:
    return OpenRouterProvider(
        api_key=settings.openrouter_api_key,
        model=settings.model_name,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.request_timeout,
    )


def _openai(settings: AnalyzerSettings) -> AIProvider:
    return OpenAIProvider(
        api_key=settings.openai_api_key,
        model=settings.model_name,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.request_timeout,
    )


PROVIDERS: Dict[str, ProviderFactory] = {
    'gemini': _gemini,
    'openrouter': _openrouter,
    'openai': _openai,
}


def get_provider(settings: AnalyzerSettings) -> AIProvider:
    """Build the single active provider named by settings.provider"""
    factory = PROVIDERS.get(settings.provider)
    if factory is None:
        known = ', '.join(sorted(PROVIDERS))
        raise ConfigurationError(f'Unknown AI provider: {settings.provider!r} (expected one of: {known})')

    provider = factory(settings)
    logger.info(f'Using AI provider {provider.name} with model {provider.model}')
    return provider
