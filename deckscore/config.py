import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_PROVIDER = 'gemini'

DEFAULT_MODELS = {
    'gemini': 'gemini-2.5-flash',
    'openrouter': 'anthropic/claude-3.5-haiku',
    'openai': 'gpt-4o-mini',
}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f'{name} must be a number, got {value!r}')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f'{name} must be an integer, got {value!r}')


@dataclass(frozen=True)
class AnalyzerSettings:
    """Runtime configuration, resolved once at process start"""

    provider: str = DEFAULT_PROVIDER
    model: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    request_timeout: float = 90.0
    temperature: float = 0.3
    max_tokens: int = 8192
    max_upload_mb: int = 20

    @property
    def model_name(self) -> str:
        return self.model or DEFAULT_MODELS.get(self.provider, '')

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @classmethod
    def from_env(cls, dotenv: bool = True) -> 'AnalyzerSettings':
        if dotenv:
            load_dotenv()

        return cls(
            provider=(os.getenv('AI_PROVIDER') or DEFAULT_PROVIDER).strip().lower(),
            model=os.getenv('AI_MODEL') or None,
            gemini_api_key=os.getenv('GEMINI_API_KEY') or os.getenv('GOOGLE_AI_API_KEY') or None,
            openrouter_api_key=os.getenv('OPENROUTER_API_KEY') or None,
            openai_api_key=os.getenv('OPENAI_API_KEY') or None,
            request_timeout=_env_float('AI_REQUEST_TIMEOUT', 90.0),
            temperature=_env_float('AI_TEMPERATURE', 0.3),
            max_tokens=_env_int('AI_MAX_TOKENS', 8192),
            max_upload_mb=_env_int('MAX_UPLOAD_MB', 20),
        )
