from abc import ABC, abstractmethod


class AIProvider(ABC):
    """A generative-AI backend: system prompt plus user content in, raw response text out"""

    name: str = ''
    model: str = ''

    @abstractmethod
    async def analyze(self, system_prompt: str, user_content: str) -> str:
        """Send one request and return the model's raw text; failures raise ProviderError"""
