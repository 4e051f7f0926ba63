import re

from ..errors import MalformedAIResponseError

_FENCE_OPEN = re.compile(r'^```[a-zA-Z]*\s*\n?')
_FENCE_CLOSE = re.compile(r'\n?```\s*$')


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if the whole response is fenced"""
    cleaned = text.strip()
    if cleaned.startswith('```'):
        cleaned = _FENCE_OPEN.sub('', cleaned, count=1)
        cleaned = _FENCE_CLOSE.sub('', cleaned, count=1)
    return cleaned.strip()


def extract_json_object(text: str) -> str:
    """Return the substring between the first '{' and the last '}' of a model response"""
    cleaned = strip_code_fence(text or '')

    start_idx = cleaned.find('{')
    end_idx = cleaned.rfind('}')
    if start_idx == -1 or end_idx == -1 or end_idx < start_idx:
        raise MalformedAIResponseError('AI response does not contain a JSON object', raw_response=text)

    return cleaned[start_idx : end_idx + 1]
