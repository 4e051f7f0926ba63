from typing import Optional


class DeckAnalysisError(Exception):
    """Base exception for the deck analysis pipeline."""


class InputError(DeckAnalysisError):
    """The uploaded document cannot be analyzed as given."""


class UnsupportedFormatError(InputError):
    def __init__(self, extension: str):
        self.extension = extension
        shown = f'.{extension}' if extension else '(no extension)'
        super().__init__(f'Unsupported file type: {shown}. Only PDF and PPTX files are supported.')


class DocumentParseError(InputError):
    """The file has a supported extension but its contents could not be read."""


class EmptyDocumentError(InputError):
    def __init__(self, file_name: str = ''):
        self.file_name = file_name
        super().__init__(
            'No text could be extracted from the document. It may be a scanned or image-only file; '
            'export it again as a text-based PDF or PPTX.'
        )


class ConfigurationError(DeckAnalysisError):
    """AI provider selector or credentials are missing or invalid."""


class ProviderError(DeckAnalysisError):
    """The AI backend call failed or timed out."""


class MalformedAIResponseError(DeckAnalysisError):
    """The AI call succeeded but its payload holds no usable JSON object."""

    def __init__(self, message: str, raw_response: Optional[str] = None):
        self.raw_response = raw_response
        super().__init__(message)
