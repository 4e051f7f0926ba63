import logging
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.backend.config import CORS_ORIGINS, PROJECT_NAME, SETTINGS
from deckscore import (
    ConfigurationError,
    DeckAnalysisError,
    DeckAnalyzer,
    DocumentParseError,
    EmptyDocumentError,
    FullAnalysisResult,
    MalformedAIResponseError,
    ProviderError,
    UnsupportedFormatError,
)
from deckscore.deck_analyzer import rule_check_report

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title=PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

ERROR_STATUS = [
    (UnsupportedFormatError, 415, 'UNSUPPORTED_FORMAT'),
    (DocumentParseError, 422, 'UNREADABLE_DOCUMENT'),
    (EmptyDocumentError, 422, 'EMPTY_DOCUMENT'),
    (ConfigurationError, 503, 'SERVICE_UNAVAILABLE'),
    (ProviderError, 502, 'AI_PROVIDER_ERROR'),
    (MalformedAIResponseError, 502, 'MALFORMED_AI_RESPONSE'),
]

_analyzer: Optional[DeckAnalyzer] = None


def get_analyzer() -> DeckAnalyzer:
    """The analyzer is built once, on first use, from process settings"""
    global _analyzer
    if _analyzer is None:
        _analyzer = DeckAnalyzer.from_settings(SETTINGS)
    return _analyzer


@app.exception_handler(DeckAnalysisError)
async def deck_analysis_exception_handler(_: Request, exc: DeckAnalysisError):
    for error_type, status_code, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            break
    else:
        status_code, code = 500, 'ANALYSIS_FAILED'

    if isinstance(exc, ConfigurationError):
        # cause goes to the log only
        logger.error(f'AI provider is not configured: {str(exc)}')
        message = 'Analysis service is temporarily unavailable.'
    else:
        logger.warning(f'Deck analysis failed with {type(exc).__name__}: {str(exc)}')
        message = str(exc)

    return JSONResponse(status_code=status_code, content={'error': code, 'message': message})


async def read_upload(file: UploadFile) -> bytes:
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail='Uploaded file is empty')
    if len(content) > SETTINGS.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f'File size must be less than {SETTINGS.max_upload_mb}MB')
    return content


@app.get('/health')
def health():
    return {'status': 'ok'}


@app.post('/api/v1/decks/analyze', response_model=FullAnalysisResult)
async def analyze_deck_endpoint(file: UploadFile = File(...), analyzer: DeckAnalyzer = Depends(get_analyzer)):
    """Analyze an uploaded pitch deck with rule checks and the AI rubric"""
    content = await read_upload(file)
    return await analyzer.analyze_deck(content, file.filename or '')


@app.post('/api/v1/decks/rule-checks')
async def rule_checks_endpoint(file: UploadFile = File(...)):
    """Structural checks only, no AI call"""
    content = await read_upload(file)
    return await run_in_threadpool(rule_check_report, content, file.filename or '')
