import asyncio

import pytest
from fastapi.testclient import TestClient

from app.backend import main
from conftest import StubProvider, build_pptx
from deckscore.config import AnalyzerSettings
from deckscore.deck_analyzer import DeckAnalyzer, rule_check_report
from deckscore.errors import ConfigurationError, ProviderError


@pytest.fixture
def client():
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()


def use_provider(provider):
    main.app.dependency_overrides[main.get_analyzer] = lambda: DeckAnalyzer(provider)


def upload(client, path, file_name, data):
    return client.post(path, files={'file': (file_name, data, 'application/octet-stream')})


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json() == {'status': 'ok'}


def test_analyze_returns_camel_case_result(client, sample_pptx, ai_response):
    provider = StubProvider(ai_response)
    use_provider(provider)

    response = upload(client, '/api/v1/decks/analyze', 'acme.pptx', sample_pptx)

    assert response.status_code == 200
    body = response.json()
    assert body['deckQualityScore'] == 72
    assert body['grade'] == 'B-'
    assert body['ruleChecks']['slideCount'] == 3
    assert body['schemaVersion'] == 1
    assert len(body['dimensions']) == 12
    assert len(provider.calls) == 1


def test_unsupported_format_is_415(client):
    use_provider(StubProvider('{}'))

    response = upload(client, '/api/v1/decks/analyze', 'notes.txt', b'some notes')

    assert response.status_code == 415
    assert response.json()['error'] == 'UNSUPPORTED_FORMAT'
    assert '.txt' in response.json()['message']


def test_unreadable_document_is_422(client):
    use_provider(StubProvider('{}'))

    response = upload(client, '/api/v1/decks/analyze', 'deck.pdf', b'not a pdf at all')

    assert response.status_code == 422
    assert response.json()['error'] == 'UNREADABLE_DOCUMENT'


def test_empty_document_is_422(client):
    provider = StubProvider('{}')
    use_provider(provider)

    response = upload(client, '/api/v1/decks/analyze', 'deck.pptx', build_pptx([]))

    assert response.status_code == 422
    assert response.json()['error'] == 'EMPTY_DOCUMENT'
    assert provider.calls == []


def test_provider_failure_is_502(client, sample_pptx):
    use_provider(StubProvider(error=ProviderError('AI service error: upstream down')))

    response = upload(client, '/api/v1/decks/analyze', 'acme.pptx', sample_pptx)

    assert response.status_code == 502
    assert response.json()['error'] == 'AI_PROVIDER_ERROR'


def test_malformed_ai_response_is_502(client, sample_pptx):
    use_provider(StubProvider('no json here'))

    response = upload(client, '/api/v1/decks/analyze', 'acme.pptx', sample_pptx)

    assert response.status_code == 502
    assert response.json()['error'] == 'MALFORMED_AI_RESPONSE'


def test_missing_configuration_is_503_without_details(client, sample_pptx):
    def broken_analyzer():
        raise ConfigurationError('OPENROUTER_API_KEY environment variable is required')

    main.app.dependency_overrides[main.get_analyzer] = broken_analyzer

    response = upload(client, '/api/v1/decks/analyze', 'acme.pptx', sample_pptx)

    assert response.status_code == 503
    assert 'OPENROUTER_API_KEY' not in response.text


def test_oversized_upload_is_413(client, sample_pptx, monkeypatch):
    use_provider(StubProvider('{}'))
    monkeypatch.setattr(main, 'SETTINGS', AnalyzerSettings(max_upload_mb=0))

    response = upload(client, '/api/v1/decks/analyze', 'acme.pptx', sample_pptx)

    assert response.status_code == 413


def test_rule_checks_endpoint_skips_the_ai(client, sample_pptx):
    response = upload(client, '/api/v1/decks/rule-checks', 'acme.pptx', sample_pptx)

    assert response.status_code == 200
    body = response.json()
    assert len(body['slides']) == 3
    assert body['ruleChecks']['hasQuantitativeData'] is True


def test_rule_checks_run_in_a_worker_thread(client, sample_pptx, monkeypatch):
    loops = []

    def recording_report(buffer, file_name):
        try:
            loops.append(asyncio.get_running_loop())
        except RuntimeError:
            loops.append(None)
        return rule_check_report(buffer, file_name)

    monkeypatch.setattr(main, 'rule_check_report', recording_report)

    response = upload(client, '/api/v1/decks/rule-checks', 'acme.pptx', sample_pptx)

    assert response.status_code == 200
    assert loops == [None]
