"""Shared fixtures: fake Gemini clients and a TestClient with the limiter off."""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

SAMPLE_RESULT = {
    "overallStatus": "WARNING",
    "summary": "The project likely depends on an affected lodash release.",
    "generalAnalysis": {
        "score": 64,
        "findings": [
            "No lock file pinning transitive dependencies.",
            "Environment variables read without validation.",
            "Security policy file present.",
        ],
    },
    "supplyChainAttackAnalysis": {
        "vulnerable": True,
        "details": "lodash 4.17.22 appears in the inferred dependency tree.",
        "affectedPackages": [
            {"name": "lodash", "version": "4.17.22", "reason": "Within the compromised range."},
            {"name": "axios", "version": "1.7.0", "reason": "Pulled in by the HTTP layer."},
        ],
    },
}


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGenaiClient:
    """Stands in for google.genai.Client; only client.aio.models is used."""

    def __init__(self, text=None, error=None):
        self.models = FakeModels(text=text, error=error)
        self.aio = SimpleNamespace(models=self.models)


class RecordingAnalyzer:
    """Analyzer callable that records calls and returns canned results."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def __call__(self, repo_url):
        self.calls.append(repo_url)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def sample_payload():
    return json.loads(json.dumps(SAMPLE_RESULT))


@pytest.fixture
def sample_text(sample_payload):
    return json.dumps(sample_payload)


@pytest.fixture
def sample_result(sample_payload):
    from schemas import AnalysisResult

    return AnalysisResult.model_validate(sample_payload)


@pytest.fixture
def fake_genai():
    return FakeGenaiClient


@pytest.fixture
def app():
    import main

    main.limiter.enabled = False
    yield main.app
    main.app.dependency_overrides.clear()
    main.limiter.enabled = True


@pytest.fixture
def use_analyzer(app):
    """Install an analyzer for the routes and return it."""
    import main

    def install(analyzer):
        app.dependency_overrides[main.get_analyzer] = lambda: analyzer
        return analyzer

    return install


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
