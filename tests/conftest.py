import json
from types import SimpleNamespace

import pytest

from api.services.diagnosis import DiagnosisService
from core import config

PNG_DATA_URL = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="


def make_report(probabilities, report="Findings are described below."):
    """Build a structured diagnosis payload with one entry per probability"""
    return json.dumps(
        {
            "diagnoses": [
                {
                    "condition": f"Condition {index}",
                    "probability": probability,
                    "attentionArea": {"x": 50, "y": 40, "radius": 10},
                }
                for index, probability in enumerate(probabilities)
            ],
            "radiologistReport": report,
        }
    )


class FakeCompletions:
    """Replays canned answers for chat.completions.create and records every call"""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        message = SimpleNamespace(role="assistant", content=response)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])

    @property
    def verification_calls(self):
        return [call for call in self.calls if "response_format" not in call]

    @property
    def diagnosis_calls(self):
        return [call for call in self.calls if "response_format" in call]


class FakeClient:
    def __init__(self, responses):
        self.completions = FakeCompletions(responses)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def close(self):
        self.closed = True


@pytest.fixture
def settings(tmp_path):
    return config.Settings(api_key="test-key", log_dir=str(tmp_path / "logs"))


@pytest.fixture
def unconfigured_settings(tmp_path):
    return config.Settings(api_key="", log_dir=str(tmp_path / "logs"))


@pytest.fixture
def make_service(settings):
    """Factory returning (service, fake client) for a list of canned answers"""

    def factory(responses, service_settings=None):
        client = FakeClient(responses)
        service = DiagnosisService(settings=service_settings or settings, client=client)
        return service, client

    return factory
