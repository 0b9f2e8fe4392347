import pandas as pd
import pytest
import requests


def records(rows: list) -> pd.DataFrame:
    """Build a records frame the way CSVParser would (object cells, NaN for absent)."""
    return pd.DataFrame(rows, dtype=object)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeHTTP:
    """Records every POST and answers with a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def completion(text: str) -> FakeResponse:
    return FakeResponse({"choices": [{"message": {"role": "assistant", "content": text}}]})


@pytest.fixture
def api_token(monkeypatch):
    monkeypatch.setenv("OPENAI_API_TOKEN", "sk-test")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    return "sk-test"
