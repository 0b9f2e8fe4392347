"""
Insight Requester — turns the comparison into a prompt and asks the LLM.

One POST to an OpenAI-compatible chat-completion endpoint per analysis.
No retries: a failure is logged and raised as RequestError.
"""

import json
import logging
import os

import requests
from config.settings import (
    OPENAI_API_URL,
    OPENAI_MODEL,
    OPENAI_MAX_TOKENS,
    OPENAI_TIMEOUT_SECONDS,
    API_TOKEN_ENV_VARS,
    PROMPT_TEMPLATE,
    EMPTY_SELECTION_MESSAGE,
)
from core.errors import RequestError, ValidationError

logger = logging.getLogger(__name__)


def require_selection(selection) -> None:
    """Raise ValidationError when no agent is selected."""
    if not selection:
        raise ValidationError(EMPTY_SELECTION_MESSAGE)


def build_prompt(entries: list) -> str:
    comparison = json.dumps(
        [entry.to_dict() for entry in entries], indent=2, ensure_ascii=False
    )
    return PROMPT_TEMPLATE.format(comparison=comparison)


class InsightRequester:
    """
    Sends the comparison prompt to a text-completion service.

    Usage:
        text = InsightRequester().request(entries, selection)
    """

    def __init__(
        self,
        http=None,
        api_url: str = OPENAI_API_URL,
        model: str = OPENAI_MODEL,
        max_tokens: int = OPENAI_MAX_TOKENS,
        timeout: float = OPENAI_TIMEOUT_SECONDS,
    ):
        self.http = http if http is not None else requests
        self.api_url = api_url
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout

    def request(self, entries: list, selection) -> str:
        """
        Ask the service for a natural-language comparison.

        Args:
            entries: ComparisonEntry list from core.comparison.assemble
            selection: The selected agent names

        Returns:
            The first completion's message content

        Raises:
            ValidationError: If the selection is empty (no call is made)
            RequestError: On transport, status or response-shape failures
        """
        require_selection(selection)

        authorization = self._authorization()
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": build_prompt(entries)}],
            "max_tokens": self.max_tokens,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": authorization,
        }

        logger.info(
            "Requesting comparison insight for %d agent(s) from %s",
            len(entries), self.model,
        )
        try:
            resp = self.http.post(
                self.api_url, headers=headers, json=payload, timeout=self.timeout
            )
            resp.raise_for_status()
            result = resp.json()
            text = result["choices"][0]["message"]["content"]
        except requests.RequestException as e:
            logger.error("Text-completion request failed: %s", e)
            raise RequestError(f"Verzoek mislukt: {e}") from e
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected text-completion response: %r", e)
            raise RequestError(f"Onverwacht antwoord van de AI-dienst: {e!r}") from e

        if not isinstance(text, str):
            raise RequestError("Het antwoord van de AI-dienst bevat geen tekst.")
        return text

    @staticmethod
    def _authorization() -> str:
        """Read the credential at call time; bare keys get a Bearer prefix."""
        token = ""
        for var in API_TOKEN_ENV_VARS:
            token = os.environ.get(var, "").strip()
            if token:
                break
        if not token:
            raise RequestError(
                f"Geen API-token ingesteld (zet {' of '.join(API_TOKEN_ENV_VARS)})"
            )
        if token.lower().startswith("bearer "):
            return token
        return f"Bearer {token}"
