# eventsync/services/openrouter.py
from __future__ import annotations

from typing import Sequence

import requests

from eventsync.analysis.summary_writer import SYSTEM_PROMPT, build_summary_prompt
from eventsync.core.errors import CollaboratorFailure
from eventsync.core.logger import get_logger
from eventsync.models.constants import SUMMARY_UNAVAILABLE

logger = get_logger("openrouter")

API_URL = "https://openrouter.ai/api/v1/chat/completions"


class OpenRouterSummarizer:
    """
    Combines feedback texts into a short factual event summary via the
    OpenRouter chat completions API.
    """

    name = "openrouter"

    def __init__(
        self,
        api_key: str,
        model: str = "mistralai/mistral-7b-instruct",
        timeout: float = 10.0,
        max_tokens: int = 300,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self._http = session or requests

    def summarize(self, texts: Sequence[str], positive: int, neutral: int, negative: int) -> str:
        prompt = build_summary_prompt(texts, positive, neutral, negative)
        body = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self.max_tokens,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": "https://eventsync.local",
            "X-Title": "EventSync Summary",
        }

        response = self._http.post(API_URL, json=body, headers=headers, timeout=self.timeout)
        if response.status_code != 200:
            raise CollaboratorFailure(
                self.name,
                f"status {response.status_code}: {response.text[:200]}",
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise CollaboratorFailure(self.name, f"invalid JSON payload: {e}") from e

        choices = payload.get("choices") if isinstance(payload, dict) else None
        if not choices or not isinstance(choices[0], dict):
            logger.warning("OpenRouter returned no choices: %r", payload)
            return SUMMARY_UNAVAILABLE

        content = (choices[0].get("message") or {}).get("content")
        return str(content).strip() if content is not None else ""
