# eventsync/services/huggingface.py
from __future__ import annotations

from typing import Any

import requests

from eventsync.core.errors import CollaboratorFailure

BASE_URL = "https://router.huggingface.co/hf-inference/models/"


class HuggingFaceClassifier:
    """
    Sentiment analysis through the Hugging Face inference router.
    Defaults to CardiffNLP's twitter RoBERTa model, which answers with
    LABEL_0/LABEL_1/LABEL_2 pairs nested one list deep.
    """

    name = "huggingface"

    def __init__(
        self,
        api_token: str,
        model: str = "cardiffnlp/twitter-roberta-base-sentiment",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        self.api_token = api_token
        self.model = model
        self.timeout = timeout
        self._http = session or requests

    @property
    def url(self) -> str:
        return BASE_URL + self.model

    def classify(self, text: str) -> Any:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.api_token}",
        }
        body = {
            "inputs": text,
            "parameters": {"truncation": True},
            "options": {"wait_for_model": True},
        }

        response = self._http.post(self.url, json=body, headers=headers, timeout=self.timeout)
        if response.status_code != 200:
            raise CollaboratorFailure(
                self.name,
                f"status {response.status_code}: {response.text[:200]}",
            )

        try:
            return response.json()
        except ValueError as e:
            raise CollaboratorFailure(self.name, f"invalid JSON payload: {e}") from e
