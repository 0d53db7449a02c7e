# eventsync/services/gemini.py
from __future__ import annotations

from typing import Sequence

import google.generativeai as genai

from eventsync.analysis.summary_writer import SYSTEM_PROMPT, build_summary_prompt


class GeminiSummarizer:
    """Event summaries through Google Gemini."""

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        timeout: float = 10.0,
        max_tokens: int = 300,
    ):
        genai.configure(api_key=api_key)
        self.model_name = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self._model = genai.GenerativeModel(model, system_instruction=SYSTEM_PROMPT)

    def summarize(self, texts: Sequence[str], positive: int, neutral: int, negative: int) -> str:
        prompt = build_summary_prompt(texts, positive, neutral, negative)
        response = self._model.generate_content(
            prompt,
            generation_config={"max_output_tokens": self.max_tokens},
            request_options={"timeout": self.timeout},
        )
        return response.text.strip()
