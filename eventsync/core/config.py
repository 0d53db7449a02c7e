# eventsync/core/config.py

from dataclasses import dataclass

from pydantic import PositiveInt
from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class FeedbackLimits:
    """
    Size limits applied to every feedback text before it reaches the classifier.
    All three are inclusive upper bounds.
    """
    word_limit: int = 300
    char_cap: int = 2000
    token_cap: int = 512

    def __post_init__(self):
        for name in ("word_limit", "char_cap", "token_cap"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


class Settings(BaseSettings):
    # Feedback input limits
    WORD_LIMIT: PositiveInt = 300
    CHAR_CAP: PositiveInt = 2000
    TOKEN_CAP: PositiveInt = 512

    # Which collaborators to wire up
    SENTIMENT_PROVIDER: str = "huggingface"  # huggingface | vader
    SUMMARY_PROVIDER: str = "openrouter"  # openrouter | gemini | offline

    # Hugging Face inference (sentiment)
    HF_API_TOKEN: str = ""
    HF_SENTIMENT_MODEL: str = "cardiffnlp/twitter-roberta-base-sentiment"

    # OpenRouter (summaries)
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_MODEL: str = "mistralai/mistral-7b-instruct"

    # Gemini (summaries)
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.0-flash"

    # Applied to every outbound provider call
    PROVIDER_TIMEOUT_SECONDS: float = 10.0

    # Persistence
    STORAGE: str = "memory"  # memory | mongo
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "eventsync"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_prefix = "EVENTSYNC_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def limits(self) -> FeedbackLimits:
        return FeedbackLimits(
            word_limit=self.WORD_LIMIT,
            char_cap=self.CHAR_CAP,
            token_cap=self.TOKEN_CAP,
        )


def load_settings(**overrides) -> Settings:
    """
    Build the settings record once at process start.
    Keyword overrides win over environment values (handy in tests).
    """
    return Settings(**overrides)
