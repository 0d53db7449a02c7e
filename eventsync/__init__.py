"""EventSync: event feedback collection with sentiment scoring and AI summaries."""

__version__ = "0.1.0"
