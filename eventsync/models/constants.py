# eventsync/models/constants.py

# Canonical mood labels, in the order scores are reported
MOOD_POSITIVE = "positive"
MOOD_NEUTRAL = "neutral"
MOOD_NEGATIVE = "negative"
MOODS = (MOOD_POSITIVE, MOOD_NEUTRAL, MOOD_NEGATIVE)

# Heuristic used instead of a real tokenizer
CHARS_PER_TOKEN = 4.0

# How many feedback entries a summary echoes back for display
SUMMARY_EXAMPLE_LIMIT = 10

NO_FEEDBACK_SUMMARY = "No feedback data available for summary."
SUMMARY_FAILED = "AI summarization failed."
SUMMARY_UNAVAILABLE = "Summary could not be generated."
