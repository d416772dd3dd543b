"""Offline fallbacks used when the remote summarizer cannot answer.

All functions are deterministic and position-biased: they pick leading
sentences or frequent words, they do not try to understand the text.
"""

import math
import re
from collections import Counter

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
# ASCII word characters only: accented letters split words
NON_WORD = re.compile(r"\W+", re.ASCII)

ELLIPSIS = "..."
BULLET = "• "

# Lead fraction of sentences kept by the extractive fallback, and its cap
LEAD_FRACTION = 0.3
MAX_LEAD_SENTENCES = 5

# Character budgets per unit of max_length
SHORT_TEXT_CHARS_PER_UNIT = 10
SUMMARY_CHARS_PER_UNIT = 8

FALLBACK_BULLETS = 3
CONCEPT_MIN_CHARS = 4
MAX_CONCEPTS = 5

CANNED_QUESTIONS = (
    "1. What are the main concepts discussed in this text?",
    "2. How would you explain this content to someone else?",
    "3. What are the practical applications of this information?",
    "4. What questions do you still have after reading this?",
    "5. How does this relate to what you already know?",
)


def sentence_segments(text: str) -> list[str]:
    """Split on runs of . ! ? and drop blank segments, keeping surrounding whitespace."""
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop empty segments."""
    return [s.strip() for s in sentence_segments(text)]


def lead_sentence_count(total: int) -> int:
    return min(MAX_LEAD_SENTENCES, math.ceil(total * LEAD_FRACTION))


def fallback_summary(text: str, max_length: int) -> str:
    """Extractive summary of `text`.

    Texts already within `max_length` words come back (nearly) unchanged,
    cut to a character budget. Longer texts keep their leading sentences.
    """
    if len(text.split()) <= max_length:
        budget = max_length * SHORT_TEXT_CHARS_PER_UNIT
        return text[:budget].strip() + (ELLIPSIS if len(text) > budget else "")

    # Raw segments: the character budget counts the whitespace between sentences
    segments = sentence_segments(text)
    lead = segments[: lead_sentence_count(len(segments))]
    summary = ". ".join(lead)[: max_length * SUMMARY_CHARS_PER_UNIT].strip()
    return summary + (ELLIPSIS if summary != text else "")


def as_bullets(sentences: list[str]) -> str:
    return "\n".join(f"{BULLET}{s}" for s in sentences)


def fallback_bullet_points(text: str) -> str:
    return as_bullets(split_sentences(text)[:FALLBACK_BULLETS])


def fallback_key_concepts(text: str) -> list[str]:
    """Most frequent words longer than three characters.

    Ties keep the order in which the words first appear.
    """
    words = (w for w in NON_WORD.split(text.lower()) if len(w) >= CONCEPT_MIN_CHARS)
    return [word for word, _ in Counter(words).most_common(MAX_CONCEPTS)]


def fallback_study_questions() -> list[str]:
    return list(CANNED_QUESTIONS)


def as_questions(sentences: list[str], count: int) -> list[str]:
    return [f"{i}. {s}?" for i, s in enumerate(sentences[:count], start=1)]
