import logging
from typing import List, Optional

from db.quiz_bank_data import QUIZ_BANK
from models.quiz_models import Question
from utils.difficulty import DIFFICULTY_LEVELS

logger = logging.getLogger(__name__)


def match_topic(topic: str) -> Optional[str]:
    """
    Resolve a requested topic to a bank key.

    An exact case-insensitive match wins; otherwise the first bank topic (in
    bank order) where either name contains the other, so "closures in JS"
    resolves to "Closures".
    """
    wanted = (topic or "").strip().lower()
    if not wanted:
        return None

    for key in QUIZ_BANK:
        if key.lower() == wanted:
            return key
    for key in QUIZ_BANK:
        candidate = key.lower()
        if candidate in wanted or wanted in candidate:
            return key
    return None


def get_quiz_from_bank(topic: str, difficulty: str, count: int = 5) -> List[Question]:
    """Return up to `count` bank questions for the topic at exactly this difficulty, in bank order."""
    key = match_topic(topic)
    if key is None:
        logger.info(f"No fallback questions for topic '{topic}'")
        return []

    questions = QUIZ_BANK[key].get(difficulty, [])
    selected = questions[:max(count, 0)]
    logger.info(f"Fallback bank matched '{topic}' -> '{key}' ({difficulty}): {len(selected)}/{count} questions")
    # Fresh models per call so callers never share the bank's data
    return [Question.model_validate(question) for question in selected]


def get_available_topics() -> List[str]:
    return list(QUIZ_BANK)


def get_available_difficulties() -> List[str]:
    return list(DIFFICULTY_LEVELS)
