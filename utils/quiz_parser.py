import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from models.quiz_models import Question
from utils.errors import QuizParseError

logger = logging.getLogger(__name__)


def extract_json_array(text: str) -> str:
    """Return the substring from the first '[' to the last ']' of the text."""
    start = text.find("[") if text else -1
    end = text.rfind("]") if text else -1
    if start == -1 or end < start:
        raise QuizParseError("No JSON array found in completion text")
    return text[start:end + 1]


def parse_quiz_response(text: str) -> List[Dict[str, Any]]:
    """
    Parse the question list out of free-form completion text.

    The completion usually wraps the array in prose or code fences, so only the
    outermost brackets are considered. Every element must be a valid Question;
    the returned list is the parsed array itself, in the order received.
    """
    payload = extract_json_array(text)

    try:
        parsed = json.loads(payload)
    except json.JSONDecodeError as e:
        raise QuizParseError(f"Completion text is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise QuizParseError(f"Expected a JSON array, got {type(parsed).__name__}")
    if not parsed:
        raise QuizParseError("Completion contained an empty question list")

    for index, item in enumerate(parsed):
        try:
            Question.model_validate(item)
        except ValidationError as e:
            raise QuizParseError(f"Question {index} is malformed: {e}") from e

    logger.debug(f"Parsed {len(parsed)} questions from completion text")
    return parsed
