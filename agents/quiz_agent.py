import logging
import time
from typing import List, Optional

from agents.content_agent import ContentAgent
from agents.generation_client import GenerationClient
from agents.prompt_builder import build_quiz_prompt
from db.quiz_bank import get_quiz_from_bank
from models.quiz_models import Question, QuizRequest, QuizResult
from utils.difficulty import adjust_difficulty
from utils.errors import (
    ConfigurationError,
    ExhaustedFallbackError,
    GenerationFailure,
    QuizValidationError,
)
from utils.logging import log_ai_request, log_fallback
from utils.quiz_parser import parse_quiz_response

logger = logging.getLogger(__name__)


class QuizAgent:
    def __init__(
        self,
        generation_client: Optional[GenerationClient] = None,
        content_agent: Optional[ContentAgent] = None,
    ):
        """
        Initialize the Quiz Agent with its completion and search collaborators.
        """
        self.generation_client = generation_client or GenerationClient()
        self.content_agent = content_agent or ContentAgent()

    def validate(self, request: QuizRequest) -> None:
        if not request.language or not request.topic:
            raise QuizValidationError("Language and topic are required")

    async def generate_questions(self, request: QuizRequest, difficulty: str) -> List[Question]:
        """
        Enrich, prompt, complete and parse. Any GenerationFailure propagates to the caller.
        """
        enriched_content = await self.content_agent.fetch_context(request.topic)
        prompt = build_quiz_prompt(request, difficulty, enriched_content)

        start_time = time.time()
        text = await self.generation_client.complete(prompt.system_prompt, prompt.user_prompt)
        log_ai_request("quiz_agent", request.topic, (time.time() - start_time) * 1000)

        return [Question.model_validate(item) for item in parse_quiz_response(text)]

    async def generate_quiz(self, request: QuizRequest) -> QuizResult:
        """
        Produce a quiz for the request, falling back to the question bank when
        generation or parsing fails.

        Raises:
            QuizValidationError: language or topic missing; no provider is called.
            ConfigurationError: no completion credential configured.
            ExhaustedFallbackError: generation failed and the bank has no match.
        """
        self.validate(request)
        if not self.generation_client.is_configured():
            raise ConfigurationError("Quiz generation is not configured: missing completion API key")

        difficulty = adjust_difficulty(
            request.difficulty, request.user_performance, request.adaptive_difficulty
        )
        if difficulty != request.difficulty:
            logger.info(f"Adaptive difficulty for '{request.topic}': {request.difficulty} -> {difficulty}")

        source = "generated"
        try:
            questions = await self.generate_questions(request, difficulty)
        except GenerationFailure as e:
            log_fallback(request.topic, difficulty, e)
            source = "fallback"
            questions = get_quiz_from_bank(request.topic, difficulty, request.question_count)
            if not questions:
                raise ExhaustedFallbackError(
                    "Failed to generate quiz and no fallback available."
                ) from e

        return QuizResult(
            quiz=questions,
            language=request.language,
            topic=request.topic,
            difficulty=difficulty,
            requested_difficulty=request.difficulty,
            quiz_type=request.quiz_type,
            question_count=request.question_count,
            include_code_snippets=request.include_code_snippets,
            include_practical_examples=request.include_practical_examples,
            source=source,
        )
