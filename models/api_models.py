from typing import List

from pydantic import Field

from models.quiz_models import CamelModel, Difficulty


class MessageResponse(CamelModel):
    message: str


class TopicsResponse(CamelModel):
    topics: List[str] = Field(..., description="Topics available in the fallback question bank")
    difficulties: List[Difficulty]


class DifficultyEstimateResponse(CamelModel):
    topic: str
    language: str
    difficulty: Difficulty
