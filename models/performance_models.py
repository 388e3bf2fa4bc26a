import time
from typing import List, Optional

from pydantic import Field, model_validator

from models.quiz_models import CamelModel, Difficulty


class QuizResultRecord(CamelModel):
    score: int = Field(..., ge=0, description="Number of correct answers.")
    total_questions: int = Field(..., ge=1)
    topic: str
    language: str
    timestamp: float = Field(default_factory=time.time, description="Unix time the quiz finished.")
    quiz_type: Optional[str] = None
    time_spent: Optional[float] = Field(None, ge=0, description="Seconds spent on the whole quiz.")
    streak_count: Optional[int] = Field(None, ge=0)
    difficulty: Optional[Difficulty] = None

    @model_validator(mode="after")
    def check_score(self) -> "QuizResultRecord":
        if self.score > self.total_questions:
            raise ValueError("score cannot exceed total_questions")
        return self

    @property
    def ratio(self) -> float:
        return self.score / self.total_questions


class PerformanceStats(CamelModel):
    total_quizzes: int = 0
    average_score: float = 0
    best_score: float = 0
    current_difficulty: Difficulty = "beginner"
    total_time_spent: float = 0
    average_time_per_question: float = 0
    streak_history: List[int] = Field(default_factory=list)
    improvement_rate: float = 0
    weak_areas: List[str] = Field(default_factory=list)
    strong_areas: List[str] = Field(default_factory=list)
    learning_path: List[str] = Field(default_factory=list)
    last_quiz_date: str = ""
    consistency_score: float = 0


class GlobalStats(CamelModel):
    total_quizzes: int = 0
    total_questions: int = 0
    average_score: float = 0
    total_time_spent: float = 0
    favorite_language: str = ""
    favorite_topic: str = ""
    total_streak: int = 0


class PerformanceExport(CamelModel):
    history: List[QuizResultRecord]
    global_stats: GlobalStats
    export_date: str


class HistoryResponse(CamelModel):
    user_id: str
    history: List[QuizResultRecord]
    total_count: int
