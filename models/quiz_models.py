from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Difficulty = Literal["beginner", "intermediate", "advanced"]
Category = Literal["concept", "syntax", "best-practice", "debugging"]

QUIZ_TYPES = (
    "multiple-choice",
    "true-false",
    "fill-blank",
    "code-completion",
    "matching",
    "scenario",
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Question(CamelModel):
    question: str = Field(..., description="The text of the question.")
    options: Dict[str, str] = Field(..., description="Option key (e.g. 'A') to option text.")
    answer: str = Field(..., description="The key of the correct option (e.g. 'B').")
    explanation: str = Field(..., description="Why the answer is correct.")
    code_snippet: Optional[str] = Field(None, description="Code shown with the question, if any.")
    difficulty: Difficulty
    category: Category

    @model_validator(mode="after")
    def check_answer_in_options(self) -> "Question":
        if len(self.options) < 2:
            raise ValueError("a question needs at least two options")
        if self.answer not in self.options:
            raise ValueError(
                f"answer '{self.answer}' is not one of the option keys {sorted(self.options)}"
            )
        return self


class UserPerformance(CamelModel):
    average_score: float = Field(0, ge=0, le=100, description="Rolling average score in percent.")
    weak_areas: List[str] = Field(default_factory=list)
    strong_areas: List[str] = Field(default_factory=list)


class QuizRequest(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    language: Optional[str] = Field(None, description="Programming language, e.g. 'JavaScript'.")
    topic: Optional[str] = Field(None, description="Quiz topic, e.g. 'Closures'.")
    difficulty: Difficulty = "beginner"
    quiz_type: str = Field("multiple-choice", description=f"One of {', '.join(QUIZ_TYPES)}.")
    question_count: int = Field(5, ge=1, description="Number of questions requested.")
    include_code_snippets: bool = True
    include_practical_examples: bool = True
    user_performance: Optional[UserPerformance] = None
    adaptive_difficulty: bool = False


class QuizResult(CamelModel):
    quiz: List[Question]
    language: str
    topic: str
    difficulty: Difficulty = Field(..., description="Difficulty the quiz was produced for.")
    requested_difficulty: Difficulty
    quiz_type: str
    question_count: int
    include_code_snippets: bool
    include_practical_examples: bool
    source: Literal["generated", "fallback"]
