from typing import NamedTuple, Optional

from models.quiz_models import QuizRequest

SYSTEM_PROMPT = (
    "You are a helpful programming tutor. "
    "Generate short, up-to-date quizzes in valid JSON."
)

QUIZ_TYPE_INSTRUCTIONS = {
    "multiple-choice": "Create multiple-choice questions with 4 options (A, B, C, D)",
    "true-false": "Create true/false questions with explanations",
    "fill-blank": "Create fill-in-the-blank questions with code snippets",
    "code-completion": "Create code completion questions where users complete code snippets",
    "matching": "Create matching questions (e.g., match concepts to definitions)",
    "scenario": "Create scenario-based questions with real-world programming situations",
}

OUTPUT_FORMAT = """Format your response as a JSON array like this:
[
  {
    "question": "...",
    "options": { "A": "...", "B": "...", "C": "...", "D": "..." },
    "answer": "A",
    "explanation": "...",
    "codeSnippet": "...",
    "difficulty": "beginner|intermediate|advanced",
    "category": "concept|syntax|best-practice|debugging"
  }
]

Only include "codeSnippet" when the question has code. The "answer" must be one of the keys in "options".
Make sure the JSON is valid and parsable."""


class QuizPrompt(NamedTuple):
    system_prompt: str
    user_prompt: str


def _user_context(request: QuizRequest) -> str:
    performance = request.user_performance
    if performance is None:
        return ""
    weak = ", ".join(performance.weak_areas) or "None identified"
    strong = ", ".join(performance.strong_areas) or "None identified"
    return (
        f"User Context: Average score: {performance.average_score:g}%, "
        f"Weak areas: {weak}, Strong areas: {strong}. Focus more on weak areas."
    )


def build_quiz_prompt(
    request: QuizRequest,
    adjusted_difficulty: str,
    enriched_content: Optional[str] = "",
) -> QuizPrompt:
    """
    Compose the system prompt and the quiz instructions for one request.

    Args:
        request: The caller's quiz parameters.
        adjusted_difficulty: Difficulty after adaptive adjustment.
        enriched_content: Search context; omitted from the prompt when empty.

    Returns:
        QuizPrompt: system and user prompt strings for a chat completion.
    """
    topic = request.topic or ""
    language = request.language or ""
    quiz_type = request.quiz_type or "multiple-choice"
    type_instruction = QUIZ_TYPE_INSTRUCTIONS.get(quiz_type, QUIZ_TYPE_INSTRUCTIONS["multiple-choice"])

    sections = [
        f'You are an expert programming tutor. Generate a {adjusted_difficulty} level quiz for "{topic}" in {language}.'
    ]

    user_context = _user_context(request)
    if user_context:
        sections.append(user_context)

    if enriched_content:
        sections.append(
            f'Based on the following recent information about "{topic}", generate '
            f"{request.question_count} {quiz_type} questions. Use the content below to ensure "
            f"questions are up-to-date and relevant.\n\nInternet Content:\n{enriched_content}"
        )
    else:
        sections.append(f"Generate {request.question_count} {quiz_type} questions.")

    requirements = [
        type_instruction,
        "Include relevant code snippets where appropriate"
        if request.include_code_snippets
        else "Focus on conceptual questions",
        "Include practical, real-world examples"
        if request.include_practical_examples
        else "Focus on theoretical concepts",
        "Provide detailed explanations for correct answers",
        f"Ensure questions are appropriate for {adjusted_difficulty} level",
        "Make questions engaging and educational",
    ]
    sections.append("Requirements:\n" + "\n".join(f"- {line}" for line in requirements))
    sections.append(OUTPUT_FORMAT)

    return QuizPrompt(system_prompt=SYSTEM_PROMPT, user_prompt="\n\n".join(sections))
