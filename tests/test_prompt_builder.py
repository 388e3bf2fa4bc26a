import pytest

from agents.prompt_builder import QUIZ_TYPE_INSTRUCTIONS, SYSTEM_PROMPT, build_quiz_prompt
from models.quiz_models import UserPerformance


def test_basic_prompt_contents(quiz_request):
    prompt = build_quiz_prompt(quiz_request(question_count=3), "beginner", "")

    assert prompt.system_prompt == SYSTEM_PROMPT
    assert 'Generate a beginner level quiz for "Closures" in JavaScript.' in prompt.user_prompt
    assert "Generate 3 multiple-choice questions." in prompt.user_prompt
    assert "Internet Content:" not in prompt.user_prompt
    assert "User Context" not in prompt.user_prompt


@pytest.mark.parametrize("quiz_type", list(QUIZ_TYPE_INSTRUCTIONS))
def test_quiz_type_instruction_selected(quiz_request, quiz_type):
    prompt = build_quiz_prompt(quiz_request(quiz_type=quiz_type), "beginner", "")

    assert f"- {QUIZ_TYPE_INSTRUCTIONS[quiz_type]}" in prompt.user_prompt


def test_unknown_quiz_type_uses_multiple_choice(quiz_request):
    prompt = build_quiz_prompt(quiz_request(quiz_type="essay"), "beginner", "")

    assert f"- {QUIZ_TYPE_INSTRUCTIONS['multiple-choice']}" in prompt.user_prompt


def test_flags_switch_clauses(quiz_request):
    with_extras = build_quiz_prompt(quiz_request(), "beginner", "").user_prompt
    without_extras = build_quiz_prompt(
        quiz_request(include_code_snippets=False, include_practical_examples=False), "beginner", ""
    ).user_prompt

    assert "Include relevant code snippets where appropriate" in with_extras
    assert "Include practical, real-world examples" in with_extras
    assert "Focus on conceptual questions" in without_extras
    assert "Focus on theoretical concepts" in without_extras


def test_user_performance_adds_weak_area_emphasis(quiz_request):
    performance = UserPerformance(average_score=72.5, weak_areas=["scope", "hoisting"], strong_areas=[])
    prompt = build_quiz_prompt(quiz_request(user_performance=performance), "beginner", "").user_prompt

    assert "Average score: 72.5%" in prompt
    assert "Weak areas: scope, hoisting" in prompt
    assert "Strong areas: None identified" in prompt
    assert "Focus more on weak areas." in prompt


def test_enriched_content_is_labelled(quiz_request):
    context = "MDN Closures: A closure is the combination of a function..."
    prompt = build_quiz_prompt(quiz_request(), "beginner", context).user_prompt

    assert f"Internet Content:\n{context}" in prompt
    assert prompt.index("Internet Content:") < prompt.index("Requirements:")


def test_uses_adjusted_difficulty(quiz_request):
    prompt = build_quiz_prompt(quiz_request(difficulty="beginner"), "intermediate", "").user_prompt

    assert "Generate a intermediate level quiz" in prompt
    assert "appropriate for intermediate level" in prompt


def test_output_format_always_last(quiz_request):
    prompt = build_quiz_prompt(quiz_request(), "advanced", "ctx").user_prompt

    assert prompt.rstrip().endswith("Make sure the JSON is valid and parsable.")
    assert '"options": { "A": "...", "B": "...", "C": "...", "D": "..." }' in prompt


def test_missing_optional_fields_do_not_raise(quiz_request):
    prompt = build_quiz_prompt(quiz_request(language=None, topic=None), "beginner", None)

    assert "Requirements:" in prompt.user_prompt


def test_builder_is_deterministic(quiz_request):
    request = quiz_request(quiz_type="scenario")

    assert build_quiz_prompt(request, "advanced", "x") == build_quiz_prompt(request, "advanced", "x")
