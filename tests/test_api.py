import pytest
from fastapi.testclient import TestClient

from api_server.main import app, get_performance_repo, get_quiz_agent
from utils.logging import app_logger
from utils.request_middleware import PerformanceLoggingMiddleware
from agents.quiz_agent import QuizAgent
from db.performance_repository import PerformanceRepository
from db.storage import InMemoryStore

from conftest import VALID_COMPLETION, FakeContentAgent, FakeGenerationClient


@pytest.fixture
def generation_client():
    return FakeGenerationClient(text=VALID_COMPLETION)


@pytest.fixture
def client(generation_client):
    repo = PerformanceRepository(InMemoryStore())
    agent = QuizAgent(generation_client, FakeContentAgent())
    app.dependency_overrides[get_quiz_agent] = lambda: agent
    app.dependency_overrides[get_performance_repo] = lambda: repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_generate_quiz_success(client):
    response = client.post("/generate-quiz", json={"language": "Python", "topic": "Recursion"})

    assert response.status_code == 200
    body = response.json()
    assert body["quiz"][0]["question"] == "Q1"
    assert body["source"] == "generated"
    assert body["difficulty"] == "beginner"
    assert body["quizType"] == "multiple-choice"
    assert body["questionCount"] == 5
    assert body["includeCodeSnippets"] is True
    assert body["includePracticalExamples"] is True
    assert "X-Response-Time" in response.headers


def test_generate_quiz_requires_topic(client, generation_client):
    response = client.post("/generate-quiz", json={"language": "Python"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Language and topic are required"}
    assert generation_client.calls == []


def test_generate_quiz_rejects_zero_questions(client):
    response = client.post(
        "/generate-quiz", json={"language": "Python", "topic": "Recursion", "questionCount": 0}
    )

    assert response.status_code == 422


@pytest.mark.parametrize("generation_client", [FakeGenerationClient(text="no quiz")])
def test_generate_quiz_fallback(client):
    response = client.post(
        "/generate-quiz",
        json={"language": "JavaScript", "topic": "Closures", "questionCount": 3},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "fallback"
    assert len(body["quiz"]) == 3
    assert body["quiz"][1]["codeSnippet"].startswith("function makeCounter()")


@pytest.mark.parametrize("generation_client", [FakeGenerationClient(text="no quiz")])
def test_generate_quiz_exhausted_fallback(client):
    response = client.post(
        "/generate-quiz",
        json={"language": "Python", "topic": "Quantum Computing", "difficulty": "advanced"},
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to generate quiz and no fallback available."}


@pytest.mark.parametrize("generation_client", [FakeGenerationClient(configured=False)])
def test_generate_quiz_unconfigured(client):
    response = client.post("/generate-quiz", json={"language": "Python", "topic": "Recursion"})

    assert response.status_code == 503


def test_adaptive_quiz_uses_tracked_results(client, generation_client):
    for _ in range(2):
        client.post(
            "/quiz-results",
            headers={"X-User-Id": "learner-1"},
            json={"score": 9, "totalQuestions": 10, "topic": "Recursion", "language": "Python"},
        )

    response = client.post(
        "/generate-quiz",
        headers={"X-User-Id": "learner-1"},
        json={"language": "Python", "topic": "Recursion", "adaptiveDifficulty": True},
    )

    assert response.json()["difficulty"] == "intermediate"
    assert response.json()["requestedDifficulty"] == "beginner"
    assert "Average score: 90%" in generation_client.calls[0][1]


def test_quiz_results_lifecycle(client):
    headers = {"X-User-Id": "learner-2"}
    created = client.post(
        "/quiz-results",
        headers=headers,
        json={"score": 7, "totalQuestions": 10, "topic": "SQL", "language": "SQL", "quizType": "scenario"},
    )
    assert created.status_code == 200

    history = client.get("/quiz-results", headers=headers).json()
    assert history["totalCount"] == 1
    assert history["history"][0]["quizType"] == "scenario"

    stats = client.get("/performance", headers=headers, params={"topic": "SQL", "language": "SQL"}).json()
    assert stats["averageScore"] == 70.0
    assert stats["currentDifficulty"] == "intermediate"

    estimate = client.get(
        "/performance/difficulty", headers=headers, params={"topic": "SQL", "language": "SQL"}
    ).json()
    assert estimate["difficulty"] == "intermediate"

    assert client.get("/performance/global", headers=headers).json()["favoriteTopic"] == "SQL"
    assert len(client.get("/performance/export", headers=headers).json()["history"]) == 1

    assert client.delete("/quiz-results", headers=headers).status_code == 200
    assert client.get("/quiz-results", headers=headers).json()["totalCount"] == 0


def test_quiz_result_validation(client):
    response = client.post(
        "/quiz-results",
        json={"score": 11, "totalQuestions": 10, "topic": "SQL", "language": "SQL"},
    )

    assert response.status_code == 422


def test_topics(client):
    body = client.get("/quiz/topics").json()

    assert "Closures" in body["topics"]
    assert body["difficulties"] == ["beginner", "intermediate", "advanced"]


def test_health_and_root(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/").json()["quiz"]["generate"] == "/generate-quiz"
    assert "logging_stats" in client.get("/logs/stats").json()


def test_generated_quiz_outcome_header(client):
    response = client.post("/generate-quiz", json={"language": "Python", "topic": "Recursion"})

    assert response.headers["X-Quiz-Outcome"] == "beginner/generated"


@pytest.mark.parametrize("generation_client", [FakeGenerationClient(text="no quiz")])
def test_fallback_quiz_outcome_header(client):
    response = client.post(
        "/generate-quiz",
        json={"language": "JavaScript", "topic": "Closures", "difficulty": "intermediate"},
    )

    assert response.headers["X-Quiz-Outcome"] == "intermediate/fallback"


def test_non_quiz_routes_have_no_outcome_header(client):
    response = client.get("/quiz/topics")

    assert "X-Quiz-Outcome" not in response.headers
    assert "X-Response-Time" in response.headers


def test_rejected_requests_are_counted_apart_from_failures(client):
    before = dict(app_logger.stats)

    client.post("/generate-quiz", json={"language": "Python"})

    assert app_logger.stats["rejected_requests"] == before["rejected_requests"] + 1
    assert app_logger.stats["failed_requests"] == before["failed_requests"]
    stats = client.get("/logs/stats").json()
    assert stats["logging_stats"]["rejected_requests"] >= 1


def test_logs_stats_reports_tracked_users(client):
    client.post(
        "/quiz-results",
        json={"score": 3, "totalQuestions": 5, "topic": "Closures", "language": "JavaScript"},
        headers={"X-User-Id": "u1"},
    )

    assert client.get("/logs/stats").json()["system_info"]["tracked_users"] == 1


def test_generation_uses_its_own_slow_threshold():
    middleware = PerformanceLoggingMiddleware(app, slow_request_threshold_ms=1000, slow_generation_threshold_ms=30000)

    assert middleware.threshold_for("/generate-quiz") == 30000
    assert middleware.threshold_for("/quiz-results") == 1000
