import logging
import os
import time
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends, Request, Header, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional

from utils.config import settings
from utils.errors import ConfigurationError, ExhaustedFallbackError, QuizValidationError
from utils.logging import app_logger, get_log_stats
from utils.request_middleware import RequestLoggingMiddleware, PerformanceLoggingMiddleware

from db.storage import create_store
from db.performance_repository import PerformanceRepository
from db.quiz_bank import get_available_topics, get_available_difficulties

from agents.quiz_agent import QuizAgent
from models.quiz_models import QuizRequest, QuizResult
from models.performance_models import (
    QuizResultRecord, PerformanceStats, GlobalStats, PerformanceExport, HistoryResponse
)
from models.api_models import MessageResponse, TopicsResponse, DifficultyEstimateResponse

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        store = create_store(settings.redis_url)
        await store.connect()
        app.state.store = store
        app.state.performance_repo = PerformanceRepository(store)
        app.state.quiz_agent = QuizAgent()
        logger.info(f"Store ({type(store).__name__}), PerformanceRepository, and QuizAgent initialized")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise

    yield

    try:
        await app.state.store.close()
        logger.info("Store closed")
    except Exception as e:
        logger.error(f"Shutdown cleanup failed: {e}")


app = FastAPI(
    title="Programming Quiz API",
    description="AI-generated programming quizzes with adaptive difficulty and progress tracking",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(PerformanceLoggingMiddleware, slow_request_threshold_ms=1000)
app.add_middleware(RequestLoggingMiddleware, log_periodic_stats_interval=300)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QuizValidationError)
async def validation_error_handler(request: Request, exc: QuizValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    app_logger.log_error(exc, f"{request.method} {request.url.path}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(ExhaustedFallbackError)
async def exhausted_fallback_handler(request: Request, exc: ExhaustedFallbackError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def get_quiz_agent(request: Request) -> QuizAgent:
    return request.app.state.quiz_agent


def get_performance_repo(request: Request) -> PerformanceRepository:
    return request.app.state.performance_repo


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    return x_user_id or "anonymous"


@app.post("/generate-quiz", response_model=QuizResult)
async def generate_quiz(
    request: Request,
    data: QuizRequest,
    user_id: str = Depends(get_user_id),
    agent: QuizAgent = Depends(get_quiz_agent),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    # Use tracked results when the caller asks for adaptation without supplying performance
    if data.adaptive_difficulty and data.user_performance is None and data.topic and data.language:
        performance = await repo.get_user_performance(user_id, data.topic, data.language)
        if performance is not None:
            data = data.model_copy(update={"user_performance": performance})

    start_time = time.time()
    result = await agent.generate_quiz(data)
    request.state.quiz_outcome = f"{result.difficulty}/{result.source}"
    logger.info(
        f"Quiz ready for '{result.topic}' ({result.difficulty}, {result.source}) "
        f"in {(time.time() - start_time) * 1000:.2f}ms"
    )
    return result


@app.get("/quiz/topics", response_model=TopicsResponse)
async def list_quiz_topics():
    """Topics and difficulties the fallback question bank covers"""
    return TopicsResponse(topics=get_available_topics(), difficulties=get_available_difficulties())


@app.post("/quiz-results", response_model=MessageResponse)
async def record_quiz_result(
    result: QuizResultRecord,
    user_id: str = Depends(get_user_id),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    await repo.save_result(user_id, result)
    return MessageResponse(message="Quiz result recorded")


@app.get("/quiz-results", response_model=HistoryResponse)
async def get_quiz_history(
    user_id: str = Depends(get_user_id),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    history = await repo.get_history(user_id)
    return HistoryResponse(user_id=user_id, history=history, total_count=len(history))


@app.delete("/quiz-results", response_model=MessageResponse)
async def clear_quiz_history(
    user_id: str = Depends(get_user_id),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    await repo.clear_history(user_id)
    return MessageResponse(message="Quiz history cleared")


@app.get("/performance", response_model=PerformanceStats)
async def get_performance(
    topic: str = Query(..., description="Quiz topic"),
    language: str = Query(..., description="Programming language"),
    user_id: str = Depends(get_user_id),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    return await repo.get_performance_stats(user_id, topic, language)


@app.get("/performance/difficulty", response_model=DifficultyEstimateResponse)
async def get_estimated_difficulty(
    topic: str = Query(..., description="Quiz topic"),
    language: str = Query(..., description="Programming language"),
    user_id: str = Depends(get_user_id),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    difficulty = await repo.estimate_difficulty(user_id, topic, language)
    return DifficultyEstimateResponse(topic=topic, language=language, difficulty=difficulty)


@app.get("/performance/global", response_model=GlobalStats)
async def get_global_performance(
    user_id: str = Depends(get_user_id),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    return await repo.get_global_stats(user_id)


@app.get("/performance/export", response_model=PerformanceExport)
async def export_performance(
    user_id: str = Depends(get_user_id),
    repo: PerformanceRepository = Depends(get_performance_repo)
):
    return await repo.export_data(user_id)


@app.get("/logs/stats")
async def get_logging_stats(repo: PerformanceRepository = Depends(get_performance_repo)):
    """Request, generation and fallback counters"""
    return {
        "logging_stats": get_log_stats(),
        "system_info": {
            "log_file_exists": os.path.exists(settings.log_file),
            "search_enrichment_enabled": bool(settings.bing_search_api_key),
            "generation_configured": bool(settings.deepseek_api_key),
            "tracked_users": len(await repo.tracked_users())
        }
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "Programming Quiz API is running"}


@app.get("/")
async def root():
    return {
        "message": "Programming Quiz API",
        "version": "1.0.0",
        "docs": "/docs",
        "openapi": "/openapi.json",
        "quiz": {
            "generate": "/generate-quiz",
            "topics": "/quiz/topics",
            "results": "/quiz-results",
            "performance": "/performance"
        }
    }


if __name__ == "__main__":
    uvicorn.run("api_server.main:app", host="0.0.0.0", port=8000, reload=True)
