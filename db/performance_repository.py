import asyncio
import logging
import math
import time
from collections import Counter, defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional

from db.storage import KeyValueStore
from models.performance_models import (
    GlobalStats,
    PerformanceExport,
    PerformanceStats,
    QuizResultRecord,
)
from models.quiz_models import Difficulty, UserPerformance
from utils.difficulty import estimate_difficulty

SECONDS_PER_DAY = 24 * 60 * 60


class PerformanceRepository:
    MAX_HISTORY = 50
    RECENT_WINDOW_DAYS = 30

    def __init__(self, store: KeyValueStore, max_history: int = MAX_HISTORY):
        self.store = store
        self.max_history = max_history
        # Saves are read-modify-write on one key per user
        self._locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info("PerformanceRepository initialized")

    def _history_key(self, user_id: str) -> str:
        return f"quiz_history:{user_id}"

    async def save_result(self, user_id: str, result: QuizResultRecord) -> None:
        async with self._locks[user_id]:
            history = await self.get_history(user_id)
            history.append(result)
            # Keep only the most recent results
            history = history[-self.max_history:]
            await self.store.set(
                self._history_key(user_id),
                [record.model_dump(mode="json") for record in history],
            )
        self.logger.info(
            f"Saved quiz result for user {user_id}: {result.score}/{result.total_questions} "
            f"on {result.topic} ({result.language})"
        )

    async def get_history(self, user_id: str) -> List[QuizResultRecord]:
        stored = await self.store.get(self._history_key(user_id)) or []
        return [QuizResultRecord.model_validate(item) for item in stored]

    async def clear_history(self, user_id: str) -> bool:
        async with self._locks[user_id]:
            cleared = await self.store.delete(self._history_key(user_id))
        self.logger.info(f"Cleared quiz history for user {user_id}")
        return cleared

    async def tracked_users(self) -> List[str]:
        """User ids that have a stored quiz history."""
        prefix = self._history_key("")
        return sorted(key[len(prefix):] for key in await self.store.keys(prefix))

    async def _topic_results(self, user_id: str, topic: str, language: str) -> List[QuizResultRecord]:
        history = await self.get_history(user_id)
        return [r for r in history if r.topic == topic and r.language == language]

    @staticmethod
    def _average_ratio(results: List[QuizResultRecord]) -> float:
        if not results:
            return 0.0
        return sum(r.ratio for r in results) / len(results)

    @staticmethod
    def _average_time_per_question(results: List[QuizResultRecord]) -> Optional[float]:
        timed = [r for r in results if r.time_spent]
        if not timed:
            return None
        return sum(r.time_spent / r.total_questions for r in timed) / len(timed)

    async def estimate_difficulty(
        self, user_id: str, topic: str, language: str, now: Optional[float] = None
    ) -> Difficulty:
        """Suggest a level from the last 30 days of results on this topic and language."""
        cutoff = (now if now is not None else time.time()) - self.RECENT_WINDOW_DAYS * SECONDS_PER_DAY
        recent = [
            r for r in await self._topic_results(user_id, topic, language)
            if r.timestamp > cutoff
        ]
        if not recent:
            return "beginner"

        total_score = sum(r.score for r in recent)
        total_questions = sum(r.total_questions for r in recent)
        return estimate_difficulty(total_score / total_questions)

    def generate_learning_path(self, results: List[QuizResultRecord]) -> List[str]:
        path = []
        average = self._average_ratio(results[-5:])

        if average < 0.6:
            path += ["Review fundamental concepts", "Practice basic syntax", "Take beginner-level quizzes"]
        elif average < 0.8:
            path += ["Practice intermediate concepts", "Work on problem-solving", "Try scenario-based questions"]
        else:
            path += ["Advanced topics exploration", "Real-world applications", "Teach others (peer learning)"]

        quiz_types = Counter(r.quiz_type for r in results if r.quiz_type)
        if quiz_types:
            most_used = quiz_types.most_common(1)[0][0]
            if most_used == "multiple-choice":
                path.append("Try code completion questions")
            elif most_used == "code-completion":
                path.append("Practice scenario-based questions")

        return path

    def calculate_consistency_score(self, results: List[QuizResultRecord]) -> float:
        """100 minus the mean number of days between quizzes, clamped to 0-100."""
        if len(results) < 2:
            return 0.0

        ordered = sorted(results, key=lambda r: r.timestamp)
        gaps = [b.timestamp - a.timestamp for a, b in zip(ordered, ordered[1:])]
        average_gap_days = sum(gaps) / len(gaps) / SECONDS_PER_DAY
        return min(100.0, max(0.0, 100 - average_gap_days))

    def identify_weak_areas(self, results: List[QuizResultRecord]) -> List[str]:
        weak_areas = []
        average = self._average_ratio(results[-3:])

        if average < 0.5:
            weak_areas += ["Basic concepts", "Fundamental syntax"]
        if average < 0.7:
            weak_areas.append("Problem-solving skills")

        seconds_per_question = self._average_time_per_question(results)
        if seconds_per_question is not None and seconds_per_question > 120:
            weak_areas.append("Speed and efficiency")

        return weak_areas

    def identify_strong_areas(self, results: List[QuizResultRecord]) -> List[str]:
        strong_areas = []
        average = self._average_ratio(results[-3:])

        if average > 0.8:
            strong_areas += ["Conceptual understanding", "Problem-solving"]
        if any(r.streak_count and r.streak_count > 2 for r in results):
            strong_areas.append("Consistent performance")

        seconds_per_question = self._average_time_per_question(results)
        if seconds_per_question is not None and seconds_per_question < 60:
            strong_areas.append("Quick thinking")

        return strong_areas

    async def get_performance_stats(self, user_id: str, topic: str, language: str) -> PerformanceStats:
        results = await self._topic_results(user_id, topic, language)
        if not results:
            return PerformanceStats()

        results.sort(key=lambda r: r.timestamp)
        total_score = sum(r.score for r in results)
        total_questions = sum(r.total_questions for r in results)
        total_time_spent = sum(r.time_spent or 0 for r in results)

        split = math.ceil(len(results) / 2)
        first_half = self._average_ratio(results[:split])
        second_half = self._average_ratio(results[split:])
        improvement_rate = (
            (second_half - first_half) / first_half * 100
            if first_half > 0 and results[split:]
            else 0.0
        )

        last_quiz = datetime.fromtimestamp(results[-1].timestamp, tz=timezone.utc)

        return PerformanceStats(
            total_quizzes=len(results),
            average_score=round(total_score / total_questions * 100, 2),
            best_score=round(max(r.ratio for r in results) * 100, 2),
            current_difficulty=await self.estimate_difficulty(user_id, topic, language),
            total_time_spent=total_time_spent,
            average_time_per_question=round(total_time_spent / total_questions, 2),
            streak_history=[r.streak_count for r in results if r.streak_count],
            improvement_rate=round(improvement_rate, 2),
            weak_areas=self.identify_weak_areas(results),
            strong_areas=self.identify_strong_areas(results),
            learning_path=self.generate_learning_path(results),
            last_quiz_date=last_quiz.date().isoformat(),
            consistency_score=round(self.calculate_consistency_score(results), 2),
        )

    async def get_user_performance(self, user_id: str, topic: str, language: str) -> Optional[UserPerformance]:
        """Summarize tracked results as the performance input for adaptive difficulty."""
        stats = await self.get_performance_stats(user_id, topic, language)
        if stats.total_quizzes == 0:
            return None
        return UserPerformance(
            average_score=stats.average_score,
            weak_areas=stats.weak_areas,
            strong_areas=stats.strong_areas,
        )

    async def get_global_stats(self, user_id: str) -> GlobalStats:
        history = await self.get_history(user_id)
        if not history:
            return GlobalStats()

        total_questions = sum(r.total_questions for r in history)
        total_score = sum(r.score for r in history)
        languages = Counter(r.language for r in history)
        topics = Counter(r.topic for r in history)

        return GlobalStats(
            total_quizzes=len(history),
            total_questions=total_questions,
            average_score=round(total_score / total_questions * 100, 2),
            total_time_spent=sum(r.time_spent or 0 for r in history),
            favorite_language=languages.most_common(1)[0][0],
            favorite_topic=topics.most_common(1)[0][0],
            total_streak=max((r.streak_count or 0 for r in history), default=0),
        )

    async def export_data(self, user_id: str) -> PerformanceExport:
        return PerformanceExport(
            history=await self.get_history(user_id),
            global_stats=await self.get_global_stats(user_id),
            export_date=datetime.now(timezone.utc).isoformat(),
        )
