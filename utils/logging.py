import logging
import logging.handlers
import os
import json
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any
from fastapi import Request

from utils.config import settings


class AppLogger:
    """Application logger with request, AI call and fallback tracking"""

    def __init__(self,
                 log_file: str = settings.log_file,
                 max_file_size: int = 10 * 1024 * 1024,  # 10MB
                 backup_count: int = 5,
                 log_level: str = settings.log_level):

        self.log_file = log_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count

        log_dir = Path(log_file).parent
        log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger("quiz_service")
        self.logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        console_handler = logging.StreamHandler()

        formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

        self.stats = {
            "total_requests": 0,
            "failed_requests": 0,
            "rejected_requests": 0,
            "ai_requests": 0,
            "fallbacks": 0,
            "start_time": time.time()
        }

        self.logger.info("🚀 Logging system initialized")
        self.logger.info(f"📁 Log file: {log_file}")

    def log_request_start(self, request: Request, endpoint: str, user_id: Optional[str] = None):
        """Log the start of a request with details"""
        client_ip = request.client.host if request.client else "unknown"

        request_info = {
            "endpoint": endpoint,
            "method": request.method,
            "client_ip": client_ip,
            "user_id": user_id or "anonymous",
            "timestamp": datetime.now().isoformat()
        }

        self.logger.info(f"🔵 REQUEST START | {endpoint} | User: {user_id or 'anonymous'} | IP: {client_ip}")
        return request_info

    def log_request_end(self, request_info: Dict[str, Any], duration_ms: float, status_code: int = 200,
                        quiz_outcome: Optional[str] = None):
        """Log the end of a request; 4xx are counted as rejected, 5xx as failed"""
        self.stats["total_requests"] += 1
        if status_code >= 500:
            self.stats["failed_requests"] += 1
        elif status_code >= 400:
            self.stats["rejected_requests"] += 1

        status_emoji = "✅" if status_code < 400 else "⚠️" if status_code < 500 else "❌"
        quiz = f" | Quiz: {quiz_outcome}" if quiz_outcome else ""

        self.logger.info(
            f"{status_emoji} REQUEST END | {request_info['endpoint']} | User: {request_info['user_id']} | "
            f"Duration: {duration_ms:.2f}ms | Status: {status_code}{quiz}"
        )

    def log_ai_request(self, agent_type: str, topic: str, duration_ms: float, user_id: Optional[str] = None):
        """Log completion provider calls"""
        self.stats["ai_requests"] += 1
        self.logger.info(
            f"🤖 AI REQUEST | {agent_type} | Topic: {topic} | Duration: {duration_ms:.2f}ms | "
            f"User: {user_id or 'anonymous'}"
        )

    def log_fallback(self, topic: str, difficulty: str, reason: Exception):
        """Log a switch from generated content to the question bank"""
        self.stats["fallbacks"] += 1
        self.logger.warning(
            f"🛟 FALLBACK | Topic: {topic} | Difficulty: {difficulty} | "
            f"Reason: {type(reason).__name__}: {reason}"
        )

    def log_error(self, error: Exception, endpoint: str, user_id: Optional[str] = None, extra_context: Dict = None):
        """Log errors with context"""
        context = f" | Context: {json.dumps(extra_context, default=str)}" if extra_context else ""

        self.logger.error(
            f"💥 ERROR | {endpoint} | {type(error).__name__}: {str(error)} | "
            f"User: {user_id or 'anonymous'}{context}",
            exc_info=True
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get request and generation counters"""
        uptime_hours = (time.time() - self.stats["start_time"]) / 3600
        ai_requests = self.stats["ai_requests"]
        fallbacks = self.stats["fallbacks"]

        return {
            "total_requests": self.stats["total_requests"],
            "failed_requests": self.stats["failed_requests"],
            "rejected_requests": self.stats["rejected_requests"],
            "ai_requests": ai_requests,
            "fallbacks": fallbacks,
            "fallback_rate_percent": round(fallbacks / max(ai_requests + fallbacks, 1) * 100, 2),
            "requests_per_hour": round(self.stats["total_requests"] / max(uptime_hours, 0.01), 2),
            "uptime_hours": round(uptime_hours, 2),
            "log_file": self.log_file,
            "log_file_size_mb": round(os.path.getsize(self.log_file) / (1024*1024), 2) if os.path.exists(self.log_file) else 0
        }

    def log_periodic_stats(self):
        """Log periodic request and generation statistics"""
        stats = self.get_stats()

        self.logger.info(
            f"📊 PERIODIC STATS | Requests: {stats['total_requests']} | "
            f"Rejected: {stats['rejected_requests']} | Failed: {stats['failed_requests']} | "
            f"AI Requests: {stats['ai_requests']} | "
            f"Fallback Rate: {stats['fallback_rate_percent']}% | "
            f"Req/Hour: {stats['requests_per_hour']} | "
            f"Uptime: {stats['uptime_hours']}h"
        )


# Global logger instance
app_logger = AppLogger()


# Convenience functions for easy usage
def log_request_start(request: Request, endpoint: str, user_id: Optional[str] = None):
    return app_logger.log_request_start(request, endpoint, user_id)

def log_request_end(request_info: Dict[str, Any], duration_ms: float, status_code: int = 200,
                    quiz_outcome: Optional[str] = None):
    app_logger.log_request_end(request_info, duration_ms, status_code, quiz_outcome)

def log_ai_request(agent_type: str, topic: str, duration_ms: float, user_id: Optional[str] = None):
    app_logger.log_ai_request(agent_type, topic, duration_ms, user_id)

def log_fallback(topic: str, difficulty: str, reason: Exception):
    app_logger.log_fallback(topic, difficulty, reason)

def log_error(error: Exception, endpoint: str, user_id: Optional[str] = None, extra_context: Dict = None):
    app_logger.log_error(error, endpoint, user_id, extra_context)

def get_log_stats():
    return app_logger.get_stats()

def log_periodic_stats():
    app_logger.log_periodic_stats()
