import os
from typing import List

from dotenv import load_dotenv

load_dotenv(override=True)


class Settings:
    """Runtime settings read from the environment"""

    # Completion provider (OpenAI-compatible chat API)
    DEEPSEEK_BASE_URL = "https://api.deepseek.com/v1"
    QUIZ_MODEL = "deepseek-chat"
    QUIZ_MAX_TOKENS = 1500
    GENERATION_TIMEOUT_SECONDS = 30.0

    # Search provider
    BING_SEARCH_URL = "https://api.bing.microsoft.com/v7.0/search"
    SEARCH_RESULT_COUNT = 3
    SEARCH_TIMEOUT_SECONDS = 10.0

    # Logging
    LOG_FILE = "logs/app.log"
    LOG_LEVEL = "INFO"

    CORS_ORIGINS = "http://localhost:3000"

    def __init__(self):
        self.deepseek_api_key = os.getenv("DEEPSEEK_API_KEY", "")
        self.deepseek_base_url = os.getenv("DEEPSEEK_BASE_URL", self.DEEPSEEK_BASE_URL)
        self.quiz_model = os.getenv("QUIZ_MODEL", self.QUIZ_MODEL)
        self.quiz_max_tokens = int(os.getenv("QUIZ_MAX_TOKENS", self.QUIZ_MAX_TOKENS))
        self.generation_timeout = float(
            os.getenv("GENERATION_TIMEOUT_SECONDS", self.GENERATION_TIMEOUT_SECONDS)
        )

        self.bing_search_api_key = os.getenv("BING_SEARCH_API_KEY", "")
        self.bing_search_url = os.getenv("BING_SEARCH_URL", self.BING_SEARCH_URL)
        self.search_timeout = float(
            os.getenv("SEARCH_TIMEOUT_SECONDS", self.SEARCH_TIMEOUT_SECONDS)
        )

        self.redis_url = os.getenv("REDIS_URL", "")

        self.log_file = os.getenv("LOG_FILE", self.LOG_FILE)
        self.log_level = os.getenv("LOG_LEVEL", self.LOG_LEVEL)

        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", self.CORS_ORIGINS).split(",")
            if origin.strip()
        ]


settings = Settings()
