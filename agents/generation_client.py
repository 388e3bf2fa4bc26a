import asyncio
import logging
from typing import Any, Optional

from langchain.chat_models import init_chat_model
from langchain_core.prompts import ChatPromptTemplate

from utils.config import settings
from utils.errors import ConfigurationError, GenerationError

logger = logging.getLogger(__name__)


class GenerationClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        base_url: Optional[str] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        llm_model: Any = None,
    ):
        """
        Chat-completion client for quiz generation.

        Args:
            api_key: Provider credential (defaults to DEEPSEEK_API_KEY).
            model_name: Model identifier (defaults to QUIZ_MODEL).
            base_url: OpenAI-compatible endpoint (defaults to DEEPSEEK_BASE_URL).
            max_tokens: Output budget per completion.
            timeout: Seconds to wait for one completion.
            llm_model: Prebuilt chat model; skips provider setup and the credential check.
        """
        self.api_key = api_key if api_key is not None else settings.deepseek_api_key
        self.model_name = model_name or settings.quiz_model
        self.base_url = base_url or settings.deepseek_base_url
        self.max_tokens = max_tokens or settings.quiz_max_tokens
        self.timeout = timeout or settings.generation_timeout
        self._llm_model = llm_model

        self.prompt_template = ChatPromptTemplate.from_messages([
            ("system", "{system_prompt}"),
            ("human", "{user_prompt}"),
        ])

    def is_configured(self) -> bool:
        return self._llm_model is not None or bool(self.api_key)

    @property
    def llm_model(self) -> Any:
        if self._llm_model is None:
            if not self.api_key:
                raise ConfigurationError(
                    "DEEPSEEK_API_KEY not set. Set it in the environment or pass api_key."
                )
            # Single attempt per quiz request; the fallback bank covers failures.
            self._llm_model = init_chat_model(
                self.model_name,
                model_provider="openai",
                api_key=self.api_key,
                base_url=self.base_url,
                max_tokens=self.max_tokens,
                temperature=0.7,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._llm_model

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send one system + user exchange and return the first choice's text.

        Raises:
            ConfigurationError: No credential is configured.
            GenerationError: The provider failed, returned a non-2xx status, or timed out.
        """
        chain = self.prompt_template | self.llm_model

        try:
            response = await asyncio.wait_for(
                chain.ainvoke({"system_prompt": system_prompt, "user_prompt": user_prompt}),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise GenerationError(
                f"Completion provider did not answer within {self.timeout:g}s"
            ) from e
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            logger.warning(f"Completion request failed (status={status_code}): {e}")
            raise GenerationError(
                f"Completion provider error: {status_code or 'n/a'} - {e}",
                status_code=status_code,
            ) from e

        content = getattr(response, "content", response)
        return content if isinstance(content, str) else str(content)
