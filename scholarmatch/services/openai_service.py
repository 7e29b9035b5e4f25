from openai import OpenAI
from openai import APIConnectionError, APITimeoutError, RateLimitError
from scholarmatch.config import settings
from typing import Any, Dict, List, Optional
import logging
import time

logger = logging.getLogger(__name__)


class OpenAIService:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        api_key = settings.OPENAI_API_KEY if api_key is None else api_key
        self.model = model or settings.OPENAI_MODEL
        self.temperature = settings.OPENAI_TEMPERATURE
        if api_key:
            # chat_completion owns retries; the client never retries on its own
            self.client = OpenAI(
                api_key=api_key,
                timeout=settings.OPENAI_TIMEOUT,
                max_retries=0
            )
            self.available = True
        else:
            self.client = None
            self.available = False

    def chat_completion(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        response_format: Optional[Dict[str, Any]] = None,
        max_retries: Optional[int] = None
    ):
        """Generate chat completion, retrying transient connection errors up to `max_retries` times"""
        if not self.available:
            raise RuntimeError("OpenAI API key not configured")
        attempts = 1 + (settings.OPENAI_MAX_RETRIES if max_retries is None else max_retries)

        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature if temperature is None else temperature,
        }
        if response_format is not None:
            kwargs["response_format"] = response_format

        for attempt in range(attempts):
            try:
                return self.client.chat.completions.create(**kwargs)
            except (APIConnectionError, APITimeoutError) as e:
                if attempt < attempts - 1:
                    wait_time = 2 ** attempt  # Exponential backoff: 1s, 2s, 4s
                    logger.warning(f"OpenAI connection error (attempt {attempt + 1}/{attempts}). Retrying in {wait_time}s: {e}")
                    time.sleep(wait_time)
                else:
                    logger.error(f"OpenAI connection failed after {attempts} attempts")
                    raise
            except RateLimitError:
                # Quota errors do not clear within a request's lifetime
                logger.error("OpenAI rate limit exceeded")
                raise

    def structured_completion(
        self,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        schema: Dict[str, Any],
    ) -> str:
        """
        Ask the model for JSON that conforms to `schema`.
        Returns the raw message content; parsing is the caller's job.
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        response = self.chat_completion(
            messages,
            response_format={
                "type": "json_schema",
                "json_schema": {"name": schema_name, "strict": True, "schema": schema},
            },
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
