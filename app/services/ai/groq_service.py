"""
Groq Completion Service Implementation
"""
from typing import Optional, Dict, Any
from groq import AsyncGroq, APIError
from loguru import logger

from app.core.config import Settings
from app.core.exceptions import CompletionError
from app.core.interfaces.completion_service import CompletionService


class GroqCompletionService(CompletionService):
    """
    Groq chat completion service

    Sends every prompt as a single user message to a fixed model with a
    fixed temperature. Timeouts and transport retries are left to the
    Groq client defaults.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncGroq] = None):
        """
        Initialize Groq service

        Args:
            settings: Application settings holding the key, model and temperature
            client: Optional preconfigured client, mainly for tests
        """
        self.settings = settings
        self.model_name = settings.groq_model
        self.temperature = settings.temperature
        self.client = client or AsyncGroq(api_key=settings.groq_api_key)

        self._total_requests = 0
        self._failed_requests = 0

        logger.info(f"Initialized GroqCompletionService with model {self.model_name}")

    async def complete(self, prompt: str) -> str:
        """
        Send one chat completion request and return the first choice text

        Args:
            prompt: Prompt text, sent verbatim

        Returns:
            Content of the first choice, empty string if the model returned none

        Raises:
            CompletionError: If the request fails or no choice is returned
        """
        self._total_requests += 1

        try:
            chat = await self.client.chat.completions.create(
                model=self.model_name,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
            )
        except APIError as error:
            self._failed_requests += 1
            logger.warning(f"❌ Groq request failed: {error}")
            raise CompletionError(str(error)) from error

        if not chat.choices:
            self._failed_requests += 1
            logger.warning("❌ Groq response contained no choices")
            raise CompletionError("Completion service returned no choices")

        logger.info(f"✅ Groq request successful ({self.model_name})")
        return chat.choices[0].message.content or ""

    def get_service_name(self) -> str:
        """Return the name of the completion service"""
        return "Groq"

    def is_available(self) -> bool:
        """Check if the service is configured"""
        return bool(self.settings.groq_api_key)

    async def get_statistics(self) -> Dict[str, Any]:
        """
        Get service statistics

        Returns:
            Dictionary with request counters and model configuration
        """
        return {
            "service_name": self.get_service_name(),
            "available": self.is_available(),
            "model_name": self.model_name,
            "temperature": self.temperature,
            "total_requests": self._total_requests,
            "failed_requests": self._failed_requests
        }
