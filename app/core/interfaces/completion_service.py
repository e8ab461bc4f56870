"""
Abstract base interface for completion services
"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class CompletionService(ABC):
    """
    Abstract base class for text completion services

    Implementations take a single prompt and return the raw text
    of the model's first choice. Failures are raised as CompletionError.
    """

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Generate a completion for a prompt

        Args:
            prompt: The full prompt sent as a single user message

        Returns:
            Text content of the first returned choice

        Raises:
            CompletionError: On transport, authentication or upstream errors
        """
        pass

    @abstractmethod
    def get_service_name(self) -> str:
        """Return the name of the completion service"""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the service is configured"""
        pass

    async def get_statistics(self) -> Dict[str, Any]:
        """Return basic usage statistics"""
        return {
            "service_name": self.get_service_name(),
            "available": self.is_available()
        }
