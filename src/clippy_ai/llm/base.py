"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract LLM provider interface."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Generate a completion for a single user prompt.

        Args:
            prompt: Fully rendered prompt text.

        Returns the text content of the response.
        """

    @abstractmethod
    def list_models(self) -> list[str]:
        """Identifiers of the models that can generate content, in provider order."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier used by :meth:`generate`."""

    def close(self) -> None:
        """Release network resources held by the provider."""

    def __enter__(self) -> "LLMProvider":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
