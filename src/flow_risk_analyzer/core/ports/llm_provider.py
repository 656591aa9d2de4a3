from abc import ABC, abstractmethod


class LlmProvider(ABC):
    """Port for the single prompt/reply exchange the extractor needs.

    Implementations MUST raise ApiError on transport failures and on any
    non-2xx reply. They never retry.
    """

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Send *prompt* as one user message and return the reply text."""
