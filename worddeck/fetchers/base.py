"""Common interface for speech renderers."""

from abc import ABC, abstractmethod


class BaseFetcher(ABC):
    """
    Renders text to an audio file.

    Implementations report failure by returning False rather than raising,
    and may hold network sessions that ``close()`` releases. Usable as
    ``async with``.
    """

    name: str = "base"

    @abstractmethod
    async def fetch(self, source: str, output_path: str, **options) -> bool:
        """
        Args:
            source: Text to speak
            output_path: Destination file
            **options: Renderer options such as ``language`` and ``volume``

        Returns:
            True once ``output_path`` holds playable audio
        """

    def supports(self, language: str) -> bool:
        """Whether this renderer has a voice for the speech tag."""
        return True

    async def close(self) -> None:
        return None

    async def __aenter__(self) -> "BaseFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
