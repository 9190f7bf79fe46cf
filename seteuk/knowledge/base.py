from abc import ABC, abstractmethod


class BaseDocumentStore(ABC):
    """Contract for the static store of named reference documents."""

    @abstractmethod
    async def fetch(self, name: str) -> bytes:
        """Return the raw bytes of the named document.

        Args:
            name: Relative document name, e.g. '동아리활동 우수사례 1.pdf'.

        Raises:
            ResourceUnavailableError: if the document is missing or the fetch fails.
        """
