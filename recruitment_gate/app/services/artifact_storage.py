from abc import ABC, abstractmethod
from typing import AsyncIterator


class StorageUnavailableError(Exception):
    """Artifact storage could not complete the operation"""


class ArtifactNotFoundError(Exception):
    """No stored object exists for the locator"""


class IArtifactStorage(ABC):
    """Binary artifact storage capability (recorded videos)"""

    @abstractmethod
    async def store(self, data: bytes, key: str) -> str:
        """Store bytes under key and return a locator.

        Raises StorageUnavailableError on failure or timeout.
        """
        pass

    @abstractmethod
    async def retrieve_stream(self, locator: str) -> AsyncIterator[bytes]:
        """Open a stored object as an async iterator of chunks.

        Raises ArtifactNotFoundError if nothing is stored at locator.
        """
        pass

    @abstractmethod
    async def delete(self, locator: str) -> None:
        """Remove a stored object; missing objects are ignored"""
        pass
