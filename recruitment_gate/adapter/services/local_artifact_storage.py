"""
Local Artifact Storage

Stores uploaded videos on the local filesystem under a configured root.
Locators are keys relative to that root.
"""

import asyncio
import logging
import threading
from pathlib import Path
from typing import AsyncIterator

from recruitment_gate.app.services.artifact_storage import (
    ArtifactNotFoundError,
    IArtifactStorage,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class LocalArtifactStorage(IArtifactStorage):
    """IArtifactStorage backed by a directory, with bounded writes"""

    def __init__(self, root: str, timeout: float = 30.0):
        self.root = Path(root)
        self.timeout = timeout

    def _path_for(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if self.root.resolve() not in path.parents:
            raise ValueError(f"Key escapes storage root: {key}")
        return path

    async def store(self, data: bytes, key: str) -> str:
        path = self._path_for(key)
        cancelled = threading.Event()
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._write, path, data, cancelled),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            cancelled.set()
            # The write thread may still be running; drop whatever it left behind
            await self._discard(path)
            raise StorageUnavailableError(f"Timed out storing {key}")
        except OSError as e:
            raise StorageUnavailableError(f"Could not store {key}: {e}") from e

        logger.info(f"Stored artifact {key} ({len(data)} bytes)")
        return key

    @staticmethod
    def _write(path: Path, data: bytes, cancelled: threading.Event) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "xb") as f:
            for start in range(0, len(data), CHUNK_SIZE):
                if cancelled.is_set():
                    break
                f.write(data[start:start + CHUNK_SIZE])
        if cancelled.is_set():
            path.unlink(missing_ok=True)

    @staticmethod
    async def _discard(path: Path) -> None:
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove partial artifact {path}: {e}")

    async def retrieve_stream(self, locator: str) -> AsyncIterator[bytes]:
        path = self._path_for(locator)
        if not path.is_file():
            raise ArtifactNotFoundError(locator)
        return self._iter_file(path)

    @staticmethod
    async def _iter_file(path: Path) -> AsyncIterator[bytes]:
        with open(path, "rb") as f:
            while True:
                chunk = await asyncio.to_thread(f.read, CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk

    async def delete(self, locator: str) -> None:
        path = self._path_for(locator)
        await asyncio.to_thread(path.unlink, missing_ok=True)
