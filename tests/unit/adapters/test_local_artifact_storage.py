import asyncio
import threading
import time

import pytest

from recruitment_gate.adapter.services.local_artifact_storage import LocalArtifactStorage
from recruitment_gate.app.services.artifact_storage import (
    ArtifactNotFoundError,
    StorageUnavailableError,
)


@pytest.mark.asyncio
async def test_store_and_stream_back(tmp_path):
    storage = LocalArtifactStorage(str(tmp_path))
    data = b"video-bytes" * 10000

    locator = await storage.store(data, "videos/w1/clip.webm")
    stream = await storage.retrieve_stream(locator)
    chunks = [chunk async for chunk in stream]

    assert locator == "videos/w1/clip.webm"
    assert b"".join(chunks) == data
    assert len(chunks) > 1


@pytest.mark.asyncio
async def test_store_never_overwrites(tmp_path):
    storage = LocalArtifactStorage(str(tmp_path))
    await storage.store(b"first", "videos/w1/clip.webm")

    with pytest.raises(StorageUnavailableError):
        await storage.store(b"second", "videos/w1/clip.webm")


@pytest.mark.asyncio
async def test_missing_object(tmp_path):
    storage = LocalArtifactStorage(str(tmp_path))

    with pytest.raises(ArtifactNotFoundError):
        await storage.retrieve_stream("videos/nope.webm")


@pytest.mark.asyncio
async def test_delete_is_idempotent(tmp_path):
    storage = LocalArtifactStorage(str(tmp_path))
    await storage.store(b"data", "videos/w1/clip.webm")

    await storage.delete("videos/w1/clip.webm")
    await storage.delete("videos/w1/clip.webm")

    assert not (tmp_path / "videos" / "w1" / "clip.webm").exists()


@pytest.mark.asyncio
async def test_keys_cannot_escape_root(tmp_path):
    storage = LocalArtifactStorage(str(tmp_path / "root"))

    with pytest.raises(ValueError):
        await storage.store(b"data", "../outside.webm")


@pytest.mark.asyncio
async def test_timed_out_store_leaves_no_file(tmp_path, monkeypatch):
    def stalled_write(path, data, cancelled):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "xb") as f:
            f.write(data[:4])
            f.flush()
            time.sleep(0.3)

    monkeypatch.setattr(LocalArtifactStorage, "_write", staticmethod(stalled_write))
    storage = LocalArtifactStorage(str(tmp_path), timeout=0.05)
    target = tmp_path / "videos" / "w1" / "clip.webm"

    with pytest.raises(StorageUnavailableError):
        await storage.store(b"partial-video", "videos/w1/clip.webm")
    assert not target.exists()

    # Let the stalled thread finish
    await asyncio.sleep(0.5)
    assert not target.exists()


def test_cancelled_write_removes_its_file(tmp_path):
    cancelled = threading.Event()
    cancelled.set()
    target = tmp_path / "videos" / "clip.webm"

    LocalArtifactStorage._write(target, b"data" * 100, cancelled)

    assert not target.exists()
