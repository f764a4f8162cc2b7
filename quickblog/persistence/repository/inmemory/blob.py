"""In-memory blob store for testing."""

from typing import Optional

from quickblog.persistence.blob import BlobStore


class InMemoryBlobStore(BlobStore):
    """In-memory implementation of BlobStore for testing."""

    def __init__(self) -> None:
        self._blobs: dict[str, str] = {}

    async def keys(self) -> list[str]:
        return list(self._blobs)

    async def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    async def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    async def delete(self, key: str) -> bool:
        return self._blobs.pop(key, None) is not None
