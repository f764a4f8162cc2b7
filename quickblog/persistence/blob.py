"""Key-value blob storage.

The Post Store keeps each post as one JSON string under its id. Individual
reads and writes are atomic; nothing spans several keys.
"""

from abc import ABC, abstractmethod
from typing import Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quickblog.domain.model.common import utcnow
from quickblog.persistence.tables import post_blobs_table


class BlobStore(ABC):
    """Key-value store of string blobs."""

    @abstractmethod
    async def keys(self) -> list[str]:
        """Return all stored keys."""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the blob under key, or None."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a blob, replacing any previous value."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a blob. Returns True if the key existed."""
        pass


class SqlBlobStore(BlobStore):
    """Blob store backed by the ``post_blobs`` table.

    Each write commits on its own, so a caller only sees success once the
    blob is durable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def keys(self) -> list[str]:
        result = await self.session.execute(select(post_blobs_table.c.key))
        return [row.key for row in result.fetchall()]

    async def get(self, key: str) -> Optional[str]:
        stmt = select(post_blobs_table.c.value).where(post_blobs_table.c.key == key)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row.value if row else None

    async def set(self, key: str, value: str) -> None:
        with logfire.span("blob_store.set", key=key, size=len(value)):
            existing = await self.session.execute(
                select(post_blobs_table.c.key).where(post_blobs_table.c.key == key)
            )
            if existing.fetchone():
                stmt = (
                    update(post_blobs_table)
                    .where(post_blobs_table.c.key == key)
                    .values(value=value, stored_at=utcnow())
                )
            else:
                stmt = insert(post_blobs_table).values(
                    key=key, value=value, stored_at=utcnow()
                )
            await self.session.execute(stmt)
            await self.session.commit()

    async def delete(self, key: str) -> bool:
        with logfire.span("blob_store.delete", key=key):
            result = await self.session.execute(
                delete(post_blobs_table).where(post_blobs_table.c.key == key)
            )
            await self.session.commit()
            return result.rowcount > 0
