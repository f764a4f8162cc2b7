"""SQLAlchemy table definitions for QuickBlog.

Posts are stored as opaque JSON documents keyed by post id. The table
matches the schema created by the Alembic migrations.
"""

from sqlalchemy import Column, MetaData, String, Table, Text
from sqlalchemy.types import TIMESTAMP

metadata = MetaData()

post_blobs_table = Table(
    "post_blobs",
    metadata,
    Column("key", String(64), primary_key=True),  # Post id
    Column("value", Text, nullable=False),  # Post as JSON
    Column("stored_at", TIMESTAMP(timezone=True), nullable=False),
)
