"""
SQLAlchemy-backed MetaStore.

One row per (item_id, meta_key) in the ``content_meta`` table. Rendering is
synchronous, so this store uses a plain (non-async) engine and session.
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from sqlalchemy import Column, Index, Integer, String, Text, UniqueConstraint, create_engine, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from universal_seo.config import settings
from universal_seo.exceptions import StorageError, ValidationError
from universal_seo.storage.meta import MetaStore

logger = logging.getLogger(__name__)

Base = declarative_base()


class ContentMeta(Base):
    __tablename__ = "content_meta"

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_id = Column(Integer, nullable=False, index=True)
    meta_key = Column(String(255), nullable=False)
    meta_value = Column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("item_id", "meta_key", name="unique_item_meta_key"),
        Index("idx_content_meta_key", "meta_key"),
    )


class SqlAlchemyMetaStore(MetaStore):
    def __init__(self, database_url: str | None = None, engine=None, create_tables: bool = True) -> None:
        url = database_url or settings.database_url
        if engine is None:
            if url.startswith("sqlite:///") and not url.startswith("sqlite:///:memory:"):
                Path(url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(url, echo=settings.debug)
        self.engine = engine
        self.Session = sessionmaker(bind=self.engine, autocommit=False, autoflush=False, expire_on_commit=False)
        if create_tables:
            Base.metadata.create_all(self.engine)

    def get(self, item_id: int, key: str) -> str | None:
        try:
            with self.Session() as session:
                return session.execute(
                    select(ContentMeta.meta_value).where(ContentMeta.item_id == item_id, ContentMeta.meta_key == key)
                ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            # Render path: a broken store reads as "no override"
            logger.error("Meta read failed for item %s key %s: %s", item_id, key, exc)
            return None

    def set(self, item_id: int, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise ValidationError("Meta values must be strings", field=key)
        with self._write("set") as session:
            row = session.execute(
                select(ContentMeta).where(ContentMeta.item_id == item_id, ContentMeta.meta_key == key)
            ).scalar_one_or_none()
            if row is None:
                session.add(ContentMeta(item_id=item_id, meta_key=key, meta_value=value))
            else:
                row.meta_value = value

    def delete(self, item_id: int, key: str) -> None:
        with self._write("delete") as session:
            session.execute(delete(ContentMeta).where(ContentMeta.item_id == item_id, ContentMeta.meta_key == key))

    def delete_item(self, item_id: int) -> int:
        with self._write("delete_item") as session:
            result = session.execute(delete(ContentMeta).where(ContentMeta.item_id == item_id))
            return result.rowcount or 0

    def delete_prefix(self, prefix: str) -> int:
        with self._write("delete_prefix") as session:
            result = session.execute(delete(ContentMeta).where(ContentMeta.meta_key.startswith(prefix, autoescape=True)))
            return result.rowcount or 0

    @contextlib.contextmanager
    def _write(self, operation: str):
        """Yield a session that commits on success; database errors become StorageError."""
        session = self.Session()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Meta %s failed: %s", operation, exc)
            raise StorageError(f"Failed to {operation} SEO metadata", operation=operation) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
