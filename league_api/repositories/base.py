"""
Base repository for the document store.

Provides key/value and query access to the documents table with:
- Insert-if-absent, get, full replace and upsert by key
- Parameterized queries with a field projection
- A store exception hierarchy independent of SQLAlchemy
"""

import copy
from typing import Any, Dict, Mapping, Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.sql.expression import Executable

from league_api import db
from league_api.dataclasses import GetResult, MutationResult, QueryResult
from league_api.logger import get_db_logger
from league_api.models import Document

logger = get_db_logger()


class StoreError(Exception):
    """Base exception for document store failures."""


class DocumentExistsError(StoreError):
    """Raised when inserting a key that is already stored."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Document already exists: {key}")


class DocumentNotFoundError(StoreError):
    """Raised when reading or replacing a key that is not stored."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Document not found: {key}")


class QueryError(StoreError):
    """Raised when a query cannot be executed."""


class DocumentRepository:
    """Repository providing document store operations.

    Writes are flushed but not committed; services own the transaction.
    """

    def insert(self, key: str, content: Dict[str, Any]) -> MutationResult:
        """Insert a new document.

        Args:
            key: Document key.
            content: Document body.

        Returns:
            MutationResult for the new document.

        Raises:
            DocumentExistsError: If the key is already stored.
            StoreError: On any other database failure.
        """
        if self._load(key) is not None:
            raise DocumentExistsError(key)

        document = Document(key=key, type=_doc_type(content), content=content, cas=1)
        db.session.add(document)
        try:
            db.session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent insert of the same key
            raise DocumentExistsError(key) from e
        except SQLAlchemyError as e:
            raise StoreError(f"Insert failed for {key}") from e

        logger.debug(f"Inserted document {key}")
        return MutationResult(key=key, cas=document.cas)

    def get(self, key: str) -> GetResult:
        """Fetch a document by key.

        Args:
            key: Document key.

        Returns:
            GetResult holding a copy of the content.

        Raises:
            DocumentNotFoundError: If the key is not stored.
            StoreError: On any other database failure.
        """
        document = self._load(key)
        if document is None:
            raise DocumentNotFoundError(key)
        return GetResult(content=copy.deepcopy(document.content), cas=document.cas)

    def replace(self, key: str, content: Dict[str, Any]) -> MutationResult:
        """Overwrite an existing document with a new body.

        No compare-and-swap: the last writer wins.

        Args:
            key: Document key.
            content: New document body.

        Returns:
            MutationResult with the bumped cas.

        Raises:
            DocumentNotFoundError: If the key is not stored.
            StoreError: On any other database failure.
        """
        document = self._load(key)
        if document is None:
            raise DocumentNotFoundError(key)

        document.content = content
        document.type = _doc_type(content)
        document.cas += 1
        self._flush(key)

        logger.debug(f"Replaced document {key} (cas={document.cas})")
        return MutationResult(key=key, cas=document.cas)

    def upsert(self, key: str, content: Dict[str, Any]) -> MutationResult:
        """Insert a document or replace it if the key exists.

        Args:
            key: Document key.
            content: Document body.

        Returns:
            MutationResult for the stored document.
        """
        if self._load(key) is None:
            return self.insert(key, content)
        return self.replace(key, content)

    def query(
        self,
        statement: Executable,
        parameters: Optional[Mapping[str, Any]] = None,
        projection: Optional[Sequence[str]] = None
    ) -> QueryResult:
        """Run a parameterized query selecting document content.

        Args:
            statement: SQLAlchemy statement whose first column is the content.
            parameters: Values for the statement's bind parameters.
            projection: Fields to keep from each document. A field absent
                from a document is absent from its row.

        Returns:
            QueryResult with one row per matched document.

        Raises:
            QueryError: If the statement fails to execute.
        """
        try:
            contents = db.session.execute(statement, dict(parameters or {})).scalars().all()
        except SQLAlchemyError as e:
            raise QueryError(f"Query failed: {e}") from e

        if projection is None:
            return QueryResult(rows=[copy.deepcopy(c) for c in contents])
        return QueryResult(rows=[_project(c, projection) for c in contents])

    def _load(self, key: str) -> Optional[Document]:
        try:
            return db.session.get(Document, key)
        except SQLAlchemyError as e:
            raise StoreError(f"Read failed for {key}") from e

    def _flush(self, key: str) -> None:
        try:
            db.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Write failed for {key}") from e


def _doc_type(content: Any) -> Optional[str]:
    if isinstance(content, dict):
        doc_type = content.get('type')
        if isinstance(doc_type, str):
            return doc_type
    return None


def _project(content: Any, fields: Sequence[str]) -> Dict[str, Any]:
    if not isinstance(content, dict):
        return {}
    return {f: copy.deepcopy(content[f]) for f in fields if f in content}
