"""
Will persistence.

WillStore is the contract the lifecycle service writes through: one
structured record per will and one content blob per will version.
SqlWillStore keeps records in the database (WillRecord) and content blobs
as JSON files under a content directory:

    <content_dir>/<will_id>/v<version>.json

Records cross this boundary as plain dictionaries, so the lifecycle
service does not depend on SQLAlchemy.
"""

import json
import os
import re
import shutil
import tempfile
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


CONTENT_FILE_PATTERN = re.compile(r'^v(\d+)\.json$')
SAFE_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')


class WillStore(ABC):
    """Persistence collaborator of the lifecycle service."""

    @abstractmethod
    def insert_record(self, fields: Dict[str, Any]) -> None:
        """Insert a new record; fields must include 'id'."""

    @abstractmethod
    def update_record(self, will_id: str, fields: Dict[str, Any]) -> None:
        """Update fields of an existing record."""

    @abstractmethod
    def get_record(self, will_id: str) -> Optional[Dict[str, Any]]:
        """Record as a dictionary, or None."""

    @abstractmethod
    def list_records(self, user_id: str) -> List[Dict[str, Any]]:
        """Records of one user, oldest first."""

    @abstractmethod
    def delete_record(self, will_id: str) -> None:
        """Delete a record."""

    @abstractmethod
    def save_content(self, will_id: str, version: int, content: Dict[str, Any]) -> None:
        """Store the content blob of one version."""

    @abstractmethod
    def load_content(self, will_id: str, version: int) -> Optional[Dict[str, Any]]:
        """Content blob of one version, or None."""

    @abstractmethod
    def delete_content_version(self, will_id: str, version: int) -> None:
        """Delete the content blob of one version, if present."""

    @abstractmethod
    def delete_content(self, will_id: str) -> None:
        """Delete every content version of a will."""


class SqlWillStore(WillStore):
    """
    Records through a SQLAlchemy session, content on the filesystem.

    Every record write commits; a failed commit is rolled back and the
    error propagates.
    """

    def __init__(self, session, content_dir: str):
        self.session = session
        self.content_dir = content_dir

    # Records

    def _query(self, will_id: str):
        from legacywill.models import WillRecord
        return self.session.get(WillRecord, will_id)

    def _apply(self, record, fields: Dict[str, Any]):
        for name, value in fields.items():
            if name == 'id':
                continue
            if name in record.JSON_FIELDS:
                record.set_json(name, value)
            else:
                setattr(record, name, value)

    def _commit(self):
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def insert_record(self, fields: Dict[str, Any]) -> None:
        from legacywill.models import WillRecord
        record = WillRecord(id=fields['id'])
        self._apply(record, fields)
        self.session.add(record)
        self._commit()

    def update_record(self, will_id: str, fields: Dict[str, Any]) -> None:
        record = self._query(will_id)
        if record is None:
            raise KeyError(will_id)
        self._apply(record, fields)
        self._commit()

    def get_record(self, will_id: str) -> Optional[Dict[str, Any]]:
        record = self._query(will_id)
        return record.to_dict() if record is not None else None

    def list_records(self, user_id: str) -> List[Dict[str, Any]]:
        from legacywill.models import WillRecord
        records = (
            self.session.query(WillRecord)
            .filter(WillRecord.user_id == user_id)
            .order_by(WillRecord.created_at, WillRecord.id)
            .all()
        )
        return [r.to_dict() for r in records]

    def delete_record(self, will_id: str) -> None:
        record = self._query(will_id)
        if record is None:
            return
        self.session.delete(record)
        self._commit()

    # Content

    def _will_dir(self, will_id: str) -> str:
        if not SAFE_ID_PATTERN.match(will_id or ''):
            raise ValueError(f'Invalid will id: {will_id!r}')
        return os.path.join(self.content_dir, will_id)

    def _content_path(self, will_id: str, version: int) -> str:
        return os.path.join(self._will_dir(will_id), f'v{int(version)}.json')

    def save_content(self, will_id: str, version: int, content: Dict[str, Any]) -> None:
        will_dir = self._will_dir(will_id)
        os.makedirs(will_dir, exist_ok=True)

        # write to a temporary file, then atomically move it into place
        fd, tmp_path = tempfile.mkstemp(dir=will_dir, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(content, f, sort_keys=True, ensure_ascii=False)
            os.replace(tmp_path, self._content_path(will_id, version))
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load_content(self, will_id: str, version: int) -> Optional[Dict[str, Any]]:
        path = self._content_path(will_id, version)
        if not os.path.exists(path):
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def delete_content_version(self, will_id: str, version: int) -> None:
        path = self._content_path(will_id, version)
        if os.path.exists(path):
            os.remove(path)

    def delete_content(self, will_id: str) -> None:
        will_dir = self._will_dir(will_id)
        if os.path.isdir(will_dir):
            shutil.rmtree(will_dir)

    def content_versions(self, will_id: str) -> List[int]:
        """Stored content versions of a will, ascending."""
        will_dir = self._will_dir(will_id)
        if not os.path.isdir(will_dir):
            return []
        versions = []
        for name in os.listdir(will_dir):
            match = CONTENT_FILE_PATTERN.match(name)
            if match:
                versions.append(int(match.group(1)))
        return sorted(versions)

