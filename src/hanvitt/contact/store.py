"""
JSON file store for consultation requests.

Rows get an auto-incrementing integer id and a creation timestamp.
"""

from __future__ import annotations

import os
from datetime import datetime

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..core.utils.file_io import read_json, write_json
from .models import ContactRequest, ContactRequestCreate


class ContactStore:
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _load_rows(self) -> list[dict]:
        rows = read_json(self.path, default=[])
        if not isinstance(rows, list):
            logger.warning(f"Contact store {self.path} is not a JSON array; ignoring its contents")
            return []
        records = [row for row in rows if isinstance(row, dict)]
        if len(records) != len(rows):
            logger.warning(f"Skipping {len(rows) - len(records)} non-object rows in {self.path}")
        return records

    def list_requests(self) -> list[ContactRequest]:
        requests = []
        for row in self._load_rows():
            try:
                requests.append(ContactRequest.model_validate(row))
            except PydanticValidationError as e:
                logger.warning(f"Skipping malformed contact request {row.get('id')!r}: {e}")
        return requests

    def create(self, data: ContactRequestCreate) -> ContactRequest:
        rows = self._load_rows()
        next_id = max((r["id"] for r in rows if isinstance(r.get("id"), int)), default=0) + 1
        request = ContactRequest(**data.model_dump(), id=next_id, created_at=datetime.now())
        rows.append(request.model_dump(mode="json"))
        write_json(self.path, rows)
        logger.info(f"Stored contact request #{next_id} from {request.name}")
        return request

    def mark_read(self, request_id: int) -> bool:
        """Flag a request as read. Returns False when the id doesn't exist."""
        rows = self._load_rows()
        for row in rows:
            if row.get("id") == request_id:
                row["is_read"] = True
                write_json(self.path, rows)
                return True
        return False
