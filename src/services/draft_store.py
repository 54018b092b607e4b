"""Explicit save/restore of booking drafts as JSON files."""

import json
import re
import uuid
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from structlog import get_logger

from src.config import settings
from src.exceptions import DraftNotFoundError, DraftStoreError
from src.models.draft.booking import BookingDraft

logger = get_logger(__name__)

_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]+$")


class DraftStore:
    """Stores in-progress booking drafts so a form can be resumed later."""

    def __init__(self, directory: Optional[Path] = None):
        """Initialize the store.

        Args:
            directory: Where drafts are kept (default ``settings.storage.drafts_dir``)
        """
        self.directory = Path(directory or settings.storage.drafts_dir)

    def _path(self, draft_id: str) -> Path:
        if not _SAFE_ID.match(draft_id):
            raise DraftStoreError(f"Invalid draft id: {draft_id!r}")
        return self.directory / f"{draft_id}.json"

    def save(self, draft: BookingDraft) -> str:
        """Save a draft, assigning an id when it has none.

        Returns:
            The draft id
        """
        draft_id = draft.draft_id or uuid.uuid4().hex
        draft = draft.model_copy(update={"draft_id": draft_id})
        path = self._path(draft_id)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(draft.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as e:
            raise DraftStoreError(f"Failed to save draft {draft_id}: {e}") from e

        logger.info("Saved booking draft", draft_id=draft_id, path=str(path))
        return draft_id

    def load(self, draft_id: str) -> BookingDraft:
        """Restore a saved draft.

        Raises:
            DraftNotFoundError: If no draft is saved under this id
            DraftStoreError: If the saved draft is unreadable
        """
        path = self._path(draft_id)
        if not path.exists():
            raise DraftNotFoundError(f"No saved draft {draft_id}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return BookingDraft(**data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise DraftStoreError(f"Failed to load draft {draft_id}: {e}") from e

    def delete(self, draft_id: str) -> bool:
        """Delete a saved draft, e.g. once its quotation has been generated.

        Returns:
            True if a draft was deleted
        """
        path = self._path(draft_id)
        if not path.exists():
            return False
        path.unlink()
        logger.info("Deleted booking draft", draft_id=draft_id)
        return True

    def list_ids(self) -> list[str]:
        """Ids of all saved drafts, sorted."""
        if not self.directory.exists():
            return []
        return sorted(path.stem for path in self.directory.glob("*.json"))
