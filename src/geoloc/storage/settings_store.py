"""
JSON file store for `SettingsRecord`.

The file location is passed in explicitly so tests (and multiple apps) can point
the store at their own directory. A missing file is the normal first-run case: an
empty record is written so the user has a template to fill in.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from geoloc.config.settings import Settings
from geoloc.core.env import resolve_project_path
from geoloc.core.errors import DecodeError
from geoloc.domain.models import SettingsRecord

logger = logging.getLogger(__name__)


class SettingsStore:
    """Loads and saves the settings file at `path`."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SettingsStore":
        """Build a store for `settings.store.path` (relative paths use the project root)."""
        return cls(resolve_project_path(settings.store.path))

    def load(self) -> SettingsRecord | None:
        """Load the settings record.

        Returns None (after writing an empty record) if the file does not exist yet.

        Raises:
            DecodeError: If the file is not a valid settings record.
            OSError: On any other read or write failure.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Settings file %s not found; writing an empty one", self.path)
            self.save(None)
            return None

        try:
            return SettingsRecord.model_validate_json(text)
        except ValidationError as exc:
            raise DecodeError(f"Invalid settings file {self.path}") from exc

    def save(self, record: SettingsRecord | None = None) -> None:
        """Write `record` (or an empty record) to the settings file."""
        if record is None:
            record = SettingsRecord()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = record.model_dump_json(indent=4, by_alias=True)
        self.path.write_text(text + "\n", encoding="utf-8")
