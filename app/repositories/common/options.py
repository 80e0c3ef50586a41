"""Options repository - read access to externally managed settings."""

import json
from typing import Any

from app.repositories.base import BaseRepository


class OptionsRepository(BaseRepository):
    """Key/value settings written by other components (e.g. keyword quota sync)."""

    def get_option(self, name: str, default: Any = None) -> Any:
        """Get a decoded option value, or `default` when unset.

        Options are written by other processes, so every call reads the table.
        """
        row = self.fetchone("SELECT value FROM options WHERE name = ?", [name])
        value = json.loads(row[0]) if row else None
        return default if value is None else value

    def set_option(self, name: str, value: Any) -> None:
        """Store an option value."""
        if self._read_only:
            raise RuntimeError("Cannot write options in read-only mode")

        self.execute(
            "INSERT OR REPLACE INTO options (name, value) VALUES (?, ?)",
            [name, json.dumps(value)],
        )
