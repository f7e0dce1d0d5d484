"""Whole-file JSON persistence for the config store."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JSONStoreFile:
    """Reads and rewrites a single JSON document in one piece.

    A missing file reads as an empty mapping and gets its directory created so
    the next write succeeds. Content that is not valid JSON (or not UTF-8) also
    reads as an empty mapping; the damaged file stays on disk until the next
    ``save`` replaces it. Every other ``OSError`` propagates.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Any:
        try:
            text = self._path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug("No store at %s, starting empty", self._path)
            return {}
        except UnicodeDecodeError:
            logger.warning("Store at %s is not valid UTF-8, treating as empty", self._path)
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning("Store at %s is not valid JSON (%s), treating as empty", self._path, exc)
            return {}
        logger.debug("Loaded store from %s", self._path)
        return data

    def save(self, data: Any) -> None:
        # Serialise first so an unencodable value (or NaN) never truncates the file.
        payload = json.dumps(data, indent="\t", ensure_ascii=False, allow_nan=False)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(payload, encoding="utf-8")
        logger.debug("Wrote store to %s", self._path)

    async def load_async(self) -> Any:
        return await asyncio.to_thread(self.load)

    async def save_async(self, data: Any) -> None:
        await asyncio.to_thread(self.save, data)
