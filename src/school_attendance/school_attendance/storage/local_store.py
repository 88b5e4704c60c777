from __future__ import annotations

import json
import logging
import os
from typing import Any, Iterable

from ..core.constants import LOCAL_DATA_KEY_FRAGMENTS, LOCAL_DATA_KEYS

logger = logging.getLogger(__name__)


class LocalStore:
    """Small key/value store persisted as one JSON file.

    Plays the role of the browser's localStorage: cached roster snapshots and
    UI preferences live here and are wiped by the bulk-delete flow.
    """

    def __init__(self, path: str):
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not os.path.exists(self._path):
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("local store %s unreadable, starting empty", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, Any]) -> None:
        folder = os.path.dirname(self._path)
        if folder and not os.path.exists(folder):
            os.makedirs(folder)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=4)

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)

    def keys(self) -> list[str]:
        return list(self._load().keys())

    def clear_known_data(
        self,
        keys: Iterable[str] = LOCAL_DATA_KEYS,
        fragments: Iterable[str] = LOCAL_DATA_KEY_FRAGMENTS,
    ) -> list[str]:
        """Remove the fixed roster keys plus every key containing a fragment.

        Returns the removed keys.
        """

        data = self._load()
        fixed = set(keys)
        fragments = tuple(fragments)
        removed = [k for k in data if k in fixed or any(fr in k for fr in fragments)]
        for k in removed:
            del data[k]
        self._save(data)
        logger.info("local store cleared %d key(s)", len(removed))
        return removed
