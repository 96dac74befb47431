"""
State store abstraction.

Persists the two structures a session needs to survive a restart: the rating
map and the saved-for-later list, as the plain dict produced by
RecommendationEngine.export_state(). Implementations: in-memory (tests,
embedding apps that persist elsewhere) and a single JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)


def _empty_state() -> Dict[str, Any]:
    return {"ratings": {}, "saved": []}


class StateStore(Protocol):
    """Protocol for persisted session state read/write."""

    def load(self) -> Dict[str, Any]:
        """Return the stored state, or an empty state when nothing is stored."""
        ...

    def save(self, state: Dict[str, Any]) -> None:
        """Replace the stored state."""
        ...

    def clear(self) -> None:
        """Remove the stored state."""
        ...


class InMemoryStateStore:
    """State store that keeps a deep copy of the last saved state in memory."""

    def __init__(self, state: Optional[Dict[str, Any]] = None):
        self._state = json.loads(json.dumps(state)) if state else _empty_state()

    def load(self) -> Dict[str, Any]:
        return json.loads(json.dumps(self._state))

    def save(self, state: Dict[str, Any]) -> None:
        self._state = json.loads(json.dumps(state))

    def clear(self) -> None:
        self._state = _empty_state()


class JsonStateStore:
    """State store backed by a JSON file (e.g. data/session.json)."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)

    def load(self) -> Dict[str, Any]:
        if not self._path.exists():
            return _empty_state()
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("[store] could not read %s (%s), starting empty", self._path, e)
            return _empty_state()
        if not isinstance(data, dict):
            logger.warning("[store] unexpected content in %s, starting empty", self._path)
            return _empty_state()
        return {
            "ratings": data.get("ratings") or {},
            "saved": data.get("saved") or [],
        }

    def save(self, state: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w") as f:
            json.dump(state, f, indent=2)

    def clear(self) -> None:
        if self._path.exists():
            self._path.unlink()
