"""Local state for tracked ``pdf`` resources.

The store is a JSON file mapping resource names to their last known
attributes and identity, stored at ``.pdfartifact/state.json`` by default.
It plays the part of the orchestrator's persisted state: the identity
recorded here is what Read compares the file on disk against.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from pdfartifact.core.hasher import is_identity
from pdfartifact.errors import StateError
from pdfartifact.models.state import StateEntry

logger = logging.getLogger(__name__)


class StateStore:
    """Name-keyed ``StateEntry`` records persisted to a JSON file.

    Parameters
    ----------
    state_path:
        Path to the state JSON file. Created on first ``persist()``.

    Examples
    --------
    >>> from pathlib import Path
    >>> store = StateStore(Path("/tmp/pdf-state.json"))
    >>> store.get("report") is None
    True
    """

    def __init__(self, state_path: Path = Path(".pdfartifact/state.json")) -> None:
        self._state_path = Path(state_path)
        self._entries: dict[str, StateEntry] = {}
        self.load()

    @property
    def path(self) -> Path:
        return self._state_path

    # -- Lookup -------------------------------------------------------------

    def get(self, name: str) -> StateEntry | None:
        """Return the entry for *name*, or ``None`` if not tracked."""
        return self._entries.get(name)

    def list_entries(self) -> list[StateEntry]:
        """Return all tracked entries sorted by name."""
        return sorted(self._entries.values(), key=lambda e: e.name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # -- Mutation -----------------------------------------------------------

    def put(self, entry: StateEntry) -> None:
        """Record *entry* (replacing any previous one) and persist."""
        if not is_identity(entry.identity):
            raise StateError(
                f"Refusing to record '{entry.name}' with invalid identity {entry.identity!r}"
            )
        self._entries[entry.name] = entry
        self.persist()
        logger.debug("Recorded %s -> %s", entry.name, entry.identity)

    def remove(self, name: str) -> bool:
        """Forget *name*. Returns ``True`` if it was tracked."""
        if name in self._entries:
            del self._entries[name]
            self.persist()
            logger.debug("Forgot %s", name)
            return True
        return False

    # -- Persistence --------------------------------------------------------

    def persist(self) -> None:
        """Write the state to its JSON file, creating parent directories."""
        data = {
            name: json.loads(entry.model_dump_json())
            for name, entry in self._entries.items()
        }
        try:
            self._state_path.parent.mkdir(parents=True, exist_ok=True)
            self._state_path.write_text(
                json.dumps(data, indent=2, sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise StateError(f"Failed to write state to {self._state_path}: {exc}") from exc
        logger.debug("Persisted %d entries to %s.", len(data), self._state_path)

    def load(self) -> None:
        """Load the state from its JSON file, if it exists.

        Raises
        ------
        StateError
            If the file exists but is unreadable or malformed. A corrupt
            state file is never silently treated as empty.
        """
        if not self._state_path.exists():
            logger.debug("No state file at %s; starting fresh.", self._state_path)
            return
        try:
            raw = json.loads(self._state_path.read_text(encoding="utf-8"))
            entries = {name: StateEntry(**data) for name, data in raw.items()}
        except (OSError, ValueError, TypeError, AttributeError, ValidationError) as exc:
            raise StateError(f"Failed to load state from {self._state_path}: {exc}") from exc
        self._entries = entries
        logger.debug("Loaded %d entries from %s.", len(entries), self._state_path)
