"""Drive ``pdf`` resources to their desired attributes.

The reconciler holds the orchestrator side of the lifecycle: it reads the
recorded identity from the ``StateStore``, calls Read to detect drift, and
turns attribute changes into delete-then-create. Every state change is
checked against ``VALID_TRANSITIONS``.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from pdfartifact.core.resource import PdfResource
from pdfartifact.core.state_store import StateStore
from pdfartifact.errors import InvalidTransitionError
from pdfartifact.models.artifacts import (
    VALID_TRANSITIONS,
    ArtifactState,
    PdfArtifactConfig,
    ResourceResult,
)
from pdfartifact.models.state import StateEntry

logger = logging.getLogger(__name__)


class ApplyAction(str, Enum):
    CREATE = "create"
    REPLACE = "replace"
    NOOP = "noop"


class ApplyOutcome(BaseModel):
    """What ``Reconciler.apply`` did for one named resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    action: ApplyAction
    result: ResourceResult
    replaced_attributes: list[str] = []


def check_transition(current: ArtifactState, target: ArtifactState) -> None:
    """Raise ``InvalidTransitionError`` unless *current* -> *target* is allowed."""
    allowed = VALID_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise InvalidTransitionError(
            f"Cannot transition from {current.value} to {target.value}. "
            f"Allowed: {sorted(s.value for s in allowed)}"
        )


class Reconciler:
    """Applies, refreshes and destroys named ``pdf`` resources.

    Parameters
    ----------
    resource:
        The resource implementation.
    store:
        Where identities are recorded between runs.
    """

    def __init__(self, resource: PdfResource, store: StateStore) -> None:
        self._resource = resource
        self._store = store

    @property
    def store(self) -> StateStore:
        return self._store

    # ------------------------------------------------------------------
    # Lifecycle steps
    # ------------------------------------------------------------------

    def _create(self, name: str, config: PdfArtifactConfig) -> ResourceResult:
        check_transition(ArtifactState.ABSENT, ArtifactState.PRESENT)
        result = self._resource.create(config)
        self._store.put(StateEntry(name=name, config=config, identity=result.identity))
        logger.info("Created %s at %s", name, result.filename)
        return result

    def _delete(self, entry: StateEntry) -> ResourceResult:
        check_transition(ArtifactState.PRESENT, ArtifactState.ABSENT)
        result = self._resource.delete(entry.config)
        self._store.remove(entry.name)
        logger.info("Deleted %s at %s", entry.name, result.filename)
        return result

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def refresh(self, name: str) -> ResourceResult:
        """Read a tracked resource; forget it if the file is gone or drifted.

        Raises
        ------
        KeyError
            If *name* is not tracked.
        """
        entry = self._store.get(name)
        if entry is None:
            raise KeyError(f"Resource '{name}' is not tracked.")

        result = self._resource.read(entry.config, entry.identity)
        check_transition(ArtifactState.PRESENT, result.state)
        if not result.present:
            self._store.remove(name)
            logger.info("%s is absent and will be recreated on next apply.", name)
        return result

    def apply(self, name: str, config: PdfArtifactConfig) -> ApplyOutcome:
        """Make resource *name* match *config*.

        Creates it when untracked or absent on disk, replaces it when a
        force-new attribute changed, and otherwise leaves it untouched.
        """
        entry = self._store.get(name)
        if entry is None:
            result = self._create(name, config)
            return ApplyOutcome(name=name, action=ApplyAction.CREATE, result=result)

        refreshed = self.refresh(name)
        if not refreshed.present:
            result = self._create(name, config)
            return ApplyOutcome(name=name, action=ApplyAction.CREATE, result=result)

        changed = self._resource.schema.requires_replace(entry.config, config)
        if not changed:
            logger.debug("%s is up to date.", name)
            return ApplyOutcome(name=name, action=ApplyAction.NOOP, result=refreshed)

        logger.info("Replacing %s; changed: %s", name, ", ".join(changed))
        self._delete(entry)
        result = self._create(name, config)
        return ApplyOutcome(
            name=name,
            action=ApplyAction.REPLACE,
            result=result,
            replaced_attributes=changed,
        )

    def destroy(self, name: str) -> bool:
        """Delete the file and forget *name*. Returns ``False`` if untracked."""
        entry = self._store.get(name)
        if entry is None:
            logger.warning("Cannot destroy '%s'; not tracked.", name)
            return False
        self._delete(entry)
        return True
