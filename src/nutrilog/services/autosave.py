"""Observer that persists the model after every change."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrilog.domain.errors import PersistenceError
from nutrilog.services.model import AppModel

_logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    """Persistence interface for model snapshots."""

    def load(self) -> AppModel:
        """Return the stored model or a fresh default one."""

    def save(self, model: AppModel) -> None:
        """Persist the model."""


@dataclass
class AutosaveObserver:
    """Saves the model whenever it notifies its observers."""

    store: SnapshotStore

    def update(self, model: AppModel) -> None:
        """Save the model; a failed save is logged and the model stays usable."""
        try:
            self.store.save(model)
        except PersistenceError:
            _logger.exception("Autosave failed")
