"""JSON file persistence for the nutrition model."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from nutrilog.adapters.snapshot_models import (
    ModelSnapshot,
    model_from_snapshot,
    snapshot_from_model,
)
from nutrilog.domain.errors import (
    InvalidArgumentError,
    InvariantViolationError,
    PersistenceError,
)
from nutrilog.services.model import AppModel

_logger = logging.getLogger(__name__)


@dataclass
class JsonSnapshotStore:
    """Loads and saves the model as a single JSON document."""

    path: Path

    def load(self) -> AppModel:
        """Return the stored model, or a fresh one if none is usable."""
        if not self.path.exists():
            _logger.info("No snapshot at %s, starting with a new model", self.path)
            return AppModel()
        try:
            raw = self.path.read_text(encoding="utf-8")
            snapshot = ModelSnapshot.model_validate_json(raw)
            model = model_from_snapshot(snapshot)
        except (
            OSError,
            UnicodeDecodeError,
            ValidationError,
            InvalidArgumentError,
            InvariantViolationError,
        ):
            _logger.exception("Snapshot at %s is unreadable, starting over", self.path)
            self._set_aside()
            return AppModel()
        _logger.info(
            "Loaded snapshot: meals=%s foods=%s",
            len(model.meal_log),
            model.food_database.size(),
        )
        return model

    def save(self, model: AppModel) -> None:
        """Write the model snapshot, replacing the previous file atomically."""
        payload = snapshot_from_model(model).model_dump_json(indent=2)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            if self.path.parent != Path():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(payload, encoding="utf-8")
            os.replace(temp_path, self.path)
        except OSError as exc:
            raise PersistenceError(f"Failed to save snapshot: {exc}") from exc
        _logger.info(
            "Saved snapshot: meals=%s foods=%s",
            len(model.meal_log),
            model.food_database.size(),
        )

    def _set_aside(self) -> None:
        corrupt_path = self.path.with_name(self.path.name + ".corrupt")
        try:
            os.replace(self.path, corrupt_path)
        except OSError:
            _logger.warning("Could not move corrupt snapshot %s aside", self.path)
