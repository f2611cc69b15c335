"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from nutrilog.adapters.csv_exporter import CsvNutritionExporter
from nutrilog.adapters.json_snapshot_store import JsonSnapshotStore
from nutrilog.config import Settings
from nutrilog.services.autosave import AutosaveObserver, SnapshotStore
from nutrilog.services.model import AppModel

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds the single model instance and its collaborators."""

    settings: Settings
    store: SnapshotStore
    model: AppModel

    def save(self) -> None:
        """Persist the current model."""
        self.store.save(self.model)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Load the model from storage and wire its collaborators."""
    resolved_settings = settings or Settings()
    store = JsonSnapshotStore(resolved_settings.data_file)
    model = store.load()
    model.set_exporter(CsvNutritionExporter())
    if resolved_settings.autosave:
        model.add_observer(AutosaveObserver(store))
    _logger.info(
        "Model ready: log_date=%s autosave=%s",
        model.log_date,
        resolved_settings.autosave,
    )
    return AppContainer(settings=resolved_settings, store=store, model=model)
