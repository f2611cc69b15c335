"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import pytest

from nutrilog.adapters.csv_exporter import CsvNutritionExporter
from nutrilog.adapters.json_snapshot_store import JsonSnapshotStore
from nutrilog.config import Settings
from nutrilog.containers import AppContainer
from nutrilog.domain.errors import PersistenceError
from nutrilog.domain.meals import MealLog
from nutrilog.services.autosave import SnapshotStore
from nutrilog.services.model import AppModel

LOG_DATE = date(2024, 3, 15)


@dataclass
class RecordingObserver:
    """Observer that records every model it is notified with."""

    calls: list[AppModel] = field(default_factory=list)

    def update(self, model: AppModel) -> None:
        self.calls.append(model)


@dataclass
class InMemorySnapshotStore(SnapshotStore):
    """Snapshot store keeping saved models in memory."""

    saved: list[AppModel] = field(default_factory=list)
    fail: bool = False

    def load(self) -> AppModel:
        return self.saved[-1] if self.saved else AppModel()

    def save(self, model: AppModel) -> None:
        if self.fail:
            raise PersistenceError("disk full")
        self.saved.append(model)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        data_file=tmp_path / "nutrition_data.json",
        export_dir=tmp_path / "exports",
        autosave=False,
    )


@pytest.fixture
def meal_log() -> MealLog:
    return MealLog(LOG_DATE)


@pytest.fixture
def model(meal_log: MealLog) -> AppModel:
    return AppModel(meal_log=meal_log, exporter=CsvNutritionExporter())


@pytest.fixture
def observer(model: AppModel) -> RecordingObserver:
    recording = RecordingObserver()
    model.add_observer(recording)
    return recording


@pytest.fixture
def container(settings: Settings, model: AppModel) -> AppContainer:
    return AppContainer(
        settings=settings,
        store=JsonSnapshotStore(settings.data_file),
        model=model,
    )
