"""Tests for the autosave observer."""

from nutrilog.services.autosave import AutosaveObserver
from nutrilog.services.model import AppModel
from tests.conftest import InMemorySnapshotStore


def test_autosave_saves_after_each_change(model: AppModel) -> None:
    store = InMemorySnapshotStore()
    model.add_observer(AutosaveObserver(store))

    model.add_meal_from_entry("Apple #snack 95cal")
    model.add_meal_from_entry("Pear #snack 80cal")

    assert store.saved == [model, model]


def test_failed_autosave_keeps_model_usable(model: AppModel) -> None:
    store = InMemorySnapshotStore(fail=True)
    model.add_observer(AutosaveObserver(store))

    meal = model.add_meal_from_entry("Apple #snack 95cal")

    assert model.meal_log.meals == (meal,)
    assert store.saved == []
