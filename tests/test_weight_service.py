"""Tests for weight history."""

from datetime import date

from smart_nutrition.domain.tracking import local_today
from smart_nutrition.services.weights import WeightService


def test_log_weight_upserts_by_date(weight_repository, user_id) -> None:
    service = WeightService(weight_repository)
    day = date(2024, 3, 1)

    first = service.log_weight(user_id, 70.5, "UTC", day=day)
    second = service.log_weight(user_id, 70.1, "UTC", day=day, note="sau tập")

    assert second.id == first.id
    assert second.weight == 70.1
    assert second.note == "sau tập"
    assert len(weight_repository.entries) == 1


def test_log_weight_defaults_to_today(weight_repository, user_id) -> None:
    service = WeightService(weight_repository)

    entry = service.log_weight(user_id, 68, "Asia/Ho_Chi_Minh")

    assert entry.date == local_today("Asia/Ho_Chi_Minh")


def test_history_latest_and_lookup(weight_repository, user_id) -> None:
    service = WeightService(weight_repository)
    service.log_weight(user_id, 71, "UTC", day=date(2024, 3, 1))
    service.log_weight(user_id, 70, "UTC", day=date(2024, 3, 2))

    history = service.get_history(user_id)
    latest = service.get_latest(user_id)

    assert [entry.weight for entry in history] == [70, 71]
    assert latest is not None and latest.weight == 70
    assert service.get_by_date(user_id, date(2024, 3, 1)).weight == 71
    assert service.get_by_date(user_id, date(2024, 3, 5)) is None


def test_latest_without_entries(weight_repository, user_id) -> None:
    assert WeightService(weight_repository).get_latest(user_id) is None
