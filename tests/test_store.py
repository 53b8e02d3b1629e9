"""
tests/test_store.py
────────────────────
Tests for the in-memory MonitorStore.
"""
import threading

import pytest

from config.alerts import AlertLevel, WorkOrderStatus
from pdm.data.models import Alert, Reading
from pdm.data.store import BadRequestError, MonitorStore, NotFoundError


def _alert(n: int) -> Alert:
    return Alert(equipment_id="EQ-001", level=AlertLevel.HIGH, message=f"alert {n}")


class TestEquipment:
    def test_seed_list(self, store):
        ids = [eq.id for eq in store.list_equipment()]
        assert ids == ["EQ-001", "EQ-002", "EQ-003"]

    def test_unknown_equipment(self, store):
        with pytest.raises(NotFoundError):
            store.get_equipment("EQ-999")


class TestReadings:
    def test_seed_gives_every_equipment_a_reading(self, seeded_store):
        assert len(seeded_store.list_readings()) == 3
        for eq in seeded_store.list_equipment():
            assert seeded_store.get_reading(eq.id).equipment_id == eq.id

    def test_unknown_reading(self, seeded_store):
        with pytest.raises(NotFoundError):
            seeded_store.get_reading("EQ-999")

    def test_peek_missing_returns_none(self, store):
        assert store.peek_reading("EQ-001") is None

    def test_list_sorted_newest_first(self, store):
        for eq_id, ts in [("EQ-001", 1_000), ("EQ-002", 3_000), ("EQ-003", 2_000)]:
            store.set_reading(Reading(equipment_id=eq_id, timestamp=ts, temperature=60.0,
                                      vibration=1.0, pressure=3.0, rpm=1000))
        timestamps = [r.timestamp for r in store.list_readings()]
        assert timestamps == [3_000, 2_000, 1_000]

    def test_set_overwrites_in_place(self, store, healthy_reading, hot_reading):
        store.set_reading(healthy_reading)
        store.set_reading(hot_reading)
        assert len(store.list_readings()) == 1
        assert store.get_reading("EQ-001").temperature == 110.0

    def test_predict_does_not_advance(self, store, hot_reading):
        store.set_reading(hot_reading)
        prediction, reading = store.predict("EQ-001")
        assert prediction.failure_probability == 0.51
        assert reading == hot_reading
        assert store.get_reading("EQ-001") == hot_reading

    def test_predict_unknown(self, store):
        with pytest.raises(NotFoundError):
            store.predict("EQ-404")


class TestAlertLog:
    def test_newest_first(self, store):
        for n in range(3):
            store.add_alert(_alert(n))
        assert [a.message for a in store.list_alerts()] == ["alert 2", "alert 1", "alert 0"]

    def test_cap_evicts_oldest(self):
        store = MonitorStore(alert_cap=5)
        for n in range(7):
            store.add_alert(_alert(n))
        messages = [a.message for a in store.list_alerts()]
        assert len(messages) == 5
        assert messages[0] == "alert 6"
        assert "alert 0" not in messages
        assert "alert 1" not in messages

    def test_default_cap_is_200(self, store):
        for n in range(250):
            store.add_alert(_alert(n))
        alerts = store.list_alerts()
        assert len(alerts) == 200
        assert alerts[-1].message == "alert 50"

    def test_create_from_client_payload(self, store):
        alert = store.create_alert({"equipmentId": "EQ-777", "level": "Critical", "message": "manual"})
        assert alert.level == AlertLevel.CRITICAL
        assert alert.equipment_id == "EQ-777"
        assert store.list_alerts()[0].id == alert.id

    def test_create_missing_equipment_is_bad_request(self, store):
        with pytest.raises(BadRequestError):
            store.create_alert({"level": "High"})

    def test_acknowledge_unknown(self, store):
        with pytest.raises(NotFoundError):
            store.acknowledge_alert("missing")

    def test_acknowledge_is_idempotent(self, store):
        alert = store.add_alert(_alert(0))
        assert store.acknowledge_alert(alert.id).acknowledged is True
        assert store.acknowledge_alert(alert.id).acknowledged is True
        assert store.list_alerts()[0].acknowledged is True

    def test_returned_records_are_copies(self, store):
        alert = store.add_alert(_alert(0))
        alert.acknowledged = True
        assert store.list_alerts()[0].acknowledged is False

    def test_active_alert_count(self, store):
        a = store.add_alert(_alert(0))
        store.add_alert(Alert(equipment_id="EQ-002", level="High", message="other"))
        assert store.active_alert_count() == 2
        store.acknowledge_alert(a.id)
        assert store.active_alert_count() == 1
        assert store.active_alert_count("EQ-001") == 0


class TestWorkOrders:
    def test_missing_title_is_bad_request(self, store):
        with pytest.raises(BadRequestError):
            store.create_work_order({"equipmentId": "EQ-001"})

    def test_missing_equipment_is_bad_request(self, store):
        with pytest.raises(BadRequestError):
            store.create_work_order({"title": "Inspect"})

    def test_create_is_open_with_fresh_id(self, store):
        o1 = store.create_work_order({"equipmentId": "EQ-001", "title": "Inspect"})
        o2 = store.create_work_order({"equipmentId": "EQ-001", "title": "Inspect"})
        assert o1.status == WorkOrderStatus.OPEN
        assert o1.notes == ""
        assert o1.id != o2.id

    def test_list_newest_first_and_filter(self, store):
        store.create_work_order({"equipmentId": "EQ-001", "title": "first"})
        store.create_work_order({"equipmentId": "EQ-002", "title": "second"})
        assert [w.title for w in store.list_work_orders()] == ["second", "first"]
        assert [w.title for w in store.list_work_orders("EQ-001")] == ["first"]

    def test_close_is_irreversible(self, store):
        order = store.create_work_order({"equipmentId": "EQ-001", "title": "Inspect"})
        assert store.close_work_order(order.id).status == WorkOrderStatus.CLOSED
        assert store.close_work_order(order.id).status == WorkOrderStatus.CLOSED
        assert store.list_work_orders()[0].status == WorkOrderStatus.CLOSED

    def test_close_unknown(self, store):
        with pytest.raises(NotFoundError):
            store.close_work_order("missing")


def _run_threads(target, count: int = 8) -> None:
    barrier = threading.Barrier(count)

    def worker(n: int) -> None:
        barrier.wait()
        target(n)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    assert not any(t.is_alive() for t in threads)


class TestConcurrentMutations:
    def test_parallel_add_alert_respects_cap(self, store):
        def add_many(n: int) -> None:
            for i in range(500):
                store.add_alert(_alert(n * 1000 + i))

        _run_threads(add_many)
        alerts = store.list_alerts()
        assert len(alerts) == 200
        assert len({a.id for a in alerts}) == 200

    def test_parallel_acknowledge(self, store):
        ids = [store.add_alert(_alert(n)).id for n in range(100)]

        def ack_all(n: int) -> None:
            for alert_id in ids:
                assert store.acknowledge_alert(alert_id).acknowledged is True

        _run_threads(ack_all)
        alerts = store.list_alerts()
        assert len(alerts) == 100
        assert all(a.acknowledged for a in alerts)
        assert store.active_alert_count() == 0

    def test_parallel_create_and_close_work_orders(self, store):
        def open_and_close(n: int) -> None:
            for i in range(50):
                order = store.create_work_order({"equipmentId": "EQ-001", "title": f"task {n}-{i}"})
                assert store.close_work_order(order.id).status == WorkOrderStatus.CLOSED

        _run_threads(open_and_close)
        orders = store.list_work_orders()
        assert len(orders) == 400
        assert len({w.id for w in orders}) == 400
        assert all(w.status == WorkOrderStatus.CLOSED for w in orders)
