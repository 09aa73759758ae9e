"""Unit tests for strategy domain events and the event registry."""

from datetime import UTC, datetime
from uuid import UUID

import pytest

from strategy_gateway.domain.enums.event_type import EventType
from strategy_gateway.domain.events import (
    EVENT_REGISTRY,
    DomainEvent,
    StrategyCreated,
    StrategyDeleted,
    event_from_record,
)


@pytest.mark.unit
class TestStrategyCreated:
    """Tests for StrategyCreated."""

    def test_carries_full_payload_and_identity(self):
        # Arrange
        payload = {"name": "gradualRollout", "description": "By percentage"}

        # Act
        event = StrategyCreated(created_by="alice", data=payload)

        # Assert
        assert event.event_type is EventType.STRATEGY_CREATED
        assert event.created_by == "alice"
        assert event.data == payload
        assert event.strategy_name == "gradualRollout"

    def test_generates_event_id_and_timestamp(self):
        event = StrategyCreated(created_by="alice", data={"name": "a"})

        assert isinstance(event.event_id, UUID)
        assert event.occurred_at.tzinfo is not None

    def test_event_ids_are_unique(self):
        first = StrategyCreated(created_by="alice", data={"name": "a"})
        second = StrategyCreated(created_by="alice", data={"name": "a"})

        assert first.event_id != second.event_id

    def test_data_is_copied_from_caller(self):
        # Arrange
        payload = {"name": "a", "parameters": [{"name": "p"}]}

        # Act
        event = StrategyCreated(created_by="alice", data=payload)
        payload["parameters"].append({"name": "q"})
        payload["name"] = "b"

        # Assert
        assert event.data == {"name": "a", "parameters": [{"name": "p"}]}

    def test_event_is_immutable(self):
        event = StrategyCreated(created_by="alice", data={"name": "a"})

        with pytest.raises(AttributeError):
            event.created_by = "mallory"  # type: ignore[misc]


@pytest.mark.unit
class TestStrategyDeleted:
    """Tests for StrategyDeleted."""

    def test_for_name_builds_name_only_data(self):
        event = StrategyDeleted.for_name("gradualRollout", created_by="bob")

        assert event.event_type is EventType.STRATEGY_DELETED
        assert event.data == {"name": "gradualRollout"}
        assert event.strategy_name == "gradualRollout"
        assert event.created_by == "bob"


@pytest.mark.unit
class TestEventRecord:
    """Tests for DomainEvent.to_record."""

    def test_record_shape(self):
        # Arrange
        occurred_at = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        event = StrategyCreated(
            created_by="alice", data={"name": "a"}, occurred_at=occurred_at
        )

        # Act
        record = event.to_record()

        # Assert
        assert record == {
            "id": str(event.event_id),
            "type": "strategy-created",
            "createdBy": "alice",
            "createdAt": "2024-05-01T12:00:00+00:00",
            "data": {"name": "a"},
        }

    def test_deleted_record_type(self):
        record = StrategyDeleted.for_name("a", created_by="unknown").to_record()

        assert record["type"] == "strategy-deleted"
        assert record["createdBy"] == "unknown"


@pytest.mark.unit
class TestEventRegistry:
    """Registry compliance: every event type has exactly one class."""

    def test_every_event_type_is_registered(self):
        assert set(EVENT_REGISTRY) == set(EventType)

    def test_registered_classes_declare_their_type(self):
        for event_type, event_cls in EVENT_REGISTRY.items():
            assert issubclass(event_cls, DomainEvent)
            assert event_cls.event_type is event_type

    def test_event_from_record_rebuilds_typed_event(self):
        # Arrange
        original = StrategyDeleted.for_name("a", created_by="bob")

        # Act
        rebuilt = event_from_record(
            event_type="strategy-deleted",
            created_by=original.created_by,
            data=original.data,
            event_id=original.event_id,
            occurred_at=original.occurred_at,
        )

        # Assert
        assert isinstance(rebuilt, StrategyDeleted)
        assert rebuilt == original

    def test_event_from_record_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            event_from_record(
                event_type="strategy-updated",
                created_by="bob",
                data={},
                event_id=UUID(int=1),
                occurred_at=datetime.now(UTC),
            )
