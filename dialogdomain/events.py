"""Domain events emitted by dialogs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar
from uuid import UUID

from dialogdomain.value_objects import (
    ContextVariable,
    ConversationMetrics,
    Participant,
    Topic,
    Turn,
)

if TYPE_CHECKING:
    from dialogdomain.aggregate import DialogType


class DomainEvent:
    """Base of every dialog event; subclasses declare their subject."""

    _subject: ClassVar[str] = ""
    dialog_id: UUID

    def __init_subclass__(cls, subject: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if subject is not None:
            cls._subject = subject

    def subject(self) -> str:
        """Versioned routing subject of the event."""
        return self._subject

    def aggregate_id(self) -> UUID:
        """Id of the dialog the event belongs to."""
        return self.dialog_id

    def event_type(self) -> str:
        """Name of the event type."""
        return type(self).__name__


@dataclass
class DialogStarted(DomainEvent, subject="dialog.started.v1"):
    dialog_id: UUID
    dialog_type: DialogType
    primary_participant: Participant
    started_at: datetime


@dataclass
class DialogEnded(DomainEvent, subject="dialog.ended.v1"):
    dialog_id: UUID
    ended_at: datetime
    reason: str | None
    final_metrics: ConversationMetrics


@dataclass
class TurnAdded(DomainEvent, subject="dialog.turn.added.v1"):
    dialog_id: UUID
    turn: Turn
    turn_number: int


@dataclass
class ContextSwitched(DomainEvent, subject="dialog.context.switched.v1"):
    dialog_id: UUID
    previous_topic: UUID | None
    new_topic: Topic
    switched_at: datetime


@dataclass
class ContextUpdated(DomainEvent, subject="dialog.context.updated.v1"):
    dialog_id: UUID
    updated_variables: dict[str, Any]
    updated_at: datetime


@dataclass
class DialogPaused(DomainEvent, subject="dialog.paused.v1"):
    dialog_id: UUID
    paused_at: datetime
    context_snapshot: dict[str, ContextVariable] = field(default_factory=dict)


@dataclass
class DialogResumed(DomainEvent, subject="dialog.resumed.v1"):
    dialog_id: UUID
    resumed_at: datetime


@dataclass
class DialogMetadataSet(DomainEvent, subject="dialog.metadata.set.v1"):
    dialog_id: UUID
    key: str
    value: Any
    set_at: datetime


@dataclass
class ParticipantAdded(DomainEvent, subject="dialog.participant.added.v1"):
    dialog_id: UUID
    participant: Participant
    added_at: datetime


@dataclass
class ParticipantRemoved(DomainEvent, subject="dialog.participant.removed.v1"):
    dialog_id: UUID
    participant_id: UUID
    removed_at: datetime
    reason: str | None = None


@dataclass
class TopicCompleted(DomainEvent, subject="dialog.topic.completed.v1"):
    dialog_id: UUID
    topic_id: UUID
    completed_at: datetime
    resolution: str | None = None


@dataclass
class ContextVariableAdded(DomainEvent, subject="dialog.context.variable.added.v1"):
    dialog_id: UUID
    variable: ContextVariable
    added_at: datetime