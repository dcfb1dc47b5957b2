"""The dialog aggregate: participants, turns, topics and context of a conversation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID

from dialogdomain.events import (
    ContextSwitched,
    ContextVariableAdded,
    DialogEnded,
    DialogPaused,
    DialogResumed,
    DomainEvent,
    ParticipantAdded,
    TurnAdded,
)
from dialogdomain.value_objects import (
    ContextVariable,
    ConversationMetrics,
    Participant,
    Topic,
    TopicStatus,
    Turn,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainError(Exception):
    """Base error raised by the dialog aggregate."""


class InvalidStateTransition(DomainError):
    """An operation is not allowed in the dialog's current status."""

    def __init__(self, from_state: str, to_state: str) -> None:
        super().__init__(f"Invalid state transition from {from_state} to {to_state}")
        self.from_state = from_state
        self.to_state = to_state


class ValidationError(DomainError):
    """The input to an operation is not valid for this dialog."""


class DialogType(Enum):
    """Kind of dialog."""

    DIRECT = "Direct"
    GROUP = "Group"
    SUPPORT = "Support"
    TASK = "Task"
    SOCIAL = "Social"
    SYSTEM = "System"


class DialogStatus(Enum):
    """Operational status of a dialog."""

    ACTIVE = "Active"
    PAUSED = "Paused"
    ENDED = "Ended"
    ABANDONED = "Abandoned"


class ContextState(Enum):
    """State of the conversation context."""

    NORMAL = "Normal"
    AWAITING_CLARIFICATION = "AwaitingClarification"
    PROCESSING = "Processing"
    ERROR = "Error"


@dataclass
class ContextSnapshot:
    """The context as it stood at one moment."""

    timestamp: datetime
    turn_number: int
    active_topic: UUID | None
    variables: dict[str, ContextVariable] = field(default_factory=dict)


@dataclass
class ConversationContext:
    """Context variables and a bounded history of snapshots."""

    state: ContextState = ContextState.NORMAL
    variables: dict[str, ContextVariable] = field(default_factory=dict)
    history: list[ContextSnapshot] = field(default_factory=list)
    max_history: int = 10


_CLOSED = (DialogStatus.ENDED, DialogStatus.ABANDONED)


class Dialog:
    """Aggregate root for a conversation between participants."""

    def __init__(
        self,
        id: UUID,
        dialog_type: DialogType,
        primary_participant: Participant,
    ) -> None:
        now = _utcnow()
        self._id = id
        self._dialog_type = dialog_type
        self._status = DialogStatus.ACTIVE
        self._participants: dict[UUID, Participant] = {
            primary_participant.id: primary_participant
        }
        self._primary_participant = primary_participant.id
        self._context = ConversationContext()
        self._turns: list[Turn] = []
        self._topics: dict[UUID, Topic] = {}
        self._current_topic: UUID | None = None
        self._metrics = ConversationMetrics()
        self.metadata: dict[str, Any] = {}
        self._version = 0
        self.created_at = now
        self.updated_at = now

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def dialog_type(self) -> DialogType:
        return self._dialog_type

    @property
    def status(self) -> DialogStatus:
        return self._status

    @property
    def participants(self) -> dict[UUID, Participant]:
        return self._participants

    @property
    def primary_participant(self) -> UUID:
        return self._primary_participant

    @property
    def context(self) -> ConversationContext:
        return self._context

    @property
    def turns(self) -> list[Turn]:
        return self._turns

    @property
    def topics(self) -> dict[UUID, Topic]:
        return self._topics

    @property
    def current_topic(self) -> Topic | None:
        """The topic currently discussed, if any."""
        if self._current_topic is None:
            return None
        return self._topics.get(self._current_topic)

    @property
    def metrics(self) -> ConversationMetrics:
        return self._metrics

    @property
    def version(self) -> int:
        return self._version

    def _touch(self) -> None:
        self.updated_at = _utcnow()

    def _bump(self) -> None:
        self._touch()
        self._version += 1

    def _require_active(self, purpose: str) -> None:
        if self._status is not DialogStatus.ACTIVE:
            raise InvalidStateTransition(self._status.value, purpose)

    def increment_version(self) -> None:
        """Advance the version for optimistic concurrency."""
        self._version += 1
        self._touch()

    def add_participant(self, participant: Participant) -> list[DomainEvent]:
        """Add a participant to an active dialog."""
        self._require_active("Active (required for adding participants)")
        if participant.id in self._participants:
            raise ValidationError("Participant already in dialog")
        self._participants[participant.id] = participant
        self._bump()
        return [
            ParticipantAdded(
                dialog_id=self._id, participant=participant, added_at=_utcnow()
            )
        ]

    def add_turn(self, turn: Turn) -> list[DomainEvent]:
        """Append a turn spoken by one of the participants."""
        self._require_active("Active (required for adding turns)")
        if turn.participant_id not in self._participants:
            raise ValidationError("Participant not in dialog")
        self._metrics.turn_count += 1
        self._turns.append(turn)
        self._bump()
        return [
            TurnAdded(
                dialog_id=self._id, turn=turn, turn_number=self._metrics.turn_count
            )
        ]

    def switch_topic(self, topic: Topic) -> list[DomainEvent]:
        """Make the given topic current, pausing the previous one."""
        self._require_active("Active (required for topic switching)")
        if self._current_topic is not None:
            current = self._topics.get(self._current_topic)
            if current is not None:
                current.status = TopicStatus.PAUSED
        self._topics[topic.id] = topic
        self._current_topic = topic.id
        self._metrics.topic_switches += 1
        self._bump()
        # The event reports the topic current after the switch.
        return [
            ContextSwitched(
                dialog_id=self._id,
                previous_topic=self._current_topic,
                new_topic=topic,
                switched_at=_utcnow(),
            )
        ]

    def add_context_variable(self, variable: ContextVariable) -> list[DomainEvent]:
        """Store a context variable, replacing one of the same name."""
        if self._status in _CLOSED:
            raise InvalidStateTransition(
                self._status.value, "Active/Paused (required for context updates)"
            )
        self._context.variables[variable.name] = variable
        self._bump()
        return [
            ContextVariableAdded(
                dialog_id=self._id, variable=variable, added_at=_utcnow()
            )
        ]

    def pause(self) -> list[DomainEvent]:
        """Pause an active dialog, recording a context snapshot."""
        self._require_active("Paused")
        snapshot = ContextSnapshot(
            timestamp=_utcnow(),
            turn_number=self._metrics.turn_count,
            active_topic=self._current_topic,
            variables=dict(self._context.variables),
        )
        history = self._context.history
        history.append(snapshot)
        if len(history) > self._context.max_history:
            del history[0]
        self._status = DialogStatus.PAUSED
        self._bump()
        return [
            DialogPaused(
                dialog_id=self._id,
                paused_at=_utcnow(),
                context_snapshot=dict(self._context.variables),
            )
        ]

    def resume(self) -> list[DomainEvent]:
        """Resume a paused dialog."""
        if self._status is not DialogStatus.PAUSED:
            raise InvalidStateTransition(self._status.value, "Active")
        self._status = DialogStatus.ACTIVE
        self._bump()
        return [DialogResumed(dialog_id=self._id, resumed_at=_utcnow())]

    def end(self, reason: str | None = None) -> list[DomainEvent]:
        """End the dialog unless it is already closed."""
        if self._status in _CLOSED:
            raise InvalidStateTransition(self._status.value, "Ended")
        self._status = DialogStatus.ENDED
        self._bump()
        return [
            DialogEnded(
                dialog_id=self._id,
                ended_at=_utcnow(),
                reason=reason,
                final_metrics=ConversationMetrics(**vars(self._metrics)),
            )
        ]