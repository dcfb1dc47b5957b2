"""Commands addressed to the dialog aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from dialogdomain.aggregate import DialogType
from dialogdomain.value_objects import ContextVariable, Participant, Topic, Turn


class Command:
    """Base of every dialog command."""

    def aggregate_id(self) -> UUID | None:
        """Id of the target aggregate; dialog commands carry it in their fields."""
        return None


@dataclass
class StartDialog(Command):
    """Start a new dialog."""

    id: UUID
    dialog_type: DialogType
    primary_participant: Participant
    metadata: dict[str, Any] | None = None


@dataclass
class EndDialog(Command):
    """End a dialog."""

    id: UUID
    reason: str | None = None


@dataclass
class AddTurn(Command):
    """Add a turn to a dialog."""

    dialog_id: UUID
    turn: Turn


@dataclass
class SwitchContext(Command):
    """Switch a dialog to a new topic."""

    dialog_id: UUID
    topic: Topic


@dataclass
class UpdateContext(Command):
    """Update context variables of a dialog."""

    dialog_id: UUID
    variables: dict[str, Any]


@dataclass
class PauseDialog(Command):
    """Pause a dialog."""

    id: UUID


@dataclass
class ResumeDialog(Command):
    """Resume a paused dialog."""

    id: UUID


@dataclass
class SetDialogMetadata(Command):
    """Set one metadata entry of a dialog."""

    dialog_id: UUID
    key: str
    value: Any


@dataclass
class AddParticipant(Command):
    """Add a participant to a dialog."""

    dialog_id: UUID
    participant: Participant


@dataclass
class RemoveParticipant(Command):
    """Remove a participant from a dialog."""

    dialog_id: UUID
    participant_id: UUID
    reason: str | None = None


@dataclass
class MarkTopicComplete(Command):
    """Mark a topic of a dialog as complete."""

    dialog_id: UUID
    topic_id: UUID
    resolution: str | None = None


@dataclass
class AddContextVariable(Command):
    """Add a context variable to a dialog."""

    dialog_id: UUID
    variable: ContextVariable