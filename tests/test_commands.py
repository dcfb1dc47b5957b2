import uuid
from datetime import datetime, timezone

import pytest

from dialogdomain.aggregate import Dialog, DialogType
from dialogdomain.commands import (
    AddContextVariable,
    AddParticipant,
    AddTurn,
    Command,
    EndDialog,
    MarkTopicComplete,
    PauseDialog,
    RemoveParticipant,
    ResumeDialog,
    SetDialogMetadata,
    StartDialog,
    SwitchContext,
    UpdateContext,
)
from dialogdomain.value_objects import (
    ContextScope,
    ContextVariable,
    Message,
    Participant,
    ParticipantRole,
    ParticipantType,
    Topic,
    Turn,
    TurnType,
)


def make_user():
    return Participant(
        id=uuid.uuid4(),
        participant_type=ParticipantType.HUMAN,
        role=ParticipantRole.PRIMARY,
        name="Test User",
    )


COMMAND_NAMES = [
    "StartDialog",
    "EndDialog",
    "AddTurn",
    "SwitchContext",
    "UpdateContext",
    "PauseDialog",
    "ResumeDialog",
    "SetDialogMetadata",
    "AddParticipant",
    "RemoveParticipant",
    "MarkTopicComplete",
    "AddContextVariable",
]


def build_command(name):
    dialog_id = uuid.uuid4()
    user = make_user()
    if name == "StartDialog":
        return StartDialog(dialog_id, DialogType.DIRECT, user)
    if name == "EndDialog":
        return EndDialog(dialog_id)
    if name == "AddTurn":
        return AddTurn(
            dialog_id, Turn.create(1, user.id, Message.text("hi"), TurnType.USER_QUERY)
        )
    if name == "SwitchContext":
        return SwitchContext(dialog_id, Topic.create("Weather Discussion", ["weather"]))
    if name == "UpdateContext":
        return UpdateContext(dialog_id, {"mode": "dark_mode"})
    if name == "PauseDialog":
        return PauseDialog(dialog_id)
    if name == "ResumeDialog":
        return ResumeDialog(dialog_id)
    if name == "SetDialogMetadata":
        return SetDialogMetadata(dialog_id, "channel", "web")
    if name == "AddParticipant":
        return AddParticipant(dialog_id, user)
    if name == "RemoveParticipant":
        return RemoveParticipant(dialog_id, user.id)
    if name == "MarkTopicComplete":
        return MarkTopicComplete(dialog_id, uuid.uuid4())
    variable = ContextVariable(
        name="user_preference",
        value="dark_mode",
        scope=ContextScope.DIALOG,
        set_at=datetime.now(timezone.utc),
        source=dialog_id,
    )
    return AddContextVariable(dialog_id, variable)


@pytest.mark.parametrize("name", COMMAND_NAMES)
def test_aggregate_id_is_none(name):
    command = build_command(name)
    assert type(command).__name__ == name
    assert isinstance(command, Command)
    assert command.aggregate_id() is None


def test_optional_fields_default_to_none():
    dialog_id = uuid.uuid4()
    assert StartDialog(dialog_id, DialogType.GROUP, make_user()).metadata is None
    assert EndDialog(dialog_id).reason is None
    assert RemoveParticipant(dialog_id, uuid.uuid4()).reason is None
    assert MarkTopicComplete(dialog_id, uuid.uuid4()).resolution is None


def test_commands_compare_by_value():
    dialog_id = uuid.uuid4()
    assert PauseDialog(dialog_id) == PauseDialog(dialog_id)
    assert EndDialog(dialog_id, "done") == EndDialog(dialog_id, "done")
    assert EndDialog(dialog_id, "done") != EndDialog(dialog_id, None)


def test_start_dialog_builds_matching_dialog():
    user = make_user()
    command = StartDialog(uuid.uuid4(), DialogType.SUPPORT, user, {"channel": "web"})
    dialog = Dialog(command.id, command.dialog_type, command.primary_participant)
    assert dialog.id == command.id
    assert dialog.dialog_type is DialogType.SUPPORT
    assert list(dialog.participants) == [user.id]
    assert command.metadata == {"channel": "web"}


def test_add_turn_command_applies_to_dialog():
    user = make_user()
    dialog = Dialog(uuid.uuid4(), DialogType.DIRECT, user)
    command = AddTurn(
        dialog.id, Turn.create(1, user.id, Message.text("hi"), TurnType.USER_QUERY)
    )
    events = dialog.add_turn(command.turn)
    assert events[0].aggregate_id() == command.dialog_id
    assert dialog.turns == [command.turn]