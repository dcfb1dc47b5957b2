# dialogdomain

An in-memory domain model for conversations between people, AI agents
and systems. A `Dialog` tracks its participants, the turn-by-turn flow
of messages, topics, context variables and simple conversation metrics.
Every change returns the domain events it produced.

The package has no dependencies beyond the standard library.

## Installation

```
pip install dialogdomain
```

## Usage

```python
import uuid

from dialogdomain.aggregate import Dialog, DialogStatus, DialogType
from dialogdomain.value_objects import (
    Message,
    MessageIntent,
    Participant,
    ParticipantRole,
    ParticipantType,
    Topic,
    Turn,
    TurnType,
)

user = Participant(
    id=uuid.uuid4(),
    participant_type=ParticipantType.HUMAN,
    role=ParticipantRole.PRIMARY,
    name="Test User",
)
dialog = Dialog(uuid.uuid4(), DialogType.DIRECT, user)

turn = Turn.create(
    1,
    user.id,
    Message.text("Hello, world!").with_intent(MessageIntent.STATEMENT),
    TurnType.USER_QUERY,
)
events = dialog.add_turn(turn)        # [TurnAdded(...)]

dialog.switch_topic(Topic.create("Weather Discussion", ["weather", "temperature"]))
print(dialog.current_topic.name)      # Weather Discussion

dialog.pause()
dialog.resume()
dialog.end("Test completed")
assert dialog.status is DialogStatus.ENDED
```

## Modules

### `dialogdomain.value_objects`

Dataclasses and enums that make up a conversation:

- `Participant` with `ParticipantType` and `ParticipantRole`.
- `Message`, whose content is a `TextContent`, `StructuredContent` or
  `MultimodalContent`. `Message.text(content)` builds an English text
  message; `with_intent(intent)` and `with_embeddings(embeddings)` return
  copies carrying a `MessageIntent` or an embedding vector.
- `Turn` with `TurnMetadata` and `TurnType`. `Turn.create(turn_number,
  participant_id, message, turn_type)` gives the turn a fresh id and the
  current UTC time.
- `Topic` with `TopicStatus` and `TopicRelevance`. `Topic.create(name,
  keywords)` builds an active topic with relevance 1.0 and a decay rate of
  0.1 per hour. `current_relevance(now=None)` returns the score decayed
  exponentially over the whole seconds since `last_updated`, clamped to
  the range 0 to 1.
- `ContextVariable` with `ContextScope`.
- `ConversationMetrics` and `EngagementMetrics`.

### `dialogdomain.aggregate`

`Dialog(id, dialog_type, primary_participant)` is the aggregate root. It
exposes read-only properties `id`, `dialog_type`, `status`,
`participants`, `primary_participant`, `context`, `turns`, `topics`,
`current_topic`, `metrics` and `version`, plus a `metadata` dict.

Operations, each returning a list of events:

| Method | Allowed when | Event |
| --- | --- | --- |
| `add_participant(participant)` | active | `ParticipantAdded` |
| `add_turn(turn)` | active, speaker is a participant | `TurnAdded` |
| `switch_topic(topic)` | active | `ContextSwitched` |
| `add_context_variable(variable)` | active or paused | `ContextVariableAdded` |
| `pause()` | active | `DialogPaused` |
| `resume()` | paused | `DialogResumed` |
| `end(reason=None)` | not ended or abandoned | `DialogEnded` |

Each successful operation increases `version` by one;
`increment_version()` does so directly. `switch_topic` marks the previous
current topic as paused. Its `ContextSwitched` event carries, in
`previous_topic`, the id of the topic that is current after the switch.
`pause()` records a `ContextSnapshot` in `context.history`, which keeps
at most `context.max_history` (10) entries, dropping the oldest.

Operations not allowed in the current status raise
`InvalidStateTransition` (with `from_state` and `to_state`); a duplicate
participant, or a turn from someone outside the dialog, raises
`ValidationError`. Both derive from `DomainError`.

The module also defines the enums `DialogType`, `DialogStatus` and
`ContextState`, and the dataclasses `ConversationContext` and
`ContextSnapshot`.

### `dialogdomain.events`

Event dataclasses deriving from `DomainEvent`, which provides
`subject()` (for example `"dialog.turn.added.v1"`), `aggregate_id()`
(the dialog id) and `event_type()` (the class name). Besides the events
the aggregate emits, the module defines `DialogStarted`,
`ContextUpdated`, `DialogMetadataSet`, `ParticipantRemoved` and
`TopicCompleted`.

### `dialogdomain.commands`

Command dataclasses deriving from `Command`: `StartDialog`, `EndDialog`,
`AddTurn`, `SwitchContext`, `UpdateContext`, `PauseDialog`,
`ResumeDialog`, `SetDialogMetadata`, `AddParticipant`,
`RemoveParticipant`, `MarkTopicComplete` and `AddContextVariable`. They
carry the target dialog's id in their fields; `aggregate_id()` returns
`None`.

## What the package does not do

- It has no command handlers: the command classes only describe
  requests, and nothing in the package applies them to a `Dialog`.
- The aggregate has no operations for removing participants, completing
  topics, updating context in bulk or setting metadata, although events
  and commands for these exist.
- There are no projections, queries, persistence or event store; dialogs
  live only in memory, and events are returned to the caller, not
  published.
- There is no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```