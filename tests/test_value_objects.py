import uuid
from datetime import datetime, timedelta, timezone

from dialogdomain.value_objects import (
    ConversationMetrics,
    Message,
    MessageIntent,
    MultimodalContent,
    TextContent,
    Topic,
    TopicStatus,
    Turn,
    TurnType,
)


def test_text_message_defaults():
    message = Message.text("Hello, world!")
    assert message.content == TextContent("Hello, world!")
    assert message.language == "en"
    assert message.intent is None
    assert message.embeddings is None
    assert message.sentiment is None


def test_with_intent_returns_new_message():
    original = Message.text("hi")
    updated = original.with_intent(MessageIntent.STATEMENT)
    assert updated.intent is MessageIntent.STATEMENT
    assert original.intent is None
    assert updated.content == original.content


def test_with_embeddings_copies_values():
    values = [0.5, 0.25]
    message = Message.text("x").with_embeddings(values)
    values.append(1.0)
    assert message.embeddings == [0.5, 0.25]


def test_turn_create_fills_fields():
    participant = uuid.uuid4()
    message = Message.text("hello")
    turn = Turn.create(1, participant, message, TurnType.USER_QUERY)
    assert turn.turn_number == 1
    assert turn.participant_id == participant
    assert turn.message == message
    assert turn.metadata.turn_type is TurnType.USER_QUERY
    assert turn.metadata.references == []
    assert turn.metadata.properties == {}
    assert turn.metadata.confidence is None


def test_turn_ids_are_unique():
    participant = uuid.uuid4()
    a = Turn.create(1, participant, Message.text("a"), TurnType.FEEDBACK)
    b = Turn.create(2, participant, Message.text("b"), TurnType.FEEDBACK)
    assert a.turn_id != b.turn_id
    assert a.turn_number < b.turn_number


def test_topic_create_defaults():
    topic = Topic.create("Weather Discussion", ["weather", "temperature"])
    assert topic.name == "Weather Discussion"
    assert topic.keywords == ["weather", "temperature"]
    assert topic.status is TopicStatus.ACTIVE
    assert topic.relevance.score == 1.0
    assert topic.relevance.decay_rate == 0.1
    assert topic.related_topics == []
    assert topic.embedding is None


def test_relevance_without_elapsed_time_is_score():
    topic = Topic.create("t", [])
    topic.relevance.score = 0.5
    assert topic.current_relevance(topic.relevance.last_updated) == 0.5


def test_relevance_truncates_partial_seconds():
    topic = Topic.create("t", [])
    topic.relevance.score = 0.5
    later = topic.relevance.last_updated + timedelta(milliseconds=900)
    assert topic.current_relevance(later) == 0.5


def test_relevance_decays_over_time():
    topic = Topic.create("t", [])
    start = topic.relevance.last_updated
    one_hour = topic.current_relevance(start + timedelta(hours=1))
    ten_hours = topic.current_relevance(start + timedelta(hours=10))
    assert 0.0 < ten_hours < one_hour < 1.0


def test_relevance_is_clamped_to_one():
    topic = Topic.create("t", [])
    topic.relevance.score = 2.0
    assert topic.current_relevance(topic.relevance.last_updated) == 1.0
    earlier = topic.relevance.last_updated - timedelta(hours=5)
    assert topic.current_relevance(earlier) == 1.0


def test_relevance_is_clamped_to_zero():
    topic = Topic.create("t", [])
    topic.relevance.score = -0.3
    assert topic.current_relevance(topic.relevance.last_updated) == 0.0


def test_relevance_defaults_to_now():
    topic = Topic.create("t", [])
    topic.relevance.last_updated = datetime.now(timezone.utc) - timedelta(days=30)
    assert topic.current_relevance() < 1.0


def test_conversation_metrics_defaults():
    metrics = ConversationMetrics()
    assert metrics.turn_count == 0
    assert metrics.coherence_score == 1.0
    assert metrics.topic_switches == 0


def test_multimodal_content_defaults():
    content = MultimodalContent()
    assert content.text is None
    assert content.data == {}