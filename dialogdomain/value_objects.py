"""Value objects of the dialog domain: turns, participants, messages, topics."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union
from uuid import UUID


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TurnType(Enum):
    """Kind of turn in a conversation."""

    USER_QUERY = "UserQuery"
    AGENT_RESPONSE = "AgentResponse"
    SYSTEM_MESSAGE = "SystemMessage"
    CLARIFICATION = "Clarification"
    FEEDBACK = "Feedback"


@dataclass
class TurnMetadata:
    """Metadata attached to a turn."""

    turn_type: TurnType
    confidence: float | None = None
    processing_time_ms: int | None = None
    references: list[UUID] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)


class ParticipantType(Enum):
    """What kind of party takes part in a dialog."""

    HUMAN = "Human"
    AI_AGENT = "AIAgent"
    SYSTEM = "System"
    EXTERNAL = "External"


class ParticipantRole(Enum):
    """Role a participant plays in a dialog."""

    PRIMARY = "Primary"
    ASSISTANT = "Assistant"
    OBSERVER = "Observer"
    MODERATOR = "Moderator"


@dataclass
class Participant:
    """A party in a dialog."""

    id: UUID
    participant_type: ParticipantType
    role: ParticipantRole
    name: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TextContent:
    """Plain text message content."""

    text: str


@dataclass
class StructuredContent:
    """Structured (JSON-like) message content."""

    data: Any


@dataclass
class MultimodalContent:
    """Content mixing optional text with named data parts."""

    text: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


MessageContent = Union[TextContent, StructuredContent, MultimodalContent]


class MessageIntent(Enum):
    """Intent classification of a message."""

    QUESTION = "Question"
    ANSWER = "Answer"
    STATEMENT = "Statement"
    COMMAND = "Command"
    ACKNOWLEDGMENT = "Acknowledgment"
    CLARIFICATION = "Clarification"
    FEEDBACK = "Feedback"
    SOCIAL = "Social"


@dataclass
class Message:
    """The message carried by a turn."""

    content: MessageContent
    intent: MessageIntent | None = None
    language: str = "en"
    sentiment: float | None = None
    embeddings: list[float] | None = None

    @classmethod
    def text(cls, content: str) -> Message:
        """Build a plain English text message."""
        return cls(content=TextContent(str(content)))

    def with_intent(self, intent: MessageIntent) -> Message:
        """Return a copy of this message carrying the given intent."""
        return replace(self, intent=intent)

    def with_embeddings(self, embeddings: list[float]) -> Message:
        """Return a copy of this message carrying the given embeddings."""
        return replace(self, embeddings=list(embeddings))


@dataclass
class Turn:
    """A single turn in a conversation."""

    turn_id: UUID
    turn_number: int
    participant_id: UUID
    message: Message
    timestamp: datetime
    metadata: TurnMetadata

    @classmethod
    def create(
        cls,
        turn_number: int,
        participant_id: UUID,
        message: Message,
        turn_type: TurnType,
    ) -> Turn:
        """Build a new turn with a fresh id, stamped now."""
        return cls(
            turn_id=uuid.uuid4(),
            turn_number=turn_number,
            participant_id=participant_id,
            message=message,
            timestamp=_utcnow(),
            metadata=TurnMetadata(turn_type=turn_type),
        )


class TopicStatus(Enum):
    """Lifecycle status of a topic."""

    ACTIVE = "Active"
    PAUSED = "Paused"
    COMPLETED = "Completed"
    ABANDONED = "Abandoned"


@dataclass
class TopicRelevance:
    """Relevance score of a topic and how quickly it fades."""

    score: float
    last_updated: datetime
    decay_rate: float


@dataclass
class Topic:
    """A topic discussed within a conversation."""

    id: UUID
    name: str
    status: TopicStatus
    relevance: TopicRelevance
    introduced_at: datetime
    related_topics: list[UUID] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    embedding: list[float] | None = None

    @classmethod
    def create(cls, name: str, keywords: list[str]) -> Topic:
        """Build a new active topic with full relevance."""
        now = _utcnow()
        return cls(
            id=uuid.uuid4(),
            name=str(name),
            status=TopicStatus.ACTIVE,
            relevance=TopicRelevance(score=1.0, last_updated=now, decay_rate=0.1),
            introduced_at=now,
            keywords=list(keywords),
        )

    def current_relevance(self, now: datetime | None = None) -> float:
        """Relevance decayed by the whole seconds elapsed, clamped to [0, 1]."""
        if now is None:
            now = _utcnow()
        delta = now - self.relevance.last_updated
        # Whole seconds, truncated toward zero.
        elapsed = int(delta.total_seconds())
        decayed = self.relevance.score * math.exp(
            -self.relevance.decay_rate * elapsed / 3600.0
        )
        return min(max(decayed, 0.0), 1.0)


class ContextScope(Enum):
    """How far a context variable is visible."""

    TURN = "Turn"
    TOPIC = "Topic"
    DIALOG = "Dialog"
    PARTICIPANT = "Participant"
    GLOBAL = "Global"


@dataclass
class ContextVariable:
    """A named value held in the conversation context."""

    name: str
    value: Any
    scope: ContextScope
    set_at: datetime
    source: UUID
    expires_at: datetime | None = None


@dataclass
class ConversationMetrics:
    """Aggregate figures about a conversation."""

    turn_count: int = 0
    avg_response_time_ms: float = 0.0
    topic_switches: int = 0
    clarification_count: int = 0
    sentiment_trend: float = 0.0
    coherence_score: float = 1.0


@dataclass
class EngagementMetrics:
    """Engagement figures for one participant."""

    participant_id: UUID
    turn_contributions: int = 0
    avg_message_length: float = 0.0
    avg_response_latency_ms: float = 0.0
    engagement_score: float = 0.0
    topics_initiated: int = 0