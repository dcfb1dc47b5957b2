"""In-memory domain model for conversations: dialogs, turns, topics, participants, context, commands and events."""

__version__ = "0.3.0"