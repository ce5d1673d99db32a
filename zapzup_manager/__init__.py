"""ZapZup Manager - chat creation and chat-list notification backend."""

__version__ = "0.1.0"
