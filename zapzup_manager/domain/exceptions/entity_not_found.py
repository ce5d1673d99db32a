"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class ChatNotFoundError(EntityNotFoundError):
    """Raised when no chat exists with the given id."""

    def __init__(self, chat_id: str):
        super().__init__(f"Chat {chat_id} not found.")
        self.chat_id = chat_id


class UserNotFoundError(EntityNotFoundError):
    """Raised when no user exists with the given id."""

    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} not found.")
        self.user_id = user_id
