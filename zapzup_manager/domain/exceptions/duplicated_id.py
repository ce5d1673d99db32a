"""
DuplicatedIdError - Raised when the same user id appears twice in a chat.
Maps to: HTTP 409 Conflict
"""


class DuplicatedIdError(Exception):
    """A user cannot chat with themselves or join the same chat twice."""

    def __init__(self, duplicated_id: str):
        super().__init__(f"Duplicated id: {duplicated_id}")
        self.duplicated_id = duplicated_id
