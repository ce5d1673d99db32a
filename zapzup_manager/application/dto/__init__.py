"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py → ChatDTO
- user.py → UserDTO
- file.py → FileDTO, FileUpload

Note: These are different from domain entities.
DTOs are the transport shape, entities are for business logic.
"""

from zapzup_manager.application.dto.chat import ChatDTO, to_dto_list
from zapzup_manager.application.dto.file import FileDTO, FileUpload
from zapzup_manager.application.dto.user import UserDTO

__all__ = [
    "ChatDTO",
    "to_dto_list",
    "FileDTO",
    "FileUpload",
    "UserDTO",
]
