"""
DOMAIN LAYER

This layer contains:
- Entities: Business objects with identity (Chat, User, StoredFile)
- Value Objects: Immutable types (UserId, ChatId, FileId)
- Ports: Interfaces that infrastructure implements (repositories, notifier)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no Prisma, Redis, Pydantic, etc.)
2. NO I/O operations (no database, no network, no file system)
3. Only depends on Python stdlib
"""
