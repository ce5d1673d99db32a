"""
Dependency injection.

The container module is imported explicitly
(`zapzup_manager.setup.ioc.container`) since it loads the Prisma client.
"""

from zapzup_manager.setup.ioc.scope import request_scope

__all__ = ["request_scope"]
