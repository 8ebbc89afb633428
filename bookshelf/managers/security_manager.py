from bookshelf.logging import logger
from bookshelf.settings import app_settings


class SecurityManager:
    """
    Very naive access predicate: only the administrator gets in.

    The administrator name comes from ``ADMIN_USERNAME``.
    """

    def __init__(self, admin_username: str | None = None) -> None:
        self.admin_username = admin_username or app_settings.ADMIN_USERNAME

    def can_access(self, username: str | None) -> bool:
        logger.debug("Using real security manager")
        return username is not None and username == self.admin_username


class AllowAllSecurityManager:
    """Access predicate that lets every caller in. Development and tests only."""

    def can_access(self, username: str | None) -> bool:
        logger.debug("Using allow-all security manager")
        return True
