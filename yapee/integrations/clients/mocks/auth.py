"""
Mock authentication client.

There is no credential store: one fixed username/password pair yields the
admin account and any other input yields a generic user account.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from yapee.integrations.contracts.auth import Role, User

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
EMAIL_DOMAIN = "yapee.vn"


class MockAuthClient:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def login(self, username: str, password: str) -> User:
        logger.info("Login attempt for: %s", username)

        if username == ADMIN_USERNAME and password == ADMIN_PASSWORD:
            return User(
                id="admin1",
                username=ADMIN_USERNAME,
                email=f"{ADMIN_USERNAME}@{EMAIL_DOMAIN}",
                name="Admin Yapee",
                role=Role.ADMIN,
                created_at=self._clock(),
            )

        return User(
            id="1",
            username=username,
            email=f"{username}@{EMAIL_DOMAIN}",
            name="Nguyễn Văn A",
            role=Role.USER,
            created_at=self._clock(),
        )


mock_auth_client = MockAuthClient()
