"""Session manager handing out one authenticated client per account."""

import logging
from typing import Callable, Optional

import requests

from ..exceptions import AuthError
from .client import BASE_URL, CodingBatClient
from .models import Account


logger = logging.getLogger(__name__)


class SessionManager:
    """Creates logged-in CodingBat clients, each with its own cookie jar."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: Optional[float] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._session_factory = session_factory

    def open(self, account: Account) -> CodingBatClient:
        """Return a client logged in as ``account``.

        Raises AuthError if the login request cannot be sent.
        """
        client = CodingBatClient(
            base_url=self.base_url,
            session=self._session_factory(),
            timeout=self.timeout,
        )
        logger.info("Logging in as %s", account.cuname)
        try:
            client.login(account)
        except AuthError:
            client.session.close()
            raise
        return client
