"""CodingBat HTTP client with scraping capabilities."""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from ..exceptions import AuthError, FetchError, ParseError, SubmissionError
from .models import Account, Exercise
from .parser import CodingBatPageParser, ExercisePageParser


logger = logging.getLogger(__name__)

BASE_URL = "https://codingbat.com"


class CodingBatClient:
    """HTTP client for interacting with CodingBat.

    A client wraps one ``requests.Session``; cookies set by the login
    response are kept on it and sent with later submissions.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        parser: Optional[ExercisePageParser] = None,
    ):
        """Initialize the client."""
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.parser = parser or CodingBatPageParser()

    def _get(self, path: str, **kwargs) -> requests.Response:
        """Make GET request relative to the site root."""
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        return self.session.get(url, timeout=self.timeout, **kwargs)

    def _post(self, path: str, data: dict, **kwargs) -> requests.Response:
        """Make form POST request relative to the site root."""
        url = f"{self.base_url}{path}"
        logger.debug("POST %s fields=%s", url, sorted(data))
        return self.session.post(url, data=data, timeout=self.timeout, **kwargs)

    def fetch_exercise(self, exercise_id: str) -> Exercise:
        """Download an exercise page and extract its statement and starter code."""
        try:
            html = self._get(f"/prob/{exercise_id}").text
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch exercise {exercise_id}: {e}") from e

        soup = BeautifulSoup(html, "html.parser")
        try:
            statement = self.parser.extract_statement(soup)
            starter_code = self.parser.extract_starter_code(soup)
        except ParseError as e:
            raise ParseError(f"{exercise_id}: {e}") from e

        return Exercise(
            exercise_id=exercise_id, statement=statement, starter_code=starter_code
        )

    def login(self, account: Account) -> None:
        """
        Authenticate with CodingBat.
        The response is not inspected: a wrong password is not detected here.
        """
        data = {"uname": account.cuname, "pw": account.password, "dologin": "log+in"}
        try:
            response = self._post("/login", data)
        except requests.RequestException as e:
            raise AuthError(f"Failed to log in as {account.cuname}: {e}") from e
        logger.debug("Login for %s answered %s", account.cuname, response.status_code)

    def submit(self, exercise_id: str, code: str, cuname: str) -> None:
        """Run a solution on the site under the given account."""
        data = {"id": exercise_id, "code": code, "cuname": cuname}
        try:
            response = self._post("/run", data)
        except requests.RequestException as e:
            raise SubmissionError(
                f"Failed to submit {exercise_id} for {cuname}: {e}"
            ) from e
        logger.debug(
            "Submit %s for %s answered %s", exercise_id, cuname, response.status_code
        )
