"""Extraction of exercise text from CodingBat problem pages."""

from typing import Protocol

from bs4 import BeautifulSoup, Comment

from ..exceptions import ParseError


class ExercisePageParser(Protocol):
    """Anything able to pull the statement and starter code out of a page."""

    def extract_statement(self, soup: BeautifulSoup) -> str:
        ...

    def extract_starter_code(self, soup: BeautifulSoup) -> str:
        ...


class CodingBatPageParser:
    """Selector based parser for the current CodingBat layout."""

    STATEMENT_SELECTOR = ".max2"
    CODE_SELECTOR = "#ace_div"

    def extract_statement(self, soup: BeautifulSoup) -> str:
        return self._first_text(soup, self.STATEMENT_SELECTOR, "problem statement")

    def extract_starter_code(self, soup: BeautifulSoup) -> str:
        return self._first_text(soup, self.CODE_SELECTOR, "example code")

    @staticmethod
    def _first_text(soup: BeautifulSoup, selector: str, what: str) -> str:
        """Return the first text fragment of the first node matching selector."""
        node = soup.select_one(selector)
        if node is None:
            raise ParseError(f"Could not parse {what}: nothing matches {selector!r}")

        # Only the leading text fragment is used; nested markup and comments are ignored
        text = next(
            (s for s in node.find_all(string=True) if not isinstance(s, Comment)),
            None,
        )
        if text is None:
            raise ParseError(f"Could not parse {what}: {selector!r} has no text")
        return text.strip()
