"""
Passport York grades scraper
"""

import logging
from typing import Dict, List, Optional

import requests
from bs4 import BeautifulSoup
from bs4.element import Tag
from bs4.formatter import HTMLFormatter

from errors import (
    AuthenticationFailed,
    MalformedPageError,
    RowShapeError,
    TableNotFoundError,
    TransportError,
)
from records import CourseRecord, Credential

logger = logging.getLogger(__name__)

COURSE_URL = "https://wrem.sis.yorku.ca/Apps/WebObjects/ydml.woa/wa/DirectAction/document?name=CourseListv1"
LOGIN_URL = "https://passportyork.yorku.ca/ppylogin/ppylogin"
LOGOUT_URL = "https://passportyork.yorku.ca/ppylogin/ppylogout"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_6) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/14.0.2 Safari/605.1.15"
)

# present in the login response only when the credentials were accepted
SUCCESS_MARKER = "You have successfully authenticated"

HIDDEN_INPUT_SELECTOR = "input[type='hidden']"
GRADES_TABLE_SELECTOR = "table.bodytext"
COLUMNS = ("session", "course", "title", "grade")


def _escape_text(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("\xa0", "&nbsp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


# serialise cell contents the way a browser's innerHTML would
CELL_FORMATTER = HTMLFormatter(entity_substitution=_escape_text)


def html_entities(text: str) -> str:
    """Decode the few entities the grades table uses; &nbsp; is dropped"""
    return (
        text.replace("&nbsp;", "")
        .replace("&amp;", "&")
        .replace("&lt;", "<")
        .replace("&gt;", ">")
    )


def select_cells(element: Tag, selector: str) -> List[str]:
    """Trimmed inner HTML of every element under ``element`` matching ``selector``"""
    return [
        cell.decode_contents(formatter=CELL_FORMATTER).strip()
        for cell in element.select(selector)
    ]


class YorkGradesScraper:
    """Scraper for the York course list and its grades"""

    def __init__(self, credential: Credential, session: Optional[requests.Session] = None):
        self.credential = credential
        self.session = session or requests.Session()

        self.session.headers.update({
            'User-Agent': USER_AGENT
        })

    def _request(self, method: str, url: str, data: Optional[Dict[str, str]] = None) -> str:
        """Send one request through the cookie-keeping session and return the body"""
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, data=data)
        except requests.RequestException as exc:
            logger.debug("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        return response.text

    def _hidden_fields(self, soup: BeautifulSoup) -> Dict[str, str]:
        """Name/value pairs of every hidden input on the page"""
        fields = {}
        for inp in soup.select(HIDDEN_INPUT_SELECTOR):
            name = inp.get('name')
            value = inp.get('value')
            if name is None or value is None:
                logger.debug("Hidden input without name or value: %s", inp)
                raise MalformedPageError(f"Hidden input is missing a name or value: {inp}")
            fields[name] = value
        return fields

    def authenticate(self) -> bool:
        """Log in to Passport York, replaying the hidden fields of the login form"""
        html = self._request("GET", COURSE_URL)
        soup = BeautifulSoup(html, 'html.parser')

        form_data = {
            'mli': self.credential.username,
            'password': self.credential.password,
            'dologin': 'Login',
        }
        hidden = self._hidden_fields(soup)
        # hidden fields overwrite the fixed ones when the names collide
        form_data.update(hidden)
        logger.info("Submitting login form with %d hidden fields", len(hidden))

        body = self._request("POST", LOGIN_URL, data=form_data)
        authenticated = SUCCESS_MARKER in body
        logger.info("Authenticated: %s", authenticated)
        return authenticated

    def scrape_grades(self) -> List[CourseRecord]:
        """Read every course row of the grades table, in page order"""
        html = self._request("GET", COURSE_URL)
        soup = BeautifulSoup(html, 'html.parser')

        tables = soup.select(GRADES_TABLE_SELECTOR)
        if not tables:
            logger.debug("No %s on the course list page", GRADES_TABLE_SELECTOR)
            raise TableNotFoundError("Could not find table!")

        rows = [select_cells(tr, 'td') for tr in tables[0].select('tr')]

        records = []
        for index, row in enumerate(rows):
            # header rows use <th> only
            if not row:
                continue
            if len(row) < len(COLUMNS):
                raise RowShapeError(
                    f"Row {index} has {len(row)} cells, expected at least {len(COLUMNS)}"
                )
            records.append(CourseRecord(
                session=html_entities(row[0]),
                course=html_entities(row[1]),
                title=html_entities(row[2]),
                grade=html_entities(row[3]),
            ))

        logger.info("Scraped %d course rows", len(records))
        return records

    def logout(self) -> None:
        """End the Passport York session; the response is not inspected"""
        self._request("GET", LOGOUT_URL)
        logger.info("Logged out")

    def fetch_grades(self) -> List[CourseRecord]:
        """Log in, scrape the grades table and log out again"""
        if not self.authenticate():
            logger.debug("Login response did not confirm authentication")
            raise AuthenticationFailed("Could not authenticate!")

        records = self.scrape_grades()
        self.logout()
        return records
