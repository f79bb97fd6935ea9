"""HTTP page fetching and title lookup."""

import logging
from typing import Optional

import requests

from .config import USER_AGENT
from .exceptions import HttpStatusError, NetworkError
from .markup import extract_title

logger = logging.getLogger(__name__)

TITLE_TIMEOUT = 10.0


def make_session() -> requests.Session:
    """Session carrying the clippy.ai user agent. TLS verification stays on."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    session.verify = True
    return session


def send(
    session: requests.Session,
    method: str,
    url: str,
    timeout: float,
    **kwargs,
) -> requests.Response:
    """Issue a request, turning transport failures into NetworkError."""
    try:
        return session.request(method, url, timeout=timeout, **kwargs)
    except requests.exceptions.Timeout as e:
        raise NetworkError(f"Request to {url} timed out after {timeout:g}s") from e
    except requests.exceptions.SSLError as e:
        raise NetworkError(f"TLS error for {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Failed to fetch {url}: {e}") from e


def fetch_html(
    url: str,
    timeout: float = TITLE_TIMEOUT,
    session: Optional[requests.Session] = None,
    check_status: bool = True,
) -> str:
    """GET a page and return its body as text.

    With ``check_status`` off, error pages (e.g. a 403 bot wall) are returned
    like any other body.
    """
    if session is None:
        own = make_session()
        try:
            return fetch_html(url, timeout, own, check_status)
        finally:
            own.close()

    response = send(session, "GET", url, timeout)

    if check_status and not response.ok:
        raise HttpStatusError(
            f"Fetching {url} failed: HTTP {response.status_code} {response.reason}",
            status_code=response.status_code,
            detail=response.reason,
        )

    # requests assumes ISO-8859-1 for text/* without a charset
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"
    logger.debug("Fetched %s (%d chars)", url, len(response.text))
    return response.text


def fetch_title(
    url: str,
    timeout: float = TITLE_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> str:
    """Fetch ``url`` and return its page title, host, or the URL itself."""
    html = fetch_html(url, timeout=timeout, session=session)
    return extract_title(html, url)
