import logging
from typing import Optional
from urllib.parse import urlencode

import requests

from .config import CHARACTER_URL, REQUEST_HEADERS, TIMEOUT
from .errors import ScraperError


class FetchError(ScraperError):
    pass


def character_url(name: str) -> str:
    return f"{CHARACTER_URL}&{urlencode({'name': name})}"


def fetch_character_page(name: str, session: Optional[requests.Session] = None) -> str:
    url = character_url(name)
    getter = session.get if session is not None else requests.get
    logging.info("Fetching %s", url)
    try:
        resp = getter(url, headers=REQUEST_HEADERS, timeout=TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"fetching {url} failed: {e}") from e
    # requests falls back to ISO-8859-1 when the charset header is missing
    if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text
