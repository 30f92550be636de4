"""HTTP session with retry / backoff for fetching remote datasets."""

import logging
import time

import requests

from flightmap.config import HEADERS, MAX_RETRIES, REQUEST_TIMEOUT, RETRY_BACKOFF

log = logging.getLogger("flightmap")

session = requests.Session()
session.headers.update(HEADERS)


def _decode(resp, url):
    # Not retried: a body that is not JSON will not become JSON on re-fetch.
    try:
        return resp.json()
    except ValueError as exc:
        log.warning("Invalid JSON from %s: %s", url, exc)
        return None


def api_get(url, params=None):
    """GET a JSON document with retries. Returns None when every attempt fails."""
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            resp = session.get(url, params=params, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            log.warning("Request error: %s (attempt %d)", exc, attempt)
        else:
            if resp.status_code == 200:
                return _decode(resp, url)
            if resp.status_code == 404:
                log.warning("404 for %s", url)
                return None
            log.warning("HTTP %d for %s (attempt %d)", resp.status_code, url, attempt)
        if attempt < MAX_RETRIES:
            time.sleep(RETRY_BACKOFF * attempt)
    log.error("Failed after %d attempts: %s", MAX_RETRIES, url)
    return None
