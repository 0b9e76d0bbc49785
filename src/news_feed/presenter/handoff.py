import webbrowser
from urllib.parse import urlparse

import structlog

logger = structlog.get_logger()

OPENABLE_SCHEMES = frozenset({"http", "https"})


def can_open_url(url: object) -> bool:
    if not url or not isinstance(url, str):
        return False
    parsed = urlparse(url.strip())
    return parsed.scheme.lower() in OPENABLE_SCHEMES and bool(parsed.netloc)


def open_article_url(url: str, opener=None) -> bool:
    """Open an article's canonical URL in an external browser.

    Returns False (and logs) instead of raising when the URL cannot be opened.
    """
    opener = opener or webbrowser
    if not can_open_url(url):
        logger.error("cannot_open_url", url=url)
        return False
    try:
        opened = opener.open(url)
    except (webbrowser.Error, OSError) as exc:
        logger.error("open_url_failed", url=url, error=str(exc))
        return False
    if not opened:
        logger.error("no_browser_available", url=url)
        return False
    logger.info("opened_url", url=url)
    return True
