"""Terminal front end for the news feed.

Renders the presenter's current screen as plain text and maps single-key
commands onto presenter actions:

    <n>         open card n in the detail view
    b           back to the feed
    o           open the selected article in a browser
    r           refresh (or retry after an error)
    /<keyword>  search articles
    h           back to top headlines
    q           quit
"""

import argparse
import asyncio
import logging
from typing import Callable, List, Optional

import structlog

from .fetcher import NewsApiClient, NewsApiSettings, get_settings
from .presenter import FeedPresenter

logger = structlog.get_logger()

FEED_HINT = "[n] read  r refresh  /word search  h headlines  q quit"
DETAIL_HINT = "o open in browser  b back  q quit"


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse top headlines from NewsAPI")
    parser.add_argument("--country", type=str, default=None, help="Two-letter country code (default: NEWS_COUNTRY or 'us')")
    parser.add_argument("--search", type=str, default=None, help="Start with a keyword search instead of headlines")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))


def render_screen(presenter: FeedPresenter) -> str:
    state = presenter.state
    screen = state.screen

    if screen == "loading":
        return "Loading news..."
    if screen == "error":
        return f"⚠️ {state.error}\n\nPress r to retry"
    if screen == "empty":
        return "No articles available"
    if screen == "detail":
        detail = presenter.detail()
        lines = [detail.source, detail.published, "", detail.title]
        if detail.byline:
            lines.append(detail.byline)
        lines.append("-" * 40)
        if detail.description:
            lines.extend([detail.description, ""])
        if detail.content:
            lines.extend([detail.content, ""])
        lines.append(f"Read full article → {detail.url}")
        lines.extend(["", DETAIL_HINT])
        return "\n".join(lines)

    lines = ["📰 News Feed", ""]
    if state.error:
        lines.extend([f"⚠️ {state.error}", ""])
    for idx, card in enumerate(presenter.cards(), start=1):
        lines.append(f"[{idx}] {card.source.upper()}")
        lines.append(f"    {card.title}")
        for text in card.description.splitlines():
            lines.append(f"    {text}")
        lines.append(f"    {card.date}  Read more →")
        lines.append("")
    lines.append(FEED_HINT)
    return "\n".join(lines)


async def handle_command(presenter: FeedPresenter, raw: str) -> bool:
    """Apply one command; return False when the user asked to quit."""
    command = raw.strip()
    key = command.lower()

    if key in {"q", "quit", "exit"}:
        return False
    if command.startswith("/"):
        await presenter.search(command[1:].strip() or None)
    elif key == "h":
        await presenter.headlines()
    elif key == "r":
        if presenter.state.screen == "error":
            await presenter.retry()
        else:
            await presenter.refresh()
    elif key == "b":
        presenter.back()
    elif key == "o":
        presenter.open_selected()
    elif key.isdigit():
        presenter.select_at(int(key) - 1)
    elif key:
        logger.warning("unknown_command", command=command)
    return True


async def run_app(
    settings: NewsApiSettings,
    country: Optional[str] = None,
    keyword: Optional[str] = None,
    prompt: Callable[[str], str] = input,
) -> None:
    async with NewsApiClient(settings) as client:
        presenter = FeedPresenter(client, country=country, keyword=keyword)
        await presenter.load()
        while True:
            print(render_screen(presenter))
            try:
                raw = await asyncio.to_thread(prompt, "> ")
            except EOFError:
                break
            if not await handle_command(presenter, raw):
                break


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    settings = get_settings()
    try:
        asyncio.run(run_app(settings, country=args.country, keyword=args.search))
    except KeyboardInterrupt:
        logger.info("interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
