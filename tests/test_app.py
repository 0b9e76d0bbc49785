"""Tests for the terminal front end: rendering and command dispatch."""

from unittest.mock import AsyncMock, Mock

import pytest

from news_feed.app import handle_command, render_screen
from news_feed.fetcher import FetchFailure, FetchSuccess
from news_feed.presenter import FeedPresenter


def _presenter(result, opener=None):
    client = Mock()
    client.fetch_top_headlines = AsyncMock(return_value=result)
    client.search_articles = AsyncMock(return_value=result)
    return FeedPresenter(client, opener=opener)


class TestRenderScreen:
    def test_loading(self):
        assert render_screen(_presenter(None)) == "Loading news..."

    @pytest.mark.asyncio
    async def test_error_offers_retry(self):
        presenter = _presenter(FetchFailure(error="Network Error"))
        await presenter.load()

        text = render_screen(presenter)

        assert "Network Error" in text
        assert "retry" in text

    @pytest.mark.asyncio
    async def test_empty(self):
        presenter = _presenter(FetchSuccess(articles=()))
        await presenter.load()

        assert render_screen(presenter) == "No articles available"

    @pytest.mark.asyncio
    async def test_feed_lists_cards(self, article_factory):
        presenter = _presenter(FetchSuccess(articles=(article_factory("A", image=""), article_factory("B"))))
        await presenter.load()

        text = render_screen(presenter)

        assert "[1] UNKNOWN" in text
        assert "    B" in text
        assert "[2]" not in text

    @pytest.mark.asyncio
    async def test_detail(self, article_factory):
        article = article_factory("B", author="Sam Lee", publishedAt="bad", source={"name": "Wire"})
        presenter = _presenter(FetchSuccess(articles=(article,)))
        await presenter.load()
        presenter.select(article)

        text = render_screen(presenter)

        assert text.startswith("Wire\nUnknown date")
        assert "By Sam Lee" in text
        assert "https://example.com/b" in text


class TestHandleCommand:
    @pytest.mark.asyncio
    async def test_quit(self):
        assert await handle_command(_presenter(None), "q") is False

    @pytest.mark.asyncio
    async def test_select_and_back(self, article_factory):
        presenter = _presenter(FetchSuccess(articles=(article_factory("A"), article_factory("B"))))
        await presenter.load()

        assert await handle_command(presenter, "2") is True
        assert presenter.state.selected_article.title == "B"

        await handle_command(presenter, "b")
        assert presenter.state.selected_article is None

    @pytest.mark.asyncio
    async def test_refresh_and_retry(self):
        presenter = _presenter(FetchFailure(error="offline"))
        await presenter.load()

        await handle_command(presenter, "r")

        assert presenter.client.fetch_top_headlines.await_count == 2

    @pytest.mark.asyncio
    async def test_search_keeps_keyword_case(self):
        presenter = _presenter(FetchSuccess(articles=()))

        await handle_command(presenter, "/OpenAI")

        presenter.client.search_articles.assert_awaited_once_with("OpenAI")

    @pytest.mark.asyncio
    async def test_open_selected(self, article_factory):
        opener = Mock()
        opener.open.return_value = True
        article = article_factory("A")
        presenter = _presenter(FetchSuccess(articles=(article,)), opener=opener)
        await presenter.load()
        presenter.select(article)

        await handle_command(presenter, "o")

        opener.open.assert_called_once_with("https://example.com/a")

    @pytest.mark.asyncio
    async def test_unknown_command_is_ignored(self):
        assert await handle_command(_presenter(None), "zzz") is True
