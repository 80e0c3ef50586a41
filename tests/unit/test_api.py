"""Tests for the API views over the container."""

import pytest

from app.container import container
from web.api import inspection, keywords
from web.api.errors import ValidationError


@pytest.fixture
def api(conn):
    container.reset()
    container.init(conn=conn, days=7)
    yield container
    container.reset()


class TestKeywordViews:
    def test_add_and_summary(self, api):
        result = keywords.add_keywords("alpha, beta")
        assert result.added == ["alpha", "beta"]
        assert result.skipped == []
        assert result.summary.total == 2

    def test_add_skips_tracked(self, api):
        keywords.add_keywords("alpha")
        result = keywords.add_keywords("Alpha, gamma")
        assert result.added == ["gamma"]
        assert result.skipped == ["Alpha"]

    def test_add_blank(self, api):
        with pytest.raises(ValidationError):
            keywords.add_keywords(" , ")

    def test_remove(self, api):
        keywords.add_keywords("alpha")
        assert keywords.remove_keyword(" alpha ").total == 0

    def test_remove_blank(self, api):
        with pytest.raises(ValidationError):
            keywords.remove_keyword("  ")

    def test_tracked_keywords_zero_filled(self, api):
        keywords.add_keywords("alpha")
        response = keywords.get_tracked_keywords(days=30)
        assert response.days == 30
        assert [i.query for i in response.items] == ["alpha"]
        assert response.items[0].position.total == 0

    def test_tracked_rows(self, api):
        keywords.add_keywords("alpha")
        response = keywords.get_tracked_keywords_rows(page=1)
        assert response.page == 1
        assert len(response.items) == 1

    def test_invalid_days(self, api):
        with pytest.raises(ValidationError):
            keywords.get_keywords_overview(days=0)
        with pytest.raises(ValidationError):
            keywords.get_tracked_overview(days=366)

    def test_invalid_page(self, api):
        with pytest.raises(ValidationError):
            keywords.get_tracked_keywords_rows(page=0)

    def test_overview_without_data(self, api):
        response = keywords.get_keywords_overview()
        assert response.winning == []
        assert response.losing == []

    def test_keyword_graph_without_data(self, api):
        assert keywords.get_keyword_graph("alpha").series == {}

    def test_keyword_pages_without_data(self, api):
        response = keywords.get_keyword_pages("alpha", days=7)
        assert response.query == "alpha"
        assert response.items == []


class TestInspectionViews:
    def test_listing(self, api, conn):
        conn.execute("INSERT INTO inspection (page, coverage_state) VALUES ('/', 'Submitted and indexed')")
        response = inspection.get_inspections()
        assert response.total == 1
        assert response.items[0].page == "/"
        assert inspection.get_presence_stats().items == {"Submitted and indexed": 1}

    def test_unknown_coverage_state(self, api):
        with pytest.raises(ValidationError):
            inspection.get_inspections(coverage_state="Mostly indexed")
