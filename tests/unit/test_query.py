"""Tests for the query fragment builder."""

from datetime import date

import pytest

from app.models import Window
from app.repositories import Page, Query


class TestQuery:
    def test_no_predicates(self):
        sql, params = Query().sql("SELECT * FROM t")
        assert sql == "SELECT * FROM t"
        assert params == []

    def test_predicates_joined_with_and(self):
        sql, params = Query().equals("a", 1).between("b", 2, 3).sql("SELECT * FROM t")
        assert "WHERE a = ? AND b BETWEEN ? AND ?" in sql
        assert params == [1, 2, 3]

    def test_within_window(self):
        window = Window(date(2024, 6, 1), date(2024, 6, 7))
        _, params = Query().within(window, "s.date").sql("SELECT 1")
        assert params == [date(2024, 6, 1), date(2024, 6, 7)]

    def test_empty_isin_matches_nothing(self):
        sql, params = Query().isin("q", []).sql("SELECT * FROM t")
        assert "WHERE FALSE" in sql
        assert params == []

    def test_isin_placeholders(self):
        sql, params = Query().isin("q", ["x", "y"]).sql("SELECT * FROM t")
        assert "q IN (?, ?)" in sql
        assert params == ["x", "y"]

    def test_group_order_and_page(self):
        query = Query().ordered("n", "desc").paginate(Page.number(3, 10))
        sql, _ = query.sql("SELECT n FROM t", group_by="n")
        assert sql.endswith("GROUP BY n\nORDER BY n DESC LIMIT 10 OFFSET 20")

    def test_rejects_bad_order(self):
        with pytest.raises(ValueError):
            Query().ordered("n", "sideways")


class TestPage:
    def test_first_page(self):
        assert Page.number(1, 25) == Page(offset=0, limit=25)

    def test_page_below_one_clamps(self):
        assert Page.number(0, 25).offset == 0
