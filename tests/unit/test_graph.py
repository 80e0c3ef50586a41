"""Tests for bucketed position graphs."""

from datetime import date

from app.models import GraphPoint, KeywordMetrics, Window
from tests.conftest import insert_samples


class TestGraphBuilder:
    def test_sparse_points(self, seeded, windows):
        history = seeded.graph.build(["seo tips", "rank tracker"], windows.current)
        assert history["seo tips"] == [GraphPoint("2024-06-28", 5.0)]
        assert [p.date_bucket_label for p in history["rank tracker"]] == ["2024-06-29", "2024-06-30"]

    def test_keyword_without_samples_absent(self, seeded, windows):
        assert seeded.graph.build(["never seen"], windows.current) == {}

    def test_max_id_per_bucket(self, conn, stack):
        insert_samples(
            conn,
            [
                (3, "wide", "/", date(2024, 6, 2), 0, 1, 0.0, 4.0),
                (1, "wide", "/", date(2024, 6, 3), 0, 1, 0.0, 9.0),
            ],
        )
        stack.graph.max_buckets = 1
        history = stack.graph.build(["wide"], Window(date(2024, 6, 1), date(2024, 6, 7)))
        assert history["wide"] == [GraphPoint("2024-06-01", 4.0)]

    def test_bucket_count_bounded(self, conn, stack):
        insert_samples(
            conn,
            [(i, "daily", "/", date(2024, 6, i), 0, 1, 0.0, float(i)) for i in range(1, 31)],
        )
        stack.graph.max_buckets = 4
        points = stack.graph.build(["daily"], Window(date(2024, 6, 1), date(2024, 6, 30)))["daily"]
        assert len(points) <= 4
        assert [p.date_bucket_label for p in points] == sorted(p.date_bucket_label for p in points)

    def test_series_is_lazy(self, seeded, windows):
        series = seeded.graph.series(["seo tips"], windows.current)
        assert next(series["seo tips"]) == GraphPoint("2024-06-28", 5.0)

    def test_case_insensitive_match(self, seeded, windows):
        assert "seo tips" in seeded.graph.build(["SEO Tips"], windows.current)

    def test_attach(self, seeded, windows):
        metrics = {"seo tips": KeywordMetrics(query="seo tips"), "never seen": KeywordMetrics(query="never seen")}
        seeded.graph.attach(metrics, windows.current)
        assert len(metrics["seo tips"].graph) == 1
        assert metrics["never seen"].graph == []

    def test_empty_input(self, seeded, windows):
        assert seeded.graph.build([], windows.current) == {}
