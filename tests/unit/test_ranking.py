"""Tests for winning/losing classification."""

from datetime import date

from tests.conftest import TRACKED, insert_samples


class TestRankClassifier:
    def test_recent_keywords_universe(self, seeded, windows):
        assert seeded.performance.recent_keywords(windows.current) == ["brand name", "new phrase", "rank tracker"]

    def test_winning(self, seeded, windows):
        winning = seeded.classifier.winning(windows)
        assert list(winning) == ["new phrase"]
        assert all(m.position.difference < 0 for m in winning.values())

    def test_losing(self, seeded, windows):
        losing = seeded.classifier.losing(windows)
        assert list(losing) == ["rank tracker"]
        assert all(m.position.difference > 0 for m in losing.values())

    def test_unchanged_keyword_in_neither(self, seeded, windows):
        assert "brand name" not in seeded.classifier.winning(windows)
        assert "brand name" not in seeded.classifier.losing(windows)

    def test_tracked_sets_disjoint(self, seeded, windows):
        winning = seeded.classifier.winning(windows, keywords=TRACKED)
        losing = seeded.classifier.losing(windows, keywords=TRACKED)
        assert list(winning) == ["new phrase", "seo tips"]
        assert not set(winning) & set(losing)

    def test_limit(self, seeded, windows):
        assert list(seeded.classifier.winning(windows, limit=1, keywords=TRACKED)) == ["new phrase"]

    def test_untracked_queries_excluded(self, conn, seeded, windows):
        insert_samples(conn, [(20, "untracked term", "/", date(2024, 6, 30), 0, 1, 0.0, 3.0)])
        assert list(seeded.classifier.winning(windows)) == ["new phrase"]
        assert "brand name" not in seeded.classifier.losing(windows)

    def test_universe_keeps_tracked_spelling(self, conn, seeded, windows):
        insert_samples(conn, [(20, "seo tips", "/", date(2024, 6, 30), 0, 1, 0.0, 4.0)])
        assert seeded.classifier.winning(windows)["seo tips"].query == "SEO Tips"

    def test_losing_biggest_drop_first(self, conn, seeded, windows):
        seeded.registry.add(["slipping"])
        insert_samples(
            conn,
            [
                (20, "slipping", "/", date(2024, 6, 17), 0, 1, 0.0, 1.0),
                (21, "slipping", "/", date(2024, 6, 30), 0, 1, 0.0, 30.0),
            ],
        )
        assert list(seeded.classifier.losing(windows)) == ["slipping", "rank tracker"]

    def test_graphs_attached(self, seeded, windows):
        losing = seeded.classifier.losing(windows)
        assert [p.date_bucket_label for p in losing["rank tracker"].graph] == ["2024-06-29", "2024-06-30"]

    def test_no_data(self, stack, windows):
        assert stack.classifier.winning(windows) == {}
        assert stack.classifier.losing(windows) == {}
