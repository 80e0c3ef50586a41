"""Shared fixtures: in-memory DuckDB with the full schema and a wired service stack."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

import duckdb
import pytest

from app.models import PerformanceSample
from app.repositories import (
    CacheRepository,
    InspectionRepository,
    OptionsRepository,
    PerformanceRepository,
    TrackedKeywordRepository,
    init_tables,
)
from app.services.keywords import (
    GraphBuilder,
    KeywordAnalytics,
    KeywordRegistry,
    MetricsAggregator,
    RankClassifier,
    resolve_window_pair,
)

TODAY = date(2024, 6, 30)
DAYS = 7

# (id, query, page, date, clicks, impressions, ctr, position)
# Current window: 06-23..06-30, compare window: 06-16..06-23.
SAMPLES = [
    (5, "seo tips", "/blog/seo", date(2024, 6, 18), 2, 50, 0.04, 8.0),
    (6, "rank tracker", "/tools/rank", date(2024, 6, 17), 5, 80, 0.0625, 3.0),
    (7, "old phrase", "/old", date(2024, 6, 20), 1, 10, 0.1, 4.0),
    (8, "brand name", "/", date(2024, 6, 19), 30, 100, 0.3, 2.0),
    (10, "seo tips", "/blog/seo", date(2024, 6, 28), 6, 40, 0.15, 5.0),
    (11, "seo tips", "/blog/seo-guide", date(2024, 6, 28), 8, 120, 0.0666, 5.0),
    (12, "rank tracker", "/tools/rank", date(2024, 6, 29), 1, 40, 0.025, 9.0),
    (13, "new phrase", "/new", date(2024, 6, 30), 3, 30, 0.1, 12.0),
    (14, "brand name", "/", date(2024, 6, 30), 40, 120, 0.3333, 2.0),
    (15, "rank tracker", "/tools/rank", date(2024, 6, 30), 1, 20, 0.05, 9.0),
]

TRACKED = ["SEO Tips", "rank tracker", "new phrase", "old phrase", "never seen"]


class FakeClock:
    """Controllable replacement for the cache's UTC clock."""

    def __init__(self, now: datetime = datetime(2024, 6, 30, 12, 0)):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


def insert_samples(conn: duckdb.DuckDBPyConnection, rows: list[tuple]) -> None:
    samples = [PerformanceSample(*row).to_dict() for row in rows]
    columns = list(samples[0])
    conn.executemany(
        f"INSERT INTO performance_sample ({', '.join(columns)}) VALUES ({', '.join('?' * len(columns))})",
        [list(s.values()) for s in samples],
    )


@dataclass
class Stack:
    performance: PerformanceRepository
    keywords: TrackedKeywordRepository
    options: OptionsRepository
    cache: CacheRepository
    inspections: InspectionRepository
    registry: KeywordRegistry
    aggregator: MetricsAggregator
    graph: GraphBuilder
    classifier: RankClassifier
    analytics: KeywordAnalytics


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def windows():
    return resolve_window_pair(DAYS, TODAY)


@pytest.fixture
def stack(conn, clock) -> Stack:
    performance = PerformanceRepository(read_only=False, conn=conn)
    keywords = TrackedKeywordRepository(read_only=False, conn=conn)
    options = OptionsRepository(read_only=False, conn=conn)
    cache = CacheRepository(read_only=False, conn=conn, ttl=3600, clock=clock)
    registry = KeywordRegistry(keywords, options, cache, days=DAYS)
    aggregator = MetricsAggregator(performance, keywords)
    graph = GraphBuilder(performance, max_buckets=8)
    classifier = RankClassifier(aggregator, graph, performance, keywords)
    analytics = KeywordAnalytics(registry, aggregator, graph, classifier, performance, cache, days=DAYS)
    return Stack(
        performance=performance,
        keywords=keywords,
        options=options,
        cache=cache,
        inspections=InspectionRepository(read_only=False, conn=conn),
        registry=registry,
        aggregator=aggregator,
        graph=graph,
        classifier=classifier,
        analytics=analytics,
    )


@pytest.fixture
def seeded(conn, stack) -> Stack:
    """Stack with SAMPLES loaded and TRACKED keywords registered."""
    insert_samples(conn, SAMPLES)
    stack.registry.add(TRACKED)
    return stack
