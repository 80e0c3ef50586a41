#!/usr/bin/env python3
"""
Manage tracked keywords and print keyword reports.

Usage:
    python manage_keywords.py summary                  # Quota and tracked count
    python manage_keywords.py add "seo tips, audits"   # Track new keywords
    python manage_keywords.py remove "seo tips"        # Stop tracking a keyword
    python manage_keywords.py tracked                  # All tracked keywords
    python manage_keywords.py winning                  # Top winning keywords
    python manage_keywords.py losing                   # Top losing keywords
    python manage_keywords.py winning --days 7         # Any report for a 7 day window
    python manage_keywords.py --precompute             # Warm winning/losing cache
    python manage_keywords.py --clear-cache            # Drop all cached reports
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from app.models import KeywordMetrics  # noqa: E402
from settings import DAYS  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(level="INFO", to_file=True)


def _pop_days(args: list[str]) -> int:
    if "--days" not in args:
        return DAYS
    i = args.index("--days")
    try:
        days = int(args[i + 1])
    except (IndexError, ValueError):
        print(__doc__)
        sys.exit(1)
    del args[i : i + 2]
    return days


def print_report(title: str, data: dict[str, KeywordMetrics]) -> None:
    """Print keyword metrics as a table."""
    print("\n" + "=" * 72)
    print(title)
    print("=" * 72)

    if not data:
        print("  (no keywords)")
    for m in data.values():
        print(
            f"  {m.query[:32]:<32} "
            f"pos {m.position.total:>5.0f} ({m.position.difference:+.0f})  "
            f"clicks {m.clicks.total:>6,.0f} ({m.clicks.difference:+,.0f})  "
            f"points {len(m.graph)}"
        )
    print("=" * 72 + "\n")


def main():
    args = sys.argv[1:]
    days = _pop_days(args)

    container.init(days=days)
    analytics = container.keyword_analytics
    registry = container.registry

    if "--clear-cache" in args:
        analytics.clear_cache()
        return

    if "--precompute" in args:
        analytics.precompute_all()
        return

    if not args:
        print(__doc__)
        sys.exit(1)

    command, rest = args[0], " ".join(args[1:])

    if command == "summary":
        summary = analytics.get_tracked_keywords_summary()
        print(f"\nTracked: {summary['total']:,}  Quota: {summary['taken']:,}/{summary['available']:,}\n")
    elif command == "add":
        addable = registry.extract_addable(rest)
        if not addable:
            logger.warning("Nothing to add: {!r}", rest)
            return
        registry.add(addable)
        logger.info("Now tracking: {}", ", ".join(addable))
    elif command == "remove":
        registry.remove(rest.strip())
    elif command == "tracked":
        print_report(f"TRACKED KEYWORDS ({days} days)", analytics.get_tracked_keywords())
    elif command == "winning":
        print_report(f"WINNING KEYWORDS ({days} days)", analytics.get_winning_keywords())
    elif command == "losing":
        print_report(f"LOSING KEYWORDS ({days} days)", analytics.get_losing_keywords())
    else:
        print(__doc__)
        sys.exit(1)


if __name__ == "__main__":
    main()
