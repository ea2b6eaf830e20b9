"""Entry point, scheduler and command line for pricewatch."""

import argparse
import logging
import os
import random
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from pricewatch.checker import PriceChecker
from pricewatch.config import load_config
from pricewatch.errors import StoreError, TrackingError
from pricewatch.notifiers import send_price_drop_alert
from pricewatch.rate_limiter import RateLimiter
from pricewatch.registry import ExtractorRegistry
from pricewatch.resolver import SupportTierResolver
from pricewatch.storage import Store

logging.basicConfig(
    level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

ALL_DOMAINS = "*"


def _jitter_max() -> int:
    try:
        return int(os.environ.get("JITTER_MAX_SECONDS", "180"))
    except ValueError:
        return 180


def build_checker(store: Store | None = None) -> PriceChecker:
    """Wire store, resolver, registry and limiter into a checker."""
    store = store or Store()
    store.init_db()
    resolver = SupportTierResolver()
    registry = ExtractorRegistry(resolver.specific_names)
    limiter = RateLimiter(store)
    return PriceChecker(
        store=store,
        resolver=resolver,
        registry=registry,
        limiter=limiter,
        notify=send_price_drop_alert,
    )


def run_sweep_job(checker: PriceChecker) -> None:
    """Scheduled sweep; store failures abort the sweep and are logged here."""
    try:
        checker.trigger_now()
    except StoreError:
        logger.exception("Sweep aborted: store unavailable")


def run_sweep_with_jitter(checker: PriceChecker) -> None:
    """
    Add randomized jitter before each scheduled sweep.

    Jitter avoids the perfectly-regular request pattern that bot-detection
    systems flag as automation. Each run is preceded by a random delay of
    0-JITTER_MAX_SECONDS seconds (default 180).
    """
    delay = random.uniform(0, _jitter_max())
    logger.debug("Jitter: sleeping %.1f s before sweep", delay)
    time.sleep(delay)
    run_sweep_job(checker)


def cmd_run(checker: PriceChecker, args) -> int:
    """Run once if a sweep is due, then start the scheduler."""
    config = load_config(checker.store)
    logger.info("🚀 pricewatch started: %d tracked item(s)", checker.store.count_items())
    logger.info(
        "Scheduler: every ~%d min ± %d s jitter",
        config.check_interval_minutes, _jitter_max(),
    )

    if checker.is_due(config):
        run_sweep_job(checker)
    else:
        logger.info("Last sweep at %s, waiting for next interval", checker.store.get_last_sweep_at())

    scheduler = BlockingScheduler()
    scheduler.add_job(
        run_sweep_with_jitter,
        args=[checker],
        trigger=IntervalTrigger(minutes=config.check_interval_minutes),
        id="price_sweep",
        max_instances=1,          # Prevent overlapping runs
        misfire_grace_time=300,   # 5 min grace if a run is missed
    )
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Shutting down")
        checker.request_stop()
    return 0


def cmd_check(checker: PriceChecker, args) -> int:
    try:
        summary = checker.trigger_now()
    except StoreError as e:
        logger.error("Sweep aborted: %s", e)
        return 1
    if summary is None:
        return 1
    print(
        f"checked={summary.checked} succeeded={summary.succeeded} "
        f"failed={summary.failed} skipped={summary.skipped} ({summary.duration_ms} ms)"
    )
    return 0


def cmd_track(checker: PriceChecker, args) -> int:
    try:
        item = checker.track(args.url, selector=args.selector)
    except TrackingError as e:
        logger.error("Cannot track %s: %s", args.url, e)
        return 1
    print(f"{item.id}  {item.current_price:,.2f} {item.currency}  {item.title}")
    return 0


def cmd_list(checker: PriceChecker, args) -> int:
    items = checker.store.list_items()
    if not items:
        print("No tracked items")
    for item in items:
        checked = item.last_checked_at.isoformat(timespec="minutes") if item.last_checked_at else "never"
        status = "" if item.is_active else " (inactive)"
        print(
            f"{item.id}  {item.current_price:>10,.2f} {item.currency}  "
            f"[{item.tier_at_creation.value}] {item.title[:60]}{status}  checked {checked}"
        )
    return 0


def cmd_untrack(checker: PriceChecker, args) -> int:
    if not checker.untrack(args.item_id):
        logger.error("No tracked item with id %s", args.item_id)
        return 1
    return 0


def cmd_classify(checker: PriceChecker, args) -> int:
    document = Path(args.html).read_text(encoding="utf-8") if args.html else None
    result = checker.resolver.classify(args.url, document)
    print(f"tier={result.tier.value} site={result.site_name} actionable={result.actionable}")
    print(checker.resolver.explain(args.url, document))
    return 0


def cmd_limits(checker: PriceChecker, args) -> int:
    if args.clear == ALL_DOMAINS:
        print(f"Cleared {checker.limiter.clear_all()} bucket(s)")
        return 0
    if args.clear:
        if not checker.limiter.clear(args.clear):
            print(f"{args.clear} is not rate limited")
        return 0
    buckets = checker.limiter.status()
    if not buckets:
        print("No domains rate limited")
    for bucket in buckets:
        print(
            f"{bucket.domain}  failures={bucket.failure_count} level={bucket.backoff_level} "
            f"retry in {checker.limiter.minutes_until_retry(bucket.domain)} min  ({bucket.last_error})"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pricewatch", description="Track product prices across online stores.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("run", help="run sweeps on a schedule").set_defaults(func=cmd_run)
    sub.add_parser("check", help="run one sweep now").set_defaults(func=cmd_check)

    track = sub.add_parser("track", help="start tracking a product URL")
    track.add_argument("url")
    track.add_argument("--selector", help="CSS selector of the price (unknown stores)")
    track.set_defaults(func=cmd_track)

    sub.add_parser("list", help="list tracked items").set_defaults(func=cmd_list)

    untrack = sub.add_parser("untrack", help="stop tracking an item")
    untrack.add_argument("item_id")
    untrack.set_defaults(func=cmd_untrack)

    classify = sub.add_parser("classify", help="show the support tier of a URL")
    classify.add_argument("url")
    classify.add_argument("--html", help="saved page to score an unknown store")
    classify.set_defaults(func=cmd_classify)

    limits = sub.add_parser("limits", help="show or clear per-domain backoff")
    limits.add_argument(
        "--clear", nargs="?", const=ALL_DOMAINS, metavar="DOMAIN",
        help="clear one domain, or all when no domain is given",
    )
    limits.set_defaults(func=cmd_limits)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        checker = build_checker()
    except StoreError as e:
        logger.error("Cannot open database: %s", e)
        return 1
    return args.func(checker, args)


if __name__ == "__main__":
    sys.exit(main())
