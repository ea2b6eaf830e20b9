"""SQLite persistence for tracked items, price history, rate-limit buckets and settings."""

import json
import logging
import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from pricewatch.errors import StoreError
from pricewatch.models import PriceEntry, RateLimitBucket, Tier, TrackedItem

logger = logging.getLogger(__name__)

LAST_SWEEP_KEY = "last_sweep_at"

# Columns of tracked_items that may be changed through update_item()
ITEM_COLUMNS = (
    "url",
    "domain",
    "title",
    "tier_at_creation",
    "current_price",
    "initial_price",
    "currency",
    "added_at",
    "last_checked_at",
    "is_active",
    "site_name",
    "custom_selector",
    "image_url",
)


def get_db_path() -> Path:
    """Get database path from env or default."""
    path = os.environ.get("DB_PATH", "data/pricewatch.db")
    return Path(path)


def _ts(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_ts(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _to_column(name: str, value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Tier):
        return value.value
    if name == "is_active":
        return int(bool(value))
    return value


class Store:
    """Key-value style access to the SQLite database at ``db_path``."""

    def __init__(self, db_path: Path | str | None = None):
        self.db_path = Path(db_path) if db_path is not None else get_db_path()

    @contextmanager
    def get_connection(self):
        """Context manager for SQLite connection; commits on success."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"cannot open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create tables if they don't exist."""
        with self.get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS tracked_items (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT NOT NULL UNIQUE,
                    url TEXT NOT NULL UNIQUE,
                    domain TEXT NOT NULL,
                    title TEXT NOT NULL,
                    tier_at_creation TEXT NOT NULL,
                    current_price REAL NOT NULL,
                    initial_price REAL NOT NULL,
                    currency TEXT NOT NULL,
                    added_at TIMESTAMP NOT NULL,
                    last_checked_at TIMESTAMP,
                    is_active INTEGER NOT NULL DEFAULT 1,
                    site_name TEXT,
                    custom_selector TEXT,
                    image_url TEXT
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS price_history (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    item_id TEXT NOT NULL,
                    price REAL NOT NULL,
                    recorded_at TIMESTAMP NOT NULL
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_history_item
                ON price_history(item_id, id)
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS rate_limit_buckets (
                    domain TEXT PRIMARY KEY,
                    failure_count INTEGER NOT NULL,
                    backoff_level INTEGER NOT NULL,
                    next_retry_at TIMESTAMP NOT NULL,
                    last_error TEXT,
                    last_outcome_id TEXT
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    # ── Tracked items ─────────────────────────────────────────────────────────

    def _history(self, conn, item_id: str) -> list[PriceEntry]:
        rows = conn.execute(
            "SELECT price, recorded_at FROM price_history WHERE item_id = ? ORDER BY id",
            (item_id,),
        ).fetchall()
        return [PriceEntry(price=r["price"], recorded_at=_parse_ts(r["recorded_at"])) for r in rows]

    def _item_from_row(self, conn, row) -> TrackedItem:
        return TrackedItem(
            id=row["id"],
            url=row["url"],
            domain=row["domain"],
            title=row["title"],
            tier_at_creation=Tier(row["tier_at_creation"]),
            current_price=row["current_price"],
            initial_price=row["initial_price"],
            currency=row["currency"],
            added_at=_parse_ts(row["added_at"]),
            last_checked_at=_parse_ts(row["last_checked_at"]),
            price_history=self._history(conn, row["id"]),
            is_active=bool(row["is_active"]),
            site_name=row["site_name"],
            custom_selector=row["custom_selector"],
            image_url=row["image_url"],
        )

    def list_items(self) -> list[TrackedItem]:
        """All tracked items in insertion order."""
        with self.get_connection() as conn:
            rows = conn.execute("SELECT * FROM tracked_items ORDER BY seq").fetchall()
            return [self._item_from_row(conn, row) for row in rows]

    def get_item(self, item_id: str) -> TrackedItem | None:
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM tracked_items WHERE id = ?", (item_id,)
            ).fetchone()
            return self._item_from_row(conn, row) if row else None

    def find_item_by_url(self, url: str) -> TrackedItem | None:
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM tracked_items WHERE url = ?", (url,)
            ).fetchone()
            return self._item_from_row(conn, row) if row else None

    def count_items(self) -> int:
        with self.get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM tracked_items").fetchone()[0]

    def save_item(self, item: TrackedItem) -> None:
        """Insert the item or replace it (keeping its position), history included."""
        values = {name: _to_column(name, getattr(item, name)) for name in ITEM_COLUMNS}
        with self.get_connection() as conn:
            existing = conn.execute(
                "SELECT seq FROM tracked_items WHERE id = ?", (item.id,)
            ).fetchone()
            if existing:
                assignments = ", ".join(f"{name} = ?" for name in ITEM_COLUMNS)
                conn.execute(
                    f"UPDATE tracked_items SET {assignments} WHERE id = ?",
                    (*values.values(), item.id),
                )
            else:
                columns = ", ".join(("id",) + ITEM_COLUMNS)
                placeholders = ", ".join("?" for _ in range(len(ITEM_COLUMNS) + 1))
                conn.execute(
                    f"INSERT INTO tracked_items ({columns}) VALUES ({placeholders})",
                    (item.id, *values.values()),
                )
            conn.execute("DELETE FROM price_history WHERE item_id = ?", (item.id,))
            conn.executemany(
                "INSERT INTO price_history (item_id, price, recorded_at) VALUES (?, ?, ?)",
                [(item.id, e.price, _ts(e.recorded_at)) for e in item.price_history],
            )

    def update_item(self, item_id: str, **changes) -> None:
        """Partial update of a tracked item's scalar columns."""
        unknown = set(changes) - set(ITEM_COLUMNS)
        if unknown:
            raise ValueError(f"unknown item fields: {sorted(unknown)}")
        if not changes:
            return
        assignments = ", ".join(f"{name} = ?" for name in changes)
        params = [_to_column(name, value) for name, value in changes.items()]
        with self.get_connection() as conn:
            cur = conn.execute(
                f"UPDATE tracked_items SET {assignments} WHERE id = ?", (*params, item_id)
            )
            if cur.rowcount == 0:
                raise StoreError(f"tracked item {item_id} not found")

    def record_observation(
        self,
        item_id: str,
        entry: PriceEntry,
        max_entries: int,
        current_price: float | None = None,
    ) -> None:
        """
        Append ``entry`` to the item's history, evict the oldest entries beyond
        ``max_entries`` and stamp ``last_checked_at``, all in one transaction.

        ``current_price`` is only written when given.
        """
        with self.get_connection() as conn:
            if current_price is None:
                cur = conn.execute(
                    "UPDATE tracked_items SET last_checked_at = ? WHERE id = ?",
                    (_ts(entry.recorded_at), item_id),
                )
            else:
                cur = conn.execute(
                    "UPDATE tracked_items SET last_checked_at = ?, current_price = ? WHERE id = ?",
                    (_ts(entry.recorded_at), current_price, item_id),
                )
            if cur.rowcount == 0:
                raise StoreError(f"tracked item {item_id} not found")
            conn.execute(
                "INSERT INTO price_history (item_id, price, recorded_at) VALUES (?, ?, ?)",
                (item_id, entry.price, _ts(entry.recorded_at)),
            )
            conn.execute(
                """
                DELETE FROM price_history
                WHERE item_id = ? AND id NOT IN (
                    SELECT id FROM price_history WHERE item_id = ?
                    ORDER BY id DESC LIMIT ?
                )
                """,
                (item_id, item_id, max_entries),
            )

    def remove_item(self, item_id: str) -> bool:
        with self.get_connection() as conn:
            cur = conn.execute("DELETE FROM tracked_items WHERE id = ?", (item_id,))
            conn.execute("DELETE FROM price_history WHERE item_id = ?", (item_id,))
            return cur.rowcount > 0

    # ── Rate-limit buckets ────────────────────────────────────────────────────

    @staticmethod
    def _bucket_from_row(row) -> RateLimitBucket:
        return RateLimitBucket(
            domain=row["domain"],
            failure_count=row["failure_count"],
            backoff_level=row["backoff_level"],
            next_retry_at=_parse_ts(row["next_retry_at"]),
            last_error=row["last_error"],
            last_outcome_id=row["last_outcome_id"],
        )

    def get_bucket(self, domain: str) -> RateLimitBucket | None:
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM rate_limit_buckets WHERE domain = ?", (domain,)
            ).fetchone()
        return self._bucket_from_row(row) if row else None

    def list_buckets(self) -> list[RateLimitBucket]:
        with self.get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM rate_limit_buckets ORDER BY domain"
            ).fetchall()
        return [self._bucket_from_row(row) for row in rows]

    def put_bucket(self, bucket: RateLimitBucket) -> None:
        """Replace-or-create the bucket for ``bucket.domain``."""
        with self.get_connection() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO rate_limit_buckets
                    (domain, failure_count, backoff_level, next_retry_at, last_error, last_outcome_id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    bucket.domain,
                    bucket.failure_count,
                    bucket.backoff_level,
                    _ts(bucket.next_retry_at),
                    bucket.last_error,
                    bucket.last_outcome_id,
                ),
            )

    def delete_bucket(self, domain: str) -> bool:
        with self.get_connection() as conn:
            cur = conn.execute("DELETE FROM rate_limit_buckets WHERE domain = ?", (domain,))
            return cur.rowcount > 0

    def clear_buckets(self) -> int:
        with self.get_connection() as conn:
            return conn.execute("DELETE FROM rate_limit_buckets").rowcount

    # ── Settings ──────────────────────────────────────────────────────────────

    def get_setting(self, key: str):
        """Return the JSON-decoded value for ``key`` or None."""
        with self.get_connection() as conn:
            row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
        if not row:
            return None
        try:
            return json.loads(row["value"])
        except json.JSONDecodeError as e:
            raise StoreError(f"setting {key!r} is not valid JSON: {e}") from e

    def set_setting(self, key: str, value) -> None:
        with self.get_connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                (key, json.dumps(value)),
            )

    def get_last_sweep_at(self) -> datetime | None:
        return _parse_ts(self.get_setting(LAST_SWEEP_KEY))

    def set_last_sweep_at(self, when: datetime) -> None:
        self.set_setting(LAST_SWEEP_KEY, when.isoformat())
