import asyncio
import sqlite3
from typing import Any
from uuid import uuid4

from linkboard.domain.entities import Link

SCHEMA = """
CREATE TABLE IF NOT EXISTS link_items (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    url TEXT NOT NULL,
    order_index INTEGER NOT NULL,
    page_id TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_link_items_page ON link_items (page_id, order_index);
"""


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteLinkStore:
    """
    Remote link store persisted in SQLite.

    Blocking sqlite3 calls run in a worker thread so the event loop keeps
    serving other tasks while a query is in flight.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        conn = self._get_conn()
        try:
            conn.executescript(SCHEMA)
        finally:
            conn.close()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    # --- Blocking implementations ---

    def _fetch(self, page_id: str) -> list[Link]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM link_items WHERE page_id = ? ORDER BY order_index ASC",
                (page_id,),
            ).fetchall()
            return [Link(**row) for row in rows]
        finally:
            conn.close()

    def _create(self, name: str, url: str, order_index: int, page_id: str) -> bool:
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO link_items (id, name, url, order_index, page_id) "
                "VALUES (?, ?, ?, ?, ?)",
                (str(uuid4()), name, url, order_index, page_id),
            )
            conn.commit()
            return True
        finally:
            conn.close()

    def _execute_one(self, sql: str, params: tuple[Any, ...]) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor.rowcount == 1
        finally:
            conn.close()

    def _swap(self, id_a: str, order_a: int, id_b: str, order_b: int) -> bool:
        conn = self._get_conn()
        try:
            with conn:
                first = conn.execute(
                    "UPDATE link_items SET order_index = ? WHERE id = ?", (order_b, id_a)
                )
                second = conn.execute(
                    "UPDATE link_items SET order_index = ? WHERE id = ?", (order_a, id_b)
                )
                if first.rowcount != 1 or second.rowcount != 1:
                    # Leaving the with-block by exception rolls both updates back
                    raise LookupError("swap target missing")
            return True
        except LookupError:
            return False
        finally:
            conn.close()

    def _move_to_page(self, link_id: str, page_id: str) -> bool:
        conn = self._get_conn()
        try:
            with conn:
                row = conn.execute(
                    "SELECT COALESCE(MAX(order_index) + 1, 0) AS next_index "
                    "FROM link_items WHERE page_id = ?",
                    (page_id,),
                ).fetchone()
                cursor = conn.execute(
                    "UPDATE link_items SET page_id = ?, order_index = ? WHERE id = ?",
                    (page_id, row["next_index"], link_id),
                )
            return cursor.rowcount == 1
        finally:
            conn.close()

    # --- RemoteLinkStorePort ---

    async def fetch_links_for_page(self, page_id: str) -> list[Link]:
        return await asyncio.to_thread(self._fetch, page_id)

    async def create_link(self, name: str, url: str, order_index: int, page_id: str) -> bool:
        return await asyncio.to_thread(self._create, name, url, order_index, page_id)

    async def delete_link(self, link_id: str) -> bool:
        return await asyncio.to_thread(
            self._execute_one, "DELETE FROM link_items WHERE id = ?", (link_id,)
        )

    async def update_link(self, link_id: str, name: str, url: str) -> bool:
        return await asyncio.to_thread(
            self._execute_one,
            "UPDATE link_items SET name = ?, url = ? WHERE id = ?",
            (name, url, link_id),
        )

    async def swap_order(self, id_a: str, order_a: int, id_b: str, order_b: int) -> bool:
        return await asyncio.to_thread(self._swap, id_a, order_a, id_b, order_b)

    async def move_link_to_page(self, link_id: str, page_id: str) -> bool:
        return await asyncio.to_thread(self._move_to_page, link_id, page_id)
