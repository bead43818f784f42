"""Statement counter for an async engine.

Counts the SQL statements an engine sends to the database while the
context is active. Used to observe what each order loading strategy
costs (N+1 vs fetch join vs IN batches).

Usage:
    async with db.get_session() as session:
        with QueryCounter(db.engine) as counter:
            orders = await OrderRepository(session).find_all_with_item()
        assert counter.count == 1
"""

from types import TracebackType
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine


class QueryCounter:
    """Context manager recording statements issued through an engine.

    Attributes:
        count: Number of statements executed inside the context.
        statements: SQL text of each statement, in execution order.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._sync_engine = engine.sync_engine
        self.statements: list[str] = []

    @property
    def count(self) -> int:
        return len(self.statements)

    def _before_cursor_execute(
        self,
        conn: Any,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        self.statements.append(statement)

    def __enter__(self) -> "QueryCounter":
        self.statements.clear()
        event.listen(self._sync_engine, "before_cursor_execute", self._before_cursor_execute)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        event.remove(self._sync_engine, "before_cursor_execute", self._before_cursor_execute)
