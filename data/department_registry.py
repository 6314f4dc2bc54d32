"""
Department Registry - Which chats belong to which department
============================================================
Department names come from configuration; chat ids are persisted in the
``departments`` table and cached in memory. Registration is append-only.
"""

import logging
import threading
from typing import Iterable, Optional

from sqlalchemy import select

from data.database import Database, DepartmentMemberRow

logger = logging.getLogger(__name__)


class DepartmentStore:
    """Rows of (chat_id, department)."""

    def __init__(self, database: Database):
        self.database = database

    def load(self) -> dict[str, list[int]]:
        """All persisted registrations grouped by department."""
        departments: dict[str, list[int]] = {}
        with self.database.session() as session:
            rows = session.execute(
                select(DepartmentMemberRow.department, DepartmentMemberRow.chat_id)
                .order_by(DepartmentMemberRow.id)
            )
            for department, chat_id in rows:
                departments.setdefault(department, []).append(chat_id)
        return departments

    def add(self, department: str, chat_id: int):
        with self.database.session() as session:
            session.add(DepartmentMemberRow(chat_id=chat_id, department=department))


class DepartmentRegistry:
    """Shared mapping of department name to registered chat ids."""

    def __init__(self, department_names: Iterable[str], store: Optional[DepartmentStore] = None):
        self._names = [name.strip() for name in department_names if name.strip()]
        self._store = store
        self._members: dict[str, list[int]] = {name: [] for name in self._names}
        self._lock = threading.Lock()

    @classmethod
    def load(cls, department_names: Iterable[str], store: DepartmentStore) -> "DepartmentRegistry":
        """Merge configured names with persisted registrations."""
        registry = cls(department_names, store)
        persisted = store.load()
        for name in registry._names:
            for chat_id in persisted.get(name, []):
                if chat_id not in registry._members[name]:
                    registry._members[name].append(chat_id)
        unknown = set(persisted) - set(registry._names)
        if unknown:
            logger.warning(f"Ignoring registrations for unconfigured departments: {', '.join(sorted(unknown))}")
        logger.info(f"Loaded {len(registry._names)} departments")
        return registry

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def resolve(self, name: str) -> Optional[str]:
        """Configured spelling of ``name`` (case-insensitive), or None."""
        wanted = (name or "").strip().lower()
        for configured in self._names:
            if configured.lower() == wanted:
                return configured
        return None

    def members(self, name: str) -> list[int]:
        department = self.resolve(name)
        if department is None:
            return []
        with self._lock:
            return list(self._members[department])

    def departments_of(self, chat_id: int) -> list[str]:
        with self._lock:
            return [name for name in self._names if chat_id in self._members[name]]

    def register(self, name: str, chat_id: int) -> bool:
        """Add a chat to a department.

        Returns False if the chat was already registered there. Raises
        KeyError for unknown departments.
        """
        department = self.resolve(name)
        if department is None:
            raise KeyError(name)
        with self._lock:
            if chat_id in self._members[department]:
                return False
            if self._store is not None:
                self._store.add(department, chat_id)
            self._members[department].append(chat_id)
        logger.info(f"Registered chat {chat_id} to {department}")
        return True

    def snapshot(self) -> dict[str, list[int]]:
        """Copy of the current mapping, safe to iterate while others register."""
        with self._lock:
            return {name: list(chat_ids) for name, chat_ids in self._members.items()}
