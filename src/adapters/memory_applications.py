"""
In-memory application store.

Satisfies ApplicationQueryPort for tests, demos and callers that already hold
the application history in memory.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from datetime import date
from uuid import UUID

from src.domain.entities import Application, Person


class InMemoryApplicationRepo:
    """Application store kept in a dict, safe for concurrent readers and writers."""

    def __init__(self, applications: Iterable[Application] = ()) -> None:
        self._lock = threading.Lock()
        self._applications: dict[UUID, Application] = {}
        for application in applications:
            self.save(application)

    def save(self, application: Application) -> Application:
        with self._lock:
            self._applications[application.id] = application
        return application

    def delete(self, application_id: UUID) -> None:
        with self._lock:
            self._applications.pop(application_id, None)

    def get_all(self) -> list[Application]:
        with self._lock:
            return list(self._applications.values())

    def find_for_person_in_period(
        self,
        person: Person,
        start_date: date,
        end_date: date,
    ) -> list[Application]:
        """Applications of the person overlapping the closed interval, by start date."""
        with self._lock:
            matches = [
                application
                for application in self._applications.values()
                if application.person.id == person.id
                and application.start_date <= end_date
                and application.end_date >= start_date
            ]
        return sorted(matches, key=lambda a: a.start_date)
