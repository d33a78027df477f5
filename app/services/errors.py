"""
Error kinds returned by the course and student services.

NotFound, DuplicateEmail, DuplicateTitle and UnknownReferences are
client-input errors; CollaboratorUnavailable means the course service
could not be consulted; Unexpected covers store failures.
"""
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Union


@dataclass(frozen=True)
class NotFound:
    entity: str
    id: Any
    status_code: ClassVar[int] = 404

    @property
    def message(self) -> str:
        return f"{self.entity} not found with id: {self.id}"

    @property
    def detail(self) -> Optional[Dict[str, Any]]:
        return {"id": self.id}


@dataclass(frozen=True)
class DuplicateEmail:
    email: str
    status_code: ClassVar[int] = 400

    @property
    def message(self) -> str:
        return f"Student with email {self.email} already exists."

    @property
    def detail(self) -> Optional[Dict[str, Any]]:
        return {"field": "email", "email": self.email}


@dataclass(frozen=True)
class DuplicateTitle:
    title: str
    status_code: ClassVar[int] = 400

    @property
    def message(self) -> str:
        return f"Course with title {self.title} already exists."

    @property
    def detail(self) -> Optional[Dict[str, Any]]:
        return {"field": "title", "title": self.title}


@dataclass(frozen=True)
class UnknownReferences:
    ids: FrozenSet[int]
    status_code: ClassVar[int] = 400

    @property
    def message(self) -> str:
        return f"One or more courses with IDs {sorted(self.ids)} do not exist."

    @property
    def detail(self) -> Optional[Dict[str, Any]]:
        return {"courseIds": sorted(self.ids)}


@dataclass(frozen=True)
class CollaboratorUnavailable:
    service: str
    reason: str
    status_code: ClassVar[int] = 502

    @property
    def message(self) -> str:
        return f"Could not verify courses with {self.service}: {self.reason}"

    @property
    def detail(self) -> Optional[Dict[str, Any]]:
        return {"service": self.service}


@dataclass(frozen=True)
class Unexpected:
    reason: str
    status_code: ClassVar[int] = 500

    @property
    def message(self) -> str:
        return f"Unexpected error: {self.reason}"

    @property
    def detail(self) -> Optional[Dict[str, Any]]:
        return None


ServiceError = Union[NotFound, DuplicateEmail, DuplicateTitle, UnknownReferences, CollaboratorUnavailable, Unexpected]
