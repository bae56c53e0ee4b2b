"""Character records and the snapshot state shared by store and adapters."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

EDITABLE_FIELDS = ("name", "level", "organization", "profession")


@dataclass
class Character:
    id: int
    name: Any
    level: Any
    organization: Any
    profession: Any

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Character":
        return cls(
            id=_as_id(data["id"]),
            name=data["name"],
            level=data["level"],
            organization=data["organization"],
            profession=data["profession"],
        )


@dataclass
class StoreState:
    """Pending/approved collections plus the id counter."""

    pending: list[Character] = field(default_factory=list)
    approved: list[Character] = field(default_factory=list)
    next_id: int = 1

    def to_snapshot(self) -> dict:
        return {
            "pending": [c.to_dict() for c in self.pending],
            "approved": [c.to_dict() for c in self.approved],
            "nextId": self.next_id,
        }

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any]) -> "StoreState":
        """
        Build a state from a snapshot mapping. Raises ValueError/KeyError/TypeError
        when the layout is malformed.
        """
        if not isinstance(data, Mapping):
            raise TypeError("snapshot must be an object")
        pending = [Character.from_dict(item) for item in data.get("pending") or []]
        approved = [Character.from_dict(item) for item in data.get("approved") or []]
        ids = [c.id for c in pending + approved]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate character ids in snapshot")
        next_id = _as_id(data.get("nextId") or 1)
        # counter must stay ahead of every issued id
        if ids:
            next_id = max(next_id, max(ids) + 1)
        return cls(pending=pending, approved=approved, next_id=max(next_id, 1))


def find_index(records: list[Character], char_id: Any) -> int:
    """Return the position of the first record with exactly this id, or -1."""
    for idx, record in enumerate(records):
        if _same_id(record.id, char_id):
            return idx
    return -1


def _is_whole_number(value: Any) -> bool:
    # bool is an int subclass but never an id
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _as_id(value: Any) -> int:
    if not _is_whole_number(value):
        raise ValueError(f"invalid character id: {value!r}")
    return int(value)


def _same_id(stored: int, candidate: Any) -> bool:
    # strict equality: "1" and True never match 1, 1.0 does
    return _is_whole_number(candidate) and candidate == stored
