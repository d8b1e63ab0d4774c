from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


class CowinBotError(RuntimeError):
    """Base class for failures that abort a run."""


class FetchError(CowinBotError):
    """The calendar API could not be reached."""


class RequestFailed(CowinBotError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Bad return code: {status_code}")
        self.status_code = status_code


class DecodeError(CowinBotError):
    """The calendar response is not JSON or not in the expected shape."""


class NotifyError(CowinBotError):
    """The webhook could not be reached or rejected the message."""


def _field(raw: Mapping[str, Any], key: str, kind: type) -> Any:
    try:
        value = raw[key]
    except (KeyError, TypeError) as e:
        raise DecodeError(f"Missing field: {key!r}") from e
    # bool is an int subclass; JSON true/false is never a capacity.
    if isinstance(value, bool) or not isinstance(value, kind):
        raise DecodeError(f"Field {key!r} has unexpected type {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Session:
    date: str  # DD-MM-YYYY, kept as sent by the API
    available_capacity: int
    min_age_limit: int
    vaccine: str
    available_capacity_dose1: int
    available_capacity_dose2: int

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> Session:
        return cls(
            date=_field(raw, "date", str),
            available_capacity=_field(raw, "available_capacity", int),
            min_age_limit=_field(raw, "min_age_limit", int),
            vaccine=_field(raw, "vaccine", str),
            available_capacity_dose1=_field(raw, "available_capacity_dose1", int),
            available_capacity_dose2=_field(raw, "available_capacity_dose2", int),
        )


@dataclass(frozen=True)
class Center:
    center_id: int
    name: str
    address: str
    pincode: int
    fee_type: str
    sessions: tuple[Session, ...]

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> Center:
        return cls(
            center_id=_field(raw, "center_id", int),
            name=_field(raw, "name", str),
            address=_field(raw, "address", str),
            pincode=_field(raw, "pincode", int),
            fee_type=_field(raw, "fee_type", str),
            sessions=tuple(Session.from_json(s) for s in _field(raw, "sessions", list)),
        )


@dataclass(frozen=True)
class DistrictCalendar:
    """Calendar of one district as returned by calendarByDistrict."""

    centers: tuple[Center, ...]

    @classmethod
    def from_json(cls, raw: Any) -> DistrictCalendar:
        if not isinstance(raw, dict):
            raise DecodeError(f"Expected a JSON object, got {type(raw).__name__}")
        return cls(centers=tuple(Center.from_json(c) for c in _field(raw, "centers", list)))


@dataclass(frozen=True)
class Slot:
    """A session that passed the filters, flattened with its center."""

    center: str
    address: str
    date: str
    vaccine: str
    available_capacity: int
    available_capacity_dose1: int
    available_capacity_dose2: int
    min_age_limit: int
