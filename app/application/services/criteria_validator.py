"""Validates search criteria with composable field and cross-field rules.

Rules read explicit values from a criteria field map (as_field_map()); no
attribute lookup by name. Field rules run first. A cross-field rule is
skipped when one of its fields already failed a field rule, so a missing or
malformed value is never compared as if it were zero.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Protocol

from app.domain.enums import SearchMode
from app.domain.exceptions import SearchValidationException
from app.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from app.application.dtos.criteria import SearchCriteria

logger = logging.getLogger(__name__)

ROOM_TYPE_NAME_MAX_LENGTH = 50
AMENITY_NAME_MAX_LENGTH = 100
VIEW_TYPE_MAX_LENGTH = 50
MAX_RATING = 5


@dataclass(frozen=True)
class FieldViolation:
    """One failed rule: the field it concerns and a human-readable message."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one criteria object. Accepted when there are no violations."""

    violations: tuple[FieldViolation, ...] = ()

    @property
    def accepted(self) -> bool:
        return not self.violations


class ValidationRule(Protocol):
    """A single check over a criteria field map."""

    def fields(self) -> tuple[str, ...]:
        """Fields this rule reads."""

    def check(self, values: Mapping[str, Any]) -> FieldViolation | None:
        """Return a violation, or None when the rule passes."""


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_number(value: Any) -> bool:
    """Finite int, float or Decimal (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def _as_utc_datetime(value: date | datetime) -> datetime:
    """Dates count as midnight UTC; naive datetimes are taken as UTC."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    return datetime.combine(value, time.min, tzinfo=UTC)


# ---- Field rules ----


@dataclass(frozen=True)
class Required:
    """Fails when the value is None or a blank string."""

    field: str
    message: str = ""

    def fields(self) -> tuple[str, ...]:
        return (self.field,)

    def check(self, values: Mapping[str, Any]) -> FieldViolation | None:
        if _is_absent(values.get(self.field)):
            return FieldViolation(self.field, self.message or f"{self.field} is required.")
        return None


@dataclass(frozen=True)
class StringLength:
    """Fails when a present string is longer than max_length."""

    field: str
    max_length: int
    message: str = ""

    def fields(self) -> tuple[str, ...]:
        return (self.field,)

    def check(self, values: Mapping[str, Any]) -> FieldViolation | None:
        value = values.get(self.field)
        if value is None:
            return None
        if not isinstance(value, str):
            return FieldViolation(self.field, f"{self.field} must be a string.")
        if len(value) > self.max_length:
            return FieldViolation(
                self.field,
                self.message
                or f"{self.field} length cannot exceed {self.max_length} characters.",
            )
        return None


@dataclass(frozen=True)
class Range:
    """Numeric bounds on a present value. minimum is inclusive unless exclusive_minimum."""

    field: str
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool = False
    message: str = ""

    def fields(self) -> tuple[str, ...]:
        return (self.field,)

    def check(self, values: Mapping[str, Any]) -> FieldViolation | None:
        value = values.get(self.field)
        if value is None:
            return None
        if not _is_number(value):
            return FieldViolation(self.field, f"{self.field} must be a number.")
        too_low = self.minimum is not None and (
            value <= self.minimum if self.exclusive_minimum else value < self.minimum
        )
        too_high = self.maximum is not None and value > self.maximum
        if too_low or too_high:
            return FieldViolation(
                self.field, self.message or f"{self.field} is out of range."
            )
        return None


@dataclass(frozen=True)
class FutureDate:
    """Fails unless the date is strictly later than clock() at evaluation time."""

    field: str
    message: str = ""
    clock: Callable[[], datetime] = utc_now

    def fields(self) -> tuple[str, ...]:
        return (self.field,)

    def check(self, values: Mapping[str, Any]) -> FieldViolation | None:
        value = values.get(self.field)
        if value is None:
            return None
        if not isinstance(value, date):
            return FieldViolation(self.field, f"{self.field} must be a date.")
        if _as_utc_datetime(value) <= self.clock():
            return FieldViolation(
                self.field, self.message or f"{self.field} must be in the future."
            )
        return None


# ---- Cross-field rules ----


@dataclass(frozen=True)
class DateGreaterThan:
    """Fails when field <= comparison_field. Not evaluated unless both are present."""

    field: str
    comparison_field: str
    message: str = "The date must be greater than the comparison date."

    def fields(self) -> tuple[str, ...]:
        return (self.field, self.comparison_field)

    def check(self, values: Mapping[str, Any]) -> FieldViolation | None:
        current = values.get(self.field)
        comparison = values.get(self.comparison_field)
        if current is None or comparison is None:
            return None
        if _as_utc_datetime(current) <= _as_utc_datetime(comparison):
            return FieldViolation(self.field, self.message)
        return None


@dataclass(frozen=True)
class PriceRange:
    """Fails when both bounds are present and max < min. Absent bounds are open-ended."""

    min_field: str
    max_field: str
    message: str = "Maximum price must be greater than or equal to minimum price."

    def fields(self) -> tuple[str, ...]:
        return (self.min_field, self.max_field)

    def check(self, values: Mapping[str, Any]) -> FieldViolation | None:
        minimum = values.get(self.min_field)
        maximum = values.get(self.max_field)
        if minimum is None or maximum is None:
            return None
        if maximum < minimum:
            return FieldViolation(self.max_field, self.message)
        return None


@dataclass(frozen=True)
class RuleSet:
    """Field rules and cross-field rules for one search mode."""

    field_rules: tuple[ValidationRule, ...] = ()
    cross_field_rules: tuple[ValidationRule, ...] = ()


def _room_id_rules(field: str, label: str) -> RuleSet:
    return RuleSet(
        field_rules=(
            Required(field, f"{label} is required."),
            Range(field, minimum=0, exclusive_minimum=True, message=f"Invalid {label}."),
        )
    )


def default_rule_sets(clock: Callable[[], datetime] = utc_now) -> dict[SearchMode, RuleSet]:
    """Build the rule set of every search mode. clock feeds the future-date rules."""
    min_price_non_negative = Range(
        "min_price",
        minimum=0,
        message="Minimum price must be greater than or equal to 0.",
    )
    max_price_non_negative = Range(
        "max_price",
        minimum=0,
        message="Maximum price must be greater than or equal to 0.",
    )
    price_order = PriceRange("min_price", "max_price")
    return {
        SearchMode.AVAILABILITY: RuleSet(
            field_rules=(
                Required("check_in_date", "Check-in date is required."),
                Required("check_out_date", "Check-out date is required."),
                FutureDate("check_in_date", "Check-in date must be in the future.", clock),
                FutureDate("check_out_date", "Check-out date must be in the future.", clock),
            ),
            cross_field_rules=(
                DateGreaterThan(
                    "check_out_date",
                    "check_in_date",
                    "Check-out date must be after check-in date.",
                ),
            ),
        ),
        SearchMode.PRICE_RANGE: RuleSet(
            field_rules=(
                Required("min_price", "Minimum price is required."),
                Required("max_price", "Maximum price is required."),
                min_price_non_negative,
                max_price_non_negative,
            ),
            cross_field_rules=(price_order,),
        ),
        SearchMode.ROOM_TYPE: RuleSet(
            field_rules=(
                Required("room_type_name", "Room Type Name is Empty"),
                StringLength(
                    "room_type_name",
                    ROOM_TYPE_NAME_MAX_LENGTH,
                    "Room type name length cannot exceed 50 characters.",
                ),
            )
        ),
        SearchMode.VIEW_TYPE: RuleSet(
            field_rules=(
                Required("view_type", "View Type is Empty"),
                StringLength(
                    "view_type",
                    VIEW_TYPE_MAX_LENGTH,
                    "View type name length cannot exceed 50 characters.",
                ),
            )
        ),
        SearchMode.AMENITY: RuleSet(
            field_rules=(
                Required("amenity_name", "Amenity Name is Empty"),
                StringLength(
                    "amenity_name",
                    AMENITY_NAME_MAX_LENGTH,
                    "Amenity name length cannot exceed 100 characters.",
                ),
            )
        ),
        SearchMode.ROOM_TYPE_ID: _room_id_rules("room_type_id", "Room Type ID"),
        SearchMode.ROOM_DETAILS: _room_id_rules("room_id", "Room ID"),
        SearchMode.ROOM_AMENITIES: _room_id_rules("room_id", "Room ID"),
        SearchMode.MIN_RATING: RuleSet(
            field_rules=(
                Required("min_rating", "Minimum rating is required."),
                Range(
                    "min_rating",
                    minimum=0,
                    maximum=MAX_RATING,
                    exclusive_minimum=True,
                    message="Minimum rating must be greater than 0 and at most 5.",
                ),
            )
        ),
        SearchMode.CUSTOM: RuleSet(
            field_rules=(
                min_price_non_negative,
                max_price_non_negative,
                StringLength(
                    "room_type_name",
                    ROOM_TYPE_NAME_MAX_LENGTH,
                    "Room type name length cannot exceed 50 characters.",
                ),
                StringLength(
                    "amenity_name",
                    AMENITY_NAME_MAX_LENGTH,
                    "Amenity name length cannot exceed 100 characters.",
                ),
                StringLength(
                    "view_type",
                    VIEW_TYPE_MAX_LENGTH,
                    "View type name length cannot exceed 50 characters.",
                ),
            ),
            cross_field_rules=(price_order,),
        ),
    }


class CriteriaValidator:
    """Validates criteria of any search mode against that mode's rule set."""

    def __init__(
        self,
        rule_sets: dict[SearchMode, RuleSet] | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._rule_sets = rule_sets if rule_sets is not None else default_rule_sets(clock)

    def validate(self, criteria: "SearchCriteria") -> ValidationOutcome:
        """Run field rules, then cross-field rules over untouched fields. Pure."""
        rule_set = self._rule_sets.get(criteria.mode, RuleSet())
        values = criteria.as_field_map()
        violations: list[FieldViolation] = []
        for rule in rule_set.field_rules:
            violation = rule.check(values)
            if violation is not None:
                violations.append(violation)
        failed = {v.field for v in violations}
        for rule in rule_set.cross_field_rules:
            if failed.intersection(rule.fields()):
                continue
            violation = rule.check(values)
            if violation is not None:
                violations.append(violation)
        return ValidationOutcome(tuple(violations))

    def ensure_valid(self, criteria: "SearchCriteria") -> None:
        """Raise SearchValidationException with every violation when criteria are rejected."""
        outcome = self.validate(criteria)
        if outcome.accepted:
            return
        logger.info(
            "Rejected %s search: %d violation(s)",
            criteria.mode.value,
            len(outcome.violations),
        )
        raise SearchValidationException([v.to_dict() for v in outcome.violations])
