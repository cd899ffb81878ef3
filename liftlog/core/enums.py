"""Shared enums for models and API."""

from enum import Enum


class WeightUnit(str, Enum):
    """Unit a weight was logged in."""

    LBS = "lbs"
    KG = "kg"


class WeightTrackingFrequency(str, Enum):
    """How often the user wants to be prompted for body weight."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    MANUAL = "manual"


class BodyWeightSource(str, Enum):
    """Where a body-weight entry came from."""

    MANUAL = "manual"
    PROMPTED = "prompted"  # Answered a reminder
    WORKOUT = "workout"  # Entered while logging a bodyweight set


class SubscriptionOutcome(str, Enum):
    """Result of reconciling a push subscription request."""

    CREATED = "created"
    REFRESHED = "refreshed"  # Same user resubmitted the endpoint
    REASSIGNED = "reassigned"  # Matching keys proved device continuity
    IGNORED = "ignored"  # Endpoint owned by someone else with other keys
