"""Workflow enums: variants and the collection state machine."""

from __future__ import annotations

from enum import StrEnum


class Variant(StrEnum):
    """Flavours of the welcome workflow, from simplest to strictest."""

    BASIC = "basic"
    VALIDATED = "validated"
    ADVANCED = "advanced"


class WorkflowState(StrEnum):
    """Collection states. Transitions only move forward."""

    AWAITING_NAME = "awaiting_name"
    AWAITING_AGE = "awaiting_age"
    DONE = "done"
    FAILED = "failed"
