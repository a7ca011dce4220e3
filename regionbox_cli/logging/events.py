"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <category>.<action>

    category: region, query, batch, input, config, locale
    action: created, rejected, evaluated, parse_failed, ...
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - region.*: Region construction and bound updates
    - query.* / batch.*: Containment checks
    - input.*: Console input handling
    - config.* / locale.*: Startup configuration
    """

    # ========== Region Events ==========
    REGION_CREATED = "region.created"
    """Region built from validated bounds."""

    REGION_BOUNDS_REJECTED = "region.bounds_rejected"
    """Bound set rejected (non-finite value)."""

    # ========== Query Events ==========
    QUERY_EVALUATED = "query.evaluated"
    """Single point checked against a region."""

    BATCH_EVALUATED = "batch.evaluated"
    """Batch of points checked against a region."""

    # ========== Input Events ==========
    INPUT_PARSE_FAILED = "input.parse_failed"
    """Token could not be parsed as a number."""

    INPUT_EMPTY = "input.empty"
    """Blank input line."""

    INPUT_EXHAUSTED = "input.exhausted"
    """Input stream ended before enough numbers were read."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded."""

    CONFIG_ERROR = "config.error"
    """Configuration missing or invalid."""

    LOCALE_UNAVAILABLE = "locale.unavailable"
    """Requested numeric locale is not installed."""
