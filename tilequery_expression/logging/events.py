"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<action>   e.g. expression.parsed, within.unsupported_geometry
    error.<category>       e.g. error.config
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - expression.*: Expression parse/serialize lifecycle
    - within.*: Within evaluation
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Expression Events ==========
    EXPRESSION_PARSED = "expression.parsed"
    """Expression parsed into a node."""

    EXPRESSION_PARSE_FAILED = "expression.parse_failed"
    """Expression rejected at parse time."""

    EXPRESSION_SERIALIZED = "expression.serialized"
    """Expression node serialized back to its array form."""

    # ========== Within Events ==========
    WITHIN_UNSUPPORTED_GEOMETRY = "within.unsupported_geometry"
    """Candidate feature type is not supported by within."""

    WITHIN_EVALUATED = "within.evaluated"
    """Features evaluated against a within expression."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded and validated."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration failed validation."""


EXPRESSION_EVENTS = {
    LogEvent.EXPRESSION_PARSED,
    LogEvent.EXPRESSION_PARSE_FAILED,
    LogEvent.EXPRESSION_SERIALIZED,
}

WITHIN_EVENTS = {
    LogEvent.WITHIN_UNSUPPORTED_GEOMETRY,
    LogEvent.WITHIN_EVALUATED,
}

ERROR_EVENTS = {
    LogEvent.CONFIG_ERROR,
}
