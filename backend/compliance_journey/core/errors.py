"""Error Hierarchy — typed, categorized exceptions for journey engine failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Configuration errors are load-time only and fatal — the engine never runs on a bad catalog
    - Not-found is NOT an error inside core/ (None / empty results); the HTTP shell
      raises ResourceNotFoundError only for direct lookups
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with JourneyError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_id: str | None = None
    phase_id: str | None = None
    persona_id: str | None = None
    debug_info: dict[str, Any] | None = None


class JourneyError(Exception):
    """Base exception for all journey engine errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "tool_id": self.context.tool_id,
                    "phase_id": self.context.phase_id,
                    "persona_id": self.context.persona_id,
                },
            }
        }


# ─── Lookup Errors (400-level, HTTP shell only) ─────────────────

class ResourceNotFoundError(JourneyError):
    """Requested catalog resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Configuration Errors (load-time, fatal) ────────────────────

class CatalogValidationError(JourneyError):
    """Base for catalog configuration errors raised while building the catalog."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class CatalogFormatError(CatalogValidationError):
    """Catalog source unreadable or not matching the expected shape."""
    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Catalog '{source}' is malformed: {reason}",
            "CATALOG_FORMAT_INVALID",
            ErrorContext(debug_info={"source": source}),
        )
        self.source = source


class DuplicatePhaseIdError(CatalogValidationError):
    def __init__(self, phase_id: str):
        super().__init__(
            f"Phase id '{phase_id}' declared more than once",
            "DUPLICATE_PHASE_ID", ErrorContext(phase_id=phase_id),
        )


class DuplicatePhaseOrderError(CatalogValidationError):
    """Two phases share the same order — phase sequencing must be a total order."""
    def __init__(self, order: int, phase_ids: list[str]):
        super().__init__(
            f"Phases {', '.join(phase_ids)} share order {order}",
            "DUPLICATE_PHASE_ORDER",
            ErrorContext(debug_info={"order": order, "phase_ids": phase_ids}),
        )
        self.order = order
        self.phase_ids = phase_ids


class DuplicateToolIdError(CatalogValidationError):
    def __init__(self, tool_id: str):
        super().__init__(
            f"Tool id '{tool_id}' declared more than once",
            "DUPLICATE_TOOL_ID", ErrorContext(tool_id=tool_id),
        )


class UnknownPhaseError(CatalogValidationError):
    """Tool assigned to a phase missing from the phase registry."""
    def __init__(self, tool_id: str, phase_id: str):
        super().__init__(
            f"Tool '{tool_id}' references unknown phase '{phase_id}'",
            "UNKNOWN_PHASE", ErrorContext(tool_id=tool_id, phase_id=phase_id),
        )


class UnknownPrerequisiteError(CatalogValidationError):
    """Prerequisite references a tool id absent from the catalog."""
    def __init__(self, tool_id: str, missing: list[str]):
        super().__init__(
            f"Tool '{tool_id}' has unknown prerequisite(s): {', '.join(missing)}",
            "UNKNOWN_PREREQUISITE",
            ErrorContext(tool_id=tool_id, debug_info={"missing": missing}),
        )
        self.tool_id = tool_id
        self.missing = missing


class PrerequisiteCycleError(CatalogValidationError):
    """Prerequisite graph is not a DAG. `cycle` lists the path, first id repeated last."""
    def __init__(self, cycle: list[str]):
        super().__init__(
            f"Prerequisite cycle detected: {' -> '.join(cycle)}",
            "PREREQUISITE_CYCLE",
            ErrorContext(tool_id=cycle[0], debug_info={"cycle": cycle}),
        )
        self.cycle = cycle


class UnknownJourneyToolError(CatalogValidationError):
    """Persona journey references a tool id absent from the catalog."""
    def __init__(self, persona_id: str, missing: list[str]):
        super().__init__(
            f"Persona journey '{persona_id}' references unknown tool(s): {', '.join(missing)}",
            "UNKNOWN_JOURNEY_TOOL",
            ErrorContext(persona_id=persona_id, debug_info={"missing": missing}),
        )
        self.persona_id = persona_id
        self.missing = missing
