"""Error Hierarchy: typed, categorized exceptions for every bridge failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only ConfigurationError is fatal; everything else ends up in a failure envelope
    - CrmAPIError messages always start with CRM_ERROR_TAG, whatever the HTTP verb or entity

Design Decisions:
    - Single hierarchy with BridgeError base: the dispatcher catches one type (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from crm_bridge.core.envelope import ToolResponse

CRM_ERROR_TAG = "CRM API Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None


class BridgeError(Exception):
    """Base exception for all bridge errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_envelope(self) -> ToolResponse:
        """Convert to the failure envelope returned to the host."""
        return ToolResponse.failure(self.message)

    def to_log_extra(self) -> dict:
        """Fields surfaced by JSONFormatter."""
        return {
            "error_code": self.code,
            "tool_name": self.context.tool_name,
        }


# ─── Startup Errors ─────────────────────────────────────────────

class ConfigurationError(BridgeError):
    """Required credential or URL missing/invalid at startup."""
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL,
        )
        self.fields = fields or []


# ─── Per-call Errors ────────────────────────────────────────────

class ToolNotFoundError(BridgeError):
    """Requested tool is not in the registry."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Tool '{tool_name}' not found",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )
        self.tool_name = tool_name


class ToolValidationError(BridgeError):
    """Tool arguments are missing or of the wrong primitive type."""
    def __init__(
        self, message: str, fields: list[str], context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.fields = fields


class CrmAPIError(BridgeError):
    """Normalized failure of a CRM HTTP call (non-2xx, timeout, connection)."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.TIMEOUT if api_error_type == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"{CRM_ERROR_TAG}: {message}",
            "CRM_API_ERROR", category, ErrorSeverity.ERROR, context,
        )
        self.detail = message
        self.api_error_type = api_error_type
        self.status_code = status_code
