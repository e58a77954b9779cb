"""Unavailable Endpoints: fixed payload returned when a known-missing endpoint 404s."""

SMART_LINKS_UNAVAILABLE_MESSAGE = (
    "Smart link endpoints are not available in the CRM API yet."
)
SMART_LINKS_UNAVAILABLE_SUGGESTION = (
    "Create or manage smart links manually in the CRM web dashboard "
    "until the API exposes them."
)


def build_unavailable_payload() -> dict:
    """Fresh copy each call so callers can't mutate a shared dict."""
    return {
        "success": False,
        "message": SMART_LINKS_UNAVAILABLE_MESSAGE,
        "suggestion": SMART_LINKS_UNAVAILABLE_SUGGESTION,
    }
