"""
dynamic-form error types.

Only configuration loading and session edits raise; evaluation never does.
"""

from typing import Any, Optional


class DynamicFormError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigLoadError(DynamicFormError):
    def __init__(self, message: str, code: str = "config_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class UnknownFieldError(DynamicFormError):
    def __init__(self, name: str):
        super().__init__("unknown_field", f"No field named {name!r} in this form", {"name": name})
        self.name = name
