"""
Common schema types shared by every API call.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiErrorBody(BaseModel):
    """Error detail carried by a failed envelope."""

    model_config = ConfigDict(extra="allow")

    message: str = "Unknown error"
    details: Optional[Dict[str, Any]] = None

    def field_errors(self, field: str) -> List[str]:
        """Return validation messages for one field (details.fields.<field>)."""
        fields = (self.details or {}).get("fields") or {}
        messages = fields.get(field) or []
        if isinstance(messages, str):
            return [messages]
        return [str(m) for m in messages]


class ApiEnvelope(BaseModel):
    """Standard response wrapper: { success, data?, error? }."""

    model_config = ConfigDict(extra="allow")

    success: bool
    data: Optional[Any] = None
    error: Optional[ApiErrorBody] = None

    @property
    def error_message(self) -> Optional[str]:
        if self.success:
            return None
        return self.error.message if self.error else "Request failed without error detail"


class CreatedResource(BaseModel):
    """Minimal shape of a creation response's data block."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1)
