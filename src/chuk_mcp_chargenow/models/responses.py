"""
Response models for chuk-mcp-chargenow tools.

All tool responses are Pydantic models for type safety and consistent API.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")
    is_error: bool = Field(default=True, description="Always true for error results")

    def to_text(self) -> str:
        return f"Error: {self.error}"


class ReportResponse(BaseModel):
    """Successful charge point lookup."""

    model_config = ConfigDict(extra="forbid")

    address: str = Field(..., description="Address the search was run for")
    report: str = Field(..., description="Human-readable report or informational message")
    is_error: bool = Field(default=False, description="Always false for successful results")

    def to_text(self) -> str:
        return self.report
