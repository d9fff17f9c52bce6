# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error body returned by every failing endpoint."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details for HTTP APIs (https://datatracker.ietf.org/doc/html/rfc7807)."""

    type: str = Field(
        default="about:blank",
        description="URI reference identifying the problem type.",
    )
    title: str = Field(description="Short summary, e.g. 'Service Unavailable'.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(
        default="",
        description="Explanation specific to this occurrence.",
    )
    request_id: str = Field(
        default="",
        description="Echoes x-request-id (or a generated UUID) for log correlation.",
    )
