"""
storefront/schemas/common.py
Shared response pieces.

Every successful mutation returns a `notice` the client can show as a
toast. Severity mirrors the three toast variants the storefront uses.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict

Severity = Literal["info", "success", "error"]


class StrictModel(BaseModel):
    """Request/record base: unknown fields are a validation error."""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class Notice(BaseModel):
    title: str
    message: str
    severity: Severity = "success"


class StandardResponse(BaseModel):
    success: bool = True
    notice: Notice
