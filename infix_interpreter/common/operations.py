"""Pydantic models for expression evaluation requests and results."""
from typing import Optional

from pydantic import BaseModel, Field


class OperationRequest(BaseModel):
    """Represents a single expression to evaluate."""

    line: int = Field(..., ge=1, description="Line number in the input file")
    expression: str = Field(..., description="Arithmetic expression as a string")


class OperationResult(BaseModel):
    """Represents the outcome of an evaluated expression."""

    line: int = Field(..., ge=1, description="Line number in the input file")
    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result of the expression")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")

    @property
    def ok(self) -> bool:
        return self.error is None

    def format_line(self) -> str:
        """
        Format the result as one line of the output file.

        :return: "<expression> = <result>" or "<expression> -> ERROR: <error>"
        :rtype: str
        """
        if self.ok:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
