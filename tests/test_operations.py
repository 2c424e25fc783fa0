"""Test classes OperationRequest and OperationResult."""
import math

from pydantic import ValidationError
import pytest

from infix_interpreter.common.operations import OperationRequest, OperationResult


def test_operation_request_valid() -> None:
    """Test that a valid OperationRequest can be created."""
    req = OperationRequest(line=1, expression="2 + 2 * 3")
    assert req.expression == "2 + 2 * 3"
    assert req.line == 1

def test_operation_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        # int instead of str
        OperationRequest(line=1, expression=123)

def test_operation_request_invalid_line() -> None:
    """Line numbers start at 1."""
    with pytest.raises(ValidationError):
        OperationRequest(line=0, expression="1")

def test_operation_result_valid() -> None:
    """Test that a valid OperationResult can be created."""
    res = OperationResult(line=1, expression="2 + 2 * 3", result=8.0)
    assert res.ok
    assert res.result == 8.0
    assert res.format_line() == "2 + 2 * 3 = 8.0"

def test_operation_result_error() -> None:
    """A result with an error formats as an error line."""
    res = OperationResult(line=2, expression="(1", error="closing parenthesis not found")
    assert not res.ok
    assert res.result is None
    assert res.format_line() == "(1 -> ERROR: closing parenthesis not found"

def test_operation_result_accepts_inf() -> None:
    """Division by zero results are valid results."""
    res = OperationResult(line=1, expression="1/0", result=math.inf)
    assert res.format_line() == "1/0 = inf"

def test_operation_result_invalid_result_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        OperationResult(line=1, expression="2 + 2", result="not a float")
