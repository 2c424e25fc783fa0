"""Worker process for evaluating arithmetic expressions."""
from multiprocessing.connection import Connection
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from infix_interpreter.common.interpreter import interpret
from infix_interpreter.common.logger import logger
from infix_interpreter.common.operations import OperationRequest, OperationResult


class WorkerProcess(BaseModel):
    """
    Worker process responsible for evaluating a single arithmetic expression.

    Lifecycle:
        - Spawned by the batch evaluator
        - Receives one expression only
        - Sends an OperationResult through a Pipe
        - Terminates immediately after computation
    """

    # Allow arbitrary types like multiprocessing.Connection
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    conn: Connection = Field(..., description="Connection object for sending results back to the batch evaluator")
    request: OperationRequest = Field(..., description="Expression to evaluate and its line number")

    def compute(self) -> OperationResult:
        """
        Evaluate the expression and wrap the outcome.

        :return: Result carrying either the value or the error message
        :rtype: OperationResult
        """
        line = self.request.line
        expression = self.request.expression
        try:
            return OperationResult(line=line, expression=expression, result=interpret(expression))
        except ValueError as exc:
            # InterpreterError and malformed numeric literals
            logger.error(
                f"👷❌ Worker failed on line {line}: {exc}\n"
                f"Invalid arithmetic expression, could not evaluate: {expression!r}"
            )
            return OperationResult(line=line, expression=expression, error=str(exc))

    def run(self) -> None:
        """
        Evaluate the arithmetic expression and send the result through the pipe.

        :return: None
        """
        logger.info(f"👷🏁 Worker started on line {self.request.line}: {self.request.expression}")

        outcome: Union[OperationResult, None] = None
        try:
            outcome = self.compute()
            self.conn.send(outcome)
        finally:
            # Always close the connection
            self.conn.close()

        if outcome.ok:
            logger.info(f"👷✅ Worker finished on line {self.request.line}: {outcome.result}")
