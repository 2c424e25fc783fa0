"""Evaluate batches of expressions using worker processes."""
from multiprocessing import Pipe, Process, cpu_count
from multiprocessing.connection import Connection
from pathlib import Path
from typing import Dict, List, Optional, TextIO, Tuple

from pydantic import BaseModel, ConfigDict, Field

from infix_interpreter.batch.worker import WorkerProcess
from infix_interpreter.common.logger import logger
from infix_interpreter.common.operations import OperationRequest, OperationResult


class BatchEvaluator(BaseModel):
    """
    Evaluate expressions in parallel and write one result line per expression.

    Features:
        - Spawns one worker process per expression.
        - Ensures each worker is destroyed immediately after finishing.
        - Handles multiple simultaneous workers up to max_workers (CPU core count by default).
        - Writes results to disk in input order as soon as they are available.
    """

    model_config = ConfigDict(frozen=True)

    output_file: Path = Field(..., description="Path to write computation results")
    max_workers: Optional[int] = Field(default=None, ge=1, description="Maximum number of simultaneous workers")

    def _spawn_worker(self, request: OperationRequest) -> Tuple[Process, Connection]:
        """
        Spawn a WorkerProcess for the given request and return process and pipe.

        :param OperationRequest request: Expression and its line number

        :return: Tuple of (Process, parent_pipe)
        :rtype: Tuple[Process, Connection]
        """
        parent_conn, child_conn = Pipe()
        worker = WorkerProcess(conn=child_conn, request=request)
        process = Process(target=worker.run)
        process.start()
        return process, parent_conn

    def _collect_finished_workers(
        self, active_workers: List[Tuple[Process, Connection]], results: Dict[int, OperationResult]
    ) -> None:
        """
        Collect results from all finished workers.

        Finished workers are removed from the active_workers list.

        :param list active_workers: List of tuples (Process, Pipe)
        :param dict results: Results received so far, keyed by line number
        """
        # Iterate in reverse to safely remove finished workers while iterating
        for i in reversed(range(len(active_workers))):
            proc, pipe_conn = active_workers[i]
            if not proc.is_alive():
                outcome: OperationResult = pipe_conn.recv()
                pipe_conn.close()
                proc.join()
                active_workers.pop(i)
                results[outcome.line] = outcome

    @staticmethod
    def _write_ready(results: Dict[int, OperationResult], next_line: int, f_out: TextIO) -> int:
        """
        Write the contiguous run of results starting at next_line.

        :return: First line number not written yet
        :rtype: int
        """
        while next_line in results:
            f_out.write(results[next_line].format_line() + "\n")
            next_line += 1
        f_out.flush()
        return next_line

    def run(self, expressions: List[str]) -> List[OperationResult]:
        """
        Evaluate every expression and write the results to the output file.

        :param List[str] expressions: Expressions to evaluate, one per input line

        :return: Results in input order
        :rtype: List[OperationResult]
        """
        requests = [
            OperationRequest(line=line, expression=expr)
            for line, expr in enumerate(expressions, start=1)
        ]
        # Limit number of active workers to CPU cores or number of expressions
        max_workers: int = max(1, min(self.max_workers or cpu_count(), len(requests)))
        logger.info(f"🧮 Evaluating {len(requests)} expressions with up to {max_workers} workers")

        active_workers: List[Tuple[Process, Connection]] = []
        results: Dict[int, OperationResult] = {}
        next_line = 1

        with self.output_file.open("w", encoding="utf-8") as f_out:
            for request in requests:
                # Wait until a worker slot is available
                while len(active_workers) >= max_workers:
                    self._collect_finished_workers(active_workers, results)
                    next_line = self._write_ready(results, next_line, f_out)

                active_workers.append(self._spawn_worker(request))

            # Collect remaining active workers
            while active_workers:
                self._collect_finished_workers(active_workers, results)
                next_line = self._write_ready(results, next_line, f_out)

        failures = sum(1 for outcome in results.values() if not outcome.ok)
        logger.info(f"📝 Results written to {self.output_file} ({failures} failed)")
        return [results[line] for line in sorted(results)]
