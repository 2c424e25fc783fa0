"""Test class BatchEvaluator."""
from multiprocessing import Pipe, Process
from pathlib import Path

from pydantic import ValidationError
import pytest

from infix_interpreter.batch.runner import BatchEvaluator
from infix_interpreter.common.operations import OperationRequest, OperationResult


@pytest.fixture
def tmp_output_file(tmp_path: Path) -> Path:
    """Create a temporary output file path."""
    return tmp_path / "results.txt"


def test_invalid_max_workers(tmp_output_file: Path) -> None:
    with pytest.raises(ValidationError):
        BatchEvaluator(output_file=tmp_output_file, max_workers=0)


def test_spawn_worker_returns_process_and_pipe(tmp_output_file: Path) -> None:
    """_spawn_worker returns a Process and a parent Pipe."""
    evaluator = BatchEvaluator(output_file=tmp_output_file)
    proc, parent_pipe = evaluator._spawn_worker(OperationRequest(line=1, expression="1 + 1"))
    outcome = parent_pipe.recv()
    proc.join()
    assert outcome.result == 2.0


def test_collect_finished_workers(tmp_output_file: Path) -> None:
    """_collect_finished_workers stores results of finished workers."""
    evaluator = BatchEvaluator(output_file=tmp_output_file)

    parent_conn, child_conn = Pipe()
    # simulate worker payload
    child_conn.send(OperationResult(line=1, expression="2 + 3", result=5.0))
    child_conn.close()

    def dummy_run():
        pass

    proc = Process(target=dummy_run)
    proc.start()
    proc.join()

    active_workers = [(proc, parent_conn)]
    results = {}
    evaluator._collect_finished_workers(active_workers, results)

    assert active_workers == []
    assert results[1].result == 5.0


def test_write_ready_keeps_input_order(tmp_output_file: Path) -> None:
    """Results are only written once every previous line is known."""
    results = {
        2: OperationResult(line=2, expression="2", result=2.0),
        3: OperationResult(line=3, expression="3", result=3.0),
    }
    with tmp_output_file.open("w") as f_out:
        assert BatchEvaluator._write_ready(results, 1, f_out) == 1
        results[1] = OperationResult(line=1, expression="1", result=1.0)
        assert BatchEvaluator._write_ready(results, 1, f_out) == 4

    assert tmp_output_file.read_text().splitlines() == ["1 = 1.0", "2 = 2.0", "3 = 3.0"]


@pytest.mark.parametrize(
    "lines, expected_output",
    [
        (["2 + 3", "4 * 5"], ["2 + 3 = 5.0", "4 * 5 = 20.0"]),
        (["(2 + 3", "3 *"], ["(2 + 3 -> ERROR: closing parenthesis not found", "3 * -> ERROR"]),
        (["1/0", "-(1 - 4) * 2"], ["1/0 = inf", "-(1 - 4) * 2 = 6.0"]),
    ],
)
def test_run(tmp_output_file: Path, lines, expected_output) -> None:
    """run evaluates every expression and writes results in input order."""
    evaluator = BatchEvaluator(output_file=tmp_output_file, max_workers=2)
    results = evaluator.run(lines)

    assert [outcome.expression for outcome in results] == lines
    content = tmp_output_file.read_text().splitlines()
    assert len(content) == len(expected_output)
    for line, expected in zip(content, expected_output):
        assert line.startswith(expected)


def test_run_empty(tmp_output_file: Path) -> None:
    evaluator = BatchEvaluator(output_file=tmp_output_file)
    assert evaluator.run([]) == []
    assert tmp_output_file.read_text() == ""
