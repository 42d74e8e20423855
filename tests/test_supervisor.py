import csv
import queue
from unittest.mock import patch

import pytest

from pricing_worker.apps.supervisor.supervisor import WorkerSupervisor


class FakeProcess:
    def __init__(self, name: str, exitcode: int = 0, alive_checks: int = 0) -> None:
        self.name = name
        self.exitcode = exitcode
        self._alive_checks = alive_checks
        self.joined = False

    def is_alive(self) -> bool:
        if self._alive_checks > 0:
            self._alive_checks -= 1
            return True
        return False

    def join(self) -> None:
        self.joined = True


@pytest.fixture
def supervisor(tmp_path):
    return WorkerSupervisor(worker_count=2, output_dir=str(tmp_path), poll_interval=0.01)


def test_collect_results_drains_channel_after_workers_exit(supervisor):
    channel = queue.Queue()
    channel.put([1, "e1", "aa"])
    channel.put([2, "e2", "bb"])

    results = supervisor.collect_results([FakeProcess("w0", alive_checks=2)], channel)

    assert results == [[1, "e1", "aa"], [2, "e2", "bb"]]


def test_collect_results_with_no_results(supervisor):
    assert supervisor.collect_results([FakeProcess("w0"), FakeProcess("w1")], queue.Queue()) == []


def test_check_workers_counts_abnormal_exits(supervisor):
    processes = [FakeProcess("w0"), FakeProcess("w1", exitcode=1), FakeProcess("w2", exitcode=-9)]

    assert supervisor.check_workers(processes) == 2
    assert all(p.joined for p in processes)


def test_write_report_rows(supervisor, tmp_path):
    with patch("pricing_worker.apps.supervisor.supervisor.now_ms", return_value=1234):
        path = supervisor.write_report([[1, "e1", "aa"], [2, 7, "bb"]])

    assert path == tmp_path / "python-1234.csv"
    with open(path, newline="", encoding="utf-8") as f:
        assert list(csv.reader(f)) == [["1", "e1", "aa"], ["2", "7", "bb"]]


def test_run_exit_status(supervisor):
    workers = [FakeProcess("w0"), FakeProcess("w1", exitcode=1)]

    with patch.object(WorkerSupervisor, "start_workers", return_value=workers), \
            patch.object(WorkerSupervisor, "write_report") as write_report:
        assert supervisor.run() == 1

    write_report.assert_called_once_with([])


def test_run_success(supervisor):
    with patch.object(WorkerSupervisor, "start_workers", return_value=[FakeProcess("w0")]), \
            patch.object(WorkerSupervisor, "write_report"):
        assert supervisor.run() == 0
