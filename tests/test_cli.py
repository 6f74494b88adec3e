import io
from pathlib import Path

import pytest

from pqbench.binary_heap import BinaryHeap
from pqbench.cli import Operation, dataset_path, main, run_benchmark
from pqbench.linked_list import LinkedList


def _heaps(count, pairs):
    result = []
    for _ in range(count):
        heap = BinaryHeap()
        for value, priority in pairs:
            heap.insert(value, priority)
        result.append(heap)
    return result


def _lists(count, pairs):
    result = []
    for _ in range(count):
        queue = LinkedList()
        for value, priority in pairs:
            queue.insert(value, priority)
        result.append(queue)
    return result


PAIRS = [(10, 3), (20, 7), (30, 5)]


def test_dataset_path_first_and_last():
    assert dataset_path("data", 1) == Path("data") / "DataBase5k.txt"
    assert dataset_path("data", 20) == Path("data") / "DataBase100k.txt"


@pytest.mark.parametrize("number", [0, 21, -3])
def test_dataset_path_rejects_out_of_range(number):
    with pytest.raises(ValueError):
        dataset_path("data", number)


def test_run_benchmark_insert_grows_every_copy():
    copies = _heaps(4, PAIRS)
    result = run_benchmark(copies, Operation.INSERT, 99, 100)
    assert result >= 0
    assert all(len(c) == len(PAIRS) + 1 for c in copies)
    assert all(c.peek().value == 99 for c in copies)


def test_run_benchmark_extract_max_on_lists():
    copies = _lists(3, PAIRS)
    run_benchmark(copies, Operation.EXTRACT_MAX)
    assert [len(c) for c in copies] == [len(PAIRS) - 1] * 3
    assert all(c.peek().value == 30 for c in copies)


def test_run_benchmark_accepts_plain_int():
    copies = _heaps(2, PAIRS)
    run_benchmark(copies, 4, 10, 50)
    assert all(c.peek().value == 10 for c in copies)


def test_run_benchmark_peek_leaves_copies_unchanged():
    copies = _lists(2, PAIRS)
    run_benchmark(copies, Operation.PEEK)
    assert all(list(c) == list(copies[0]) for c in copies)
    assert len(copies[0]) == len(PAIRS)


def test_run_benchmark_reports_missing_value(capsys):
    copies = _heaps(2, PAIRS)
    run_benchmark(copies, Operation.MODIFY_KEY, 12345, 1)
    out = capsys.readouterr().out
    assert out.count("Element is not found!") == 2


def test_run_benchmark_reports_empty_queue(capsys):
    copies = [LinkedList(), LinkedList()]
    run_benchmark(copies, Operation.EXTRACT_MAX)
    assert capsys.readouterr().out.count("Queue is empty") == 2


def test_run_benchmark_requires_copies():
    with pytest.raises(ValueError):
        run_benchmark([], Operation.PEEK)


def _run(monkeypatch, text, argv):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(argv)


def test_main_heap_from_file(monkeypatch, capsys, tmp_path):
    (tmp_path / "DataBase5k.txt").write_text("1 2\n3 4\n5 6\n", encoding="ascii")
    code = _run(monkeypatch, "2\n2\n1\n3\n", ["--data-dir", str(tmp_path), "--copies", "5"])
    out = capsys.readouterr().out
    assert code == 0
    assert "This operation took:" in out
    assert "Failed to open file." not in out


def test_main_list_random_insert(monkeypatch, capsys):
    code = _run(monkeypatch, "1 1 50 1 7 8\n", ["--copies", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Enter priority: " in out
    assert "This operation took:" in out


def test_main_invalid_file_number(monkeypatch, capsys):
    code = _run(monkeypatch, "1\n2\n25\n", [])
    assert code == 1
    assert "Invalid file number." in capsys.readouterr().out


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    code = _run(monkeypatch, "2 2 3 5\n", ["--data-dir", str(tmp_path), "--copies", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Failed to open file." in out


def test_main_unknown_structure(monkeypatch, capsys):
    code = _run(monkeypatch, "7 1 10 3\n", [])
    out = capsys.readouterr().out
    assert code == 0
    assert "There is no such data structure" in out
    assert "This operation took:" not in out


def test_main_unknown_operation(monkeypatch, capsys):
    code = _run(monkeypatch, "2 1 10 9\n", ["--copies", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "There is no such operation" in out


def test_main_truncated_input(monkeypatch, capsys):
    code = _run(monkeypatch, "1\n", [])
    assert code == 1
    assert "Unexpected end of input." in capsys.readouterr().out


def test_main_rejects_zero_copies(monkeypatch):
    with pytest.raises(SystemExit) as info:
        _run(monkeypatch, "", ["--copies", "0"])
    assert info.value.code == 2