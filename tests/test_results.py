from __future__ import annotations

import json
from pathlib import Path

import pytest

from matbench.verify import (
    ResultDecodeError,
    ResultsFileError,
    VerdictStatus,
    check_results,
    decode_entry,
    load_results,
)


def _entry(**overrides: object) -> dict:
    entry = {
        "timestamp": "2024-01-01T00:00:00.000Z",
        "taskName": "matrix_multiplication",
        "matrixA": [[1, 2], [3, 4]],
        "matrixB": [[5, 6], [7, 8]],
        "result": [[19, 22], [43, 50]],
    }
    entry.update(overrides)
    return entry


def write_json(path: Path, obj: object) -> Path:
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


# -------------------------
# File loading
# -------------------------


def test_load_results_returns_raw_entries(tmp_path: Path) -> None:
    p = write_json(tmp_path / "results.json", [_entry(), _entry()])
    assert len(load_results(p)) == 2


def test_missing_results_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ResultsFileError) as e:
        load_results(tmp_path / "results.json")
    assert "results.json" in str(e.value)


@pytest.mark.parametrize("content", ["", "[", '{"entries": []}', "null"])
def test_unparseable_or_non_list_results_raise(tmp_path: Path, content: str) -> None:
    p = tmp_path / "results.json"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ResultsFileError):
        load_results(p)


# -------------------------
# Typed decoding
# -------------------------


def test_decode_entry_ignores_extra_fields() -> None:
    entry = decode_entry(_entry())
    assert entry.task_name == "matrix_multiplication"
    assert entry.operands == ([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    assert entry.claimed_result == [[19, 22], [43, 50]]


def test_decode_entry_accepts_integral_floats() -> None:
    entry = decode_entry(_entry(result=[[19.0, 22.0], [43.0, 50.0]]))
    assert entry.claimed_result == [[19, 22], [43, 50]]
    assert all(type(v) is int for row in entry.claimed_result for v in row)


@pytest.mark.parametrize(
    "raw",
    [
        [],
        _entry(taskName=None),
        {k: v for k, v in _entry().items() if k != "result"},
        _entry(matrixA="[[1]]"),
        _entry(matrixB=[1, 2]),
        _entry(result=[[19, 22], [43, "50"]]),
        _entry(result=[[19, 22], [43, 50.5]]),
        _entry(result=[[19, 22], [43, None]]),
        _entry(result=[[True, 22], [43, 50]]),
    ],
)
def test_decode_entry_rejects_malformed(raw: object) -> None:
    with pytest.raises(ResultDecodeError):
        decode_entry(raw)


# -------------------------
# Per-entry verdicts
# -------------------------


def test_check_results_reports_each_entry_independently() -> None:
    verdicts = check_results(
        [
            _entry(),
            _entry(result=[[19, 22], [43, 51]]),
            _entry(taskName="matrix_inversion"),
            _entry(result=[[19, 22], [43, "x"]]),
            _entry(result=[[19, 22]]),
            "garbage",
            _entry(),
        ]
    )

    assert [v.status for v in verdicts] == [
        VerdictStatus.CORRECT,
        VerdictStatus.INCORRECT,
        VerdictStatus.UNKNOWN_KIND,
        VerdictStatus.MALFORMED,
        VerdictStatus.INCORRECT,
        VerdictStatus.MALFORMED,
        VerdictStatus.CORRECT,
    ]
    assert [v.index for v in verdicts] == list(range(7))
    assert verdicts[2].task_name == "matrix_inversion"
    assert verdicts[5].task_name is None
    assert "result[1][1]" in verdicts[3].detail


def test_malformed_cell_is_not_treated_as_zero() -> None:
    # A zero product where the claimed cell is garbage must not pass.
    raw = _entry(
        matrixA=[[0, 0], [0, 0]],
        matrixB=[[0, 0], [0, 0]],
        result=[[0, 0], [0, "oops"]],
    )
    [verdict] = check_results([raw])
    assert verdict.status is VerdictStatus.MALFORMED


def test_empty_operand_is_incorrect() -> None:
    [verdict] = check_results([_entry(matrixA=[], result=[])])
    assert verdict.status is VerdictStatus.INCORRECT


def test_non_utf8_results_file_raises(tmp_path: Path) -> None:
    p = tmp_path / "results.json"
    p.write_bytes(b"[\xff\xfe]")
    with pytest.raises(ResultsFileError) as e:
        load_results(p)
    assert "results.json" in str(e.value)
