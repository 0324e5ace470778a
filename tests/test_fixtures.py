from __future__ import annotations

import pytest

from matbench.catalog import MATRIX_MULTIPLICATION
from matbench.fixtures import (
    SizeFormatError,
    UnknownTaskKindError,
    build_task,
    generate,
    make_rng,
    parse_size,
)


@pytest.mark.parametrize("rows, cols", [(1, 1), (2, 3), (5, 1), (7, 7), (3, 0)])
def test_generate_shape_and_range(rows: int, cols: int) -> None:
    m = generate(rows, cols, make_rng(0))

    assert len(m) == rows
    assert all(len(row) == cols for row in m)
    assert all(type(v) is int and 0 <= v < 10 for row in m for v in row)


def test_generate_zero_rows_is_empty() -> None:
    assert generate(0, 4, make_rng(0)) == []


def test_generate_negative_dimension_raises() -> None:
    with pytest.raises(ValueError):
        generate(-1, 2, make_rng(0))


def test_same_seed_same_matrix() -> None:
    assert generate(4, 4, make_rng(123)) == generate(4, 4, make_rng(123))


def test_shared_generator_advances_between_calls() -> None:
    rng = make_rng(5)
    first = generate(8, 8, rng)
    second = generate(8, 8, rng)
    assert first != second


def test_parse_size() -> None:
    assert parse_size("2x3") == (2, 3)
    assert parse_size("100x100") == (100, 100)
    assert parse_size("0x4") == (0, 4)


@pytest.mark.parametrize("token", ["", "2", "2x", "x3", "2x3x4", "ax3", "-1x3", "2*3", "2X3"])
def test_parse_size_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(SizeFormatError):
        parse_size(token)


def test_build_task_2x3_has_multiplicable_operands() -> None:
    task = build_task(MATRIX_MULTIPLICATION, "2x3", make_rng(1))

    assert task.name == MATRIX_MULTIPLICATION
    assert len(task.matrix_a) == 2
    assert all(len(row) == 3 for row in task.matrix_a)
    assert len(task.matrix_b) == 3
    assert all(len(row) == 2 for row in task.matrix_b)


def test_build_task_unknown_kind_raises() -> None:
    with pytest.raises(UnknownTaskKindError):
        build_task("matrix_inversion", "2x2", make_rng(1))
