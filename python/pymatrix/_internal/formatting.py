from __future__ import annotations

from typing import Any


_EDGE_ITEMS: int = 4


def configure(*, edge_items: int | None = None) -> None:
    global _EDGE_ITEMS
    if edge_items is not None:
        edge_items = int(edge_items)
        if edge_items < 1:
            raise ValueError("edge_items must be at least 1")
        _EDGE_ITEMS = edge_items


def options() -> dict[str, Any]:
    return {"edge_items": _EDGE_ITEMS}


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: float) -> str:
    return f"{value:g}"


def _format_matrix_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries: list[str] = []
    for col in col_head:
        entries.append(_format_value(matrix.get(row_index, col)))
    if truncated:
        entries.append("...")
    for col in col_tail:
        entries.append(_format_value(matrix.get(row_index, col)))
    return " ".join(entries)


def matrix_str(self: Any) -> str:
    rows = self.rows()
    cols = self.cols()

    header = f"{self.__class__.__name__}(shape=({rows}, {cols}))"

    if cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    __slots__ = ()

    def __str__(self) -> str:
        return matrix_str(self)

    def __repr__(self) -> str:
        shape = getattr(self, "shape", None)
        return f"<{self.__class__.__name__} shape={shape}>"
