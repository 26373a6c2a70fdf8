"""
栅格化工具

在栅格坐标系中求线段、多边形覆盖的栅格。
"""

from typing import Dict, List, Sequence, Tuple

from costmap_clearing.core.types import Point

Cell = Tuple[int, int]


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Cell]:
    """返回从 (x0, y0) 到 (x1, y1) 的栅格（包含两个端点）"""
    cells = []
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx_step = 1 if x0 < x1 else -1
    sy_step = 1 if y0 < y1 else -1
    err = dx - dy

    x, y = x0, y0
    while True:
        cells.append((x, y))
        if x == x1 and y == y1:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx_step
        if e2 < dx:
            err += dx
            y += sy_step

    return cells


def polygon_outline_cells(polygon: Sequence[Point]) -> List[Cell]:
    """多边形边界经过的栅格（首尾相连）"""
    cells: List[Cell] = []
    n = len(polygon)
    for i in range(n):
        start = polygon[i]
        end = polygon[(i + 1) % n]
        cells.extend(bresenham_line(
            int(start.x), int(start.y), int(end.x), int(end.y)
        ))
    return cells


def convex_fill_cells(polygon: Sequence[Point]) -> List[Cell]:
    """
    凸多边形覆盖的所有栅格

    先求边界栅格，再对每一列填充最小y到最大y之间的栅格。
    顶点少于3个时返回空列表。

    Args:
        polygon: 栅格坐标系下的顶点

    Returns:
        List[Cell]: (mx, my) 列表，按列排序
    """
    if len(polygon) < 3:
        return []

    columns: Dict[int, List[int]] = {}
    for x, y in polygon_outline_cells(polygon):
        span = columns.get(x)
        if span is None:
            columns[x] = [y, y]
        else:
            span[0] = min(span[0], y)
            span[1] = max(span[1], y)

    cells = []
    for x in sorted(columns):
        min_y, max_y = columns[x]
        cells.extend((x, y) for y in range(min_y, max_y + 1))
    return cells
