from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Dict, Optional, Set

from algograph.config import SEARCH_CONFIG
from algograph.lib.algorithms.base import Heuristic, SolverStatus
from algograph.lib.algorithms.frontier import PriorityFrontier
from algograph.lib.algorithms.types import GridPathResult
from algograph.lib.grid import CellLike, Grid, GridCell
from algograph.lib.path import reconstruct_path
from algograph.logging import get_logger

logger = get_logger(__name__)

HeuristicFunc = Callable[[GridCell, GridCell], int]


def manhattan_distance(cell: GridCell, goal: GridCell) -> int:
    return cell.manhattan(goal)


def heuristic_fabric(heuristic: Heuristic, step_cost: int = 1) -> HeuristicFunc:
    """
    Return the cost-to-goal estimate function for a Heuristic.

    Args:
        heuristic: Which estimate to use.
        step_cost: Cost of one move; the estimate is scaled by it so that it
            stays admissible.

    Raises:
        ValueError: If the heuristic is not supported.
    """
    if heuristic == Heuristic.MANHATTAN:
        if step_cost == 1:
            return manhattan_distance

        def scaled_manhattan(cell: GridCell, goal: GridCell) -> int:
            return step_cost * manhattan_distance(cell, goal)

        return scaled_manhattan
    raise ValueError(f"Unsupported heuristic: {heuristic!r}")


def astar(
    grid: Grid,
    start: CellLike,
    goal: CellLike,
    heuristic: Optional[Heuristic] = None,
    step_cost: Optional[int] = None,
) -> GridPathResult:
    """
    Find a shortest path between two grid cells with A*.

    Moves go up, down, left or right onto walkable cells. Each cell has
    ``g`` (best known cost from start) and ``f = g + h`` where ``h`` is the
    heuristic estimate to the goal. The open set is a PriorityFrontier keyed
    by ``f`` (ties go to the first cell in row-major order); cells in the
    closed set are never expanded again. Finding a strictly smaller ``g`` for
    a cell updates its parent and scores and re-inserts it, leaving the old
    open-set entry stale.

    The search stops successfully when the goal is popped from the open set,
    and with NO_PATH when the open set runs out. Start or goal outside the
    grid, or on an obstacle, yields an empty NO_PATH result right away.

    Args:
        grid: The grid to search.
        start: Start cell, as a GridCell or (row, col).
        goal: Goal cell, as a GridCell or (row, col).
        heuristic: Cost estimate. Defaults to SEARCH_CONFIG.heuristic.
        step_cost: Cost of one move. Defaults to SEARCH_CONFIG.step_cost.

    Returns:
        GridPathResult with the path (start and goal inclusive) and its cost
        in moves times step_cost.

    Raises:
        ValueError: If step_cost is not positive.
    """
    start = GridCell.of(start)
    goal = GridCell.of(goal)
    if heuristic is None:
        heuristic = SEARCH_CONFIG.heuristic
    if step_cost is None:
        step_cost = SEARCH_CONFIG.step_cost
    if step_cost <= 0:
        raise ValueError(f"step_cost must be positive, got {step_cost}")
    estimate = heuristic_fabric(heuristic, step_cost)

    if not grid.is_walkable(start) or not grid.is_walkable(goal):
        logger.warning(
            "A* endpoints must be walkable cells inside the %dx%d grid: start=%s goal=%s",
            grid.rows,
            grid.cols,
            tuple(start),
            tuple(goal),
        )
        return GridPathResult(start=start, goal=goal, status=SolverStatus.NO_PATH)

    g_scores: Dict[GridCell, int] = {start: 0}
    f_scores: Dict[GridCell, int] = {start: estimate(start, goal)}
    parents: Dict[GridCell, Optional[GridCell]] = {start: None}
    closed: Set[GridCell] = set()

    open_set = PriorityFrontier(f_scores)
    open_set.push(start)

    while open_set:
        current = open_set.pop()
        if current in closed:
            continue
        if current == goal:
            path = tuple(reconstruct_path(parents, start, goal))
            logger.debug(
                "A* found a path of cost %d after expanding %d cells",
                g_scores[goal],
                len(closed),
            )
            return GridPathResult(
                start=start,
                goal=goal,
                status=SolverStatus.OK,
                path=path,
                cost=g_scores[goal],
                parents=MappingProxyType(parents),
                g_scores=MappingProxyType(g_scores),
                expanded=len(closed),
            )
        closed.add(current)

        tentative = g_scores[current] + step_cost
        for neighbor in grid.neighbors(current):
            if neighbor in closed:
                continue
            if tentative < g_scores.get(neighbor, tentative + 1):
                parents[neighbor] = current
                g_scores[neighbor] = tentative
                f_scores[neighbor] = tentative + estimate(neighbor, goal)
                open_set.push(neighbor)

    logger.debug("A* exhausted the open set after expanding %d cells", len(closed))
    return GridPathResult(
        start=start,
        goal=goal,
        status=SolverStatus.NO_PATH,
        parents=MappingProxyType(parents),
        g_scores=MappingProxyType(g_scores),
        expanded=len(closed),
    )
