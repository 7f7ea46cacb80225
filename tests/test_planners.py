#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from envs.generator import generate_environment, reachable_mask
from envs.grid import CellType, GridMap
from eval.metrics import path_is_valid
from planners import (
    PLANNERS, get_planner, search, SearchStatus, InvalidEndpointError,
    OrderingPolicy, AStarPolicy, DijkstraPolicy, GreedyBestFirstPolicy, BFSPolicy,
)
from planners.frontier import HeapFrontier
from planners.records import VertexStatus

OPTIMAL = ["dijkstra", "a_star", "bfs"]
ALL = list(PLANNERS)

OPEN_3x3 = GridMap(np.zeros((3, 3), dtype=np.int8))

POCKET = GridMap.from_rows([
    [0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0],
    [1, 1, 1, 0, 0],
    [0, 0, 0, 0, 0],
])

WALLED_GOAL = GridMap.from_rows([
    [0, 0, 0, 0],
    [0, 1, 1, 1],
    [0, 1, 0, 1],
    [0, 1, 1, 1],
])


# -------------------- worked examples -------------------- #

def test_open_grid_bfs_takes_down_then_right():
    res = get_planner("bfs").search(OPEN_3x3, (0, 0), (2, 2))
    assert res.status == SearchStatus.FOUND
    assert res.path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert res.path_length == 4
    assert res.cells_examined == 9

def test_open_grid_dijkstra_matches_bfs_tie_breaking():
    res = get_planner("dijkstra").search(OPEN_3x3, (0, 0), (2, 2))
    assert res.path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert res.cells_examined == 9

@pytest.mark.parametrize("name", OPTIMAL)
def test_open_grid_optimal_length(name):
    res = get_planner(name).search(OPEN_3x3, (0, 0), (2, 2))
    assert res.path_length == 4
    assert path_is_valid(res.path, OPEN_3x3, (0, 0), (2, 2))

@pytest.mark.parametrize("name", ["greedy", "dfs"])
def test_open_grid_non_optimal_planners_still_reach_goal(name):
    res = get_planner(name).search(OPEN_3x3, (0, 0), (2, 2))
    assert res.success
    assert res.path_length >= 4
    assert path_is_valid(res.path, OPEN_3x3, (0, 0), (2, 2))

def test_annotated_grid_marks_path_and_endpoints():
    res = get_planner("bfs").search(OPEN_3x3, (0, 0), (2, 2))
    cells = res.annotated.cells
    assert cells[0, 0] == CellType.START
    assert cells[2, 2] == CellType.GOAL
    assert [tuple(p) for p in np.argwhere(cells == CellType.PATH)] == [(1, 0), (2, 0), (2, 1)]
    # input grid untouched
    assert (OPEN_3x3.cells == CellType.WALKABLE).all()

@pytest.mark.parametrize("name", ALL)
def test_start_equals_goal_is_zero_length_path(name):
    res = get_planner(name).search(OPEN_3x3, (1, 1), (1, 1))
    assert res.status == SearchStatus.FOUND
    assert res.path == [(1, 1)]
    assert res.path_length == 0
    assert res.cells_examined == 1
    assert res.annotated.cell((1, 1)) == CellType.START


# -------------------- failures -------------------- #

@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("start,goal", [
    ((0, 2), (3, 4)),     # start on obstacle
    ((0, 0), (2, 2)),     # goal on obstacle
    ((0, 0), (4, 0)),     # goal out of bounds
    ((-1, 0), (3, 4)),    # start out of bounds
])
def test_invalid_endpoint(name, start, goal):
    res = get_planner(name).search(POCKET, start, goal)
    assert res.status == SearchStatus.INVALID_ENDPOINT
    assert not res.success
    assert res.path is None and res.annotated is None
    with pytest.raises(InvalidEndpointError):
        res.raise_for_status()
    assert get_planner(name).plan(POCKET, start, goal)["status"] == "invalid_endpoint"

def test_unknown_cell_is_invalid_endpoint_and_not_traversed():
    grid = GridMap.from_rows([[0, -1, 0]])
    blocked = search(grid, (0, 0), (0, 2), DijkstraPolicy())
    assert blocked.status == SearchStatus.NO_PATH
    assert blocked.cells_examined == 1
    assert search(grid, (0, 0), (0, 1), DijkstraPolicy()).status == SearchStatus.INVALID_ENDPOINT

@pytest.mark.parametrize("name", ALL)
def test_enclosed_start_examines_its_component(name):
    res = get_planner(name).search(POCKET, (0, 0), (3, 4))
    assert res.status == SearchStatus.NO_PATH
    assert res.path is None and res.path_length is None
    assert res.cells_examined == 4
    assert res.raise_for_status() is res  # no path is not an error
    assert not (res.annotated.cells == CellType.PATH).any()

@pytest.mark.parametrize("name", ALL)
def test_enclosed_goal_examines_start_component(name):
    res = get_planner(name).search(WALLED_GOAL, (0, 0), (2, 2))
    assert res.status == SearchStatus.NO_PATH
    assert res.cells_examined == 7

@pytest.mark.parametrize("seed", range(6))
def test_random_failures_examine_whole_component(seed):
    rng = np.random.default_rng(100 + seed)
    env = generate_environment(H=14, W=14, density=0.25, ensure_status="failure", rng=rng)
    expected = int(reachable_mask(env.grid, env.start).sum())
    for name in ALL:
        res = get_planner(name).search(env.grid, env.start, env.goal)
        assert res.status == SearchStatus.NO_PATH, name
        assert res.cells_examined == expected, name


# -------------------- properties on random grids -------------------- #

@pytest.mark.parametrize("seed", range(12))
def test_optimal_planners_agree_and_others_are_no_shorter(seed):
    rng = np.random.default_rng(seed)
    env = generate_environment(H=16, W=16, density=0.25, unknown_density=0.05,
                               ensure_status="success", rng=rng)
    results = {name: get_planner(name).search(env.grid, env.start, env.goal) for name in ALL}
    for name, res in results.items():
        assert res.success, name
        assert path_is_valid(res.path, env.grid, env.start, env.goal), name

    optimal = results["bfs"].path_length
    assert results["dijkstra"].path_length == optimal
    assert results["a_star"].path_length == optimal
    assert results["greedy"].path_length >= optimal
    assert results["dfs"].path_length >= optimal
    assert results["a_star"].cells_examined <= results["dijkstra"].cells_examined

@pytest.mark.parametrize("name", ALL)
def test_repeated_runs_are_identical(name):
    env = generate_environment(H=18, W=18, density=0.2, rng=np.random.default_rng(7))
    a = get_planner(name).search(env.grid, env.start, env.goal)
    b = get_planner(name).search(env.grid, env.start, env.goal)
    assert a.path == b.path
    assert a.path_length == b.path_length
    assert a.cells_examined == b.cells_examined

def test_concurrent_searches_on_shared_grid():
    env = generate_environment(H=25, W=25, density=0.2, ensure_status="success",
                               rng=np.random.default_rng(11))
    planner = get_planner("a_star")
    expected = planner.search(env.grid, env.start, env.goal)
    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [pool.submit(planner.search, env.grid, env.start, env.goal) for _ in range(8)]
        results = [f.result() for f in futures]
    for res in results:
        assert res.path == expected.path
        assert res.cells_examined == expected.cells_examined


# -------------------- policies -------------------- #

def test_policy_keys():
    goal = (2, 3)
    assert DijkstraPolicy().relax_key((0, 0), 5.0, goal) == 5.0
    assert AStarPolicy().relax_key((0, 0), 5.0, goal) == 10.0
    assert GreedyBestFirstPolicy().relax_key((0, 0), 5.0, goal) == 5
    assert AStarPolicy().initial_key((0, 0), goal) == 5.0

def test_policy_admission_rules():
    inf = float("inf")
    assert DijkstraPolicy().admit(VertexStatus.FRONTIER, 3.0, 2.0)
    assert not DijkstraPolicy().admit(VertexStatus.FRONTIER, 3.0, 3.0)
    assert AStarPolicy().admit(VertexStatus.UNVISITED, inf, 4.0)
    assert not AStarPolicy().admit(VertexStatus.FRONTIER, 3.0, 3.0)
    assert AStarPolicy().admit(VertexStatus.FRONTIER, 3.0, 2.0)
    # first discovery only, even when cheaper
    assert GreedyBestFirstPolicy().admit(VertexStatus.UNVISITED, inf, 9.0)
    assert not GreedyBestFirstPolicy().admit(VertexStatus.FRONTIER, 9.0, 1.0)
    assert not BFSPolicy().admit(VertexStatus.FRONTIER, inf, 1.0)

class _CountingHeap(HeapFrontier):
    def __init__(self):
        super().__init__()
        self.pushed = []
        self.popped = []

    def push(self, index, key):
        self.pushed.append(index)
        super().push(index, key)

    def pop(self):
        index = super().pop()
        self.popped.append(index)
        return index

class _AlwaysAdmit(OrderingPolicy):
    name = "always"

    def make_frontier(self):
        self.frontier = _CountingHeap()
        return self.frontier

    def admit(self, status, recorded_cost, candidate_cost):
        return True

def test_stale_duplicates_are_skipped():
    policy = _AlwaysAdmit()
    res = search(OPEN_3x3, (0, 0), (2, 2), policy)
    assert res.success
    assert path_is_valid(res.path, OPEN_3x3, (0, 0), (2, 2))
    assert res.cells_examined == 9
    assert res.closed.all()

    pushed, popped = policy.frontier.pushed, policy.frontier.popped
    assert len(pushed) > len(set(pushed))          # duplicates were queued
    assert len(popped) > res.cells_examined        # some pops were stale
    assert len(set(popped)) == res.cells_examined  # each vertex closed once
    assert popped[-1] == OPEN_3x3.index((2, 2))


# -------------------- planner API -------------------- #

def test_plan_accepts_bool_occupancy_grid():
    occ = np.zeros((4, 4), dtype=bool)
    occ[1, :3] = True
    out = get_planner("a_star").plan(occ, (0, 0), (3, 0))
    assert out["success"] is True
    assert out["path"][0] == (0, 0) and out["path"][-1] == (3, 0)
    assert out["path_length"] == 9
    assert out["status"] == "found"

def test_unknown_planner_name():
    with pytest.raises(ValueError):
        get_planner("theta_star")
    assert type(get_planner(" A_STAR ")).__name__ == "AStarPlanner"
