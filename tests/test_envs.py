#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from envs.generator import generate_environment, has_path, reachable_mask
from envs.grid import CellType, GridMap


def test_generate_failure_has_no_path():
    for seed in range(5):
        rng = np.random.default_rng(seed)
        env = generate_environment(H=15, W=15, density=0.2, ensure_status="failure", rng=rng)
        assert not has_path(env.grid, env.start, env.goal)
        assert env.grid.is_traversable(env.start)
        assert env.grid.is_traversable(env.goal)

def test_generate_success_has_path():
    rng = np.random.default_rng(0)
    env = generate_environment(H=20, W=20, density=0.25, ensure_status="success", rng=rng)
    assert has_path(env.grid, env.start, env.goal)

def test_same_seed_same_grid():
    a = generate_environment(H=12, W=9, density=0.3, rng=np.random.default_rng(42))
    b = generate_environment(H=12, W=9, density=0.3, rng=np.random.default_rng(42))
    assert np.array_equal(a.grid.cells, b.grid.cells)

def test_unknown_cells_are_sprinkled_on_free_space():
    rng = np.random.default_rng(3)
    env = generate_environment(H=20, W=20, density=0.1, unknown_density=0.2, rng=rng)
    assert (env.grid.cells == CellType.UNKNOWN).any()
    assert env.grid.cell(env.start) == CellType.WALKABLE
    assert env.grid.cell(env.goal) == CellType.WALKABLE

def test_density_is_roughly_respected():
    rng = np.random.default_rng(1)
    env = generate_environment(H=30, W=30, density=0.2, rng=rng)
    frac = float((env.grid.cells == CellType.OBSTACLE).mean())
    assert 0.1 < frac < 0.3

def test_bad_requests_raise():
    with pytest.raises(ValueError):
        generate_environment(H=5, W=5, ensure_status="sometimes")
    with pytest.raises(ValueError):
        generate_environment(H=5, W=5, start=(0, 0), goal=(0, 1), ensure_status="failure")
    with pytest.raises(ValueError):
        generate_environment(H=5, W=5, goal=(5, 5))

def test_reachable_mask_is_4_connected():
    # diagonal contact does not connect
    grid = GridMap.from_rows([
        [0, 1, 0],
        [1, 0, 1],
        [0, 1, 0],
    ])
    mask = reachable_mask(grid, (0, 0))
    assert int(mask.sum()) == 1
    assert not has_path(grid, (0, 0), (1, 1))
    assert not reachable_mask(grid, (0, 1)).any()
