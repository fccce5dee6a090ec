"""
Common code for tests.
"""
import os
from pathlib import Path


def sandbox_fname(base_name, ext):
    work_dir = "sandbox"
    Path(work_dir).mkdir(parents=True, exist_ok=True)
    return os.path.join(work_dir, f"{base_name}.{ext}")


def sandbox_dir():
    work_dir = "sandbox"
    Path(work_dir).mkdir(parents=True, exist_ok=True)
    return work_dir


# control polygons used across the tests
arch_points = [(0, 0), (50, 100), (100, 0)]
wave_points = [(0., 0.), (10., 40.), (25., -10.), (60., 30.), (70., 0.), (100., 20.)]
uneven_points = [(0., 0.), (1., 0.), (2., 0.5), (40., 30.), (41., 31.), (90., 0.)]
