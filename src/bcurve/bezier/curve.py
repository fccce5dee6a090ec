"""
Bezier curves in the plane, three equivalent evaluation algorithms:
- De Casteljau iterative reduction
- direct sum of Bernstein polynomials
- recursive linear interpolation

The sampling functions share the signature (points, degree, resolution) with the B-spline family,
the degree is given by the number of control points and the 'degree' argument is ignored.
"""
import numpy as np

from ..validation import CurveFamily, validate_input
from ..bspline.basis import bernstein_basis


def de_casteljau_point(points, t):
    """
    Reduce the control polygon by pairwise linear interpolation until a single point remains.
    :param points: (N, 2) array
    """
    work = np.array(points, dtype=float)
    while len(work) > 1:
        work = (1.0 - t) * work[:-1] + t * work[1:]
    return work[0]


def bernstein_point(points, t):
    n = len(points) - 1
    b_vec = np.array([bernstein_basis(n, i, t) for i in range(n + 1)])
    return np.inner(b_vec, np.asarray(points).T)


def lerp_point(points, t):
    """
    Recursive form of the De Casteljau reduction.
    """
    if len(points) == 1:
        return np.array(points[0], dtype=float)
    mid_points = [(1.0 - t) * a + t * b for a, b in zip(points[:-1], points[1:])]
    return lerp_point(mid_points, t)


def _sample(point_fn, points, resolution):
    t_coord = np.linspace(0.0, 1.0, resolution + 1)
    return np.array([point_fn(points, t) for t in t_coord])


def de_casteljau(points, degree, resolution):
    points, _, resolution = validate_input(CurveFamily.BEZIER, points, degree, resolution)
    return _sample(de_casteljau_point, points, resolution)


def bernstein(points, degree, resolution):
    points, _, resolution = validate_input(CurveFamily.BEZIER, points, degree, resolution)
    return _sample(bernstein_point, points, resolution)


def linear_interpolation(points, degree, resolution):
    points, _, resolution = validate_input(CurveFamily.BEZIER, points, degree, resolution)
    return _sample(lerp_point, points, resolution)
