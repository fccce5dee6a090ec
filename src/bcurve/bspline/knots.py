"""
Knot vector builders. All builders return a non-decreasing float np array
of length N + degree + 1, N being the number of control points.
"""
import numpy as np


def check_knots(knots, degree, n_points):
    assert len(knots) == n_points + degree + 1, "Knot vector length {}, expected {}.".format(len(knots), n_points + degree + 1)
    assert np.all(np.diff(knots) >= 0), "Knot vector must be non-decreasing: {}".format(knots)


def uniform_knots(n_points, degree):
    """
    Integer knots 0, 1, ..., n + degree + 1, where n = n_points - 1.
    The curve domain is [degree, n + 1].
    """
    return np.arange(n_points + degree + 1, dtype=float)


def clamp_knots(knots, degree):
    """
    Saturate the knots to the domain [knots[degree], knots[-degree-1]].
    Gives multiplicity degree + 1 of both end knots with the same domain,
    so that the curve interpolates its first and last control point.
    """
    knots = np.asarray(knots, dtype=float)
    return np.clip(knots, knots[degree], knots[-degree - 1])


def centripetal_params(points):
    """
    Parameters of the control points in [0, 1] given by the cumulative
    fourth root of the chord lengths. Coincident points only produce
    equidistant parameters.
    Parameters do not depend on the scale of the points, the points are normalized
    to the unit box first so that large finite coordinates do not overflow.
    :param points: (N, 2) array
    :return: np array of N parameters, first 0, last 1.
    """
    points = np.asarray(points, dtype=float)
    scale = np.max(np.abs(points))
    if scale > 0.0:
        points = points / scale
    chords = np.sqrt(np.linalg.norm(np.diff(points, axis=0), axis=1))
    total = np.sum(chords)
    if total == 0.0:
        return np.linspace(0.0, 1.0, len(points))
    params = np.concatenate(([0.0], np.cumsum(chords))) / total
    params[-1] = 1.0
    return params


def centripetal_knots(points, degree):
    """
    Clamped knot vector with the interior knots placed according to
    the centripetal parametrization of the control points.

    End knots have multiplicity degree + 1 and values 0 and n - degree + 1.
    Interior knot j is the average of the parameters t_j, ..., t_{j+degree-1},
    j = 1, ..., n - degree, scaled from [0, 1] to [0, n - degree + 1].
    For degree 1 the interior knots are exactly the parameters of the inner points.
    """
    params = centripetal_params(points)
    n = len(params) - 1
    t_max = float(n - degree + 1)
    interior = [np.mean(params[j: j + degree]) for j in range(1, n - degree + 1)]
    knots = np.concatenate((
        np.zeros(degree + 1),
        np.array(interior, dtype=float) * t_max,
        np.full(degree + 1, t_max)))
    check_knots(knots, degree, n + 1)
    return knots
