"""
B-spline and NURBS curves in the plane and the sampling algorithms
of the B-spline family:
- uniform B-spline (clamped integer knots)
- non-uniform B-spline (centripetal knots)
- NURBS (rational, clamped integer knots)

Every algorithm is a function (points, degree, resolution) -> (resolution + 1, 2) array.
"""
import numpy as np

from ..validation import CurveFamily, validate_input, validate_weights
from .basis import SplineBasis
from .knots import uniform_knots, clamp_knots, centripetal_knots


class Curve:
    """
    Defines a 2D curve as a (possibly rational) B-spline.
    The point is the sum of all basis functions times the poles,
    for the rational curve divided by the sum of the weighted basis functions.
    """

    def __init__(self, basis, poles, weights=None):
        """
        :param basis: SplineBasis
        :param poles: (N, dim) array of poles (control points), N == basis.size
        :param weights: None or N positive weights, rational curve (NURBS)
        """
        self.basis = basis
        self.poles = np.array(poles, dtype=float)
        assert self.poles.shape[0] == self.basis.size
        self.dim = self.poles.shape[1]
        if weights is None:
            weights = np.ones(self.basis.size)
        self.weights = np.array(weights, dtype=float)
        # Equal weights cancel, evaluate as a polynomial curve.
        self.rational = not np.all(self.weights == self.weights[0])

    def eval(self, t):
        t_base_vec = self.basis.eval_all(t)
        if self.rational:
            weighted = t_base_vec * self.weights
            bot_value = np.sum(weighted)
            if bot_value == 0.0:
                bot_value = 1.0
            return np.inner(weighted, self.poles.T) / bot_value
        else:
            return np.inner(t_base_vec, self.poles.T)

    def sample(self, resolution):
        """
        Evaluate the curve in resolution + 1 equidistant parameters covering the domain.
        :return: (resolution + 1, dim) array
        """
        t_coord = np.linspace(self.basis.domain[0], self.basis.domain[1], resolution + 1)
        return np.array([self.eval(t) for t in t_coord])


def _uniform_basis(n_points, degree):
    return SplineBasis(degree, clamp_knots(uniform_knots(n_points, degree), degree))


def uniform_bspline(points, degree, resolution):
    """
    B-spline on the integer knot vector clamped to the domain [degree, n + 1].
    """
    points, degree, resolution = validate_input(CurveFamily.BSPLINE, points, degree, resolution)
    curve = Curve(_uniform_basis(len(points), degree), points)
    return curve.sample(resolution)


def non_uniform_bspline(points, degree, resolution):
    """
    B-spline on the centripetal knot vector, knots follow the spacing of the control points.
    The domain is [0, n - degree + 1], the domain [degree, n + 1] of the uniform
    B-spline shifted to start at zero.
    """
    points, degree, resolution = validate_input(CurveFamily.BSPLINE, points, degree, resolution)
    curve = Curve(SplineBasis(degree, centripetal_knots(points, degree)), points)
    return curve.sample(resolution)


def nurbs(points, degree, resolution, weights=None):
    """
    Rational B-spline on the same knots as 'uniform_bspline'.
    :param weights: one positive weight per control point, unit weights by default.
    """
    points, degree, resolution = validate_input(CurveFamily.BSPLINE, points, degree, resolution)
    weights = validate_weights(weights, len(points))
    curve = Curve(_uniform_basis(len(points), degree), points, weights)
    return curve.sample(resolution)
