"""
Basis functions of the polynomial curves:
- binomial coefficients and Bernstein polynomials for the Bezier curves
- Cox - de Boor recursive B-spline basis functions
- SplineBasis, the basis for a given knot vector with the end point closure.
"""
import numpy as np


def binomial_coefficient(n, k):
    """
    C(n, k) computed in the product form, avoids factorials.
    """
    if k > n or k < 0:
        return 0
    if k == 0 or k == n:
        return 1
    result = 1.0
    for i in range(k):
        result = result * (n - i) / (i + 1)
    return result


def bernstein_basis(n, i, t):
    """
    Bernstein polynomial B_{i,n}(t) = C(n,i) (1-t)^(n-i) t^i.
    The range of 't' is not checked, caller should keep t in [0, 1].
    """
    return binomial_coefficient(n, i) * (1.0 - t) ** (n - i) * t ** i


def bspline_basis(i, degree, t, knots):
    """
    Recursive evaluation of basis function of given degree and index (Cox - de Boor).
    Degree zero functions are characteristic functions of half open intervals
    [knots[i], knots[i+1]), so 't' equal to the last knot gives zero for all functions.
    Terms over zero length knot spans are zero.

    :param i: Index of the basis function to evaluate.
    :param degree: Degree of the basis function.
    :param t: Point of evaluation.
    :param knots: Knot vector including multiplicities.
    :return Value of the basis function.
    """
    if degree == 0:
        t_0 = knots[i]
        t_1 = knots[i + 1]
        return 1.0 if t_0 <= t < t_1 else 0.0

    value = 0.0
    t_i = knots[i]
    t_ik = knots[i + degree]
    bottom = t_ik - t_i
    if bottom != 0:
        value = (t - t_i) / bottom * bspline_basis(i, degree - 1, t, knots)

    t_i1 = knots[i + 1]
    t_ik1 = knots[i + degree + 1]
    bottom = t_ik1 - t_i1
    if bottom != 0:
        value += (t_ik1 - t) / bottom * bspline_basis(i + 1, degree - 1, t, knots)
    return value


class SplineBasis:
    """
    Represents a spline basis for a given knot vector and degree.
    Provides evaluation of the basis functions, knot interval lookup and the parametric domain.
    The knot vector need not be clamped, the domain is [knots[degree], knots[size]]
    where 'size' is the number of basis functions.
    """

    @classmethod
    def make_equidistant(cls, degree, n_intervals, knot_range=(0.0, 1.0)):
        """
        Returns spline basis for an eqidistant clamped knot vector
        having 'n_intervals' subintervals.
        :param degree: degree of the spline basis
        :param n_intervals: number of nonempty knot intervals
        :param knot_range: support of the spline, min and max valid 't'
        """
        n = n_intervals + 2 * degree + 1
        knots = np.full(n, float(knot_range[0]))
        diff = (knot_range[1] - knot_range[0]) / n_intervals
        for i in range(degree + 1, n - degree):
            knots[i] = (i - degree) * diff + knot_range[0]
        knots[-degree - 1:] = knot_range[1]
        return cls(degree, knots)

    def __init__(self, degree, knots):
        """
        Constructor of the basis.
        :param degree: Degree of the polynomials >=0.
        :param knots: Non-decreasing knot vector including multiplicities.
        """
        assert degree >= 0
        self.degree = degree
        self.knots = np.array(knots, dtype=float)
        assert np.all(np.diff(self.knots) >= 0), "Knot vector must be non-decreasing."

        # Number of basis functions.
        self.size = len(self.knots) - self.degree - 1
        assert self.size > 0
        self.knots_idx_range = [self.degree, self.size]
        self.domain = self.knots[self.knots_idx_range]
        self.domain_size = self.domain[1] - self.domain[0]
        # Last nonempty span of the domain, end knots of higher multiplicity
        # produce trailing zero length spans.
        nonempty = np.flatnonzero(self.knots[self.degree:self.size] < self.knots[self.degree + 1:self.size + 1])
        self.last_span = self.degree + int(nonempty[-1]) if len(nonempty) > 0 else self.size - 1

    def find_knot_interval(self, t):
        """
        Find the nonempty knot interval containing the value 't',
        i.e. knots[k] <= t < knots[k+1] with k limited to the domain spans.
        The end of the domain belongs to the last nonempty span.
        Returns I = k - degree, which is the index of the first basis function
        nonzero in 't'.

        :param t:  float, must be within the domain.
        :return: I
        """
        assert self.domain[0] <= t <= self.domain[1]
        k = int(np.searchsorted(self.knots, t, side='right')) - 1
        k = min(max(k, self.knots_idx_range[0]), self.last_span)
        return k - self.degree

    def fn_supp(self, i_base):
        """
        Support of the base function 'i_base'.
        :param i_base:
        :return: (t_min, t_max)
        """
        return (self.knots[i_base], self.knots[i_base + self.degree + 1])

    def eval(self, i_base, t):
        """
        :param i_base: Index of base function to evaluate.
        :param t: point in which evaluate
        :return: b_i(t)
        """
        assert 0 <= i_base < self.size
        # Close the last nonempty half open interval, clamped curves then interpolate the last pole.
        if i_base == self.last_span and t == self.knots[-1]:
            return 1.0
        return bspline_basis(i_base, self.degree, t, self.knots)

    def eval_all(self, t):
        """
        Values of all basis functions in 't'.
        :return: np array of length 'size'
        """
        return np.array([self.eval(i, t) for i in range(self.size)])

    def eval_vector(self, i_base, t):
        """
        Values of the basis functions i_base, ..., i_base + degree in 't'
        computed by the triangular scheme, without recursion.
        :param i_base: Index of the first basis function nonzero in t, see find_knot_interval.
        :param t: point in which evaluate
        :return: np array of length degree + 1
        """
        span = i_base + self.degree
        values = np.zeros(self.degree + 1)
        left = np.zeros(self.degree + 1)
        right = np.zeros(self.degree + 1)
        values[0] = 1.0
        for j in range(1, self.degree + 1):
            left[j] = t - self.knots[span + 1 - j]
            right[j] = self.knots[span + j] - t
            saved = 0.0
            for r in range(j):
                temp = values[r] / (right[r + 1] + left[j - r])
                values[r] = saved + right[r + 1] * temp
                saved = left[j - r] * temp
            values[j] = saved
        return values
