"""
Input contract checks shared by all curve algorithms and by the engine facade.
Every check raises ValidationError before any sampling is done.
"""
from enum import Enum
import numpy as np

from .exceptions import ValidationError


MIN_POINTS = 2
MAX_DEGREE = 5
MIN_RESOLUTION = 10
MAX_RESOLUTION = 1000

scalar_types = (int, float, np.integer, np.floating)
int_types = (int, np.integer)


class CurveFamily(Enum):
    """
    Curve family with its family specific limits:
    label, maximal number of control points, whether the degree parameter is used.
    """
    BSPLINE = ("bspline", 15, True)
    BEZIER = ("bezier", 10, False)

    def __init__(self, label, max_points, uses_degree):
        self.label = label
        self.max_points = max_points
        self.uses_degree = uses_degree

    @classmethod
    def from_label(cls, label):
        for family in cls:
            if family.label == label:
                return family
        raise ValueError(f"Unknown curve family: '{label}', expected one of {[f.label for f in cls]}.")


def _point_index(idx):
    return idx[0] if idx else None


def check_matrix(mat, shape, values, idx=()):
    '''
    Check shape and type of scalar, vector or matrix.
    :param mat: Scalar, vector, or vector of vectors (i.e. matrix). Vector may be list or other iterable.
    :param shape: List of dimensions: [] for scalar, [ n ] for vector, [n_rows, n_cols] for matrix.
    If a value in this list is None, the dimension can be arbitrary. The shape list is set fo actual dimensions
    of the matrix.
    :param values: Type or tuple of  allowed types of elements of the matrix. E.g. ( int, float )
    :param idx: Internal. Used to pass actual index in the matrix for possible error messages.
    :return: the shape list
    '''
    try:
        if len(shape) == 0:
            if isinstance(mat, bool) or not isinstance(mat, values):
                raise ValidationError("Element at index {} of type {}, expected instance of {}."
                                      .format(list(idx), type(mat), values), _point_index(idx))
        else:
            if shape[0] is None:
                shape[0] = len(mat)
            l = None
            if not hasattr(mat, '__len__'):
                l = 0
            elif len(mat) != shape[0]:
                l = len(mat)
            if l is not None:
                raise ValidationError("Wrong len {} of element {}, should be {}."
                                      .format(l, list(idx), shape[0]), _point_index(idx))
            for i, item in enumerate(mat):
                sub_shape = shape[1:]
                check_matrix(item, sub_shape, values, idx=tuple(idx) + (i,))
                shape[1:] = sub_shape
        return shape
    except ValidationError:
        raise
    except Exception as e:
        raise ValidationError(str(e), _point_index(idx)) from e


def validate_points(points, family):
    """
    Check the control point set and return it as (N, 2) float array.
    :param points: Sequence of (x, y) pairs.
    :param family: CurveFamily, gives the maximal number of points.
    """
    if points is None:
        raise ValidationError("The control point list must not be None.")
    if not hasattr(points, '__len__'):
        try:
            points = list(points)
        except TypeError as e:
            raise ValidationError(f"The control points must be a sequence, got {type(points)}.") from e
    n_points = len(points)
    if n_points < MIN_POINTS:
        raise ValidationError(f"At least {MIN_POINTS} control points are required, got {n_points}.")
    if n_points > family.max_points:
        raise ValidationError(f"At most {family.max_points} control points are allowed "
                              f"for the {family.label} family, got {n_points}.")
    for i, point in enumerate(points):
        if point is None:
            raise ValidationError(f"Control point {i} is None.", index=i)
    check_matrix(points, [None, 2], scalar_types)

    array = np.array(points, dtype=float)
    not_finite = np.flatnonzero(~np.all(np.isfinite(array), axis=1))
    if len(not_finite) > 0:
        i = int(not_finite[0])
        raise ValidationError(f"Control point {i} has non-finite coordinates {tuple(array[i])}.", index=i)
    return array


def validate_degree(degree, n_points):
    if isinstance(degree, bool) or not isinstance(degree, int_types):
        raise ValidationError(f"Degree must be an integer, got {type(degree)}.")
    if degree < 1:
        raise ValidationError(f"Degree must be at least 1, got {degree}.")
    if degree >= n_points:
        raise ValidationError(f"Degree must be less than the number of control points ({n_points}), got {degree}.")
    if degree > MAX_DEGREE:
        raise ValidationError(f"Maximal allowed degree is {MAX_DEGREE}, got {degree}.")
    return int(degree)


def validate_resolution(resolution):
    if isinstance(resolution, bool) or not isinstance(resolution, int_types):
        raise ValidationError(f"Resolution must be an integer, got {type(resolution)}.")
    if resolution < MIN_RESOLUTION:
        raise ValidationError(f"Resolution must be at least {MIN_RESOLUTION}, got {resolution}.")
    if resolution > MAX_RESOLUTION:
        raise ValidationError(f"Maximal resolution is {MAX_RESOLUTION}, got {resolution}.")
    return int(resolution)


def validate_weights(weights, n_points):
    """
    Check NURBS weights: one positive finite weight per control point.
    None gives unit weights.
    """
    if weights is None:
        return np.ones(n_points)
    check_matrix(weights, [n_points], scalar_types)
    weights = np.array(weights, dtype=float)
    for i, w in enumerate(weights):
        if not np.isfinite(w) or w <= 0.0:
            raise ValidationError(f"Weight {i} must be positive and finite, got {w}.", index=i)
    return weights


def validate_input(family, points, degree, resolution):
    """
    Full input check for a curve of given family.
    :return: (points array, degree, resolution); degree is None for families without degree.
    """
    points = validate_points(points, family)
    if family.uses_degree:
        degree = validate_degree(degree, len(points))
    else:
        degree = None
    resolution = validate_resolution(resolution)
    return points, degree, resolution
