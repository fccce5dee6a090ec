"""
Registration table of the curve algorithms.
Every algorithm is a pure function (points, degree, resolution) -> (resolution + 1, 2) array
registered under a unique name within its curve family. Registration order is the order
presented by the engine, the first one is the default.
"""
from dataclasses import dataclass, field
from typing import *

from .validation import CurveFamily
from .bspline import curve as bs_curve
from .bezier import curve as bz_curve

ComputeFn = Callable[..., Any]


@dataclass(frozen=True)
class AlgorithmDescriptor:
    name: str
    description: str
    family: CurveFamily
    compute: ComputeFn = field(compare=False, repr=False)


_registry: Dict[CurveFamily, List[AlgorithmDescriptor]] = {family: [] for family in CurveFamily}


def register(name: str, description: str, family: CurveFamily, compute: ComputeFn) -> AlgorithmDescriptor:
    """
    Add an algorithm to the table. Engines created afterwards offer it.
    """
    if any(a.name == name for a in _registry[family]):
        raise ValueError(f"Algorithm '{name}' already registered for the {family.label} family.")
    descriptor = AlgorithmDescriptor(name, description, family, compute)
    _registry[family].append(descriptor)
    return descriptor


def algorithms(family: CurveFamily) -> List[AlgorithmDescriptor]:
    return list(_registry[family])


register("Uniform B-Spline",
         "Uniform B-Spline - integer knot vector clamped to the curve ends.",
         CurveFamily.BSPLINE, bs_curve.uniform_bspline)
register("Non-Uniform B-Spline",
         "Non-Uniform B-Spline - centripetal knot vector following the control point spacing.",
         CurveFamily.BSPLINE, bs_curve.non_uniform_bspline)
register("NURBS",
         "NURBS - Non-Uniform Rational B-Spline with control point weights.",
         CurveFamily.BSPLINE, bs_curve.nurbs)

register("De Casteljau",
         "De Casteljau - repeated linear interpolation of the control polygon.",
         CurveFamily.BEZIER, bz_curve.de_casteljau)
register("Bernstein Polynomials",
         "Bernstein Polynomials - direct sum of the Bernstein basis polynomials.",
         CurveFamily.BEZIER, bz_curve.bernstein)
register("Linear Interpolation",
         "Linear Interpolation - recursive pairwise interpolation of the control points.",
         CurveFamily.BEZIER, bz_curve.linear_interpolation)
