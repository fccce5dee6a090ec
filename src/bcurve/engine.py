"""
Engine facade: the set of algorithms of one curve family, the currently selected
algorithm and the single validated entry point 'compute_curve'.

Every engine owns its selection, engines do not share any state.
No internal locking, a concurrent host should use one engine per session.
"""
import logging
from typing import *

from .algorithms import AlgorithmDescriptor, algorithms
from .core.report import report
from .exceptions import CurveComputationError, ValidationError
from .validation import CurveFamily, validate_input, validate_points

DEFAULT_DEGREE = 3
DEFAULT_RESOLUTION = 100


class CurveEngine:

    def __init__(self, family: CurveFamily, algorithm: Optional[str] = None,
                 default_degree: int = DEFAULT_DEGREE, default_resolution: int = DEFAULT_RESOLUTION):
        """
        :param family: CurveFamily of the offered algorithms.
        :param algorithm: Name of the initially selected algorithm, the first registered by default.
        :param default_degree: Degree used when compute_curve gets degree None,
            lowered to (number of points - 1) for short control polygons.
        :param default_resolution: Resolution used when compute_curve gets resolution None.
        """
        self.family = family
        self._algorithms: Tuple[AlgorithmDescriptor, ...] = tuple(algorithms(family))
        if not self._algorithms:
            raise ValueError(f"No algorithms registered for the {family.label} family.")
        self._current = self._algorithms[0]
        if algorithm is not None and not self.select_algorithm(algorithm):
            raise ValueError(f"Unknown {family.label} algorithm: '{algorithm}', "
                             f"available: {self.algorithm_names()}.")
        self.default_degree = default_degree
        self.default_resolution = default_resolution

    def algorithms(self) -> List[AlgorithmDescriptor]:
        return list(self._algorithms)

    def algorithm_names(self) -> List[str]:
        return [a.name for a in self._algorithms]

    def algorithm_descriptions(self) -> List[str]:
        return [a.description for a in self._algorithms]

    def current_algorithm_name(self) -> str:
        return self._current.name

    def current_algorithm_description(self) -> str:
        return self._current.description

    def select_algorithm(self, name: str) -> bool:
        """
        Select algorithm by exact name.
        :return: False for an unknown name, the selection is not changed then.
        """
        for algorithm in self._algorithms:
            if algorithm.name == name:
                self._current = algorithm
                logging.info(f"Selected {self.family.label} algorithm '{name}'.")
                return True
        logging.warning(f"Unknown {self.family.label} algorithm '{name}', keeping '{self._current.name}'.")
        return False

    @report
    def compute_curve(self, points, degree=None, resolution=None):
        """
        Validate the input and compute the curve by the selected algorithm.
        :param points: Sequence of (x, y) control points.
        :param degree: Curve degree, B-spline family only. None for the engine default.
        :param resolution: Number of sampling intervals. None for the engine default.
        :return: (resolution + 1, 2) np array of curve points.
        :raises CurveComputationError: for any failure, the original exception in 'cause'.
        """
        if resolution is None:
            resolution = self.default_resolution
        try:
            points = validate_points(points, self.family)
            if degree is None and self.family.uses_degree:
                degree = max(1, min(self.default_degree, len(points) - 1))
            points, degree, resolution = validate_input(self.family, points, degree, resolution)
        except ValidationError as e:
            raise CurveComputationError(f"Validation failed: {e}", e) from e

        try:
            return self._current.compute(points, degree, resolution)
        except Exception as e:
            raise CurveComputationError(f"Curve computation failed ({self._current.name}): {type(e).__name__}: {e}", e) from e


def make_engine(family: Union[CurveFamily, str], **kwargs) -> CurveEngine:
    if isinstance(family, str):
        family = CurveFamily.from_label(family)
    return CurveEngine(family, **kwargs)


def make_engine_from_config(cfg) -> CurveEngine:
    """
    Create engine from a configuration dictionary (see core.config.load_config):
        family: bspline        # or bezier
        algorithm: NURBS       # optional initial selection
        degree: 3              # optional default degree
        resolution: 100        # optional default resolution
    """
    return make_engine(
        cfg['family'],
        algorithm=cfg.get('algorithm', None),
        default_degree=cfg.get('degree', DEFAULT_DEGREE),
        default_resolution=cfg.get('resolution', DEFAULT_RESOLUTION))
