from .exceptions import CurveError, ValidationError, CurveComputationError
from .validation import CurveFamily
from .algorithms import AlgorithmDescriptor, register
from .engine import CurveEngine, make_engine, make_engine_from_config

__version__ = '0.1.0'
