class CurveError(Exception):
    pass


class ValidationError(CurveError, ValueError):
    """
    Violated input contract of a curve computation.
    'index' is the index of the offending control point, if any.
    """
    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index


class CurveComputationError(CurveError):
    """
    Single failure type reported by the engine facade.
    The original exception is kept in 'cause' and chained as __cause__.
    """
    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause
