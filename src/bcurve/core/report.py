from functools import wraps
import logging
import threading
import time

# Nesting level of reported calls, per thread.
__report_state = threading.local()


def report(fn):
    """
    Log the duration of the decorated call, nested calls are indented.
    A failed call is logged as a warning and the exception propagates.
    """
    @wraps(fn)
    def do_report(*args, **kwargs):
        level = getattr(__report_state, 'indent_level', 0)
        indent = (level * 2) * " "
        __report_state.indent_level = level + 1
        init_time = time.perf_counter()
        try:
            result = fn(*args, **kwargs)
        except Exception as e:
            duration = time.perf_counter() - init_time
            logging.warning(f"{indent}FAILED {fn.__module__}.{fn.__qualname__} @ {duration}: {e}")
            raise
        finally:
            __report_state.indent_level = level
        duration = time.perf_counter() - init_time
        logging.info(f"{indent}DONE {fn.__module__}.{fn.__qualname__} @ {duration}")
        return result
    return do_report
