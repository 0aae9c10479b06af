import functools
import logging
import time

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)

_upstream_calls = Counter(
    "upstream_calls_total",
    "Calls to upstream collaborators by outcome",
    ["api", "outcome"],
)

_upstream_latency = Histogram(
    "upstream_call_seconds",
    "Upstream collaborator call latency in seconds",
    ["api"],
)


def _observe(api: str, outcome: str, elapsed: float) -> None:
    try:
        _upstream_calls.labels(api=api, outcome=outcome).inc()
        _upstream_latency.labels(api=api).observe(elapsed)
    except ValueError as e:
        logger.warning("Could not record metric for %s: %s", api, e)


def record(api: str):
    """
    Times a collaborator call and counts its outcome under the given api name.
    The wrapped function's result or exception passes through untouched.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                _observe(api, "error", time.perf_counter() - start)
                raise
            _observe(api, "ok", time.perf_counter() - start)
            return result
        return wrapper
    return decorator
