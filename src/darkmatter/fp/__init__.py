"""Sequencing and dispatch combinators.

- pipe/pipe_async: plain left-to-right composition (exceptions propagate)
- rpipe/result_pipe/rpipe_async: Result-aware pipes (short-circuit, exceptions become Failures)
- cond/rcond: first-match conditional dispatch
"""

from .cond import NO_CONDITIONAL_FOUND, Branch, Conditional, as_conditional, cond, rcond
from .pipe import compose, compose_async, pipe, pipe_async
from .rpipe import rcompose, rcompose_async, result_pipe, rpipe, rpipe_async

__all__ = [
    "pipe", "pipe_async", "compose", "compose_async",
    "rpipe", "result_pipe", "rpipe_async", "rcompose", "rcompose_async",
    "cond", "rcond", "Conditional", "Branch", "as_conditional", "NO_CONDITIONAL_FOUND",
]
