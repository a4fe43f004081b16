# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Numeric vector helpers used by the annealing core (numpy arrays, value semantics:
none of these functions modify their inputs), and the sequential executor used
by default for evaluating objective functions.
"""

import numpy as np
import asaopt.common.typing as tp
from asaopt.common import errors


def as_vector(values: tp.ArrayLike, dtype: tp.Any = np.float64, name: str = "vector") -> np.ndarray:
    """Returns a fresh 1D array of the given floating dtype"""
    out = np.array(values, dtype=dtype, copy=True)
    if out.ndim != 1:
        raise errors.AsaValueError(f"{name} must be one-dimensional (got shape {out.shape})")
    return out


def has_zero(x: np.ndarray) -> bool:
    """True if any element is exactly 0"""
    return bool(np.any(x == 0))


def has_nan_or_inf(x: np.ndarray) -> bool:
    return not bool(np.all(np.isfinite(x)))


def is_within(x: np.ndarray, lower: np.ndarray, upper: np.ndarray) -> bool:
    """True if lower <= x <= upper elementwise (NaN values are never within)"""
    return bool(np.all(x >= lower) and np.all(x <= upper))


def as_random_state(seed: tp.Any) -> tp.RandomSource:
    """Converts a seed (None or int) into a np.random.RandomState,
    or returns the provided random source if it already draws uniform samples
    """
    if seed is None or isinstance(seed, (int, np.integer)):
        return np.random.RandomState(seed)
    if not callable(getattr(seed, "random", None)):
        raise errors.AsaTypeError(
            f"random_state must be None, an int seed, or provide a random(size) method (got {type(seed)})"
        )
    return seed  # type: ignore


class DelayedJob:
    """Future-like object which delays computation
    """

    def __init__(self, func: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any) -> None:
        self.func = func
        self.args = args
        self.kwargs = kwargs
        self._result: tp.Optional[tp.Any] = None
        self._computed = False

    def done(self) -> bool:
        return True

    def result(self) -> tp.Any:
        if not self._computed:
            self._result = self.func(*self.args, **self.kwargs)
            self._computed = True
        return self._result


class SequentialExecutor:
    """Executor which run sequentially and locally
    (just calls the function and returns a FinishedJob)
    """

    def submit(self, fn: tp.Callable[..., tp.Any], *args: tp.Any, **kwargs: tp.Any) -> DelayedJob:
        return DelayedJob(fn, *args, **kwargs)
