# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import asaopt.common.typing as tp
from asaopt.common import errors
from . import utils


class ParameterSpace:
    """Box-constrained search space [lower, upper] in dimension D.

    Parameters
    ----------
    bounds: array-like of shape (D, 2)
        one (min, max) pair per dimension
    dtype: numpy floating dtype
        type of the stored vectors

    Note
    ----
    The bounds are fixed for the lifetime of the instance, and zero-width
    dimensions (min == max) are allowed.
    """

    def __init__(self, bounds: tp.BoundsLike, dtype: tp.Any = np.float64) -> None:
        array = np.array(bounds, dtype=dtype, copy=True)
        if array.ndim != 2 or array.shape[1] != 2 or not array.shape[0]:
            raise errors.InfeasibleBoundsError(f"Bounds must be (min, max) pairs, one per dimension (got shape {array.shape})")
        if utils.has_nan_or_inf(array):
            raise errors.InfeasibleBoundsError(f"Bounds must be finite (got {array.tolist()})")
        inverted = np.nonzero(array[:, 0] > array[:, 1])[0]
        if inverted.size:
            details = ", ".join(f"{i}: [{array[i, 0]}, {array[i, 1]}]" for i in inverted)
            raise errors.InfeasibleBoundsError(f"min > max on dimension(s) {details}")
        self.lower = array[:, 0]
        self.upper = array[:, 1]
        self.width = self.upper - self.lower
        self.mid = (self.upper + self.lower) / 2

    @property
    def dimension(self) -> int:
        return self.lower.size

    @property
    def zero_width_dimensions(self) -> tp.List[int]:
        return np.nonzero(self.width == 0)[0].tolist()  # type: ignore

    def contains(self, x: np.ndarray) -> bool:
        return utils.is_within(x, self.lower, self.upper)

    def check_point(self, x: np.ndarray, name: str = "point") -> None:
        """Raises if the point does not have the space dimension or lies outside of the bounds"""
        if x.shape != (self.dimension,):
            raise errors.InfeasibleBoundsError(
                f"{name} has shape {x.shape} while bounds define a space of dimension {self.dimension}"
            )
        if not self.contains(x):
            outside = np.nonzero(np.logical_or(x < self.lower, x > self.upper))[0].tolist()
            raise errors.InfeasibleBoundsError(f"{name} {x.tolist()} is outside of bounds on dimension(s) {outside}")

    def __repr__(self) -> str:
        return f"ParameterSpace(lower={self.lower.tolist()}, upper={self.upper.tolist()})"
