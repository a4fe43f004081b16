# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Deterministic objective functions for exercising the annealing optimizer.
All of them take a 1D array and have their minimum value 0.
"""

import numpy as np
import asaopt.common.typing as tp
from asaopt.common.tools import Registry


registry: Registry[tp.Callable[[np.ndarray], float]] = Registry()


@registry.register
def sphere(x: np.ndarray) -> float:
    """Sum of squares, minimum at 0. Any optimizer should solve it."""
    assert x.ndim == 1
    return float(x.dot(x))


@registry.register
def sphere1(x: np.ndarray) -> float:
    """Sphere with its minimum moved to (1, ..., 1)."""
    return sphere(x - 1.0)


@registry.register
def ellipsoid(x: np.ndarray) -> float:
    """Ill-conditioned quadratic: the weight of each dimension grows from 1 to 1e6,
    so the sensitivities differ widely across dimensions.
    """
    weights = 10 ** np.linspace(0, 6, x.size)
    return float(weights.dot(x ** 2))


@registry.register
def rastrigin(x: np.ndarray) -> float:
    """Multimodal function with a local minimum at each integer point."""
    return float(10 * x.size - 10 * np.sum(np.cos(2 * np.pi * x)) + sphere(x))
