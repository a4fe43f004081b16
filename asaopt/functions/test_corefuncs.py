# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import numpy as np
from asaopt.common import testing
from asaopt.optimization import Anneal
from . import corefuncs


def test_registry_names() -> None:
    testing.assert_set_equal(corefuncs.registry, ["sphere", "sphere1", "ellipsoid", "rastrigin"])


@testing.parametrized(
    sphere=(corefuncs.sphere, np.zeros(3)),
    sphere1=(corefuncs.sphere1, np.ones(3)),
    ellipsoid=(corefuncs.ellipsoid, np.zeros(3)),
    rastrigin=(corefuncs.rastrigin, np.zeros(3)),
)
def test_minimum(func: tp.Callable[[np.ndarray], float], optimum: np.ndarray) -> None:
    np.testing.assert_almost_equal(func(optimum), 0, decimal=10)
    assert func(optimum + 0.1) > func(optimum)
    assert func(optimum - 0.1) > func(optimum)


@testing.parametrized(
    sphere=(corefuncs.sphere, [1.0, -2.0], 5.0),
    sphere1=(corefuncs.sphere1, [1.0, -2.0], 9.0),
    ellipsoid=(corefuncs.ellipsoid, [1.0, -2.0], 4000001.0),
    rastrigin_integers=(corefuncs.rastrigin, [1.0, -2.0], 5.0),
    rastrigin_halves=(corefuncs.rastrigin, [0.5, 0.5], 40.5),
)
def test_values(func: tp.Callable[[np.ndarray], float], x: tp.List[float], expected: float) -> None:
    np.testing.assert_almost_equal(func(np.array(x)), expected, decimal=8)


@testing.parametrized(**{name: (func,) for name, func in corefuncs.registry.items()})
def test_annealing_improves(func: tp.Callable[[np.ndarray], float]) -> None:
    x0 = np.array([2.2, -1.7])
    opt = Anneal(x0, [(-3, 3), (-3, 3)], random_state=12)
    recommendation = opt.minimize(func, max_steps=200)
    # the initial point is always accepted first, so the best value can only be lower
    assert recommendation.loss <= func(x0)
    assert recommendation.loss == func(recommendation.x)
    testing.assert_within_bounds(recommendation.x, opt.space.lower, opt.space.upper)
