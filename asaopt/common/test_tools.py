# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from . import testing
from . import tools


def test_registry() -> None:
    functions: tools.Registry[tp.Callable[[], int]] = tools.Registry()
    other: tools.Registry[tp.Callable[[], int]] = tools.Registry()

    @functions.register
    def dummy() -> int:
        return 12

    np.testing.assert_equal(dummy(), 12)
    np.testing.assert_array_equal(list(functions.keys()), ["dummy"])
    np.testing.assert_array_equal(list(other.keys()), [])
    functions.unregister("dummy")
    functions.unregister("other_dummy_that_does_not_exist")
    np.testing.assert_array_equal(list(functions.keys()), [])


def test_registry_error() -> None:
    functions: tools.Registry[tp.Any] = tools.Registry()

    @functions.register
    def dummy() -> int:
        return 12

    np.testing.assert_raises(RuntimeError, functions.register, dummy)
    np.testing.assert_raises(RuntimeError, functions.register_name, "dummy", 12)


def test_registry_missing_key_suggestion() -> None:
    registry: tools.Registry[int] = tools.Registry()
    registry.register_name("sphere", 1)
    registry.register_name("ellipsoid", 2)
    with pytest.raises(KeyError, match="Did you mean"):
        registry["spher"]  # pylint: disable=pointless-statement
    assert registry["sphere"] == 1
    assert len(registry) == 2


class _Configured:
    def __init__(self, a: int = 1, b: str = "x", _c: float = 2.0) -> None:
        self.a = a
        self.b = b
        self._c = _c


@testing.parametrized(
    defaults=({}, {}),
    one_change=({"a": 2}, {"a": 2}),
    private_ignored=({"_c": 3.0}, {}),
    two_changes=({"a": 3, "b": "y"}, {"a": 3, "b": "y"}),
)
def test_different_from_defaults(kwargs: tp.Dict[str, tp.Any], expected: tp.Dict[str, tp.Any]) -> None:
    instance = _Configured(**kwargs)
    output = tools.different_from_defaults(instance=instance, check_mismatches=True)
    np.testing.assert_equal(output, expected)


def test_different_from_defaults_mismatch() -> None:
    instance = _Configured()
    with pytest.raises(RuntimeError, match="Mismatch"):
        tools.different_from_defaults(instance=instance, instance_dict={"a": 1}, check_mismatches=True)
