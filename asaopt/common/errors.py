# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp


# base classes


class AsaError(Exception):
    """Base class for error raised by asaopt"""


class AsaWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class AsaEarlyStopping(StopIteration, AsaError):
    """Stops the minimization loop if raised"""


class AsaRuntimeError(RuntimeError, AsaError):
    """Runtime error raised by asaopt"""


class AsaTypeError(TypeError, AsaError):
    """Type error raised by asaopt"""


class AsaValueError(ValueError, AsaError):
    """Value error raised by asaopt"""


class InfeasibleBoundsError(AsaValueError):
    """Bounds are malformed, or inconsistent with the initial point"""


class InfeasibleSearchSpaceError(AsaRuntimeError):
    """No candidate satisfying the bounds (and the change requirement) could be generated"""


class AnnealStateError(AsaRuntimeError):
    """The optimizer was driven in a way its current state does not allow
    (eg: stepping before init, or without providing the required objective values)
    """


class NonFiniteSensitivityError(AsaRuntimeError):
    """The sensitivity estimate computed while reannealing contains NaN or inf values.
    The search cannot continue since the temperature rescaling would be undefined.

    Parameters
    ----------
    dimensions: sequence of int
        indices of the failing dimensions
    partials: sequence of float
        the full sensitivity estimate
    """

    def __init__(self, dimensions: tp.Sequence[int], partials: tp.Sequence[float]) -> None:
        self.dimensions = list(dimensions)
        self.partials = list(partials)
        super().__init__(
            f"NaN or inf in sensitivity estimate on dimension(s) {self.dimensions} (partials: {self.partials})"
        )


# warnings


class AsaRuntimeWarning(RuntimeWarning, AsaWarning):
    """Runtime warning raised by asaopt"""


class BadLossWarning(AsaRuntimeWarning):
    """Provided loss is unhelpful"""
