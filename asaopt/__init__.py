# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import errors as errors
from .optimization import anneal as optimizers
from .optimization import callbacks as callbacks
from .functions import corefuncs as functions


__all__ = ["optimizers", "callbacks", "functions", "errors", "typing"]


__version__ = "0.1.0"
