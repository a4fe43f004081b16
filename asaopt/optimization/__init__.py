# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .anneal import Anneal as Anneal
from .anneal import AnnealState as AnnealState
from .anneal import ConfiguredAnneal as ConfiguredAnneal
from .anneal import registry as registry
from .callbacks import OptimizationPrinter  # to be registered in an optimizer
