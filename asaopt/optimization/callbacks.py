# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import time
import logging
import numpy as np
import asaopt.common.typing as tp
from asaopt.common import errors
from . import anneal

global_logger = logging.getLogger(__name__)


class OptimizationPrinter:
    """Printer to register as callback in an optimizer, for printing
    best point regularly.

    Parameters
    ----------
    print_interval_steps: int
        max number of steps before performing another print
    print_interval_seconds: float
        max number of seconds before performing another print
    """

    def __init__(self, print_interval_steps: int = 1, print_interval_seconds: float = 60.0) -> None:
        assert print_interval_steps > 0
        assert print_interval_seconds > 0
        self._print_interval_steps = int(print_interval_steps)
        self._print_interval_seconds = print_interval_seconds
        self._next_step = self._print_interval_steps
        self._next_time = time.time() + print_interval_seconds

    def __call__(self, optimizer: anneal.Anneal, *args: tp.Any, **kwargs: tp.Any) -> None:
        if time.time() >= self._next_time or optimizer.num_steps >= self._next_step:
            self._next_time = time.time() + self._print_interval_seconds
            self._next_step = optimizer.num_steps + self._print_interval_steps
            x, loss = optimizer.recommend()
            print(f"After {optimizer.num_steps} steps, best point is {x} with value {loss}")


class OptimizationLogger:
    """Logger to register as callback in an optimizer, for Logging
    best point regularly.

    Parameters
    ----------
    logger:
        given logger that callback will use to log
    log_level:
        log level that logger will write to
    log_interval_steps: int
        max number of steps before performing another log
    log_interval_seconds:
        max number of seconds before performing another log
    """

    def __init__(
        self,
        *,
        logger: logging.Logger = global_logger,
        log_level: int = logging.INFO,
        log_interval_steps: int = 1,
        log_interval_seconds: float = 60.0,
    ) -> None:
        assert log_interval_steps > 0
        assert log_interval_seconds > 0
        self._logger = logger
        self._log_level = log_level
        self._log_interval_steps = int(log_interval_steps)
        self._log_interval_seconds = log_interval_seconds
        self._next_step = self._log_interval_steps
        self._next_time = time.time() + log_interval_seconds

    def __call__(self, optimizer: anneal.Anneal, *args: tp.Any, **kwargs: tp.Any) -> None:
        if time.time() >= self._next_time or optimizer.num_steps >= self._next_step:
            self._next_time = time.time() + self._log_interval_seconds
            self._next_step = optimizer.num_steps + self._log_interval_steps
            x, loss = optimizer.recommend()
            self._logger.log(
                self._log_level,
                "After %s steps (state: %s), best point is %s with value %s",
                optimizer.num_steps,
                optimizer.state.name,
                x,
                loss,
            )


class ProgressBar:
    """Progress bar to register as callback in an optimizer, counting steps.

    Parameters
    ----------
    total: int or None
        expected number of steps, if known
    """

    def __init__(self, total: tp.Optional[int] = None) -> None:
        self._progress_bar: tp.Any = None
        self._total = total
        self._current = 0

    def __call__(self, optimizer: anneal.Anneal, *args: tp.Any, **kwargs: tp.Any) -> None:
        if self._progress_bar is None:
            # pylint: disable=import-outside-toplevel
            try:
                from tqdm import tqdm  # Inline import to avoid additional dependency
            except ImportError as e:
                raise ImportError(
                    f"{self.__class__.__name__} requires tqdm which is not installed by default "
                    "(pip install tqdm)"
                ) from e
            self._progress_bar = tqdm(total=self._total)
            self._progress_bar.update(self._current)
        self._progress_bar.update(1)
        self._current += 1
        if optimizer.state == anneal.AnnealState.DONE:
            self._progress_bar.close()

    def __getstate__(self) -> tp.Dict[str, tp.Any]:
        """Used for pickling (tqdm is not picklable)"""
        state = dict(self.__dict__)
        state["_progress_bar"] = None
        return state


class EarlyStopping:
    """Callback for stopping the :code:`minimize` method before the algorithm
    stopping criterion is reached.

    Parameters
    ----------
    stopping_criterion: func(optimizer) -> bool
        function that takes the current optimizer as input and returns True
        if the minimization must be stopped

    Note
    ----
    This callback must be register on the "ask" method only.

    Example
    -------
    In the following code, the :code:`minimize` method will be stopped at the 4th step

    >>> early_stopping = asaopt.callbacks.EarlyStopping(lambda opt: opt.num_steps > 3)
    >>> optimizer.register_callback("ask", early_stopping)
    >>> optimizer.minimize(_func, verbosity=2)

    Stopping if the best value is below 12:

    >>> early_stopping = asaopt.callbacks.EarlyStopping(lambda opt: opt.recommend().loss < 12)
    """

    def __init__(self, stopping_criterion: tp.Callable[[anneal.Anneal], bool]) -> None:
        self.stopping_criterion = stopping_criterion

    def __call__(self, optimizer: anneal.Anneal, *args: tp.Any, **kwargs: tp.Any) -> None:
        if args or kwargs:
            raise errors.AsaRuntimeError("EarlyStopping must be registered on ask method")
        if self.stopping_criterion(optimizer):
            raise errors.AsaEarlyStopping("Early stopping criterion is reached")

    @classmethod
    def timer(cls, max_duration: float) -> "EarlyStopping":
        """Early stop when max_duration seconds has been reached (from the first ask)"""
        return cls(_DurationCriterion(max_duration))

    @classmethod
    def no_improvement_stopper(cls, tolerance_window: int) -> "EarlyStopping":
        """Early stop when the best value didn't improve during tolerance_window asks"""
        return cls(_LossImprovementToleranceCriterion(tolerance_window))


class _DurationCriterion:
    def __init__(self, max_duration: float) -> None:
        self._start = float("inf")
        self._max_duration = max_duration

    def __call__(self, optimizer: anneal.Anneal) -> bool:
        if np.isinf(self._start):
            self._start = time.time()
        return time.time() > self._start + self._max_duration


class _LossImprovementToleranceCriterion:
    def __init__(self, tolerance_window: int) -> None:
        self._tolerance_window: int = tolerance_window
        self._best_value: tp.Optional[float] = None
        self._tolerance_count: int = 0

    def __call__(self, optimizer: anneal.Anneal) -> bool:
        best_value = optimizer.f_x_best
        if not optimizer.downhill:
            best_value = -best_value
        if np.isinf(best_value):  # nothing accepted yet
            return False
        if self._best_value is None:
            self._best_value = best_value
            return False
        if self._best_value <= best_value:
            self._tolerance_count += 1
        else:
            self._tolerance_count = 0
            self._best_value = best_value
        return self._tolerance_count > self._tolerance_window
