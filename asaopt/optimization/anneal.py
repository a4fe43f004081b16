# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import enum
import logging
import warnings
from numbers import Real
import numpy as np
import asaopt.common.typing as tp
from asaopt.common import errors
from asaopt.common import tools as asatools
from .space import ParameterSpace
from . import utils

logger = logging.getLogger(__name__)

_AnnealCallBack = tp.Union[tp.Callable[["Anneal"], None], tp.Callable[["Anneal", np.ndarray], None]]


class AnnealState(enum.Enum):
    """What the client code needs to do next"""

    UNINITIALIZED = "uninitialized"
    # call init()
    NEEDS_INIT = "needs-init"
    # transient state inside step(), after a reanneal completion
    NEEDS_STEP = "needs-step"
    # evaluate the objective on x_cand, set f_x_cand, then call step()
    NEEDS_OBJECTIVE = "needs-objective"
    # same as above, and also evaluate the objective on each row of x_set and assign f_x_set
    NEEDS_OBJECTIVE_SET = "needs-objective-set"
    DONE = "done"


TRANSITIONS: tp.Dict[AnnealState, tp.Set[AnnealState]] = {
    AnnealState.UNINITIALIZED: {AnnealState.NEEDS_INIT},
    AnnealState.NEEDS_INIT: {AnnealState.NEEDS_OBJECTIVE},
    AnnealState.NEEDS_OBJECTIVE: {AnnealState.NEEDS_OBJECTIVE, AnnealState.NEEDS_OBJECTIVE_SET, AnnealState.DONE},
    AnnealState.NEEDS_OBJECTIVE_SET: {AnnealState.NEEDS_STEP},
    AnnealState.NEEDS_STEP: {AnnealState.NEEDS_OBJECTIVE, AnnealState.NEEDS_OBJECTIVE_SET, AnnealState.DONE},
    AnnealState.DONE: set(),
}


class Recommendation(tp.NamedTuple):
    x: np.ndarray
    loss: float


class Anneal:  # pylint: disable=too-many-instance-attributes
    """Adaptive Simulated Annealing (ASA), as described in:
    Ingber, L. (1989). Very fast simulated re-annealing.
    Mathematical and Computer Modelling 12, 967-973.

    The optimizer is a state machine driven by client code:

    - construct it with an initial point and bounds, and adapt the tunable attributes if need be,
    - call :code:`init()`,
    - then, until :code:`state` is :code:`AnnealState.DONE`, evaluate the objective function
      on the point(s) requested by the state (:code:`x_cand`, and also the rows of
      :code:`x_set` in :code:`NEEDS_OBJECTIVE_SET` state), provide the values through
      :code:`f_x_cand` and :code:`f_x_set`, and call :code:`step()`.

    :code:`ask()`/:code:`tell(losses)` and :code:`minimize(func)` wrap this protocol.

    Parameters
    ----------
    initial_point: array-like of size D
        starting point of the search, must lie within the bounds
    bounds: array-like of shape (D, 2)
        (min, max) pair for each dimension
    random_state: None, int, np.random.RandomState, np.random.Generator or RandomSource
        source of uniform samples in [0, 1), seeded with the int if one is provided
    dtype: numpy floating dtype
        type of the parameter and temperature vectors

    Note
    ----
    Each instance is meant to perform one single run, and must not be driven by
    several threads at once. The rows of :code:`x_set` can however be evaluated in parallel.
    """

    def __init__(
        self,
        initial_point: tp.ArrayLike,
        bounds: tp.BoundsLike,
        random_state: tp.Any = None,
        dtype: tp.Any = np.float64,
    ) -> None:
        self._state = AnnealState.UNINITIALIZED
        self.dtype = np.dtype(dtype)
        if not np.issubdtype(self.dtype, np.floating):
            raise errors.AsaTypeError(f"dtype must be a real floating type (got {self.dtype})")
        self.name = self.__class__.__name__  # printed name in repr
        # tunable parameters, to be adjusted before calling init()
        self.downhill = True  # set to False to maximize the objective function
        self.temperature_ratio_scale = 1e-5  # m = -log(temperature_ratio_scale)
        self.temperature_anneal_scale = 100.0  # n = log(temperature_anneal_scale)
        self.cost_parameter_scale_ratio = 1.0  # used to compute c_cost
        self.acc_gen_reanneal_ratio = 0.7  # reanneal if accepted vs generated ratio falls below
        self.reanneal_after_steps = 100  # reanneal anyway after this many steps
        self.partials_samples = 2  # number of samples for estimating the sensitivities
        self.f_x_best_repeat_max = 10  # stop after this many repeats of the best objective value
        self.max_generation_trials = 10000  # rejection sampling cap for generating a candidate
        # search space and points
        self.space = ParameterSpace(bounds, dtype=self.dtype)
        x0 = utils.as_vector(initial_point, dtype=self.dtype, name="initial point")
        self.space.check_point(x0, name="initial point")
        self.random_state = utils.as_random_state(random_state)
        dim = self.dimension
        self.x_cand = x0.copy()
        self.x = x0.copy()
        self.x_best = x0.copy()
        self._f_x_cand = 0.0
        self._f_x_cand_provided = False
        self.f_x = 0.0
        self.f_x_best = 0.0
        self.f_x_best_repeats = 0
        self.x_set = np.zeros((0, dim), dtype=self.dtype)
        self._f_x_set = np.zeros(0)
        self._f_x_set_provided = False
        # statistics, all except num_accepted_total are reset after reannealing
        self.num_improved = 0
        self.num_worse = 0
        self.num_worse_accepted = 0
        self.num_accepted = 0
        self.num_accepted_total = 0
        self.num_steps = 0
        self.k = 1  # step count used by the cooling schedule
        self.k_r = 0  # steps since last reanneal
        self.x_hist: tp.List[np.ndarray] = []
        self.f_x_hist: tp.List[float] = []
        # temperatures and control parameters (set by init)
        self.temp = np.ones(dim, dtype=self.dtype)
        self.temp_0 = np.ones(dim, dtype=self.dtype)
        self.temp_cost = np.ones(dim, dtype=self.dtype)
        self.temp_cost_0 = np.ones(dim, dtype=self.dtype)
        self.m = np.zeros(dim, dtype=self.dtype)
        self.n = np.zeros(dim, dtype=self.dtype)
        self.c = np.zeros(dim, dtype=self.dtype)
        self.c_cost = np.zeros(dim, dtype=self.dtype)
        self.partials = np.ones(dim)
        self._temp_f: tp.Optional[np.ndarray] = None
        self._callbacks: tp.Dict[str, tp.List[tp.Any]] = {}
        self._set_state(AnnealState.NEEDS_INIT)

    @property
    def _rng(self) -> tp.RandomSource:
        """Random source the optimizer pulls from. It can be replaced through
        the `random_state` attribute
        """
        return self.random_state

    @property
    def state(self) -> AnnealState:
        """AnnealState: what the client code needs to do next"""
        return self._state

    @property
    def dimension(self) -> int:
        """int: Dimension of the search space."""
        return self.space.dimension

    @property
    def f_x_cand(self) -> float:
        """float: objective value of x_cand, to be set by client code before calling step()"""
        return self._f_x_cand

    @f_x_cand.setter
    def f_x_cand(self, value: float) -> None:
        if not isinstance(value, (Real, float)):
            raise errors.AsaTypeError(f"Objective values must be floats (got {value!r} of type {type(value)})")
        value = float(value)
        if np.isnan(value):
            warnings.warn(f"Objective value is NaN for candidate {self.x_cand}", errors.BadLossWarning)
        self._f_x_cand = value
        self._f_x_cand_provided = True

    @property
    def f_x_set(self) -> np.ndarray:
        """np.ndarray: objective values of the rows of x_set, to be assigned as a whole by client code
        before calling step() in NEEDS_OBJECTIVE_SET state
        """
        return self._f_x_set

    @f_x_set.setter
    def f_x_set(self, values: tp.ArrayLike) -> None:
        try:
            array = np.array(values, dtype=float)
        except (TypeError, ValueError) as e:
            raise errors.AsaTypeError(f"Objective values must be floats (got {values!r})") from e
        if np.any(np.isnan(array)):
            warnings.warn(f"Objective value(s) are NaN for the sensitivity samples: {array}", errors.BadLossWarning)
        self._f_x_set = array
        self._f_x_set_provided = True

    @property
    def temp_f(self) -> np.ndarray:
        """np.ndarray: expected final temperatures (informative only)"""
        self._check_initialized()
        if self._temp_f is None:
            self._temp_f = self.temp_0 * np.exp(-self.m)
        return self._temp_f

    @property
    def k_f(self) -> int:
        """int: expected final step count (informative only)"""
        self._check_initialized()
        return int(np.exp(np.mean(self.n)))

    def __repr__(self) -> str:
        return f"Instance of {self.name}(space={self.space}, state={self._state.name})"

    def register_callback(self, name: str, callback: _AnnealCallBack) -> None:
        """Add a callback method called either when `ask` is called, at the end of each `step`,
        or after each reanneal completion. "ask" and "step" callbacks receive the optimizer,
        "reanneal" callbacks receive the optimizer and the sensitivity estimate.

        Parameters
        ----------
        name: str
            name of the event to register the callback for ("ask", "step" or "reanneal")
        callback: callable
            a callable taking the parameters detailed above
        """
        assert name in ["ask", "step", "reanneal"], f'Only "ask", "step" and "reanneal" events can have callbacks (not {name})'
        self._callbacks.setdefault(name, []).append(callback)

    def remove_all_callbacks(self) -> None:
        """Removes all registered callables"""
        self._callbacks = {}

    def init(self) -> None:
        """Sets up the temperatures and internal parameters. Tunable parameters must be
        set before calling this method.
        """
        if self._state != AnnealState.NEEDS_INIT:
            raise errors.AnnealStateError(f"init() can only be called once, right after construction (state: {self._state.name})")
        self._check_config()
        zero_width = self.space.zero_width_dimensions
        if zero_width:
            raise errors.InfeasibleSearchSpaceError(
                f"Dimension(s) {zero_width} have zero width, they cannot be sampled for sensitivity estimation"
            )
        dim = self.dimension
        self.f_x_best = np.inf if self.downhill else -np.inf
        self.f_x = self.f_x_best
        self._f_x_cand = self.f_x_best
        self._f_x_cand_provided = False
        self.temp_0 = np.ones(dim, dtype=self.dtype)
        self.temp = np.ones(dim, dtype=self.dtype)
        self.m = np.full(dim, -np.log(self.temperature_ratio_scale), dtype=self.dtype)
        self.n = np.full(dim, np.log(self.temperature_anneal_scale), dtype=self.dtype)
        self.c = self.m * np.exp(-self.n / dim)
        self.c_cost = self.c * self.dtype.type(self.cost_parameter_scale_ratio)
        self.temp_cost_0 = self.c_cost.copy()
        self.temp_cost = self.c_cost.copy()
        self._temp_f = None
        self._set_state(AnnealState.NEEDS_OBJECTIVE)
        logger.debug("Expected final k, k_f is %s and final temp, T_f is %s", self.k_f, self.temp_f)

    def step(self) -> None:
        """Advances the algorithm by one step, using the objective value(s) provided
        for the point(s) requested by the current state.
        """
        self._check_can_step()
        self.num_steps += 1
        if self._state == AnnealState.NEEDS_OBJECTIVE_SET:
            self._complete_reanneal()
            self._set_state(AnnealState.NEEDS_STEP)
        if self._stop_check():
            logger.debug("Best objective value %s repeated %s times, stopping", self.f_x_best, self.f_x_best_repeats)
            self._set_state(AnnealState.DONE)
        else:
            self._cooling_schedule()
            self._acceptance_check()
            self._generate_next()
            self.k += 1
            self.k_r += 1
            if self._reanneal_test():
                self._set_state(AnnealState.NEEDS_OBJECTIVE_SET)
            else:
                self._set_state(AnnealState.NEEDS_OBJECTIVE)
        for callback in self._callbacks.get("step", []):
            callback(self)

    def ask(self) -> np.ndarray:
        """Provides the points to evaluate, as a 2D array (one point per row):
        x_cand in NEEDS_OBJECTIVE state, and x_cand followed by the rows of x_set
        in NEEDS_OBJECTIVE_SET state.
        """
        if self._state not in (AnnealState.NEEDS_OBJECTIVE, AnnealState.NEEDS_OBJECTIVE_SET):
            raise errors.AnnealStateError(f"No point to evaluate in state {self._state.name}")
        for callback in self._callbacks.get("ask", []):
            callback(self)
        points = self.x_cand[None, :]
        if self._state == AnnealState.NEEDS_OBJECTIVE_SET:
            points = np.concatenate([points, self.x_set], axis=0)
        return points.copy()

    def tell(self, losses: tp.Loss) -> None:
        """Provides the objective values of the points returned by :code:`ask()`
        (in the same order), and advances the algorithm by one step.
        """
        if self._state not in (AnnealState.NEEDS_OBJECTIVE, AnnealState.NEEDS_OBJECTIVE_SET):
            raise errors.AnnealStateError(f"No objective value expected in state {self._state.name}")
        try:
            values = np.array(losses, dtype=float).ravel()
        except (TypeError, ValueError) as e:
            raise errors.AsaTypeError(f'"tell" only supports float values but received: {losses!r}') from e
        expected = 1 + (self.partials_samples if self._state == AnnealState.NEEDS_OBJECTIVE_SET else 0)
        if values.size != expected:
            raise errors.AnnealStateError(
                f"Expected {expected} objective value(s) in state {self._state.name}, but received {values.size}"
            )
        self.f_x_cand = values[0]
        if expected > 1:
            self.f_x_set = values[1:]
        self.step()

    def recommend(self) -> Recommendation:
        """Provides the best point found so far, along with its objective value"""
        self._check_initialized()
        return Recommendation(self.x_best.copy(), self.f_x_best)

    def minimize(
        self,
        objective_function: tp.Callable[[np.ndarray], tp.FloatLoss],
        executor: tp.Optional[tp.ExecutorLike] = None,
        max_steps: tp.Optional[int] = None,
        verbosity: int = 0,
    ) -> Recommendation:
        """Optimization procedure (despite the name, this maximizes if downhill is False)

        Parameters
        ----------
        objective_function: callable
            A callable taking a point (np.ndarray of size D) and returning a float
        executor: Executor
            An executor object, with method :code:`submit(callable, *args, **kwargs)` and returning a Future-like object
            with method :code:`result() -> float`. This is only useful for evaluating the sensitivity samples
            in parallel, eg: :code:`concurrent.futures.ThreadPoolExecutor`
        max_steps: int/None
            maximum number of steps, in addition to the stopping criterion of the algorithm
        verbosity: int
            print information about the optimization (0: None, 1: objective values, 2: objective values and best point)

        Returns
        -------
        Recommendation
            the best point and its objective value
        """
        if self._state == AnnealState.NEEDS_INIT:
            self.init()
        if executor is None:
            executor = utils.SequentialExecutor()  # defaults to run everything locally and sequentially
        while self._state != AnnealState.DONE:
            if max_steps is not None and self.num_steps >= max_steps:
                if verbosity:
                    print(f"Stopping after {self.num_steps} steps (maximum number of steps reached)")
                break
            try:
                points = self.ask()
            except errors.AsaEarlyStopping:
                break
            jobs = [executor.submit(objective_function, point) for point in points]
            losses = [job.result() for job in jobs]
            if verbosity:
                print(f"Updating with objective value(s) {losses}")
            self.tell(losses)
            if verbosity > 1:
                print(f"Current best is {self.x_best} with value {self.f_x_best}")
        return self.recommend()

    # Internal algorithm methods

    def _set_state(self, state: AnnealState) -> None:
        if state not in TRANSITIONS[self._state]:
            raise errors.AnnealStateError(f"Illegal transition from {self._state.name} to {state.name}")
        self._state = state

    def _check_initialized(self) -> None:
        if self._state in (AnnealState.UNINITIALIZED, AnnealState.NEEDS_INIT):
            raise errors.AnnealStateError("init() must be called first")

    def _check_config(self) -> None:
        if not 0 < self.temperature_ratio_scale < 1:
            raise errors.AsaValueError(f"temperature_ratio_scale must be in ]0, 1[ (got {self.temperature_ratio_scale})")
        for name in ["temperature_anneal_scale", "cost_parameter_scale_ratio"]:
            value = getattr(self, name)
            if not (value > 0 and np.isfinite(value)):
                raise errors.AsaValueError(f"{name} must be strictly positive and finite (got {value})")
        if not (self.acc_gen_reanneal_ratio >= 0 and np.isfinite(self.acc_gen_reanneal_ratio)):
            raise errors.AsaValueError(
                f"acc_gen_reanneal_ratio must be non-negative and finite (got {self.acc_gen_reanneal_ratio})"
            )
        for name in ["reanneal_after_steps", "partials_samples", "f_x_best_repeat_max", "max_generation_trials"]:
            value = getattr(self, name)
            if int(value) != value or value < 1:
                raise errors.AsaValueError(f"{name} must be a strictly positive integer (got {value})")
            setattr(self, name, int(value))

    def _check_can_step(self) -> None:
        self._check_initialized()
        if self._state == AnnealState.DONE:
            raise errors.AnnealStateError("The optimization is already done")
        missing = [] if self._f_x_cand_provided else ["f_x_cand"]
        if self._state == AnnealState.NEEDS_OBJECTIVE_SET:
            if not self._f_x_set_provided:
                missing.append("f_x_set")
            elif self._f_x_set.shape != (self.partials_samples,):
                raise errors.AnnealStateError(
                    f"f_x_set must contain {self.partials_samples} values (got shape {self._f_x_set.shape})"
                )
        if missing:
            raise errors.AnnealStateError(
                f"Objective value(s) {missing} must be provided before calling step() in state {self._state.name}"
            )

    def _generate_parameter(self, x_start: np.ndarray, force_change: bool = False) -> np.ndarray:
        """Generates a point within the bounds, starting from x_start. If force_change is True,
        all the coordinates must differ from those of x_start.
        """
        for _ in range(self.max_generation_trials):
            u = np.asarray(self._rng.random(self.dimension), dtype=self.dtype)
            u2 = np.abs(2 * u - 1)
            sigu = np.sign(u - 0.5)
            y = sigu * self.temp * ((1 / self.temp + 1) ** u2 - 1)
            x_new = x_start + y
            if not self.space.contains(x_new):
                continue
            if force_change and utils.has_zero(x_new - x_start):
                continue
            return x_new
        changing = " while changing all coordinates" if force_change else ""
        raise errors.InfeasibleSearchSpaceError(
            f"Could not generate a point within bounds{changing} after {self.max_generation_trials} trials "
            f"(start: {x_start.tolist()}, temperatures: {self.temp.tolist()})"
        )

    def _generate_next(self) -> None:
        self.x_cand = self._generate_parameter(self.x)

    def _cooling_schedule(self) -> None:
        # temperatures are recomputed from k and num_accepted, so that reannealing impacts them directly
        exponent = 1.0 / self.dimension
        tiny = np.finfo(self.dtype).tiny
        self.temp = np.maximum(self.temp_0 * np.exp(-self.c * self.k ** exponent), tiny)
        self.temp_cost = np.maximum(self.temp_cost_0 * np.exp(-self.c_cost * self.num_accepted ** exponent), tiny)

    def _is_better(self, value: float, reference: float) -> bool:
        return value < reference if self.downhill else value > reference

    def _acceptance_check(self) -> None:
        f_x_cand = self._f_x_cand
        self._f_x_cand_provided = False
        candidate_is_better = self._is_better(f_x_cand, self.f_x)
        if candidate_is_better:
            self.num_improved += 1
        else:
            self.num_worse += 1
        delta = f_x_cand - self.f_x if self.downhill else self.f_x - f_x_cand
        with np.errstate(over="ignore", invalid="ignore"):
            prob = np.exp(-delta / (np.finfo(self.dtype).eps + np.mean(self.temp_cost)))
        accepted = bool(prob > self._rng.random())
        if accepted:
            if not candidate_is_better:
                self.num_worse_accepted += 1
            self.x = self.x_cand.copy()
            self.f_x = f_x_cand
            self.x_hist.append(self.x.copy())
            self.f_x_hist.append(f_x_cand)
            # both tests use the best value from before this acceptance
            previous_best = self.f_x_best
            if f_x_cand == previous_best:
                self.f_x_best_repeats += 1
            if self._is_better(f_x_cand, previous_best):
                self.x_best = self.x_cand.copy()
                self.f_x_best = f_x_cand
                self.f_x_best_repeats = 0
            self.num_accepted += 1
            self.num_accepted_total += 1

    def accepted_vs_generated(self) -> float:
        """Ratio of accepted candidates vs generated candidates since last reanneal
        (1 if no candidate was generated yet)
        """
        num_generated = self.num_improved + self.num_worse
        if not num_generated:
            return 1.0
        return self.num_accepted / num_generated

    def _reanneal_test(self) -> bool:
        """Checks if a reanneal is required, and samples the points of x_set
        for which client code will need to compute the objective values
        """
        if self.k_r < self.reanneal_after_steps and self.accepted_vs_generated() >= self.acc_gen_reanneal_ratio:
            return False
        logger.debug(
            "Reannealing at k=%s after %s steps (accepted vs generated ratio: %s)",
            self.k,
            self.k_r,
            self.accepted_vs_generated(),
        )
        samples = [self._generate_parameter(self.x, force_change=True) for _ in range(self.partials_samples)]
        self.x_set = np.array(samples, dtype=self.dtype)
        self._f_x_set = np.full(self.partials_samples, np.nan)
        self._f_x_set_provided = False
        return True

    def _complete_reanneal(self) -> None:
        """Estimates the sensitivities from f_x_set, and rescales the temperatures and k accordingly"""
        f_x_set = self._f_x_set
        self._f_x_set_provided = False
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            partials = np.mean((f_x_set[:, None] - self.f_x) / (self.x_set - self.x), axis=0)
        if utils.has_nan_or_inf(partials):
            raise errors.NonFiniteSensitivityError(np.nonzero(~np.isfinite(partials))[0].tolist(), partials.tolist())
        self.partials = partials
        if not np.any(partials):
            logger.debug("All sampled objective values are equal, leaving k and temperatures unchanged")
        else:
            s = -self.space.width * partials
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                temp_re = self.temp * (np.max(s) / s)
                k_re = np.mean((np.log(self.temp_0 / temp_re) / self.c) ** self.dimension)
            if utils.has_nan_or_inf(temp_re) or not np.all(temp_re > 0) or not np.isfinite(k_re):
                logger.debug("Cannot update k from rescaled temperatures %s, leaving them unchanged", temp_re)
            else:
                logger.debug("Reanneal: T changes from %s to %s and k from %s to %s", self.temp, temp_re, self.k, k_re)
                self.k = max(1, int(k_re))
                self.temp = temp_re.astype(self.dtype)
        self.reset_stats()
        for callback in self._callbacks.get("reanneal", []):
            callback(self, partials)

    def _stop_check(self) -> bool:
        return self.f_x_best_repeats >= self.f_x_best_repeat_max

    def reset_stats(self) -> None:
        """Resets the statistics used for triggering reanneals
        (the best repeat count, the history and num_accepted_total are kept)
        """
        self.num_improved = 0
        self.num_worse = 0
        self.num_worse_accepted = 0
        self.num_accepted = 0
        self.k_r = 0


# # # # # presets # # # # #


class ConfiguredAnneal:
    """Creates Anneal instances with a preset configuration.

    Parameters
    ----------
    downhill: bool
        whether to minimize (True) or maximize (False) the objective function
    temperature_ratio_scale: float
        related to the expected final temperature, m = -log(temperature_ratio_scale)
    temperature_anneal_scale: float
        related to the expected number of steps, n = log(temperature_anneal_scale)
    cost_parameter_scale_ratio: float
        ratio between the acceptance and generation control parameters
    acc_gen_reanneal_ratio: float
        reanneal if the accepted vs generated ratio falls below this value
    reanneal_after_steps: int
        reanneal anyway after this many steps since the last reanneal
    partials_samples: int
        number of points sampled for estimating the sensitivities
    f_x_best_repeat_max: int
        stop once the best objective value has been found this many more times
    max_generation_trials: int
        maximum number of trials for generating a point within bounds

    Note
    ----
    This provides a default repr which can be bypassed through set_name
    """

    # pylint: disable=unused-argument,too-many-arguments
    def __init__(
        self,
        *,
        downhill: bool = True,
        temperature_ratio_scale: float = 1e-5,
        temperature_anneal_scale: float = 100.0,
        cost_parameter_scale_ratio: float = 1.0,
        acc_gen_reanneal_ratio: float = 0.7,
        reanneal_after_steps: int = 100,
        partials_samples: int = 2,
        f_x_best_repeat_max: int = 10,
        max_generation_trials: int = 10000,
    ) -> None:
        config = dict(locals())
        config.pop("self", None)  # self comes from "locals()"
        config.pop("__class__", None)
        self._config = config
        diff = asatools.different_from_defaults(instance=self, instance_dict=config, check_mismatches=True)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        self.name = f"{self.__class__.__name__}({params})"

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __call__(
        self,
        initial_point: tp.ArrayLike,
        bounds: tp.BoundsLike,
        random_state: tp.Any = None,
        dtype: tp.Any = np.float64,
    ) -> Anneal:
        """Creates an optimizer with this configuration (see Anneal for the parameters)"""
        run = Anneal(initial_point, bounds, random_state=random_state, dtype=dtype)
        for key, value in self._config.items():
            setattr(run, key, value)
        run.name = self.name
        return run

    def __repr__(self) -> str:
        return self.name

    def set_name(self, name: str, register: bool = False) -> "ConfiguredAnneal":
        """Set a new representation for the instance"""
        self.name = name
        if register:
            registry.register_name(name, self)
        return self

    def __eq__(self, other: tp.Any) -> tp.Any:
        if self.__class__ == other.__class__:
            if self._config == other._config:
                return True
        return False


registry: asatools.Registry[ConfiguredAnneal] = asatools.Registry()
ASA = ConfiguredAnneal().set_name("ASA", register=True)
ASAMaximizer = ConfiguredAnneal(downhill=False).set_name("ASAMaximizer", register=True)
