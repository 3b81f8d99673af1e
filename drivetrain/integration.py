"""
Fixed-step numerical integration
"""

from typing import Callable

import numpy as np

DynamicsFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


def runge_kutta(f: DynamicsFunction, x: np.ndarray, u: np.ndarray, dt: float) -> np.ndarray:
    """
    Advance x by one step of classical 4th-order Runge-Kutta

    The input u is held constant over the step (zero-order hold). No error
    control and no validation: a non-positive dt or non-finite x or u is
    integrated as-is and NaN/Inf values propagate into the result.

    Args:
        f: Dynamics function f(x, u) returning dx/dt
        x: Current state vector
        u: Input vector held over the step
        dt: Time step (s)

    Returns:
        State vector after dt
    """
    half_dt = dt * 0.5

    k1 = f(x, u)
    k2 = f(x + half_dt * k1, u)
    k3 = f(x + half_dt * k2, u)
    k4 = f(x + dt * k3, u)

    return x + dt / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
