# -*- coding: utf-8 -*-
"""
General-purpose utilities for netpathstat.

This module provides small helpers for:

- console UX (spinner) with cooperative stop via ``threading.Event``.
- running a computation behind the spinner (`run_with_spinner`).
- compact number formatting (`to_engineering_notation`).
"""

from __future__ import annotations

from typing import Callable, TypeVar
import threading

__all__ = [
    "spinner",
    "run_with_spinner",
    "to_engineering_notation",
]

T = TypeVar("T")


# -----------------------------------------------------------------------------
# Console UX
# -----------------------------------------------------------------------------
def spinner(message: str, stop_event: threading.Event) -> None:
    """
    Display a rotary loading indicator in the console.

    This function creates a spinner animation in the console to indicate progress.
    The animation stops when the ``stop_event`` is set.

    Parameters
    ----------
    message : str
        A message to display alongside the spinner.
    stop_event : threading.Event
        An event used to signal when the spinner should stop. The spinner runs
        indefinitely until the event is set.

    Notes
    -----
    - The spinner runs in a separate thread, allowing other tasks to execute in parallel.
    - The spinner clears its line in the console when it stops.
    """
    import itertools

    for frame in itertools.cycle(["|", "/", "-", "\\"]):
        if stop_event.is_set():
            break
        print(f"\r{message} {frame}", end="", flush=True)
        stop_event.wait(0.5)
    print("\r" + " " * (len(message) + 2), end="\r", flush=True)  # Clear line after spinner stops


def run_with_spinner(message: str, func: Callable[[], T]) -> T:
    """
    Run ``func`` while a spinner thread animates ``message``.

    The spinner is always stopped and joined, also when ``func`` raises.
    """
    stop_event = threading.Event()
    spinner_thread = threading.Thread(target=spinner, args=(message, stop_event))
    spinner_thread.start()
    try:
        return func()
    finally:
        stop_event.set()
        spinner_thread.join()


def to_engineering_notation(number: float | int) -> str:
    """
    Convert a number to engineering notation (multiples of `10^3`).

    Returns a string with the value and the corresponding suffix (e.g., ``"3.2k"``, ``"1.5M"``).
    Available suffixes : `["k", "M", "G", "T", "P"]`

    Parameters
    ----------
    number : float or int
        Numeric value to convert.

    Returns
    -------
    str
        Engineering-notation string.

    Examples
    --------
    >>> to_engineering_notation(13289)
    '13.3k'
    """
    if number == 0:
        return "0"

    suffixes = ["", "k", "M", "G", "T", "P"]
    magnitude = max(0, min(len(suffixes) - 1, int((len(str(int(abs(number)))) - 1) // 3)))
    scaled_number = number / (10 ** (3 * magnitude))
    return f"{scaled_number:.3g}{suffixes[magnitude]}"
