"""
Readiness polling for freshly created or cloned databases

A new database rejects logins until Odoo has finished initializing it, so
readiness is detected by retrying a login at a fixed interval until it
succeeds or the time budget runs out.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

import structlog

from odoo_signup.core.exceptions import AuthenticationFailed, TransportError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Ready:
    """The probe succeeded; uid is the one returned by that first success"""
    uid: int
    attempts: int
    elapsed: float


@dataclass(frozen=True)
class TimedOut:
    """Every probe within the budget failed"""
    attempts: int
    elapsed: float


ReadinessOutcome = Union[Ready, TimedOut]


def wait_until_ready(
    probe: Callable[[], int],
    *,
    timeout: float,
    interval: float,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    log=None,
) -> ReadinessOutcome:
    """
    Call `probe` every `interval` seconds until it returns a uid

    Args:
        probe: Login attempt returning a uid; raises AuthenticationFailed or
            TransportError while the database is not ready
        timeout: Give up once more than this many seconds have elapsed
        interval: Seconds to sleep after a failed attempt
        clock: Monotonic time source
        sleep: Sleep function
        log: structlog logger carrying the caller's context

    Returns:
        Ready(uid) on the first success, TimedOut otherwise
    """
    log = log or logger
    start = clock()
    attempts = 0

    while True:
        elapsed = clock() - start
        if elapsed > timeout:
            log.error("Database polling timeout exceeded", elapsed_seconds=elapsed, attempts=attempts)
            return TimedOut(attempts=attempts, elapsed=elapsed)

        attempts += 1
        log.debug("Checking if database is ready...", elapsed_seconds=elapsed, attempt=attempts)
        try:
            uid = probe()
        except (AuthenticationFailed, TransportError) as e:
            log.debug("Database not ready yet, retrying...", elapsed_seconds=elapsed, error=str(e))
        else:
            log.info("Database is now ready and accessible", elapsed_seconds=elapsed, attempts=attempts)
            return Ready(uid=uid, attempts=attempts, elapsed=elapsed)

        sleep(interval)
