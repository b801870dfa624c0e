"""Round-trip conversion self-check."""

from tempcast.selfcheck.models import RoundTripResult, SelfCheckReport
from tempcast.selfcheck.runner import SAMPLES, round_trip, run_self_check, verify_self_check

__all__ = [
    "SAMPLES",
    "RoundTripResult",
    "SelfCheckReport",
    "round_trip",
    "run_self_check",
    "verify_self_check",
]
