from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'attempts': 0,
        'attempts_blocked_at_start': 0,
        'attempts_out_of_bounds': 0,
        'rooms_placed': 0,
        'doors_created': 0,
        'retries_remaining': 0,
        'walls': 0,
        'deadends': 0,
        'runtime_ms': 0.0,
    }
