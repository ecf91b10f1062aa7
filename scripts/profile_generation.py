import os
import sys
import time
from statistics import mean, pstdev

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from roguelike_level.level import LevelBuilder  # noqa: E402

SEEDS = [11, 222, 3333, 4444, 55555, 67890, 72223, 88888, 99999, 123456]
CONFIG = {"width": 81, "height": 61, "room": {"ideal": 60}, "retry": 200, "special": True}


def run():
    runtimes = []
    for s in SEEDS:
        t0 = time.perf_counter()
        outcome = LevelBuilder(dict(CONFIG, seed=s)).build()
        t1 = time.perf_counter()
        rt = (t1 - t0) * 1000
        m = outcome.state.metrics
        status = "ok" if outcome.ok else f"failed:{outcome.failure.which}"
        print(f"seed={s} ms={rt:.1f} rooms={m.get('rooms_placed')} attempts={m.get('attempts')} {status} phases={m.get('phase_ms')}")
        runtimes.append(rt)
    print("\nSummary:")
    print(
        f"count={len(runtimes)} avg_ms={mean(runtimes):.1f} sd_ms={pstdev(runtimes):.1f} min_ms={min(runtimes):.1f} max_ms={max(runtimes):.1f}"
    )


if __name__ == "__main__":
    run()
