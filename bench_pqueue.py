import logging
import time
from pathlib import Path

from pqueue.bench.suite import run_suite

# --- Settings ---
TEST_DIR = Path("data/test")
RESULT_DIR = Path("data/result")
CAPACITIES = (16, 64)
ROUNDS = 10_000
TIMEOUT_SECONDS = 100.0


def main():
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    RESULT_DIR.mkdir(parents=True, exist_ok=True)

    files = sorted(TEST_DIR.glob("*.json"))
    if not files:
        print(f"❌ No datasets found in {TEST_DIR} (run generate_test_data.py first)")
        return

    print(f"🚀 Benchmarking {len(files)} datasets x {len(CAPACITIES)} capacities "
          f"(rounds={ROUNDS}, timeout={TIMEOUT_SECONDS}s)...")

    t_global_start = time.perf_counter()
    by_status = run_suite(files, RESULT_DIR, CAPACITIES, rounds=ROUNDS, timeout=TIMEOUT_SECONDS)
    total_time = time.perf_counter() - t_global_start

    print("\n" + "=" * 50)
    print("📊 FINAL REPORT")
    print("=" * 50)
    print(f"⏱️  Global time:     {total_time:.2f} s")
    print(f"✅ OK:              {len(by_status['ok'])}")
    print(f"🐢 Timeout:         {len(by_status['timeout'])}")
    print(f"❌ Exception:       {len(by_status['exception'])}")

    for k in CAPACITIES:
        timings = [r["ns_per_insert"] for r in by_status["ok"]
                   if r["capacity"] == k and r["ns_per_insert"] is not None]
        if timings:
            print(f"📈 k={k:<4d} mean:   {sum(timings) / len(timings):.1f} ns/insert")

    if by_status["timeout"]:
        print("\n🐢 Timeouts:")
        for r in by_status["timeout"][:5]:
            print(f"   - {r['id']} k={r['capacity']} (> {TIMEOUT_SECONDS}s)")

    if by_status["exception"]:
        print("\n🔥 Exceptions:")
        for r in by_status["exception"][:5]:
            print(f"   - {r['id']} k={r['capacity']}")


if __name__ == "__main__":
    main()
