import logging
import random
from time import perf_counter

from lazysort import lazy_sorted, make_adapter
from lazysort.utils import CountingComparator, compare_with_eager, setup_logging

setup_logging(logging.WARNING)

print("\n--- Demo: laziness (no sorting until pulled) ---")
rng = random.Random(7)
data = [rng.randrange(1_000_000) for _ in range(50_000)]
counter = CountingComparator()
smallest = make_adapter(data, cmp=counter, strategy="partition")
print(f"Constructed adapter over {len(data)} items. Comparisons so far: {counter.calls}")

t0 = perf_counter()
first_ten = smallest.take(10)
t1 = perf_counter()
print(f"10 smallest: {first_ten}")
print(f"Comparisons: {counter.calls}, time: {(t1 - t0) * 1000:.2f}ms, remaining: {smallest.remaining}\n")

print("--- Demo: both strategies agree ---")
for strategy in ("heap", "partition"):
    out = make_adapter([5, 3, 8, 1, 9, 2], strategy=strategy).to_list()
    print(f"  {strategy:>9}: {out}")
print()

print("--- Demo: custom ordering ---")
words = ["pear", "fig", "banana", "kiwi", "apple", "cherry"]
print("  by length:", lazy_sorted(words, key=len).take(3))
print("  reversed :", lazy_sorted(words, reverse=True).take(3))
print("  batched  :", list(lazy_sorted(words).batch(4)))
print()

print("--- Demo: prefix cost, lazy vs eager ---")
for k in (1_000, 10_000, 50_000):
    for strategy in ("heap", "partition"):
        r = compare_with_eager(data, k, strategy=strategy)
        print(
            f"  take {k:>6} {strategy:>9}: "
            f"lazy {r['lazy_comparisons']:>8} cmp / {r['lazy_time_ms']:8.2f}ms, "
            f"eager {r['eager_comparisons']:>8} cmp / {r['eager_time_ms']:8.2f}ms"
        )
