"""
Merge benchmark / smoke check.
Runs realistic component class lists through the merger and reports timing
and cache usage. Settings come from STYLE_* variables in .env.
"""
import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")

sys.path.insert(0, str(Path(__file__).parent.parent))

from style_core import ClassificationCache, MergeConfig, StyleMerger, when

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stderr)]
)
logger = logging.getLogger("benchmark_merge")

# Base fragments as components pass them, override last.
SAMPLES = [
    [
        "inline-flex items-center justify-center whitespace-nowrap rounded-md text-sm font-medium ring-offset-background transition-colors",
        "focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-ring focus-visible:ring-offset-2",
        "disabled:pointer-events-none disabled:opacity-50",
        "hover:bg-accent hover:text-accent-foreground h-10 px-4 py-2",
        when(True, "border border-input bg-background shadow-sm"),
        "px-6 rounded-full",
    ],
    [
        "flex flex-col rounded-md border border-input bg-background",
        "focus-within:ring-2 focus-within:ring-ring focus-within:ring-offset-2",
        when(False, "border-destructive ring-destructive/20"),
        when(True, "opacity-50 cursor-not-allowed"),
        "flex-row opacity-75",
    ],
    [
        "fixed left-[50%] top-[50%] z-50 grid w-full max-w-lg translate-x-[-50%] translate-y-[-50%] gap-4 border bg-background p-6 shadow-lg duration-200",
        "data-[state=open]:animate-in data-[state=closed]:animate-out sm:rounded-lg",
        "max-w-2xl p-8 duration-300",
    ],
]


def run(iterations: int) -> int:
    config = MergeConfig.from_env()
    cache = ClassificationCache.from_config(config)
    merger = StyleMerger(config, cache=cache)

    for fragments in SAMPLES:
        print(f"{merger.merge(fragments)}")

    start = time.perf_counter()
    for _ in range(iterations):
        for fragments in SAMPLES:
            merger.merge(fragments)
    elapsed = time.perf_counter() - start

    calls = iterations * len(SAMPLES)
    logger.info(f"{calls} merges in {elapsed * 1000:.1f}ms ({elapsed / calls * 1_000_000:.1f}us/merge)")
    logger.info(f"Cache stats: {cache.stats()}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark class merging")
    parser.add_argument("-n", "--iterations", type=int, default=10_000)
    args = parser.parse_args()
    sys.exit(run(args.iterations))
