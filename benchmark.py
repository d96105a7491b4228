#!/usr/bin/env python3
"""
Benchmark for object rebuilding.

Compares applying several edits one call at a time (one full rebuild per
edit) against a single batched rebuild through a mutate callback.
"""

import json
import statistics
from typing import Any, Dict, List

from json_element import JsonDocument, ObjectRebuilder, PerformanceProfiler


class BenchmarkSuite:
    """Benchmark suite for ObjectRebuilder."""

    def __init__(self, iterations: int = 20):
        """Initialize the benchmark suite."""
        self.iterations = iterations

    def create_test_object(self, size_category: str) -> str:
        """Create test objects of different sizes."""
        if size_category == "small":
            count = 50
        elif size_category == "medium":
            count = 500
        elif size_category == "large":
            count = 5000
        else:
            raise ValueError(f"Unknown size category: {size_category}")

        return json.dumps({
            f"field_{i}": {"id": i, "name": f"Item {i}", "tags": [f"tag_{j}" for j in range(i % 5)]}
            for i in range(count)
        })

    def benchmark_size(self, size_category: str, edits: int = 10) -> Dict[str, Any]:
        """Benchmark per-call against batched edits for one object size."""
        json_text = self.create_test_object(size_category)
        element = JsonDocument.parse(json_text).root_element
        input_size = len(json_text.encode("utf-8"))

        results = {}
        for label in ("per_call", "batched"):
            profiler = PerformanceProfiler()
            rebuilder = ObjectRebuilder(profiler=profiler)
            durations: List[float] = []

            for _ in range(self.iterations):
                before = len(profiler.metrics_history)
                if label == "per_call":
                    result = element
                    for i in range(edits):
                        result = rebuilder.add_property(result, f"extra_{i}", i)
                    result = rebuilder.remove_property(result, "field_0")
                else:
                    def mutate(writer, names_to_remove):
                        for i in range(edits):
                            writer.write_number(f"extra_{i}", i)
                        names_to_remove.append("field_0")
                    result = rebuilder.rebuild(element, mutate)
                durations.append(sum(m.duration for m in profiler.metrics_history[before:]))

            summary = profiler.get_performance_summary()
            results[label] = {
                "rebuilds": summary["total_operations"] // self.iterations,
                "avg_time": statistics.mean(durations),
                "throughput_mbps": (input_size / 1024 / 1024) / statistics.mean(durations),
                "memory_peak_mb": summary["max_memory_peak_mb"],
                "output_props": result.get_property_count(),
            }

        return results

    def print_results(self, results: Dict[str, Any], title: str):
        """Print benchmark results in a formatted table."""
        print(f"\n{title}")
        print("-" * 75)
        columns = ["rebuilds", "avg_time", "throughput_mbps", "memory_peak_mb", "output_props"]
        print(f"{'Mode':<15}" + "".join(f"{col:<15}" for col in columns))
        for mode, data in results.items():
            row = f"{mode:<15}"
            for col in columns:
                value = data[col]
                row += f"{value:<15.4f}" if isinstance(value, float) else f"{value:<15}"
            print(row)

    def run(self):
        """Run the complete benchmark."""
        print("JSON Element Rebuild Benchmark")
        print("=" * 75)
        for size in ("small", "medium", "large"):
            results = self.benchmark_size(size)
            self.print_results(results, f"{size.capitalize()} object, 10 additions + 1 removal")
            speedup = results["per_call"]["avg_time"] / results["batched"]["avg_time"]
            print(f"Batched speedup: {speedup:.1f}x")


def main():
    """Run the benchmark suite."""
    BenchmarkSuite().run()


if __name__ == "__main__":
    main()
