#!/usr/bin/env python3
"""Time fuzzymetrics against rapidfuzz and jellyfish, and check cost estimates.

Needs the benchmarks extra::

    pip install fuzzymetrics[benchmarks]
    python examples/benchmarks.py
"""

import random
import string
import timeit

import jellyfish
from rapidfuzz import distance as rf_distance
from rapidfuzz import process as rf_process

import fuzzymetrics as fm

PAIR = ("kitten sitting on the comfortable couch", "sitting kittens on a comfortable sofa")


def per_call_ms(func, number):
    """Best of three runs, in milliseconds per call."""
    return min(timeit.repeat(func, number=number, repeat=3)) / number * 1000


def report(title, timings):
    print(f"\n{title}")
    fastest = min(timings.values())
    for label, ms in sorted(timings.items(), key=lambda item: item[1]):
        print(f"  {label:14s} {ms:10.4f}ms  {ms / fastest:7.1f}x fastest")


def compare_pair(number=2_000):
    a, b = PAIR
    lev, jw = fm.Levenshtein(), fm.JaroWinkler()
    report(
        "Levenshtein distance",
        {
            "fuzzymetrics": per_call_ms(lambda: lev.unnormalized_similarity(a, b), number),
            "rapidfuzz": per_call_ms(lambda: rf_distance.Levenshtein.distance(a, b), number),
            "jellyfish": per_call_ms(lambda: jellyfish.levenshtein_distance(a, b), number),
        },
    )
    report(
        "Jaro-Winkler similarity",
        {
            "fuzzymetrics": per_call_ms(lambda: jw.similarity(a, b), number),
            "rapidfuzz": per_call_ms(lambda: rf_distance.JaroWinkler.similarity(a, b), number),
            "jellyfish": per_call_ms(lambda: jellyfish.jaro_winkler_similarity(a, b), number),
        },
    )


def compare_best_match(count=1_000):
    rng = random.Random(42)
    choices = ["".join(rng.choices(string.ascii_lowercase, k=rng.randint(5, 20))) for _ in range(count)]
    query = "fuzzymatching"
    scorer = rf_distance.Levenshtein.normalized_similarity
    report(
        f"Best match among {count:,} choices",
        {
            "fuzzymetrics": per_call_ms(lambda: fm.best_match(query, choices), 3),
            "rapidfuzz": per_call_ms(lambda: rf_process.extractOne(query, choices, scorer=scorer), 3),
        },
    )


def compare_estimated_cost():
    a = "the quick brown fox jumps over the lazy dog"
    b = "the quick brown cat leaps over the lazy dog"
    print("\nEstimated vs measured cost (ms)")
    for metric in fm.Metric:
        scorer = fm.create_metric(metric)
        measured = min(scorer.measure_cost(a, b) for _ in range(5))
        print(f"  {metric.value:40s} estimated {scorer.estimated_cost(a, b):10.4f}  measured {measured:10.4f}")


if __name__ == "__main__":
    compare_pair()
    compare_best_match()
    compare_estimated_cost()
