"""Benchmarks package — uses pytest-benchmark.

Benchmark modules are named ``bench_*.py`` and are not collected by a plain
``pytest`` run.  Run them explicitly::

    pytest tests/benchmarks/bench_logging.py -v
    pytest tests/benchmarks/bench_logging.py -v --benchmark-sort=median

To run as plain functional tests without benchmark overhead::

    pytest tests/benchmarks/bench_logging.py --benchmark-disable
"""
