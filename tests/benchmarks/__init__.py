"""Benchmarks package — uses pytest-benchmark (``pip install "tollgate[bench]"``).

Files are named ``bench_*.py`` so the default test run skips them. Run with::

    pytest tests/benchmarks/bench_limiter.py -v
    pytest tests/benchmarks/bench_limiter.py -v --benchmark-sort=median
    pytest tests/benchmarks/bench_limiter.py --benchmark-json=results.json
"""
