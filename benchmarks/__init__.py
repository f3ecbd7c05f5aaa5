"""Performance benchmarks for linopt.

This package contains microbenchmarks for hot paths in the library,
including gradient steps and coordinate descent sweeps.
"""
