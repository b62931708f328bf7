"""
Numerical core: the generic root finder, the local frame reducer, the
catenary strategies and the curve sampler.

Note: This package should be pure Python/NumPy and should NOT import matplotlib.
"""
