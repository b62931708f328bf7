"""
The MODEL layer contains pure data structures: points, caller options,
solved parameters, sampled curves and the conductor catalog.
It has NO knowledge of the solvers or of plotting.
"""
