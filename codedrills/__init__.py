"""Algorithm drills: graph, grid, search, greedy, string and combinatorial solvers with a command line front end."""

__version__ = "0.1.0"