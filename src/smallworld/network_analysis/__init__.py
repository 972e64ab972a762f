"""
Network analysis algorithms on in-memory graphs:
- BFS shortest paths
- average path length, diameter, radius, eccentricity
- clustering coefficient and small-world statistics
- per-node report tables.
"""
