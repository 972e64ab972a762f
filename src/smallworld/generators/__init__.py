"""
Graph generators:
- uniform random graphs (plain and connected)
- Watts-Strogatz ring lattice with rewiring
- 3D Kleinberg lattice with harmonic shortcuts
- attribute graphs for similarity scoring.

Every generator takes an optional `rng` (random.Random); pass a seeded one
for reproducible graphs.
"""
