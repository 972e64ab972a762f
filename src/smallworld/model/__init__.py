"""
Graph model shared by the generators and the algorithms:
- node variants (plain, attribute, lattice) and edges
- adjacency index built from nodes + edges
- conversion to networkx.
"""
