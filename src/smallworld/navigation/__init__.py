"""
Decentralized greedy navigation on a Kleinberg lattice: every hop moves to
the visible neighbour (lattice or shortcut) closest to the target.
"""
