"""
Link prediction scores:
- topological Adamic-Adar index (common neighbours discounted by degree)
- attribute-based Adamic-Adar similarity (Adamic & Adar, 2003).
"""
