"""
Default parameters for the generators, analysis and navigation.

Every function that reads one of these values also accepts it as an argument,
so the constants only decide what happens when the caller says nothing.
"""

# === NAVIGATION ===

SYNC_MAX_STEPS = 500
ANIMATED_MAX_STEPS = 300
DEFAULT_STEP_DELAY_MS = 120

# === KLEINBERG 3D ===

DEFAULT_GRID_SIZE = 8
# 0 = uniform shortcuts, 3 = optimal for a 3D lattice, 6 = very local
DEFAULT_CLUSTERING_EXPONENT = 3

# === RANDOM / WATTS-STROGATZ ===

DEFAULT_RANDOM_NODES = 8
DEFAULT_RANDOM_P = 0.3
DEFAULT_APL_NODES = 12

DEFAULT_WS_NODES = 20
DEFAULT_WS_K = 4
DEFAULT_WS_P = 0.0
# Rewiring gives up after REWIRE_ATTEMPT_FACTOR * n draws.
REWIRE_ATTEMPT_FACTOR = 2

# p above these values switches the regime label
RANDOM_REGIME_P = 0.5
SMALL_WORLD_REGIME_P = 0.01

REGIME_LATTICE = "Regular Lattice"
REGIME_SMALL_WORLD = "Small World"
REGIME_RANDOM = "Random Graph"

# === ATTRIBUTE SIMILARITY ===

DEFAULT_ATTRIBUTE_NODES = 10

ATTRIBUTE_CATEGORIES = {
    "Interests": ["Music", "Sports", "Cooking", "Coding", "Gaming", "Reading", "Art", "Travel"],
    "Location": ["New York", "London", "Tokyo", "Vegas", "Istanbul", "Paris", "Berlin", "Seoul"],
    "Language": ["English", "Spanish", "Turkish", "Japanese", "French", "German", "Chinese", "Russian"],
    "Device": ["iPhone", "Android", "Windows", "MacOS", "Linux", "iPad", "ChromeOS", "XBox"],
}

SECOND_ATTRIBUTE_PROBABILITY = 0.3
SIMILARITY_LINK_THRESHOLD = 0.8
# log10(1) == 0, so attributes seen only once are scored as if seen 1.1 times.
UNIQUE_ATTRIBUTE_FREQUENCY = 1.1

# === OUTPUT ===

SCORE_DECIMALS = 4
