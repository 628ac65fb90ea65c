from .enums import TileKind

# ============================================================
# STORAGE
# ============================================================
DEFAULT_STORAGE_CAPACITY = 10   # units per storage tile

STORAGE_KINDS = frozenset({
    TileKind.RACK, TileKind.RECEIVE_DEPOT, TileKind.SHIP_DEPOT,
})

# ============================================================
# ROUTING
# ============================================================
TRAVERSABLE_KINDS = frozenset({TileKind.EMPTY})
NODE_ID_SEPARATOR = ","

# (dx, dy) for the 4 axis-aligned neighbours
NEIGHBOR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))

# ============================================================
# LAYOUTS
# ============================================================
LAYOUT_SYMBOLS = {
    ".": TileKind.EMPTY,
    "R": TileKind.RACK,
    "I": TileKind.RECEIVE_DEPOT,
    "O": TileKind.SHIP_DEPOT,
}

# Rows are y (top to bottom), columns are x (left to right)
DEFAULT_LAYOUT = (
    "I..........O",
    "I..........O",
    "............",
    "..RR..RR..RR",
    "............",
    "..RR..RR..RR",
    "............",
    "..RR..RR..RR",
    "............",
)
DEFAULT_NUM_ITEMS = 24
