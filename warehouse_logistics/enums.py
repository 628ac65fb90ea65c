from enum import Enum


class TileKind(Enum):
    EMPTY         = "empty"           # Open floor - traversable
    RACK          = "rack"            # Long-term storage
    RECEIVE_DEPOT = "receive_depot"   # Inbound items land here
    SHIP_DEPOT    = "ship_depot"      # Outbound items leave from here


class OrderStatus(Enum):
    PENDING  = "pending"
    COMPLETE = "complete"
