from __future__ import annotations

from typing import List, Optional, Tuple

#: Accumulated path cost. Link weights are non-negative integers.
Cost = int

#: Positional identifier of a link within its Network.
LinkID = int

#: Opaque node name as it appears in the network table.
NodeID = str

#: Ordered link ids from a source node to a destination node.
PathList = List[LinkID]

#: A heap entry: (cost, insertion sequence, node index).
#: The sequence number makes extraction order among equal costs follow
#: insertion order rather than node naming.
QueueEntry = Tuple[Cost, int, int]

#: Marker for "no predecessor recorded" in dense predecessor arrays.
NO_PRED: Optional[LinkID] = None
