"""Per-role random streams derived from one scenario seed."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional

#: Namespace shared by every node-placement stream.
NODE_STREAM = "nodes"


class SeedManager:
    """Hands out reproducible ``random.Random`` streams keyed by name.

    Each stream's seed is hashed from the master seed and the stream's key
    parts, so streams never share state. Drivers and passengers draw from
    separate streams: changing the passenger count leaves driver positions
    alone for the same seed.

    Usage:
        rng = SeedManager(42).node_stream("driver")
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Hash the master seed and ``components`` into a 31-bit seed.

        Returns ``None`` without a master seed, which leaves streams
        nondeterministic. Component order is significant.
        """
        if self.master_seed is None:
            return None

        key = ":".join(str(part) for part in (self.master_seed, *components))
        digest = hashlib.sha256(key.encode()).digest()
        return int.from_bytes(digest[:4], byteorder="big") & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Return a fresh ``random.Random`` for the stream named by ``components``."""
        seed = self.derive_seed(*components)
        # Random(None) seeds from system entropy
        return random.Random(seed)

    def node_stream(self, kind: str) -> random.Random:
        """Return the placement stream for one role (``"driver"``/``"passenger"``)."""
        return self.create_random_state(NODE_STREAM, kind)
