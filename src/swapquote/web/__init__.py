"""Web boundary layer.

All operations in this layer are read-only: quotes are fetched and enriched
for client-side signing, never signed or broadcast here.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
