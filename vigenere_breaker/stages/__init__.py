"""Attack stages, leaves first: frequency → IC → key length → key."""
