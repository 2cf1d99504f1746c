"""Wire literals shared across the codec."""

WILDCARD = "*"

# Principal types that collapse to the bare "*" principal when their only identifier is "*".
WILDCARD_PRINCIPAL_TYPES = frozenset({"AWS", WILDCARD})

DEFAULT_VERSION = "2012-10-17"
