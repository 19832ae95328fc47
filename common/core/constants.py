from enum import Enum


class Environment(str, Enum):
    """Environment profiles."""

    LOCAL = "local"
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


# Public segment every plugin endpoint lives under
AUTUMN_PUBLIC_SEGMENT = "/autumn/"

# Prefix of the internal billing routes the dispatcher resolves to
AUTUMN_INTERNAL_PREFIX = "/api/autumn"
