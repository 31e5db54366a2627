"""
Configuration & Global Constants
================================
This module serves as the central registry for tunable defaults.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (seeds, error rates, retry limits)
   scattered throughout the subpackages.
2. Reproducibility: Randomised structures (skip list levels, XOR filter
   seeds) draw their default seed from here, and the seed can be pinned from
   the environment with ``ALGOKIT_SEED``.

Exports:
    DEFAULT_SEED (int): Seed used when the caller does not pass one.
    LOG_LEVEL (str): Default level name for ``python -m algokit``.
    LOG_FORMAT, LOG_DATEFMT (str): Record layout used by ``setup_logging``.
"""
import logging
import os

logger = logging.getLogger(__name__)

ENV_PREFIX = "ALGOKIT_"


def get_env_str(name: str, default: str) -> str:
    """
    Read a string setting from ``ALGOKIT_<name>``.
    """
    return os.environ.get(ENV_PREFIX + name, default)


def get_env_int(name: str, default: int) -> int:
    """
    Read an integer setting from ``ALGOKIT_<name>``.

    Falls back to `default` (with a warning) if the variable is not an integer.
    """
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX + name}={raw!r}: not an integer, using {default}.")
        return default


# Global Constants
DEFAULT_SEED: int = get_env_int("SEED", 42)
LOG_LEVEL: str = get_env_str("LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"

# Probabilistic structures
BLOOM_DEFAULT_ERROR_RATE: float = 0.01
COUNTING_BLOOM_MAX_COUNT: int = 255
XOR_MAX_ATTEMPTS: int = 100
XOR_DEFAULT_FINGERPRINT_BITS: int = 8
MINHASH_DEFAULT_PERMUTATIONS: int = 128
SIMHASH_DEFAULT_BITS: int = 64

# Sorting
COUNTING_SORT_MAX_SPAN: int = 1 << 16
COUNTING_SORT_SPAN_FACTOR: int = 16

# Skip list
SKIP_LIST_MAX_LEVEL: int = 16
SKIP_LIST_P: float = 0.5

# Text chunking
CHUNK_SIZE: int = 1000
CHUNK_OVERLAP: int = 200
