"""configcell: deterministic, byte-exact config cell payload generator.

Turns account lists, character sets, record-key namespaces and curated name
sets into size-bounded, hash-bound config cell payloads:
  - blake2b-256 content hashes and account fingerprints
  - deterministic, capacity-bounded sharding of preserved accounts
  - append-only bloom filter with a reproducible byte export
  - witness wrapping with a hard size limit
  - runtime-selected mainnet / testnet profiles
"""

__version__ = "0.3.0"
__description__ = "Deterministic config cell payload generator"

from configcell.core.orchestrator import Orchestrator
from configcell.cli.app import app as cli

__all__ = ["Orchestrator", "cli", "__version__"]
