"""
Constants of the Revocation List 2020 format.
See here for details: https://w3c-ccg.github.io/vc-status-rl-2020/
"""

# bounds of a revocation list size, in kilobytes
MIN_LIST_SIZE = 16
MAX_LIST_SIZE = 128

# Default size of the revocation list (for herd privacy)
DEFAULT_LIST_SIZE = MIN_LIST_SIZE

KILOBYTE = 1024

TYPE_REVOCATION_LIST_2020 = "RevocationList2020"
TYPE_REVOCATION_LIST_2020_CREDENTIAL = "RevocationList2020Credential"
TYPE_REVOCATION_LIST_2020_STATUS = "RevocationList2020status"

# actions for RevocationList2020.update
REVOKE = True
RESET = False
