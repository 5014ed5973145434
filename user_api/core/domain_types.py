"""Domain Types: identity type and the fixed reply messages.

Invariants:
    - UserId is opaque: assigned by storage, never parsed by routes
    - Every envelope message comes from EnvelopeMessage, no ad-hoc strings in routes
"""

from enum import Enum
from typing import NewType


UserId = NewType("UserId", str)


class EnvelopeMessage(str, Enum):
    """Messages carried in the `message` field of the status envelope."""
    FETCHED = "User Data Successfully Fetched"
    SAVED = "User Saved Successfully"
    NOT_FOUND = "User Not Found"
    UPDATED = "User Updated Successfully"
    DELETED = "User Deleted Successfully"
    FETCH_FAILED = "Failed to get data"
    REMOVE_FAILED = "Error in removing User"
