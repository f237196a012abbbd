"""Strongly typed identifiers for registry entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

# Sequential identifiers, assigned by the registry starting at 1
CompetitionId = NewType("CompetitionId", int)
VoteId = NewType("VoteId", int)

# Opaque caller identity (account id or wallet address) from the auth layer
UserId = NewType("UserId", str)
