"""User Endpoints — read-only listing and lookup over the seeded directory.

Invariants:
    - Listing preserves insertion order and count == len(users)
    - Lookup misses (unknown, out-of-range, non-numeric id) all raise UserNotFoundError → 404
"""

from fastapi import Depends

from cicd_sample.api.dependencies import get_user_directory
from cicd_sample.core.user_directory import UserDirectory


async def list_users(directory: UserDirectory = Depends(get_user_directory)):
    """List all seeded users."""
    users = [user.to_dict() for user in directory]
    return {"users": users, "count": len(users)}


async def get_user(
    user_id: str, directory: UserDirectory = Depends(get_user_directory),
):
    """Get one user by id. The id stays a raw string so bad input is a 404, not a 422."""
    return directory.get(user_id).to_dict()
