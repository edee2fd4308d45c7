"""User Schemas — public shape of seeded user records.

Invariants:
    - UserListResponse.count == len(UserListResponse.users)
"""

from pydantic import BaseModel, Field, model_validator


class UserResponse(BaseModel):
    id: int = Field(gt=0)
    name: str
    email: str


class UserListResponse(BaseModel):
    """GET /api/users — full collection in insertion order."""
    users: list[UserResponse]
    count: int

    @model_validator(mode="after")
    def check_count_matches(self) -> "UserListResponse":
        if self.count != len(self.users):
            raise ValueError("count must equal the number of users")
        return self
