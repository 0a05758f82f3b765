from __future__ import annotations

from typing import List

from petstore.models import User

SEED_PASSWORD = "XXXXXXXXXXX"
SEED_PHONE = "123-456-7890"


def make_seed_user(
    id: int,
    username: str,
    first_name: str,
    last_name: str,
    email: str,
    user_status: int,
) -> User:
    """Build a sample user with the masked default password and phone number."""
    return User(
        id=id,
        username=username,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=SEED_PASSWORD,
        phone=SEED_PHONE,
        user_status=user_status,
    )


# Insertion order matters for interoperability checks: active (1), then
# pending (2), then inactive (3).
SEED_USERS: List[User] = [
    make_seed_user(1, "user1", "first name 1", "last name 1", "email1@test.com", 1),
    make_seed_user(4, "user4", "first name 4", "last name 4", "email4@test.com", 1),
    make_seed_user(7, "user7", "first name 7", "last name 7", "email7@test.com", 1),
    make_seed_user(10, "user10", "first name 10", "last name 10", "email10@test.com", 1),
    make_seed_user(11, "user?10", "first name ?10", "last name ?10", "email101@test.com", 1),
    make_seed_user(2, "user2", "first name 2", "last name 2", "email2@test.com", 2),
    make_seed_user(5, "user5", "first name 5", "last name 5", "email5@test.com", 2),
    make_seed_user(8, "user8", "first name 8", "last name 8", "email8@test.com", 2),
    make_seed_user(3, "user3", "first name 3", "last name 3", "email3@test.com", 3),
    make_seed_user(6, "user6", "first name 6", "last name 6", "email6@test.com", 3),
    make_seed_user(9, "user9", "first name 9", "last name 9", "email9@test.com", 3),
]
