"""
Ad-hoc queries against the users table.

`run()` fires a filtered lookup and a full scan side by side and prints what
comes back. `seed()` inserts the sample users the lookups expect to find.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import settings
from .db import SessionLocal
from .exceptions import PlaygroundException, UserNotFoundError
from .models import User
from .schemas import UserCreate, UserOut
from .services.users import create_user, find_all, find_one

logger = logging.getLogger(__name__)

SEED_USERS: Tuple[UserCreate, ...] = (
    UserCreate(first_name="Rome", last_name="Bell", age=33),
    UserCreate(first_name="Brian", last_name="Krabec", age=27),
    UserCreate(first_name="Nick", last_name="Schmitt", age=28),
)

def render_user(user: User) -> Dict[str, Any]:
    return UserOut.model_validate(user).model_dump()

def render_name(user: User) -> str:
    return f"{user.first_name} {user.last_name}"

async def seed(session_factory=SessionLocal, users: Sequence[UserCreate] = SEED_USERS) -> List[User]:
    """Insert each user not already present by first and last name."""
    created = []
    db = session_factory()
    try:
        for payload in users:
            existing = await find_one(db, {"first_name": payload.first_name, "last_name": payload.last_name})
            if existing is not None:
                logger.debug(f"Skipping existing user {existing.full_name}")
                continue
            user = await create_user(db, payload)
            # later commits would expire it
            db.expunge(user)
            print(render_user(user))
            created.append(user)
    finally:
        db.close()
    return created

async def lookup(first_name: Optional[str] = None, session_factory=SessionLocal) -> Optional[Dict[str, Any]]:
    """Print the first user named `first_name`; print the error instead if the lookup fails."""
    where = {"first_name": first_name if first_name is not None else settings.lookup_first_name}
    db = session_factory()
    try:
        user = await find_one(db, where)
        if user is None:
            raise UserNotFoundError(where)
        record = render_user(user)
        print(record)
        return record
    except PlaygroundException as err:
        print(err)
        return None
    finally:
        db.close()

async def list_names(session_factory=SessionLocal) -> List[str]:
    db = session_factory()
    try:
        users = await find_all(db)
    finally:
        db.close()
    names = [render_name(user) for user in users]
    for name in names:
        print(name)
    return names

async def run(first_name: Optional[str] = None, session_factory=SessionLocal) -> Tuple[Optional[Dict[str, Any]], List[str]]:
    """Run the lookup and the full scan concurrently."""
    record, names = await asyncio.gather(
        lookup(first_name, session_factory=session_factory),
        list_names(session_factory=session_factory),
    )
    logger.info(f"Lookup {'found' if record else 'missed'}; listed {len(names)} users")
    return record, names
