from typing import Any, List, Mapping, Optional
import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from ..models import User
from ..schemas import UserCreate
from ..exceptions import DatabaseError, UserNotFoundError

logger = logging.getLogger(__name__)

async def create_user(db: Session, payload: UserCreate) -> User:
    user = User(**payload.model_dump())
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError("create_user", str(e)) from e
    logger.info(f"Created user {user.id}: {user.full_name}")
    return user

async def find_one(db: Session, where: Mapping[str, Any]) -> Optional[User]:
    """Return the first user matching every key in `where`, or None."""
    try:
        return db.query(User).filter_by(**where).order_by(User.id).first()
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError("find_one", str(e)) from e

async def find_all(db: Session, where: Optional[Mapping[str, Any]] = None) -> List[User]:
    try:
        query = db.query(User)
        if where:
            query = query.filter_by(**where)
        return query.order_by(User.id).all()
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError("find_all", str(e)) from e

async def get_user(db: Session, user_id: int) -> User:
    try:
        user = db.get(User, user_id)
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError("get_user", str(e)) from e
    if user is None:
        raise UserNotFoundError({"id": user_id})
    return user
