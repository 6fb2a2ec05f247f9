from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from ..db import get_db
from ..exceptions import UserNotFoundError, handle_playground_exceptions
from ..schemas import UserCreate, UserOut
from ..services.users import create_user, find_all, find_one, get_user
from ..playground import render_name

router = APIRouter()

@router.post('', response_model=UserOut, status_code=status.HTTP_201_CREATED)
@handle_playground_exceptions
async def create(payload: UserCreate, db: Session = Depends(get_db)):
    return await create_user(db, payload)

@router.get('', response_model=List[UserOut])
@handle_playground_exceptions
async def list_users(first_name: Optional[str] = None, db: Session = Depends(get_db)):
    where = {"first_name": first_name} if first_name is not None else None
    return await find_all(db, where)

@router.get('/lookup', response_model=UserOut)
@handle_playground_exceptions
async def lookup(first_name: str, db: Session = Depends(get_db)):
    where = {"first_name": first_name}
    user = await find_one(db, where)
    if user is None:
        raise UserNotFoundError(where)
    return user

@router.get('/names', response_model=List[str])
@handle_playground_exceptions
async def names(db: Session = Depends(get_db)):
    return [render_name(user) for user in await find_all(db)]

@router.get('/{user_id}', response_model=UserOut)
@handle_playground_exceptions
async def read(user_id: int, db: Session = Depends(get_db)):
    return await get_user(db, user_id)
