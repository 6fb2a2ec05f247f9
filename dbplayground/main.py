from fastapi import FastAPI
from .config import settings
from .db import init_db
from .middleware import RequestIDMiddleware
from .routers import users

init_db()

app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(RequestIDMiddleware)

app.include_router(users.router, prefix="/users", tags=["users"])

@app.get("/healthz")
def healthz():
    return {"status": "ok"}
