from __future__ import annotations
from dotenv import load_dotenv

load_dotenv()

import logging, os

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .auth import require_auth
from .database import init_schema
from .routes import auth_router, companies_router, jobs_router, users_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
log = logging.getLogger("jobly")

app = FastAPI(title="Jobly Data Service", version=__version__)

app.include_router(auth_router)
app.include_router(companies_router)
app.include_router(jobs_router)
app.include_router(users_router)

origins_raw = os.getenv("CORS_ALLOW_ORIGINS", "")
origins = [o.strip() for o in origins_raw.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.on_event("startup")
def _startup():
    init_schema()
    log.info("Jobly %s ready", __version__)


@app.get("/healthz")
def health():
    return {"ok": True, "services": ["companies", "jobs", "users"]}


@app.get("/me")
def me(claims=Depends(require_auth)):
    return {
        "sub": claims["sub"],
        "email": claims.get("email"),
        "roles": claims.get("roles", []),
    }
