"""Recycle Pro HTTP API."""

from fastapi import FastAPI

from recyclepro.config import settings
from recyclepro.logging_utils import configure_logging
from recyclepro.web.routers import items, location, towns

configure_logging()

app = FastAPI(title="Recycle Pro", root_path=settings.ROOT_PATH)
app.include_router(towns.router)
app.include_router(location.router)
app.include_router(items.router)


@app.get("/healthz")
def healthz():
    return {"ok": True}
