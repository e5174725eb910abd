from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swapkit.api.routers.actions import router as actions_router
from swapkit.api.routers.networks import router as networks_router

app = FastAPI(title="Swap Actions API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(actions_router)
app.include_router(networks_router)


@app.get("/health")
def health():
    return {"status": "ok"}
