"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from amortizer.api.routes import schedule
from amortizer.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Amortizer",
    description="Loan amortization schedules with rate changes and lump-sum payments",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schedule.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
