import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from api.routers import scan

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Ingredient Scan API",
    description="Ingredient detection and food processing classification for scanned labels",
    version="1.0.0"
)

# Configure CORS for the mobile client - allow all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,  # Must be False when using wildcard origins
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(scan.router)


@app.get("/")
async def root():
    return {"message": "Ingredient Scan API is running", "docs": "/docs"}


@app.get("/api/health")
async def health():
    return {"status": "healthy"}
