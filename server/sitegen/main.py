from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitegen.api.generate import router as generate_router
from sitegen.utils import config

app = FastAPI(title=config.SERVICE_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.CLIENT_URL],
    allow_credentials=True,
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)
app.include_router(generate_router, prefix="/api/generate")


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "service": config.SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "backend_configured": config.backend_configured(),
        "local_mode": config.LOCAL_MODE,
    }
