from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.routers import ddl_router, json_diff_router, php_router
from devkit import __version__
from devkit.config import API_HOST, API_PORT, CORS_ALLOW_ORIGINS
from devkit.utils.logger import setup_logger

logger = setup_logger("devkit_api")

app = FastAPI(title="Devkit API", version=__version__)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(php_router)
app.include_router(ddl_router)
app.include_router(json_diff_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    logger.info("API 서버 시작: %s:%d", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
