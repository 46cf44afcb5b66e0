from fastapi import FastAPI
from splito.core.config import settings
from splito.core.log_config import setup_logging
from splito.api.v1.routes.system import router as system_router
from splito.api.v1.routes.settlement import router as settlement_router

setup_logging()

app = FastAPI(title=settings.APP_NAME)

@app.get("/")
async def root():
    return {"message": "Splito settlement engine is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(settlement_router, prefix="/api/v1/settlements")
