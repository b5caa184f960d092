import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from policy_fund.catalog import default_catalog
from policy_fund.config import settings
from policy_fund.routes import funds_router, matching_router

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.app_name,
    description="Matching and classification engine for Korean SME policy funds",
    version=settings.app_version,
    debug=settings.debug
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(matching_router, prefix=settings.api_prefix)
app.include_router(funds_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} is running", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "policy-fund-matcher",
        "funds_loaded": len(default_catalog),
        "catalog_defects": len(default_catalog.defects)
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("policy_fund.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
