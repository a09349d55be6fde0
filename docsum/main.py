from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from docsum.core.config import settings
from docsum.core.logging import setup_logger
from docsum.api.summarize_routes import router as summarize_router
from docsum.api.chat_routes import router as chat_router
from docsum.ingestion import get_supported_formats
from docsum.llm.router import get_provider, is_llm_configured

# Initialize settings and logger
logger = setup_logger(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(summarize_router, tags=["Summarize"])
app.include_router(chat_router, tags=["Chat"])

logger.info(f"{settings.APP_NAME} started in {settings.ENV} environment (LLM provider: {get_provider()})")


@app.get("/health")
def health_check():
    """Health check endpoint with LLM provider status and accepted upload formats."""
    return {
        "status": "ok",
        "supported_formats": get_supported_formats(),
        "llm": {
            "provider": get_provider(),
            "configured": is_llm_configured()
        }
    }
