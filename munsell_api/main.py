"""Main FastAPI application"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from munsell_api.core.config import get_settings
from munsell_api.services import munsell_table
from munsell_api.api.routes import colors, exports, munsell, palettes
from munsell_api.models.schemas import HealthResponse

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    print("=" * 50)
    print("Starting Munsell Chart API")
    print("=" * 50)

    # Reference table must be in memory before the first request
    print("\n📚 Loading Munsell reference table...")
    munsell_table.load()
    print(f"✓ {munsell_table.get_count()} hue groups ready")

    print("\n" + "=" * 50)
    print(f"🚀 Server running on {settings.host}:{settings.port}")
    print("=" * 50 + "\n")

    yield

    # Shutdown
    print("\nShutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Munsell chart, palette, contrast and export API",
    lifespan=lifespan
)

# CORS middleware - allow_credentials=False required when using allow_origins=["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(munsell.router, prefix="/api")
app.include_router(palettes.router, prefix="/api")
app.include_router(colors.router, prefix="/api")
app.include_router(exports.router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors, without the validator's internals"""
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort: log and answer with a generic 500"""
    print(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.get("/", response_class=HTMLResponse, tags=["root"])
async def index():
    """Static Munsell chart page"""
    with open(settings.index_file, "r", encoding="utf-8") as f:
        return HTMLResponse(f.read())


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        munsell_loaded=munsell_table.loaded,
        hue_groups=munsell_table.get_count() if munsell_table.loaded else 0,
        total_swatches=munsell_table.get_swatch_count() if munsell_table.loaded else 0
    )


def run():
    import uvicorn
    uvicorn.run(
        "munsell_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
