"""
BLOCKHTML — FastAPI app
Démarrer : uvicorn blockhtml_server.api.main:app --reload --port 8001
"""
import logging, os
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from blockhtml.router import router as blocks_router

from ..store import ProjectNotFound, ProjectValidationError, StorageIOError, init_store

logging.basicConfig(level=os.getenv("BLOCKHTML_LOG_LEVEL", "INFO").upper(),
                    format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="BlockHTML — Page Builder", version="0.1.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    init_store()


# ── Erreurs → codes HTTP ──

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """Body invalide ou id non numérique → 400 (au lieu du 422 FastAPI)."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(ProjectNotFound)
async def project_not_found(request: Request, exc: ProjectNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ProjectValidationError)
async def project_invalid(request: Request, exc: ProjectValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(StorageIOError)
async def storage_failure(request: Request, exc: StorageIOError):
    log.error("Store indisponible sur %s %s : %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Erreur de stockage"})


# ── CORS preflight sans en-têtes Origin (le middleware gère les vrais preflights) ──

@app.options("/api/{path:path}", include_in_schema=False)
def preflight(path: str):
    return Response(status_code=200)


@app.get("/health")
def health():
    return {"status": "ok", "service": "blockhtml", "version": "0.1.0"}


# ── Routes ──
from .routes import projects

app.include_router(blocks_router)
app.include_router(projects.router)
