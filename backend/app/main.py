# backend/app/main.py
"""
FastAPI entry point for the code reviewer backend.

Five POST endpoints under /api, one per operation. Each builds a prompt,
sends it through the shared model gateway and, for the code-only
operations, strips markdown fences from the answer.

Run: uvicorn app.main:app --port 5000   (from backend/)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# ── local modules ─────────────────────────────────────────────────────────────
from app.config import Config
from app.schemas import (
    CodeRequest,
    ComplexityResponse,
    ConvertRequest,
    ConvertResponse,
    DocumentResponse,
    ErrorResponse,
    FixResponse,
    ReviewResponse,
)
from services.errors import GatewayError, ValidationError
from services.model_gateway import ModelGateway, build_gateway
from services.prompt_builder import Operation, build
from services.response_normalizer import normalize

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# used when the gateway error carries no message of its own
FAILURE_MESSAGES = {
    Operation.REVIEW: "Failed to get review from AI model.",
    Operation.FIX: "Failed to get fixed code from AI model.",
    Operation.COMPLEXITY: "Failed to get complexity analysis from AI model.",
    Operation.DOCUMENT: "Failed to generate documentation from AI model.",
    Operation.CONVERT: "Failed to convert code.",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.gateway = build_gateway(
        Config.LLM_PROVIDER, Config.MODEL_NAME, Config.api_key(), Config.TEMPERATURE
    )
    logger.info("code reviewer backend up on port %s (%s)", Config.PORT, Config.LLM_PROVIDER)
    yield
    logger.info("code reviewer backend shutting down")


# ── FastAPI app ───────────────────────────────────────────────────────────────
app = FastAPI(title="AI Code Reviewer API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    try:
        return await call_next(request)
    except Exception as e:
        logger.error("Request error: %s", e, exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ── error mapping ─────────────────────────────────────────────────────────────
@app.exception_handler(ValidationError)
async def on_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def on_bad_body(request: Request, exc: RequestValidationError):
    logger.info("rejected body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object."})


@app.exception_handler(GatewayError)
async def on_gateway_error(request: Request, exc: GatewayError):
    endpoint = request.url.path.rsplit("/", 1)[-1]
    try:
        fallback = FAILURE_MESSAGES[Operation(endpoint)]
    except ValueError:
        fallback = "Failed to get a response from AI model."
    return JSONResponse(status_code=500, content={"error": str(exc) or fallback})


def get_gateway(request: Request) -> ModelGateway:
    """The process-wide gateway built in `lifespan`."""
    return request.app.state.gateway


async def run_operation(
    gateway: ModelGateway,
    operation: Operation,
    code: Optional[str],
    source_language: Optional[str] = None,
    target_language: Optional[str] = None,
) -> str:
    if not code or not code.strip():
        raise ValidationError("Code is required.")

    prompt = build(operation, code, source_language, target_language)
    logger.info("%s: prompt built (%d chars of code)", operation.value, len(code))

    text = await gateway.invoke(prompt)
    return normalize(text) if operation.returns_code else text


# ------------------------------------------------------------------------------
#  /api/*  ── one endpoint per operation
# ------------------------------------------------------------------------------
router = APIRouter(prefix="/api", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


@router.post("/review", response_model=ReviewResponse)
async def review(req: CodeRequest, gateway: ModelGateway = Depends(get_gateway)):
    text = await run_operation(gateway, Operation.REVIEW, req.code)
    return ReviewResponse(review=text)


@router.post("/fix", response_model=FixResponse)
async def fix(req: CodeRequest, gateway: ModelGateway = Depends(get_gateway)):
    text = await run_operation(gateway, Operation.FIX, req.code)
    return FixResponse(fixed_code=text)


@router.post("/complexity", response_model=ComplexityResponse)
async def complexity(req: CodeRequest, gateway: ModelGateway = Depends(get_gateway)):
    text = await run_operation(gateway, Operation.COMPLEXITY, req.code)
    return ComplexityResponse(analysis=text)


@router.post("/document", response_model=DocumentResponse)
async def document(req: CodeRequest, gateway: ModelGateway = Depends(get_gateway)):
    text = await run_operation(gateway, Operation.DOCUMENT, req.code)
    return DocumentResponse(documentation=text)


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest, gateway: ModelGateway = Depends(get_gateway)):
    text = await run_operation(
        gateway, Operation.CONVERT, req.code, req.source_language, req.target_language
    )
    return ConvertResponse(converted_code=text)


app.include_router(router)


@app.get("/")
async def root():
    return {"status": "code reviewer backend up ✨"}


def run():
    import uvicorn

    uvicorn.run(app, host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    run()
