"""
Verhoeff Check Digit API Server
FastAPI-based web service for validating and generating Verhoeff check digits
with tables derived from the dihedral group D5.
"""
import os
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, Header, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import AADHAAR_LENGTH
from errors import TableConstructionError
from formatting import format_aadhaar
from logging_config import configure_logging
from reference import compare_tables
from tables import get_tables
from validator import Validator, digit_string

# ============= CONFIGURATION =============
API_KEY = os.getenv("API_KEY", "your-secret-api-key-change-in-production")
API_KEY_HEADER = os.getenv("API_KEY_HEADER", "X-API-Key")
DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"

configure_logging(logging.DEBUG if DEBUG_MODE else logging.INFO)
logger = logging.getLogger(__name__)

# ============= PYDANTIC MODELS =============
class HealthResponse(BaseModel):
    status: str
    tables_ready: bool
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())

class NumberRequest(BaseModel):
    number: str = Field(..., description="Number to check; non-digit characters are ignored")

class ValidationResponse(BaseModel):
    success: bool
    valid: bool
    digits: str
    message: str

class GenerateResponse(BaseModel):
    success: bool
    check_digit: Optional[int] = None
    with_check_digit: str = ""
    message: str

class AadhaarValidateRequest(BaseModel):
    aadhaar_number: str = Field(..., min_length=12, max_length=16, description="Aadhaar number to validate")

class AadhaarValidationResponse(BaseModel):
    success: bool
    valid: bool
    checksum_valid: bool
    formatted_number: str
    message: str

class MismatchModel(BaseModel):
    table: str
    indices: List[int]
    got: str
    expected: str

class SelfTestResponse(BaseModel):
    match: bool
    mismatches: List[MismatchModel] = []

# ============= FASTAPI APP =============
app = FastAPI(
    title="Verhoeff D5 API",
    description="Validate and generate Verhoeff check digits from algebraically derived tables",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Derived lazily on first request
components = {}

def get_components():
    """Derive tables and build the validator once (singleton pattern)."""
    if not components:
        logger.info("Deriving Verhoeff tables...")
        try:
            components['tables'] = get_tables()
            components['validator'] = Validator(components['tables'])
            logger.info("Verhoeff tables ready")
        except TableConstructionError as e:
            logger.error(f"Failed to derive tables: {e}")
            raise
    return components

# ============= API KEY AUTHENTICATION =============
async def verify_api_key(x_api_key: Optional[str] = Header(None, alias=API_KEY_HEADER)):
    """Verify the API key provided in the request header."""
    if not x_api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key is required"
        )
    if x_api_key != API_KEY:
        logger.warning(f"Invalid API key attempt: {x_api_key[:4]}...")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key"
        )
    return x_api_key

# ============= ENDPOINTS =============

@app.get("/api-info", response_model=dict)
async def api_info():
    """API information."""
    return {
        "name": "Verhoeff D5 API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint to verify the tables can be derived."""
    try:
        get_components()
        return HealthResponse(status="healthy", tables_ready=True)
    except TableConstructionError:
        return HealthResponse(status="unhealthy", tables_ready=False)

@app.get("/tables", response_model=dict)
async def tables():
    """The derived D, P and inv tables as plain lists."""
    try:
        return get_components()['tables'].as_dict()
    except TableConstructionError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Table construction failed: {e}"
        )

@app.get("/self-test", response_model=SelfTestResponse)
async def self_test():
    """Compare the derived tables against the published Verhoeff tables."""
    try:
        mismatches = compare_tables(get_components()['tables'])
    except TableConstructionError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Table construction failed: {e}"
        )

    for m in mismatches:
        logger.warning(str(m))

    return SelfTestResponse(
        match=not mismatches,
        mismatches=[
            MismatchModel(table=m.table, indices=list(m.indices), got=str(m.got), expected=str(m.expected))
            for m in mismatches
        ]
    )

@app.post("/validate", response_model=ValidationResponse, dependencies=[Depends(verify_api_key)])
async def validate_number(request: NumberRequest):
    """
    Validate a number whose last digit is a Verhoeff check digit.

    - **number**: digits, optionally with separators (spaces, hyphens)
    """
    digits = digit_string(request.number)
    try:
        is_valid = get_components()['validator'].validate_verhoeff(digits)
    except TableConstructionError as e:
        return ValidationResponse(
            success=False,
            valid=False,
            digits=digits,
            message=f"Validation failed: {str(e)}"
        )

    logger.info(f"Validated {digits}: {is_valid}")
    return ValidationResponse(
        success=True,
        valid=is_valid,
        digits=digits,
        message="Checksum is valid" if is_valid else "Checksum is invalid"
    )

@app.post("/generate", response_model=GenerateResponse, dependencies=[Depends(verify_api_key)])
async def generate_check_digit(request: NumberRequest):
    """
    Compute the check digit to append to a number.

    - **number**: digits, optionally with separators (spaces, hyphens)
    """
    try:
        validator = get_components()['validator']
        check = validator.generate_verhoeff_checksum(request.number)
        completed = validator.append_check_digit(request.number)
    except TableConstructionError as e:
        return GenerateResponse(
            success=False,
            message=f"Generation failed: {str(e)}"
        )

    return GenerateResponse(
        success=True,
        check_digit=check,
        with_check_digit=completed,
        message=f"Check digit is {check}"
    )

@app.post("/validate-aadhaar", response_model=AadhaarValidationResponse, dependencies=[Depends(verify_api_key)])
async def validate_aadhaar_number(request: AadhaarValidateRequest):
    """
    Validate an Aadhaar number using the Verhoeff checksum.

    - **aadhaar_number**: Aadhaar number to validate (can be formatted with spaces)
    """
    clean_number = digit_string(request.aadhaar_number)

    if len(clean_number) != AADHAAR_LENGTH:
        return AadhaarValidationResponse(
            success=True,
            valid=False,
            checksum_valid=False,
            formatted_number="",
            message="Aadhaar number must be exactly 12 digits"
        )

    formatted = format_aadhaar(clean_number)

    try:
        is_valid = get_components()['validator'].validate_verhoeff(clean_number)
    except TableConstructionError as e:
        return AadhaarValidationResponse(
            success=False,
            valid=False,
            checksum_valid=False,
            formatted_number="",
            message=f"Validation failed: {str(e)}"
        )

    return AadhaarValidationResponse(
        success=True,
        valid=is_valid,
        checksum_valid=is_valid,
        formatted_number=formatted,
        message="Aadhaar number is valid" if is_valid else "Aadhaar number has invalid checksum"
    )

# ============= MAIN ENTRY POINT =============
if __name__ == "__main__":
    import uvicorn
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 7860))

    print(f"""
╔══════════════════════════════════════════════════════════╗
║              Verhoeff D5 API Server                       ║
╠══════════════════════════════════════════════════════════╣
║  Server running at: http://{host}:{port}
║  API Documentation: http://{host}:{port}/docs
║  Health Check: http://{host}:{port}/health
╚══════════════════════════════════════════════════════════╝
    """)

    uvicorn.run(app, host=host, port=port)
