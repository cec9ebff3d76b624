"""
FastAPI app: product catalog gateway for the KYP frontend.
Reads come from Supabase (table `products`, filtered by gender_target).
"""
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from kyp_api.core.config import settings
from kyp_api.models.schemas import ErrorResponse, GenderTarget, ProductList
from kyp_api.services.products_db import ProductsDBService, get_products_db

_LOG_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARNING": logging.WARNING, "ERROR": logging.ERROR}
_level = _LOG_LEVELS.get((settings.LOG_LEVEL or "INFO").upper(), logging.INFO)
logging.basicConfig(level=_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

INVALID_GENDER_TARGET = "Invalid or missing 'gender_target' query parameter. Must be 'wife' or 'husband'."
FETCH_FAILED = "An error occurred while fetching products."
HEALTH_MESSAGE = "KYP Backend API is running!"

app = FastAPI(title=settings.PROJECT_NAME)

# Frontend is served from another origin; every origin is allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def init_backend_client():
    """Create the shared Supabase client before serving traffic."""
    get_products_db()
    logger.info("Server is running on http://localhost:%d", settings.PORT)


@app.get("/", response_class=PlainTextResponse)
def read_root():
    return HEALTH_MESSAGE


@app.get(
    "/api/products",
    response_model=ProductList,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_products(request: Request, db: ProductsDBService = Depends(get_products_db)):
    """Products for the 'wife' or 'husband' game mode, in whatever order Supabase returns them."""
    # A repeated parameter is not a single valid value
    values = request.query_params.getlist("gender_target")
    target = GenderTarget.parse(values[0]) if len(values) == 1 else None
    if target is None:
        return JSONResponse(status_code=400, content={"error": INVALID_GENDER_TARGET})

    try:
        products = db.fetch_by_gender_target(target)
    except Exception as e:
        logger.error("Error fetching products from Supabase: %s", e)
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED})

    return JSONResponse(status_code=200, content=products)
