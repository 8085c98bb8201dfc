import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ..config.settings import configure_logging
from ..engine.errors import LookupFailure, ProductNotFound, UnknownProductType
from ..engine.models import CoverageLevel, Employee, QuoteRequest, SelectedOptions
from .products_api import router as products_router
from .state import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Benefits Pricing API started with %d products", len(engine.catalog))
    yield


app = FastAPI(
    title="Benefits Pricing API",
    description="Employee price quotes for benefits products",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products_router)


class CoverageLevelIn(BaseModel):
    role: str
    coverage: int


class EmployeeIn(BaseModel):
    employee_id: str = ""
    first_name: str = ""
    last_name: str = ""
    salary: Optional[float] = None


class QuoteIn(BaseModel):
    product_id: int
    family_members_to_cover: List[str]
    coverage_level: List[CoverageLevelIn] = []
    employee: Optional[EmployeeIn] = None


@app.get("/")
async def root():
    return {"status": "online", "message": "Benefits Pricing API Active"}


@app.post("/quote")
async def calculate_quote(req: QuoteIn):
    request = QuoteRequest(
        product_id=req.product_id,
        selected_options=SelectedOptions(
            family_members_to_cover=list(req.family_members_to_cover),
            coverage_level=[CoverageLevel(role=c.role, coverage=c.coverage) for c in req.coverage_level],
        ),
        employee=Employee(**req.employee.model_dump()) if req.employee else None,
    )
    try:
        quote = engine.calculate(request)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnknownProductType as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LookupFailure as e:
        raise HTTPException(status_code=422, detail=str(e))
    return jsonable_encoder(quote)


@app.get("/system/status")
async def get_status():
    return {
        "engine_active": True,
        "products_loaded": len(engine.catalog),
        "data_dir": str(engine.settings.data_dir),
    }
