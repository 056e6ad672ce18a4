# app/api/products.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.db.schema import products
from app.models.products import DeleteResult, ErrorOut, ProductIn, ProductOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])

NOT_FOUND = "Product not found"
# Largest value an int4 SERIAL id can hold
MAX_ID = 2**31 - 1


def _row_to_product(row) -> ProductOut:
    return ProductOut(
        id=row["id"],
        name=row["name"],
        price=row["price"],
    )


def _product_columns():
    return select(products.c.id, products.c.name, products.c.price)


@router.get("/products", response_model=List[ProductOut])
def list_products(engine: Engine = Depends(get_engine)) -> List[ProductOut]:
    """
    Return every product, ordered by id.
    """
    with engine.connect() as conn:
        rows = conn.execute(
            _product_columns().order_by(products.c.id)
        ).mappings().all()

    return [_row_to_product(row) for row in rows]


@router.post("/product", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductIn,
    engine: Engine = Depends(get_engine),
) -> ProductOut:
    with engine.begin() as conn:
        result = conn.execute(
            products.insert().values(name=payload.name, price=payload.price)
        )
        product_id = result.inserted_primary_key[0]

    logger.info("Created product id=%s", product_id)
    return ProductOut(id=product_id, name=payload.name, price=payload.price)


@router.get("/product/search", response_model=List[ProductOut])
def search_products(
    name: Optional[str] = Query(
        default=None,
        description="Substring of the product name (case-insensitive)",
    ),
    engine: Engine = Depends(get_engine),
) -> List[ProductOut]:
    """
    Products whose name contains `name`, ignoring case. An empty term is rejected.
    """
    if not name:
        raise HTTPException(status_code=400, detail="Search term 'name' must not be empty")

    with engine.connect() as conn:
        stmt = (
            _product_columns()
            .where(products.c.name.icontains(name, autoescape=True))
            .order_by(products.c.id)
        )
        rows = conn.execute(stmt).mappings().all()

    return [_row_to_product(row) for row in rows]


@router.get("/product/meta/count", response_model=int)
def count_products(engine: Engine = Depends(get_engine)) -> int:
    with engine.connect() as conn:
        stmt = select(func.count()).select_from(products)
        return conn.execute(stmt).scalar_one()


@router.get(
    "/product/{product_id}",
    response_model=ProductOut,
    responses={404: {"model": ErrorOut}},
)
def get_product(
    product_id: int = Path(..., gt=0, le=MAX_ID),
    engine: Engine = Depends(get_engine),
) -> ProductOut:
    """
    Return a single product by ID.
    """
    with engine.connect() as conn:
        row = conn.execute(
            _product_columns().where(products.c.id == product_id)
        ).mappings().first()

    if row is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    return _row_to_product(row)


@router.put("/product/{product_id}", response_model=ProductOut)
def update_product(
    payload: ProductIn,
    product_id: int = Path(..., gt=0, le=MAX_ID),
    engine: Engine = Depends(get_engine),
) -> ProductOut:
    """
    Overwrite name and price of a product. Succeeds even when no row matches.
    """
    with engine.begin() as conn:
        result = conn.execute(
            products.update()
            .where(products.c.id == product_id)
            .values(name=payload.name, price=payload.price)
        )
        matched = result.rowcount

    logger.info("Updated product id=%s (rows matched: %s)", product_id, matched)
    return ProductOut(id=product_id, name=payload.name, price=payload.price)


@router.delete("/product/{product_id}", response_model=DeleteResult)
def delete_product(
    product_id: int = Path(..., gt=0, le=MAX_ID),
    engine: Engine = Depends(get_engine),
) -> DeleteResult:
    with engine.begin() as conn:
        result = conn.execute(
            products.delete().where(products.c.id == product_id)
        )
        matched = result.rowcount

    logger.info("Deleted product id=%s (rows matched: %s)", product_id, matched)
    return DeleteResult()
