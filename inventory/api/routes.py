from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from inventory.infrastructure.db import get_db
from inventory.application.coercion import INT_MIN, INT_MAX
from inventory.application.service import ProductService
from inventory.application.schemas import ProductPayload, ProductRead, AdjustmentRequest

router = APIRouter(prefix="/products", tags=["products"])

# Ids past the integer column range are rejected before reaching the database
ProductId = Path(..., ge=INT_MIN, le=INT_MAX)

@router.get("", response_model=list[ProductRead])
@router.get("/", response_model=list[ProductRead], include_in_schema=False)
def list_products(db: Session = Depends(get_db)):
    return ProductService(db).list()

@router.post("", response_model=ProductRead, status_code=201)
@router.post("/", response_model=ProductRead, status_code=201, include_in_schema=False)
def create_product(payload: ProductPayload, db: Session = Depends(get_db)):
    return ProductService(db).create(payload)

# Registered before the /{product_id} routes so "adjust" is never read as an id
@router.post("/adjust", response_model=ProductRead)
def adjust_stock(payload: AdjustmentRequest, db: Session = Depends(get_db)):
    return ProductService(db).adjust_stock(payload.product_id, payload.adjustment, payload.reason)

@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int = ProductId, db: Session = Depends(get_db)):
    return ProductService(db).get(product_id)

@router.put("/{product_id}", response_model=ProductRead)
def update_product(payload: ProductPayload, product_id: int = ProductId, db: Session = Depends(get_db)):
    return ProductService(db).update(product_id, payload)

@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int = ProductId, db: Session = Depends(get_db)):
    ProductService(db).delete(product_id)
    return Response(status_code=204)
