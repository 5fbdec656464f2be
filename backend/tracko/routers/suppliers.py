from fastapi import APIRouter, Depends, HTTPException, Query, Response
from typing import List, Optional
from tracko.dependencies import get_store
from tracko.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse
from tracko.services.entity_store import EntityStore

router = APIRouter(prefix="/api/suppliers", tags=["suppliers"])


@router.get("", response_model=List[SupplierResponse])
def list_suppliers(
    is_active: Optional[bool] = Query(None, description="Filter by active flag"),
    store: EntityStore = Depends(get_store)
):
    """List all suppliers"""
    return store.suppliers.list(is_active=is_active)


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(supplier_id: int, store: EntityStore = Depends(get_store)):
    supplier = store.suppliers.get(supplier_id)
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return supplier


@router.post("", response_model=SupplierResponse, status_code=201)
def create_supplier(supplier_data: SupplierCreate, store: EntityStore = Depends(get_store)):
    return store.suppliers.create(supplier_data)


@router.put("/{supplier_id}", response_model=SupplierResponse)
def update_supplier(supplier_id: int, supplier_data: SupplierUpdate, store: EntityStore = Depends(get_store)):
    """Partial update; only the fields present in the body change"""
    supplier = store.suppliers.update(supplier_id, supplier_data.model_dump(exclude_unset=True))
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return supplier


@router.delete("/{supplier_id}", status_code=204)
def delete_supplier(supplier_id: int, store: EntityStore = Depends(get_store)):
    """Delete a supplier. Deliveries that reference it are left as they are."""
    if not store.suppliers.delete(supplier_id):
        raise HTTPException(status_code=404, detail="Supplier not found")
    return Response(status_code=204)
