from fastapi import APIRouter, Depends, HTTPException, Query, Response
from typing import List, Optional
from tracko.dependencies import get_store, get_ingestion_service
from tracko.schemas.delivery import DeliveryCreate, DeliveryUpdate, DeliveryResponse
from tracko.services.entity_store import EntityStore
from tracko.services.ingestion_service import IngestionService

router = APIRouter(prefix="/api/deliveries", tags=["deliveries"])


@router.get("", response_model=List[DeliveryResponse])
def list_deliveries(
    status: Optional[str] = Query(None, description="Filter by delivery status"),
    source: Optional[str] = Query(None, description="Filter by intake channel"),
    supplier_id: Optional[int] = Query(None, description="Filter by supplier ID"),
    store: EntityStore = Depends(get_store)
):
    """List all deliveries with optional filters"""
    return store.deliveries.list(status=status, source=source, supplier_id=supplier_id)


@router.get("/{delivery_id}", response_model=DeliveryResponse)
def get_delivery(delivery_id: int, store: EntityStore = Depends(get_store)):
    delivery = store.deliveries.get(delivery_id)
    if not delivery:
        raise HTTPException(status_code=404, detail="Delivery not found")
    return delivery


@router.post("", response_model=DeliveryResponse, status_code=201)
def create_delivery(delivery_data: DeliveryCreate, store: EntityStore = Depends(get_store)):
    return store.deliveries.create(delivery_data)


@router.post("/manual", response_model=DeliveryResponse, status_code=201)
def create_manual_delivery(
    delivery_data: DeliveryCreate,
    ingestion: IngestionService = Depends(get_ingestion_service)
):
    """Manual entry form - source is always 'manual'"""
    return ingestion.record_manual_delivery(delivery_data.model_dump())


@router.put("/{delivery_id}", response_model=DeliveryResponse)
def update_delivery(delivery_id: int, delivery_data: DeliveryUpdate, store: EntityStore = Depends(get_store)):
    delivery = store.deliveries.update(delivery_id, delivery_data.model_dump(exclude_unset=True))
    if not delivery:
        raise HTTPException(status_code=404, detail="Delivery not found")
    return delivery


@router.delete("/{delivery_id}", status_code=204)
def delete_delivery(delivery_id: int, store: EntityStore = Depends(get_store)):
    if not store.deliveries.delete(delivery_id):
        raise HTTPException(status_code=404, detail="Delivery not found")
    return Response(status_code=204)
