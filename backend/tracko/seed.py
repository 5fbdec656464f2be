"""
Demo data loaded into a fresh store at startup (SEED_DEMO_DATA=true).
"""
import logging
from datetime import datetime

from tracko.services.entity_store import EntityStore

logger = logging.getLogger(__name__)

SUPPLIERS = [
    {
        "name": "ABC Trading Co.",
        "contact_person": "John Smith",
        "email": "john@abctrading.com",
        "phone": "+91-9876543210",
        "address": "123 Industrial Area, Mumbai",
        "rating": "4.5",
        "on_time_delivery_rate": "87.30",
        "communication_quality": "85.00",
        "document_accuracy": "95.00",
        "cost_competitiveness": "80.00",
        "is_active": True,
    },
    {
        "name": "XYZ Suppliers",
        "contact_person": "Sarah Johnson",
        "email": "sarah@xyzsuppliers.com",
        "phone": "+91-9876543211",
        "address": "456 Business Park, Delhi",
        "rating": "4.2",
        "on_time_delivery_rate": "82.10",
        "communication_quality": "88.00",
        "document_accuracy": "92.00",
        "cost_competitiveness": "85.00",
        "is_active": True,
    },
    {
        "name": "PQR Industries",
        "contact_person": "Mike Wilson",
        "email": "mike@pqrindustries.com",
        "phone": "+91-9876543212",
        "address": "789 Manufacturing Hub, Chennai",
        "rating": "4.8",
        "on_time_delivery_rate": "94.50",
        "communication_quality": "90.00",
        "document_accuracy": "98.00",
        "cost_competitiveness": "78.00",
        "is_active": True,
    },
]

DELIVERIES = [
    {
        "supplier_id": 1,
        "supplier_name": "ABC Trading Co.",
        "material_type": "Raw Steel",
        "quantity": "500",
        "unit": "tons",
        "expected_date": datetime(2024, 12, 15),
        "actual_date": datetime(2024, 12, 15),
        "status": "delivered",
        "invoice_amount": "2500000.00",
        "currency": "INR",
        "delivery_location": "Mumbai Factory",
        "notes": "Delivered on time, quality good",
        "source": "whatsapp",
        "processing_status": "completed",
        "extracted_data": {
            "confidence": 0.95,
            "original_message": "Delivered 500 tons of raw steel to Mumbai factory today at 3pm",
        },
    },
    {
        "supplier_id": 2,
        "supplier_name": "XYZ Suppliers",
        "material_type": "Electronics",
        "quantity": "200",
        "unit": "units",
        "expected_date": datetime(2024, 12, 16),
        "actual_date": datetime(2024, 12, 17),
        "status": "delayed",
        "invoice_amount": "750000.00",
        "currency": "INR",
        "delivery_location": "Delhi Warehouse",
        "notes": "Delayed due to traffic, quality acceptable",
        "source": "whatsapp",
        "processing_status": "review",
        "extracted_data": {
            "confidence": 0.88,
            "original_message": "Shipment delayed due to traffic. Will reach by 5pm",
        },
    },
    {
        "supplier_id": 3,
        "supplier_name": "PQR Industries",
        "material_type": "Textiles",
        "quantity": "1000",
        "unit": "yards",
        "expected_date": datetime(2024, 12, 18),
        "actual_date": None,
        "status": "in-transit",
        "invoice_amount": "500000.00",
        "currency": "INR",
        "delivery_location": "Chennai Plant",
        "notes": "In transit, expected on time",
        "source": "email",
        "processing_status": "completed",
        "extracted_data": {
            "confidence": 0.92,
            "original_message": "Invoice for 1000 yards of textiles",
        },
    },
]

STATS = {
    "messages_processed": 1247,
    "documents_processed": 342,
    "on_time_delivery_rate": "87.30",
    "active_suppliers": 34,
    "time_saved_hours": "3.50",
}


def seed_demo_data(store: EntityStore) -> None:
    """Load demo suppliers, deliveries and stats into an empty store"""
    if store.suppliers.list():
        logger.info("Store already has suppliers, skipping demo data")
        return

    for supplier in SUPPLIERS:
        store.suppliers.create(supplier)
    for delivery in DELIVERIES:
        store.deliveries.create(delivery)
    store.stats.update(STATS)

    logger.info(f"Seeded {len(SUPPLIERS)} suppliers, {len(DELIVERIES)} deliveries and processing stats")
