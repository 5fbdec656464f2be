from datetime import datetime, timedelta, timezone

import pytest

from tracko.services.entity_store import InvalidEntityError


def test_create_then_get_returns_same_record(store, supplier_data):
    supplier = store.suppliers.create(supplier_data)

    assert store.suppliers.get(supplier.id) == supplier
    assert supplier.name == "ABC Trading Co."
    assert supplier.is_active is True
    assert supplier.created_at is not None
    assert supplier.updated_at == supplier.created_at


def test_sequential_supplier_ids_and_list_order(store):
    first = store.suppliers.create({"name": "First"})
    second = store.suppliers.create({"name": "Second"})

    assert (first.id, second.id) == (1, 2)
    assert [s.id for s in store.suppliers.list()] == [1, 2]
    assert [s.name for s in store.suppliers.list()] == ["First", "Second"]


def test_ids_are_not_reused_after_delete(store, delivery_data):
    first = store.deliveries.create(delivery_data)
    second = store.deliveries.create(delivery_data)
    assert store.deliveries.delete(second.id) is True

    third = store.deliveries.create(delivery_data)

    assert third.id > second.id > first.id


def test_unknown_ids(store):
    assert store.suppliers.get(999) is None
    assert store.suppliers.delete(999) is False
    assert store.deliveries.delete(999) is False
    assert store.suppliers.update(999, {"name": "Nobody"}) is None
    assert store.deliveries.update(999, {"status": "delivered"}) is None
    assert store.documents.update(999, {"processing_status": "completed"}) is None
    assert store.whatsapp_messages.update(999, {"processing_status": "completed"}) is None


def test_delete_twice(store):
    supplier = store.suppliers.create({"name": "Temp"})

    assert store.suppliers.delete(supplier.id) is True
    assert store.suppliers.delete(supplier.id) is False
    assert store.suppliers.get(supplier.id) is None


def test_delivery_defaults(store, delivery_data):
    delivery = store.deliveries.create(delivery_data)

    assert delivery.id == 1
    assert delivery.status == "pending"
    assert delivery.source == "manual"
    assert delivery.processing_status == "completed"
    assert delivery.currency == "INR"
    assert delivery.supplier_id is None
    assert delivery.extracted_data is None
    assert delivery.created_at is not None
    assert delivery.updated_at is not None


def test_supplier_performance_defaults(store):
    supplier = store.suppliers.create({"name": "New Co"})

    assert supplier.rating == 0
    assert supplier.on_time_delivery_rate == 0
    assert supplier.communication_quality == 0
    assert supplier.document_accuracy == 0
    assert supplier.cost_competitiveness == 0


def test_empty_update_only_refreshes_timestamp(store, supplier_data, delivery_data):
    supplier = store.suppliers.create(supplier_data)
    delivery = store.deliveries.create(delivery_data)

    updated_supplier = store.suppliers.update(supplier.id, {})
    updated_delivery = store.deliveries.update(delivery.id, {})

    assert updated_supplier.model_dump(exclude={"updated_at"}) == supplier.model_dump(exclude={"updated_at"})
    assert updated_supplier.updated_at >= supplier.updated_at
    assert updated_delivery.model_dump(exclude={"updated_at"}) == delivery.model_dump(exclude={"updated_at"})
    assert updated_delivery.updated_at >= delivery.updated_at


def test_empty_update_leaves_document_unchanged(store):
    document = store.documents.create({
        "file_name": "invoice.pdf",
        "file_type": "application/pdf",
        "document_type": "invoice",
    })

    assert store.documents.update(document.id, {}) == document


def test_partial_update_merges(store, supplier_data):
    supplier = store.suppliers.create(supplier_data)

    updated = store.suppliers.update(supplier.id, {"phone": "+91-9000000000", "email": None})

    assert updated.phone == "+91-9000000000"
    assert updated.email is None
    assert updated.contact_person == "John Smith"
    assert updated.name == supplier.name


def test_create_missing_required_field_names_field(store):
    with pytest.raises(InvalidEntityError) as exc_info:
        store.deliveries.create({"supplier_name": "ABC", "quantity": "5", "unit": "tons"})

    assert exc_info.value.field == "material_type"


def test_create_rejects_empty_supplier_name(store):
    with pytest.raises(InvalidEntityError) as exc_info:
        store.suppliers.create({"name": ""})

    assert exc_info.value.field == "name"


def test_create_rejects_out_of_range_rating(store):
    with pytest.raises(InvalidEntityError) as exc_info:
        store.suppliers.create({"name": "Too Good", "rating": 7})

    assert exc_info.value.field == "rating"


def test_update_rejects_null_required_field(store, supplier_data):
    supplier = store.suppliers.create(supplier_data)

    with pytest.raises(InvalidEntityError) as exc_info:
        store.suppliers.update(supplier.id, {"name": None})

    assert exc_info.value.field == "name"
    assert store.suppliers.get(supplier.id).name == "ABC Trading Co."


def test_update_rejects_unknown_status(store, delivery_data):
    delivery = store.deliveries.create(delivery_data)

    with pytest.raises(InvalidEntityError) as exc_info:
        store.deliveries.update(delivery.id, {"status": "lost"})

    assert exc_info.value.field == "status"


def test_update_ignores_id_and_timestamps_in_payload(store, supplier_data):
    supplier = store.suppliers.create(supplier_data)

    updated = store.suppliers.update(supplier.id, {"id": 42, "created_at": "2020-01-01T00:00:00", "notes": "x"})

    assert updated.id == supplier.id
    assert updated.created_at == supplier.created_at


def test_document_processed_at_set_on_transition_to_completed(store):
    document = store.documents.create({
        "file_name": "receipt.png",
        "file_type": "image/png",
        "document_type": "receipt",
    })
    assert document.processing_status == "processing"
    assert document.processed_at is None

    document = store.documents.update(document.id, {"extracted_text": "partial"})
    assert document.processed_at is None

    document = store.documents.update(document.id, {"processing_status": "error"})
    assert document.processed_at is None

    document = store.documents.update(document.id, {"processing_status": "completed"})
    assert document.processed_at is not None
    assert document.processed_at >= document.uploaded_at

    first_processed_at = document.processed_at
    document = store.documents.update(document.id, {"processing_status": "completed", "confidence": 80})
    assert document.processed_at == first_processed_at


def test_message_processed_at_set_on_transition_to_completed(store):
    message = store.whatsapp_messages.create({
        "sender_id": "u1",
        "sender_name": "ABC",
        "message": "delivered 200 bags of rice",
    })
    assert message.processing_status == "processing"
    assert message.processed_at is None
    assert message.timestamp is not None

    message = store.whatsapp_messages.update(message.id, {"processing_status": "review"})
    assert message.processed_at is None

    message = store.whatsapp_messages.update(message.id, {"processing_status": "completed"})
    assert message.processed_at >= message.timestamp


def test_offset_timestamps_keep_their_instant(store, delivery_data):
    ist = timezone(timedelta(hours=5, minutes=30))
    sent_at = datetime(2024, 12, 15, 10, 0, tzinfo=ist)

    message = store.whatsapp_messages.create({
        "sender_id": "u1",
        "sender_name": "ABC",
        "message": "shipment confirmed",
        "timestamp": sent_at,
    })
    delivery = store.deliveries.create({**delivery_data, "expected_date": sent_at})
    delivery = store.deliveries.update(delivery.id, {"actual_date": sent_at + timedelta(days=1)})

    assert message.timestamp == datetime(2024, 12, 15, 4, 30, tzinfo=timezone.utc)
    assert store.whatsapp_messages.get(message.id).timestamp == sent_at
    assert delivery.expected_date == sent_at
    assert delivery.actual_date == datetime(2024, 12, 16, 4, 30, tzinfo=timezone.utc)
    assert delivery.created_at.tzinfo is not None


def test_naive_timestamps_are_read_as_utc(store, delivery_data):
    delivery = store.deliveries.create({**delivery_data, "expected_date": datetime(2024, 12, 15, 9, 0)})

    assert delivery.expected_date == datetime(2024, 12, 15, 9, 0, tzinfo=timezone.utc)


def test_document_rejects_review_status(store):
    document = store.documents.create({
        "file_name": "contract.pdf",
        "file_type": "application/pdf",
        "document_type": "contract",
    })

    with pytest.raises(InvalidEntityError):
        store.documents.update(document.id, {"processing_status": "review"})


def test_extracted_data_keeps_nested_values(store, delivery_data):
    payload = {"confidence": 0.95, "items": ["steel", {"grade": "A"}], "meta": {"source": "ocr", "pages": 2}}

    delivery = store.deliveries.create({**delivery_data, "extracted_data": payload})

    assert store.deliveries.get(delivery.id).extracted_data == payload


def test_deleting_supplier_leaves_delivery_reference(store, delivery_data):
    supplier = store.suppliers.create({"name": "ABC Trading Co."})
    delivery = store.deliveries.create({**delivery_data, "supplier_id": supplier.id})

    store.suppliers.delete(supplier.id)

    kept = store.deliveries.get(delivery.id)
    assert kept.supplier_id == supplier.id
    assert kept.supplier_name == "ABC Trading Co."


def test_list_filters(store, delivery_data):
    store.deliveries.create({**delivery_data, "status": "delivered", "source": "whatsapp"})
    store.deliveries.create({**delivery_data, "status": "delayed"})
    store.deliveries.create({**delivery_data, "status": "delivered"})

    assert len(store.deliveries.list(status="delivered")) == 2
    assert len(store.deliveries.list(status="delivered", source="whatsapp")) == 1
    assert len(store.deliveries.list(status=None)) == 3


def test_stats_absent_until_first_write(store):
    assert store.stats.get() is None

    stats = store.stats.update({"messages_processed": 10})

    assert stats.messages_processed == 10
    assert stats.documents_processed == 0
    assert store.stats.get() == stats


def test_stats_update_merges_and_refreshes_last_updated(store):
    first = store.stats.update({"messages_processed": 5, "active_suppliers": 3})

    second = store.stats.update({"documents_processed": 2})

    assert second.messages_processed == 5
    assert second.active_suppliers == 3
    assert second.documents_processed == 2
    assert second.last_updated >= first.last_updated


def test_stats_not_derived_from_entities(store, delivery_data):
    store.stats.update({"active_suppliers": 34})
    store.suppliers.create({"name": "Another"})
    store.deliveries.create(delivery_data)

    assert store.stats.get().active_suppliers == 34
