"""
Documents Router - upload and simulated OCR
"""
import logging
from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Response, UploadFile

from tracko.dependencies import get_store, get_ingestion_service, get_storage
from tracko.schemas.document import DocumentResponse, DocumentUpdate
from tracko.services.entity_store import EntityStore
from tracko.services.ingestion_service import IngestionService
from tracko.services.storage_service import StorageService, guess_content_type

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])


def content_disposition(file_name: str) -> str:
    """Inline disposition with an ASCII fallback name and the UTF-8 name (RFC 5987)"""
    fallback = "".join(ch for ch in file_name if " " <= ch <= "~" and ch not in '"\\') or "download"
    return f'inline; filename="{fallback}"; filename*=UTF-8\'\'{quote(file_name, safe="")}'


@router.get("", response_model=List[DocumentResponse])
def list_documents(
    processing_status: Optional[str] = Query(None, description="Filter by processing status"),
    document_type: Optional[str] = Query(None, description="Filter by document type"),
    store: EntityStore = Depends(get_store)
):
    """List all documents with optional filters"""
    return store.documents.list(processing_status=processing_status, document_type=document_type)


@router.post("/upload", response_model=DocumentResponse, status_code=201)
async def upload_document(
    file: UploadFile = File(...),
    document_type: str = Form("invoice"),
    delivery_id: Optional[int] = Form(None),
    ingestion: IngestionService = Depends(get_ingestion_service)
):
    """Upload a document file - returned with processing_status 'processing' until OCR finishes"""
    file_content = await file.read()
    filename = file.filename or "upload"
    return ingestion.upload_document(
        filename,
        file_content,
        file.content_type or guess_content_type(filename),
        document_type=document_type,
        delivery_id=delivery_id,
    )


@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(document_id: int, store: EntityStore = Depends(get_store)):
    document = store.documents.get(document_id)
    if not document:
        raise HTTPException(status_code=404, detail="Document not found")
    return document


@router.put("/{document_id}", response_model=DocumentResponse)
def update_document(document_id: int, document_data: DocumentUpdate, store: EntityStore = Depends(get_store)):
    """Correct extracted fields or move the document to review/error by hand"""
    document = store.documents.update(document_id, document_data.model_dump(exclude_unset=True))
    if not document:
        raise HTTPException(status_code=404, detail="Document not found")
    return document


@router.get("/{document_id}/file")
def get_document_file(
    document_id: int,
    store: EntityStore = Depends(get_store),
    storage: StorageService = Depends(get_storage)
):
    """Serve the uploaded file"""
    document = store.documents.get(document_id)
    if not document:
        raise HTTPException(status_code=404, detail="Document not found")
    if not document.file_path:
        raise HTTPException(status_code=404, detail="No file stored for this document")

    try:
        file_content = storage.download_file(document.file_path)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="File not found in storage")

    return Response(
        content=file_content,
        media_type=document.file_type,
        headers={"Content-Disposition": content_disposition(document.file_name)}
    )
