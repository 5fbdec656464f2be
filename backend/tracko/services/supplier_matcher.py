"""
Supplier Matching Service

Links a supplier name pulled out of a message or document to a stored
Supplier using fuzzy string matching.
"""
import difflib
import logging
from typing import Dict, Iterable, Optional

from tracko.schemas.supplier import SupplierResponse

logger = logging.getLogger(__name__)

# Longest first so "Pvt. Ltd." is stripped before " Ltd."
COMPANY_SUFFIXES = [
    ' Private Limited', ' Pvt. Ltd.', ' Pvt Ltd', ' Incorporated', ' Corporation', ' and Company',
    ' Limited', ' Company', ', Inc.', ', Inc', ' Inc.', ' Inc', ', LLC', ' LLC',
    ', Corp.', ', Corp', ' Corp.', ' Corp', ', Ltd.', ', Ltd', ' Ltd.', ' Ltd',
    ' & Co.', ' & Co', ', Co.', ', Co', ' Co.', ' Co',
]


class SupplierMatcher:

    def __init__(self, threshold: float = 0.6):
        self.threshold = threshold

    def match(self, extracted_name: Optional[str], suppliers: Iterable[SupplierResponse]) -> Optional[Dict]:
        """
        Find the stored supplier closest to an extracted name.

        Returns:
            {'supplier_id', 'supplier_name', 'confidence'} or None when no
            supplier scores at or above the threshold
        """
        normalized_extracted = self.normalize(extracted_name or '').lower()
        if not normalized_extracted:
            return None

        best_match = None
        best_score = 0.0

        for supplier in suppliers:
            normalized_supplier = self.normalize(supplier.name).lower()
            score = difflib.SequenceMatcher(None, normalized_extracted, normalized_supplier).ratio()
            if score > best_score:
                best_score = score
                best_match = supplier

        if best_match and best_score >= self.threshold:
            logger.info(f"Matched '{extracted_name}' to supplier {best_match.id} ({best_score:.0%})")
            return {
                'supplier_id': best_match.id,
                'supplier_name': best_match.name,
                'confidence': round(best_score, 2),
            }

        logger.info(f"No supplier match for '{extracted_name}'")
        return None

    @staticmethod
    def normalize(name: str) -> str:
        """Strip common company suffixes and collapse whitespace"""
        if not name:
            return ''

        normalized = ' '.join(name.split())
        stripped = True
        while stripped:
            stripped = False
            for suffix in COMPANY_SUFFIXES:
                if normalized.lower().endswith(suffix.lower()):
                    normalized = normalized[:-len(suffix)].rstrip()
                    stripped = True
                    break

        return normalized
