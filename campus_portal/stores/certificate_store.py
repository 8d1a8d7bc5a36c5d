"""Store for issued certificates."""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from ..config.storage import CERTIFICATE_STORE_KEY
from ..models.certificate import Certificate
from ..storage import LocalStorage
from ..utils.csv_parser import BulkCertificate
from .base import BaseStore

logger = logging.getLogger(__name__)


class CertificateStore(BaseStore[Certificate]):
    """Owns the collection of issued certificates. Certificates are never edited."""

    state_field = 'certificates'

    def __init__(self, storage: Optional[LocalStorage] = None, storage_key: str = CERTIFICATE_STORE_KEY):
        super().__init__(storage, storage_key)

    def item_from_dict(self, data: Dict[str, Any]) -> Certificate:
        return Certificate.from_dict(data)

    def item_to_dict(self, item: Certificate) -> Dict[str, Any]:
        return item.to_dict()

    @property
    def certificates(self) -> List[Certificate]:
        return self.items

    def next_certificate_id(self, offset: int = 0) -> str:
        """
        Id for the next certificate issued ('cert-001', 'cert-002', ...).

        Numbering continues after the highest existing id, so ids of deleted
        certificates are never handed to a new one while a later one exists.
        """
        return f"cert-{self._next_sequence('cert-') + offset:03d}"

    def add_certificate(self, certificate: Certificate) -> Certificate:
        """Append a fully formed certificate. Id uniqueness is the caller's concern."""
        self._set(self._items + [certificate])
        logger.info(f"Added certificate {certificate.id} for {certificate.student}")
        return certificate

    def delete_certificate(self, certificate_id: str) -> bool:
        """
        Remove every certificate with the given id.
        
        Returns:
            bool: True if anything was removed
        """
        remaining = [cert for cert in self._items if cert.id != certificate_id]
        if len(remaining) == len(self._items):
            logger.debug(f"delete_certificate: no certificate with id {certificate_id}")
            return False
        self._set(remaining)
        logger.info(f"Deleted certificate {certificate_id}")
        return True

    def issue_bulk(
        self,
        rows: Iterable[BulkCertificate],
        issued_by: str,
        title: str = "Certificate of Achievement",
        certificate_type: str = "Achievement",
        template_url: Optional[str] = None,
        **style: Any
    ) -> List[Certificate]:
        """
        Issue one certificate per parsed CSV row in a single mutation.
        
        Args:
            rows: Recipients parsed from a bulk CSV upload
            issued_by: Name of the issuing faculty member
            title: Title used when a row has no description
            certificate_type: Certificate type for every certificate
            template_url: Background template for every certificate
            **style: Styling fields shared by every certificate (e.g. name_font)
        
        Returns:
            List[Certificate]: The issued certificates
        """
        issued = []
        for offset, row in enumerate(rows):
            issued.append(Certificate(
                id=self.next_certificate_id(offset),
                title=row.description or title,
                type=certificate_type,
                issued_by=issued_by,
                date=row.date or date.today().isoformat(),
                student=row.name,
                register_number=row.register_number,
                content=row.description or title,
                template_url=template_url,
                **style
            ))
        if issued:
            self._set(self._items + issued)
        logger.info(f"Issued {len(issued)} certificates in bulk")
        return issued

    def get_certificate(self, certificate_id: str) -> Optional[Certificate]:
        return self._find(lambda cert: cert.id == certificate_id)

    def search_certificates(self, term: str = "", type_filter: str = "all") -> List[Certificate]:
        """
        Certificates matching a search term and type.
        
        The term is matched case-insensitively against title, student name and
        register number; type_filter 'all' matches every type.
        """
        needle = term.lower()
        results = []
        for cert in self._items:
            matches_search = (
                needle in cert.title.lower()
                or needle in cert.student.lower()
                or needle in cert.register_number.lower()
            )
            matches_type = type_filter == "all" or cert.type.lower() == type_filter.lower()
            if matches_search and matches_type:
                results.append(cert)
        return results

    def certificates_for_student(self, student_name: str) -> List[Certificate]:
        return [cert for cert in self._items if cert.student.lower() == student_name.lower()]
