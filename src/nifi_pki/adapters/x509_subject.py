"""
X.509 subject parser adapter — certificate bytes → subject attributes.

Adapter layer — implements the SubjectParser port using cryptography (PyCA).
Accepts PEM or DER; PEM is recognised by its `-----BEGIN` armour.

Attribute keys follow the names Go and OpenSSL print in a DN (C, ST, L,
STREET, POSTALCODE, O, OU, CN, SERIALNUMBER). Any other attribute keeps its
RFC 4514 name, or its dotted OID when it has none.
"""

from __future__ import annotations

import structlog
from cryptography import x509
from cryptography.x509.oid import NameOID
from railway import ErrorCode
from railway.result import Result

from nifi_pki.domain.errors import MalformedSubjectError
from nifi_pki.domain.models import SubjectAttribute

log = structlog.get_logger()

_PEM_MARKER = b"-----BEGIN"

_ATTRIBUTE_KEYS: dict[x509.ObjectIdentifier, str] = {
    NameOID.COUNTRY_NAME: "C",
    NameOID.STATE_OR_PROVINCE_NAME: "ST",
    NameOID.LOCALITY_NAME: "L",
    NameOID.STREET_ADDRESS: "STREET",
    NameOID.POSTAL_CODE: "POSTALCODE",
    NameOID.ORGANIZATION_NAME: "O",
    NameOID.ORGANIZATIONAL_UNIT_NAME: "OU",
    NameOID.COMMON_NAME: "CN",
    NameOID.SERIAL_NUMBER: "SERIALNUMBER",
}


def _load_certificate(certificate: bytes) -> x509.Certificate:
    """Load a PEM or DER certificate, raising MalformedSubjectError if neither works."""
    data = certificate.strip()
    if not data:
        raise MalformedSubjectError("certificate is empty")
    try:
        if data.startswith(_PEM_MARKER):
            return x509.load_pem_x509_certificate(data)
        return x509.load_der_x509_certificate(data)
    except ValueError as e:
        raise MalformedSubjectError(f"certificate could not be decoded: {e}") from e


def _to_subject_attribute(attribute: x509.NameAttribute) -> SubjectAttribute:
    key = _ATTRIBUTE_KEYS.get(attribute.oid) or attribute.rfc4514_attribute_name
    value = attribute.value
    if isinstance(value, bytes):
        value = value.hex()
    return SubjectAttribute(key=key, value=value)


def _read_subject(cert: x509.Certificate) -> tuple[SubjectAttribute, ...]:
    try:
        return tuple(_to_subject_attribute(attribute) for attribute in cert.subject)
    except ValueError as e:
        raise MalformedSubjectError(f"certificate subject could not be read: {e}") from e


class X509SubjectParser:
    """
    Read certificate subjects with cryptography.

    Implements the SubjectParser port. Decoding errors are caught at this
    adapter boundary via Result.from_computation().
    """

    def parse(self, certificate: bytes) -> Result[tuple[SubjectAttribute, ...]]:
        """
        Parse the subject of a PEM or DER certificate.

        Returns Result.failure(VALIDATION_ERROR, ...) carrying a
        MalformedSubjectError when the certificate cannot be read.
        """
        return Result.from_computation(
            lambda: self._do_parse(certificate),
            ErrorCode.VALIDATION_ERROR,
            "Failed to read certificate subject",
        )

    def _do_parse(self, certificate: bytes) -> tuple[SubjectAttribute, ...]:
        cert = _load_certificate(certificate)
        attributes = _read_subject(cert)
        log.debug(
            "subject.parsed",
            serial=hex(cert.serial_number),
            attributes=len(attributes),
        )
        return attributes
