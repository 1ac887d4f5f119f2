"""
DN extraction — render a certificate subject as one Distinguished Name string.

The subject is laid out as an RDN sequence in the conventional order
(anything non-standard, then C, ST, L, STREET, POSTALCODE, O, OU, CN,
SERIALNUMBER) and rendered in reverse, so the most specific attribute comes
first and non-standard attributes such as emailAddress come last:

  C=FR, O=Acme, OU=Ops, OU=NiFi, CN=node-0
    → CN=node-0,OU=NiFi,OU=Ops,O=Acme,C=FR

Multi-valued attributes keep their relative order inside the sequence, so
they also come out reversed. Absent attributes are omitted.
"""

from __future__ import annotations

from collections.abc import Iterable

from railway.result import Result

from nifi_pki.domain.models import SubjectAttribute, UserCertificate
from nifi_pki.domain.ports import SubjectParser

RDN_ORDER: tuple[str, ...] = ("C", "ST", "L", "STREET", "POSTALCODE", "O", "OU", "CN", "SERIALNUMBER")

_RANK = {key: rank for rank, key in enumerate(RDN_ORDER)}
_SPECIAL = frozenset(',+"\\<>;=')


def escape_value(value: str) -> str:
    """Backslash-escape an attribute value for use inside a DN."""
    escaped: list[str] = []
    last = len(value) - 1
    for i, char in enumerate(value):
        if (
            char in _SPECIAL
            or (char == " " and i in (0, last))
            or (char == "#" and i == 0)
        ):
            escaped.append("\\")
        escaped.append(char)
    return "".join(escaped)


def distinguished_name(attributes: Iterable[SubjectAttribute]) -> str:
    """Render subject attributes as a DN, most specific attribute first."""
    present = [attr for attr in attributes if attr.value]
    # sorted() is stable: repeated keys keep their certificate order
    sequence = sorted(present, key=lambda attr: _RANK.get(attr.key, -1))
    return ",".join(f"{attr.key}={escape_value(attr.value)}" for attr in reversed(sequence))


def extract_dn(certificate: bytes, parser: SubjectParser) -> Result[str]:
    """
    Read the subject of `certificate` and render it as a DN.

    A subject the parser cannot read comes back as the parser's failure
    (VALIDATION_ERROR carrying a MalformedSubjectError).
    """
    return parser.parse(certificate).map(distinguished_name)


def certificate_dn(user_certificate: UserCertificate, parser: SubjectParser) -> Result[str]:
    """DN of the certificate issued to a NifiUser."""
    return extract_dn(user_certificate.certificate, parser)
