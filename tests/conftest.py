"""
Shared test fixtures for the nifi-pki test suite.

Provides the reference topology (test-cluster / test-namespace, nodes 0-2)
and a fixture certificate with a known subject, generated with cryptography
so the suite needs no PKI files on disk.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from nifi_pki.domain.models import ClusterTopology

# Subject in certificate (RDN sequence) order.
FIXTURE_SUBJECT = x509.Name(
    [
        x509.NameAttribute(NameOID.COUNTRY_NAME, "FR"),
        x509.NameAttribute(NameOID.STATE_OR_PROVINCE_NAME, "Ile-de-France"),
        x509.NameAttribute(NameOID.LOCALITY_NAME, "Paris"),
        x509.NameAttribute(NameOID.STREET_ADDRESS, "1 Rue de la Paix"),
        x509.NameAttribute(NameOID.POSTAL_CODE, "75001"),
        x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Orange, S.A."),
        x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "NiFi"),
        x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "Ops"),
        x509.NameAttribute(NameOID.COMMON_NAME, "test-cluster-0-node"),
        x509.NameAttribute(NameOID.SERIAL_NUMBER, "1234"),
    ]
)

FIXTURE_DN = (
    "SERIALNUMBER=1234,"
    "CN=test-cluster-0-node,"
    "OU=Ops,"
    "OU=NiFi,"
    "O=Orange\\, S.A.,"
    "POSTALCODE=75001,"
    "STREET=1 Rue de la Paix,"
    "L=Paris,"
    "ST=Ile-de-France,"
    "C=FR"
)


def build_certificate(subject: x509.Name) -> x509.Certificate:
    """Self-sign a short-lived certificate with the given subject."""
    key = ec.generate_private_key(ec.SECP256R1())
    now = datetime.datetime.now(datetime.UTC)
    return (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(subject)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )


@pytest.fixture()
def topology() -> ClusterTopology:
    """Three-node cluster without headless service."""
    return ClusterTopology.of("test-cluster", "test-namespace", [0, 1, 2])


@pytest.fixture()
def headless_topology() -> ClusterTopology:
    return ClusterTopology.of("test-cluster", "test-namespace", [0, 1, 2], headless_service_enabled=True)


@pytest.fixture(scope="session")
def fixture_certificate() -> x509.Certificate:
    return build_certificate(FIXTURE_SUBJECT)


@pytest.fixture(scope="session")
def fixture_pem(fixture_certificate: x509.Certificate) -> bytes:
    return fixture_certificate.public_bytes(serialization.Encoding.PEM)


@pytest.fixture(scope="session")
def fixture_der(fixture_certificate: x509.Certificate) -> bytes:
    return fixture_certificate.public_bytes(serialization.Encoding.DER)


@pytest.fixture(scope="session")
def fixture_dn() -> str:
    return FIXTURE_DN


@pytest.fixture(scope="session")
def pem_for_subject() -> Callable[[x509.Name], bytes]:
    """Factory: PEM certificate for an arbitrary subject."""

    def _build(subject: x509.Name) -> bytes:
        return build_certificate(subject).public_bytes(serialization.Encoding.PEM)

    return _build
