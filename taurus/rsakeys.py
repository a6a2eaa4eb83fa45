"""RSA key pair generation in PEM form."""

from __future__ import annotations

import base64
import textwrap

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

KEY_SIZE = 1024
_PUBLIC_EXPONENT = 65537


def _pem_encode(label: str, der: bytes) -> str:
    body = "\n".join(textwrap.wrap(base64.b64encode(der).decode("ascii"), 64))
    return f"-----BEGIN {label}-----\n{body}\n-----END {label}-----\n"


def generate_key() -> tuple[str, str]:
    """Generate a 1024-bit RSA key pair and return ``(private_pem, public_pem)``.

    The private key is PKCS#1 under ``RSA PRIVATE KEY``; the public key is a
    SubjectPublicKeyInfo structure under ``RSA PUBLIC KEY``.
    """
    private_key = rsa.generate_private_key(public_exponent=_PUBLIC_EXPONENT, key_size=KEY_SIZE)
    private_der = private_key.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    )
    public_der = private_key.public_key().public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return _pem_encode("RSA PRIVATE KEY", private_der), _pem_encode("RSA PUBLIC KEY", public_der)