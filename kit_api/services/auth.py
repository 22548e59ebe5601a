# kit_api/services/auth.py
"""
Credential subsystem.

Signing keys (RSA, RS256) are stored in the jwks table with the private half
encrypted by a Fernet key derived from AUTH_SECRET. A secret that differs from
the one used to write the table can no longer read any private key, which is
what describe_capabilities() detects.
"""

import base64
import logging
import uuid
from typing import Any, Dict, List, Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from kit_api.core.interfaces import IStoreProbe

logger = logging.getLogger(__name__)

KDF_SALT = b"kit-api-jwks"
KDF_ITERATIONS = 200_000


class AuthConfigurationError(Exception):
    """Credential subsystem cannot operate with the current configuration"""

    pass


class AuthService:
    """Key management and notification hooks for the credential subsystem"""

    ALGORITHM = "RS256"

    def __init__(self, secret: str, base_url: str, store: IStoreProbe, services=None):
        self.secret = secret
        self.base_url = base_url
        self.store = store
        self.services = services
        self._fernet: Optional[Fernet] = None

    # ---- keys ----

    def describe_capabilities(self) -> Dict[str, Any]:
        """
        Self-check: read back every stored private key.

        Generates the first key pair when none exists. Raises
        AuthConfigurationError when a stored key cannot be decrypted with the
        current secret.
        """
        key_ids = [kid for kid, _ in self._load_private_keys()]
        if not key_ids:
            key_ids.append(self.generate_key())

        return {
            "base_url": self.base_url,
            "algorithms": [self.ALGORITHM],
            "keys": key_ids,
            "email_and_password": True,
            "email_verification": True,
        }

    def generate_key(self) -> str:
        """Create, encrypt and store a new signing key; returns its id"""
        private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        private_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public_pem = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

        kid = uuid.uuid4().hex
        self.store.execute(
            "INSERT INTO jwks (id, public_key, private_key) VALUES (?, ?, ?)",
            (
                kid,
                public_pem.decode("utf-8"),
                self._cipher().encrypt(private_pem).decode("utf-8"),
            ),
        )
        logger.info(f"🔑 Generated signing key {kid}")
        return kid

    def _load_private_keys(self) -> List[tuple]:
        keys = []
        for row in self.store.execute("SELECT id, private_key FROM jwks ORDER BY created_at"):
            try:
                pem = self._cipher().decrypt(row["private_key"].encode("utf-8"))
            except InvalidToken as e:
                raise AuthConfigurationError(
                    f"Failed to decrypt private key {row['id']}"
                ) from e
            keys.append((row["id"], serialization.load_pem_private_key(pem, password=None)))
        return keys

    def _cipher(self) -> Fernet:
        if self._fernet is None:
            kdf = PBKDF2HMAC(
                algorithm=hashes.SHA256(),
                length=32,
                salt=KDF_SALT,
                iterations=KDF_ITERATIONS,
            )
            derived = kdf.derive(self.secret.encode("utf-8"))
            self._fernet = Fernet(base64.urlsafe_b64encode(derived))
        return self._fernet

    # ---- notification hooks ----

    def send_verification_email(self, user: Dict[str, Any], url: str) -> None:
        """Email the verification link to a newly registered user"""
        self.services.email.send_email_verification(
            to=user["email"],
            user_name=user.get("name") or "",
            verification_url=url,
        )

    def send_password_reset(self, user: Dict[str, Any], url: str) -> None:
        """Email a password reset link"""
        self.services.email.send_password_reset(
            to=user["email"],
            user_name=user.get("name") or "",
            reset_url=url,
        )
