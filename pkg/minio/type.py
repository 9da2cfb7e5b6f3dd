from dataclasses import dataclass
from typing import Optional
from .constant import *


@dataclass
class MinIOConfig:
    """MinIO / S3 client configuration.

    Attributes:
        endpoint: Server endpoint (e.g., 's3.amazonaws.com' or 'localhost:9000')
        access_key: Access key for authentication
        secret_key: Secret key for authentication
        bucket: Bucket every operation targets
        secure: Whether to use HTTPS
        region: Optional region name
    """

    endpoint: str
    access_key: str
    secret_key: str
    bucket: str
    secure: bool = True
    region: Optional[str] = None

    def __post_init__(self):
        """Validate configuration."""
        if not self.endpoint or not self.endpoint.strip():
            raise ValueError("endpoint cannot be empty")

        if not self.access_key or not self.access_key.strip():
            raise ValueError("access_key cannot be empty")

        if not self.secret_key or not self.secret_key.strip():
            raise ValueError("secret_key cannot be empty")

        if not self.bucket or not self.bucket.strip():
            raise ValueError("bucket cannot be empty")

        self.endpoint = (
            self.endpoint.replace("http://", "").replace("https://", "").strip()
        )


__all__ = ["MinIOConfig"]
