"""
Process configuration.

The service talks to exactly one schema registry artifact. The defaults
below are the fixed coordinates the service ships with; each can be
overridden with an environment variable for local setups (e.g. a
registry running in Docker on another port).
"""

import os
from dataclasses import dataclass

SERVICE_VERSION = "1.0.0"

DEFAULT_REGISTRY_URL = "http://localhost:8080/apis/registry/v3"
DEFAULT_GROUP_ID = "group001"
DEFAULT_ARTIFACT_ID = "library-api"
DEFAULT_VERSION = "1.0.0"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    registry_url: str = DEFAULT_REGISTRY_URL
    group_id: str = DEFAULT_GROUP_ID
    artifact_id: str = DEFAULT_ARTIFACT_ID
    version: str = DEFAULT_VERSION
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            registry_url=os.getenv("REGISTRY_URL", DEFAULT_REGISTRY_URL),
            group_id=os.getenv("REGISTRY_GROUP_ID", DEFAULT_GROUP_ID),
            artifact_id=os.getenv("REGISTRY_ARTIFACT_ID", DEFAULT_ARTIFACT_ID),
            version=os.getenv("REGISTRY_ARTIFACT_VERSION", DEFAULT_VERSION),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        )

    @property
    def content_url(self) -> str:
        """URL of the raw content of the configured artifact version."""
        base = self.registry_url.rstrip("/")
        return (
            f"{base}/groups/{self.group_id}/artifacts/{self.artifact_id}"
            f"/versions/{self.version}/content"
        )
