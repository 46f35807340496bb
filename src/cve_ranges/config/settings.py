from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.domain.enums import VersionStatus


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the CVE_RANGES_ prefix.
    For example:
        - CVE_RANGES_ASSUMED_DEFAULT_STATUS=affected
        - CVE_RANGES_COLLECTION_URL=https://pkg.go.dev
        - CVE_RANGES_LINT=false

    Alternatively, settings can be provided programmatically:
        container = Container()
        container.config.from_pydantic(AppConfig(lint=False))
    """

    model_config = SettingsConfigDict(
        env_prefix="CVE_RANGES_",
        case_sensitive=False,
        extra="forbid",
    )

    assumed_default_status: VersionStatus = Field(
        default=VersionStatus.UNAFFECTED,
        description="Default status assumed when an advisory's affected entry has no defaultStatus",
    )

    collection_url: Optional[str] = Field(
        default=None,
        description="Value emitted as collectionURL in generated CVE5 affected entries",
    )

    lint: bool = Field(
        default=True,
        description="Run the timeline lint (semver, alternation, ordering) during round-trip checks",
    )
