from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfigurationRecord(BaseModel):
    """
    One browser/device target from the Sauce OnDemand plugin payload.

    The plugin also sends keys such as long-name, long-version and url; they
    are not needed to build the Maven command and are dropped.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    browser: Optional[str] = Field(default=None, description="e.g. chrome, firefox, android")
    os: Optional[str] = Field(default=None, description="e.g. Windows 10, android")
    platform: Optional[str] = Field(default=None, description="e.g. XP, ANDROID")
    browser_version: Optional[str] = Field(default=None, alias="browser-version")

    # Mobile targets only.
    device: Optional[str] = Field(default=None, description="e.g. LG Nexus 4 Emulator")
    device_orientation: Optional[str] = Field(
        default=None, alias="device-orientation", description="portrait or landscape"
    )
