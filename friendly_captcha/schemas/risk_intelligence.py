"""
Risk intelligence payload found in ``data.risk_intelligence`` of a siteverify
response.

Field availability depends on the modules enabled for the account. A module
that is not enabled yields ``None`` for its sub-object, which is distinct from
a present sub-object whose fields are falsy (score 0, empty string, False).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class RiskScore(IntEnum):
    UNKNOWN = 0
    VERY_LOW = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    VERY_HIGH = 5


# Scores outside the known levels still decode; they stay plain ints.
Score = Annotated[
    Union[RiskScore, Annotated[StrictInt, Field(ge=0, le=255)]],
    Field(union_mode="left_to_right"),
]


class _RiskModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class RiskScoresData(_RiskModel):
    """Summary scores. None unless the Risk Scores module is enabled."""

    overall: Score = RiskScore.UNKNOWN
    # IP, ASN, reputation, geolocation and past abuse from this network
    network: Score = RiskScore.UNKNOWN
    # User agent consistency, automation traces and browser characteristics
    browser: Score = RiskScore.UNKNOWN


class NetworkAutonomousSystemData(_RiskModel):
    number: int = 0  # e.g. 3209
    name: str = ""  # e.g. "VODANET"
    company: str = ""
    description: str = ""
    domain: str = ""
    country: str = ""  # ISO 3166-1 alpha-2
    rir: str = ""  # e.g. "RIPE"
    route: str = ""  # CIDR, e.g. "88.64.0.0/12"
    type: str = ""  # e.g. "isp"


class NetworkGeolocationCountryData(_RiskModel):
    iso2: str = ""
    iso3: str = ""
    name: str = ""
    name_native: str = ""
    region: str = ""
    subregion: str = ""
    currency: str = ""  # ISO 4217
    currency_name: str = ""
    phone_code: str = ""
    capital: str = ""


class NetworkGeolocationData(_RiskModel):
    country: NetworkGeolocationCountryData = Field(
        default_factory=NetworkGeolocationCountryData
    )
    city: str = ""
    state: str = ""


class NetworkAbuseContactData(_RiskModel):
    address: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""


class NetworkAnonymizationData(_RiskModel):
    vpn_score: Score = RiskScore.UNKNOWN
    proxy_score: Score = RiskScore.UNKNOWN
    tor: bool = False
    icloud_private_relay: bool = False


class NetworkData(_RiskModel):
    ip: str = ""
    # IP Intelligence module
    autonomous_system: Optional[NetworkAutonomousSystemData] = Field(
        default=None, alias="as"
    )
    geolocation: Optional[NetworkGeolocationData] = None
    abuse_contact: Optional[NetworkAbuseContactData] = None
    # Anonymization Detection module
    anonymization: Optional[NetworkAnonymizationData] = None


class ClientTimeZoneData(_RiskModel):
    name: str = ""  # IANA name, e.g. "Europe/Berlin"
    # "XU" when the time zone cannot be mapped to a country
    country_iso2: str = ""


class ClientBrowserData(_RiskModel):
    id: str = ""  # e.g. "firefox", "chrome_android", "safari_ios"
    name: str = ""
    version: str = ""
    release_date: str = ""  # YYYY-MM-DD


class ClientBrowserEngineData(_RiskModel):
    id: str = ""  # e.g. "gecko", "blink", "webkit"
    name: str = ""
    version: str = ""


class ClientDeviceData(_RiskModel):
    type: str = ""  # "desktop", "mobile", "tablet"
    brand: str = ""
    model: str = ""


class ClientOSData(_RiskModel):
    id: str = ""
    name: str = ""
    version: str = ""


class TLSSignatureData(_RiskModel):
    ja3: str = ""
    ja3n: str = ""
    ja4: str = ""


class ClientAutomationKnownBotData(_RiskModel):
    detected: bool = False
    id: str = ""  # e.g. "googlebot"
    name: str = ""
    type: str = ""
    url: str = ""


class ClientAutomationToolData(_RiskModel):
    detected: bool = False
    id: str = ""  # e.g. "puppeteer", "playwright"
    name: str = ""
    type: str = ""


class ClientAutomationData(_RiskModel):
    headless: bool = False
    automation_tool: ClientAutomationToolData = Field(
        default_factory=ClientAutomationToolData
    )
    known_bot: ClientAutomationKnownBotData = Field(
        default_factory=ClientAutomationKnownBotData
    )


class ClientData(_RiskModel):
    header_user_agent: str = ""
    # Browser Identification module
    time_zone: Optional[ClientTimeZoneData] = None
    browser: Optional[ClientBrowserData] = None
    browser_engine: Optional[ClientBrowserEngineData] = None
    device: Optional[ClientDeviceData] = None
    os: Optional[ClientOSData] = None
    # Bot Detection module
    tls_signature: Optional[TLSSignatureData] = None
    automation: Optional[ClientAutomationData] = None


class RiskIntelligenceData(_RiskModel):
    risk_scores: Optional[RiskScoresData] = None
    network: NetworkData = Field(default_factory=NetworkData)
    client: ClientData = Field(default_factory=ClientData)
