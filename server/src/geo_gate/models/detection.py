"""Anonymization verdict models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class Confidence(str, Enum):
    """How sure the classifier is about its verdict."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ClassificationVerdict(BaseModel):
    """Result of anonymization classification.

    ``is_proxy`` is derived from the other three flags and cannot be set
    directly.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    is_vpn: bool = False
    is_hosting: bool = False
    is_tor: bool = False
    confidence: Confidence = Confidence.LOW
    reasons: list[str] = Field(default_factory=list)

    @computed_field(alias="isProxy")
    @property
    def is_proxy(self) -> bool:
        """True when any anonymization signal fired."""
        return self.is_vpn or self.is_hosting or self.is_tor
