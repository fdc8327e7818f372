"""
nlu_features
============

Request-side feature models for a natural-language-understanding API.
Includes:
- Typed option models for each analysis feature
- The Features selection with its builder and wire (de)serialization
- Helper functions for building request payloads
"""

from .constants import WIRE_NAMES
from .models import (
    ConceptsOptions,
    EmotionOptions,
    EntitiesOptions,
    KeywordsOptions,
    RelationsOptions,
    SemanticRolesOptions,
    SentimentOptions,
    Features,
    FeaturesBuilder,
    FeaturesPayloadError,
)
from .utils import requested_features, features_from_names, build_payload

__all__ = [
    "WIRE_NAMES",
    "ConceptsOptions",
    "EmotionOptions",
    "EntitiesOptions",
    "KeywordsOptions",
    "RelationsOptions",
    "SemanticRolesOptions",
    "SentimentOptions",
    "Features",
    "FeaturesBuilder",
    "FeaturesPayloadError",
    "requested_features",
    "features_from_names",
    "build_payload",
]
