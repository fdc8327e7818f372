from .options import (
    FeatureOptions,
    ConceptsOptions,
    EmotionOptions,
    EntitiesOptions,
    KeywordsOptions,
    RelationsOptions,
    SemanticRolesOptions,
    SentimentOptions,
)
from .features import Features, FeaturesBuilder, FeaturesPayloadError

__all__ = [
    "FeatureOptions",
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
]
