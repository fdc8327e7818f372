from typing import Iterable, List
from .constants import FIELD_NAMES, MAP_FEATURES, WIRE_NAMES
from .log.logger_singleton import getLogger
from .models.features import Features, FeaturesPayloadError
from .models.options import (
    ConceptsOptions,
    EmotionOptions,
    EntitiesOptions,
    KeywordsOptions,
    RelationsOptions,
    SemanticRolesOptions,
    SentimentOptions,
)

_DEFAULT_OPTIONS = {
    "concepts": ConceptsOptions,
    "emotion": EmotionOptions,
    "entities": EntitiesOptions,
    "keywords": KeywordsOptions,
    "relations": RelationsOptions,
    "semanticRoles": SemanticRolesOptions,
    "sentiment": SentimentOptions,
}


def requested_features(features: Features) -> List[str]:
    """Wire keys of the features that are set, in payload order."""
    return [wire for field, wire in WIRE_NAMES.items() if getattr(features, field) is not None]


def features_from_names(names: Iterable[str]) -> Features:
    """
    Build a Features selection from feature names, each with default options.
    Accepts in-memory names ("semanticRoles") or wire keys ("semantic_roles").
    """
    values = {}
    for name in names:
        field = FIELD_NAMES.get(name, name)
        if field in MAP_FEATURES:
            values[field] = {}
        elif field in _DEFAULT_OPTIONS:
            values[field] = _DEFAULT_OPTIONS[field]()
        else:
            raise FeaturesPayloadError(f"Unknown feature name: {name}")
    return Features(**values)


def build_payload(features: Features) -> dict:
    """Serialize a selection for a request body, logging what was asked for."""
    logger = getLogger()
    payload = features.to_dict()
    if not payload:
        logger.logMessage("[Features] Warning: no analysis features requested")
    else:
        logger.logMessage(f"[Features] Requesting features: {', '.join(payload)}")
    return payload
