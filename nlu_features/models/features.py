import copy
import json
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, JsonValue, ValidationError, model_validator

from nlu_features.constants import FIELD_NAMES, WIRE_NAMES
from nlu_features.log.logger_singleton import getLogger
from nlu_features.models.options import (
    ConceptsOptions,
    EmotionOptions,
    EntitiesOptions,
    KeywordsOptions,
    RelationsOptions,
    SemanticRolesOptions,
    SentimentOptions,
)


class FeaturesPayloadError(Exception):
    """Raised when a features payload cannot be parsed."""
    pass


class Features(BaseModel):
    """
    Analysis features requested for one NLU call.

    Every field is optional; a field left as None is not requested and is
    left out of the payload. Wire keys come from constants.WIRE_NAMES.
    """

    concepts: Optional[ConceptsOptions] = None
    emotion: Optional[EmotionOptions] = None
    entities: Optional[EntitiesOptions] = None
    keywords: Optional[KeywordsOptions] = None
    metadata: Optional[Dict[str, JsonValue]] = None      # URL/HTML input only
    relations: Optional[RelationsOptions] = None
    semanticRoles: Optional[SemanticRolesOptions] = None
    sentiment: Optional[SentimentOptions] = None
    categories: Optional[Dict[str, JsonValue]] = None

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _accept_wire_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        renamed = {}
        for key, value in data.items():
            field = FIELD_NAMES.get(key, key)
            # in-memory name wins over its wire key
            if field != key and field in data:
                continue
            renamed[field] = value
        return renamed

    @classmethod
    def builder(cls) -> "FeaturesBuilder":
        return FeaturesBuilder()

    def new_builder(self) -> "FeaturesBuilder":
        """Builder seeded with every field of this instance."""
        return FeaturesBuilder(self)

    def copy_with(self, **overrides) -> "Features":
        values = {field: getattr(self, field) for field in WIRE_NAMES}
        for key, value in overrides.items():
            field = FIELD_NAMES.get(key, key)
            if field not in WIRE_NAMES:
                raise TypeError(f"Features has no field '{key}'")
            values[field] = value
        return type(self)(**values)

    def to_dict(self) -> dict:
        """Return the request payload: wire keys only, unset features omitted."""
        payload = {}
        for field, wire in WIRE_NAMES.items():
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, BaseModel):
                payload[wire] = value.to_dict()
            else:
                payload[wire] = copy.deepcopy(value)
        return payload

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, payload) -> "Features":
        """Parse a request payload. Unknown keys are logged and dropped."""
        if not isinstance(payload, Mapping):
            raise FeaturesPayloadError(
                f"Features payload must be a mapping, got {type(payload).__name__}"
            )

        known = {}
        unknown = []
        for key, value in payload.items():
            if key in WIRE_NAMES or key in FIELD_NAMES:
                known[key] = value
            else:
                unknown.append(str(key))
        if unknown:
            getLogger().logMessage(f"[Features] Ignoring unknown feature keys: {', '.join(sorted(unknown))}")

        try:
            return cls.model_validate(known)
        except ValidationError as e:
            raise FeaturesPayloadError(f"Invalid features payload: {e}") from e

    @classmethod
    def from_json(cls, text) -> "Features":
        try:
            payload = json.loads(text)
        except (TypeError, ValueError) as e:
            raise FeaturesPayloadError(f"Features payload is not valid JSON: {e}") from e
        return cls.from_dict(payload)

    def __str__(self) -> str:
        return self.to_json(indent=2)


class FeaturesBuilder:
    """
    Chained construction of Features.

    Setters store whatever they are given; conversion and type checks
    happen once, in build().
    """

    def __init__(self, features: Optional[Features] = None):
        self._concepts = None
        self._emotion = None
        self._entities = None
        self._keywords = None
        self._metadata = None
        self._relations = None
        self._semanticRoles = None
        self._sentiment = None
        self._categories = None

        if features is not None:
            self._concepts = features.concepts
            self._emotion = features.emotion
            self._entities = features.entities
            self._keywords = features.keywords
            self._metadata = features.metadata
            self._relations = features.relations
            self._semanticRoles = features.semanticRoles
            self._sentiment = features.sentiment
            self._categories = features.categories

    def concepts(self, concepts):
        self._concepts = concepts
        return self

    def emotion(self, emotion):
        self._emotion = emotion
        return self

    def entities(self, entities):
        self._entities = entities
        return self

    def keywords(self, keywords):
        self._keywords = keywords
        return self

    def metadata(self, metadata):
        self._metadata = metadata
        return self

    def relations(self, relations):
        self._relations = relations
        return self

    def semanticRoles(self, semanticRoles):
        self._semanticRoles = semanticRoles
        return self

    def sentiment(self, sentiment):
        self._sentiment = sentiment
        return self

    def categories(self, categories):
        self._categories = categories
        return self

    def build(self) -> Features:
        return Features(
            concepts=self._concepts,
            emotion=self._emotion,
            entities=self._entities,
            keywords=self._keywords,
            metadata=self._metadata,
            relations=self._relations,
            semanticRoles=self._semanticRoles,
            sentiment=self._sentiment,
            categories=self._categories,
        )
