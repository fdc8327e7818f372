from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class FeatureOptions(BaseModel):
    """Common base for the per-feature option objects."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    def to_dict(self) -> dict:
        """Return the wire representation, leaving out unset options."""
        return self.model_dump(exclude_none=True)


class ConceptsOptions(FeatureOptions):
    limit: Optional[int] = None             # max concepts returned


class EmotionOptions(FeatureOptions):
    document: Optional[bool] = None         # whole-document emotion
    targets: Optional[List[str]] = None     # target phrases to score


class EntitiesOptions(FeatureOptions):
    limit: Optional[int] = None
    mentions: Optional[bool] = None         # include mention locations
    model: Optional[str] = None             # custom model id
    sentiment: Optional[bool] = None
    emotion: Optional[bool] = None


class KeywordsOptions(FeatureOptions):
    limit: Optional[int] = None
    sentiment: Optional[bool] = None
    emotion: Optional[bool] = None


class RelationsOptions(FeatureOptions):
    model: Optional[str] = None


class SemanticRolesOptions(FeatureOptions):
    limit: Optional[int] = None
    keywords: Optional[bool] = None         # keywords in subject/object
    entities: Optional[bool] = None         # entities in subject/object


class SentimentOptions(FeatureOptions):
    document: Optional[bool] = None
    targets: Optional[List[str]] = None
