import pytest

from nlu_features import (
    ConceptsOptions,
    Features,
    FeaturesPayloadError,
    SemanticRolesOptions,
    SentimentOptions,
    build_payload,
    features_from_names,
    requested_features,
)
from tests.helpers import read_log


def test_requested_features_in_payload_order():
    features = Features(sentiment=SentimentOptions(), semanticRoles=SemanticRolesOptions(), metadata={})
    assert requested_features(features) == ["metadata", "semantic_roles", "sentiment"]


def test_requested_features_empty():
    assert requested_features(Features()) == []


def test_features_from_names_uses_defaults():
    features = features_from_names(["concepts", "semantic_roles", "categories"])
    assert features == Features(
        concepts=ConceptsOptions(),
        semanticRoles=SemanticRolesOptions(),
        categories={},
    )
    assert features.to_dict() == {"concepts": {}, "semantic_roles": {}, "categories": {}}


def test_features_from_names_accepts_field_names():
    assert features_from_names(["semanticRoles"]).semanticRoles == SemanticRolesOptions()


def test_features_from_names_rejects_unknown():
    with pytest.raises(FeaturesPayloadError):
        features_from_names(["sentiment", "syntax"])


def test_build_payload_logs_requested(isolated_logger):
    payload = build_payload(Features(sentiment=SentimentOptions(document=True)))
    assert payload == {"sentiment": {"document": True}}
    assert "[Features] Requesting features: sentiment" in read_log(isolated_logger)


def test_build_payload_warns_on_empty(isolated_logger):
    assert build_payload(Features()) == {}
    assert "no analysis features requested" in read_log(isolated_logger)
