# In-memory field name -> wire key, in payload order
WIRE_NAMES = {
    "concepts": "concepts",
    "emotion": "emotion",
    "entities": "entities",
    "keywords": "keywords",
    "metadata": "metadata",
    "relations": "relations",
    "semanticRoles": "semantic_roles",
    "sentiment": "sentiment",
    "categories": "categories",
}

FIELD_NAMES = {wire: field for field, wire in WIRE_NAMES.items()}

# Features that take a free-form map instead of an options object
MAP_FEATURES = ("metadata", "categories")
