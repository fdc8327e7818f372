from .constants import WIRE_NAMES, FIELD_NAMES, MAP_FEATURES

__all__ = ["WIRE_NAMES", "FIELD_NAMES", "MAP_FEATURES"]
