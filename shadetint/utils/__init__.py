from .dimension import get_dimension
from .default import value_or_default
from .num_utils import is_number, round_half_up

__all__ = ["get_dimension", "value_or_default", "is_number", "round_half_up"]
