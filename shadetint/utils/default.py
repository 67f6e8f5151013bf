from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is neither None nor empty, otherwise return the default."""
    return value if value is not None and value != "" else default
