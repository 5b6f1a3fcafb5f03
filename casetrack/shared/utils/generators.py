"""ID generators (CUID2 for attachment identifiers)."""

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def display_id_for(case_id: int) -> str:
    """Return the human-facing case code, e.g. 42 -> 'MST00042'."""
    return f"MST{case_id:05d}"
