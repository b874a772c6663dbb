FALSE_STRINGS = {"", "0", "false", "no", "off"}


def to_bool(value) -> bool:
    """Coerce submitted or stored flags; "0", "off", "no" and "" are false."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)
