def normalize_name(value: str | None) -> str:
    """Case-insensitive identity key for skill names and job titles."""
    return (value or "").strip().lower()
