"""Display utilities for record field names."""

# Short headers used by the table instead of the prettified field name
COLUMN_TITLES = {
    "place_of_origin": "Origin",
    "artist_display": "Artist",
    "date_start": "Start Date",
    "date_end": "End Date",
}


def column_title(name: str) -> str:
    """Table header for a record field.

    Examples::

        column_title("artist_display")  # -> "Artist"
        column_title("inscriptions")    # -> "Inscriptions"
    """
    if name in COLUMN_TITLES:
        return COLUMN_TITLES[name]
    return " ".join(w.capitalize() for w in name.split("_"))
