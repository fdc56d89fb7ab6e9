from typing import Optional

from .request import TransportResponse

LOCATION_HEADER = "location"


def parse_id_from_location(location: Optional[str]) -> Optional[str]:
    """
    Extracts the resource id from a location reference.
    Example: 'https://api.example.com/resource/music:Track/555' -> '555'
    """
    if not location:
        return None
    segments = [s for s in location.split("?", 1)[0].split("/") if s]
    return segments[-1] if segments else None


def get_location_id(response: TransportResponse) -> Optional[str]:
    return parse_id_from_location(response.header(LOCATION_HEADER))


__all__ = ["LOCATION_HEADER", "get_location_id", "parse_id_from_location"]
