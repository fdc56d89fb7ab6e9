from typing import Optional


def build_uri(*segments: Optional[str]) -> str:
    """
    Join path segments, in the order given, into a resource path.
    Example: build_uri('music:Album', '12', 'music:Track') -> '/music:Album/12/music:Track'

    Missing segments (None or '') are left out, so an absent trailing id
    yields the shorter path. Segments are not escaped or validated.
    """
    return "/" + "/".join(str(s) for s in segments if s)


__all__ = ["build_uri"]
