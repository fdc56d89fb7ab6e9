from resource_client.core.address import build_uri


def test_build_uri_keeps_segment_order():
    assert build_uri("music:Album", "12", "music:Track", "555") == (
        "/music:Album/12/music:Track/555"
    )
    assert build_uri("b", "a", "b") == "/b/a/b"


def test_build_uri_single_segment():
    assert build_uri("music:Track") == "/music:Track"


def test_build_uri_omits_missing_segments():
    assert build_uri("music:Album", "12", "music:Track", None) == (
        "/music:Album/12/music:Track"
    )
    assert build_uri("music:Album", "12", "music:Track", "") == (
        "/music:Album/12/music:Track"
    )


def test_build_uri_does_not_escape_composite_ids():
    assert build_uri("music:Album", "12", "music:Track", "music:Track/555") == (
        "/music:Album/12/music:Track/music:Track/555"
    )
