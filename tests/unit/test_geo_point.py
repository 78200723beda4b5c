import pytest
from geocoord.domain.exceptions import InvalidArgument
from geocoord.domain.models.geo import GeoPoint


def test_geo_point_accepts_coordinates() -> None:
    p = GeoPoint(lat=28.1234, lng=-15.4321)
    assert p.lat == 28.1234
    assert p.lng == -15.4321


def test_geo_point_defaults_to_origin() -> None:
    assert GeoPoint() == GeoPoint(lat=0.0, lng=0.0)


def test_geo_point_does_not_enforce_ranges() -> None:
    p = GeoPoint(lat=95.0, lng=-200.0)
    assert (p.lat, p.lng) == (95.0, -200.0)


def test_geo_point_is_frozen_and_hashable() -> None:
    p = GeoPoint(lat=1.0, lng=2.0)
    with pytest.raises(AttributeError):
        p.lat = 3.0  # type: ignore[misc]
    assert len({p, GeoPoint(lat=1.0, lng=2.0)}) == 1


def test_geo_point_str_is_lat_comma_lng() -> None:
    assert str(GeoPoint(lat=38.5, lng=-120.2)) == "38.5,-120.2"


@pytest.mark.parametrize(
    ("lat", "lng"),
    [
        ("north", 0.0),
        (0.0, None),
        (float("nan"), 0.0),
        (0.0, float("inf")),
        (True, 0.0),
    ],
)
def test_geo_point_rejects_non_numeric_values(lat, lng) -> None:
    with pytest.raises(InvalidArgument):
        GeoPoint(lat=lat, lng=lng)


def test_from_pair_coerces_numbers() -> None:
    assert GeoPoint.from_pair(40, "-75.5") == GeoPoint(lat=40.0, lng=-75.5)


def test_from_string_parses_lat_lng() -> None:
    assert GeoPoint.from_string(" 40.7 , -74.0 ") == GeoPoint(lat=40.7, lng=-74.0)


@pytest.mark.parametrize("text", ["", "40.7", "40.7,-74.0,3", "a,b"])
def test_from_string_rejects_malformed_text(text: str) -> None:
    with pytest.raises(InvalidArgument):
        GeoPoint.from_string(text)


@pytest.mark.parametrize(
    "data",
    [
        {"lat": 1.5, "lng": 2.5},
        {"latitude": 1.5, "longitude": 2.5},
        {"lat": 1.5, "lng": 2.5, "latitude": 9.0, "longitude": 9.0},
    ],
)
def test_from_mapping_reads_known_keys(data: dict) -> None:
    assert GeoPoint.from_mapping(data) == GeoPoint(lat=1.5, lng=2.5)


@pytest.mark.parametrize(
    "data",
    [{}, {"lat": 1.0}, {"lat": 1.0, "longitude": 2.0}, {"x": 1.0, "y": 2.0}],
)
def test_from_mapping_rejects_missing_keys(data: dict) -> None:
    with pytest.raises(InvalidArgument):
        GeoPoint.from_mapping(data)


def test_from_sequence_accepts_list_and_tuple() -> None:
    assert GeoPoint.from_sequence([1.0, 2.0]) == GeoPoint(lat=1.0, lng=2.0)
    assert GeoPoint.from_sequence((1.0, 2.0)) == GeoPoint(lat=1.0, lng=2.0)


@pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0, 3.0], "12", 12])
def test_from_sequence_rejects_wrong_shapes(values) -> None:
    with pytest.raises(InvalidArgument):
        GeoPoint.from_sequence(values)


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        GeoPoint.from_string("nope")
