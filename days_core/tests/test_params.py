import logging

import pytest

from days_core.params import ImageRequest, clamp, parse_dimension, resolve_image_request


def test_clamp():
    assert clamp(50, 100, 4000) == 100
    assert clamp(5000, 100, 4000) == 4000
    assert clamp(640, 100, 4000) == 640


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("640", 640),
        ("640px", 640),
        ("  800", 800),
        ("12.9e3", 100),
        (1200, 1200),
        ("-50", 100),
        ("99999", 4000),
    ],
)
def test_parse_dimension(raw, expected):
    assert parse_dimension(raw, 1179, 100, 4000) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "0", 0, "px640"])
def test_parse_dimension_falls_back_to_default(raw):
    assert parse_dimension(raw, 1179, 100, 4000) == 1179


def test_parse_dimension_logs_invalid_value(caplog):
    caplog.set_level(logging.WARNING, logger="days")
    parse_dimension("wide", 1179, 100, 4000)
    assert "Invalid dimension 'wide'" in caplog.text


def test_resolve_image_request_defaults():
    request = resolve_image_request({})
    assert request == resolve_image_request({'width': None, 'height': None})
    assert (request.width, request.height) == (1179, 2556)
    assert request.palette.background == "#000000"
    assert request.palette.today == "#ff6b35"


def test_resolve_image_request_maps_parameter_names():
    request = resolve_image_request({
        'width': '1200',
        'height': '630',
        'bgColor': '101010',
        'primary': 'eeeeee',
        'secondary': '222222',
        'accent': '00ff00',
    })
    assert isinstance(request, ImageRequest)
    assert (request.width, request.height) == (1200, 630)
    assert request.palette.background == "#101010"
    assert request.palette.past == "#eeeeee"
    assert request.palette.future == "#222222"
    assert request.palette.today == "#00ff00"


def test_resolve_image_request_clamps_dimensions():
    request = resolve_image_request({'width': '10', 'height': '9000'})
    assert (request.width, request.height) == (100, 8000)


def test_resolve_image_request_custom_defaults_and_limits():
    request = resolve_image_request(
        {'primary': 'zzzzzz'},
        defaults={'width': 500, 'height': 500, 'primary': 'abcdef'},
        limits={'max_width': 400},
    )
    assert request.width == 400
    assert request.height == 500
    assert request.palette.past == "#abcdef"


def test_resolve_image_request_logs_bad_colour(caplog):
    caplog.set_level(logging.WARNING, logger="days")
    request = resolve_image_request({'accent': '#ff0000'})
    assert request.palette.today == "#ff6b35"
    assert "accent='#ff0000'" in caplog.text
