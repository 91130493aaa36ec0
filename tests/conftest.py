"""Shared fixtures: a small hand-built SVG grammar."""

import pytest

from svgsense.completion import CompletionGenerator, SvgCompletionProvider
from svgsense.schema import parse_schema

SAMPLE_SCHEMA = {
    "elements": {
        "svg": {
            "documentation": "Root element.",
            "attributes": ["xmlns", "width", "height", "viewBox"],
        },
        "g": {
            "documentation": "Group.",
            "attributes": ["id", "class", "fill", "xlink:href"],
        },
        "rect": {
            "documentation": "Rectangle.",
            "simple": True,
            "subElements": ["animate", "title"],
            "attributes": [
                "id",
                "class",
                "classid",
                "x",
                "width",
                "fill",
                {"name": "rx", "documentation": "Corner radius.", "type": "<length>"},
            ],
        },
        "circle": {"simple": True, "attributes": ["cx", "cy", "r"]},
        "title": {
            "documentation": "Accessible name.",
            "inline": True,
            "subElements": [],
            "attributes": ["lang"],
        },
        "linearGradient": {"subElements": ["stop"], "attributes": ["gradientUnits"]},
        "stop": {"simple": True, "attributes": ["offset"]},
        "clipPath": {"subElements": ["rect", "circle"], "attributes": ["clipPathUnits"]},
        "animate": {
            "simple": True,
            "attributes": [
                "attributeName",
                {"name": "fill", "documentation": "Final state.", "enum": ["freeze", "remove"]},
            ],
        },
        "font": {
            "documentation": "Font definition.",
            "deprecated": True,
            "attributes": ["horiz-adv-x"],
        },
    },
    "attributes": {
        "xmlns": {"type": "<uri>", "enum": ["http://www.w3.org/2000/svg"]},
        "width": {"documentation": "Width.", "type": "<length>"},
        "height": {"type": "<length>"},
        "viewBox": {"documentation": "Viewport."},
        "id": {"documentation": "Unique id.", "type": "<id>"},
        "class": {"documentation": "Class names."},
        "x": {"type": "<length>"},
        "fill": {
            "documentation": "Paint.",
            "type": "<paint>",
            "enum": ["none", "currentColor", "<color>", "<url>"],
        },
        "cx": {},
        "cy": {},
        "r": {},
        "lang": {},
        "gradientUnits": {"enum": ["userSpaceOnUse", "objectBoundingBox"]},
        "offset": {},
        "clipPathUnits": {"enum": ["userSpaceOnUse", "objectBoundingBox"]},
        "attributeName": {},
        "horiz-adv-x": {"documentation": "Advance.", "deprecated": True},
        "xlink:href": {"documentation": "Old link.", "deprecated": True, "type": "<iri>"},
        "stroke-linecap": {
            "enum": ["butt", {"name": "round", "documentation": "Rounded ends."}, "<inherit>"],
        },
    },
}

ELEMENT_ORDER = list(SAMPLE_SCHEMA["elements"])


@pytest.fixture
def catalog():
    return parse_schema(SAMPLE_SCHEMA)


@pytest.fixture
def generator(catalog):
    return CompletionGenerator(catalog)


@pytest.fixture
def provider(catalog):
    return SvgCompletionProvider(catalog)


@pytest.fixture
def element_order():
    return list(ELEMENT_ORDER)
