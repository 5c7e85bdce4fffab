"""Shared test fixtures for the room diagram tests."""
import copy
import xml.etree.ElementTree as ET

import pytest
from floorplan.analysis import parse_analysis_response
from floorplan.mock_analysis import MOCK_ROOM_ANALYSIS
from floorplan.gen_floorplan import generate_diagram

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse_svg(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def find_groups(root: ET.Element, cls: str) -> list[ET.Element]:
    """All <g> elements whose class list contains cls."""
    return [g for g in root.iter(f"{SVG_NS}g") if cls in g.get("class", "").split()]


def children(el: ET.Element, tag: str) -> list[ET.Element]:
    return el.findall(f"{SVG_NS}{tag}")


def store_record(width=12.0, height=14.0, **walls):
    """camelCase store-schema analysis with empty walls unless given."""
    record = {
        "dimensions": {"width": width, "height": height, "confidence": 0.8},
        "ceilingHeight": 8.0,
        "walls": {"north": [], "east": [], "south": [], "west": []},
    }
    record["walls"].update(walls)
    return record


@pytest.fixture
def raw_response():
    """Deep copy of the sample model response, safe to modify."""
    return copy.deepcopy(MOCK_ROOM_ANALYSIS)


@pytest.fixture(scope="session")
def sample_analysis():
    return parse_analysis_response(MOCK_ROOM_ANALYSIS)


@pytest.fixture(scope="session")
def sample_svg(sample_analysis):
    return generate_diagram(sample_analysis, "Bedroom#1", "room_a")


@pytest.fixture(scope="session")
def sample_root(sample_svg):
    return parse_svg(sample_svg)
