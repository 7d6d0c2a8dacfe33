"""Shared topologies for the test suite."""

import copy

import pytest


# West [0,1]x[0,1] and East [1,2]x[0,1] share arc 0, the edge x=1.
# Island [5,6]x[5,6] touches neither.
SIDE_BY_SIDE = {
    "type": "Topology",
    "bbox": [0, 0, 6, 6],
    "objects": {
        "regions": {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Polygon", "arcs": [[0, 1]], "id": "w",
                 "properties": {"name": "West", "population": 10}},
                {"type": "Polygon", "arcs": [[2, -1]], "id": "e",
                 "properties": {"name": "East", "population": 5}},
                {"type": "Polygon", "arcs": [[3]], "id": "i",
                 "properties": {"name": "Island", "population": 1}},
            ],
        },
    },
    "arcs": [
        [[1, 0], [1, 1]],
        [[1, 1], [0, 1], [0, 0], [1, 0]],
        [[1, 0], [2, 0], [2, 1], [1, 1]],
        [[5, 5], [6, 5], [6, 6], [5, 6], [5, 5]],
    ],
}


# Lake [0,4]x[0,4] has a hole bounded by Left [1,2]x[1,3] and Right [2,3]x[1,3],
# which share arc 3, the edge x=2.
LAKE = {
    "type": "Topology",
    "objects": {
        "regions": {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Polygon", "arcs": [[0], [-2, -3]],
                 "properties": {"name": "Lake"}},
                {"type": "Polygon", "arcs": [[1, 3]],
                 "properties": {"name": "Left"}},
                {"type": "Polygon", "arcs": [[2, -4]],
                 "properties": {"name": "Right"}},
            ],
        },
    },
    "arcs": [
        [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]],
        [[2, 1], [1, 1], [1, 3], [2, 3]],
        [[2, 3], [3, 3], [3, 1], [2, 1]],
        [[2, 3], [2, 1]],
    ],
}


@pytest.fixture
def side_by_side():
    return copy.deepcopy(SIDE_BY_SIDE)


@pytest.fixture
def lake():
    return copy.deepcopy(LAKE)
