"""
Ideal coordination polyhedra from the SHAPE 2.1 / CoSyMlib reference set.

Each record lists the ligand positions and the position of the central atom in
the source coordinate frame. The repository appends the central atom and
normalizes the combined set before use.
"""

import math
from typing import List, NamedTuple, Sequence


class PolyhedronRecord(NamedTuple):
    code: str
    name: str
    point_group: str
    ligands: List[Sequence[float]]
    center: Sequence[float]


def _polyhedron(code, name, point_group, ligands, center=(0.0, 0.0, 0.0)):
    return PolyhedronRecord(code, name, point_group, ligands, center)


def _regular_polygon(n: int) -> List[List[float]]:
    """Vertices of a planar regular n-gon of unit radius in the xy plane."""
    return [
        [math.cos(2.0 * math.pi * i / n), math.sin(2.0 * math.pi * i / n), 0.0]
        for i in range(n)
    ]


REFERENCE_POLYHEDRA = (
    # CN=2
    _polyhedron(
        "L-2",
        "Linear",
        "D∞h",
        [
            [1.0, 0.0, 0.0],
            [-1.0, 0.0, 0.0],
        ],
    ),
    _polyhedron(
        "vT-2",
        "Divacant Tetrahedron (V-shape, 109.47°)",
        "C2v",
        [
            [1.0, 1.0, 1.0],
            [-1.0, -1.0, 1.0],
        ],
    ),
    _polyhedron(
        "vOC-2",
        "Tetravacant Octahedron (L-shape, 90°)",
        "C2v",
        [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
        ],
    ),
    # CN=3
    _polyhedron(
        "TP-3",
        "Trigonal Planar",
        "D3h",
        [
            [1.154700538379, 0.0, 0.0],
            [-0.57735026919, 1.0, 0.0],
            [-0.57735026919, -1.0, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "vT-3",
        "Trigonal Pyramid (vacant tetrahedron)",
        "C3v",
        [
            [1.13707048723, 0.0, 0.100503781526],
            [-0.568535243615, 0.984731927835, 0.100503781526],
            [-0.568535243615, -0.984731927835, 0.100503781526],
        ],
        center=[0.0, 0.0, -0.301511344578],
    ),
    _polyhedron(
        "fac-vOC-3",
        "fac-Trivacant Octahedron",
        "C3v",
        [
            [1.0, -0.333333333333, -0.333333333333],
            [-0.333333333333, 1.0, -0.333333333333],
            [-0.333333333333, -0.333333333333, 1.0],
        ],
        center=[-0.333333333333, -0.333333333333, -0.333333333333],
    ),
    _polyhedron(
        "mer-vOC-3",
        "mer-Trivacant Octahedron (T-shaped)",
        "C2v",
        [
            [1.206045378311, -0.301511344578, 0.0],
            [0.0, 0.904534033733, 0.0],
            [-1.206045378311, -0.301511344578, 0.0],
        ],
        center=[0.0, -0.301511344578, 0.0],
    ),
    # CN=4
    _polyhedron(
        "SP-4",
        "Square Planar",
        "D4h",
        [
            [1.11803398875, 0.0, 0.0],
            [0.0, 1.11803398875, 0.0],
            [-1.11803398875, 0.0, 0.0],
            [0.0, -1.11803398875, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "T-4",
        "Tetrahedral",
        "Td",
        [
            [0.0, 0.912870929175, -0.645497224368],
            [0.0, -0.912870929175, -0.645497224368],
            [0.912870929175, 0.0, 0.645497224368],
            [-0.912870929175, 0.0, 0.645497224368],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "SS-4",
        "Seesaw",
        "C2v",
        [
            [-0.235702260396, -0.235702260396, -1.178511301978],
            [0.942809041582, -0.235702260396, 0.0],
            [-0.235702260396, 0.942809041582, 0.0],
            [-0.235702260396, -0.235702260396, 1.178511301978],
        ],
        center=[-0.235702260396, -0.235702260396, 0.0],
    ),
    _polyhedron(
        "vTBPY-4",
        "Axially Vacant Trigonal Bipyramid",
        "C3v",
        [
            [0.0, 0.0, -0.917662935482],
            [1.147078669353, 0.0, 0.229415733871],
            [-0.573539334676, 0.993399267799, 0.229415733871],
            [-0.573539334676, -0.993399267799, 0.229415733871],
        ],
        center=[0.0, 0.0, 0.229415733871],
    ),
    # CN=5
    _polyhedron(
        "PP-5",
        "Pentagon",
        "D5h",
        [
            [1.09544511501, 0.0, 0.0],
            [0.338511156943, 1.041830214874, 0.0],
            [-0.886233714448, 0.643886483299, 0.0],
            [-0.886233714448, -0.643886483299, 0.0],
            [0.338511156943, -1.041830214874, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "vOC-5",
        "Square Pyramid, J1",
        "C4v",
        [
            [0.0, 0.0, -0.928476690885],
            [1.114172029062, 0.0, 0.185695338177],
            [0.0, 1.114172029062, 0.185695338177],
            [-1.114172029062, 0.0, 0.185695338177],
            [0.0, -1.114172029062, 0.185695338177],
        ],
        center=[0.0, 0.0, 0.185695338177],
    ),
    _polyhedron(
        "TBPY-5",
        "Trigonal Bipyramidal",
        "D3h",
        [
            [0.0, 0.0, -1.09544511501],
            [1.09544511501, 0.0, 0.0],
            [-0.547722557505, 0.948683298051, 0.0],
            [-0.547722557505, -0.948683298051, 0.0],
            [0.0, 0.0, 1.09544511501],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "SPY-5",
        "Square Pyramidal",
        "C4v",
        [
            [0.0, 0.0, 1.09544511501],
            [1.06066017178, 0.0, -0.273861278753],
            [0.0, 1.06066017178, -0.273861278753],
            [-1.06066017178, 0.0, -0.273861278753],
            [0.0, -1.06066017178, -0.273861278753],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "JTBPY-5",
        "Johnson Trigonal Bipyramid, J12",
        "D3h",
        [
            [0.925820099773, 0.0, 0.0],
            [-0.462910049886, 0.801783725737, 0.0],
            [-0.462910049886, -0.801783725737, 0.0],
            [0.0, 0.0, 1.309307341416],
            [0.0, 0.0, -1.309307341416],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    # CN=6
    _polyhedron(
        "HP-6",
        "Hexagon",
        "D6h",
        [
            [1.080123449735, 0.0, 0.0],
            [0.540061724867, 0.935414346693, 0.0],
            [-0.540061724867, 0.935414346693, 0.0],
            [-1.080123449735, 0.0, 0.0],
            [-0.540061724867, -0.935414346693, 0.0],
            [0.540061724867, -0.935414346693, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "PPY-6",
        "Pentagonal Pyramid",
        "C5v",
        [
            [0.0, 0.0, -0.937042571332],
            [1.09321633322, 0.0, 0.156173761889],
            [0.337822425493, 1.039710517429, 0.156173761889],
            [-0.884430592103, 0.642576438232, 0.156173761889],
            [-0.884430592103, -0.642576438232, 0.156173761889],
            [0.337822425493, -1.039710517429, 0.156173761889],
        ],
        center=[0.0, 0.0, 0.156173761889],
    ),
    _polyhedron(
        "OC-6",
        "Octahedral",
        "Oh",
        [
            [0.0, 0.0, -1.080123449735],
            [1.080123449735, 0.0, 0.0],
            [0.0, 1.080123449735, 0.0],
            [-1.080123449735, 0.0, 0.0],
            [0.0, -1.080123449735, 0.0],
            [0.0, 0.0, 1.080123449735],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "TPR-6",
        "Trigonal Prism",
        "D3h",
        [
            [0.816496580928, 0.0, -0.707106781187],
            [-0.408248290464, 0.707106781187, -0.707106781187],
            [-0.408248290464, -0.707106781187, -0.707106781187],
            [0.816496580928, 0.0, 0.707106781187],
            [-0.408248290464, 0.707106781187, 0.707106781187],
            [-0.408248290464, -0.707106781187, 0.707106781187],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "JPPY-6",
        "Johnson Pentagonal Pyramid, J2",
        "C5v",
        [
            [1.146281780821, 0.0, 0.101205871605],
            [0.354220550616, 1.090178757161, 0.101205871605],
            [-0.927361441027, 0.673767525738, 0.101205871605],
            [-0.927361441027, -0.673767525738, 0.101205871605],
            [0.354220550616, -1.090178757161, 0.101205871605],
            [0.0, 0.0, -0.607235229628],
        ],
        center=[0.0, 0.0, 0.101205871605],
    ),
    # CN=7
    _polyhedron(
        "HP-7",
        "Heptagon",
        "D7h",
        [
            [1.06904496765, 0.0, 0.0],
            [0.666538635058, 0.835813011883, 0.0],
            [-0.237884884643, 1.042241778339, 0.0],
            [-0.96317623424, 0.463841227849, 0.0],
            [-0.96317623424, -0.463841227849, 0.0],
            [-0.237884884643, -1.042241778339, 0.0],
            [0.666538635058, -0.835813011883, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "HPY-7",
        "Hexagonal Pyramid",
        "C6v",
        [
            [0.0, 0.0, -0.943879807449],
            [1.078719779941, 0.0, 0.134839972493],
            [0.539359889971, 0.934198732994, 0.134839972493],
            [-0.539359889971, 0.934198732994, 0.134839972493],
            [-1.078719779941, 0.0, 0.134839972493],
            [-0.539359889971, -0.934198732994, 0.134839972493],
            [0.539359889971, -0.934198732994, 0.134839972493],
        ],
        center=[0.0, 0.0, 0.134839972493],
    ),
    _polyhedron(
        "PBPY-7",
        "Pentagonal Bipyramidal",
        "D5h",
        [
            [0.0, 0.0, -1.06904496765],
            [1.06904496765, 0.0, 0.0],
            [0.330353062755, 1.016722182696, 0.0],
            [-0.86487554658, 0.628368866022, 0.0],
            [-0.86487554658, -0.628368866022, 0.0],
            [0.330353062755, -1.016722182696, 0.0],
            [0.0, 0.0, 1.06904496765],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "COC-7",
        "Capped Octahedral",
        "C3v",
        [
            [0.0, 0.0, 1.128906708829],
            [0.0, -1.046937018035, 0.28307854857],
            [0.90667403265, 0.523468509017, 0.28307854857],
            [-0.90667403265, 0.523468509017, 0.28307854857],
            [0.672964536915, -0.388536257092, -0.678734552207],
            [-0.672964536915, -0.388536257092, -0.678734552207],
            [0.0, 0.777072514184, -0.678734552207],
        ],
        center=[0.0, 0.0, 0.058061302083],
    ),
    _polyhedron(
        "CTPR-7",
        "Capped Trigonal Prism",
        "C2v",
        [
            [0.0, 0.0, 1.020027096827],
            [0.735247575071, 0.735247575071, 0.203750780644],
            [-0.735247575071, 0.735247575071, 0.203750780644],
            [0.735247575071, -0.735247575071, 0.203750780644],
            [-0.735247575071, -0.735247575071, 0.203750780644],
            [0.660960557032, 0.0, -0.892328424325],
            [-0.660960557032, 0.0, -0.892328424325],
        ],
        center=[0.0, 0.0, -0.050373370753],
    ),
    _polyhedron(
        "JPBPY-7",
        "Johnson Pentagonal Bipyramid, J13",
        "D5h",
        [
            [1.178109256681, 0.0, 0.0],
            [0.364055781545, 1.120448485474, 0.0],
            [-0.953110409886, 0.692475246666, 0.0],
            [-0.953110409886, -0.692475246666, 0.0],
            [0.364055781545, -1.120448485474, 0.0],
            [0.0, 0.0, 0.72811156309],
            [0.0, 0.0, -0.72811156309],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "JETPY-7",
        "Elongated Triangular Pyramid, J7",
        "C3v",
        [
            [0.729093431342, 0.0, 0.42360002676],
            [0.729093431342, 0.0, -0.839226839789],
            [-0.364546715671, 0.631413433275, 0.42360002676],
            [-0.364546715671, 0.631413433275, -0.839226839789],
            [-0.364546715671, -0.631413433275, 0.42360002676],
            [-0.364546715671, -0.631413433275, -0.839226839789],
            [0.0, 0.0, 1.454693845602],
        ],
        center=[0.0, 0.0, -0.207813406515],
    ),
    # CN=8
    _polyhedron(
        "OP-8",
        "Octagon",
        "D8h",
        [
            [1.06066017178, 0.0, 0.0],
            [0.75, 0.75, 0.0],
            [0.0, 1.06066017178, 0.0],
            [-0.75, 0.75, 0.0],
            [-1.06066017178, 0.0, 0.0],
            [-0.75, -0.75, 0.0],
            [0.0, -1.06066017178, 0.0],
            [0.75, -0.75, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "HPY-8",
        "Heptagonal Pyramid",
        "C7v",
        [
            [0.0, 0.0, -0.949425326555],
            [1.068103492374, 0.0, 0.118678165819],
            [0.665951634825, 0.835076936872, 0.118678165819],
            [-0.237675386685, 1.041323907815, 0.118678165819],
            [-0.962327994327, 0.463432737036, 0.118678165819],
            [-0.962327994327, -0.463432737036, 0.118678165819],
            [-0.237675386685, -1.041323907815, 0.118678165819],
            [0.665951634825, -0.835076936872, 0.118678165819],
        ],
        center=[0.0, 0.0, 0.118678165819],
    ),
    _polyhedron(
        "HBPY-8",
        "Hexagonal Bipyramid",
        "D6h",
        [
            [0.0, 0.0, -1.06066017178],
            [1.06066017178, 0.0, 0.0],
            [0.53033008589, 0.918558653544, 0.0],
            [-0.53033008589, 0.918558653544, 0.0],
            [-1.06066017178, 0.0, 0.0],
            [-0.53033008589, -0.918558653544, 0.0],
            [0.53033008589, -0.918558653544, 0.0],
            [0.0, 0.0, 1.06066017178],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "CU-8",
        "Cube",
        "Oh",
        [
            [0.866025403784, 0.0, -0.612372435696],
            [0.0, 0.866025403784, -0.612372435696],
            [-0.866025403784, 0.0, -0.612372435696],
            [0.0, -0.866025403784, -0.612372435696],
            [0.866025403784, 0.0, 0.612372435696],
            [0.0, 0.866025403784, 0.612372435696],
            [-0.866025403784, 0.0, 0.612372435696],
            [0.0, -0.866025403784, 0.612372435696],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "SAPR-8",
        "Square Antiprism",
        "D4d",
        [
            [0.644649377827, 0.644649377827, -0.54208335091],
            [-0.644649377827, 0.644649377827, -0.54208335091],
            [-0.644649377827, -0.644649377827, -0.54208335091],
            [0.644649377827, -0.644649377827, -0.54208335091],
            [0.911671893098, 0.0, 0.54208335091],
            [0.0, 0.911671893098, 0.54208335091],
            [-0.911671893098, 0.0, 0.54208335091],
            [0.0, -0.911671893098, 0.54208335091],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "TDD-8",
        "Triangular Dodecahedron",
        "D2d",
        [
            [-0.636106245143, 0.0, 0.848768388024],
            [-0.000000009579, -0.993210924257, 0.372146720241],
            [0.636106254722, 0.0, 0.848768388024],
            [-0.000000009579, 0.993210924257, 0.372146720241],
            [-0.993210876363, 0.0, -0.372146742591],
            [-0.000000009579, -0.636106206828, -0.848768374454],
            [0.993210914678, 0.0, -0.372146742591],
            [-0.000000009579, 0.636106206828, -0.848768374454],
        ],
        center=[-0.000000009579, 0.0, 0.000000017561],
    ),
    _polyhedron(
        "JGBF-8",
        "Gyrobifastigium, J26",
        "D2d",
        [
            [0.612372435696, 0.0, 1.06066017178],
            [-0.612372435696, 0.0, 1.06066017178],
            [0.612372435696, 0.612372435696, 0.0],
            [0.612372435696, -0.612372435696, 0.0],
            [-0.612372435696, -0.612372435696, 0.0],
            [-0.612372435696, 0.612372435696, 0.0],
            [0.0, 0.612372435696, -1.06066017178],
            [0.0, -0.612372435696, -1.06066017178],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "JETBPY-8",
        "Elongated Triangular Bipyramid, J14",
        "D3h",
        [
            [0.656233980527, 0.0, 0.568315297963],
            [0.656233980527, 0.0, -0.568315297963],
            [-0.328116990263, 0.568315297963, 0.568315297963],
            [-0.328116990263, 0.568315297963, -0.568315297963],
            [-0.328116990263, -0.568315297963, 0.568315297963],
            [-0.328116990263, -0.568315297963, -0.568315297963],
            [0.0, 0.0, 1.496370293314],
            [0.0, 0.0, -1.496370293314],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "JBTPR-8",
        "Biaugmented Trigonal Prism, J50",
        "C2v",
        [
            [0.647117793293, 0.0, 0.604029879248],
            [-0.647117793293, 0.0, 0.604029879248],
            [0.647117793293, 0.647117793293, -0.516811012319],
            [-0.647117793293, 0.647117793293, -0.516811012319],
            [0.647117793293, -0.647117793293, -0.516811012319],
            [-0.647117793293, -0.647117793293, -0.516811012319],
            [0.0, 1.116113113681, 0.501190825503],
            [0.0, -1.116113113681, 0.501190825503],
        ],
        center=[0.0, 0.0, -0.143197360226],
    ),
    _polyhedron(
        "BTPR-8",
        "Biaugmented Trigonal Prism",
        "C2v",
        [
            [0.699237877649, 0.0, 0.688732178156],
            [-0.699237877649, 0.0, 0.688732178156],
            [0.699237877649, 0.699237877649, -0.522383347216],
            [-0.699237877649, 0.699237877649, -0.522383347216],
            [0.699237877649, -0.699237877649, -0.522383347216],
            [-0.699237877649, -0.699237877649, -0.522383347216],
            [0.0, 0.925004726938, 0.415373590668],
            [0.0, -0.925004726938, 0.415373590668],
        ],
        center=[0.0, 0.0, -0.118678148784],
    ),
    _polyhedron(
        "JSD-8",
        "Snub Disphenoid, J84",
        "D2d",
        [
            [-0.652225622594, 0.0, -1.022598826988],
            [0.652225622594, 0.0, -1.022598826988],
            [0.840828401428, 0.0, 0.268145244516],
            [-0.840828401428, 0.0, 0.268145244516],
            [0.0, -0.652225622594, 1.022598102293],
            [0.0, 0.652225622594, 1.022598102293],
            [0.0, -0.840828401428, -0.26814466476],
            [0.0, 0.840828401428, -0.26814466476],
        ],
        center=[0.0, 0.0, 0.000000289878],
    ),
    _polyhedron(
        "TT-8",
        "Triakis Tetrahedron",
        "Td",
        [
            [0.0, 0.0, 0.951989349863],
            [-0.897415499947, 0.0, -0.317824238862],
            [0.448707702372, -0.777184634355, -0.317824238862],
            [0.448707702372, 0.777184634355, -0.317824238862],
            [0.0, 0.0, -1.159193629094],
            [1.092673129412, 0.0, 0.386903234355],
            [-0.546336517105, 0.946282696936, 0.386903234355],
            [-0.546336517105, -0.946282696936, 0.386903234355],
        ],
        center=[0.0, 0.0, -0.000032707247],
    ),
    # CN=9
    _polyhedron(
        "EP-9",
        "Enneagon",
        "D9h",
        [
            [1.054092553389, 0.0, 0.0],
            [0.807481743057, 0.677557632782, 0.0],
            [0.183041250988, 1.03807851897, 0.0],
            [-0.527046276695, 0.912870929175, 0.0],
            [-0.990522994045, 0.360520886189, 0.0],
            [-0.990522994045, -0.360520886189, 0.0],
            [-0.527046276695, -0.912870929175, 0.0],
            [0.183041250988, -1.03807851897, 0.0],
            [0.807481743057, -0.677557632782, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "OPY-9",
        "Octagonal Pyramid",
        "C8v",
        [
            [0.0, 0.0, -0.953998092006],
            [1.059997880006, 0.0, 0.105999788001],
            [0.749531688996, 0.749531688996, 0.105999788001],
            [0.0, 1.059997880006, 0.105999788001],
            [-0.749531688996, 0.749531688996, 0.105999788001],
            [-1.059997880006, 0.0, 0.105999788001],
            [-0.749531688996, -0.749531688996, 0.105999788001],
            [0.0, -1.059997880006, 0.105999788001],
            [0.749531688996, -0.749531688996, 0.105999788001],
        ],
        center=[0.0, 0.0, 0.105999788001],
    ),
    _polyhedron(
        "HBPY-9",
        "Heptagonal Bipyramid",
        "D7h",
        [
            [0.0, 0.0, -1.054092553389],
            [1.054092553389, 0.0, 0.0],
            [0.657215957254, 0.824122743675, 0.0],
            [-0.234557659457, 1.027664252322, 0.0],
            [-0.949704574492, 0.457353618441, 0.0],
            [-0.949704574492, -0.457353618441, 0.0],
            [-0.234557659457, -1.027664252322, 0.0],
            [0.657215957254, -0.824122743675, 0.0],
            [0.0, 0.0, 1.054092553389],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "JTC-9",
        "Triangular Cupola, J3",
        "C3v",
        [
            [1.09108945118, 0.0, 0.267261241912],
            [0.54554472559, 0.944911182523, 0.267261241912],
            [-0.54554472559, 0.944911182523, 0.267261241912],
            [-1.09108945118, 0.0, 0.267261241912],
            [-0.54554472559, -0.944911182523, 0.267261241912],
            [0.54554472559, -0.944911182523, 0.267261241912],
            [0.54554472559, 0.314970394174, -0.623609564462],
            [-0.54554472559, 0.314970394174, -0.623609564462],
            [0.0, -0.629940788349, -0.623609564462],
        ],
        center=[0.0, 0.0, 0.267261241912],
    ),
    _polyhedron(
        "JCCU-9",
        "Capped Cube, J8",
        "C4v",
        [
            [0.82696065205, 0.0, 0.44357847115],
            [0.82696065205, 0.0, -0.725920498528],
            [0.0, 0.82696065205, 0.44357847115],
            [0.0, 0.82696065205, -0.725920498528],
            [-0.82696065205, 0.0, 0.44357847115],
            [-0.82696065205, 0.0, -0.725920498528],
            [0.0, -0.82696065205, 0.44357847115],
            [0.0, -0.82696065205, -0.725920498528],
            [0.0, 0.0, 1.2705391232],
        ],
        center=[0.0, 0.0, -0.141171013689],
    ),
    _polyhedron(
        "CCU-9",
        "Capped Cube",
        "C4v",
        [
            [0.676580145336, 0.676580145336, 0.433150734305],
            [0.676580145336, -0.676580145336, 0.433150734305],
            [-0.676580145336, 0.676580145336, 0.433150734305],
            [-0.676580145336, -0.676580145336, 0.433150734305],
            [0.567844822329, 0.567844822329, -0.692079759449],
            [0.567844822329, -0.567844822329, -0.692079759449],
            [-0.567844822329, 0.567844822329, -0.692079759449],
            [-0.567844822329, -0.567844822329, -0.692079759449],
            [0.0, 0.0, 1.044926731187],
        ],
        center=[0.0, 0.0, -0.009210630612],
    ),
    _polyhedron(
        "JCSAPR-9",
        "Capped Square Antiprism, J10",
        "C4v",
        [
            [0.87314064349, 0.0, 0.658403850449],
            [0.617403669941, 0.617403669941, -0.379941215187],
            [0.0, 0.87314064349, 0.658403850449],
            [-0.617403669941, 0.617403669941, -0.379941215187],
            [-0.87314064349, 0.0, 0.658403850449],
            [-0.617403669941, -0.617403669941, -0.379941215187],
            [0.0, -0.87314064349, 0.658403850449],
            [0.617403669941, -0.617403669941, -0.379941215187],
            [0.0, 0.0, -1.253081858677],
        ],
        center=[0.0, 0.0, 0.139231317631],
    ),
    _polyhedron(
        "CSAPR-9",
        "Capped Square Antiprism",
        "C4v",
        [
            [0.0, 0.0, 1.053083142672],
            [0.982653581851, 0.0, 0.38044015658],
            [0.0, 0.982653581851, 0.38044015658],
            [-0.982653581851, 0.0, 0.38044015658],
            [0.0, -0.982653581851, 0.38044015658],
            [0.59091969017, 0.59091969017, -0.643458455172],
            [-0.59091969017, 0.59091969017, -0.643458455172],
            [-0.59091969017, -0.59091969017, -0.643458455172],
            [0.59091969017, -0.59091969017, -0.643458455172],
        ],
        center=[0.0, 0.0, -0.001009948303],
    ),
    _polyhedron(
        "JTCTPR-9",
        "Tricapped Trigonal Prism, J51",
        "D3h",
        [
            [0.621382007554, 0.621382007554, 0.358755069151],
            [-0.621382007554, 0.621382007554, 0.358755069151],
            [0.621382007554, -0.621382007554, 0.358755069151],
            [-0.621382007554, -0.621382007554, 0.358755069151],
            [0.0, 0.621382007554, -0.717510138861],
            [0.0, -0.621382007554, -0.717510138861],
            [1.071725432946, 0.0, -0.618760966112],
            [-1.071725432946, 0.0, -0.618760966112],
            [0.0, 0.0, 1.237521933529],
        ],
        center=[0.0, 0.0, -0.000000000186],
    ),
    _polyhedron(
        "TCTPR-9",
        "Tricapped Trigonal Prism",
        "D3h",
        [
            [0.702728368926, 0.0, 0.785674201318],
            [-0.351364184463, 0.60858061945, 0.785674201318],
            [-0.351364184463, -0.60858061945, 0.785674201318],
            [0.702728368926, 0.0, -0.785674201318],
            [-0.351364184463, 0.60858061945, -0.785674201318],
            [-0.351364184463, -0.60858061945, -0.785674201318],
            [-1.054092553389, 0.0, 0.0],
            [0.527046276695, 0.912870929175, 0.0],
            [0.527046276695, -0.912870929175, 0.0],
        ],
        center=[0.0, 0.0, 0.0],
    ),
    _polyhedron(
        "JTDIC-9",
        "Tridiminished Icosahedron, J63",
        "C3v",
        [
            [-0.262672206048, 0.919451307875, -0.425012557285],
            [-0.91528654885, 0.021204725402, -0.425012557285],
            [-0.262672206048, -0.877041857071, -0.425012557285],
            [0.793279982152, -0.533942192845, -0.425012557285],
            [0.973658150194, 0.021204725402, 0.519459792237],
            [0.321043807391, 0.919451307875, 0.519459792237],
            [-0.734908380808, -0.533942192845, 0.519459792237],
            [0.029185800672, 0.021204725402, -1.008728570724],
            [0.029185800672, 0.021204725402, 1.103175805676],
        ],
        center=[0.029185800672, 0.021204725402, 0.047223617476],
    ),
    _polyhedron(
        "HH-9",
        "Hula-hoop",
        "C2v",
        [
            [1.057244898055, 0.0, 0.077395698145],
            [0.528622449027, 0.915600935736, 0.077395698145],
            [-0.528622449027, 0.915600935736, 0.077395698145],
            [-1.057244898055, 0.0, 0.077395698145],
            [-0.528622449027, -0.915600935736, 0.077395698145],
            [0.528622449027, -0.915600935736, 0.077395698145],
            [0.0, 0.0, 1.1346405962],
            [0.528622449027, 0.0, -0.838205241608],
            [-0.528622449027, 0.0, -0.838205241608],
        ],
        center=[0.0, 0.0, 0.077395698145],
    ),
    _polyhedron(
        "MFF-9",
        "Muffin",
        "Cs",
        [
            [0.0, 1.042109568232, 0.212992870476],
            [0.990863900028, 0.322171619609, 0.212992870476],
            [0.61240043265, -0.842614003292, 0.212992870476],
            [-0.61240043265, -0.842614003292, 0.212992870476],
            [-0.990863900028, 0.322171619609, 0.212992870476],
            [-0.61240043265, -0.35416341821, -0.737452600997],
            [0.61240043265, -0.35416341821, -0.737452600997],
            [0.0, 0.70651413114, -0.737452600997],
            [0.0, 0.000293952208, 1.100973497819],
        ],
        center=[0.0, 0.000293952208, 0.046419952795],
    ),
    # CN=10
    _polyhedron(
        "DP-10",
        "Decagon",
        "D10h",
        _regular_polygon(10),
    ),
    _polyhedron(
        "EPY-10",
        "Enneagonal Pyramid",
        "C9v",
        [
            [0.0, 0.0, -0.957826],
            [1.053609, 0.0, 0.095783],
            [0.807111, 0.677247, 0.095783],
            [0.182957, 1.037602, 0.095783],
            [-0.526804, 0.912452, 0.095783],
            [-0.990069, 0.360355, 0.095783],
            [-0.990069, -0.360355, 0.095783],
            [-0.526804, -0.912452, 0.095783],
            [0.182957, -1.037602, 0.095783],
            [0.807111, -0.677247, 0.095783],
        ],
    ),
    _polyhedron(
        "OBPY-10",
        "Octagonal Bipyramid",
        "D8h",
        [
            [0.0, 0.0, -1.048809],
            [1.048809, 0.0, 0.0],
            [0.74162, 0.74162, 0.0],
            [0.0, 1.048809, 0.0],
            [-0.74162, 0.74162, 0.0],
            [-1.048809, 0.0, 0.0],
            [-0.74162, -0.74162, 0.0],
            [0.0, -1.048809, 0.0],
            [0.74162, -0.74162, 0.0],
            [0.0, 0.0, 1.048809],
        ],
    ),
    _polyhedron(
        "PPR-10",
        "Pentagonal Prism",
        "D5h",
        [
            [0.904182, 0.0, -0.531465],
            [0.279408, 0.859928, -0.531465],
            [-0.731499, 0.531465, -0.531465],
            [-0.731499, -0.531465, -0.531465],
            [0.279408, -0.859928, -0.531465],
            [0.904182, 0.0, 0.531465],
            [0.279408, 0.859928, 0.531465],
            [-0.731499, 0.531465, 0.531465],
            [-0.731499, -0.531465, 0.531465],
            [0.279408, -0.859928, 0.531465],
        ],
    ),
    _polyhedron(
        "PAPR-10",
        "Pentagonal Antiprism",
        "D5d",
        [
            [0.758925, 0.551391, -0.469042],
            [-0.289884, 0.89217, -0.469042],
            [-0.938083, 0.0, -0.469042],
            [-0.289884, -0.89217, -0.469042],
            [0.758925, -0.551391, -0.469042],
            [0.938083, 0.0, 0.469042],
            [0.289884, 0.89217, 0.469042],
            [-0.758925, 0.551391, 0.469042],
            [-0.758925, -0.551391, 0.469042],
            [0.289884, -0.89217, 0.469042],
        ],
    ),
    _polyhedron(
        "JBCCU-10",
        "Bicapped Cube, J15",
        "D4h",
        [
            [0.785488, 0.0, 0.555424],
            [0.785488, 0.0, -0.555424],
            [0.0, 0.785488, 0.555424],
            [0.0, 0.785488, -0.555424],
            [-0.785488, 0.0, 0.555424],
            [-0.785488, 0.0, -0.555424],
            [0.0, -0.785488, 0.555424],
            [0.0, -0.785488, -0.555424],
            [0.0, 0.0, 1.340913],
            [0.0, 0.0, -1.340913],
        ],
    ),
    _polyhedron(
        "JBCSAPR-10",
        "Bicapped Square Antiprism, J17",
        "D4d",
        [
            [0.831395, 0.0, 0.49435],
            [0.587885, 0.587885, -0.49435],
            [0.0, 0.831395, 0.49435],
            [-0.587885, 0.587885, -0.49435],
            [-0.831395, 0.0, 0.49435],
            [-0.587885, -0.587885, -0.49435],
            [0.0, -0.831395, 0.49435],
            [0.587885, -0.587885, -0.49435],
            [0.0, 0.0, 1.325745],
            [0.0, 0.0, -1.325745],
        ],
    ),
    _polyhedron(
        "JMBIC-10",
        "Metabidiminished Icosahedron, J62",
        "C2v",
        [
            [-0.797541, -0.588213, -0.373113],
            [-0.917507, 0.299842, 0.279142],
            [-0.042218, 0.961291, 0.121562],
            [0.15186, -0.475674, -0.933829],
            [0.548711, -0.584891, 0.811695],
            [-0.085441, 0.301899, 1.011328],
            [0.108597, -1.135033, -0.043961],
            [0.863981, 0.414498, 0.450639],
            [-0.482332, 0.411183, -0.734149],
            [0.618676, 0.482007, -0.628091],
        ],
    ),
    _polyhedron(
        "JATDI-10",
        "Augmented Tridiminished Icosahedron, J64",
        "C3v",
        [
            [-0.00138, -0.28782, -0.953537],
            [-0.508204, -0.874651, -0.286524],
            [0.005406, -0.863863, 0.597917],
            [0.829615, -0.270393, 0.477497],
            [0.508402, 0.681753, 0.28691],
            [-0.005208, 0.670964, -0.597531],
            [-0.825215, -0.278511, 0.481717],
            [0.514536, -0.869597, -0.289125],
            [-0.514338, 0.676698, 0.289511],
            [-0.003712, 1.511869, -0.007028],
        ],
    ),
    _polyhedron(
        "JSPC-10",
        "Sphenocorona, J87",
        "C2v",
        [
            [-1.001872, -0.08383, -0.581156],
            [-1.002035, -0.076631, 0.581869],
            [-0.516334, 0.802168, -0.005029],
            [0.028693, 0.335227, -0.920231],
            [-0.064316, -0.772041, -0.57676],
            [-0.064478, -0.76483, 0.586265],
            [0.028438, 0.346602, 0.916012],
            [0.642643, 0.705054, -0.004284],
            [0.974705, -0.24946, -0.579854],
            [0.974554, -0.242261, 0.583171],
        ],
    ),
    _polyhedron(
        "SDD-10",
        "Staggered Dodecahedron 2:6:2",
        "D2",
        [
            [-0.524414, 0.908285, 0.0],
            [0.524414, 0.908285, 0.0],
            [-1.048828, 0.0, 0.0],
            [1.048828, 0.0, 0.0],
            [-0.524414, -0.908285, 0.0],
            [0.524414, -0.908285, 0.0],
            [-0.524414, 0.0, 0.908285],
            [0.524414, 0.0, 0.908285],
            [0.262207, 0.454143, -0.908285],
            [-0.262207, -0.454143, -0.908285],
        ],
    ),
    _polyhedron(
        "TD-10",
        "Tetradecahedron 2:6:2",
        "C2v",
        [
            [-0.524414, 0.908284, 0.0],
            [0.524414, 0.908284, 0.0],
            [-1.048827, 0.0, 0.0],
            [1.048827, 0.0, 0.0],
            [-0.524414, -0.908284, 0.0],
            [0.524414, -0.908284, 0.0],
            [-0.524414, 0.0, 0.908284],
            [0.524414, 0.0, 0.908284],
            [0.0, 0.524414, -0.908284],
            [0.0, -0.524414, -0.908284],
        ],
    ),
    _polyhedron(
        "HD-10",
        "Hexadecahedron 2:6:2",
        "D4h",
        [
            [-0.524414, 0.908284, 0.0],
            [0.524414, 0.908284, 0.0],
            [-1.048827, 0.0, 0.0],
            [1.048827, 0.0, 0.0],
            [-0.524414, -0.908284, 0.0],
            [0.524414, -0.908284, 0.0],
            [-0.524414, 0.0, 0.908284],
            [0.524414, 0.0, 0.908284],
            [-0.524414, 0.0, -0.908284],
            [0.524414, 0.0, -0.908284],
        ],
    ),
    # CN=11
    _polyhedron(
        "HP-11",
        "Hendecagon",
        "D11h",
        _regular_polygon(11),
    ),
    _polyhedron(
        "DPY-11",
        "Decagonal Pyramid",
        "C10v",
        [
            [0.0, 0.0, -0.961074],
            [1.048445, 0.0, 0.08737],
            [0.84821, 0.61626, 0.08737],
            [0.323987, 0.99713, 0.08737],
            [-0.323987, 0.99713, 0.08737],
            [-0.84821, 0.61626, 0.08737],
            [-1.048445, 0.0, 0.08737],
            [-0.84821, -0.61626, 0.08737],
            [-0.323987, -0.99713, 0.08737],
            [0.323987, -0.99713, 0.08737],
            [0.84821, -0.61626, 0.08737],
        ],
    ),
    _polyhedron(
        "EBPY-11",
        "Enneagonal Bipyramid",
        "D9h",
        [
            [0.0, 0.0, -1.044466],
            [1.044466, 0.0, 0.0],
            [0.800107, 0.67137, 0.0],
            [0.18137, 1.028598, 0.0],
            [-0.522233, 0.904534, 0.0],
            [-0.981477, 0.357228, 0.0],
            [-0.981477, -0.357228, 0.0],
            [-0.522233, -0.904534, 0.0],
            [0.18137, -1.028598, 0.0],
            [0.800107, -0.67137, 0.0],
            [0.0, 0.0, 1.044466],
        ],
    ),
    _polyhedron(
        "JCPPR-11",
        "Capped Pentagonal Prism, J9",
        "C5v",
        [
            [0.900823, 0.0, 0.438971],
            [0.900823, 0.0, -0.62001],
            [0.27837, 0.856734, 0.438971],
            [0.27837, 0.856734, -0.62001],
            [-0.728781, 0.529491, 0.438971],
            [-0.728781, 0.529491, -0.62001],
            [-0.728781, -0.529491, 0.438971],
            [-0.728781, -0.529491, -0.62001],
            [0.27837, -0.856734, 0.438971],
            [0.27837, -0.856734, -0.62001],
            [0.0, 0.0, 0.995711],
        ],
    ),
    _polyhedron(
        "JCPAPR-11",
        "Capped Pentagonal Antiprism, J11",
        "C5v",
        [
            [0.937758, 0.0, 0.556249],
            [0.758662, 0.5512, -0.381508],
            [0.289783, 0.89186, 0.556249],
            [-0.289783, 0.89186, -0.381508],
            [-0.758662, 0.5512, 0.556249],
            [-0.937758, 0.0, -0.381508],
            [-0.758662, -0.5512, 0.556249],
            [-0.289783, -0.89186, -0.381508],
            [0.289783, -0.89186, 0.556249],
            [0.758662, -0.5512, -0.381508],
            [0.0, 0.0, -0.961074],
        ],
    ),
    _polyhedron(
        "JAPPR-11",
        "Augmented Pentagonal Prism, J52",
        "C2v",
        [
            [0.0, -1.305264, 0.0],
            [0.0, 0.986976, 0.510294],
            [0.825655, 0.386871, 0.510294],
            [0.510294, -0.583708, 0.510294],
            [-0.510294, -0.583708, 0.510294],
            [-0.825655, 0.386871, 0.510294],
            [0.0, 0.986976, -0.510294],
            [0.825655, 0.386871, -0.510294],
            [0.510294, -0.583708, -0.510294],
            [-0.510294, -0.583708, -0.510294],
            [-0.825655, 0.386871, -0.510294],
        ],
    ),
    _polyhedron(
        "JASPC-11",
        "Augmented Sphenocorona, J87",
        "Cs",
        [
            [-0.549649, -0.001864, 0.864507],
            [0.549649, -0.001864, 0.864507],
            [0.0, 0.867614, 0.476754],
            [-0.867816, 0.476159, -0.072895],
            [-0.549649, -0.57609, -0.072895],
            [0.549649, -0.57609, -0.072895],
            [0.867816, 0.476159, -0.072895],
            [0.0, 0.867614, -0.622545],
            [-0.549649, -0.001864, -1.010297],
            [0.549649, -0.001864, -1.010297],
            [0.0, -0.951821, 0.801846],
        ],
    ),
    # CN=12
    _polyhedron(
        "DP-12",
        "Dodecagon",
        "D12h",
        _regular_polygon(12),
    ),
    _polyhedron(
        "HPY-12",
        "Hendecagonal Pyramid",
        "C11v",
        [
            [0.0, 0.0, -0.963863],
            [1.044185, 0.0, 0.080322],
            [0.878424, 0.564529, 0.080322],
            [0.43377, 0.949824, 0.080322],
            [-0.148603, 1.033557, 0.080322],
            [-0.683796, 0.789142, 0.080322],
            [-1.001888, 0.294181, 0.080322],
            [-1.001888, -0.294181, 0.080322],
            [-0.683796, -0.789142, 0.080322],
            [-0.148603, -1.033557, 0.080322],
            [0.43377, -0.949824, 0.080322],
            [0.878424, -0.564529, 0.080322],
        ],
    ),
    _polyhedron(
        "DBPY-12",
        "Decagonal Bipyramid",
        "D10h",
        [
            [0.0, 0.0, -1.040833],
            [1.040833, 0.0, 0.0],
            [0.842052, 0.611786, 0.0],
            [0.321635, 0.989891, 0.0],
            [-0.321635, 0.989891, 0.0],
            [-0.842052, 0.611786, 0.0],
            [-1.040833, 0.0, 0.0],
            [-0.842052, -0.611786, 0.0],
            [-0.321635, -0.989891, 0.0],
            [0.321635, -0.989891, 0.0],
            [0.842052, -0.611786, 0.0],
            [0.0, 0.0, 1.040833],
        ],
    ),
    _polyhedron(
        "HPR-12",
        "Hexagonal Prism",
        "D6h",
        [
            [0.930949, 0.0, -0.465475],
            [0.465475, 0.806226, -0.465475],
            [-0.465475, 0.806226, -0.465475],
            [-0.930949, 0.0, -0.465475],
            [-0.465475, -0.806226, -0.465475],
            [0.465475, -0.806226, -0.465475],
            [0.930949, 0.0, 0.465475],
            [0.465475, 0.806226, 0.465475],
            [-0.465475, 0.806226, 0.465475],
            [-0.930949, 0.0, 0.465475],
            [-0.465475, -0.806226, 0.465475],
            [0.465475, -0.806226, 0.465475],
        ],
    ),
    _polyhedron(
        "HAPR-12",
        "Hexagonal Antiprism",
        "D6d",
        [
            [0.828737, 0.478472, -0.40938],
            [0.0, 0.956944, -0.40938],
            [-0.828737, 0.478472, -0.40938],
            [-0.828737, -0.478472, -0.40938],
            [0.0, -0.956944, -0.40938],
            [0.828737, -0.478472, -0.40938],
            [0.956944, 0.0, 0.40938],
            [0.478472, 0.828737, 0.40938],
            [-0.478472, 0.828737, 0.40938],
            [-0.956944, 0.0, 0.40938],
            [-0.478472, -0.828737, 0.40938],
            [0.478472, -0.828737, 0.40938],
        ],
    ),
    _polyhedron(
        "TT-12",
        "Truncated Tetrahedron",
        "Td",
        [
            [0.0, 0.443813, -0.941469],
            [0.443813, 0.887625, -0.313823],
            [-0.443813, 0.887625, -0.313823],
            [0.0, -0.443813, -0.941469],
            [0.443813, -0.887625, -0.313823],
            [-0.443813, -0.887625, -0.313823],
            [0.887625, 0.443813, 0.313823],
            [0.887625, -0.443813, 0.313823],
            [0.443813, 0.0, 0.941469],
            [-0.887625, 0.443813, 0.313823],
            [-0.887625, -0.443813, 0.313823],
            [-0.443813, 0.0, 0.941469],
        ],
    ),
    _polyhedron(
        "COC-12",
        "Cuboctahedral",
        "Oh",
        [
            [0.520416, 0.520416, -0.73598],
            [0.520416, -0.520416, -0.73598],
            [1.040833, 0.0, 0.0],
            [-0.520416, 0.520416, -0.73598],
            [0.0, 1.040833, 0.0],
            [-0.520416, -0.520416, -0.73598],
            [-1.040833, 0.0, 0.0],
            [0.0, -1.040833, 0.0],
            [0.520416, 0.520416, 0.73598],
            [0.520416, -0.520416, 0.73598],
            [-0.520416, 0.520416, 0.73598],
            [-0.520416, -0.520416, 0.73598],
        ],
    ),
    _polyhedron(
        "ACOC-12",
        "Anticuboctahedron, J27",
        "D3h",
        [
            [0.600925, 0.0, -0.849837],
            [-0.300463, 0.520416, -0.849837],
            [-0.300463, -0.520416, -0.849837],
            [0.901388, 0.520416, 0.0],
            [0.0, 1.040833, 0.0],
            [-0.901388, 0.520416, 0.0],
            [-0.901388, -0.520416, 0.0],
            [0.0, -1.040833, 0.0],
            [0.901388, -0.520416, 0.0],
            [0.600925, 0.0, 0.849837],
            [-0.300463, 0.520416, 0.849837],
            [-0.300463, -0.520416, 0.849837],
        ],
    ),
    _polyhedron(
        "IC-12",
        "Icosahedral",
        "Ih",
        [
            [0.753154, 0.547198, -0.465475],
            [-0.287679, 0.885385, -0.465475],
            [-0.930949, 0.0, -0.465475],
            [-0.287679, -0.885385, -0.465475],
            [0.753154, -0.547198, -0.465475],
            [0.930949, 0.0, 0.465475],
            [0.287679, 0.885385, 0.465475],
            [-0.753154, 0.547198, 0.465475],
            [-0.753154, -0.547198, 0.465475],
            [0.287679, -0.885385, 0.465475],
            [0.0, 0.0, -1.040833],
            [0.0, 0.0, 1.040833],
        ],
    ),
    _polyhedron(
        "JSC-12",
        "Square Cupola, J4",
        "C4v",
        [
            [1.141165, 0.0, 0.190029],
            [0.806926, 0.806926, 0.190029],
            [0.0, 1.141165, 0.190029],
            [-0.806926, 0.806926, 0.190029],
            [-1.141165, 0.0, 0.190029],
            [-0.806926, -0.806926, 0.190029],
            [0.0, -1.141165, 0.190029],
            [0.806926, -0.806926, 0.190029],
            [0.570583, 0.236343, -0.427565],
            [-0.236343, 0.570583, -0.427565],
            [-0.570583, -0.236343, -0.427565],
            [0.236343, -0.570583, -0.427565],
        ],
    ),
    _polyhedron(
        "JEPBPY-12",
        "Elongated Pentagonal Bipyramid, J16",
        "D5h",
        [
            [0.891336, 0.0, 0.523914],
            [0.891336, 0.0, -0.523914],
            [0.275438, 0.847711, 0.523914],
            [0.275438, 0.847711, -0.523914],
            [-0.721106, 0.523914, 0.523914],
            [-0.721106, 0.523914, -0.523914],
            [-0.721106, -0.523914, 0.523914],
            [-0.721106, -0.523914, -0.523914],
            [0.275438, -0.847711, 0.523914],
            [0.275438, -0.847711, -0.523914],
            [0.0, 0.0, 1.07479],
            [0.0, 0.0, -1.07479],
        ],
    ),
    _polyhedron(
        "JBAPPR-12",
        "Biaugmented Pentagonal Prism, J53",
        "C2v",
        [
            [0.852576, 0.48934, -0.061742],
            [0.277323, 0.48934, 0.730026],
            [-0.653457, 0.48934, 0.427597],
            [-0.653457, 0.48934, -0.551082],
            [0.277323, 0.48934, -0.853511],
            [0.852576, -0.48934, -0.061742],
            [0.277323, -0.48934, 0.730026],
            [-0.653457, -0.48934, 0.427597],
            [-0.653457, -0.48934, -0.551082],
            [0.277323, -0.48934, -0.853511],
            [-1.345488, 0.0, -0.061742],
            [1.124814, 0.0, 0.740907],
        ],
    ),
    _polyhedron(
        "JSPMC-12",
        "Sphenomegacorona, J88",
        "Cs",
        [
            [-0.506162, -0.030252, -0.601961],
            [-0.865277, 0.700144, 0.0],
            [0.0, 0.841196, -0.506162],
            [-1.298915, -0.2146, 0.0],
            [0.506162, -0.030252, -0.601961],
            [-0.506162, -0.844158, 0.0],
            [0.0, 0.841196, 0.506162],
            [-0.506162, -0.030252, 0.601961],
            [0.865277, 0.700144, 0.0],
            [0.506162, -0.844158, 0.0],
            [0.506162, -0.030252, 0.601961],
            [1.298915, -0.2146, 0.0],
        ],
    ),
    # CN=20
    _polyhedron(
        "DD-20",
        "Dodecahedron",
        "Ih",
        [
            [0.814279, 0.591608, -0.192225],
            [-0.311027, 0.957242, -0.192225],
            [-1.006504, 0.0, -0.192225],
            [-0.311027, -0.957242, -0.192225],
            [0.814279, -0.591608, -0.192225],
            [0.311027, 0.957242, 0.192225],
            [-0.814279, 0.591608, 0.192225],
            [-0.814279, -0.591608, 0.192225],
            [0.311027, -0.957242, 0.192225],
            [1.006504, 0.0, 0.192225],
            [0.503252, 0.365634, -0.814279],
            [-0.192225, 0.591608, -0.814279],
            [-0.622053, 0.0, -0.814279],
            [-0.192225, -0.591608, -0.814279],
            [0.503252, -0.365634, -0.814279],
            [0.192225, 0.591608, 0.814279],
            [-0.503252, 0.365634, 0.814279],
            [-0.503252, -0.365634, 0.814279],
            [0.192225, -0.591608, 0.814279],
            [0.622053, 0.0, 0.814279],
        ],
    ),
    # CN=24
    _polyhedron(
        "TCU-24",
        "Truncated Cube",
        "Oh",
        [
            [0.286881, 0.692592, 0.692592],
            [-0.286881, -0.692592, -0.692592],
            [0.286881, -0.692592, -0.692592],
            [-0.286881, 0.692592, -0.692592],
            [-0.286881, -0.692592, 0.692592],
            [0.286881, 0.692592, -0.692592],
            [-0.286881, 0.692592, 0.692592],
            [0.286881, -0.692592, 0.692592],
            [0.692592, 0.286881, 0.692592],
            [-0.692592, -0.286881, -0.692592],
            [0.692592, -0.286881, -0.692592],
            [-0.692592, 0.286881, -0.692592],
            [-0.692592, -0.286881, 0.692592],
            [0.692592, 0.286881, -0.692592],
            [-0.692592, 0.286881, 0.692592],
            [0.692592, -0.286881, 0.692592],
            [0.692592, 0.692592, 0.286881],
            [-0.692592, -0.692592, -0.286881],
            [0.692592, -0.692592, -0.286881],
            [-0.692592, 0.692592, -0.286881],
            [-0.692592, -0.692592, 0.286881],
            [0.692592, 0.692592, -0.286881],
            [-0.692592, 0.692592, 0.286881],
            [0.692592, -0.692592, 0.286881],
        ],
    ),
    _polyhedron(
        "TOC-24",
        "Truncated Octahedron",
        "Oh",
        [
            [0.912871, 0.456435, 0.0],
            [-0.912871, -0.456435, 0.0],
            [0.912871, -0.456435, 0.0],
            [-0.912871, 0.456435, 0.0],
            [0.0, 0.912871, 0.456435],
            [0.0, -0.912871, -0.456435],
            [0.0, 0.912871, -0.456435],
            [0.0, -0.912871, 0.456435],
            [0.456435, 0.0, 0.912871],
            [-0.456435, 0.0, -0.912871],
            [0.456435, 0.0, -0.912871],
            [-0.456435, 0.0, 0.912871],
            [0.456435, 0.912871, 0.0],
            [-0.456435, -0.912871, 0.0],
            [0.456435, -0.912871, 0.0],
            [-0.456435, 0.912871, 0.0],
            [0.0, 0.456435, 0.912871],
            [0.0, -0.456435, -0.912871],
            [0.0, 0.456435, -0.912871],
            [0.0, -0.456435, 0.912871],
            [0.912871, 0.0, 0.456435],
            [-0.912871, 0.0, -0.456435],
            [0.912871, 0.0, -0.456435],
            [-0.912871, 0.0, 0.456435],
        ],
    ),
    # CN=48
    _polyhedron(
        "TCOC-48",
        "Truncated Cuboctahedron",
        "Oh",
        [
            [0.217975, 0.526238, 0.834502],
            [-0.217975, -0.526238, -0.834502],
            [0.217975, -0.526238, -0.834502],
            [-0.217975, 0.526238, -0.834502],
            [-0.217975, -0.526238, 0.834502],
            [0.217975, 0.526238, -0.834502],
            [-0.217975, 0.526238, 0.834502],
            [0.217975, -0.526238, 0.834502],
            [0.217975, 0.834502, 0.526238],
            [-0.217975, -0.834502, -0.526238],
            [0.217975, -0.834502, -0.526238],
            [-0.217975, 0.834502, -0.526238],
            [-0.217975, -0.834502, 0.526238],
            [0.217975, 0.834502, -0.526238],
            [-0.217975, 0.834502, 0.526238],
            [0.217975, -0.834502, 0.526238],
            [0.526238, 0.217975, 0.834502],
            [-0.526238, -0.217975, -0.834502],
            [0.526238, -0.217975, -0.834502],
            [-0.526238, 0.217975, -0.834502],
            [-0.526238, -0.217975, 0.834502],
            [0.526238, 0.217975, -0.834502],
            [-0.526238, 0.217975, 0.834502],
            [0.526238, -0.217975, 0.834502],
            [0.526238, 0.834502, 0.217975],
            [-0.526238, -0.834502, -0.217975],
            [0.526238, -0.834502, -0.217975],
            [-0.526238, 0.834502, -0.217975],
            [-0.526238, -0.834502, 0.217975],
            [0.526238, 0.834502, -0.217975],
            [-0.526238, 0.834502, 0.217975],
            [0.526238, -0.834502, 0.217975],
            [0.834502, 0.526238, 0.217975],
            [-0.834502, -0.526238, -0.217975],
            [0.834502, -0.526238, -0.217975],
            [-0.834502, 0.526238, -0.217975],
            [-0.834502, -0.526238, 0.217975],
            [0.834502, 0.526238, -0.217975],
            [-0.834502, 0.526238, 0.217975],
            [0.834502, -0.526238, 0.217975],
            [0.834502, 0.217975, 0.526238],
            [-0.834502, -0.217975, -0.526238],
            [0.834502, -0.217975, -0.526238],
            [-0.834502, 0.217975, -0.526238],
            [-0.834502, -0.217975, 0.526238],
            [0.834502, 0.217975, -0.526238],
            [-0.834502, 0.217975, 0.526238],
            [0.834502, -0.217975, 0.526238],
        ],
    ),
    # CN=60
    _polyhedron(
        "TIC-60",
        "Truncated Icosahedron",
        "Ih",
        [
            [0.799214, 0.329187, -0.519191],
            [0.560046, 0.658374, -0.519191],
            [-0.066104, 0.861822, -0.519191],
            [-0.453087, 0.736084, -0.519191],
            [-0.840069, 0.203449, -0.519191],
            [-0.840069, -0.203449, -0.519191],
            [-0.453087, -0.736084, -0.519191],
            [-0.066104, -0.861822, -0.519191],
            [0.560046, -0.658374, -0.519191],
            [0.799214, -0.329187, -0.519191],
            [0.453087, 0.736084, 0.519191],
            [0.066104, 0.861822, 0.519191],
            [-0.560046, 0.658374, 0.519191],
            [-0.799214, 0.329187, 0.519191],
            [-0.799214, -0.329187, 0.519191],
            [-0.560046, -0.658374, 0.519191],
            [0.066104, -0.861822, 0.519191],
            [0.453087, -0.736084, 0.519191],
            [0.840069, -0.203449, 0.519191],
            [0.840069, 0.203449, 0.519191],
            [0.972278, 0.203449, -0.173064],
            [0.906173, 0.406897, 0.173064],
            [0.667005, 0.736084, 0.173064],
            [0.493942, 0.861822, -0.173064],
            [0.106959, 0.98756, -0.173064],
            [-0.106959, 0.98756, 0.173064],
            [-0.493942, 0.861822, 0.173064],
            [-0.667005, 0.736084, -0.173064],
            [-0.906173, 0.406897, -0.173064],
            [-0.972278, 0.203449, 0.173064],
            [-0.972278, -0.203449, 0.173064],
            [-0.906173, -0.406897, -0.173064],
            [-0.667005, -0.736084, -0.173064],
            [-0.493942, -0.861822, 0.173064],
            [-0.106959, -0.98756, 0.173064],
            [0.106959, -0.98756, -0.173064],
            [0.493942, -0.861822, -0.173064],
            [0.667005, -0.736084, 0.173064],
            [0.906173, -0.406897, 0.173064],
            [0.972278, -0.203449, -0.173064],
            [0.692255, 0.0, -0.73311],
            [0.346127, 0.0, -0.947028],
            [0.213919, 0.658374, -0.73311],
            [0.106959, 0.329187, -0.947028],
            [-0.560046, 0.406897, -0.73311],
            [-0.280023, 0.203449, -0.947028],
            [-0.560046, -0.406897, -0.73311],
            [-0.280023, -0.203449, -0.947028],
            [0.213919, -0.658374, -0.73311],
            [0.106959, -0.329187, -0.947028],
            [0.560046, 0.406897, 0.73311],
            [0.280023, 0.203449, 0.947028],
            [-0.213919, 0.658374, 0.73311],
            [-0.106959, 0.329187, 0.947028],
            [-0.692255, 0.0, 0.73311],
            [-0.346127, 0.0, 0.947028],
            [-0.213919, -0.658374, 0.73311],
            [-0.106959, -0.329187, 0.947028],
            [0.560046, -0.406897, 0.73311],
            [0.280023, -0.203449, 0.947028],
        ],
    ),
)
