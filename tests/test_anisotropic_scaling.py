import numpy as np
import pytest

from coordshape.core.domain.implementations.anisotropic_scaling import (
    AnisotropicScalingFit,
    DistortionCategory,
    classify_distortion,
    describe_scaling,
    distortion_index,
    scale_along_axes,
)
from coordshape.core.domain.models.point_set import prepare_coordination_points
from coordshape.core.domain.models.search_mode import SearchMode
from coordshape.core.services.shape_analysis_service import ShapeAnalysisService
from coordshape.core.utils.rotations import euler_xyz_matrix


def elongated_octahedron(axial=1.3):
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [-1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, -1.0, 0.0],
            [0.0, 0.0, axial],
            [0.0, 0.0, -axial],
        ]
    )


class TestScaling:
    def test_unit_scales_leave_points_unchanged(self, octahedron_ligands):
        axes = euler_xyz_matrix(0.3, -0.2, 0.9)
        scaled = scale_along_axes(octahedron_ligands, axes, [1.0, 1.0, 1.0])
        assert np.allclose(scaled, octahedron_ligands)

    def test_scales_along_given_axes(self):
        points = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        scaled = scale_along_axes(points, np.eye(3), [2.0, 1.0, 0.5])
        assert np.allclose(scaled, np.diag([2.0, 1.0, 0.5]))

    def test_distortion_index(self):
        assert distortion_index([1.0, 1.0, 1.0]) == pytest.approx(0.0)
        assert distortion_index([1.7, 1.7, 1.7]) == pytest.approx(0.0)
        assert distortion_index([1.3, 1.0, 0.8]) > distortion_index([1.1, 1.0, 0.95])

    @pytest.mark.parametrize(
        "scales, expected",
        [
            ([1.0, 1.02, 0.99], "No scaling"),
            ([1.2, 1.2, 1.21], "Uniformly expanded (20%)"),
            ([0.7, 0.7, 0.7], "Uniformly compressed (30%)"),
            ([1.3, 1.0, 0.8], "elongated along axis 1 (+30%), compressed along axis 3 (-20%)"),
        ],
    )
    def test_describe_scaling(self, scales, expected):
        assert describe_scaling(scales) == expected


@pytest.mark.parametrize(
    "rigid, flexible, distortion, expected",
    [
        (30.0, 15.0, 2.0, DistortionCategory.WRONG_GEOMETRY),
        (1.2, 0.9, 8.0, DistortionCategory.RIGID_MATCH),
        (4.0, 1.0, 3.0, DistortionCategory.SLIGHT_DISTORTION),
        (4.0, 1.0, 10.0, DistortionCategory.MODERATE_DISTORTION),
        (9.0, 2.0, 25.0, DistortionCategory.HIGH_DISTORTION),
    ],
)
def test_classify_distortion(rigid, flexible, distortion, expected):
    assert classify_distortion(rigid, flexible, distortion) == expected


class TestFlexibleFit:
    @pytest.fixture
    def service(self, repository):
        return ShapeAnalysisService(repository, mode=SearchMode.FAST)

    def test_stretch_absorbs_tetragonal_elongation(self, service, repository):
        flexible = service.measure_flexible(
            elongated_octahedron(), repository.get("OC-6"), rng=np.random.default_rng(0)
        )

        assert flexible.rigid.measure > 0.5
        assert flexible.measure < 0.5 * flexible.rigid.measure
        assert flexible.improvement > 50.0
        assert flexible.scales[0] > max(flexible.scales[1:])
        assert np.all(flexible.scales >= 0.4) and np.all(flexible.scales <= 2.5)

    def test_never_worse_than_rigid(self, service, repository, octahedron_ligands):
        flexible = service.measure_flexible(
            octahedron_ligands, repository.get("TPR-6"), rng=np.random.default_rng(1)
        )

        assert flexible.measure <= flexible.rigid.measure + 1e-9
        assert sorted(flexible.correspondence.tolist()) == list(range(7))

    def test_ideal_shape_needs_no_stretch(self, repository):
        reference = repository.get("OC-6").points
        rigid = ShapeAnalysisService(repository, mode=SearchMode.FAST).measure(
            reference[:-1], repository.get("OC-6"), rng=np.random.default_rng(2)
        ).result
        actual = prepare_coordination_points(reference[:-1])

        flexible = AnisotropicScalingFit(SearchMode.FAST).fit(
            actual, reference, rigid, rng=np.random.default_rng(2)
        )

        assert flexible.measure < 1e-6
        assert flexible.category == DistortionCategory.RIGID_MATCH
