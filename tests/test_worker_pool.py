import pytest

from coordshape.core.domain.models.point_set import prepare_coordination_points
from coordshape.core.domain.models.search_mode import SearchMode
from coordshape.core.services.shape_analysis_service import ShapeAnalysisService
from coordshape.infrastructure.parallel.shape_worker_pool import ShapeWorkerPool


def test_pool_matches_serial_ranking(repository, octahedron_ligands):
    service = ShapeAnalysisService(repository, mode=SearchMode.FAST)
    serial = service.rank(octahedron_ligands, seed=3)

    actual = prepare_coordination_points(octahedron_ligands)
    progress = []
    with ShapeWorkerPool(max_workers=2, mode=SearchMode.FAST) as pool:
        parallel = pool.rank(
            actual,
            repository.list_by_coordination(6),
            seed=3,
            progress_callback=lambda done, total, match: progress.append((done, total)),
        )

    assert [m.code for m in parallel] == [m.code for m in serial]
    assert [m.measure for m in parallel] == pytest.approx([m.measure for m in serial])
    assert progress[-1] == (5, 5)


def test_rank_requires_running_pool(repository, octahedron_ligands):
    pool = ShapeWorkerPool(max_workers=1, mode=SearchMode.FAST)
    with pytest.raises(RuntimeError, match="not running"):
        pool.rank(
            prepare_coordination_points(octahedron_ligands),
            repository.list_by_coordination(6),
        )


def test_start_and_stop():
    pool = ShapeWorkerPool(max_workers=1)
    assert not pool.running

    pool.start()
    assert pool.running
    pool.start()
    assert pool.running

    pool.stop()
    assert not pool.running
    pool.stop()
