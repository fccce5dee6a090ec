from bcurve.bspline import curve as bc, basis as bs
from bcurve.bezier import curve as bz
from bcurve.exceptions import ValidationError
import numpy as np
import pytest

from fixtures import arch_points, wave_points, uneven_points

bspline_algorithms = [bc.uniform_bspline, bc.non_uniform_bspline, bc.nurbs]


class TestCurve:

    def test_eval(self):
        basis = bs.SplineBasis.make_equidistant(2, 1)
        curve = bc.Curve(basis, arch_points)
        assert not curve.rational
        assert np.allclose(curve.eval(0.0), [0, 0])
        assert np.allclose(curve.eval(0.5), [50, 50])
        assert np.allclose(curve.eval(1.0), [100, 0])

    def test_rational(self):
        basis = bs.SplineBasis.make_equidistant(2, 1)
        # circular arc, quarter of the unit circle
        w = np.sqrt(2) / 2
        curve = bc.Curve(basis, [(1, 0), (1, 1), (0, 1)], [1, w, 1])
        assert curve.rational
        for t in np.linspace(0, 1, 11):
            assert np.isclose(np.linalg.norm(curve.eval(t)), 1.0)

        # equal weights cancel
        curve = bc.Curve(basis, arch_points, [2, 2, 2])
        assert not curve.rational

    def test_sample(self):
        basis = bs.SplineBasis.make_equidistant(3, 2)
        curve = bc.Curve(basis, wave_points[:5])
        sample = curve.sample(10)
        assert sample.shape == (11, 2)
        assert np.allclose(sample[0], wave_points[0])
        assert np.allclose(sample[-1], wave_points[4])


@pytest.mark.parametrize("algorithm", bspline_algorithms)
def test_cardinality(algorithm):
    for resolution in [10, 11, 100, 1000]:
        sample = algorithm(wave_points, 3, resolution)
        assert sample.shape == (resolution + 1, 2)
        assert np.all(np.isfinite(sample))


@pytest.mark.parametrize("algorithm", bspline_algorithms)
def test_straight_line(algorithm):
    sample = algorithm([(0, 0), (100, 0)], 1, 10)
    assert len(sample) == 11
    assert np.allclose(sample[:, 0], np.linspace(0, 100, 11))
    assert np.allclose(sample[:, 1], 0.0)


@pytest.mark.parametrize("algorithm", bspline_algorithms)
def test_end_points(algorithm):
    for points in [arch_points, wave_points, uneven_points]:
        for degree in range(1, len(points)):
            sample = algorithm(points, degree, 50)
            assert np.allclose(sample[0], points[0])
            assert np.allclose(sample[-1], points[-1])


def test_uniform_arch():
    sample = bc.uniform_bspline(arch_points, 2, 20)
    assert len(sample) == 21
    assert np.allclose(sample[0], [0, 0])
    assert np.allclose(sample[-1], [100, 0])
    assert np.allclose(sample[10], [50, 50])
    # single segment is the Bezier curve
    assert np.allclose(sample, bz.de_casteljau(arch_points, None, 20))


def test_uniform_linear_interpolates():
    # degree 1 is the control polygon itself
    sample = bc.uniform_bspline(wave_points, 1, 50)
    for i, point in enumerate(wave_points):
        assert np.allclose(sample[10 * i], point)


def test_non_uniform_linear_interpolates():
    sample = bc.non_uniform_bspline(uneven_points, 1, 1000)
    # all control points lie on the polyline
    for point in uneven_points:
        dist = np.min(np.linalg.norm(sample - np.array(point), axis=1))
        assert dist < 0.2


def test_convex_hull():
    for algorithm in bspline_algorithms:
        sample = algorithm(wave_points, 3, 100)
        points = np.array(wave_points)
        assert np.all(sample.min(axis=0) >= points.min(axis=0) - 1e-9)
        assert np.all(sample.max(axis=0) <= points.max(axis=0) + 1e-9)


def test_nurbs_unit_weights():
    for degree in range(1, 6):
        uniform = bc.uniform_bspline(wave_points, degree, 100)
        assert np.array_equal(bc.nurbs(wave_points, degree, 100), uniform)
        assert np.array_equal(bc.nurbs(wave_points, degree, 100, weights=[1.0] * 6), uniform)


def test_nurbs_weights():
    uniform = bc.uniform_bspline(arch_points, 2, 20)
    pulled = bc.nurbs(arch_points, 2, 20, weights=[1, 5, 1])
    assert np.allclose(pulled[10], [50, 250 / 3])
    assert pulled[10, 1] > uniform[10, 1]
    assert np.allclose(pulled[0], arch_points[0])
    assert np.allclose(pulled[-1], arch_points[-1])

    with pytest.raises(ValidationError):
        bc.nurbs(arch_points, 2, 20, weights=[1, 0, 1])
    with pytest.raises(ValidationError):
        bc.nurbs(arch_points, 2, 20, weights=[1, 1])
    with pytest.raises(ValidationError) as e:
        bc.nurbs(arch_points, 2, 20, weights=[1, np.inf, 1])
    assert e.value.index == 1


@pytest.mark.parametrize("algorithm", bspline_algorithms)
def test_validation(algorithm):
    points = wave_points[:4]
    for degree in [0, 4, 6, -1, 2.0, None]:
        with pytest.raises(ValidationError):
            algorithm(points, degree, 100)
    with pytest.raises(ValidationError):
        algorithm(wave_points, 6, 100)
    for resolution in [9, 1001, 0, 50.0]:
        with pytest.raises(ValidationError):
            algorithm(points, 2, resolution)
    with pytest.raises(ValidationError):
        algorithm([(0, 0)], 1, 100)
    with pytest.raises(ValidationError):
        algorithm([(i, i * i) for i in range(16)], 3, 100)
    with pytest.raises(ValidationError):
        algorithm(None, 3, 100)

    # bounds are inclusive
    assert len(algorithm([(i, i * i) for i in range(15)], 5, 1000)) == 1001
    assert len(algorithm([(0, 0), (1, 1)], 1, 10)) == 11


@pytest.mark.parametrize("algorithm", bspline_algorithms)
def test_large_coordinates(algorithm):
    points = [(1e308, 0), (-1e308, 1), (1e308, 2), (0, 0)]
    sample = algorithm(points, 1, 10)
    assert sample.shape == (11, 2)
    assert np.all(np.isfinite(sample))
    assert np.allclose(sample[0], points[0])
    assert np.allclose(sample[-1], points[-1])
