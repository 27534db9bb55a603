"""Tangent derivation and basis evaluation tests."""

import numpy as np
import pytest

from hermite_curve.data.point import Point, TangentPair
from hermite_curve.spline import derive_tangents, evaluate, hermite_basis, sample_path, sample_table, svg_path


def assert_point_close(actual: Point, expected: Point, tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)


class TestDeriveTangents:
    """derive_tangents() tests."""

    def test_default_curve(self, control_points):
        tangents = derive_tangents(control_points, 0.5)

        assert tangents == TangentPair(Point(1, 3), Point(4, 1))

    @pytest.mark.parametrize("tension", [0.0, 0.25, 1.0, -2.5])
    def test_scales_with_tension(self, control_points, tension):
        p0, p1, p2 = control_points
        t0, t1 = derive_tangents(control_points, tension)

        assert_point_close(t0, Point(tension * (p2.x - p0.x), tension * (p2.y - p0.y)))
        assert_point_close(t1, Point(tension * (p1.x - p2.x), tension * (p1.y - p2.y)))

    def test_shape_point_on_start_gives_zero_start_tangent(self):
        tangents = derive_tangents([Point(3, 3), Point(9, 1), Point(3, 3)])

        assert tangents.start == Point(0, 0)
        assert tangents.end == Point(3, -1)

    @pytest.mark.parametrize("n_points", [0, 1, 2])
    def test_too_few_points_give_zero_tangents(self, n_points):
        points = [Point(1, 2), Point(3, 4)][:n_points]

        assert derive_tangents(points) == TangentPair(Point(0, 0), Point(0, 0))


class TestEvaluate:
    """evaluate() tests."""

    def test_basis_at_boundaries(self):
        basis = hermite_basis([0.0, 1.0])

        np.testing.assert_array_equal(basis[:, 0], [1, 0, 0, 0])
        np.testing.assert_array_equal(basis[:, 1], [0, 1, 0, 0])

    def test_basis_weights_of_positions_sum_to_one(self):
        basis = hermite_basis(np.linspace(0, 1, 11))

        np.testing.assert_allclose(basis[0] + basis[1], np.ones(11))

    def test_start_and_end(self, control_points):
        p0, p1, _ = control_points
        t0, t1 = derive_tangents(control_points)

        assert_point_close(evaluate(p0, p1, t0, t1, 0.0), p0)
        assert evaluate(p0, p1, t0, t1, 1.0) == Point(12, 10)

    def test_midpoint(self, control_points):
        p0, p1, _ = control_points
        t0, t1 = derive_tangents(control_points)

        # 0.5 * (p0 + p1) + 0.125 * (t0 - t1)
        assert_point_close(evaluate(p0, p1, t0, t1, 0.5), Point(6.625, 6.25))

    def test_degenerate_start_tangent(self):
        p0, p1 = Point(3, 3), Point(9, 1)
        t0, t1 = derive_tangents([p0, p1, Point(3, 3)])

        for u in np.linspace(0, 1, 21):
            h00, h10, _, h11 = hermite_basis(u)[:, 0]
            expected = Point(
                h00 * p0.x + h10 * p1.x + h11 * t1.x,
                h00 * p0.y + h10 * p1.y + h11 * t1.y,
            )
            assert_point_close(evaluate(p0, p1, t0, t1, u), expected)

    def test_negative_and_fractional_coordinates(self):
        p0, p1 = Point(-1.5, 2.25), Point(3.75, -4.0)
        t0, t1 = Point(-0.5, 0.5), Point(2.0, 0.0)

        assert_point_close(evaluate(p0, p1, t0, t1, 0.0), p0)
        assert_point_close(evaluate(p0, p1, t0, t1, 1.0), p1)


class TestSamplePath:
    """sample_path() tests."""

    def test_default_steps(self, control_points):
        path = sample_path(control_points)

        assert len(path) == 101
        assert path[0] == control_points[0]
        assert_point_close(path[-1], control_points[1])

    def test_points_follow_parameter_order(self, control_points):
        p0, p1, _ = control_points
        t0, t1 = derive_tangents(control_points)
        path = sample_path(control_points, steps=10)

        for idx, point in enumerate(path):
            assert_point_close(point, evaluate(p0, p1, t0, t1, idx / 10))

    def test_uses_given_tangents(self, control_points):
        tangents = TangentPair(Point(0, 0), Point(0, 0))
        path = sample_path(control_points, tangents, steps=2)

        # zero tangents put the midpoint halfway between P0 and P1
        assert_point_close(path[1], Point(7, 6))

    def test_too_few_points(self):
        assert sample_path([Point(1, 1)]) == []

    def test_invalid_steps(self, control_points):
        with pytest.raises(ValueError):
            sample_path(control_points, steps=0)


class TestSampleTable:
    """sample_table() tests."""

    def test_five_points_in_order(self, control_points):
        p0, p1, _ = control_points
        t0, t1 = derive_tangents(control_points)
        points = sample_table(control_points)

        assert len(points) == 5
        for point, u in zip(points, [0.2, 0.4, 0.6, 0.8, 1.0]):
            assert_point_close(point, evaluate(p0, p1, t0, t1, u))
        assert_point_close(points[-1], p1)

    def test_parameters_are_sorted(self, control_points):
        assert sample_table(control_points, parameters=[1.0, 0.2]) == sample_table(
            control_points, parameters=[0.2, 1.0]
        )

    def test_too_few_points(self):
        assert sample_table([]) == []


class TestSvgPath:
    """svg_path() tests."""

    def test_move_then_lines(self):
        path = svg_path([Point(2, 2), Point(2.5, 3.25), Point(12, 10)])

        assert path == "M 2 2 L 2.5 3.25 L 12 10"

    def test_empty(self):
        assert svg_path([]) == ""

    def test_dense_path(self, control_points):
        path = svg_path(sample_path(control_points))

        assert path.startswith("M 2 2 L ")
        assert path.endswith("L 12 10")
        assert path.count("L ") == 100
