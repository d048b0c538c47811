"""Tests for the PointCloud2D mutation protocol."""

import pytest

from pointrank import (
    Axis,
    NaNCoordinateError,
    OutOfRangeError,
    Point2D,
    PointCloud2D,
    PointCloudConfig,
    UnsortedCloudError,
)


def _collinear_cloud():
    cloud = PointCloud2D()
    for x in (0.0, 1.0, 2.0):
        cloud.push(Point2D(x, 0.0))
    return cloud


def test_push_into_empty_cloud():
    cloud = PointCloud2D()
    assert cloud.is_empty()
    assert cloud.push(Point2D(0.0, 0.0)) == 0
    assert cloud.sorted_x == (0,)
    assert cloud.sorted_y == (0,)
    assert cloud.points() == (Point2D(0.0, 0.0),)
    assert not cloud.is_empty()


def test_push_smaller_point_ranks_first_and_ties_keep_insertion_order():
    cloud = PointCloud2D()
    cloud.push(Point2D(0.0, 0.0))
    cloud.push(Point2D(-1.0, 0.0))
    assert cloud.sorted_x == (1, 0)
    assert cloud.sorted_y == (0, 1)
    assert cloud.positions_x == (1, 0)
    assert cloud.positions_y == (0, 1)
    assert cloud.points() == (Point2D(0.0, 0.0), Point2D(-1.0, 0.0))


def test_find_point_position_single_point():
    cloud = PointCloud2D()
    cloud.push(Point2D(0.0, 0.0))
    assert [cloud.find_point_position_x(v) for v in (-1.0, 0.0, 1.0)] == [0, 1, 1]
    assert [cloud.find_point_position_y(v) for v in (-1.0, 0.0, 1.0)] == [0, 1, 1]
    assert cloud.find_insertion_rank(Axis.Y, 0.5) == 1


def test_update_point_moving_left_past_nothing_keeps_order():
    cloud = _collinear_cloud()
    cloud.update_point(0, Point2D(-1.0, 0.0))
    assert cloud.positions_x == (0, 1, 2)
    assert cloud.sorted_x == (0, 1, 2)
    assert cloud.positions_y == (0, 1, 2)
    assert cloud.get(0) == Point2D(-1.0, 0.0)


def test_update_point_to_the_far_right():
    cloud = _collinear_cloud()
    cloud.update_point(0, Point2D(12.0, 0.0))
    assert cloud.sorted_x == (1, 2, 0)
    assert cloud.positions_x == (2, 0, 1)
    # Y did not change, so its permutation is untouched.
    assert cloud.sorted_y == (0, 1, 2)
    assert cloud.positions_y == (0, 1, 2)
    assert cloud.get(0) == Point2D(12.0, 0.0)


def test_update_point_with_same_value_is_a_no_op():
    cloud = PointCloud2D()
    for p in [(1.0, 1.0), (1.0, 1.0), (0.0, 2.0), (1.0, 0.0)]:
        cloud.push(Point2D(*p))
    before = (cloud.sorted_x, cloud.sorted_y, cloud.positions_x, cloud.positions_y)
    for i, p in enumerate(cloud.points()):
        cloud.update_point(i, p)
    after = (cloud.sorted_x, cloud.sorted_y, cloud.positions_x, cloud.positions_y)
    assert after == before


def test_update_single_axis_only_reorders_that_axis():
    cloud = PointCloud2D()
    for i in range(4):
        cloud.push(Point2D(float(i), float(i)))
    cloud.update_point_y(3, -1.0)
    assert cloud.sorted_y == (3, 0, 1, 2)
    assert cloud.sorted_x == (0, 1, 2, 3)
    cloud.update_point_x(0, 2.5)
    assert cloud.sorted_x == (1, 2, 0, 3)
    assert cloud.get(0) == Point2D(2.5, 0.0)


def test_translate_point_moves_both_axes():
    cloud = _collinear_cloud()
    cloud.translate_point(2, -3.0, 1.0)
    assert cloud.get(2) == Point2D(-1.0, 1.0)
    assert cloud.sorted_x == (2, 0, 1)
    assert cloud.sorted_y == (0, 1, 2)


def test_unknown_stable_index_raises_out_of_range():
    cloud = _collinear_cloud()
    with pytest.raises(OutOfRangeError):
        cloud.update_point(3, Point2D(0.0, 0.0))
    with pytest.raises(OutOfRangeError):
        cloud.translate_point(7, 1.0, 1.0)
    with pytest.raises(OutOfRangeError):
        cloud.update_point_x(3, 1.0)
    with pytest.raises(OutOfRangeError):
        cloud.get(3)
    cloud.check_consistency()


def test_nan_update_fails_before_touching_the_index():
    cloud = _collinear_cloud()
    with pytest.raises(NaNCoordinateError):
        cloud.update_point_x(1, float("nan"))
    assert cloud.get(1) == Point2D(1.0, 0.0)
    assert cloud.sorted_x == (0, 1, 2)
    cloud.check_consistency()


def test_unsorted_cloud_stores_points_but_refuses_rank_operations():
    cloud = PointCloud2D.new_unsorted()
    assert not cloud.maintains_order
    for i in range(5):
        cloud.push(Point2D(float(-i), 0.0))
    cloud.update_point(2, Point2D(10.0, 10.0))
    assert len(cloud) == 5
    assert cloud.get(2) == Point2D(10.0, 10.0)
    cloud.check_consistency()

    with pytest.raises(UnsortedCloudError):
        cloud.find_point_position_x(0.0)
    with pytest.raises(UnsortedCloudError):
        cloud.test_world_point(Point2D(0.0, 0.0))
    with pytest.raises(UnsortedCloudError):
        _ = cloud.sorted_y


def test_with_capacity_presizes_buffers():
    cloud = PointCloud2D.with_capacity(64, query_radius=0.5)
    assert cloud.config.initial_capacity == 64
    assert cloud.config.query_radius == 0.5
    assert len(cloud) == 0
    cloud.push(Point2D(0.0, 0.0))
    assert cloud.test_world_point(Point2D(0.4, 0.0)) == 0


@pytest.mark.parametrize("radius", [0.0, -1.0, float("inf"), float("nan")])
def test_config_rejects_bad_radius(radius):
    with pytest.raises(ValueError):
        PointCloudConfig(query_radius=radius)


def test_config_rejects_negative_capacity():
    with pytest.raises(ValueError):
        PointCloudConfig(initial_capacity=-3)


def test_repr_reports_size_and_mode():
    cloud = _collinear_cloud()
    assert repr(cloud) == "PointCloud2D(n=3, sorted)"
    assert repr(PointCloud2D.new_unsorted()) == "PointCloud2D(n=0, unsorted)"
