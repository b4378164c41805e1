import math
import unittest

from vectorlib.math import MixedAxisTypeError, Vec2, ZeroLengthVectorError, project_onto, reject_from, rotate_point


class TransformTests(unittest.TestCase):
    def test_rotate_point_about_origin(self) -> None:
        rotated = rotate_point(Vec2(2.0, 1.0), Vec2(1.0, 1.0), math.pi / 2)
        self.assertAlmostEqual(rotated.x, 1.0)
        self.assertAlmostEqual(rotated.y, 2.0)

    def test_project_onto(self) -> None:
        projected = project_onto(Vec2(3.0, 4.0), Vec2(5.0, 2.0))
        factor = 23.0 / 29.0
        self.assertAlmostEqual(projected.x, 5.0 * factor)
        self.assertAlmostEqual(projected.y, 2.0 * factor)

    def test_reject_is_orthogonal(self) -> None:
        onto = Vec2(5.0, 2.0)
        rejected = reject_from(Vec2(3.0, 4.0), onto)
        self.assertAlmostEqual(rejected.dot_product(onto), 0.0)

    def test_project_and_reject_both_refuse_mixed_axes(self) -> None:
        with self.assertRaises(MixedAxisTypeError):
            project_onto(Vec2(1, 2.0), Vec2(1.0, 0.0))
        with self.assertRaises(MixedAxisTypeError):
            reject_from(Vec2(1, 2.0), Vec2(1.0, 0.0))

    def test_project_onto_zero_vector_fails(self) -> None:
        with self.assertRaises(ZeroLengthVectorError):
            project_onto(Vec2(1.0, 1.0), Vec2.zero())


if __name__ == "__main__":
    unittest.main()
