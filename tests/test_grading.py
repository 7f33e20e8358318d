import unittest

from gradetrack.domain.errors import InvalidGradeLabel, UnknownSubjectCode
from gradetrack.domain.logic.grading import (
    DEFAULT_GRADE_SCALE,
    build_default_registry,
    grade_option_text,
    is_empty_grade,
)
from gradetrack.domain.models.entities import GradeRegistry, GradeScale, Subject


class GradeScaleTests(unittest.TestCase):
    def test_grade_points(self):
        self.assertEqual(DEFAULT_GRADE_SCALE.point_for("O"), 10)
        self.assertEqual(DEFAULT_GRADE_SCALE.point_for("A+"), 9)
        self.assertEqual(DEFAULT_GRADE_SCALE.point_for("A"), 8)
        self.assertEqual(DEFAULT_GRADE_SCALE.point_for("B+"), 7)
        self.assertEqual(DEFAULT_GRADE_SCALE.point_for("B"), 6)

    def test_unknown_label(self):
        with self.assertRaises(InvalidGradeLabel):
            DEFAULT_GRADE_SCALE.point_for("F")
        self.assertNotIn("F", DEFAULT_GRADE_SCALE.labels)

    def test_scale_order_and_reverse_lookup(self):
        self.assertEqual(DEFAULT_GRADE_SCALE.labels, ("O", "A+", "A", "B+", "B"))
        self.assertTrue(DEFAULT_GRADE_SCALE.is_injective)
        for label, point in DEFAULT_GRADE_SCALE:
            self.assertEqual(DEFAULT_GRADE_SCALE.label_for(point), label)

    def test_non_injective_scale_returns_first_label(self):
        scale = GradeScale((("S", 10), ("O", 10), ("A", 9)))
        self.assertFalse(scale.is_injective)
        self.assertEqual(scale.label_for(10), "S")

    def test_scale_rejects_bad_bands(self):
        with self.assertRaises(ValueError):
            GradeScale((("O", 10), ("O", 9)))
        with self.assertRaises(ValueError):
            GradeScale((("F", 0),))
        with self.assertRaises(ValueError):
            GradeScale((("", 5),))
        with self.assertRaises(ValueError):
            GradeScale((("A", 8.5),))

    def test_empty_sentinel(self):
        self.assertTrue(is_empty_grade(""))
        self.assertTrue(is_empty_grade(None))
        self.assertFalse(is_empty_grade("O"))

    def test_option_text(self):
        self.assertEqual(grade_option_text("A+", 9), "A+ - 9 points")


class GradeRegistryTests(unittest.TestCase):
    def test_default_catalog(self):
        registry = build_default_registry()
        self.assertEqual(registry.subject_count, 8)
        self.assertEqual(registry.total_credits, 21)
        self.assertEqual(registry.codes[0], "AD3501")
        self.assertEqual(registry.subject("AD3511").credits, 2)

    def test_unknown_subject_lookup(self):
        registry = build_default_registry()
        self.assertFalse(registry.has_subject("XX0000"))
        with self.assertRaises(UnknownSubjectCode) as ctx:
            registry.subject("XX0000")
        self.assertEqual(ctx.exception.code, "XX0000")

    def test_duplicate_codes_rejected(self):
        with self.assertRaises(ValueError):
            GradeRegistry(subjects=(Subject("M1", 3), Subject("M1", 2)), scale=DEFAULT_GRADE_SCALE)

    def test_subject_credits_must_be_positive(self):
        with self.assertRaises(ValueError):
            Subject("M1", 0)


if __name__ == "__main__":
    unittest.main()
