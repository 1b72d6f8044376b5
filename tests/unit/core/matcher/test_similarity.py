#!/usr/bin/env python3
"""
Tests for graded skill similarity.
"""

import unittest

from core.matcher.similarity import SimilarityCalculator, calculate_similarity
from core.matcher.synonyms import SynonymTable


class TestSimilarityCalculator(unittest.TestCase):

    def setUp(self):
        self.calc = SimilarityCalculator()

    def test_same_synonym_group_is_exact(self):
        self.assertEqual(self.calc.calculate("js", "JavaScript"), 1.0)
        self.assertEqual(self.calc.calculate("ReactJS", "react.js"), 1.0)
        self.assertEqual(self.calc.calculate("ml", "Machine Learning"), 1.0)

    def test_identical_strings_are_exact(self):
        self.assertEqual(self.calc.calculate("Remote", "remote"), 1.0)
        self.assertEqual(self.calc.calculate("Senior Level", "senior level"), 1.0)

    def test_unrelated_skills(self):
        self.assertEqual(self.calc.calculate("python", "Java"), 0.0)
        self.assertEqual(self.calc.calculate("rust", "go"), 0.0)

    def test_containment(self):
        # "java" is contained in "javascript": 0.7 + 4/10 * 0.2
        self.assertAlmostEqual(self.calc.calculate("Java", "JavaScript"), 0.78)
        self.assertAlmostEqual(
            self.calc.calculate("graph databases", "graph database"),
            0.7 + (14 / 15) * 0.2
        )

    def test_containment_uses_first_variant_pair(self):
        # "reactjs" contains "js" before any exact pair could be reached
        self.assertAlmostEqual(self.calc.calculate("reactjs", "javascript"), 0.7 + (2 / 7) * 0.2)

    def test_word_overlap(self):
        self.assertAlmostEqual(self.calc.calculate("data engineering", "data science"), 0.55)
        self.assertAlmostEqual(self.calc.calculate("Mid Level", "Senior Level"), 0.55)

    def test_empty_string_is_contained_in_everything(self):
        self.assertEqual(self.calc.calculate("", ""), 1.0)
        self.assertAlmostEqual(self.calc.calculate("", "python"), 0.7)
        self.assertAlmostEqual(self.calc.calculate("!!!", "python"), 0.7)

    def test_symmetric_and_bounded(self):
        pairs = [
            ("java", "javascript"), ("data engineering", "data science"),
            ("python", "py"), ("node", "react"), ("aws", "amazon web services"),
            ("remote", "remote - us"), ("", "x"),
        ]
        for a, b in pairs:
            forward = self.calc.calculate(a, b)
            self.assertGreaterEqual(forward, 0.0)
            self.assertLessEqual(forward, 1.0)
            self.assertAlmostEqual(forward, self.calc.calculate(b, a), msg=f"{a} / {b}")

    def test_custom_table(self):
        calc = SimilarityCalculator(SynonymTable([('k8s', ['kubernetes', 'k8s'])]))
        self.assertEqual(calc.calculate("K8s", "Kubernetes"), 1.0)
        self.assertAlmostEqual(calc.calculate("js", "javascript"), 0.74)

    def test_module_level_helper(self):
        self.assertEqual(calculate_similarity("TS", "TypeScript"), 1.0)


if __name__ == '__main__':
    unittest.main()
