#!/usr/bin/env python3
"""
Test suite for composite job scoring.
"""

import unittest

from core.config_loader import ScorerConfig
from core.matcher.synonyms import expand_skills
from core.scorer.job_scorer import attribute_origins, score_job
from core.matcher.similarity import SimilarityCalculator
from tests.fixtures.job_fixtures import make_job


def _score(candidate_skills, job, **kwargs):
    return score_job(
        expand_skills(candidate_skills),
        job,
        candidate_skills=candidate_skills,
        **kwargs
    )


class TestScoreJob(unittest.TestCase):
    """Points, percentage and coverage for a single job."""

    def test_synonym_exact_match(self):
        """Every expanded variant of "js" finds an exact counterpart."""
        result = _score(["js"], make_job("j1", ["JavaScript"]))

        # 6 variants * 10 points, out of 6 * 10 + 10
        self.assertEqual(result.match_score, 60)
        self.assertEqual(result.match_percentage, 86)
        self.assertEqual(result.skill_coverage, 100)
        self.assertEqual(result.matched_skills, ('js',))
        self.assertEqual(len(result.skill_match_details), 6)
        for detail in result.skill_match_details:
            self.assertEqual(detail.resume_skill, 'js')
            self.assertEqual(detail.job_skill, 'js')
            self.assertEqual(detail.match_type, 'exact')
            self.assertEqual(detail.score, 10)

    def test_single_exact_match_without_synonyms(self):
        result = _score(["rust"], make_job("j2", ["Rust"]))

        self.assertEqual(result.match_score, 10)
        self.assertEqual(result.match_percentage, 50)
        self.assertEqual(result.skill_coverage, 100)
        self.assertEqual(result.total_skills_matched, 1)
        self.assertEqual(result.total_skills_required, 1)

    def test_no_match(self):
        result = _score(["python"], make_job("j3", ["Java"]))

        self.assertEqual(result.match_score, 0)
        self.assertEqual(result.match_percentage, 0)
        self.assertEqual(result.skill_coverage, 0)
        self.assertEqual(result.matched_skills, ())
        self.assertEqual(result.skill_match_details, ())

    def test_job_without_skills(self):
        job = make_job("j4", [], experience_level="Mid Level", location="Remote")
        result = _score(["python"], job, experience_level="Mid Level", location="Remote")

        self.assertIs(result.job, job)
        self.assertEqual(result.match_score, 0)
        self.assertEqual(result.match_percentage, 0)
        self.assertEqual(result.skill_coverage, 0)
        self.assertEqual(result.total_skills_required, 0)

    def test_strong_match(self):
        result = _score(["graph databases"], make_job("j5", ["Graph Database"]))

        self.assertEqual(result.match_score, 8)
        self.assertEqual(result.match_percentage, 40)
        self.assertEqual(result.skill_coverage, 100)
        self.assertEqual(result.skill_match_details[0].match_type, 'strong')

    def test_partial_match(self):
        """java/jdk/jvm each reach javascript through containment (0.78)."""
        result = _score(["Java"], make_job("j6", ["JavaScript"]))

        self.assertEqual(result.match_score, 15)
        self.assertEqual(result.match_percentage, 38)
        self.assertEqual(result.skill_coverage, 100)
        self.assertEqual({d.match_type for d in result.skill_match_details}, {'partial'})
        self.assertEqual({d.resume_skill for d in result.skill_match_details}, {'java'})

    def test_weak_match_does_not_count_for_coverage(self):
        result = _score(["data engineering"], make_job("j7", ["Data Science"]))

        self.assertEqual(result.match_score, 2)
        self.assertEqual(result.match_percentage, 10)
        self.assertEqual(result.skill_coverage, 0)
        self.assertEqual(result.matched_skills, ())
        self.assertEqual(result.skill_match_details[0].match_type, 'weak')

    def test_experience_and_location_bonus(self):
        job = make_job("j8", ["Rust"], experience_level="Mid Level", location="Remote")

        plain = _score(["rust"], job)
        with_level = _score(["rust"], job, experience_level="mid level")
        with_both = _score(["rust"], job, experience_level="mid level", location="remote")

        self.assertEqual(plain.match_score, 10)
        self.assertEqual(with_level.match_score, 15)
        self.assertEqual(with_both.match_score, 20)
        self.assertEqual(with_both.match_percentage, 100)

    def test_bonus_needs_similarity_threshold(self):
        job = make_job("j9", ["Rust"], experience_level="Senior Level", location="Berlin")
        # "mid level" vs "senior level" only overlaps on one word (0.55)
        result = _score(["rust"], job, experience_level="Mid Level", location="Munich")
        self.assertEqual(result.match_score, 10)

    def test_bonus_ignored_when_job_lacks_field(self):
        result = _score(["rust"], make_job("j10", ["Rust"]), experience_level="Mid Level", location="Remote")
        self.assertEqual(result.match_score, 10)

    def test_adding_a_matching_skill_never_lowers_the_score(self):
        job = make_job("j11", ["Rust", "Go"])
        one = _score(["rust"], job)
        two = _score(["rust", "go"], job)

        self.assertEqual(one.match_percentage, 50)
        self.assertEqual(two.match_percentage, 67)
        self.assertGreaterEqual(two.match_score, one.match_score)
        self.assertEqual(two.skill_coverage, 100)

    def test_bounds(self):
        job = make_job("j12", ["Python", "Django", "PostgreSQL", "Docker"], location="Remote")
        for skills in (["python"], ["py", "drf", "postgres"], ["cobol"], ["python", "docker", "sql"]):
            result = _score(skills, job, location="Remote")
            self.assertTrue(0 <= result.match_percentage <= 100, skills)
            self.assertTrue(0 <= result.skill_coverage <= 100, skills)

    def test_custom_points(self):
        config = ScorerConfig(thresholds={'exact_points': 20})
        result = _score(["rust"], make_job("j13", ["Rust"]), config=config)
        self.assertEqual(result.match_score, 20)
        # max possible is 1 * 20 + 10
        self.assertEqual(result.match_percentage, 67)


class TestAttributeOrigins(unittest.TestCase):

    def test_first_candidate_whose_group_contains_the_variant(self):
        calc = SimilarityCalculator()
        expanded = expand_skills(["ReactJS", "react", "rust"])
        origins = attribute_origins(expanded, ["ReactJS", "react", "rust"], calc)

        self.assertEqual(origins['react'], 'reactjs')
        self.assertEqual(origins['react js'], 'reactjs')
        self.assertEqual(origins['rust'], 'rust')

    def test_unknown_skill_maps_to_itself(self):
        origins = attribute_origins(('cobol',), ['python'], SimilarityCalculator())
        self.assertEqual(origins, {'cobol': 'cobol'})


if __name__ == '__main__':
    unittest.main()
