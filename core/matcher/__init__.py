"""Matcher Module - normalization, synonym expansion, similarity and explanations."""
from core.matcher.models import JobRecord, SkillMatchTrace, MatchExplanation
from core.matcher.normalizer import normalize_text
from core.matcher.synonyms import SynonymTable, SKILL_SYNONYMS, expand_variants, expand_skills
from core.matcher.similarity import SimilarityCalculator, calculate_similarity
from core.matcher.explainability import explain_match

__all__ = [
    'JobRecord', 'SkillMatchTrace', 'MatchExplanation',
    'normalize_text', 'SynonymTable', 'SKILL_SYNONYMS',
    'expand_variants', 'expand_skills',
    'SimilarityCalculator', 'calculate_similarity', 'explain_match'
]
