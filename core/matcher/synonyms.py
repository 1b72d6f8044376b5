#!/usr/bin/env python3
"""
Skill Synonyms - static variant groups and skill expansion.

The table is an ordered sequence of (canonical key, variants) pairs. Lookup is
first-match-wins in table order, so a variant listed in two groups always
resolves to the earlier one. The table is built once at import and never
mutated; it is safe to share across threads.

Known data collision: "ai" appears in both the ``ml`` group and the
``illustrator`` group. It resolves to ``ml``. ``SynonymTable.find_collisions``
reports such overlaps so a fix only has to touch the data below.
"""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from core.matcher.normalizer import normalize_text


class SynonymTable:
    """Immutable, ordered mapping of canonical skill key to its variant group."""

    def __init__(self, groups: Sequence[Tuple[str, Sequence[str]]]):
        self._groups: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(
            (key, tuple(variants)) for key, variants in groups
        )

    @property
    def groups(self) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
        return self._groups

    def keys(self) -> List[str]:
        return [key for key, _ in self._groups]

    def __len__(self) -> int:
        return len(self._groups)

    def group_for(self, skill: str) -> Optional[Tuple[str, Tuple[str, ...]]]:
        """Return the first (key, variants) pair containing the normalized skill."""
        normalized = normalize_text(skill)
        for key, variants in self._groups:
            if normalized in variants:
                return key, variants
        return None

    def find_collisions(self) -> Dict[str, List[str]]:
        """Map each variant listed in more than one group to the owning keys, in table order."""
        owners: Dict[str, List[str]] = {}
        for key, variants in self._groups:
            for variant in variants:
                owners.setdefault(variant, []).append(key)
        return {variant: keys for variant, keys in owners.items() if len(keys) > 1}


SKILL_SYNONYMS = SynonymTable([
    ('javascript', ['js', 'javascript', 'ecmascript', 'es6', 'es2015', 'es2020']),
    ('typescript', ['ts', 'typescript']),
    ('react', ['react', 'reactjs', 'react.js', 'react js']),
    ('angular', ['angular', 'angularjs', 'angular.js', 'angular2', 'angular 2']),
    ('vue', ['vue', 'vuejs', 'vue.js', 'vue js']),
    ('node', ['node', 'nodejs', 'node.js', 'node js']),
    ('express', ['express', 'expressjs', 'express.js']),
    ('mongodb', ['mongodb', 'mongo', 'mongo db']),
    ('sql', ['sql', 'mysql', 'postgresql', 'postgres', 'mssql', 'oracle', 'sql server']),
    ('nosql', ['nosql', 'no sql', 'no-sql']),
    ('aws', ['aws', 'amazon web services']),
    ('docker', ['docker', 'containerization', 'containers']),
    ('kubernetes', ['kubernetes', 'k8s']),
    ('python', ['python', 'py']),
    ('java', ['java', 'jdk', 'jvm']),
    ('csharp', ['c#', 'csharp', 'c sharp', '.net', 'dotnet', 'asp.net']),
    ('cpp', ['c++', 'cpp', 'cplusplus']),
    ('html', ['html', 'html5']),
    ('css', ['css', 'css3', 'cascading style sheets']),
    ('tailwind', ['tailwind', 'tailwindcss', 'tailwind css']),
    ('bootstrap', ['bootstrap', 'bootstrap css']),
    ('rest', ['rest', 'restful', 'rest api', 'restful api']),
    ('graphql', ['graphql', 'graph ql']),
    ('git', ['git', 'github', 'gitlab', 'version control']),
    ('cicd', ['ci/cd', 'cicd', 'continuous integration', 'continuous deployment']),
    ('devops', ['devops', 'dev ops']),
    ('agile', ['agile', 'scrum', 'kanban']),
    ('redux', ['redux', 'redux toolkit']),
    ('nextjs', ['next.js', 'nextjs', 'next js', 'next']),
    ('django', ['django', 'django rest framework', 'drf']),
    ('flask', ['flask', 'flask-restful']),
    ('spring', ['spring', 'spring boot', 'spring framework']),
    ('laravel', ['laravel', 'laravel framework']),
    ('ruby', ['ruby', 'ruby on rails', 'rails', 'ror']),
    ('php', ['php', 'php7', 'php8']),
    ('swift', ['swift', 'swift ui', 'swiftui']),
    ('kotlin', ['kotlin', 'kotlin jvm']),
    ('flutter', ['flutter', 'dart', 'flutter framework']),
    ('reactnative', ['react native', 'react-native', 'reactnative', 'rn']),
    ('ml', ['machine learning', 'ml', 'artificial intelligence', 'ai', 'deep learning']),
    ('tensorflow', ['tensorflow', 'tf', 'tensor flow']),
    ('pytorch', ['pytorch', 'torch', 'py torch']),
    ('azure', ['azure', 'microsoft azure']),
    ('gcp', ['gcp', 'google cloud', 'google cloud platform']),
    ('firebase', ['firebase', 'firestore', 'firebase auth']),
    ('linux', ['linux', 'unix', 'ubuntu', 'centos']),
    ('terraform', ['terraform', 'iac', 'infrastructure as code']),
    ('jenkins', ['jenkins', 'jenkins ci']),
    ('redis', ['redis', 'cache', 'in-memory database']),
    ('nginx', ['nginx', 'reverse proxy']),
    ('apache', ['apache', 'apache server']),
    ('microservices', ['microservices', 'micro services', 'microservice architecture']),
    ('api', ['api', 'apis', 'application programming interface']),
    ('sass', ['sass', 'scss']),
    ('webpack', ['webpack', 'bundler']),
    ('vite', ['vite', 'vite.js']),
    ('jest', ['jest', 'testing', 'unit testing']),
    ('cypress', ['cypress', 'e2e testing']),
    ('figma', ['figma', 'design']),
    ('photoshop', ['photoshop', 'ps']),
    # "ai" collides with the ml group above and never resolves here
    ('illustrator', ['illustrator', 'ai']),
    ('xd', ['xd', 'adobe xd']),
])


def expand_variants(skill: str, table: SynonymTable = SKILL_SYNONYMS) -> Tuple[str, ...]:
    """
    Return the variant group a skill belongs to.

    Reflexive: a skill found in no group expands to a 1-tuple holding its
    normalized form.
    """
    group = table.group_for(skill)
    if group is not None:
        return group[1]
    return (normalize_text(skill),)


def expand_skills(skills: Iterable[str], table: SynonymTable = SKILL_SYNONYMS) -> Tuple[str, ...]:
    """Normalize and expand every skill, de-duplicating in first-seen order."""
    expanded: Dict[str, None] = {}
    for skill in skills:
        for variant in expand_variants(normalize_text(skill), table):
            expanded.setdefault(variant, None)
    return tuple(expanded)
