"""Discipline inference from a phase name.

Rules are evaluated top to bottom; the first matching predicate wins.
"""

from typing import Callable, List, Sequence, Tuple

DisciplineRule = Tuple[Callable[[str], bool], str]

DEFAULT_DISCIPLINE = "Algemeen"


def _contains(*keywords: str) -> Callable[[str], bool]:
    def predicate(name: str) -> bool:
        lowered = name.lower()
        return any(keyword in lowered for keyword in keywords)
    return predicate


DISCIPLINE_RULES: List[DisciplineRule] = [
    (_contains("concept"), "Conceptontwikkeling"),
    (_contains("strateg"), "Strategy"),
    (_contains("creati"), "Creative team"),
    (_contains("product", "shoot"), "Productie"),
    (_contains("edit", "montage"), "Studio"),
    (_contains("vfx", "online"), "Studio"),
    (_contains("review", "meeting"), "Intern/Review"),
]


def derive_discipline(
    phase_name: str,
    rules: Sequence[DisciplineRule] = DISCIPLINE_RULES,
    default: str = DEFAULT_DISCIPLINE,
) -> str:
    """Map a phase name to a discipline/category label."""
    for predicate, discipline in rules:
        if predicate(phase_name):
            return discipline
    return default
