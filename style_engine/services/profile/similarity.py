import math
from collections.abc import Iterable, Mapping, Sequence

from style_engine.models.axes import as_ordered_list, clamp, round_half_up
from style_engine.models.profile import Archetype, ArchetypeMatch
from style_engine.services.profile.catalog import ARCHETYPES


def cosine_similarity(a: Mapping[str, float] | Sequence[float], b: Mapping[str, float] | Sequence[float]) -> float:
    """
    Cosine similarity of two axis vectors.

    Mappings are laid out in axis catalogue order (missing axes count as 0).
    A zero-magnitude vector on either side gives 0.0.
    """
    vec_a = as_ordered_list(a) if isinstance(a, Mapping) else [float(v) for v in a]
    vec_b = as_ordered_list(b) if isinstance(b, Mapping) else [float(v) for v in b]

    dot = sum(x * y for x, y in zip(vec_a, vec_b))
    norm_a = math.sqrt(sum(x * x for x in vec_a))
    norm_b = math.sqrt(sum(y * y for y in vec_b))
    magnitude = norm_a * norm_b
    if magnitude == 0 or not math.isfinite(magnitude):
        return 0.0
    return dot / magnitude


class ArchetypeMatcher:
    """Ranks reference archetypes by cosine similarity to a profile vector."""

    def __init__(self, archetypes: Iterable[Archetype] = ARCHETYPES):
        self.archetypes = tuple(archetypes)

    @staticmethod
    def match_score(similarity: float) -> int:
        return int(clamp(round_half_up(similarity * 100), 0, 100))

    def match(self, axes: Mapping[str, float]) -> list[ArchetypeMatch]:
        matches = [
            ArchetypeMatch(
                name=archetype.name,
                match_score=self.match_score(cosine_similarity(axes, archetype.axes)),
                description=archetype.description,
                personality=list(archetype.personality),
                website=archetype.website,
            )
            for archetype in self.archetypes
        ]
        # sorted() is stable, so equal scores keep catalogue order
        return sorted(matches, key=lambda m: m.match_score, reverse=True)
