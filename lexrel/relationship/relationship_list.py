from typing import Optional

from .factory import reverse_relationship
from .relationship import Relationship


class RelationshipList(list):
    """All relationships found between a pair of synsets."""

    def get_shallowest(self) -> Optional[Relationship]:
        """Get the relationship with the fewest pointers, the first one on ties."""
        shallowest = None
        for relationship in self:
            if shallowest is None or relationship.depth < shallowest.depth:
                shallowest = relationship
        return shallowest

    def get_deepest(self) -> Optional[Relationship]:
        """Get the relationship with the most pointers, the first one on ties."""
        deepest = None
        for relationship in self:
            if deepest is None or relationship.depth > deepest.depth:
                deepest = relationship
        return deepest

    def reverse_all(self) -> "RelationshipList":
        return RelationshipList(reverse_relationship(r) for r in self)
