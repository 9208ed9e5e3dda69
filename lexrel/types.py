from typing import List, Dict, Any, Optional, FrozenSet
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import NoSymmetricCounterpart


class POS(Enum):
    """Part of speech enumeration."""
    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"

    @property
    def label(self) -> str:
        return self.name.lower()


_ALL_POS = frozenset(POS)


class PointerType(Enum):
    """Pointer type enumeration, keyed by the pointer symbol used in the data files."""
    ANTONYM = "!"
    HYPERNYM = "@"
    HYPONYM = "~"
    INSTANCE_HYPERNYM = "@i"
    INSTANCE_HYPONYM = "~i"
    MEMBER_HOLONYM = "#m"
    SUBSTANCE_HOLONYM = "#s"
    PART_HOLONYM = "#p"
    MEMBER_MERONYM = "%m"
    SUBSTANCE_MERONYM = "%s"
    PART_MERONYM = "%p"
    ATTRIBUTE = "="
    DERIVATION = "+"
    CATEGORY = ";c"
    CATEGORY_MEMBER = "-c"
    REGION = ";r"
    REGION_MEMBER = "-r"
    USAGE = ";u"
    USAGE_MEMBER = "-u"
    ENTAILMENT = "*"
    CAUSE = ">"
    ALSO_SEE = "^"
    VERB_GROUP = "$"
    SIMILAR_TO = "&"
    PARTICIPLE_OF = "<"
    PERTAINYM = "\\"

    @property
    def key(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def applies_to(self) -> FrozenSet[POS]:
        """Parts of speech this pointer type can appear on."""
        return _POINTER_POS.get(self, _ALL_POS)

    @classmethod
    def from_key(cls, key: str) -> "PointerType":
        """Look up a pointer type by its symbol."""
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown pointer key: {key!r}") from None

    def has_symmetric_type(self) -> bool:
        return self in _SYMMETRIC_TYPES

    def get_symmetric_type(self) -> "PointerType":
        """Get the pointer type used when an edge of this type is walked backwards."""
        try:
            return _SYMMETRIC_TYPES[self]
        except KeyError:
            raise NoSymmetricCounterpart(self) from None

    def is_symmetric_to(self, other: "PointerType") -> bool:
        return _SYMMETRIC_TYPES.get(self) is other

    def __str__(self) -> str:
        return self.label


_NOUN = frozenset({POS.NOUN})
_VERB = frozenset({POS.VERB})
_NOUN_VERB = frozenset({POS.NOUN, POS.VERB})
_ADJ = frozenset({POS.ADJECTIVE})

_POINTER_POS: Dict[PointerType, FrozenSet[POS]] = {
    PointerType.HYPERNYM: _NOUN_VERB,
    PointerType.HYPONYM: _NOUN_VERB,
    PointerType.INSTANCE_HYPERNYM: _NOUN,
    PointerType.INSTANCE_HYPONYM: _NOUN,
    PointerType.MEMBER_HOLONYM: _NOUN,
    PointerType.SUBSTANCE_HOLONYM: _NOUN,
    PointerType.PART_HOLONYM: _NOUN,
    PointerType.MEMBER_MERONYM: _NOUN,
    PointerType.SUBSTANCE_MERONYM: _NOUN,
    PointerType.PART_MERONYM: _NOUN,
    PointerType.ATTRIBUTE: frozenset({POS.NOUN, POS.ADJECTIVE}),
    PointerType.DERIVATION: _NOUN_VERB,
    PointerType.ENTAILMENT: _VERB,
    PointerType.CAUSE: _VERB,
    PointerType.VERB_GROUP: _VERB,
    PointerType.ALSO_SEE: frozenset({POS.VERB, POS.ADJECTIVE}),
    PointerType.SIMILAR_TO: _ADJ,
    PointerType.PARTICIPLE_OF: _ADJ,
    PointerType.PERTAINYM: frozenset({POS.ADJECTIVE, POS.ADVERB}),
}


def _pairs(*pairs):
    table = {}
    for a, b in pairs:
        table[a] = b
        table[b] = a
    return table


_SYMMETRIC_TYPES: Dict[PointerType, PointerType] = _pairs(
    (PointerType.ANTONYM, PointerType.ANTONYM),
    (PointerType.HYPERNYM, PointerType.HYPONYM),
    (PointerType.INSTANCE_HYPERNYM, PointerType.INSTANCE_HYPONYM),
    (PointerType.MEMBER_HOLONYM, PointerType.MEMBER_MERONYM),
    (PointerType.SUBSTANCE_HOLONYM, PointerType.SUBSTANCE_MERONYM),
    (PointerType.PART_HOLONYM, PointerType.PART_MERONYM),
    (PointerType.ATTRIBUTE, PointerType.ATTRIBUTE),
    (PointerType.DERIVATION, PointerType.DERIVATION),
    (PointerType.CATEGORY, PointerType.CATEGORY_MEMBER),
    (PointerType.REGION, PointerType.REGION_MEMBER),
    (PointerType.USAGE, PointerType.USAGE_MEMBER),
    (PointerType.ALSO_SEE, PointerType.ALSO_SEE),
    (PointerType.VERB_GROUP, PointerType.VERB_GROUP),
    (PointerType.SIMILAR_TO, PointerType.SIMILAR_TO),
)


def symmetric_counterpart(pointer_type: Optional[PointerType]) -> PointerType:
    """Module-level form of ``PointerType.get_symmetric_type``. A missing type has no counterpart."""
    if pointer_type is None:
        raise NoSymmetricCounterpart(pointer_type)
    return pointer_type.get_symmetric_type()


@dataclass(eq=False)
class Synset:
    """Reference to a synset owned by the dictionary.

    Two synsets are the same entity when they share POS and offset.
    """
    offset: int
    pos: POS
    words: List[str] = field(default_factory=list)
    gloss: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.pos.value}:{self.offset:08d}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Synset):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        words = ", ".join(self.words)
        return f"[Synset: {self.key} [{words}]]"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "offset": self.offset,
            "pos": self.pos.value,
            "words": list(self.words),
            "gloss": self.gloss,
        }
