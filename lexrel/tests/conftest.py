import pytest
import sys
from pathlib import Path
from typing import Dict

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from lexrel.types import POS, PointerType, Synset
from lexrel.data.pointer_target_nodes import PointerTargetNode, PointerTargetNodeList
from lexrel.relationship.relationship import AsymmetricRelationship


@pytest.fixture
def synsets() -> Dict[str, Synset]:
    """Noun synsets along the dog -> cat hypernym path."""
    return {
        "dog": Synset(offset=2084071, pos=POS.NOUN, words=["dog", "domestic dog"]),
        "canine": Synset(offset=2083346, pos=POS.NOUN, words=["canine", "canid"]),
        "carnivore": Synset(offset=2075296, pos=POS.NOUN, words=["carnivore"]),
        "feline": Synset(offset=2120997, pos=POS.NOUN, words=["feline", "felid"]),
        "cat": Synset(offset=2121620, pos=POS.NOUN, words=["cat", "true cat"]),
    }


@pytest.fixture
def dog_to_cat_nodes(synsets) -> PointerTargetNodeList:
    """dog -> canine -> carnivore -> feline -> cat, climbing up to carnivore then down."""
    return PointerTargetNodeList([
        PointerTargetNode(synsets["dog"], PointerType.HYPERNYM),
        PointerTargetNode(synsets["canine"], PointerType.HYPERNYM),
        PointerTargetNode(synsets["carnivore"], PointerType.HYPERNYM),
        PointerTargetNode(synsets["feline"], PointerType.HYPONYM),
        PointerTargetNode(synsets["cat"], PointerType.HYPONYM),
    ])


@pytest.fixture
def dog_to_cat(synsets, dog_to_cat_nodes) -> AsymmetricRelationship:
    """Hypernym relationship between dog and cat, diverging at carnivore."""
    return AsymmetricRelationship(
        PointerType.HYPERNYM, dog_to_cat_nodes, 2, synsets["dog"], synsets["cat"]
    )


@pytest.fixture
def make_nodes():
    """Build a node list over throwaway synsets, one per pointer type."""
    def _make_nodes(*pointer_types: PointerType) -> PointerTargetNodeList:
        return PointerTargetNodeList(
            PointerTargetNode(Synset(offset=1000 + i, pos=POS.NOUN, words=[f"word{i}"]), pointer_type)
            for i, pointer_type in enumerate(pointer_types)
        )
    return _make_nodes
