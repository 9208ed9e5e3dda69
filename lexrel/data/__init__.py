from .pointer_target_nodes import PointerTargetNode, PointerTargetNodeList

__all__ = ["PointerTargetNode", "PointerTargetNodeList"]
