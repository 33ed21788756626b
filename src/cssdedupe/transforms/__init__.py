from cssdedupe.transforms.base import Transform
from cssdedupe.transforms.dedupe import DuplicateEliminationTransform
from cssdedupe.transforms.prune import PruneEmptySelectorsTransform

__all__ = [
    "BUILTIN_TRANSFORMS",
    "DuplicateEliminationTransform",
    "PruneEmptySelectorsTransform",
    "Transform",
    "apply_transforms",
]

BUILTIN_TRANSFORMS = [
    DuplicateEliminationTransform(),
    PruneEmptySelectorsTransform(),
]


def apply_transforms(model, custom_transforms=None):
    """Apply all built-in transforms (and any custom ones) to *model* in place.

    Returns the combined list of removals.
    """
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    removed = []
    for t in transforms:
        removed.extend(t.apply(model))
    return removed
