"""
Usage matching between the asset inventory and the project's references.

An asset counts as referenced when its name appears anywhere in the corpus as a
plain substring, or when the indirection source re-exports it. Substring
containment is intentionally naive: a mention inside a comment, a style sheet or
a template string counts as usage, and so does a longer name that happens to
contain the asset path.

Resolution variants are matched through their base name. `img/logo@2x.png` is
checked as `img/logo.png`, so a variant is only reported when the base name is
not referenced anywhere, even if the variant file name itself is mentioned.
Once a base name is known to be unused, its `@2x` and `@3x` siblings that are
present in the inventory are reported too unless their own file name is
referenced.
"""

from typing import AbstractSet, Sequence

from constants import EXTENSION_PATTERN, HIGH_RESOLUTION_SUFFIX_PATTERN
from core.indirection import is_exported
from models import ResolutionVariant


def normalize_asset_name(asset: str) -> str:
    """
    Strip the resolution suffix from an asset path.

    `img/logo@2x.png` and `img/logo@3x.png` both become `img/logo.png`. Only
    the first suffix occurrence is replaced.
    """
    return HIGH_RESOLUTION_SUFFIX_PATTERN.sub(".", asset, count=1)


def resolution_variants(base_name: str) -> list[str]:
    """
    Build the `@2x` and `@3x` sibling names of a base asset path.

    The suffix goes in front of the first dot of the path, which for a plain
    `dir/name.ext` path is right before the extension.
    """
    return [
        EXTENSION_PATTERN.sub(rf"{variant}.\1", base_name, count=1)
        for variant in ResolutionVariant
    ]


def is_referenced(name: str, corpus: str, exported: AbstractSet[str]) -> bool:
    return name in corpus or is_exported(name, exported)


def find_unused_assets(
    assets: Sequence[str], corpus: str, exported: AbstractSet[str]
) -> list[str]:
    """
    Determine which assets are never referenced.

    Args:
        assets: Asset paths relative to the assets root, in inventory order.
        corpus: Concatenated text of every project file.
        exported: Paths re-exported through the indirection source.

    Returns:
        Unused asset paths without duplicates. Assets whose base name is
        unreferenced come first in inventory order, followed by any propagated
        resolution variants that were not already included.
    """
    candidates = [
        asset
        for asset in assets
        if not is_referenced(normalize_asset_name(asset), corpus, exported)
    ]

    # dict keeps insertion order and collapses duplicates
    unused = dict.fromkeys(candidates)
    inventory = set(assets)

    for asset in candidates:
        for variant in resolution_variants(normalize_asset_name(asset)):
            if variant in inventory and not is_referenced(variant, corpus, exported):
                unused[variant] = None

    return list(unused)
