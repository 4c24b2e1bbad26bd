"""Catalog of supported model variants.

The enum is the single place to add a variant; everything else (CLI choices,
default selection) derives from it.
"""

from enum import Enum


class DeepSeekModel(str, Enum):
    """Supported DeepSeek-R1 variants served by the local backend."""

    R1_1_5B = "deepseek-r1:1.5b"


DEEPSEEK_MODELS: tuple[str, ...] = tuple(model.value for model in DeepSeekModel)

DEFAULT_MODEL = DeepSeekModel.R1_1_5B.value


def is_supported_model(identifier: str) -> bool:
    """Check whether an identifier is in the catalog."""
    return identifier in DEEPSEEK_MODELS


def resolve_model(identifier: str | DeepSeekModel) -> str:
    """Normalize a catalog entry or raw identifier to its string form."""
    if isinstance(identifier, DeepSeekModel):
        return identifier.value
    return identifier
