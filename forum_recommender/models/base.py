"""
Record coercion shared by the model modules.

Collaborators return plain dicts; ensure_models validates them into models and
skips records that fail validation, logging one warning per batch.
"""

import logging
from typing import Any, Dict, List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def ensure_models(model: Type[M], items: List[Union[Dict[str, Any], M]], label: str) -> List[M]:
    """Validate dicts into model; model instances pass through, invalid records are skipped."""
    out: List[M] = []
    skipped = 0
    for item in items or []:
        if isinstance(item, model):
            out.append(item)
            continue
        try:
            out.append(model.model_validate(item))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.warning("[models] %s_RECORDS_SKIPPED skipped=%s total=%s", label, skipped, len(items))
    return out
