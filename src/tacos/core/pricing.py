"""Pricing and context window table for supported models."""

from typing import Dict, List, Optional

from .models import PricingModel


MODELS: List[PricingModel] = [
    PricingModel('gpt-4-32k', 60.00, 120.00, 32000),
    PricingModel('o1', 15.00, 60.00, 200000),
    PricingModel('gpt-4', 30.00, 60.00, 8000),
    PricingModel('gpt-4 turbo', 10.00, 30.00, 128000),
    PricingModel('gpt-4o', 2.50, 10.00, 128000),
    PricingModel('o3', 6.00, 12.00, 200000),
    PricingModel('o3-mini', 0.15, 0.60, 128000),
    PricingModel('o1 mini', 0.60, 2.40, 128000),
    PricingModel('gpt-3.5 turbo', 0.50, 1.50, 16000),
    PricingModel('gpt-4o mini', 0.15, 0.60, 128000),
    # Embedding models only charge for input
    PricingModel('text-embedding-3-small', 0.02),
    PricingModel('text-embedding-3-large', 0.13),
    PricingModel('ada v2', 0.10),
]

MODEL_ALIASES: Dict[str, str] = {
    'gpt-4-turbo': 'gpt-4 turbo',
    '3-large': 'gpt-3.5 turbo',
    '3-small': 'gpt-4o mini',
}

TOKENS_PER_RATE_UNIT = 1_000_000


def resolve_model_name(name: Optional[str]) -> Optional[str]:
    """Lowercase a model name and expand known aliases."""
    if not name:
        return None
    lower = name.lower()
    return MODEL_ALIASES.get(lower, lower)


def get_model_info(name: Optional[str]) -> Optional[PricingModel]:
    """
    Look up a model by name or alias, ignoring case.

    Returns:
        The matching PricingModel, or None if the name is unknown.
    """
    resolved = resolve_model_name(name)
    if resolved is None:
        return None
    for model in MODELS:
        if model.name.lower() == resolved:
            return model
    return None


def estimate_cost(token_count: int, rate_per_million: float) -> float:
    """Estimate the cost of a token count at a per-million-token rate."""
    return (token_count / TOKENS_PER_RATE_UNIT) * rate_per_million


def get_cost_table() -> List[PricingModel]:
    """Return every supported model in display order."""
    return list(MODELS)
