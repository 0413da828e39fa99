"""Token and cost metrics for a single piece of text."""

from typing import Callable

from .models import FileMetrics, PricingModel
from .pricing import estimate_cost


class MetricsResolver:
    """
    Turns text into a token count and input/output cost estimates.

    The token counter is any ``text -> int`` callable; the pricing models are
    chosen independently for the input and output side.
    """

    def __init__(self, count_tokens: Callable[[str], int],
                 input_model: PricingModel, output_model: PricingModel):
        self.count_tokens = count_tokens
        self.input_model = input_model
        self.output_model = output_model

    def resolve(self, text: str) -> FileMetrics:
        """Count tokens in text and price them under both models."""
        tokens = self.count_tokens(text)
        input_cost = estimate_cost(tokens, self.input_model.input_rate)

        output_cost = None
        if self.output_model.has_output_rate:
            output_cost = estimate_cost(tokens, self.output_model.output_rate)

        return FileMetrics(tokens=tokens, input_cost=input_cost, output_cost=output_cost)
