"""Best profit from trading a single share over a series of daily prices."""

from collections.abc import Sequence
from itertools import pairwise


def max_profit(prices: Sequence[int]) -> int:
    """Largest profit from buying at local minima and selling at local maxima.

    Any number of buy/sell rounds is allowed, holding at most one share at a
    time. Fewer than two prices give no profit.
    """
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))