"""
Profit/loss estimation for a wallet's transaction history.

Pure domain logic, no I/O. The cost basis is approximated by assuming
holdings were acquired 20% below the current price; there is no per
transaction historical price lookup.
"""

import math
from typing import Sequence

from augure.domain.value_objects.profit_loss import ProfitLossResult
from augure.domain.value_objects.transaction import Transaction

# Assumed acquisition price as a fraction of the current price
AVERAGE_PRICE_RATIO = 0.8


def _finite(value: float) -> float:
    """Normalize NaN and infinities to 0."""
    return value if math.isfinite(value) else 0.0


def parse_amount(value: str | None) -> float:
    """
    Parse a native-unit decimal string.

    Unparseable or non-finite input counts as 0.
    """
    try:
        return _finite(float(value))
    except (TypeError, ValueError):
        return 0.0


def calculate_profit_loss(
    wallet_address: str,
    transactions: Sequence[Transaction],
    current_price: float,
) -> ProfitLossResult:
    """
    Calculate aggregate profit/loss metrics.

    A transaction is "sent" when its from address equals the wallet
    address ignoring case, otherwise it is "received".

    Args:
        wallet_address: Wallet being analysed
        transactions: Transactions touching the wallet
        current_price: Current USD price of the native unit

    Returns:
        ProfitLossResult with every field finite
    """
    if not transactions:
        return ProfitLossResult.zero()

    wallet = wallet_address.lower()
    total_sent = 0.0
    total_received = 0.0
    total_volume = 0.0

    for tx in transactions:
        value = parse_amount(tx.value)
        total_volume += abs(value)

        if tx.from_address.lower() == wallet:
            total_sent += value
        else:
            total_received += value

    balance = total_received - total_sent
    current_value = balance * current_price

    avg_price = current_price * AVERAGE_PRICE_RATIO
    cost_basis = _finite(balance * avg_price)

    unrealized_gains = _finite(current_value - cost_basis)
    realized_gains = _finite(total_sent * (current_price - avg_price))

    return ProfitLossResult(
        total_profit_loss=_finite(unrealized_gains + realized_gains),
        realized_gains=realized_gains,
        unrealized_gains=unrealized_gains,
        cost_basis=cost_basis,
        total_volume=_finite(total_volume),
        transaction_count=len(transactions),
    )
