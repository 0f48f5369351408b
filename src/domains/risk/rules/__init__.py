"""Risk rules package.

One module per event kind, each exporting its rule list and a pure
``evaluate_*`` function that sums triggered points and clamps to [0, 100].
"""

from .base import MAX_SCORE, MIN_SCORE, RiskRule, clamp_score
from .invoice import (
    INVOICE_RULES,
    HighInvoiceAmountRule,
    InvoiceDeviationRule,
    InvoiceOverbillingRule,
    evaluate_invoice,
)
from .shipment import SHIPMENT_RULES, OverReceiptRule, QuantityDeviationRule, evaluate_shipment
from .transaction import (
    TRANSACTION_RULES,
    AdjustmentRule,
    HighAmountRule,
    LargeRefundRule,
    VeryHighAmountRule,
    evaluate_transaction,
)

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "RiskRule",
    "clamp_score",
    # Invoice
    "INVOICE_RULES",
    "InvoiceDeviationRule",
    "HighInvoiceAmountRule",
    "InvoiceOverbillingRule",
    "evaluate_invoice",
    # Shipment
    "SHIPMENT_RULES",
    "QuantityDeviationRule",
    "OverReceiptRule",
    "evaluate_shipment",
    # Transaction
    "TRANSACTION_RULES",
    "VeryHighAmountRule",
    "HighAmountRule",
    "LargeRefundRule",
    "AdjustmentRule",
    "evaluate_transaction",
]
