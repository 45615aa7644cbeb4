"""Recurring payment and credit-card bill resolution"""

import logging
from datetime import date
from typing import List, Tuple

from flowsight_gateway.domain.exceptions import InvalidYearMonthError
from flowsight_gateway.domain.lookups import ProjectionLookups
from flowsight_gateway.domain.models import (
    DETAIL_TYPE_CARD_PAYMENT,
    DETAIL_TYPE_RECURRING_PAYMENT,
    CashflowProjectionDetail,
    CreditCard,
    RecurringPayment,
)
from flowsight_gateway.utils.date_utils import months_between, previous_year_month

logger = logging.getLogger(__name__)


def should_apply_recurring_payment(payment: RecurringPayment, target_year_month: str) -> bool:
    """
    Decide whether a recurring payment is due in target_year_month.

    - Inactive payments never apply
    - Months before start_year_month never apply
    - total_payments of None or 0 means unbounded
    - Otherwise occurrence (1-based, counted from the start month) must be <= total_payments
    """
    if not payment.is_active:
        return False

    try:
        elapsed = months_between(payment.start_year_month, target_year_month)
    except InvalidYearMonthError as e:
        logger.warning(
            f"Skipping recurring payment with bad year-month: {e}",
            extra={"recurring_payment_id": str(payment.id)},
        )
        return False

    if elapsed < 0:
        return False

    if not payment.total_payments:
        return True

    occurrence = elapsed + 1
    return occurrence <= payment.total_payments


def card_billing_year_month(card: CreditCard, current_year_month: str) -> str:
    """
    Usage month settled by a payment made in current_year_month.

    Cards with a closing day always settle the previous calendar month, whatever the
    order of closing and payment day. Cards without one settle the current month.
    """
    if card.closing_day is not None:
        return previous_year_month(current_year_month)
    return current_year_month


def resolve_recurring_payments(
    payments: List[RecurringPayment],
    current_date: date,
    year_month: str,
) -> Tuple[int, List[CashflowProjectionDetail]]:
    """Total recurring expense due on current_date with one detail per payment"""
    total = 0
    details: List[CashflowProjectionDetail] = []

    for payment in payments:
        if payment.payment_day != current_date.day:
            continue
        if not should_apply_recurring_payment(payment, year_month):
            continue

        total += payment.amount
        details.append(
            CashflowProjectionDetail(
                type=DETAIL_TYPE_RECURRING_PAYMENT,
                description=f"固定支出: {payment.name}",
                amount=payment.amount,
            )
        )

    return total, details


def resolve_card_payments(
    cards: List[CreditCard],
    current_date: date,
    year_month: str,
    lookups: ProjectionLookups,
) -> Tuple[int, List[CashflowProjectionDetail]]:
    """Total card bills due on current_date; missing or zero totals contribute nothing"""
    total = 0
    details: List[CashflowProjectionDetail] = []

    for card in cards:
        if card.payment_day != current_date.day:
            continue

        amount = lookups.card_total(card.id, card_billing_year_month(card, year_month))
        if not amount or amount <= 0:
            continue

        total += amount
        details.append(
            CashflowProjectionDetail(
                type=DETAIL_TYPE_CARD_PAYMENT,
                description=f"カード支払い: {card.name}",
                amount=amount,
            )
        )

    return total, details
