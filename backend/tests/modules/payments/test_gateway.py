"""Tests for the Stripe payment gateway."""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
import stripe

from modules.payments.gateway import StripePaymentGateway, to_minor_units
from modules.payments.exceptions import PaymentFailedError


class TestToMinorUnits:
    @pytest.mark.parametrize(
        "amount, expected",
        [(Decimal("5"), 500), (Decimal("5.25"), 525), (Decimal("0.01"), 1)],
    )
    def test_conversion(self, amount, expected):
        assert to_minor_units(amount) == expected


class TestStripePaymentGateway:
    @patch("modules.payments.gateway.stripe.PaymentIntent.create")
    def test_create_intent(self, mock_create):
        mock_create.return_value = MagicMock(client_secret="pi_123_secret_456")

        secret = StripePaymentGateway("sk_test_123").create_intent(Decimal("12.50"), "usd")

        assert secret == "pi_123_secret_456"
        kwargs = mock_create.call_args.kwargs
        assert kwargs["amount"] == 1250
        assert kwargs["currency"] == "usd"
        assert kwargs["api_key"] == "sk_test_123"

    @patch("modules.payments.gateway.stripe.PaymentIntent.create")
    def test_stripe_error(self, mock_create):
        mock_create.side_effect = stripe.StripeError("Your card was declined.")

        with pytest.raises(PaymentFailedError) as exc_info:
            StripePaymentGateway("sk_test_123").create_intent(Decimal("5"), "usd")

        assert exc_info.value.code == "PAYMENT_FAILED"
        assert exc_info.value.details["service"] == "stripe"

    @patch("modules.payments.gateway.stripe.PaymentIntent.create")
    def test_missing_key(self, mock_create):
        with pytest.raises(PaymentFailedError, match="not configured"):
            StripePaymentGateway("").create_intent(Decimal("5"), "usd")
        mock_create.assert_not_called()
