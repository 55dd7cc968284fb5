"""
Mentortools Orders API wrapper.
"""

from typing import Any, Dict

from .api_client import MentortoolsClient


class MentortoolsOrders:
    """
    Order intake for external payment systems.
    """

    def __init__(self, client: MentortoolsClient):
        self.client = client

    def create_ipn_payment(self, order_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register an externally paid order; the buyer is granted access to the
        listed courses.

        API (IPN Payment) details:
        - Method: POST
        - Endpoint: /orders/v1/ipn/payment

        Body format:
        {
            "marketplace_buyer": {
                "email": "buyer@example.com",
                "first_name": "Ada",
                "address": {"city": "Berlin", "country": "DE"}
            },
            "course_ids": [12, 15],
            "id": "order-1001",
            "transaction": {"amount": 49.0, "id": "txn-1001"}
        }

        Returns:
            dict: {"external_order_id": str, "external_transaction_id": str}
        """
        return self.client.execute("/orders/v1/ipn/payment", "POST", body=order_data)
