"""
MCP tools for Mentortools orders.
"""

from ...library.api_client import MentortoolsClient
from ...library.orders import MentortoolsOrders
from ...schemas import IpnOrderPaymentInput
from ..mcp_registry import CREATE, ToolRegistry


def register_order_tools(registry: ToolRegistry, client: MentortoolsClient) -> None:
    orders = MentortoolsOrders(client)

    @registry.tool("mentortools_create_order", IpnOrderPaymentInput, title="Create Order (IPN Payment)", hints=CREATE)
    def mentortools_create_order(params) -> str:
        """
        Create a new order and grant course access to a buyer.

        This is used for integrating external payment systems with Mentortools.
        When an order is created, the buyer automatically gets access to the specified courses.

        Args:
          - marketplace_buyer (object, required):
            - email (string, required): Buyer's email
            - first_name, last_name (optional): Buyer's name
            - phone_number (optional): Phone number
            - address (optional): { street_and_number, city, postal_code, country }
          - course_ids (array, required): List of course IDs to unlock
          - id (string, optional): External order ID (will be prefixed with portal ID)
          - transaction (optional):
            - amount (number, required): Transaction amount
            - id (string, optional): External transaction ID

        Returns: External order ID and transaction ID
        """
        result = orders.create_ipn_payment(params.to_payload()) or {}
        return (
            "Order created successfully!\n\n"
            f"External Order ID: {result.get('external_order_id')}\n"
            f"External Transaction ID: {result.get('external_transaction_id')}"
        )
