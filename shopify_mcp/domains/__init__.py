"""
Tool Domains

Each domain module holds the Shopify operations and MCP tools for one
resource group. Adding or removing a group is a single-file change.

To add a new domain:
1. Create domains/newdomain.py with a NEWDOMAIN_TOOLS list
2. Import it here and append it to ALL_TOOLS

To remove a domain:
1. Delete domains/domainname.py
2. Remove its import and its entry in ALL_TOOLS
"""

from ..tools import ToolDefinition
from .collections import COLLECTION_TOOLS
from .customers import CUSTOMER_TOOLS
from .discounts import DISCOUNT_TOOLS
from .draft_orders import DRAFT_ORDER_TOOLS
from .fulfillments import FULFILLMENT_TOOLS
from .inventory import INVENTORY_TOOLS
from .metafields import METAFIELD_TOOLS
from .orders import ORDER_TOOLS
from .products import PRODUCT_TOOLS
from .shop import SHOP_TOOLS
from .themes import THEME_TOOLS
from .transactions import TRANSACTION_TOOLS
from .webhooks import WEBHOOK_TOOLS

# Registration order; tools/list returns tools in this order.
ALL_TOOLS: list[ToolDefinition] = [
    *SHOP_TOOLS,
    *PRODUCT_TOOLS,
    *COLLECTION_TOOLS,
    *ORDER_TOOLS,
    *CUSTOMER_TOOLS,
    *INVENTORY_TOOLS,
    *FULFILLMENT_TOOLS,
    *DRAFT_ORDER_TOOLS,
    *TRANSACTION_TOOLS,
    *DISCOUNT_TOOLS,
    *WEBHOOK_TOOLS,
    *THEME_TOOLS,
    *METAFIELD_TOOLS,
]

__all__ = [
    "ALL_TOOLS",
    "COLLECTION_TOOLS",
    "CUSTOMER_TOOLS",
    "DISCOUNT_TOOLS",
    "DRAFT_ORDER_TOOLS",
    "FULFILLMENT_TOOLS",
    "INVENTORY_TOOLS",
    "METAFIELD_TOOLS",
    "ORDER_TOOLS",
    "PRODUCT_TOOLS",
    "SHOP_TOOLS",
    "THEME_TOOLS",
    "TRANSACTION_TOOLS",
    "WEBHOOK_TOOLS",
]
