"""Customer roster operations for the signed-in account."""

from typing import Any, List, Mapping, Optional, Union

from db import SupabaseClient, get_db_client
from models.customer import Customer, CustomerCreate
from services.session import SessionContext
from utils.logging_config import setup_logging
from utils.validation import parse_form

logger = setup_logging(name=__name__, log_file="services.log")


def search_customers(customers: List[Customer], query: str) -> List[Customer]:
    """Case-insensitive match on name, substring match on phone."""
    q = (query or "").strip().lower()
    if not q:
        return list(customers)
    return [c for c in customers if q in (c.name or "").lower() or q in (c.phone or "")]


class CustomerService:
    def __init__(self, db: Optional[SupabaseClient] = None):
        self.db = db or get_db_client()

    async def add(
        self,
        context: SessionContext,
        form: Union[CustomerCreate, Mapping[str, Any]],
    ) -> str:
        """
        Add a customer. Name and phone are required.

        Raises:
            ValidationError: If name or phone is empty
        """
        user_id = context.require_user_id()
        customer = parse_form(CustomerCreate, form)
        customer_id = await self.db.add_customer(user_id, customer)
        logger.info(f"Added customer {customer_id} for user {user_id}")
        return customer_id

    async def list_customers(self, context: SessionContext, search: str = "") -> List[Customer]:
        customers = await self.db.get_customers(context.require_user_id())
        return search_customers(customers, search)

    async def get(self, context: SessionContext, customer_id: str) -> Customer:
        return await self.db.get_customer(context.require_user_id(), customer_id)
