from functools import lru_cache
from typing import List, Optional
import logging

from supabase import Client, create_client

from kyp_api.core.config import settings
from kyp_api.models.schemas import GenderTarget, Product

logger = logging.getLogger(__name__)

# Column the product listing is filtered on
GENDER_TARGET_FIELD = "gender_target"


class ProductQueryError(Exception):
    """Raised when the Supabase read fails; message carries the backend detail."""


class ProductsDBService:
    def __init__(self, client: Optional[Client] = None, table_name: Optional[str] = None):
        self.table_name = table_name or settings.PRODUCTS_TABLE
        if client is None:
            logger.info(f"Connecting to Supabase at: {settings.SUPABASE_URL}")
            client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        self.client = client

    def fetch_by_gender_target(self, gender_target: GenderTarget) -> List[Product]:
        """Select all columns of the products table where gender_target equals the given value."""
        value = GenderTarget(gender_target).value
        logger.info("products_db.fetch: table=%s, %s=%s", self.table_name, GENDER_TARGET_FIELD, value)
        try:
            response = (
                self.client.table(self.table_name)
                .select("*")
                .eq(GENDER_TARGET_FIELD, value)
                .execute()
            )
        except Exception as e:
            raise ProductQueryError(getattr(e, "message", None) or str(e)) from e
        rows = response.data or []
        logger.info("products_db.fetch: returned %d rows.", len(rows))
        return rows


@lru_cache()
def get_products_db() -> ProductsDBService:
    """Process-wide Supabase handle, created on first use and reused for every request."""
    return ProductsDBService()
