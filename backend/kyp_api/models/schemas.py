from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class GenderTarget(str, Enum):
    WIFE = "wife"
    HUSBAND = "husband"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["GenderTarget"]:
        """Exact match only: no trimming, no case folding. None for anything else."""
        for member in cls:
            if value == member.value:
                return member
        return None


# Rows come straight from Supabase; schema is owned by the database
Product = Dict[str, Any]
ProductList = List[Product]


class ErrorResponse(BaseModel):
    error: str
