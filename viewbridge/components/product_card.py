"""Product card component."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from viewbridge.core.rendering.engine import TemplateComponent


class ProductCard(TemplateComponent):
    template = "product_card.html"

    class Props(BaseModel):
        title: str
        price: Optional[float] = Field(None, ge=0)
        currency: str = "USD"
        tags: List[str] = Field(default_factory=list)

    # Unknown currencies render with their code as prefix
    SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}

    def context(self, props: BaseModel) -> Dict[str, Any]:
        context = props.model_dump()
        code = context.pop("currency")
        context["currency_symbol"] = self.SYMBOLS.get(code, f"{code} ")
        return context
