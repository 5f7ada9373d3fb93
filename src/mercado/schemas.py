from pydantic import BaseModel, Field


# --- Input ---

class ProductRecord(BaseModel):
    title: str
    supermarket: str

    # Listings usually carry an id and prices; only title/supermarket are kept
    model_config = {"frozen": True, "extra": "ignore"}


# --- Output ---

class Category(BaseModel):
    category: str                 # representative title (first record seen)
    count: int = 0
    products: list[ProductRecord] = Field(default_factory=list)

    def add(self, record: ProductRecord) -> None:
        self.products.append(record)
        self.count += 1
