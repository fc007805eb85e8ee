"""
Shallow projections of related entities embedded in list and item responses.

Nesting never goes deeper than one level below the embedded entity.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class UserSummary(ApiModel):
    id: int
    name: str
    email: str


class StoreSummary(ApiModel):
    id: int
    name: str


class StoreWithOwner(StoreSummary):
    user: UserSummary


class ProductSummary(ApiModel):
    id: int
    name: str
    price: float
