from pydantic import BaseModel
from typing import List, Optional, Union


class Product(BaseModel):
    id: Union[int, str]
    gql_id: str
    title: str
    description: Optional[str]
    price: str
    image: str
    quantity: int
    handle: str
    tags: Union[str, List[str]]


class Collection(BaseModel):
    id: Union[int, str]
    title: str
    handle: str
