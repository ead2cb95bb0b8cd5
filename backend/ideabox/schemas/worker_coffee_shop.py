from __future__ import annotations

import uuid

from pydantic import BaseModel

from ideabox.schemas.coffee_shop import CoffeeShopOut
from ideabox.schemas.user import UserOut


class AddWorkerRequest(BaseModel):
    worker_id: uuid.UUID
    coffee_shop_id: uuid.UUID


class WorkerCoffeeShopOut(BaseModel):
    id: uuid.UUID
    worker: UserOut
    coffee_shop: CoffeeShopOut

    class Config:
        from_attributes = True
