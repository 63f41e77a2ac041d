from typing import List, Optional

from ..models.promotion import Promotion
from ..schemas.catalog import PromotionSchema
from .base import BaseRepository


class PromotionRepository(BaseRepository):
    model = Promotion
    schema = PromotionSchema

    def get_all_promotions(self) -> List[PromotionSchema]:
        return self._list()

    def get_promotion(self, promotion_id: int) -> Optional[PromotionSchema]:
        return self._get_by_id(promotion_id)

    def add_promotion(self, promotion: PromotionSchema) -> PromotionSchema:
        return self._add(promotion)

    def edit_promotion(self, promotion: PromotionSchema) -> bool:
        """Overwrites name, percent, amount and book of an existing promotion."""
        return self._overwrite(promotion)

    def delete_promotion(self, promotion: PromotionSchema) -> bool:
        return self._delete(promotion.id)
