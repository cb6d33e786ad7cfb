from apexscan.models import AntipatternType
from apexscan.recommenders.base import Recommender
from apexscan.recommenders.instructions import GGD_FIX_INSTRUCTION


class GGDRecommender(Recommender):
    antipattern_type = AntipatternType.GGD

    def fix_instruction(self) -> str:
        return GGD_FIX_INSTRUCTION
