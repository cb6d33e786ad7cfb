from apexscan.models import AntipatternType
from apexscan.recommenders.base import Recommender
from apexscan.recommenders.instructions import SOQL_NO_WHERE_LIMIT_FIX_INSTRUCTION


class SOQLNoWhereLimitRecommender(Recommender):
    antipattern_type = AntipatternType.SOQL_NO_WHERE_LIMIT

    def fix_instruction(self) -> str:
        return SOQL_NO_WHERE_LIMIT_FIX_INSTRUCTION
