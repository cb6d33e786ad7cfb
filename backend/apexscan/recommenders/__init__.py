"""Fix recommenders."""

from apexscan.recommenders.base import Recommender
from apexscan.recommenders.ggd_recommender import GGDRecommender
from apexscan.recommenders.soql_no_where_limit_recommender import SOQLNoWhereLimitRecommender
from apexscan.recommenders.soql_unused_fields_recommender import SOQLUnusedFieldsRecommender

__all__ = [
    "Recommender",
    "GGDRecommender",
    "SOQLNoWhereLimitRecommender",
    "SOQLUnusedFieldsRecommender",
]
