from gametree.search.alphabeta import SearchStats, evaluate, evaluate_tree
from gametree.search.minimax import minimax

__all__ = ["SearchStats", "evaluate", "evaluate_tree", "minimax"]
