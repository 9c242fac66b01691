"""Training Yard - scene action-graph resolver and master encounter gating"""

__version__ = "0.1.0"
