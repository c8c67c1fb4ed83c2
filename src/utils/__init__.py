"""
Utility modules for review analytics.

Cross-cutting concerns:
- Storage: JSON persistence of analysis reports
"""
