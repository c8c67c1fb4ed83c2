"""
Pipeline stages for review analytics.

Contains the modules that process a dataset in order:
- Ingestion (CSV parser adapter)
- Cleaning (null filtering, type coercion, user restructuring)
- Sentiment labeling
- Aggregation (sentiment per app / language)
- Summary statistics
"""
