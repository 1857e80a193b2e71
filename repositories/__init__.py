"""
repositories/ - Data Access Layer
==================================
One class per table. Each owns the SQL for its table, borrows a pooled
connection per call and maps rows to the dataclasses in `models/`.
"""
