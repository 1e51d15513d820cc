"""
Utility functions module.

Time Semantics:
- "Today" is always passed explicitly through the queries
- The system clock is read only at the boundary, when no date is supplied
- Dates travel as "DD.MM.YYYY" strings, the phone book's own format
"""
