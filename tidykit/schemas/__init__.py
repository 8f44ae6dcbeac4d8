"""
Pydantic schemas for tidykit.

- common: Result types returned by try_catch()
"""
