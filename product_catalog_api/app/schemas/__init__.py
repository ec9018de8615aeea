"""
Pydantic schema definitions for catalog records.

Schemas validate the dataset at load time; they are not used to
reshape responses, which return records verbatim.
"""
