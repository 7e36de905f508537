"""Constraints shared by request schemas and route parameters."""

# Surrogate ids are stored in 32-bit INTEGER columns.
ID_MIN = 1
ID_MAX = 2_147_483_647
