"""Shared test setup."""

import matplotlib

# Off-screen rendering for all tests
matplotlib.use("Agg")
