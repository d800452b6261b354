"""Core primitives: measurement buffer, predictors, algorithm registry.

The moving-average predictor picks the window length whose historical
one-step-ahead forecasts have the lowest mean-squared error.
"""
