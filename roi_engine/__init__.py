"""Operations ROI engine: cost, savings and payback projections for automating manual work."""

__version__ = "0.1.0"
