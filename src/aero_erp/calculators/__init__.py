"""Unit-economics calculators over canonical products."""
