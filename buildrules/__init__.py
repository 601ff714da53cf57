"""Module rules records and target-conditional build resolution."""
