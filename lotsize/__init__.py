"""Futures lot size calculator: sizing engine + terminal UI."""
