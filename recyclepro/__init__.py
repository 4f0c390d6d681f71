"""Recycle Pro: collection-zone matching and disposal rule resolution."""
