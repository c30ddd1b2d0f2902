"""Dance Journal test suite."""
