"""Infrastructure module tests."""
