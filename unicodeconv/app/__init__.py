"""Application layer: settings, command line and self-test report."""
